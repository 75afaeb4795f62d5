'''
Discounted cash flow calculator.

This package values a company from its current free cash flow with a
single-stage DCF: explicit year-by-year growth and discounting, then a
Gordon growth terminal value. The engine is a pure function; presets,
the interactive session, formatting and charts are built around it.

Usage:
  from dcf_valuation.engine import compute
  from dcf_valuation.scenarios.config import ScenarioConfig

  result = compute(ScenarioConfig.default().to_input())
  print(result.intrinsic_value_per_share)
'''
