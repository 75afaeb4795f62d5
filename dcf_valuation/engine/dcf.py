"""
Pure DCF math engine.

This module contains pure functions for a single-stage DCF with a Gordon
growth terminal value. No I/O, no logging, no shared state.

Unit contract: ValuationInput carries growth_rate, wacc and
terminal_growth_rate as percents. compute() divides them by 100 once at the
boundary; every helper below works on fractions.

Key functions:
  compute: Main entry point, ValuationInput -> ValuationResult
  project_cash_flows: Explicit forecast window, year by year
  compute_terminal_value: Gordon growth terminal value (undiscounted)
"""

import math
from typing import Tuple

from dcf_valuation.domain.errors import InvalidRateError
from dcf_valuation.domain.errors import InvalidSharesError
from dcf_valuation.domain.types import ProjectedCashFlow
from dcf_valuation.domain.types import ValuationInput
from dcf_valuation.domain.types import ValuationResult


def _growth_factor(rate: float, years: int) -> float:
  """(1 + rate)**years, saturating to infinity instead of raising."""
  base = 1 + rate
  try:
    return base**years
  except OverflowError:
    if base < 0 and years % 2:
      return -math.inf
    return math.inf
  except ZeroDivisionError:
    # 0.0 raised to a negative number of years
    return math.inf


def _divide(numerator: float, denominator: float) -> float:
  """IEEE-style division: x/0 gives a signed infinity, 0/0 gives NaN."""
  try:
    return numerator / denominator
  except ZeroDivisionError:
    if numerator == 0 or math.isnan(numerator):
      return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def percent_to_fraction(value: float) -> float:
  """Convert a percent (12.0) to a fraction (0.12)."""
  return value / 100


def discount(value: float, discount_rate: float, years: int) -> float:
  """Discount a value received `years` from now back to today."""
  return _divide(value, _growth_factor(discount_rate, years))


def project_cash_flows(
    current_fcf: float,
    growth_rate: float,
    discount_rate: float,
    n_years: int,
) -> Tuple[ProjectedCashFlow, ...]:
  """
  Project and discount free cash flow over the explicit window.

  Args:
    current_fcf: Baseline free cash flow (year 0)
    growth_rate: Annual growth rate as a fraction
    discount_rate: Discount rate as a fraction
    n_years: Number of forecast years; 0 or less yields an empty tuple

  Returns:
    Tuple of ProjectedCashFlow for years 1..n_years
  """
  flows = []
  for year in range(1, n_years + 1):
    projected_fcf = current_fcf * _growth_factor(growth_rate, year)
    present_value = discount(projected_fcf, discount_rate, year)
    flows.append(ProjectedCashFlow(year, projected_fcf, present_value))
  return tuple(flows)


def compute_terminal_value(
    last_fcf: float,
    g_terminal: float,
    discount_rate: float,
) -> float:
  """
  Compute terminal value using the Gordon Growth Model.

  TV = last_fcf * (1 + g) / (r - g)

  Args:
    last_fcf: Free cash flow in the final explicit year
    g_terminal: Perpetual growth rate as a fraction
    discount_rate: Discount rate as a fraction, must exceed g_terminal

  Returns:
    Undiscounted terminal value at the end of the explicit window
  """
  return _divide(last_fcf * (1 + g_terminal), discount_rate - g_terminal)


def validate(inputs: ValuationInput) -> None:
  """
  Check the two model preconditions, rate first.

  Raises:
    InvalidRateError: wacc <= terminal_growth_rate
    InvalidSharesError: shares_outstanding <= 0
  """
  if inputs.wacc <= inputs.terminal_growth_rate:
    raise InvalidRateError()
  if inputs.shares_outstanding <= 0:
    raise InvalidSharesError()


def compute(inputs: ValuationInput) -> ValuationResult:
  """
  Compute enterprise, equity and per-share value for one set of inputs.

  Only the rate ordering and the share count are validated. Negative cash
  flows, negative growth and zero projection years are valued as given;
  overflow or NaN from extreme inputs is returned, not raised.

  Args:
    inputs: Valuation assumptions, rates in percent

  Returns:
    ValuationResult with the per-year forecast and derived values

  Raises:
    InvalidRateError: wacc <= terminal_growth_rate
    InvalidSharesError: shares_outstanding <= 0
  """
  validate(inputs)

  growth = percent_to_fraction(inputs.growth_rate)
  wacc = percent_to_fraction(inputs.wacc)
  g_terminal = percent_to_fraction(inputs.terminal_growth_rate)
  n_years = inputs.projection_years

  flows = project_cash_flows(inputs.current_fcf, growth, wacc, n_years)

  sum_pv = 0.0
  for flow in flows:
    sum_pv += flow.present_value

  last_fcf = inputs.current_fcf * _growth_factor(growth, n_years)
  terminal_value = compute_terminal_value(last_fcf, g_terminal, wacc)
  pv_terminal = discount(terminal_value, wacc, n_years)

  enterprise_value = sum_pv + pv_terminal
  equity_value = enterprise_value - inputs.debt + inputs.cash

  return ValuationResult(
      projected_cash_flows=flows,
      sum_pv_cash_flows=sum_pv,
      terminal_value=terminal_value,
      pv_terminal_value=pv_terminal,
      enterprise_value=enterprise_value,
      equity_value=equity_value,
      intrinsic_value_per_share=equity_value / inputs.shares_outstanding,
      inputs=inputs,
  )
