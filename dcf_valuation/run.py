'''
Single-company valuation entrypoint.

This module provides the main entry point for running valuations. It:
1. Builds inputs from a scenario preset or JSON file plus CLI overrides
2. Runs the DCF engine
3. Logs the headline values, optionally emitting JSON and a chart

Usage:
  from dcf_valuation.run import run_valuation
  from dcf_valuation.scenarios.config import ScenarioConfig

  result = run_valuation(ScenarioConfig.default().to_input())
  print(f"IV: {result.intrinsic_value_per_share:.2f}")

CLI:
  python -m dcf_valuation.run --scenario default --wacc 11 --json
'''

import argparse
import json
import logging
from pathlib import Path
import sys
from typing import List, Optional

from dcf_valuation.domain.errors import ValidationError
from dcf_valuation.domain.types import ValuationInput
from dcf_valuation.domain.types import ValuationResult
from dcf_valuation.engine.dcf import compute
from dcf_valuation.reporting.formatting import format_inr
from dcf_valuation.reporting.formatting import summarize
from dcf_valuation.scenarios.config import PRESETS
from dcf_valuation.scenarios.config import ScenarioConfig
from dcf_valuation.scenarios.config import get_preset

logger = logging.getLogger(__name__)

# CLI flag destination -> ScenarioConfig field
OVERRIDE_FIELDS = (
    'company_name',
    'current_fcf',
    'growth_rate',
    'projection_years',
    'wacc',
    'terminal_growth_rate',
    'debt',
    'cash',
    'shares_outstanding',
)


def run_valuation(inputs: ValuationInput) -> ValuationResult:
  '''
  Run the DCF engine for one set of inputs.

  Args:
    inputs: Valuation assumptions, rates in percent

  Returns:
    ValuationResult with the per-year forecast and derived values

  Raises:
    ValidationError: If WACC does not exceed terminal growth or shares <= 0
  '''
  logger.debug('Valuing %s: FCF=%s g=%s%% n=%s r=%s%% gT=%s%%',
               inputs.company_name or '<unnamed>', inputs.current_fcf,
               inputs.growth_rate, inputs.projection_years, inputs.wacc,
               inputs.terminal_growth_rate)
  result = compute(inputs)
  logger.debug('Enterprise value %s, per share %s', result.enterprise_value,
               result.intrinsic_value_per_share)
  return result


def build_config(args: argparse.Namespace) -> ScenarioConfig:
  '''Resolve the scenario from --config or --scenario, then apply overrides.'''
  if args.config is not None:
    config = ScenarioConfig.from_file(args.config)
  else:
    config = get_preset(args.scenario)

  for name in OVERRIDE_FIELDS:
    value = getattr(args, name)
    if value is not None:
      setattr(config, name, value)
  return config


def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(
      description='Run DCF valuation',
      formatter_class=argparse.RawDescriptionHelpFormatter,
      epilog="""
Examples:
  # Bundled example company
  python -m dcf_valuation.run --scenario default

  # Saved scenario with a different discount rate
  python -m dcf_valuation.run --config my_company.json --wacc 11

  # Machine-readable output and a cash flow chart
  python -m dcf_valuation.run --json --chart charts/example.png
      """)
  parser.add_argument('--scenario',
                      type=str,
                      default='default',
                      choices=sorted(PRESETS),
                      help='Scenario preset')
  parser.add_argument('--config',
                      type=Path,
                      default=None,
                      help='Scenario JSON file (overrides --scenario)')
  parser.add_argument('--company-name', type=str, help='Company name')
  parser.add_argument('--current-fcf',
                      type=float,
                      help='Current year free cash flow (Cr)')
  parser.add_argument('--growth-rate',
                      type=float,
                      help='FCF growth rate (%%)')
  parser.add_argument('--projection-years',
                      type=int,
                      help='Projection period (years)')
  parser.add_argument('--wacc', type=float, help='WACC (%%)')
  parser.add_argument('--terminal-growth-rate',
                      type=float,
                      help='Perpetual growth rate (%%)')
  parser.add_argument('--debt', type=float, help='Total debt (Cr)')
  parser.add_argument('--cash', type=float, help='Cash & equivalents (Cr)')
  parser.add_argument('--shares-outstanding',
                      type=float,
                      help='Shares outstanding (Cr)')
  parser.add_argument('--json',
                      action='store_true',
                      help='Print the result as JSON on stdout')
  parser.add_argument('--chart',
                      type=Path,
                      default=None,
                      help='Save a cash flow bar chart to this PNG path')
  return parser


def main(argv: Optional[List[str]] = None) -> int:
  '''CLI entrypoint. Returns the process exit status.'''
  args = build_parser().parse_args(argv)
  config = build_config(args)
  inputs = config.to_input()

  try:
    result = run_valuation(inputs)
  except ValidationError as e:
    logger.error('Error: %s', e)
    return 1

  separator = '=' * 70
  logger.info(separator)
  logger.info('DCF Valuation - %s', inputs.company_name or '<unnamed>')
  logger.info('Scenario: %s', config.name)
  logger.info(separator)

  logger.info('Projected Cash Flows:')
  for flow in result.projected_cash_flows:
    logger.info('  Year %d: FCF %s, PV %s', flow.year,
                format_inr(flow.projected_fcf), format_inr(flow.present_value))

  logger.info('')
  for line in summarize(result, inputs.company_name):
    logger.info('  %s', line)
  logger.info(separator)

  if args.json:
    print(json.dumps(result.to_dict(), indent=2))

  if args.chart is not None:
    from dcf_valuation.reporting.chart import plot_cash_flows
    if result.projected_cash_flows:
      plot_cash_flows(result, args.chart, inputs.company_name)
    else:
      logger.warning('No projected cash flows, skipping chart')

  return 0


def cli() -> None:
  '''Console script entrypoint.'''
  logging.basicConfig(
      level=logging.INFO,
      format='%(message)s',
  )
  sys.exit(main())


if __name__ == '__main__':
  cli()
