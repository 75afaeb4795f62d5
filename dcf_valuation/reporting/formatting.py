"""
Display formatting for valuation results.

Amounts are shown in Indian rupees with Indian digit grouping
(1,23,45,678.90): the last three integer digits form one group and the rest
are grouped in pairs. Values are assumed to be in crores already; nothing
here converts units.
"""

import math
from typing import List

from dcf_valuation.domain.types import ValuationResult

RUPEE = '₹'


def _group_indian(digits: str) -> str:
  """Insert Indian-style separators into a string of integer digits."""
  if len(digits) <= 3:
    return digits
  head, tail = digits[:-3], digits[-3:]
  groups = []
  while len(head) > 2:
    groups.insert(0, head[-2:])
    head = head[:-2]
  if head:
    groups.insert(0, head)
  return ','.join(groups + [tail])


def format_inr(value: float) -> str:
  """
  Format an amount as rupees with two decimals.

  Examples:
    1026.7857 -> '₹1,026.79'
    -12345678 -> '-₹1,23,45,678.00'
  """
  if math.isnan(value):
    return f'{RUPEE}NaN'
  if math.isinf(value):
    return f'-{RUPEE}∞' if value < 0 else f'{RUPEE}∞'

  sign = '-' if value < 0 else ''
  whole, frac = f'{abs(value):.2f}'.split('.')
  return f'{sign}{RUPEE}{_group_indian(whole)}.{frac}'


def format_crore(value: float) -> str:
  """Rupee amount with a crore suffix."""
  return f'{format_inr(value)} Cr'


def format_axis_tick(value: float) -> str:
  """Compact label for chart axes: thousands as 'k'."""
  if value >= 1000:
    return f'{RUPEE}{value / 1000:.1f}k'
  return f'{RUPEE}{value:.0f}'


def summarize(result: ValuationResult, company_name: str = '') -> List[str]:
  """
  Build the headline lines shown for a computed valuation.

  Args:
    result: Computed valuation
    company_name: Label for the title line; falls back to result.inputs

  Returns:
    List of display lines, title first
  """
  name = company_name or result.inputs.company_name
  title = f'Valuation for {name}' if name else 'Valuation'
  return [
      title,
      'All values are in Crores (₹)',
      f'Intrinsic Value Per Share: {format_inr(result.intrinsic_value_per_share)}',
      f'Total Equity Value: {format_inr(result.equity_value)}',
      f'Enterprise Value: {format_inr(result.enterprise_value)}',
      f'PV of Terminal Value: {format_inr(result.pv_terminal_value)}',
      f'Sum of PV of FCFs: {format_crore(result.sum_pv_cash_flows)}',
  ]
