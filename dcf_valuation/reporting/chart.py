'''
Cash flow chart for a computed valuation.

Draws projected FCF next to its present value for every forecast year, so
the effect of discounting is visible year by year.

Usage:
  from dcf_valuation.reporting.chart import plot_cash_flows

  plot_cash_flows(result, Path('charts/example.png'), 'Example Ltd.')
'''

import logging
from pathlib import Path

import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter

from dcf_valuation.domain.types import ValuationResult
from dcf_valuation.reporting.formatting import format_axis_tick
from dcf_valuation.reporting.formatting import format_crore

logger = logging.getLogger(__name__)

FCF_COLOR = '#4f46e5'
PV_COLOR = '#14b8a6'
BAR_WIDTH = 0.4


def plot_cash_flows(
    result: ValuationResult,
    output_path: Path,
    company_name: str = '',
) -> Path:
  '''
  Save a grouped bar chart of projected FCF and present value per year.

  Args:
    result: Computed valuation with at least one forecast year
    output_path: PNG file to write; parent directories are created
    company_name: Optional label for the chart title

  Returns:
    The path written

  Raises:
    ValueError: If the result has no projected cash flows
  '''
  frame = result.to_frame()
  if frame.empty:
    raise ValueError('No projected cash flows to plot')

  positions = frame['year'].astype(float)

  fig, ax = plt.subplots(figsize=(10, 6))
  ax.bar(positions - BAR_WIDTH / 2,
         frame['projected_fcf'],
         width=BAR_WIDTH,
         color=FCF_COLOR,
         label='Projected FCF')
  ax.bar(positions + BAR_WIDTH / 2,
         frame['present_value'],
         width=BAR_WIDTH,
         color=PV_COLOR,
         label='Present Value of FCF')

  ax.set_xticks(list(positions))
  ax.set_xticklabels([f'Year {year}' for year in frame['year']])
  ax.yaxis.set_major_formatter(
      FuncFormatter(lambda value, _: format_axis_tick(value)))

  name = company_name or result.inputs.company_name
  title = 'Discounted Cash Flow Analysis'
  if name:
    title = f'{name} - {title}'
  ax.set_title(title, fontsize=14, fontweight='bold', pad=20)
  ax.legend(loc='best', fontsize=11, framealpha=0.9)
  ax.grid(True, axis='y', alpha=0.3, linestyle='--')

  ax.text(0.02,
          0.98,
          f'Sum of PV of FCFs: {format_crore(result.sum_pv_cash_flows)}',
          transform=ax.transAxes,
          verticalalignment='top',
          fontsize=10,
          bbox=dict(boxstyle='round', facecolor='lightblue', alpha=0.8))

  fig.tight_layout()

  output_path.parent.mkdir(parents=True, exist_ok=True)
  fig.savefig(output_path, dpi=150, bbox_inches='tight')
  logger.info('Saved: %s', output_path)

  plt.close(fig)
  return output_path
