'''
Presentation helpers for computed valuations.

Note: the chart module imports matplotlib; import it directly when needed:
  from dcf_valuation.reporting.chart import plot_cash_flows
'''

from dcf_valuation.reporting.formatting import format_axis_tick
from dcf_valuation.reporting.formatting import format_crore
from dcf_valuation.reporting.formatting import format_inr
from dcf_valuation.reporting.formatting import summarize

__all__ = [
    'format_axis_tick',
    'format_crore',
    'format_inr',
    'summarize',
]
