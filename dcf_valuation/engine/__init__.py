'''DCF calculation engine with pure math functions.'''

from dcf_valuation.engine.dcf import (
    compute,
    compute_terminal_value,
    discount,
    percent_to_fraction,
    project_cash_flows,
    validate,
)

__all__ = [
    'compute',
    'compute_terminal_value',
    'discount',
    'percent_to_fraction',
    'project_cash_flows',
    'validate',
]
