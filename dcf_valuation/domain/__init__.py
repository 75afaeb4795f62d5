"""Domain types for the DCF calculator."""

from dcf_valuation.domain.errors import InvalidRateError
from dcf_valuation.domain.errors import InvalidSharesError
from dcf_valuation.domain.errors import ValidationError
from dcf_valuation.domain.types import ProjectedCashFlow
from dcf_valuation.domain.types import ValuationInput
from dcf_valuation.domain.types import ValuationResult

__all__ = [
    'ValuationInput',
    'ProjectedCashFlow',
    'ValuationResult',
    'ValidationError',
    'InvalidRateError',
    'InvalidSharesError',
]
