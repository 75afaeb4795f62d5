"""
Validation errors raised by the valuation engine.

Both errors are raised before any computation starts, so a caller never
receives a partial result alongside an error.
"""


class ValidationError(ValueError):
  """Base class for inputs the DCF model cannot value."""


class InvalidRateError(ValidationError):
  """WACC is not strictly greater than the terminal growth rate."""

  def __init__(self, message: str = 'WACC must exceed terminal growth rate'):
    super().__init__(message)


class InvalidSharesError(ValidationError):
  """Shares outstanding is zero or negative."""

  def __init__(self, message: str = 'shares outstanding must be positive'):
    super().__init__(message)
