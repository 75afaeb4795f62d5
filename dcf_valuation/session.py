'''
Caller-side state for an interactive valuation form.

The engine is a pure function. ValuationSession owns everything that
changes between user actions: the current inputs, the last result and the
last validation error. Transitions:

  edit            -> EDITING   (prior result and error are discarded)
  compute, valid  -> COMPUTED
  compute, error  -> INVALID
  reset           -> EDITING   (blank inputs)

Usage:
  session = ValuationSession()
  session.edit('wacc', '11.5')
  result = session.compute()
'''

import enum
import logging
import math
from typing import Any, Optional, Union

from dcf_valuation.domain.errors import ValidationError
from dcf_valuation.domain.types import NUMERIC_FIELDS
from dcf_valuation.domain.types import ValuationInput
from dcf_valuation.domain.types import ValuationResult
from dcf_valuation.domain.types import resolve_field
from dcf_valuation.engine.dcf import compute
from dcf_valuation.scenarios.config import ScenarioConfig

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
  EDITING = 'editing'
  COMPUTED = 'computed'
  INVALID = 'invalid'


def parse_number(raw: Union[str, float, int, None]) -> Optional[float]:
  '''
  Parse one numeric form entry.

  Empty entry counts as zero. Text that is not a number returns None so the
  caller can keep the previous value.

  Args:
    raw: Text typed by the user, or an already-numeric value

  Returns:
    Parsed float, or None if the entry is not a number
  '''
  if raw is None:
    return 0.0
  if isinstance(raw, (int, float)):
    return float(raw)
  text = raw.strip()
  if not text:
    return 0.0
  try:
    value = float(text)
  except ValueError:
    return None
  if math.isnan(value):
    return None
  return value


class ValuationSession:
  '''
  Input, result and error state for one valuation form.

  Attributes:
    inputs: Current valuation inputs
    result: Last successful result, None unless state is COMPUTED
    error: Last validation error, None unless state is INVALID
    state: Current SessionState
  '''

  def __init__(self, inputs: Optional[ValuationInput] = None):
    self.inputs = inputs or ScenarioConfig.default().to_input()
    self.result: Optional[ValuationResult] = None
    self.error: Optional[ValidationError] = None
    self.state = SessionState.EDITING

  @property
  def error_message(self) -> Optional[str]:
    '''Validation message to show verbatim, if any.'''
    return str(self.error) if self.error else None

  def edit(self, field_name: str, value: Any) -> bool:
    '''
    Change one input field and discard any prior result.

    A rejected numeric entry leaves inputs, result and state untouched.

    Args:
      field_name: Attribute name ('current_fcf') or record key ('currentFCF')
      value: New value; numeric fields accept raw text

    Returns:
      True if the field changed, False if a numeric entry was rejected

    Raises:
      KeyError: If the field name is unknown
    '''
    attr = resolve_field(field_name)

    if attr in NUMERIC_FIELDS:
      value = parse_number(value)
      if value is None:
        logger.debug('Ignoring non-numeric entry for %s', attr)
        return False
      if attr == 'projection_years':
        if not math.isfinite(value):
          logger.debug('Ignoring non-finite projection years')
          return False
        value = int(value)
    else:
      value = '' if value is None else str(value)

    self.inputs = self.inputs.replace(**{attr: value})
    self.result = None
    self.error = None
    self.state = SessionState.EDITING
    return True

  def compute(self) -> Optional[ValuationResult]:
    '''
    Run the engine on the current inputs.

    Returns:
      The result, or None if the inputs failed validation
    '''
    try:
      self.result = compute(self.inputs)
    except ValidationError as e:
      logger.info('Validation failed: %s', e)
      self.result = None
      self.error = e
      self.state = SessionState.INVALID
      return None

    self.error = None
    self.state = SessionState.COMPUTED
    return self.result

  def reset(self) -> None:
    '''Restore blank inputs and clear result and error.'''
    self.inputs = ScenarioConfig.blank().to_input()
    self.result = None
    self.error = None
    self.state = SessionState.EDITING
