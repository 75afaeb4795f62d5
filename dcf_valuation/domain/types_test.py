import dataclasses

import pandas as pd
import pytest

from dcf_valuation.domain.types import ProjectedCashFlow
from dcf_valuation.domain.types import ValuationInput
from dcf_valuation.domain.types import ValuationResult
from dcf_valuation.domain.types import resolve_field


def _make_result(flows) -> ValuationResult:
  """Helper to build a result with fixed aggregate values."""
  return ValuationResult(
      projected_cash_flows=tuple(flows),
      sum_pv_cash_flows=190.0,
      terminal_value=1000.0,
      pv_terminal_value=800.0,
      enterprise_value=990.0,
      equity_value=900.0,
      intrinsic_value_per_share=9.0,
  )


class TestValuationInput:
  """Tests for ValuationInput dataclass."""

  def test_to_dict_uses_record_keys(self, example_input):
    record = example_input.to_dict()

    assert record == {
        'companyName': 'Example Ltd.',
        'currentFCF': 1000.0,
        'growthRate': 15.0,
        'projectionYears': 5,
        'wacc': 12.0,
        'terminalGrowthRate': 5.0,
        'debt': 5000.0,
        'cash': 2000.0,
        'sharesOutstanding': 100.0,
    }

  def test_from_dict_round_trip(self, example_input):
    assert ValuationInput.from_dict(example_input.to_dict()) == example_input

  def test_from_dict_accepts_attribute_names(self):
    inputs = ValuationInput.from_dict({'current_fcf': 50.0, 'wacc': 9.0})

    assert inputs.current_fcf == 50.0
    assert inputs.wacc == 9.0
    assert inputs.projection_years == 5

  def test_from_dict_unknown_field(self):
    with pytest.raises(KeyError, match='Unknown input field: ticker'):
      ValuationInput.from_dict({'ticker': 'INFY'})

  def test_replace_returns_new_instance(self, example_input):
    edited = example_input.replace(wacc=11.0)

    assert edited.wacc == 11.0
    assert example_input.wacc == 12.0

  def test_frozen(self, example_input):
    with pytest.raises(dataclasses.FrozenInstanceError):
      example_input.wacc = 1.0


class TestResolveField:
  """Tests for resolve_field helper."""

  def test_attribute_name(self):
    assert resolve_field('shares_outstanding') == 'shares_outstanding'

  def test_record_key(self):
    assert resolve_field('currentFCF') == 'current_fcf'
    assert resolve_field('terminalGrowthRate') == 'terminal_growth_rate'

  def test_unknown(self):
    with pytest.raises(KeyError):
      resolve_field('price')


class TestValuationResult:
  """Tests for ValuationResult dataclass."""

  def test_to_dict(self):
    result = _make_result([
        ProjectedCashFlow(1, 110.0, 100.0),
        ProjectedCashFlow(2, 121.0, 90.0),
    ])
    record = result.to_dict()

    assert record['enterpriseValue'] == 990.0
    assert record['equityValue'] == 900.0
    assert record['intrinsicValuePerShare'] == 9.0
    assert record['pvTerminalValue'] == 800.0
    assert record['sumPvCashFlows'] == 190.0
    assert record['projectedCashFlows'] == [
        {'year': 1, 'projectedFCF': 110.0, 'presentValue': 100.0},
        {'year': 2, 'projectedFCF': 121.0, 'presentValue': 90.0},
    ]

  def test_to_frame(self):
    result = _make_result([
        ProjectedCashFlow(1, 110.0, 100.0),
        ProjectedCashFlow(2, 121.0, 90.0),
    ])
    frame = result.to_frame()

    assert list(frame.columns) == ['year', 'projected_fcf', 'present_value']
    assert frame['year'].tolist() == [1, 2]
    assert frame['present_value'].sum() == pytest.approx(190.0)

  def test_to_frame_empty(self):
    frame = _make_result([]).to_frame()

    assert isinstance(frame, pd.DataFrame)
    assert frame.empty
    assert list(frame.columns) == ['year', 'projected_fcf', 'present_value']

  def test_equality_ignores_inputs(self, example_input):
    plain = _make_result([])
    with_inputs = dataclasses.replace(plain, inputs=example_input)

    assert plain == with_inputs
