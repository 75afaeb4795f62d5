import json

import pytest

from dcf_valuation.domain.types import ValuationInput
from dcf_valuation.scenarios.config import PRESETS
from dcf_valuation.scenarios.config import ScenarioConfig
from dcf_valuation.scenarios.config import get_preset


class TestScenarioConfig:
  """Tests for ScenarioConfig."""

  def test_default_matches_example_company(self, example_input):
    assert ScenarioConfig.default().to_input() == example_input

  def test_blank_zeroes_everything_but_years(self):
    inputs = ScenarioConfig.blank().to_input()

    assert inputs == ValuationInput(company_name='', projection_years=5)
    assert inputs.shares_outstanding == 0.0

  def test_to_input_coerces_types(self):
    config = ScenarioConfig(current_fcf=10, projection_years=3.0, wacc=9)
    inputs = config.to_input()

    assert isinstance(inputs.current_fcf, float)
    assert isinstance(inputs.projection_years, int)
    assert inputs.projection_years == 3

  def test_json_round_trip(self):
    config = ScenarioConfig(name='custom', wacc=11.5)
    restored = ScenarioConfig.from_json(config.to_json())

    assert restored == config
    assert json.loads(config.to_json())['wacc'] == 11.5

  def test_from_dict_keeps_defaults(self):
    config = ScenarioConfig.from_dict({'name': 'partial', 'debt': 0.0})

    assert config.debt == 0.0
    assert config.current_fcf == 1000.0

  def test_from_dict_unknown_keys(self):
    with pytest.raises(ValueError, match='Unknown scenario fields: ticker'):
      ScenarioConfig.from_dict({'ticker': 'INFY'})

  def test_from_file(self, tmp_path):
    path = tmp_path / 'scenario.json'
    path.write_text(ScenarioConfig(name='saved', cash=1.0).to_json(),
                    encoding='utf-8')

    config = ScenarioConfig.from_file(path)

    assert config.name == 'saved'
    assert config.cash == 1.0

  def test_from_file_missing(self, tmp_path):
    with pytest.raises(FileNotFoundError, match='Scenario file not found'):
      ScenarioConfig.from_file(tmp_path / 'missing.json')


class TestPresets:
  """Tests for the preset map."""

  def test_available_presets(self):
    assert sorted(PRESETS) == ['blank', 'default']

  def test_get_preset(self):
    assert get_preset('blank').name == 'blank'
    assert get_preset('default').name == 'default'

  def test_get_preset_returns_fresh_instances(self):
    first = get_preset('default')
    first.wacc = 99.0

    assert get_preset('default').wacc == 12.0

  def test_unknown_preset(self):
    with pytest.raises(ValueError, match="Unknown scenario 'bull'"):
      get_preset('bull')
