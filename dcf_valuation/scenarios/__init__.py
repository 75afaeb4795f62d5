"""Scenario presets and serializable configuration."""

from dcf_valuation.scenarios.config import PRESETS
from dcf_valuation.scenarios.config import ScenarioConfig
from dcf_valuation.scenarios.config import get_preset

__all__ = ['PRESETS', 'ScenarioConfig', 'get_preset']
