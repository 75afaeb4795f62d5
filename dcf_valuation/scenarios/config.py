"""
Scenario configuration for DCF valuations.

ScenarioConfig is a serializable (JSON-friendly) set of valuation
assumptions. Named presets make runs reproducible from the command line,
and a saved JSON file can be loaded back with from_file().
"""

from dataclasses import asdict
from dataclasses import dataclass
from dataclasses import fields
import json
from pathlib import Path
from typing import Any, Callable, Dict

from dcf_valuation.domain.types import ValuationInput


@dataclass
class ScenarioConfig:
  """
  Configuration for a valuation scenario.

  Rates are percents, matching ValuationInput. Monetary values are in the
  same unit as current_fcf (crores for the bundled presets).

  Attributes:
    name: Scenario name, not used in the calculation
    company_name: Company display label
    current_fcf: Current year free cash flow
    growth_rate: FCF growth during the projection window (%)
    projection_years: Number of explicit forecast years
    wacc: Weighted average cost of capital (%)
    terminal_growth_rate: Perpetual growth rate (%)
    debt: Total debt
    cash: Cash and equivalents
    shares_outstanding: Shares outstanding
  """
  name: str = 'default'
  company_name: str = 'Example Ltd.'
  current_fcf: float = 1000.0
  growth_rate: float = 15.0
  projection_years: int = 5
  wacc: float = 12.0
  terminal_growth_rate: float = 5.0
  debt: float = 5000.0
  cash: float = 2000.0
  shares_outstanding: float = 100.0

  @classmethod
  def default(cls) -> 'ScenarioConfig':
    """
    Create the example scenario.

    Uses:
      - FCF of 1,000 Cr growing 15% a year for 5 years
      - 12% WACC, 5% perpetual growth
      - 5,000 Cr debt, 2,000 Cr cash, 100 Cr shares
    """
    return cls()

  @classmethod
  def blank(cls) -> 'ScenarioConfig':
    """Empty form: zero everywhere except a 5-year window."""
    return cls(
        name='blank',
        company_name='',
        current_fcf=0.0,
        growth_rate=0.0,
        projection_years=5,
        wacc=0.0,
        terminal_growth_rate=0.0,
        debt=0.0,
        cash=0.0,
        shares_outstanding=0.0,
    )

  def to_input(self) -> ValuationInput:
    """Build the engine input for this scenario."""
    return ValuationInput(
        company_name=self.company_name,
        current_fcf=float(self.current_fcf),
        growth_rate=float(self.growth_rate),
        projection_years=int(self.projection_years),
        wacc=float(self.wacc),
        terminal_growth_rate=float(self.terminal_growth_rate),
        debt=float(self.debt),
        cash=float(self.cash),
        shares_outstanding=float(self.shares_outstanding),
    )

  def to_dict(self) -> dict[str, Any]:
    """Convert to dictionary."""
    return asdict(self)

  def to_json(self) -> str:
    """Serialize to JSON string."""
    return json.dumps(self.to_dict(), indent=2)

  @classmethod
  def from_dict(cls, data: dict[str, Any]) -> 'ScenarioConfig':
    """
    Create from dictionary.

    Missing keys keep their defaults.

    Raises:
      ValueError: If the dictionary has keys that are not config fields
    """
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
      raise ValueError(f'Unknown scenario fields: {", ".join(unknown)}')
    return cls(**data)

  @classmethod
  def from_json(cls, json_str: str) -> 'ScenarioConfig':
    """Create from JSON string."""
    return cls.from_dict(json.loads(json_str))

  @classmethod
  def from_file(cls, path: Path) -> 'ScenarioConfig':
    """Load a scenario saved with to_json()."""
    if not path.exists():
      raise FileNotFoundError(f'Scenario file not found: {path}')
    return cls.from_json(path.read_text(encoding='utf-8'))


PRESETS: Dict[str, Callable[[], ScenarioConfig]] = {
    'default': ScenarioConfig.default,
    'blank': ScenarioConfig.blank,
}


def get_preset(name: str) -> ScenarioConfig:
  """
  Look up a preset by name.

  Raises:
    ValueError: If no preset has that name
  """
  if name not in PRESETS:
    raise ValueError(f"Unknown scenario '{name}'. "
                     f'Available: {", ".join(sorted(PRESETS))}')
  return PRESETS[name]()
