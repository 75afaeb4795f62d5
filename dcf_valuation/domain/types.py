'''
Domain types for the DCF calculator.

These dataclasses are the contract between callers and the pure valuation
engine. Rates are carried as percents (12 means 12%); the engine converts
them to fractions before use.
'''

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

import pandas as pd

# Attribute name -> record key used by to_dict()/from_dict().
INPUT_KEYS: Dict[str, str] = {
    'company_name': 'companyName',
    'current_fcf': 'currentFCF',
    'growth_rate': 'growthRate',
    'projection_years': 'projectionYears',
    'wacc': 'wacc',
    'terminal_growth_rate': 'terminalGrowthRate',
    'debt': 'debt',
    'cash': 'cash',
    'shares_outstanding': 'sharesOutstanding',
}

NUMERIC_FIELDS = tuple(name for name in INPUT_KEYS if name != 'company_name')

CASH_FLOW_COLUMNS = ['year', 'projected_fcf', 'present_value']


def resolve_field(name: str) -> str:
  '''
  Map an attribute or record key to the ValuationInput attribute name.

  Raises:
    KeyError: If the name is neither an attribute nor a record key
  '''
  if name in INPUT_KEYS:
    return name
  for attr, key in INPUT_KEYS.items():
    if key == name:
      return attr
  raise KeyError(f'Unknown input field: {name}')


@dataclass(frozen=True)
class ValuationInput:
  '''
  Caller-supplied assumptions for one valuation.

  Attributes:
    company_name: Display label, no effect on the numbers
    current_fcf: Baseline free cash flow (currency units, e.g. crores)
    growth_rate: Annual FCF growth during the projection window, percent
    projection_years: Number of discrete forecast years
    wacc: Discount rate (weighted average cost of capital), percent
    terminal_growth_rate: Perpetual growth after the window, percent
    debt: Total debt, subtracted from enterprise value
    cash: Cash and equivalents, added to enterprise value
    shares_outstanding: Divisor for the per-share value
  '''
  company_name: str = ''
  current_fcf: float = 0.0
  growth_rate: float = 0.0
  projection_years: int = 5
  wacc: float = 0.0
  terminal_growth_rate: float = 0.0
  debt: float = 0.0
  cash: float = 0.0
  shares_outstanding: float = 0.0

  def replace(self, **changes: Any) -> 'ValuationInput':
    '''Return a copy with the given attributes changed.'''
    return dataclasses.replace(self, **changes)

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to a record keyed like the original form state.'''
    return {key: getattr(self, attr) for attr, key in INPUT_KEYS.items()}

  @classmethod
  def from_dict(cls, data: Mapping[str, Any]) -> 'ValuationInput':
    '''
    Create from a record keyed by record keys or attribute names.

    Missing fields keep their defaults.

    Raises:
      KeyError: If the record contains an unknown field
    '''
    kwargs = {resolve_field(name): value for name, value in data.items()}
    return cls(**kwargs)


@dataclass(frozen=True)
class ProjectedCashFlow:
  '''
  One explicit forecast year.

  Attributes:
    year: Forecast year, starting at 1
    projected_fcf: Forecast free cash flow for the year
    present_value: projected_fcf discounted back at WACC
  '''
  year: int
  projected_fcf: float
  present_value: float

  def to_dict(self) -> Dict[str, Any]:
    return {
        'year': self.year,
        'projectedFCF': self.projected_fcf,
        'presentValue': self.present_value,
    }


@dataclass(frozen=True)
class ValuationResult:
  '''
  Complete DCF valuation output.

  Attributes:
    projected_cash_flows: Per-year forecast, ordered by year ascending
    sum_pv_cash_flows: Sum of all present values in the forecast
    terminal_value: Gordon growth terminal value, undiscounted
    pv_terminal_value: Terminal value discounted to today
    enterprise_value: sum_pv_cash_flows + pv_terminal_value
    equity_value: enterprise_value - debt + cash
    intrinsic_value_per_share: equity_value / shares_outstanding
  '''
  projected_cash_flows: Tuple[ProjectedCashFlow, ...]
  sum_pv_cash_flows: float
  terminal_value: float
  pv_terminal_value: float
  enterprise_value: float
  equity_value: float
  intrinsic_value_per_share: float
  inputs: ValuationInput = field(default_factory=ValuationInput,
                                 compare=False)

  def to_dict(self) -> Dict[str, Any]:
    '''Convert to a JSON-friendly record.'''
    return {
        'enterpriseValue': self.enterprise_value,
        'equityValue': self.equity_value,
        'intrinsicValuePerShare': self.intrinsic_value_per_share,
        'projectedCashFlows': [cf.to_dict() for cf in self.projected_cash_flows],
        'terminalValue': self.terminal_value,
        'pvTerminalValue': self.pv_terminal_value,
        'sumPvCashFlows': self.sum_pv_cash_flows,
    }

  def to_frame(self) -> pd.DataFrame:
    '''Per-year forecast as a DataFrame, one row per year.'''
    rows = [dataclasses.astuple(cf) for cf in self.projected_cash_flows]
    return pd.DataFrame(rows, columns=CASH_FLOW_COLUMNS)
