import pytest

from dcf_valuation.domain.types import ValuationInput


@pytest.fixture
def example_input() -> ValuationInput:
  """The bundled example company: 1,000 Cr FCF, 15% growth, 5 years."""
  return ValuationInput(
      company_name='Example Ltd.',
      current_fcf=1000.0,
      growth_rate=15.0,
      projection_years=5,
      wacc=12.0,
      terminal_growth_rate=5.0,
      debt=5000.0,
      cash=2000.0,
      shares_outstanding=100.0,
  )


@pytest.fixture
def flat_input() -> ValuationInput:
  """No growth, 10% WACC, no terminal growth, no net debt."""
  return ValuationInput(
      company_name='Flat Co',
      current_fcf=100.0,
      growth_rate=0.0,
      projection_years=3,
      wacc=10.0,
      terminal_growth_rate=0.0,
      debt=0.0,
      cash=0.0,
      shares_outstanding=10.0,
  )
