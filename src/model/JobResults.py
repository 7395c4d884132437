"""Result records produced by the pay projection engine.

All money values are plain floats for the whole amount; rounding and currency
formatting are left to the renderers.
"""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class SuperContribution:
    """Employer superannuation for one job.

    Every field is None when superannuation is disabled or has no rate, so
    callers can tell "not applicable" apart from a real amount.
    """
    per_year: Optional[float] = None
    per_month: Optional[float] = None
    per_swing: Optional[float] = None
    rate_percent: Optional[float] = None

    @property
    def applies(self) -> bool:
        return self.per_year is not None


@dataclass(frozen=True)
class JobResults:
    """Pay projection for a single job on a single swing."""
    swing: str
    pay_type: str  # "hourly" or "salary"
    tax_regime: str  # "standard" or "backpacker"

    # Swing geometry
    swing_cycle_length: int
    cycles_per_month: float
    cycles_per_year: float
    working_days_per_month: float

    # Gross and net pay
    gross_swing: float
    net_swing: float
    gross_month: float
    net_month: float
    gross_year: float
    net_year: float

    # Deductions
    annual_tax: float
    swing_tax: float
    hecs_per_year: float = 0.0
    hecs_per_swing: float = 0.0

    # Pay-type specific
    daily_pay: Optional[float] = None  # hourly jobs only
    estimated_hourly: Optional[float] = None  # salary jobs only

    # Employer superannuation
    super_per_year: Optional[float] = None
    super_per_month: Optional[float] = None
    super_per_swing: Optional[float] = None
    super_rate: Optional[float] = None

    @property
    def has_hecs(self) -> bool:
        return self.hecs_per_year > 0

    @property
    def has_super(self) -> bool:
        return self.super_per_year is not None

    @property
    def effective_tax_rate(self) -> float:
        """Tax plus HECS as a fraction of gross annual pay."""
        if self.gross_year <= 0:
            return 0.0
        return (self.annual_tax + self.hecs_per_year) / self.gross_year

    def to_dict(self) -> dict:
        return asdict(self)
