"""Validated job inputs handed to the pay projection engine.

Values here are assumed to have passed the input boundary in `job_spec`; the
engine does not check ranges again.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class SuperannuationOption:
    enabled: bool = False
    rate_percent: Optional[float] = None


@dataclass(frozen=True)
class HourlyInput:
    rate_per_hour: float
    swing: str = "8/6"
    use_backpacker_tax_regime: bool = False
    superannuation: Optional[SuperannuationOption] = None
    has_hecs_debt: bool = False
    super_hours_per_day: Optional[float] = None
    name: str = "Job One"


@dataclass(frozen=True)
class SalaryInput:
    annual_salary: float
    swing: str = "8/6"
    use_backpacker_tax_regime: bool = False
    superannuation: Optional[SuperannuationOption] = None
    has_hecs_debt: bool = False
    name: str = "Job One"


JobInput = Union[HourlyInput, SalaryInput]
