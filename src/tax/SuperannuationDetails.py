import json
import logging
import os
from typing import Optional

from model.JobResults import SuperContribution


logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


class SuperannuationDetails:
    """Holds employer superannuation settings and computes contributions.

    For hourly jobs the contribution base only counts a capped number of hours
    per day (ordinary hours), not the full shift. Salaried jobs use the whole
    annual salary as the base.
    """

    def __init__(self, default_hours_per_day: float = 8, min_hours_per_day: float = 1,
                 max_hours_per_day: float = 12):
        """Initialize with the ordinary-hours settings.

        Args:
            default_hours_per_day: Hours counted when the job does not say.
            min_hours_per_day: Lowest hours-per-day the input boundary accepts.
            max_hours_per_day: Highest hours-per-day the input boundary accepts.
        """
        self.default_hours_per_day = default_hours_per_day
        self.min_hours_per_day = min_hours_per_day
        self.max_hours_per_day = max_hours_per_day

    @classmethod
    def load(cls, ref_path: Optional[str] = None) -> 'SuperannuationDetails':
        """Build from reference/superannuation.json (or `ref_path`)."""
        ref_path = ref_path or os.path.join(os.path.dirname(__file__), '../../reference/superannuation.json')
        with open(ref_path, 'r') as f:
            data = json.load(f)
        details = cls(
            default_hours_per_day=data.get("defaultHoursPerDay", 8),
            min_hours_per_day=data.get("minHoursPerDay", 1),
            max_hours_per_day=data.get("maxHoursPerDay", 12),
        )
        if not details.min_hours_per_day <= details.default_hours_per_day <= details.max_hours_per_day:
            raise ValueError(
                f"superannuation.json: defaultHoursPerDay {details.default_hours_per_day} must be between "
                f"{details.min_hours_per_day} and {details.max_hours_per_day}"
            )
        logger.debug("Loaded superannuation settings from %s", ref_path)
        return details

    def hours_per_day(self, requested: Optional[float]) -> float:
        """Return the hours counted toward super, falling back to the default."""
        if requested is not None and requested > 0:
            return requested
        return self.default_hours_per_day

    def hourly_base(self, rate_per_hour: float, days_on: int, cycles_per_year: float,
                    hours_per_day: Optional[float] = None) -> float:
        """Annual earnings that attract super for an hourly job.

        Args:
            rate_per_hour: The hourly pay rate.
            days_on: Working days in each swing cycle.
            cycles_per_year: Swing cycles worked per year.
            hours_per_day: Ordinary hours per day; None uses the default.

        Returns:
            rate * hours per day * days on * cycles per year.
        """
        return rate_per_hour * self.hours_per_day(hours_per_day) * days_on * cycles_per_year

    def contribution(self, base: float, cycles_per_year: float, enabled: bool,
                     rate_percent: Optional[float] = None) -> SuperContribution:
        """Calculate the employer contribution on `base`.

        Args:
            base: Annual earnings the rate applies to.
            cycles_per_year: Swing cycles per year, for the per-swing figure.
            enabled: Whether the job pays super at all.
            rate_percent: Contribution rate as a percentage, e.g. 11.5.

        Returns:
            A SuperContribution. All fields are None when super is disabled
            or the rate is missing or zero.
        """
        if not enabled or not rate_percent or rate_percent <= 0:
            return SuperContribution()
        per_year = base * (rate_percent / 100)
        return SuperContribution(
            per_year=per_year,
            per_month=per_year / MONTHS_PER_YEAR,
            per_swing=per_year / cycles_per_year,
            rate_percent=rate_percent,
        )
