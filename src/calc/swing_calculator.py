from dataclasses import dataclass

from model.SwingPattern import SwingPattern


# Average calendar lengths. Swings are projected on these averages instead of
# real calendar dates.
AVERAGE_DAYS_PER_MONTH = 30.44
AVERAGE_DAYS_PER_YEAR = 365.25


@dataclass(frozen=True)
class SwingMetrics:
    swing_cycle_length: int
    cycles_per_month: float
    cycles_per_year: float
    working_days_per_month: float


def swing_metrics(days_on: int, days_off: int) -> SwingMetrics:
    """Derive cycle length and cycles per month/year for a days-on/days-off roster."""
    swing_cycle_length = days_on + days_off
    cycles_per_month = AVERAGE_DAYS_PER_MONTH / swing_cycle_length
    cycles_per_year = AVERAGE_DAYS_PER_YEAR / swing_cycle_length
    return SwingMetrics(
        swing_cycle_length=swing_cycle_length,
        cycles_per_month=cycles_per_month,
        cycles_per_year=cycles_per_year,
        working_days_per_month=cycles_per_month * days_on,
    )


def metrics_for(pattern: SwingPattern) -> SwingMetrics:
    return swing_metrics(pattern.days_on, pattern.days_off)
