import logging
from typing import Optional

from tax.IncomeTaxDetails import IncomeTaxDetails
from tax.HecsDetails import HecsDetails
from tax.SuperannuationDetails import SuperannuationDetails, MONTHS_PER_YEAR
from model.SwingPattern import SwingCatalog
from model.JobInput import HourlyInput, SalaryInput, SuperannuationOption
from model.JobResults import JobResults
from calc.swing_calculator import metrics_for


logger = logging.getLogger(__name__)

# Every working day is treated as one 12-hour shift.
HOURS_PER_DAY = 12


class TakeHomeCalculator:
    """Calculator that projects take-home pay for a job on a swing roster.

    Pass hydrated `IncomeTaxDetails`, `HecsDetails` and `SuperannuationDetails`
    instances plus the `SwingCatalog` into the constructor. File I/O stays with
    the caller (see `from_reference`), and each projection is a pure function
    of its arguments, so the same calculator can serve both jobs of a
    comparison.

    Inputs are expected to be validated already (see `job_spec`). The only
    error raised here is `UnknownSwingError` for a swing missing from the
    catalog, raised before anything is calculated.
    """

    def __init__(self, income_tax: IncomeTaxDetails, hecs: HecsDetails,
                 superannuation: SuperannuationDetails, swings: SwingCatalog):
        self.income_tax = income_tax
        self.hecs = hecs
        self.superannuation = superannuation
        self.swings = swings

    @classmethod
    def from_reference(cls) -> 'TakeHomeCalculator':
        """Build a calculator from the JSON files in reference/."""
        return cls(
            IncomeTaxDetails(),
            HecsDetails(),
            SuperannuationDetails.load(),
            SwingCatalog.load(),
        )

    def _deductions(self, annual_pay: float, backpacker: bool, hecs_debt: bool):
        regime = self.income_tax.regime_for(backpacker)
        annual_tax = self.income_tax.tax(annual_pay, regime)
        hecs_per_year = self.hecs.repayment(annual_pay) if hecs_debt else 0.0
        return regime, annual_tax, hecs_per_year

    def project_hourly(self, rate_per_hour: float, swing: str, use_backpacker_tax_regime: bool = False,
                       superannuation: Optional[SuperannuationOption] = None, has_hecs_debt: bool = False,
                       super_hours_per_day: Optional[float] = None) -> JobResults:
        """Project pay for an hourly job.

        Gross pay is built up from a 12-hour day: rate * 12 per day, days on per
        swing, swings per year. Tax and HECS are worked out on the annual figure
        and spread evenly across swings. Super only counts
        `super_hours_per_day` hours of each day (default 8).
        """
        pattern = self.swings.lookup(swing)
        metrics = metrics_for(pattern)
        cycles_per_year = metrics.cycles_per_year

        daily_pay = rate_per_hour * HOURS_PER_DAY
        gross_swing = pattern.days_on * daily_pay
        annual_pay = gross_swing * cycles_per_year

        regime, annual_tax, hecs_per_year = self._deductions(annual_pay, use_backpacker_tax_regime, has_hecs_debt)
        net_year = annual_pay - annual_tax - hecs_per_year
        swing_tax = annual_tax / cycles_per_year
        hecs_per_swing = hecs_per_year / cycles_per_year
        net_swing = gross_swing - swing_tax - hecs_per_swing

        option = superannuation or SuperannuationOption()
        super_base = self.superannuation.hourly_base(rate_per_hour, pattern.days_on, cycles_per_year,
                                                     super_hours_per_day)
        contribution = self.superannuation.contribution(super_base, cycles_per_year, option.enabled,
                                                        option.rate_percent)

        logger.debug("Hourly projection: rate=%s swing=%s regime=%s gross_year=%.2f net_year=%.2f",
                     rate_per_hour, pattern.name, regime, annual_pay, net_year)

        return JobResults(
            swing=pattern.name,
            pay_type="hourly",
            tax_regime=regime,
            swing_cycle_length=metrics.swing_cycle_length,
            cycles_per_month=metrics.cycles_per_month,
            cycles_per_year=cycles_per_year,
            working_days_per_month=metrics.working_days_per_month,
            gross_swing=gross_swing,
            net_swing=net_swing,
            gross_month=annual_pay / MONTHS_PER_YEAR,
            net_month=net_year / MONTHS_PER_YEAR,
            gross_year=annual_pay,
            net_year=net_year,
            annual_tax=annual_tax,
            swing_tax=swing_tax,
            hecs_per_year=hecs_per_year,
            hecs_per_swing=hecs_per_swing,
            daily_pay=daily_pay,
            super_per_year=contribution.per_year,
            super_per_month=contribution.per_month,
            super_per_swing=contribution.per_swing,
            super_rate=contribution.rate_percent,
        )

    def project_salary(self, annual_salary: float, swing: str, use_backpacker_tax_regime: bool = False,
                       superannuation: Optional[SuperannuationOption] = None,
                       has_hecs_debt: bool = False) -> JobResults:
        """Project pay for a salaried job.

        The swing figure is the salary divided across swings, and the
        estimated hourly rate assumes the same 12-hour days as hourly jobs.
        Super applies to the whole salary.
        """
        pattern = self.swings.lookup(swing)
        metrics = metrics_for(pattern)
        cycles_per_year = metrics.cycles_per_year

        annual_pay = annual_salary
        regime, annual_tax, hecs_per_year = self._deductions(annual_pay, use_backpacker_tax_regime, has_hecs_debt)
        net_year = annual_pay - annual_tax - hecs_per_year

        gross_swing = annual_pay / cycles_per_year
        swing_tax = annual_tax / cycles_per_year
        hecs_per_swing = hecs_per_year / cycles_per_year
        net_swing = gross_swing - swing_tax - hecs_per_swing

        hours_per_year = pattern.days_on * HOURS_PER_DAY * cycles_per_year
        estimated_hourly = annual_pay / hours_per_year

        option = superannuation or SuperannuationOption()
        contribution = self.superannuation.contribution(annual_pay, cycles_per_year, option.enabled,
                                                        option.rate_percent)

        logger.debug("Salary projection: salary=%s swing=%s regime=%s net_year=%.2f",
                     annual_salary, pattern.name, regime, net_year)

        return JobResults(
            swing=pattern.name,
            pay_type="salary",
            tax_regime=regime,
            swing_cycle_length=metrics.swing_cycle_length,
            cycles_per_month=metrics.cycles_per_month,
            cycles_per_year=cycles_per_year,
            working_days_per_month=metrics.working_days_per_month,
            gross_swing=gross_swing,
            net_swing=net_swing,
            gross_month=annual_pay / MONTHS_PER_YEAR,
            net_month=net_year / MONTHS_PER_YEAR,
            gross_year=annual_pay,
            net_year=net_year,
            annual_tax=annual_tax,
            swing_tax=swing_tax,
            hecs_per_year=hecs_per_year,
            hecs_per_swing=hecs_per_swing,
            estimated_hourly=estimated_hourly,
            super_per_year=contribution.per_year,
            super_per_month=contribution.per_month,
            super_per_swing=contribution.per_swing,
            super_rate=contribution.rate_percent,
        )

    def project(self, job) -> JobResults:
        """Project either input variant."""
        if isinstance(job, HourlyInput):
            return self.project_hourly(
                job.rate_per_hour, job.swing, job.use_backpacker_tax_regime,
                job.superannuation, job.has_hecs_debt, job.super_hours_per_day,
            )
        if isinstance(job, SalaryInput):
            return self.project_salary(
                job.annual_salary, job.swing, job.use_backpacker_tax_regime,
                job.superannuation, job.has_hecs_debt,
            )
        raise TypeError(f"Unsupported job input type: {type(job).__name__}")
