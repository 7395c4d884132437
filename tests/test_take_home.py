import os
import sys
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))
from calc.take_home import TakeHomeCalculator, HOURS_PER_DAY
from model.JobInput import HourlyInput, SalaryInput, SuperannuationOption
from model.SwingPattern import UnknownSwingError, SwingCatalog, SwingPattern
from tax.IncomeTaxDetails import IncomeTaxDetails, BACKPACKER
from tax.HecsDetails import HecsDetails
from tax.SuperannuationDetails import SuperannuationDetails

CYCLES_8_6 = 365.25 / 14
SUPER = SuperannuationOption(enabled=True, rate_percent=11.5)


@pytest.fixture(scope="module")
def calculator():
    return TakeHomeCalculator.from_reference()


@pytest.fixture(scope="module")
def income_tax():
    return IncomeTaxDetails()


class TestProjectHourly:
    def test_basic_hourly_projection(self, calculator, income_tax):
        results = calculator.project_hourly(20, "8/6", False)
        assert results.daily_pay == 240
        assert results.gross_swing == 1920
        assert results.gross_year == pytest.approx(1920 * CYCLES_8_6)
        assert results.gross_year == pytest.approx(50091.4, abs=0.1)
        expected_tax = income_tax.tax(results.gross_year)
        assert results.annual_tax == pytest.approx(expected_tax)
        # Standard rates: 32.5c bracket above 45,000
        assert results.annual_tax == pytest.approx(5092 + (results.gross_year - 45000) * 0.325)
        assert results.net_year == pytest.approx(results.gross_year - expected_tax)
        assert results.estimated_hourly is None
        assert results.pay_type == "hourly"
        assert results.swing == "8/6"

    def test_geometry_echoed(self, calculator):
        results = calculator.project_hourly(20, "8/6")
        assert results.swing_cycle_length == 14
        assert results.cycles_per_year == pytest.approx(CYCLES_8_6)
        assert results.working_days_per_month == pytest.approx(30.44 / 14 * 8)

    def test_monthly_figures(self, calculator):
        results = calculator.project_hourly(45, "2/1")
        assert results.gross_month == pytest.approx(results.gross_year / 12)
        assert results.net_month == pytest.approx(results.net_year / 12)

    def test_swing_tax_is_annual_tax_spread_evenly(self, calculator, income_tax):
        results = calculator.project_hourly(45, "2/2")
        assert results.swing_tax == pytest.approx(results.annual_tax / results.cycles_per_year)
        # Not the tax on one swing's pay taken on its own
        assert results.swing_tax != pytest.approx(income_tax.tax(results.gross_swing))
        assert results.net_swing == pytest.approx(results.gross_swing - results.swing_tax)

    def test_hecs_deducted(self, calculator):
        results = calculator.project_hourly(55, "8/6", has_hecs_debt=True)
        # 55 * 12 * 8 * 365.25 / 14 = 137,751.43 -> 8.5% band
        assert results.gross_year == pytest.approx(137751.43, abs=0.01)
        assert results.hecs_per_year == pytest.approx(results.gross_year * 0.085)
        assert results.hecs_per_swing == pytest.approx(results.hecs_per_year / results.cycles_per_year)
        assert results.net_year == pytest.approx(results.gross_year - results.annual_tax - results.hecs_per_year)
        assert results.net_swing == pytest.approx(results.gross_swing - results.swing_tax - results.hecs_per_swing)
        assert results.has_hecs

    def test_no_hecs_without_debt(self, calculator):
        results = calculator.project_hourly(55, "8/6", has_hecs_debt=False)
        assert results.hecs_per_year == 0
        assert results.hecs_per_swing == 0
        assert not results.has_hecs

    def test_backpacker_regime(self, calculator, income_tax):
        results = calculator.project_hourly(30, "8/6", use_backpacker_tax_regime=True)
        assert results.tax_regime == BACKPACKER
        assert results.annual_tax == pytest.approx(income_tax.tax(results.gross_year, BACKPACKER))

    def test_super_uses_capped_hours(self, calculator):
        results = calculator.project_hourly(55, "8/6", superannuation=SUPER)
        base = 55 * 8 * 8 * CYCLES_8_6
        assert results.super_per_year == pytest.approx(base * 0.115)
        assert results.super_per_month == pytest.approx(base * 0.115 / 12)
        assert results.super_per_swing == pytest.approx(base * 0.115 / CYCLES_8_6)
        assert results.super_rate == 11.5
        # Less than the rate applied to the full 12-hour gross
        assert results.super_per_year < results.gross_year * 0.115

    def test_super_hours_per_day_override(self, calculator):
        results = calculator.project_hourly(55, "8/6", superannuation=SUPER, super_hours_per_day=12)
        assert results.super_per_year == pytest.approx(results.gross_year * 0.115)

    def test_super_absent_when_disabled(self, calculator):
        for option in (None, SuperannuationOption(enabled=False, rate_percent=11.5),
                       SuperannuationOption(enabled=True, rate_percent=None),
                       SuperannuationOption(enabled=True, rate_percent=0)):
            results = calculator.project_hourly(55, "8/6", superannuation=option)
            assert results.super_per_year is None
            assert results.super_per_month is None
            assert results.super_per_swing is None
            assert results.super_rate is None
            assert not results.has_super

    def test_unknown_swing(self, calculator):
        with pytest.raises(UnknownSwingError):
            calculator.project_hourly(55, "3/1")

    def test_zero_rate(self, calculator):
        results = calculator.project_hourly(0, "8/6", has_hecs_debt=True, superannuation=SUPER)
        assert results.gross_year == 0
        assert results.net_year == 0
        assert results.annual_tax == 0
        assert results.super_per_year == 0


class TestProjectSalary:
    def test_estimated_hourly(self, calculator):
        results = calculator.project_salary(100000, "8/6")
        assert results.estimated_hourly == pytest.approx(100000 / (8 * HOURS_PER_DAY * CYCLES_8_6))
        assert results.estimated_hourly == pytest.approx(39.93, abs=0.01)
        assert results.daily_pay is None
        assert results.pay_type == "salary"

    def test_swing_pay_derived_from_salary(self, calculator, income_tax):
        results = calculator.project_salary(100000, "8/6")
        assert results.gross_year == 100000
        assert results.gross_swing == pytest.approx(100000 / CYCLES_8_6)
        assert results.annual_tax == pytest.approx(income_tax.tax(100000))
        assert results.net_year == pytest.approx(100000 - income_tax.tax(100000))
        assert results.net_swing == pytest.approx(results.gross_swing - results.swing_tax)

    def test_super_on_full_salary(self, calculator):
        results = calculator.project_salary(120000, "2/1", superannuation=SUPER)
        assert results.super_per_year == pytest.approx(13800)
        assert results.super_per_swing == pytest.approx(13800 / (365.25 / 21))

    def test_hecs_on_salary(self, calculator):
        results = calculator.project_salary(100000, "2/2", has_hecs_debt=True)
        assert results.hecs_per_year == pytest.approx(5500)
        assert results.net_year == pytest.approx(100000 - results.annual_tax - 5500)

    def test_unknown_swing(self, calculator):
        with pytest.raises(UnknownSwingError):
            calculator.project_salary(100000, "")


def test_projection_is_repeatable(calculator):
    first = calculator.project_hourly(48.5, "2/1", True, SUPER, True, 10)
    second = calculator.project_hourly(48.5, "2/1", True, SUPER, True, 10)
    assert first == second
    first = calculator.project_salary(150000, "2/2", False, SUPER, True)
    second = calculator.project_salary(150000, "2/2", False, SUPER, True)
    assert first == second


def test_project_dispatches_on_input_type(calculator):
    hourly = HourlyInput(rate_per_hour=55, swing="8/6", has_hecs_debt=True)
    salary = SalaryInput(annual_salary=100000, swing="2/1")
    assert calculator.project(hourly) == calculator.project_hourly(55, "8/6", has_hecs_debt=True)
    assert calculator.project(salary) == calculator.project_salary(100000, "2/1")
    with pytest.raises(TypeError):
        calculator.project({"payType": "hourly"})


def test_caller_supplied_catalog():
    catalog = SwingCatalog([SwingPattern("7/7", 7, 7)])
    calculator = TakeHomeCalculator(IncomeTaxDetails(), HecsDetails(), SuperannuationDetails(), catalog)
    results = calculator.project_hourly(40, "7/7")
    assert results.swing_cycle_length == 14
    with pytest.raises(UnknownSwingError):
        calculator.project_hourly(40, "8/6")


def test_effective_tax_rate(calculator):
    results = calculator.project_salary(100000, "8/6", has_hecs_debt=True)
    assert results.effective_tax_rate == pytest.approx((results.annual_tax + results.hecs_per_year) / 100000)
    assert calculator.project_salary(0, "8/6").effective_tax_rate == 0.0
