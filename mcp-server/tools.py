"""Swing Pay Planner tools for the MCP server.

This module provides the tool implementations that wrap the pay projection
calculators and expose their results through MCP. Every tool returns a
JSON-serializable dict.
"""

import os
import sys
import logging
from typing import Any, Dict, Optional

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from calc.take_home import TakeHomeCalculator
from calc.job_comparison import compare_jobs, pay_breakdown
from calc.swing_calculator import metrics_for
from job_spec import parse_job, load_spec, spec_path_for, list_programs, JobSpecError
from model.JobResults import JobResults


logger = logging.getLogger(__name__)


def results_to_dict(name: str, results: JobResults) -> dict:
    """Flatten a projection for JSON output, rounding money to cents."""
    data = {"name": name}
    for key, value in results.to_dict().items():
        data[key] = round(value, 2) if isinstance(value, float) else value
    data["effective_tax_rate"] = round(results.effective_tax_rate, 4)
    return data


class SwingPayTools:
    """Tools that wrap the pay projection calculators for MCP access."""

    def __init__(self, base_path: str, calculator: Optional[TakeHomeCalculator] = None):
        """Initialize with the project root and load the reference tables.

        Args:
            base_path: Path to the project root (holds input-parameters/)
            calculator: Optional pre-built calculator; defaults to one built from reference/
        """
        self.base_path = base_path
        self.calculator = calculator or TakeHomeCalculator.from_reference()
        self.programs: Dict[str, list] = {}
        self._discover_programs()

    def _discover_programs(self):
        """Load every program spec under input-parameters."""
        self.programs = {}
        for name in list_programs(self.base_path):
            try:
                self.programs[name] = load_spec(spec_path_for(name, self.base_path), self.calculator.superannuation)
            except (JobSpecError, OSError) as e:
                # Skip programs that fail validation; the rest stay usable
                logger.warning("Failed to load program '%s': %s", name, e)

    def list_swings(self) -> dict:
        """List the swing rosters in the catalog."""
        swings = []
        for pattern in self.calculator.swings.patterns():
            metrics = metrics_for(pattern)
            swings.append({
                "name": pattern.name,
                "days_on": pattern.days_on,
                "days_off": pattern.days_off,
                "description": pattern.description,
                "swing_cycle_length": metrics.swing_cycle_length,
                "cycles_per_year": round(metrics.cycles_per_year, 4),
                "working_days_per_month": round(metrics.working_days_per_month, 4),
            })
        return {"swings": swings}

    def calculate_income_tax(self, annual_income: float, backpacker: bool = False) -> dict:
        """Annual income tax for an income under the standard or backpacker rates."""
        if annual_income < 0:
            raise JobSpecError(f"annual_income must be at least 0 (got {annual_income})")
        income_tax = self.calculator.income_tax
        result = income_tax.taxBurden(annual_income, income_tax.regime_for(backpacker))
        return {
            "annual_income": annual_income,
            "regime": result.regime,
            "tax_year": income_tax.tax_year,
            "annual_tax": round(result.totalTax, 2),
            "marginal_rate": result.marginalRate,
            "average_rate": round(result.totalTax / annual_income, 4) if annual_income > 0 else 0.0,
        }

    def calculate_hecs_repayment(self, annual_income: float) -> dict:
        """Compulsory HECS-HELP repayment for an income."""
        if annual_income < 0:
            raise JobSpecError(f"annual_income must be at least 0 (got {annual_income})")
        hecs = self.calculator.hecs
        return {
            "annual_income": annual_income,
            "tax_year": hecs.tax_year,
            "repayment_threshold": hecs.repayment_threshold,
            "repayment_rate": hecs.repayment_rate(annual_income),
            "annual_repayment": round(hecs.repayment(annual_income), 2),
        }

    def project_job(self, job: Dict[str, Any]) -> dict:
        """Validate a job description and project its pay."""
        job_input = parse_job(job, 0, self.calculator.superannuation)
        return results_to_dict(job_input.name, self.calculator.project(job_input))

    def project_hourly_pay(self, arguments: Dict[str, Any]) -> dict:
        return self.project_job(dict(arguments, payType="hourly"))

    def project_salary_pay(self, arguments: Dict[str, Any]) -> dict:
        return self.project_job(dict(arguments, payType="salary"))

    def compare_jobs(self, job_one: Dict[str, Any], job_two: Dict[str, Any]) -> dict:
        """Project two jobs and compare them metric by metric."""
        first = parse_job(job_one, 0, self.calculator.superannuation)
        second = parse_job(job_two, 1, self.calculator.superannuation)
        return self._compare(first, second)

    def _compare(self, first, second) -> dict:
        if first.name == second.name:
            raise JobSpecError(f"Jobs must have different names to compare them (both are '{first.name}')")
        first_results = self.calculator.project(first)
        second_results = self.calculator.project(second)
        comparison = compare_jobs(first_results, second_results, first.name, second.name)
        return {
            "comparison": comparison.to_dict(),
            "jobs": [results_to_dict(first.name, first_results), results_to_dict(second.name, second_results)],
            "pay_breakdown": [
                {key: round(value, 2) if isinstance(value, float) else value for key, value in row.items()}
                for row in pay_breakdown([first_results, second_results], [first.name, second.name])
            ],
        }

    def list_programs(self) -> dict:
        """List saved programs and the jobs in each."""
        return {
            "available_programs": list(self.programs.keys()),
            "programs_info": {
                name: [{"name": job.name, "swing": job.swing, "pay_type": type(job).__name__.replace("Input", "").lower()}
                       for job in jobs]
                for name, jobs in self.programs.items()
            },
        }

    def reload_programs(self) -> dict:
        """Reload all programs from disk, refreshing the cache."""
        old_programs = set(self.programs.keys())
        self._discover_programs()
        new_programs = set(self.programs.keys())
        return {
            "status": "success",
            "programs_loaded": len(self.programs),
            "available_programs": sorted(new_programs),
            "added": sorted(new_programs - old_programs),
            "removed": sorted(old_programs - new_programs),
        }

    def get_program_results(self, program: str) -> dict:
        """Project every job of a saved program, with a comparison when it has two."""
        if program not in self.programs:
            return {"error": f"Program '{program}' not found. Available: {list(self.programs.keys())}"}
        jobs = self.programs[program]
        if len(jobs) == 2:
            return dict(self._compare(jobs[0], jobs[1]), program=program)
        return {
            "program": program,
            "jobs": [results_to_dict(job.name, self.calculator.project(job)) for job in jobs],
        }
