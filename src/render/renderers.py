"""Renderer classes for displaying pay projections.

Each renderer takes already-calculated results and prints a fixed-width
text report to stdout. Formatting of money and rates happens here and
nowhere else.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from model.JobResults import JobResults
from model.SwingPattern import SwingCatalog
from model.field_metadata import get_short_name, format_value
from calc.job_comparison import JobComparison
from calc.swing_calculator import metrics_for


WIDTH = 60

SWING_ROWS = ["swing", "tax_regime", "swing_cycle_length", "cycles_per_month", "cycles_per_year",
              "working_days_per_month"]
PAY_ROWS = ["daily_pay", "gross_swing", "net_swing", "gross_month", "net_month", "gross_year", "net_year",
            "estimated_hourly"]
DEDUCTION_ROWS = ["annual_tax", "swing_tax", "hecs_per_year", "hecs_per_swing"]
SUPER_ROWS = ["super_rate", "super_per_year", "super_per_month", "super_per_swing"]


def print_row(field_name: str, value: Any, label_width: int = 40, value_width: int = 16) -> None:
    label = get_short_name(field_name) + ":"
    print(f"  {label:<{label_width}} {format_value(field_name, value):>{value_width}}")


def print_section(title: str, width: int = WIDTH) -> None:
    print()
    print("-" * width)
    print(title)
    print("-" * width)


class BaseRenderer(ABC):
    """Abstract base class for all renderers."""

    @abstractmethod
    def render(self, data: Any) -> None:
        """Render the data to output.

        Args:
            data: The calculated results this renderer displays
        """
        pass


class JobDetailsRenderer(BaseRenderer):
    """Renderer for the full breakdown of a single job."""

    def __init__(self, label: str = "Job One"):
        """Initialize with the job's display label.

        Args:
            label: Name printed in the report title
        """
        self.label = label

    def render(self, data: JobResults) -> None:
        """Render one job's projection.

        HECS rows are shown only when a repayment applies, super rows only when
        the job pays super, and daily pay / estimated hourly only for the pay
        type they belong to.
        """
        print()
        print("=" * WIDTH)
        print(f"{'PAY SUMMARY FOR ' + self.label.upper():^{WIDTH}}")
        print("=" * WIDTH)

        print_section("SWING")
        for name in SWING_ROWS:
            print_row(name, getattr(data, name))

        print_section("PAY")
        for name in PAY_ROWS:
            value = getattr(data, name)
            if value is None:
                continue
            print_row(name, value)

        print_section("DEDUCTIONS")
        for name in DEDUCTION_ROWS:
            if name.startswith("hecs") and not data.has_hecs:
                continue
            print_row(name, getattr(data, name))
        print_row("effective_tax_rate", data.effective_tax_rate)

        if data.has_super:
            print_section("EMPLOYER SUPERANNUATION")
            for name in SUPER_ROWS:
                print_row(name, getattr(data, name))

        print()
        print("=" * WIDTH)
        print()


class ComparisonRenderer(BaseRenderer):
    """Renderer for two jobs side by side."""

    def render(self, data: JobComparison) -> None:
        """Render a metric-by-metric comparison with differences.

        Args:
            data: JobComparison from `compare_jobs`
        """
        width = 24 + 3 * 17
        print()
        print("=" * width)
        print(f"{'JOB COMPARISON':^{width}}")
        print("=" * width)
        print()
        print(f"  {'':<24}{data.first_label:>16} {data.second_label:>16} {'Difference':>16}")
        print(f"  {'':<24}{data.first.swing:>16} {data.second.swing:>16}")
        print(f"  {'-' * 24}{'-' * 16} {'-' * 16} {'-' * 16}")
        for name, metric in data.metrics.items():
            print(
                f"  {get_short_name(name):<24}"
                f"{format_value(name, metric.first):>16} "
                f"{format_value(name, metric.second):>16} "
                f"{format_value(name, metric.difference):>16}"
            )
        print()
        winner = data.better_take_home
        if winner == "tie":
            print("  Both jobs have the same take-home pay per year.")
        else:
            diff = abs(data.metrics["net_year"].difference)
            print(f"  {winner} takes home {format_value('net_year', diff)} more per year.")
        print()
        print("=" * width)
        print()


class PayBreakdownRenderer(BaseRenderer):
    """Renderer for a stacked net / tax / HECS bar per job."""

    SEGMENTS = [("net", "#"), ("tax", "="), ("hecs", "+")]

    def __init__(self, bar_width: int = 40):
        self.bar_width = bar_width

    def render(self, data: List[Dict[str, Any]]) -> None:
        """Render rows from `pay_breakdown` as horizontal bars scaled to the largest job."""
        if not data:
            print("No jobs to display")
            return

        largest = max(row["net"] + row["tax"] + row["hecs"] for row in data)
        print()
        print("=" * WIDTH)
        print(f"{'ANNUAL PAY BREAKDOWN':^{WIDTH}}")
        print("=" * WIDTH)
        print("  Legend: # net   = tax   + HECS")
        print()
        for row in data:
            bar = ""
            for key, char in self.SEGMENTS:
                share = row[key] / largest if largest > 0 else 0
                bar += char * int(round(share * self.bar_width))
            print(f"  {row['job']:<12} |{bar}")
            print(f"  {'':<12}  net {format_value('net_year', row['net'])}"
                  f"  tax {format_value('annual_tax', row['tax'])}"
                  f"  HECS {format_value('hecs_per_year', row['hecs'])}")
        print()
        print("=" * WIDTH)
        print()


class SwingOptionsRenderer(BaseRenderer):
    """Renderer for the available swing rosters."""

    def render(self, data: SwingCatalog) -> None:
        print()
        print("=" * WIDTH)
        print(f"{'AVAILABLE SWINGS':^{WIDTH}}")
        print("=" * WIDTH)
        print(f"  {'Swing':<8} {'On':>4} {'Off':>4} {'Cycle':>6} {'Per Year':>9}  Description")
        print(f"  {'-' * 8} {'-' * 4} {'-' * 4} {'-' * 6} {'-' * 9}  {'-' * 20}")
        for pattern in data.patterns():
            metrics = metrics_for(pattern)
            print(f"  {pattern.name:<8} {pattern.days_on:>4} {pattern.days_off:>4} "
                  f"{metrics.swing_cycle_length:>6} {metrics.cycles_per_year:>9.2f}  {pattern.description}")
        print()


RENDERER_REGISTRY = {
    'JobDetails': JobDetailsRenderer,
    'Comparison': ComparisonRenderer,
    'PayBreakdown': PayBreakdownRenderer,
    'Swings': SwingOptionsRenderer,
}
