"""Side-by-side comparison of two projected jobs."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from model.JobResults import JobResults
from model.field_metadata import get_description


# (field, higher_is_better)
COMPARED_METRICS = [
    ("net_swing", True),
    ("gross_swing", True),
    ("net_month", True),
    ("gross_month", True),
    ("net_year", True),
    ("gross_year", True),
    ("annual_tax", False),
    ("hecs_per_year", False),
    ("super_per_year", True),
    ("estimated_hourly", True),
]


@dataclass
class MetricComparison:
    metric: str
    first: float
    second: float
    difference: float
    percent_difference: float
    better: str
    higher_is_better: bool

    def to_dict(self, first_label: str, second_label: str) -> dict:
        return {
            first_label: round(self.first, 2),
            second_label: round(self.second, 2),
            "difference": round(self.difference, 2),
            "percent_difference": round(self.percent_difference, 1),
            "better": self.better,
            "higher_is_better": self.higher_is_better,
            "description": get_description(self.metric),
        }


@dataclass
class JobComparison:
    first_label: str
    second_label: str
    first: JobResults
    second: JobResults
    metrics: Dict[str, MetricComparison] = field(default_factory=dict)

    @property
    def better_take_home(self) -> str:
        """Label of the job with the higher net annual pay, or "tie"."""
        return self.metrics["net_year"].better

    def to_dict(self) -> dict:
        return {
            "jobs": [self.first_label, self.second_label],
            "swings": {self.first_label: self.first.swing, self.second_label: self.second.swing},
            "metrics": {name: m.to_dict(self.first_label, self.second_label) for name, m in self.metrics.items()},
            "better_take_home": self.better_take_home,
        }


def compare_metric(name: str, first: float, second: float, first_label: str, second_label: str,
                   higher_is_better: bool = True) -> MetricComparison:
    diff = second - first
    if first != 0:
        pct_diff = (diff / abs(first)) * 100
    else:
        pct_diff = 100 if second > 0 else (-100 if second < 0 else 0)

    if higher_is_better:
        winner = first_label if first > second else (second_label if second > first else "tie")
    else:
        winner = first_label if first < second else (second_label if second < first else "tie")

    return MetricComparison(
        metric=name,
        first=first,
        second=second,
        difference=diff,
        percent_difference=pct_diff,
        better=winner,
        higher_is_better=higher_is_better,
    )


def compare_jobs(first: JobResults, second: JobResults, first_label: str = "Job One",
                 second_label: str = "Job Two") -> JobComparison:
    """Compare two projections metric by metric.

    Missing super counts as zero so a job without super loses to one with it.
    Estimated hourly is only compared when both jobs are salaried.
    """
    if first_label == second_label:
        raise ValueError(f"Job labels must differ to compare them (both are '{first_label}')")

    comparison = JobComparison(first_label, second_label, first, second)
    for name, higher_is_better in COMPARED_METRICS:
        a = getattr(first, name)
        b = getattr(second, name)
        if name == "estimated_hourly" and (a is None or b is None):
            continue
        comparison.metrics[name] = compare_metric(
            name, a or 0.0, b or 0.0, first_label, second_label, higher_is_better
        )
    return comparison


def pay_breakdown(results: List[JobResults], labels: Optional[List[str]] = None) -> List[dict]:
    """Rows for a stacked net/tax/HECS view of each job's gross annual pay."""
    if labels is None:
        labels = [f"Job {i + 1}" for i in range(len(results))]
    if len(labels) != len(results):
        raise ValueError("pay_breakdown needs one label per job")
    return [
        {
            "job": label,
            "net": r.net_year,
            "tax": r.annual_tax,
            "hecs": r.hecs_per_year or 0.0,
        }
        for label, r in zip(labels, results)
    ]
