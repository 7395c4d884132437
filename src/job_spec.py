"""Loading and validation of job specifications.

This is the input boundary for the pay projection engine. A program's
spec.json lists one or two jobs; each entry is checked here and turned into
an `HourlyInput` or `SalaryInput`. Range checks live here and only here: the
calculators trust what they are given.

Example spec.json:

    {
        "jobs": [
            {"name": "Job One", "payType": "hourly", "hourlyRate": 55, "swing": "8/6",
             "hecsDebt": true, "superannuation": {"enabled": true, "rate": 11.5, "hoursPerDay": 8}},
            {"name": "Job Two", "payType": "salary", "salary": 145000, "swing": "2/1"}
        ]
    }
"""

import json
import math
import logging
import os
from typing import List, Optional

from model.JobInput import HourlyInput, SalaryInput, SuperannuationOption, JobInput
from tax.SuperannuationDetails import SuperannuationDetails


logger = logging.getLogger(__name__)

PAY_TYPES = ("hourly", "salary")
DEFAULT_SWING = "8/6"
MAX_JOBS = 2
DEFAULT_JOB_NAMES = ("Job One", "Job Two")


class JobSpecError(ValueError):
    """Raised when a job specification is missing fields or has out-of-range values."""


def _number(entry: dict, key: str, label: str, min_val: Optional[float] = None,
            max_val: Optional[float] = None, default: Optional[float] = None) -> Optional[float]:
    value = entry.get(key, default)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise JobSpecError(f"{label}: '{key}' must be a number (got {value!r})")
    if not math.isfinite(value):
        raise JobSpecError(f"{label}: '{key}' must be a finite number (got {value})")
    if min_val is not None and value < min_val:
        raise JobSpecError(f"{label}: '{key}' must be at least {min_val} (got {value})")
    if max_val is not None and value > max_val:
        raise JobSpecError(f"{label}: '{key}' must be at most {max_val} (got {value})")
    return float(value)


def _flag(entry: dict, key: str, label: str) -> bool:
    value = entry.get(key, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise JobSpecError(f"{label}: '{key}' must be true or false (got {value!r})")
    return value


def parse_superannuation(data: Optional[dict], label: str,
                         super_details: Optional[SuperannuationDetails] = None) -> tuple:
    """Return (SuperannuationOption or None, hours per day or None)."""
    if data is None:
        return None, None
    if not isinstance(data, dict):
        raise JobSpecError(f"{label}: 'superannuation' must be an object")
    super_details = super_details or SuperannuationDetails()
    option = SuperannuationOption(
        enabled=_flag(data, "enabled", label),
        rate_percent=_number(data, "rate", label, min_val=0, max_val=100),
    )
    hours = _number(data, "hoursPerDay", label,
                    min_val=super_details.min_hours_per_day, max_val=super_details.max_hours_per_day)
    return option, hours


def parse_job(entry: dict, position: int = 0,
              super_details: Optional[SuperannuationDetails] = None) -> JobInput:
    """Validate one job entry and build the matching input variant.

    Args:
        entry: The job dictionary from spec.json (or from a tool call).
        position: Index of the job in the spec, used for the default name.
        super_details: Hours-per-day bounds; defaults to 1-12.

    Raises:
        JobSpecError: if a field is missing, has the wrong type or is out of range.
    """
    if not isinstance(entry, dict):
        raise JobSpecError(f"Job {position + 1} must be an object")

    default_name = DEFAULT_JOB_NAMES[position] if position < len(DEFAULT_JOB_NAMES) else f"Job {position + 1}"
    name = entry.get("name") or default_name
    label = f"Job '{name}'"

    pay_type = entry.get("payType")
    if pay_type not in PAY_TYPES:
        raise JobSpecError(f"{label}: 'payType' must be one of {', '.join(PAY_TYPES)} (got {pay_type!r})")

    swing = entry.get("swing", DEFAULT_SWING)
    if not isinstance(swing, str) or not swing:
        raise JobSpecError(f"{label}: 'swing' must be a swing name such as '{DEFAULT_SWING}'")

    backpacker = _flag(entry, "backpacker", label)
    hecs_debt = _flag(entry, "hecsDebt", label)
    superannuation, hours_per_day = parse_superannuation(entry.get("superannuation"), label, super_details)

    if pay_type == "hourly":
        rate = _number(entry, "hourlyRate", label, min_val=0)
        if rate is None:
            raise JobSpecError(f"{label}: hourly jobs need an 'hourlyRate'")
        return HourlyInput(
            rate_per_hour=rate,
            swing=swing,
            use_backpacker_tax_regime=backpacker,
            superannuation=superannuation,
            has_hecs_debt=hecs_debt,
            super_hours_per_day=hours_per_day,
            name=name,
        )

    salary = _number(entry, "salary", label, min_val=0)
    if salary is None:
        raise JobSpecError(f"{label}: salaried jobs need a 'salary'")
    if hours_per_day is not None:
        logger.debug("%s: ignoring superannuation hoursPerDay for a salaried job", label)
    return SalaryInput(
        annual_salary=salary,
        swing=swing,
        use_backpacker_tax_regime=backpacker,
        superannuation=superannuation,
        has_hecs_debt=hecs_debt,
        name=name,
    )


def parse_spec(spec: dict, super_details: Optional[SuperannuationDetails] = None) -> List[JobInput]:
    """Validate a whole spec and return its jobs in order."""
    jobs = spec.get("jobs") if isinstance(spec, dict) else None
    if not jobs or not isinstance(jobs, list):
        raise JobSpecError("spec must contain a 'jobs' array with at least one job")
    if len(jobs) > MAX_JOBS:
        raise JobSpecError(f"spec can compare at most {MAX_JOBS} jobs (got {len(jobs)})")

    parsed = [parse_job(entry, i, super_details) for i, entry in enumerate(jobs)]
    names = [job.name for job in parsed]
    if len(set(names)) != len(names):
        raise JobSpecError(f"Job names must be unique (got {names})")
    return parsed


def spec_path_for(program_name: str, base_path: str) -> str:
    return os.path.join(base_path, 'input-parameters', program_name, 'spec.json')


def load_spec(spec_path: str, super_details: Optional[SuperannuationDetails] = None) -> List[JobInput]:
    """Read and validate a spec.json file.

    Raises:
        FileNotFoundError: if the file does not exist.
        JobSpecError: if the file is not valid JSON or a job is invalid.
    """
    if not os.path.exists(spec_path):
        raise FileNotFoundError(f"Spec file not found: {spec_path}")
    with open(spec_path, 'r') as f:
        try:
            spec = json.load(f)
        except json.JSONDecodeError as e:
            raise JobSpecError(f"{spec_path} is not valid JSON: {e}") from e
    jobs = parse_spec(spec, super_details)
    logger.debug("Loaded %d job(s) from %s", len(jobs), spec_path)
    return jobs


def list_programs(base_path: str) -> List[str]:
    """List program folders under input-parameters that contain a spec.json."""
    input_params_path = os.path.join(base_path, 'input-parameters')
    if not os.path.exists(input_params_path):
        return []

    programs = []
    for name in os.listdir(input_params_path):
        program_dir = os.path.join(input_params_path, name)
        if os.path.isdir(program_dir) and os.path.exists(os.path.join(program_dir, 'spec.json')):
            programs.append(name)
    return sorted(programs)
