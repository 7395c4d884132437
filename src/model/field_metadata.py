"""Field metadata for JobResults fields.

Short names are used as row labels in the result tables and as keys in the
comparison output; `kind` tells the renderers how to format the value.
"""

from dataclasses import dataclass
from typing import Dict


@dataclass
class FieldInfo:
    """Metadata for a single field."""
    short_name: str  # Row label (unique, concise)
    description: str  # Full description of the field
    kind: str = "currency"  # currency, number, count, percent, rate or text


# Field metadata dictionary mapping field names to their info
FIELD_METADATA: Dict[str, FieldInfo] = {
    # Job
    "swing": FieldInfo("Swing", "Roster name, e.g. 8/6 for 8 days on and 6 days off", "text"),
    "pay_type": FieldInfo("Pay Type", "Hourly rate or annual salary", "text"),
    "tax_regime": FieldInfo("Tax Regime", "Standard resident rates or backpacker rates", "text"),

    # Swing geometry
    "swing_cycle_length": FieldInfo("Cycle Length (days)", "Days on plus days off", "count"),
    "cycles_per_month": FieldInfo("Swings per Month", "Average swing cycles per month", "number"),
    "cycles_per_year": FieldInfo("Swings per Year", "Average swing cycles per year", "number"),
    "working_days_per_month": FieldInfo("Working Days per Month", "Average days worked per month", "number"),

    # Pay
    "daily_pay": FieldInfo("Daily Pay", "Gross pay for one 12-hour day"),
    "gross_swing": FieldInfo("Gross per Swing", "Gross pay for one swing cycle"),
    "net_swing": FieldInfo("Net per Swing", "Take-home pay for one swing cycle"),
    "gross_month": FieldInfo("Gross per Month", "Gross pay per month"),
    "net_month": FieldInfo("Net per Month", "Take-home pay per month"),
    "gross_year": FieldInfo("Gross per Year", "Gross pay per year"),
    "net_year": FieldInfo("Net per Year", "Take-home pay per year"),
    "estimated_hourly": FieldInfo("Estimated Hourly", "Salary expressed as an hourly rate over 12-hour days"),

    # Deductions
    "annual_tax": FieldInfo("Tax per Year", "Income tax on the annual gross pay"),
    "swing_tax": FieldInfo("Tax per Swing", "Annual tax spread evenly across swings"),
    "hecs_per_year": FieldInfo("HECS per Year", "Compulsory HECS-HELP repayment per year"),
    "hecs_per_swing": FieldInfo("HECS per Swing", "Annual HECS repayment spread evenly across swings"),
    "effective_tax_rate": FieldInfo("Effective Rate", "Tax plus HECS as a share of gross pay", "percent"),

    # Superannuation
    "super_per_year": FieldInfo("Super per Year", "Employer superannuation per year"),
    "super_per_month": FieldInfo("Super per Month", "Employer superannuation per month"),
    "super_per_swing": FieldInfo("Super per Swing", "Employer superannuation per swing"),
    "super_rate": FieldInfo("Super Rate", "Employer superannuation rate", "rate"),
}


def get_short_name(field_name: str) -> str:
    """Get the short name for a field, or the field name if not found."""
    info = FIELD_METADATA.get(field_name)
    return info.short_name if info else field_name


def get_description(field_name: str) -> str:
    """Get the description for a field, or empty string if not found."""
    info = FIELD_METADATA.get(field_name)
    return info.description if info else ""


def format_value(field_name: str, value) -> str:
    """Format a field value for display according to its kind."""
    if value is None:
        return "-"
    info = FIELD_METADATA.get(field_name)
    kind = info.kind if info else "number"
    if kind == "currency":
        sign = "-" if value < 0 else ""
        return f"{sign}${abs(value):,.2f}"
    if kind == "percent":
        return f"{value:.1%}"
    if kind == "rate":
        return f"{value:,.2f}%"
    if kind == "number":
        return f"{value:,.2f}"
    if kind == "count":
        return f"{value:,}"
    return str(value)
