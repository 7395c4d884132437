import json
import logging
import os
from typing import Optional


logger = logging.getLogger(__name__)


class HecsDetails:
    """Holds HECS-HELP compulsory repayment bands and computes repayments.

    Unlike income tax, a band's rate applies to the whole income once the
    income falls in that band. Crossing a band limit therefore steps the
    repayment up by a noticeable amount; that step is part of the schedule.
    """

    def __init__(self, ref_path: Optional[str] = None):
        """Initialize by loading the repayment bands.

        Args:
            ref_path: Path to the repayment reference file. Defaults to
                reference/hecs-repayment.json.
        """
        self.ref_path = ref_path or os.path.join(os.path.dirname(__file__), '../../reference/hecs-repayment.json')
        self.tax_year = None
        self.repayment_threshold = 0.0
        self.bands = []
        self._load_bands()

    def _load_bands(self):
        """Load the threshold and bands from JSON and validate their order."""
        with open(self.ref_path, 'r') as f:
            data = json.load(f)

        self.tax_year = data.get("taxYear")
        if "repaymentThreshold" not in data:
            raise ValueError("hecs-repayment.json must contain a 'repaymentThreshold'")
        self.repayment_threshold = data["repaymentThreshold"]

        raw = data.get("bands", [])
        if not raw:
            raise ValueError("hecs-repayment.json must contain a 'bands' array with at least one entry")

        previous_max = self.repayment_threshold
        for i, b in enumerate(raw):
            max_income = b["maxIncome"]
            if max_income is None:
                if i != len(raw) - 1:
                    raise ValueError("Only the last HECS repayment band may be open-ended")
                max_income = float("inf")
            if max_income < previous_max:
                raise ValueError(f"HECS repayment bands must be increasing. {max_income} follows {previous_max}")
            self.bands.append({"maxIncome": max_income, "rate": b["rate"]})
            previous_max = max_income

        if self.bands[-1]["maxIncome"] != float("inf"):
            raise ValueError("The last HECS repayment band must be open-ended (maxIncome null)")

        logger.debug("Loaded %d HECS repayment bands for %s", len(self.bands), self.tax_year)

    def repayment_rate(self, annual_income: float) -> float:
        """Return the fraction of total income repaid at this income level."""
        if annual_income < self.repayment_threshold:
            return 0.0
        for b in self.bands:
            if annual_income <= b["maxIncome"]:
                return b["rate"]
        # Last band is open-ended
        return self.bands[-1]["rate"]

    def repayment(self, annual_income: float) -> float:
        """Calculate the compulsory repayment for a year's income.

        Args:
            annual_income: Total annual income.

        Returns:
            The repayment amount (0 below the repayment threshold).
        """
        return annual_income * self.repayment_rate(annual_income)
