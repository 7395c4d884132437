import json
import logging
import os
from typing import Optional
from model.TaxResult import TaxResult

logger = logging.getLogger(__name__)

STANDARD = "standard"
BACKPACKER = "backpacker"

class IncomeTaxDetails:
	def __init__(self, ref_path: Optional[str] = None):
		"""
		ref_path: optional path to an income tax reference file; defaults to
		reference/income-tax-details.json
		"""
		self.ref_path = ref_path or os.path.join(os.path.dirname(__file__), '../../reference/income-tax-details.json')
		self.tax_year = None
		self.brackets_by_regime = {}
		self._load_brackets()

	def _load_brackets(self):
		with open(self.ref_path, 'r') as f:
			data = json.load(f)

		self.tax_year = data.get("taxYear")
		regimes = data.get("regimes", {})
		if not regimes:
			raise ValueError("income-tax-details.json must contain a 'regimes' object with at least one entry")

		for regime, regime_data in regimes.items():
			raw = regime_data.get("brackets", [])
			if not raw:
				raise ValueError(f"Regime '{regime}' must contain at least one bracket")
			brackets = []
			for i, b in enumerate(raw):
				rate = b["rate"]
				if rate > 1:
					rate = rate / 100.0
				max_income = b["maxIncome"]
				if max_income is None:
					if i != len(raw) - 1:
						raise ValueError(f"Regime '{regime}': only the last bracket may be open-ended")
					max_income = float("inf")
				if brackets and max_income <= brackets[-1]["maxIncome"]:
					raise ValueError(f"Regime '{regime}': bracket limits must be increasing (got {max_income} after {brackets[-1]['maxIncome']})")
				brackets.append({
					"maxIncome": max_income,
					"rate": rate,
					"baseAmount": b["baseAmount"]
				})
			if brackets[-1]["maxIncome"] != float("inf"):
				raise ValueError(f"Regime '{regime}': the last bracket must be open-ended (maxIncome null)")
			self.brackets_by_regime[regime] = brackets

		logger.debug("Loaded %s income tax regimes for %s: %s", len(self.brackets_by_regime), self.tax_year, ", ".join(self.brackets_by_regime))

	def regimes(self) -> list:
		return list(self.brackets_by_regime.keys())

	def taxBurden(self, income: float, regime: str = STANDARD) -> TaxResult:
		"""
		Returns a TaxResult with the annual tax owed and marginal rate for the given income.

		Each bracket taxes only the income above the previous bracket's limit, on top of
		the bracket's base amount, so the schedule is continuous at every limit. Income is
		expected to be non-negative; negative values are not rejected here.
		"""
		if regime not in self.brackets_by_regime:
			raise ValueError(f"No tax brackets available for regime '{regime}'")
		brackets = self.brackets_by_regime[regime]
		floor = 0
		for b in brackets:
			if income <= b["maxIncome"]:
				total_tax = b["baseAmount"] + (income - floor) * b["rate"]
				return TaxResult(totalTax=total_tax, marginalRate=b["rate"], regime=regime)
			floor = b["maxIncome"]
		# Should not reach here, the last bracket is open-ended
		raise ValueError("Income exceeds all bracket definitions.")

	def tax(self, income: float, regime: str = STANDARD) -> float:
		"""Annual tax owed on `income` under `regime`."""
		return self.taxBurden(income, regime).totalTax

	def regime_for(self, use_backpacker_tax_regime: bool) -> str:
		return BACKPACKER if use_backpacker_tax_regime else STANDARD
