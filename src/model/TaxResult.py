from dataclasses import dataclass

@dataclass(frozen=True)
class TaxResult:
    totalTax: float
    marginalRate: float
    regime: str = "standard"
