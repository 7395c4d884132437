"""Swing patterns and the catalog they are looked up in.

A swing is a repeating on/off roster. The catalog is the only valid source of
swings: the display name (e.g. "2/1") is just a key, and the day counts stored
against it are authoritative.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Dict, List, Optional


logger = logging.getLogger(__name__)

DEFAULT_SWINGS_PATH = os.path.join(os.path.dirname(__file__), '../../reference/swing-options.json')


class UnknownSwingError(ValueError):
    """Raised when a swing name is not present in the catalog."""

    def __init__(self, name: str, available: List[str]):
        self.name = name
        self.available = list(available)
        super().__init__(f"Unknown swing '{name}'. Available swings: {', '.join(self.available)}")


@dataclass(frozen=True)
class SwingPattern:
    name: str
    days_on: int
    days_off: int
    description: str = ""

    def __post_init__(self):
        if self.days_on <= 0:
            raise ValueError(f"Swing '{self.name}' must have at least one day on (got {self.days_on})")
        if self.days_off < 0:
            raise ValueError(f"Swing '{self.name}' cannot have negative days off (got {self.days_off})")


class SwingCatalog:
    """Named swing patterns, in display order.

    Build one with `SwingCatalog.load()` to read reference/swing-options.json,
    or pass patterns directly when the caller owns the catalog.
    """

    def __init__(self, patterns: List[SwingPattern]):
        if not patterns:
            raise ValueError("Swing catalog must contain at least one swing")
        self._patterns: Dict[str, SwingPattern] = {}
        for pattern in patterns:
            if pattern.name in self._patterns:
                raise ValueError(f"Duplicate swing name in catalog: '{pattern.name}'")
            self._patterns[pattern.name] = pattern

    @classmethod
    def load(cls, ref_path: Optional[str] = None) -> 'SwingCatalog':
        ref_path = ref_path or DEFAULT_SWINGS_PATH
        with open(ref_path, 'r') as f:
            data = json.load(f)

        swings = data.get("swings", [])
        if not swings:
            raise ValueError(f"{os.path.basename(ref_path)} must contain a 'swings' array with at least one entry")

        patterns = [
            SwingPattern(
                name=s["name"],
                days_on=s["daysOn"],
                days_off=s["daysOff"],
                description=s.get("description", ""),
            )
            for s in swings
        ]
        logger.debug("Loaded %d swing patterns from %s", len(patterns), ref_path)
        return cls(patterns)

    def lookup(self, name: str) -> SwingPattern:
        """Return the pattern registered under `name`.

        Raises:
            UnknownSwingError: if the name is not in the catalog. There is no
                default swing.
        """
        pattern = self._patterns.get(name)
        if pattern is None:
            logger.warning("Swing '%s' not found in catalog", name)
            raise UnknownSwingError(name, self.names())
        return pattern

    def names(self) -> List[str]:
        return list(self._patterns.keys())

    def patterns(self) -> List[SwingPattern]:
        return list(self._patterns.values())

    def __contains__(self, name: str) -> bool:
        return name in self._patterns

    def __len__(self) -> int:
        return len(self._patterns)
