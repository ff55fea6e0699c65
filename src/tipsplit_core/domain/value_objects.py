"""
Domain Value Objects

Defines immutable values: the rounding policy and the display strings
consumed by the summary formatter.
"""

from dataclasses import dataclass
from enum import Enum

from tipsplit_core.domain.constants import ROUNDING_LABELS


class RoundingMode(Enum):
    """Rounding policy applied after the base computation"""
    NONE = "none"
    ROUND_TOTAL = "round_total"
    ROUND_PER_PERSON = "round_per_person"

    @property
    def label(self) -> str:
        return ROUNDING_LABELS[self.value]

    @classmethod
    def parse(cls, value: "RoundingMode | str") -> "RoundingMode":
        """
        Resolve a rounding mode from an enum member, its value or its display label

        Args:
            value: e.g. RoundingMode.ROUND_TOTAL, "round_total", "round-total", "Round total"

        Returns:
            RoundingMode

        Raises:
            ValueError: When the value names no known mode
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_").replace(" ", "_")
            for mode in cls:
                if key == mode.value or value.strip().lower() == mode.label.lower():
                    return mode
            # hyphen/underscore spellings of the "No rounding" label
            if key == "no_rounding":
                return cls.NONE
        raise ValueError(
            f"Unknown rounding mode: {value!r} (available: {[m.value for m in cls]})"
        )


@dataclass(frozen=True)
class SummaryFields:
    """Pre-formatted display strings for the summary block"""
    bill: str
    tip_percent: str | None
    people: str
    tip_amount: str
    total: str
    per_person: str
