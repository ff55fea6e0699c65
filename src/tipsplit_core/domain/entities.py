"""
Domain Entities

Defines the request, validated input and result of a single calculation.
All entities are immutable; each calculation builds fresh instances.
"""

from dataclasses import dataclass
from decimal import Decimal

from tipsplit_core.domain.errors import (
    InvalidBillAmount,
    InvalidPeopleCount,
    MissingOrInvalidTip,
)
from tipsplit_core.domain.value_objects import RoundingMode


@dataclass(frozen=True)
class BillRequest:
    """Raw input as collected by a host (text fields, preset selection, spinner)"""
    bill_amount: str | int | float | Decimal | None
    preset_rate: float | Decimal | None = None        # fraction, e.g. 0.15
    custom_tip_percent: str | int | float | Decimal | None = None  # percentage, e.g. "17"
    people_count: int | str = 1
    rounding_mode: RoundingMode | str = RoundingMode.NONE

    def __post_init__(self):
        object.__setattr__(self, "rounding_mode", RoundingMode.parse(self.rounding_mode))


@dataclass(frozen=True)
class BillInput:
    """Validated calculation input"""
    bill_amount: Decimal
    tip_rate: Decimal
    people_count: int
    rounding_mode: RoundingMode = RoundingMode.NONE

    def __post_init__(self):
        if not self.bill_amount.is_finite() or self.bill_amount <= 0:
            raise InvalidBillAmount(f"bill_amount must be positive: {self.bill_amount}")
        if not self.tip_rate.is_finite() or self.tip_rate < 0:
            raise MissingOrInvalidTip(f"tip_rate must be non-negative: {self.tip_rate}")
        if isinstance(self.people_count, bool) or not isinstance(self.people_count, int) \
                or self.people_count < 1:
            raise InvalidPeopleCount(f"people_count must be at least 1: {self.people_count!r}")


@dataclass(frozen=True)
class CalculationResult:
    """Result of a single calculation"""
    tip_amount: Decimal
    total: Decimal
    per_person: Decimal
