"""
Preset Comparison

Calculates the same bill under every preset tip rate so the party can see
the trade-offs side by side.
"""

from __future__ import annotations

from decimal import Decimal

import pandas as pd

from tipsplit_core.calculator import compute
from tipsplit_core.domain.constants import PRESET_TIP_RATES
from tipsplit_core.domain.entities import BillRequest
from tipsplit_core.domain.errors import BillValidationError
from tipsplit_core.domain.value_objects import RoundingMode

COLUMNS = ["tip_percent", "tip_rate", "tip_amount", "total", "per_person"]


def compare_presets(
    bill_amount: str | int | float | Decimal,
    people_count: int = 1,
    rounding_mode: RoundingMode | str = RoundingMode.NONE,
    rates: list[float] | None = None,
) -> pd.DataFrame:
    """
    Calculate the bill once per preset tip rate.

    Args:
        bill_amount: Bill amount (number or numeric text)
        people_count: Party size
        rounding_mode: Rounding policy applied to every row
        rates: Preset rates as fractions (default: PRESET_TIP_RATES)

    Returns:
        pd.DataFrame: One row per rate, in the given order, with columns
        tip_percent, tip_rate, tip_amount, total, per_person (floats)

    Raises:
        BillValidationError: When the bill amount or people count is invalid
    """
    if rates is None:
        rates = PRESET_TIP_RATES

    rows = []
    for rate in rates:
        outcome = compute(BillRequest(
            bill_amount=bill_amount,
            preset_rate=rate,
            people_count=people_count,
            rounding_mode=rounding_mode,
        ))
        if isinstance(outcome, BillValidationError):
            raise outcome
        rows.append({
            "tip_percent": float(rate) * 100,
            "tip_rate": float(rate),
            "tip_amount": float(outcome.tip_amount),
            "total": float(outcome.total),
            "per_person": float(outcome.per_person),
        })

    return pd.DataFrame(rows, columns=COLUMNS)
