"""
Summary Formatting

Renders a calculation and its inputs as the fixed multi-line text block that
hosts copy to the clipboard. Formatting never fails: missing values degrade
to placeholders.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation, getcontext

from tipsplit_core.domain.constants import CENT, DEFAULT_CURRENCY_SYMBOL, TIP_PLACEHOLDER
from tipsplit_core.domain.entities import BillRequest, CalculationResult
from tipsplit_core.domain.value_objects import SummaryFields

logger = logging.getLogger(__name__)

SEPARATOR = "—"


def format_currency(value: object, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """
    Format an amount as currency with two decimals

    Args:
        value: Amount (Decimal, number or numeric text)
        symbol: Currency symbol placed before the digits

    Returns:
        e.g. "$1,234.50", "-$5.00". "$0.00" for None, non-finite or unparseable values.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        amount = Decimal(0)
    if not amount.is_finite():
        amount = Decimal(0)
    # widen precision so large amounts keep their cents
    context = Context(prec=max(getcontext().prec, amount.adjusted() + 3))
    amount = amount.quantize(CENT, rounding=ROUND_HALF_UP, context=context)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def describe_tip_percent(
    preset_rate: float | Decimal | None,
    custom_tip_percent: object = None,
) -> str | None:
    """
    Describe the tip percentage the way the user entered it

    Custom text is shown verbatim; otherwise the preset is shown with one decimal.

    Returns:
        e.g. "17", "15.0", or None when neither source is set or the preset is unusable
    """
    if custom_tip_percent is not None and str(custom_tip_percent).strip():
        return str(custom_tip_percent).strip()
    if preset_rate is None:
        return None
    try:
        rate = preset_rate if isinstance(preset_rate, Decimal) else Decimal(str(preset_rate).strip())
    except InvalidOperation:
        return None
    if not rate.is_finite():
        return None
    return f"{rate * 100:.1f}"


def build_summary_fields(
    request: BillRequest,
    result: CalculationResult | None,
    symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> SummaryFields:
    """
    Build display strings for a request and its result

    Args:
        request: Raw host input
        result: Calculation result, or None if nothing has been calculated
        symbol: Currency symbol

    Returns:
        SummaryFields
    """
    zero = format_currency(0, symbol)
    return SummaryFields(
        bill=format_currency(request.bill_amount, symbol),
        tip_percent=describe_tip_percent(request.preset_rate, request.custom_tip_percent),
        people=str(request.people_count),
        tip_amount=format_currency(result.tip_amount, symbol) if result else zero,
        total=format_currency(result.total, symbol) if result else zero,
        per_person=format_currency(result.per_person, symbol) if result else zero,
    )


def format_summary(fields: SummaryFields) -> str:
    """
    Render the summary block

    Args:
        fields: Pre-formatted display strings

    Returns:
        Multi-line summary text
    """
    tip_percent = fields.tip_percent
    if not tip_percent:
        logger.debug("No tip percentage resolved, using placeholder")
        tip_percent = TIP_PLACEHOLDER
    return "\n".join([
        f"Bill: {fields.bill}",
        f"Tip: {tip_percent}%",
        f"People: {fields.people}",
        SEPARATOR,
        f"Tip Amount: {fields.tip_amount}",
        f"Total: {fields.total}",
        f"Per Person: {fields.per_person}",
    ])
