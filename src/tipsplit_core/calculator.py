"""
Tip Calculation

Computes the tip amount, total and per-person share for a validated input,
and applies the rounding policy. Rounding is to whole major currency units
(dollars, not cents), half away from zero.
"""

from decimal import ROUND_HALF_UP, Context, Decimal, Overflow, getcontext

from tipsplit_core.domain.constants import WHOLE_UNIT
from tipsplit_core.domain.entities import BillInput, BillRequest, CalculationResult
from tipsplit_core.domain.errors import BillValidationError, InvalidBillAmount
from tipsplit_core.domain.value_objects import RoundingMode
from tipsplit_core.input_parser import build_bill_input


def round_to_whole_unit(amount: Decimal) -> Decimal:
    """
    Round to the nearest whole currency unit, halves away from zero

    Args:
        amount: Amount in major units (e.g. 14.75)

    Returns:
        Rounded amount (e.g. 15)
    """
    # widen precision so amounts beyond 28 digits still land on a whole unit
    context = Context(prec=max(getcontext().prec, amount.adjusted() + 2))
    return amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP, context=context)


def apply_rounding(
    total: Decimal,
    per_person: Decimal,
    people_count: int,
    mode: RoundingMode,
) -> tuple[Decimal, Decimal]:
    """
    Apply the rounding policy to the total and per-person share

    Args:
        total: Unrounded total
        per_person: Unrounded per-person share
        people_count: Party size (>= 1)
        mode: Rounding policy

    Returns:
        (total, per_person) after rounding. The tip amount is never re-derived.
    """
    if mode is RoundingMode.ROUND_TOTAL:
        total = round_to_whole_unit(total)
        per_person = total / people_count
    elif mode is RoundingMode.ROUND_PER_PERSON:
        per_person = round_to_whole_unit(per_person)
        total = per_person * people_count
    return total, per_person


def calculate(bill_input: BillInput) -> CalculationResult:
    """
    Calculate tip, total and per-person share

    tip_amount = bill * tip_rate
    total      = bill + tip_amount
    per_person = total / people

    Args:
        bill_input: Validated input

    Returns:
        CalculationResult
    """
    tip_amount = bill_input.bill_amount * bill_input.tip_rate
    total = bill_input.bill_amount + tip_amount
    per_person = total / bill_input.people_count
    total, per_person = apply_rounding(
        total, per_person, bill_input.people_count, bill_input.rounding_mode,
    )
    return CalculationResult(tip_amount=tip_amount, total=total, per_person=per_person)


def compute(request: BillRequest) -> CalculationResult | BillValidationError:
    """
    Validate a raw request and calculate

    Validation failures are returned, not raised, so the caller can map each
    one to a status message.

    Args:
        request: Raw host input

    Returns:
        CalculationResult, or the first BillValidationError encountered
    """
    try:
        bill_input = build_bill_input(request)
    except BillValidationError as e:
        return e
    try:
        return calculate(bill_input)
    except Overflow:
        return InvalidBillAmount(f"bill amount is out of range: {request.bill_amount!r}")
