"""
Input Parser

Converts raw host input (text fields, preset selection, spinner value) into a
validated BillInput. Validation runs bill -> tip -> people; the first failure
is raised as a BillValidationError subclass.
"""

from decimal import Decimal, InvalidOperation

from tipsplit_core.domain.entities import BillInput, BillRequest
from tipsplit_core.domain.errors import (
    InvalidBillAmount,
    InvalidPeopleCount,
    MissingOrInvalidTip,
    NumericParseError,
)

_HUNDRED = Decimal(100)


def to_decimal(value: object) -> Decimal:
    """
    Convert a number or numeric text to Decimal

    Floats go through str() so that 0.15 becomes Decimal("0.15") rather than
    its binary expansion.

    Raises:
        NumericParseError: Text that does not parse as a number
        TypeError: Values that are neither text nor numbers
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            raise NumericParseError(f"Cannot parse {value!r} as a number")
    raise TypeError(f"Expected a number, got {type(value).__name__}")


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_bill_amount(value: object) -> Decimal:
    """
    Parse and validate the bill amount

    Returns:
        Bill amount (finite, > 0)

    Raises:
        InvalidBillAmount: Missing, non-numeric, non-finite, zero or negative
        NumericParseError: Non-empty text that is not a number
    """
    if _is_blank(value):
        raise InvalidBillAmount("bill amount is missing")
    try:
        amount = to_decimal(value)
    except TypeError as e:
        raise InvalidBillAmount(str(e))
    if not amount.is_finite() or amount <= 0:
        raise InvalidBillAmount(f"bill amount must be a positive number: {value!r}")
    return amount


def resolve_tip_rate(preset_rate: object, custom_tip_percent: object) -> Decimal:
    """
    Resolve the tip rate from the preset selection and the custom field

    A non-empty custom percentage takes precedence over the preset.

    Args:
        preset_rate: Selected preset as a fraction (e.g. 0.15), or None
        custom_tip_percent: Custom percentage (e.g. "17"), or None/empty

    Returns:
        Tip rate as a fraction (finite, >= 0)

    Raises:
        MissingOrInvalidTip: Nothing resolvable, or the rate is negative or non-finite
        NumericParseError: Custom text that is not a number
    """
    if not _is_blank(custom_tip_percent):
        try:
            percent = to_decimal(custom_tip_percent)
        except TypeError as e:
            raise MissingOrInvalidTip(str(e))
        # sNaN would signal on division
        rate = percent / _HUNDRED if percent.is_finite() else percent
    elif preset_rate is not None:
        try:
            rate = to_decimal(preset_rate)
        except (TypeError, NumericParseError) as e:
            raise MissingOrInvalidTip(str(e))
    else:
        raise MissingOrInvalidTip("no preset selected and no custom tip entered")

    if not rate.is_finite() or rate < 0:
        raise MissingOrInvalidTip(f"tip rate must be a non-negative number: {rate}")
    return rate


def parse_people_count(value: object) -> int:
    """
    Parse and validate the party size

    Raises:
        InvalidPeopleCount: Not an integer, or less than 1
        NumericParseError: Text that is not an integer
    """
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise NumericParseError(f"Cannot parse {value!r} as a whole number")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidPeopleCount(f"people count must be an integer: {value!r}")
    if value < 1:
        raise InvalidPeopleCount(f"people count must be at least 1: {value}")
    return value


def build_bill_input(request: BillRequest) -> BillInput:
    """
    Validate a raw request and build the BillInput

    Raises:
        BillValidationError: The first validation failure (bill, then tip, then people)
    """
    bill_amount = parse_bill_amount(request.bill_amount)
    tip_rate = resolve_tip_rate(request.preset_rate, request.custom_tip_percent)
    people_count = parse_people_count(request.people_count)
    return BillInput(
        bill_amount=bill_amount,
        tip_rate=tip_rate,
        people_count=people_count,
        rounding_mode=request.rounding_mode,
    )
