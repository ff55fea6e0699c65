"""
Domain Errors

Validation failures reported by the calculation engine. compute() returns
these as values; the parsing helpers raise them.
"""


class BillValidationError(ValueError):
    """Base class for every validation failure"""

    code = "invalid_input"
    status_message = "Invalid input"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail
        super().__init__(detail or self.status_message)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((type(self), self.detail))


class InvalidBillAmount(BillValidationError):
    """Bill is missing, non-numeric, non-finite, zero or negative"""
    code = "invalid_bill_amount"
    status_message = "Enter a valid bill amount"


class MissingOrInvalidTip(BillValidationError):
    """No tip source resolvable, or the resolved rate is negative or non-finite"""
    code = "missing_or_invalid_tip"
    status_message = "Pick a tip or enter a custom %"


class InvalidPeopleCount(BillValidationError):
    """People count is not an integer >= 1"""
    code = "invalid_people_count"
    status_message = "People must be at least 1"


class NumericParseError(BillValidationError):
    """A numeric text input could not be parsed at all"""
    code = "numeric_parse_error"
    status_message = "Invalid number format"
