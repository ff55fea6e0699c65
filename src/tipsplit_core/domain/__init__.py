"""
Domain Layer

Defines constants, entities, value objects and errors that form the core of
the calculation logic. Has no dependencies on external libraries.
"""

from tipsplit_core.domain.constants import (
    DEFAULT_CURRENCY_SYMBOL,
    MAX_PEOPLE,
    MIN_PEOPLE,
    PRESET_TIP_RATES,
    TIP_PLACEHOLDER,
)
from tipsplit_core.domain.entities import (
    BillInput,
    BillRequest,
    CalculationResult,
)
from tipsplit_core.domain.errors import (
    BillValidationError,
    InvalidBillAmount,
    InvalidPeopleCount,
    MissingOrInvalidTip,
    NumericParseError,
)
from tipsplit_core.domain.value_objects import (
    RoundingMode,
    SummaryFields,
)

__all__ = [
    # constants
    "DEFAULT_CURRENCY_SYMBOL",
    "MAX_PEOPLE",
    "MIN_PEOPLE",
    "PRESET_TIP_RATES",
    "TIP_PLACEHOLDER",
    # entities
    "BillInput",
    "BillRequest",
    "CalculationResult",
    # errors
    "BillValidationError",
    "InvalidBillAmount",
    "InvalidPeopleCount",
    "MissingOrInvalidTip",
    "NumericParseError",
    # value objects
    "RoundingMode",
    "SummaryFields",
]
