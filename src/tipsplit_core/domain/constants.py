"""
Domain Constants

Centrally manages constants shared by the calculator, formatter and hosts.
"""

from decimal import Decimal

# Preset tip rates (fraction of the bill)
PRESET_TIP_RATES = [0.10, 0.12, 0.15, 0.18, 0.20, 0.25]

# Party size bounds enforced by the hosts' input widgets
MIN_PEOPLE = 1
MAX_PEOPLE = 100

# Rounding granularity: whole major currency units, not cents
WHOLE_UNIT = Decimal("1")
CENT = Decimal("0.01")

# Shown in the summary when no tip percentage can be resolved
TIP_PLACEHOLDER = "—"

DEFAULT_CURRENCY_SYMBOL = "$"

# Labels shown by the original rounding selector
ROUNDING_LABELS = {
    "none": "No rounding",
    "round_total": "Round total",
    "round_per_person": "Round per person",
}

# Status line texts
STATUS_READY = "Ready"
STATUS_CALCULATED = "Calculated"
