"""
Tip Calculator Configuration

Manages loading from environment variables and default values.
"""

import logging
import os
from dataclasses import dataclass, field, asdict
from decimal import ROUND_HALF_UP, Decimal

from tipsplit_core.domain.constants import (
    DEFAULT_CURRENCY_SYMBOL,
    MAX_PEOPLE,
    MIN_PEOPLE,
    PRESET_TIP_RATES,
    WHOLE_UNIT,
)
from tipsplit_core.domain.value_objects import RoundingMode

logger = logging.getLogger(__name__)


def _env_int(key: str, default: int) -> int:
    """Convert an environment variable to int"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to an integer.")


def _env_str(key: str, default: str) -> str:
    """Get an environment variable as a string"""
    return os.environ.get(key, default)


def _to_percent(rate: float) -> int:
    """Whole percentage for a rate, halves rounded up (0.125 -> 13)"""
    return int(Decimal(str(rate)).scaleb(2).quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP))


def _env_float_list(key: str, default: list[float]) -> list[float]:
    """Convert an environment variable to a comma-separated list of floats"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return [float(x.strip()) for x in val.split(",") if x.strip()]
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to a comma-separated list of numbers.")


@dataclass
class PresetConfig:
    """Quick-select tip presets"""
    rates: list[float] = field(default_factory=lambda: list(PRESET_TIP_RATES))

    def __post_init__(self):
        for rate in self.rates:
            if not Decimal(str(rate)).is_finite() or rate < 0:
                raise ValueError(f"Preset tip rates must be finite and non-negative: {rate}")
        percents = self.percents()
        if len(set(percents)) != len(percents):
            raise ValueError(f"Preset tip rates must map to distinct whole percentages: {percents}")

    def percents(self) -> list[int]:
        """Presets as whole percentages (0.15 -> 15)"""
        return [_to_percent(rate) for rate in self.rates]

    def rate_for_percent(self, percent: int) -> float:
        """Look up the preset rate for a whole percentage"""
        for rate in self.rates:
            if _to_percent(rate) == percent:
                return rate
        raise ValueError(f"No preset for {percent}% (available: {self.percents()})")


@dataclass
class PartyConfig:
    """Party size bounds for host input widgets"""
    min_people: int = MIN_PEOPLE
    max_people: int = MAX_PEOPLE

    def __post_init__(self):
        if self.min_people < 1:
            raise ValueError("min_people must be at least 1")
        if self.max_people < self.min_people:
            raise ValueError("max_people must not be less than min_people")


@dataclass
class DisplayConfig:
    """Display settings"""
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    default_rounding: str = RoundingMode.NONE.value


@dataclass
class AppConfig:
    """Overall tip calculator configuration"""
    presets: PresetConfig = field(default_factory=PresetConfig)
    party: PartyConfig = field(default_factory=PartyConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def rounding_mode(self) -> RoundingMode:
        """Default rounding mode (falls back to no rounding when unknown)"""
        try:
            return RoundingMode.parse(self.display.default_rounding)
        except ValueError:
            logger.warning(
                "Unknown default_rounding '%s', using '%s'.",
                self.display.default_rounding, RoundingMode.NONE.value,
            )
            return RoundingMode.NONE

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {"tipsplit_config": asdict(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """Create from dictionary (handles presence/absence of tipsplit_config key)"""
        config_data = data.get("tipsplit_config", data)
        presets = PresetConfig(**config_data.get("presets", {}))
        party = PartyConfig(**config_data.get("party", {}))
        display = DisplayConfig(**config_data.get("display", {}))
        return cls(presets=presets, party=party, display=display)


def load_config() -> AppConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        AppConfig
    """
    presets = PresetConfig(
        rates=_env_float_list("TIPSPLIT_PRESET_RATES", list(PRESET_TIP_RATES)),
    )
    party = PartyConfig(
        min_people=_env_int("TIPSPLIT_MIN_PEOPLE", MIN_PEOPLE),
        max_people=_env_int("TIPSPLIT_MAX_PEOPLE", MAX_PEOPLE),
    )
    display = DisplayConfig(
        currency_symbol=_env_str("TIPSPLIT_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL),
        default_rounding=_env_str("TIPSPLIT_DEFAULT_ROUNDING", RoundingMode.NONE.value),
    )
    return AppConfig(presets=presets, party=party, display=display)
