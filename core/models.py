from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

class MCBStandard(Enum):
    RESIDENTIAL_COMMERCIAL = "IEC_60898-1"  # Residential or commercial use
    INDUSTRIAL = "IEC_60947-2"              # Industrial use

DEFAULT_POWER_FACTOR = 1.0
DEFAULT_STANDARD = MCBStandard.RESIDENTIAL_COMMERCIAL
DEFAULT_VOLTAGE = 230.0

SHORT_POWER_LABELS = ("W", "kW", "MW", "GW", "TW")
LONG_POWER_LABELS = ("Watts", "Kilo Watts", "Mega Watts", "Giga Watts", "Tera Watts")

@dataclass(frozen=True)
class StandardInfo:
    label: str
    description: str

@dataclass(frozen=True)
class CalculationInputs:
    voltage: float
    current: float  # Breaker rated current (A)
    power_factor: float = DEFAULT_POWER_FACTOR

@dataclass(frozen=True)
class PowerOptions:
    power_factor: float = DEFAULT_POWER_FACTOR
    is_three_phase: bool = False

@dataclass(frozen=True)
class BreakerSizeOptions:
    """Options for the breaker suggestion.

    ``custom_ratings`` overrides ``standard`` entirely when given.
    """
    standard: MCBStandard = DEFAULT_STANDARD
    custom_ratings: Optional[Sequence[float]] = None
    is_three_phase: bool = False

@dataclass
class CalculationResult:
    power_watts: float
    power_label: str
    standard: MCBStandard
    is_three_phase: bool
    suggested_rating: Optional[float] = None
    message: Tuple[str, str] = ("info", "")  # (kind, text), kind is "info" or "error"

    @property
    def is_error(self) -> bool:
        return self.message[0] == "error"
