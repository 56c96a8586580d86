from dataclasses import dataclass
from typing import Mapping, Optional, Sequence
from core.calculator import calculate, compute_power, power_magnitude_label, suggest_breaker_rating
from core.converters import parse_ratings
from core.models import CalculationInputs, CalculationResult, DEFAULT_POWER_FACTOR, DEFAULT_STANDARD, MCBStandard
from standards.iec import MCB_RATING_PRESETS, parse_standard

@dataclass
class CircuitBreaker:
    rated_current: float
    standard: MCBStandard = DEFAULT_STANDARD
    poles: int = 1

@dataclass
class Circuit:
    name: str
    voltage: float
    breaker_current: float  # Rated current of the installed breaker (A)
    power_factor: float = DEFAULT_POWER_FACTOR
    is_three_phase: bool = False
    standard: MCBStandard = DEFAULT_STANDARD
    custom_ratings: Optional[Sequence[float]] = None  # Replaces the standard's table for suggestions

    @property
    def inputs(self) -> CalculationInputs:
        return CalculationInputs(voltage=self.voltage, current=self.breaker_current, power_factor=self.power_factor)

    @property
    def poles(self) -> int:
        return 3 if self.is_three_phase else 1

    @property
    def is_standard_size(self) -> bool:
        return self.breaker_current in MCB_RATING_PRESETS[self.standard]

    @property
    def power_watts(self) -> float:
        return compute_power(self.voltage, self.breaker_current, self.power_factor, self.is_three_phase)

    @property
    def power_label(self) -> str:
        return power_magnitude_label(self.power_watts)

    def calculate(self, suggest: Optional[bool] = None) -> CalculationResult:
        """Runs the calculation; by default only non-standard sizes get a suggestion."""
        if suggest is None:
            suggest = not self.is_standard_size
        return calculate(self.inputs, self.standard, self.is_three_phase, suggest, self.custom_ratings)

    def suggest_breaker(self, standard: Optional[MCBStandard] = None,
                        custom_ratings: Optional[Sequence[float]] = None) -> CircuitBreaker:
        """Standard breaker for the power this circuit delivers."""
        standard = standard or self.standard
        if custom_ratings is None:
            custom_ratings = self.custom_ratings
        rating = suggest_breaker_rating(
            self.power_watts, self.voltage, standard, custom_ratings, self.is_three_phase
        )
        return CircuitBreaker(rated_current=rating, standard=standard, poles=self.poles)

    def breaker_for(self, result: CalculationResult) -> Optional[CircuitBreaker]:
        if result.suggested_rating is None:
            return None
        return CircuitBreaker(rated_current=result.suggested_rating, standard=self.standard, poles=self.poles)

def circuit_from_row(row: Mapping) -> Circuit:
    """
    Builds a Circuit from one row of the circuit table (dict or pandas Series).

    "CustomRatings" holds the ratings as typed ("6, 10, 20"); blank or missing
    means the standard's table.
    """
    custom_text = row.get("CustomRatings")
    custom_ratings = None
    if isinstance(custom_text, str) and custom_text.strip():
        custom_ratings = parse_ratings(custom_text)

    return Circuit(
        name=str(row.get("Circuit", "")),
        voltage=float(row["Voltage"]),
        breaker_current=float(row["MCB"]),
        power_factor=float(row["FP"]),
        is_three_phase=bool(row["ThreePhase"]),
        standard=parse_standard(row["Standard"]),
        custom_ratings=custom_ratings,
    )
