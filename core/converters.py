import re
from typing import List, Tuple
from core.calculator import power_magnitude_label
from core.errors import InvalidInputError

_UNIT_FACTORS = {
    "W": 1.0,
    "KW": 1e3,
    "MW": 1e6,
    "GW": 1e9,
    "TW": 1e12,
}

def convert_power_unit(val: float, unit: str) -> float:
    """Converts a power value in W/kW/MW/GW/TW to watts."""
    key = unit.strip().upper()
    if key not in _UNIT_FACTORS:
        raise InvalidInputError(f'Unknown power unit "{unit}"')
    return val * _UNIT_FACTORS[key]

def scale_power(watts: float) -> Tuple[float, str]:
    """Returns (value, short label) with the value expressed in the label's unit."""
    label = power_magnitude_label(watts)
    return watts / _UNIT_FACTORS[label.upper()], label

def format_power(watts: float, use_long_form: bool = False, digits: int = 2) -> str:
    value, label = scale_power(watts)
    if use_long_form:
        label = power_magnitude_label(watts, use_long_form=True)
    return f"{value:.{digits}f} {label}"

def parse_ratings(text: str) -> List[float]:
    """Parses "20, 5 10" style input into a list of ratings (A)."""
    ratings = []
    for token in re.split(r"[,;\s]+", text.strip()):
        if not token:
            continue
        token = token.upper().rstrip("A")
        try:
            value = float(token)
        except ValueError:
            raise InvalidInputError(f'Invalid MCB rating "{token}"') from None
        if not value > 0:
            raise InvalidInputError(f"MCB ratings must be positive numbers, got {value:g}")
        ratings.append(value)
    return ratings
