"""
Electrical sizing engine.

Pure functions: power from V/I/PF, smallest adequate MCB rating for a given
wattage and a magnitude label for display. Nothing here keeps state or logs.
"""
import math
from typing import Optional, Sequence
from core.errors import InvalidInputError, RatingOutOfRangeError
from core.models import (
    BreakerSizeOptions, CalculationInputs, CalculationResult, DEFAULT_POWER_FACTOR,
    DEFAULT_STANDARD, LONG_POWER_LABELS, MCBStandard, PowerOptions, SHORT_POWER_LABELS,
)
from standards.iec import MCB_RATING_PRESETS, largest_rating, parse_standard

SQRT_3 = math.sqrt(3)  # 1.7320508075688772

# Table identifier reported when a custom rating table is exhausted
CUSTOM_TABLE_NAME = "custom"

# (lower bound in watts, index into the label tuples), highest first
_MAGNITUDE_LADDER = (
    (1e12, 4),  # Tera
    (1e9, 3),   # Giga
    (1e6, 2),   # Mega
    (1e3, 1),   # Kilo
)

def _is_positive(value) -> bool:
    # NaN fails every comparison, so it is rejected here too
    try:
        return value > 0
    except TypeError:
        return False

def compute_power(
    voltage: float,
    current: float,
    power_factor: float = DEFAULT_POWER_FACTOR,
    is_three_phase: bool = False,
    options: Optional[PowerOptions] = None,
) -> float:
    """
    Power in watts.

        P = V * I * PF          (single-phase)
        P = √3 * V * I * PF     (three-phase)

    ``options`` takes precedence over ``power_factor`` and ``is_three_phase``.
    Raises InvalidInputError when V or I are not positive or PF is outside (0, 1].
    """
    if options is not None:
        power_factor = options.power_factor
        is_three_phase = options.is_three_phase

    if not (_is_positive(voltage) and _is_positive(current) and _is_positive(power_factor)):
        raise InvalidInputError("All input values must be positive numbers")
    if power_factor > 1:
        raise InvalidInputError("Power factor value cannot be greater than 1")

    # Three-phase scaling is folded into the voltage term
    effective_voltage = voltage * SQRT_3 if is_three_phase else voltage
    return effective_voltage * current * power_factor

def required_current(wattage: float, voltage: float, is_three_phase: bool = False) -> float:
    """I = P / V, or I = √3 * P / V for three-phase."""
    if not (_is_positive(wattage) and _is_positive(voltage)):
        raise InvalidInputError("Wattage and voltage must be positive numbers.")
    return (SQRT_3 if is_three_phase else 1) * wattage / voltage

def suggest_breaker_rating(
    wattage: float,
    voltage: float,
    standard: MCBStandard = DEFAULT_STANDARD,
    custom_ratings: Optional[Sequence[float]] = None,
    is_three_phase: bool = False,
    options: Optional[BreakerSizeOptions] = None,
) -> float:
    """
    Smallest rating that can carry the current drawn by ``wattage`` at ``voltage``.

    ``custom_ratings`` replaces the standard's table; it may be unsorted and is
    never modified. Raises RatingOutOfRangeError when the current exceeds the
    largest rating (an empty custom table included).
    """
    if options is not None:
        standard = options.standard
        custom_ratings = options.custom_ratings
        is_three_phase = options.is_three_phase

    current = required_current(wattage, voltage, is_three_phase)

    if custom_ratings is not None:
        if not all(_is_positive(r) for r in custom_ratings):
            raise InvalidInputError("Custom MCB ratings must be positive numbers.")
        ratings = custom_ratings
        table_name = CUSTOM_TABLE_NAME
    else:
        standard = parse_standard(standard)
        ratings = MCB_RATING_PRESETS[standard]
        table_name = standard.value

    for size in sorted(ratings):
        if current <= size:
            return size

    raise RatingOutOfRangeError(current, table_name)

def power_magnitude_label(power: float, use_long_form: bool = False) -> str:
    """
    Unit label for a wattage: W, kW, MW, GW or TW (long form: "Watts" ... "Tera Watts").
    Each tier includes its lower bound; anything below 1 kW, negatives included, is W.
    """
    labels = LONG_POWER_LABELS if use_long_form else SHORT_POWER_LABELS
    for bound, index in _MAGNITUDE_LADDER:
        if power >= bound:
            return labels[index]
    return labels[0]

def _format_number(value: float) -> str:
    return f"{value:g}"

def calculate(
    inputs: CalculationInputs,
    standard: MCBStandard = DEFAULT_STANDARD,
    is_three_phase: bool = False,
    suggest: bool = True,
    custom_ratings: Optional[Sequence[float]] = None,
) -> CalculationResult:
    """
    Full calculation for one breaker: power it can deliver and, when ``suggest``
    is set (custom breaker sizes), the standard rating to use instead.
    ``custom_ratings`` replaces the standard's table for the suggestion.

    An out-of-range suggestion falls back to the largest rating of the table and
    is reported as an error message on the result. InvalidInputError propagates.
    """
    standard = parse_standard(standard)
    power = compute_power(inputs.voltage, inputs.current, inputs.power_factor, is_three_phase)
    result = CalculationResult(
        power_watts=power,
        power_label=power_magnitude_label(power),
        standard=standard,
        is_three_phase=is_three_phase,
    )

    if suggest:
        try:
            result.suggested_rating = suggest_breaker_rating(
                power, inputs.voltage, standard, custom_ratings, is_three_phase
            )
        except RatingOutOfRangeError as e:
            result.suggested_rating = (
                max(custom_ratings, default=None) if custom_ratings is not None else largest_rating(standard)
            )
            result.message = ("error", str(e))
            return result

    v = _format_number(inputs.voltage)
    i = _format_number(inputs.current)
    pf = _format_number(inputs.power_factor)
    formula = f"√3 × {v}V × {i}A × {pf}" if is_three_phase else f"{v}V × {i}A × {pf}"
    result.message = ("info", f"Calculation successful: {formula} = {power:.2f}W")
    return result
