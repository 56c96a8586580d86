from types import MappingProxyType
from typing import Tuple
from core.errors import InvalidInputError
from core.models import MCBStandard, StandardInfo

# Standard MCB ratings (Amps), ascending
MCB_RATING_PRESETS = MappingProxyType({
    # IEC 60898-1, up to 125A
    MCBStandard.RESIDENTIAL_COMMERCIAL: (
        1, 2, 4, 6, 10, 13, 16, 20, 25, 32, 40, 50, 63, 80, 100, 125
    ),
    # IEC 60947-2, up to 6300A
    MCBStandard.INDUSTRIAL: (
        0.5, 1, 2, 4, 6, 10, 16, 20, 25, 32, 40, 50, 63,
        100, 160, 250, 400, 630, 800, 1000,
        1600, 2500, 3200, 4000, 5000, 6300
    ),
})

MCB_STANDARDS_INFO = MappingProxyType({
    MCBStandard.RESIDENTIAL_COMMERCIAL: StandardInfo(
        label="IEC 60898-1 (Residential/Commercial)",
        description="For residential or commercial applications with ratings up to 125A.",
    ),
    MCBStandard.INDUSTRIAL: StandardInfo(
        label="IEC 60947-2 (Industrial)",
        description="For industrial applications with ratings up to 6300A.",
    ),
})

def get_ratings(standard: MCBStandard) -> Tuple[float, ...]:
    return MCB_RATING_PRESETS[standard]

def get_standard_info(standard: MCBStandard) -> StandardInfo:
    return MCB_STANDARDS_INFO[standard]

def largest_rating(standard: MCBStandard) -> float:
    return MCB_RATING_PRESETS[standard][-1]

def parse_standard(text) -> MCBStandard:
    """
    Resolves a standard from its enum value ("IEC_60898-1"), enum name
    ("INDUSTRIAL") or a loose number such as "60947-2" / "IEC 60947".
    """
    if isinstance(text, MCBStandard):
        return text
    raw = str(text).strip()
    for standard in MCBStandard:
        if raw == standard.value or raw.upper() == standard.name:
            return standard

    # Loose match on the IEC number
    compact = raw.upper().replace(" ", "").replace("_", "").replace("IEC", "")
    if compact.startswith("60898"):
        return MCBStandard.RESIDENTIAL_COMMERCIAL
    if compact.startswith("60947"):
        return MCBStandard.INDUSTRIAL

    raise InvalidInputError(f'Unknown MCB standard "{text}"')
