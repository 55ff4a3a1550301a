"""Block material kinds and their encoded codes."""

from enum import Enum


class MaterialKind(str, Enum):
    """Block materials placed by terrain and structure generation."""

    BEDROCK = "bedrock"
    STONE = "stone"
    DIRT = "dirt"
    GRASS = "grass"
    WATER = "water"
    LOG = "log"
    LEAVES = "leaves"

    @property
    def code(self) -> int:
        """Stable uint8 code used in encoded volumes (0 is air)."""
        return _MATERIAL_CODES[self]


AIR_CODE = 0

_MATERIAL_CODES: dict[MaterialKind, int] = {
    MaterialKind.BEDROCK: 1,
    MaterialKind.STONE: 2,
    MaterialKind.DIRT: 3,
    MaterialKind.GRASS: 4,
    MaterialKind.WATER: 5,
    MaterialKind.LOG: 6,
    MaterialKind.LEAVES: 7,
}

_CODE_MATERIALS: dict[int, MaterialKind] = {
    code: kind for kind, code in _MATERIAL_CODES.items()
}


def material_from_code(code: int) -> MaterialKind | None:
    """Convert an encoded uint8 back to a MaterialKind.

    Returns:
        The material, or None for air.

    Raises:
        ValueError: If the code is not a known material.
    """
    if code == AIR_CODE:
        return None
    try:
        return _CODE_MATERIALS[int(code)]
    except KeyError:
        raise ValueError(f"Unknown material code: {code}") from None
