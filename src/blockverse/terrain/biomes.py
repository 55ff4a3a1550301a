"""Biome classification from large-scale noise."""

from enum import Enum

from .config import BiomeConfig
from .noise import NoiseContext, SeedLike, resolve_context


class Biome(str, Enum):
    """Coarse terrain labels, ordered from lowest to highest noise."""

    OCEAN = "ocean"
    PLAINS = "plains"
    FOREST = "forest"
    HILLS = "hills"
    MOUNTAINS = "mountains"


# Upper bounds (exclusive) of each bucket; anything above the last is mountains
BIOME_THRESHOLDS: tuple[tuple[float, Biome], ...] = (
    (-0.3, Biome.OCEAN),
    (0.0, Biome.PLAINS),
    (0.3, Biome.FOREST),
    (0.6, Biome.HILLS),
)


def biome_for_value(value: float) -> Biome:
    """Bucket a noise value into a biome."""
    for limit, biome in BIOME_THRESHOLDS:
        if value < limit:
            return biome
    return Biome.MOUNTAINS


def classify_biome(
    chunk_x: int,
    chunk_z: int,
    seed: SeedLike | NoiseContext,
    config: BiomeConfig | None = None,
) -> Biome:
    """Classify a chunk from one coarse noise sample.

    Advisory metadata only; terrain synthesis never reads it.
    """
    config = config or BiomeConfig()
    context = resolve_context(seed)
    return biome_for_value(context.sample(chunk_x * config.scale, chunk_z * config.scale))
