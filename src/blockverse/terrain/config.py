"""Terrain generation configuration models."""

from pydantic import BaseModel, Field


class GenerationOptions(BaseModel, frozen=True):
    """Chunk synthesis parameters."""

    chunk_size: int = Field(default=16, gt=0, description="Chunk side length in blocks")
    world_height: int = Field(default=256, gt=0, description="World height ceiling")
    sea_level: int = Field(default=64, ge=0, description="Water fills columns below this")
    scale: float = Field(default=0.02, gt=0, description="Base noise frequency")
    octaves: int = Field(default=4, ge=1, description="Number of octaves for fBm")
    persistence: float = Field(
        default=0.5, gt=0, description="Amplitude multiplier per octave"
    )
    height_band: int = Field(
        default=40, ge=0, description="Height range the normalized noise spans"
    )


class StructureConfig(BaseModel, frozen=True):
    """Tree placement parameters."""

    key_prefix: str = Field(default="tree", description="Prefix of the per-chunk roll key")
    threshold: float = Field(
        default=0.7, ge=0.0, lt=1.0, description="Roll fraction above which a tree spawns"
    )
    edge_margin: int = Field(default=2, ge=0, description="Min distance from chunk edge")
    ground_relief: int = Field(
        default=10, description="Half-range of the approximate ground height"
    )
    trunk_height: int = Field(default=5, ge=1, description="Log blocks in the trunk")
    canopy_radius: int = Field(default=2, ge=0, description="Canopy half-width")
    canopy_height: int = Field(default=3, ge=0, description="Canopy layers above the first")


class BiomeConfig(BaseModel, frozen=True):
    """Biome classification parameters."""

    scale: float = Field(default=0.001, gt=0, description="Noise frequency per chunk")
