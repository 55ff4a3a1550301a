"""Blockverse procedural world generator."""

from .config import Config, load_config
from .exceptions import (
    InvalidCoordinateError,
    InvalidWorldRequestError,
    WorldGenError,
)
from .materials import MaterialKind
from .services import ChunkPayload, CreatedWorld, WorldGenService, WorldInfo
from .terrain import (
    Biome,
    Chunk,
    GenerationOptions,
    NoiseContext,
    WorldGenerator,
    classify_biome,
    generate_chunk,
    generate_structures,
    initialize,
)
from .types import Block, ChunkCoord

__all__ = [
    # Types
    "Block",
    "ChunkCoord",
    "MaterialKind",
    # Terrain
    "Biome",
    "Chunk",
    "GenerationOptions",
    "NoiseContext",
    "WorldGenerator",
    "classify_biome",
    "generate_chunk",
    "generate_structures",
    "initialize",
    # Config
    "Config",
    "load_config",
    # Service
    "ChunkPayload",
    "CreatedWorld",
    "WorldGenService",
    "WorldInfo",
    # Exceptions
    "WorldGenError",
    "InvalidCoordinateError",
    "InvalidWorldRequestError",
]
