"""Request boundary for world generation."""

from .worldgen_service import (
    ChunkPayload,
    CreatedWorld,
    WorldGenService,
    WorldInfo,
    parse_chunk_coordinate,
)

__all__ = [
    "ChunkPayload",
    "CreatedWorld",
    "WorldGenService",
    "WorldInfo",
    "parse_chunk_coordinate",
]
