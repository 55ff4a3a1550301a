"""Procedural terrain generation package.

This package implements seed-driven voxel generation: simplex noise,
chunk synthesis, tree placement and biome classification.
"""

from .biomes import Biome, classify_biome
from .chunks import Chunk, generate_chunk
from .config import BiomeConfig, GenerationOptions, StructureConfig
from .generator import DEFAULT_SEED, GeneratedChunk, WorldGenerator
from .noise import NoiseContext, hash_seed, initialize
from .structures import generate_structures, structure_anchor
from .validation import ValidationResult, validate_chunk

__all__ = [
    "DEFAULT_SEED",
    "Biome",
    "BiomeConfig",
    "Chunk",
    "GeneratedChunk",
    "GenerationOptions",
    "NoiseContext",
    "StructureConfig",
    "ValidationResult",
    "WorldGenerator",
    "classify_biome",
    "generate_chunk",
    "generate_structures",
    "hash_seed",
    "initialize",
    "structure_anchor",
    "validate_chunk",
]
