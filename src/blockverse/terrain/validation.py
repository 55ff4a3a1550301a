"""Post-generation checks on chunks."""

import logging

import numpy as np

from ..materials import MaterialKind
from .chunks import Chunk, generate_chunk
from .config import GenerationOptions
from .noise import NoiseContext, SeedLike

logger = logging.getLogger(__name__)


class ValidationResult:
    """Result of chunk validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_chunk(chunk: Chunk, options: GenerationOptions | None = None) -> ValidationResult:
    """Validate a chunk's columns against the terrain layering rules.

    Args:
        chunk: Generated chunk.
        options: Options the chunk was generated with.

    Returns:
        ValidationResult with any errors/warnings.
    """
    options = options or GenerationOptions()
    result = ValidationResult()

    # Check 1: Blocks lie inside the chunk and world bounds
    _check_bounds(chunk, options, result)

    # Check 2: Bedrock floor in every column
    _check_bedrock(chunk, result)

    # Check 3: Solids below the surface, water between surface and sea level
    _check_layering(chunk, options, result)

    if result.passed:
        logger.debug(f"Chunk ({chunk.chunk_x}, {chunk.chunk_z}) validation passed")
    else:
        logger.warning(
            f"Chunk ({chunk.chunk_x}, {chunk.chunk_z}) validation failed "
            f"with {len(result.errors)} errors"
        )
        for error in result.errors:
            logger.error(f"  - {error}")

    for warning in result.warnings:
        logger.warning(f"  - {warning}")

    return result


def _check_bounds(chunk: Chunk, options: GenerationOptions, result: ValidationResult) -> None:
    size = options.chunk_size
    min_x, min_z = chunk.chunk_x * size, chunk.chunk_z * size

    outside = 0
    for block in chunk.blocks:
        if not (
            min_x <= block.x < min_x + size
            and min_z <= block.z < min_z + size
            and 0 <= block.y < options.world_height
        ):
            outside += 1

    if outside > 0:
        result.add_error(f"{outside} blocks outside chunk bounds")


def _check_bedrock(chunk: Chunk, result: ValidationResult) -> None:
    bedrock = {
        (block.x, block.z)
        for block in chunk.blocks
        if block.y == 0 and block.material == MaterialKind.BEDROCK
    }
    columns = {(block.x, block.z) for block in chunk.blocks}
    expected = chunk.size * chunk.size

    missing = len(columns - bedrock) + max(expected - len(columns), 0)
    if missing > 0:
        result.add_error(f"{missing} columns without bedrock at y=0")

    stray = sum(
        1 for block in chunk.blocks if block.material == MaterialKind.BEDROCK and block.y != 0
    )
    if stray > 0:
        result.add_error(f"{stray} bedrock blocks above y=0")


def _check_layering(chunk: Chunk, options: GenerationOptions, result: ValidationResult) -> None:
    size = options.chunk_size
    heights = np.minimum(chunk.heightmap, options.world_height)

    misplaced_solid = 0
    misplaced_water = 0
    for block in chunk.blocks:
        local_x = block.x - chunk.chunk_x * size
        local_z = block.z - chunk.chunk_z * size
        if block.y == 0 or not (0 <= local_x < size and 0 <= local_z < size):
            continue
        height = int(heights[local_x, local_z])
        if block.material == MaterialKind.WATER:
            if not (height <= block.y < options.sea_level):
                misplaced_water += 1
        elif block.y >= height:
            misplaced_solid += 1

    if misplaced_solid > 0:
        result.add_error(f"{misplaced_solid} solid blocks above the column surface")
    if misplaced_water > 0:
        result.add_error(f"{misplaced_water} water blocks outside [surface, sea level)")


def seam_height_jump(a: Chunk, b: Chunk) -> int:
    """Largest height difference across the shared edge of two chunks.

    Args:
        a: First chunk.
        b: Chunk adjacent to a along x or z.

    Returns:
        Maximum absolute height step between facing columns.

    Raises:
        ValueError: If the chunks are not edge-adjacent.
    """
    dx = b.chunk_x - a.chunk_x
    dz = b.chunk_z - a.chunk_z
    if abs(dx) + abs(dz) != 1:
        raise ValueError(
            f"Chunks ({a.chunk_x}, {a.chunk_z}) and ({b.chunk_x}, {b.chunk_z}) are not adjacent"
        )

    if dx == 1:
        edge_a, edge_b = a.heightmap[-1, :], b.heightmap[0, :]
    elif dx == -1:
        edge_a, edge_b = a.heightmap[0, :], b.heightmap[-1, :]
    elif dz == 1:
        edge_a, edge_b = a.heightmap[:, -1], b.heightmap[:, 0]
    else:
        edge_a, edge_b = a.heightmap[:, 0], b.heightmap[:, -1]

    return int(np.max(np.abs(edge_a.astype(np.int64) - edge_b.astype(np.int64))))


def interior_height_jump(chunk: Chunk) -> int:
    """Largest height difference between neighbouring columns inside a chunk."""
    heights = chunk.heightmap.astype(np.int64)
    steps = [np.abs(np.diff(heights, axis=0)), np.abs(np.diff(heights, axis=1))]
    return int(max((step.max() for step in steps if step.size), default=0))


def check_determinism(
    chunk_x: int,
    chunk_z: int,
    seed: SeedLike | NoiseContext,
    options: GenerationOptions | None = None,
) -> bool:
    """Generate a chunk twice and compare the block lists."""
    first = generate_chunk(chunk_x, chunk_z, seed, options)
    second = generate_chunk(chunk_x, chunk_z, seed, options)
    identical = first.blocks == second.blocks
    if not identical:
        logger.error(f"Chunk ({chunk_x}, {chunk_z}) is not deterministic")
    return identical
