"""Chunk synthesis: heightmaps and block columns."""

import logging
import time
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from ..materials import MaterialKind
from ..types import Block, world_coords
from .biomes import Biome
from .config import GenerationOptions
from .noise import NoiseContext, SeedLike, fbm, resolve_context

logger = logging.getLogger(__name__)

# Blocks of dirt below the grass layer on dry columns
DIRT_DEPTH = 3


@dataclass
class Chunk:
    """Generated blocks for one chunk coordinate."""

    chunk_x: int
    chunk_z: int
    blocks: list[Block]
    heightmap: NDArray[np.int32]  # Shape: (chunk_size, chunk_size), indexed [x, z]
    timestamp: int  # Unix ms, bookkeeping for callers only
    generated: bool = True
    biome: Biome | None = None
    material_counts: dict[MaterialKind, int] = field(default_factory=dict)

    @property
    def size(self) -> int:
        """Chunk side length."""
        return self.heightmap.shape[0]


def compute_heightmap(
    chunk_x: int,
    chunk_z: int,
    context: NoiseContext,
    options: GenerationOptions,
) -> NDArray[np.int32]:
    """Compute the unclamped terrain surface height of every column.

    Args:
        chunk_x: Chunk x coordinate.
        chunk_z: Chunk z coordinate.
        context: Noise context for the world seed.
        options: Generation options.

    Returns:
        2D int32 array indexed [local_x, local_z].
    """
    size = options.chunk_size
    local = np.arange(size, dtype=np.float64)
    world_x = chunk_x * size + local
    world_z = chunk_z * size + local
    xs, zs = np.meshgrid(world_x, world_z, indexing="ij")

    noise = fbm(
        context,
        xs,
        zs,
        options.scale,
        octaves=options.octaves,
        persistence=options.persistence,
    )

    # Normalize to [0, 1], then onto the band centred on sea level
    normalized = (noise + 1) / 2
    heights = normalized * options.height_band + options.sea_level - options.height_band / 2
    return np.floor(heights).astype(np.int32)


def column_blocks(
    x: int,
    z: int,
    height: int,
    options: GenerationOptions,
) -> list[Block]:
    """Materialize one column, terrain bottom-up then water bottom-up.

    Args:
        x: World x of the column.
        z: World z of the column.
        height: Surface height from the heightmap (clamped here).
        options: Generation options.

    Returns:
        Blocks for the column.
    """
    sea_level = options.sea_level
    height = min(height, options.world_height)
    dry = height > sea_level

    blocks = [Block(x, 0, z, MaterialKind.BEDROCK)]
    for y in range(1, height):
        if dry and y == height - 1:
            material = MaterialKind.GRASS
        elif dry and y > height - 1 - DIRT_DEPTH:
            material = MaterialKind.DIRT
        else:
            material = MaterialKind.STONE
        blocks.append(Block(x, y, z, material))

    if height < sea_level:
        top = min(sea_level, options.world_height)
        for y in range(max(height, 1), top):
            blocks.append(Block(x, y, z, MaterialKind.WATER))

    return blocks


def generate_chunk(
    chunk_x: int,
    chunk_z: int,
    seed: SeedLike | NoiseContext,
    options: GenerationOptions | None = None,
) -> Chunk:
    """Generate the terrain blocks of one chunk.

    Reads nothing but its arguments, so the same inputs always produce the
    same block list, in any order and from any thread.

    Args:
        chunk_x: Chunk x coordinate.
        chunk_z: Chunk z coordinate.
        seed: World seed or a ready NoiseContext.
        options: Generation options (defaults if None).

    Returns:
        Chunk with the full block list and heightmap.
    """
    options = options or GenerationOptions()
    context = resolve_context(seed)
    size = options.chunk_size

    heightmap = compute_heightmap(chunk_x, chunk_z, context, options)

    blocks: list[Block] = []
    for local_x in range(size):
        for local_z in range(size):
            x, z = world_coords(chunk_x, chunk_z, local_x, local_z, size)
            blocks.extend(column_blocks(x, z, int(heightmap[local_x, local_z]), options))

    counts: dict[MaterialKind, int] = {}
    for block in blocks:
        counts[block.material] = counts.get(block.material, 0) + 1

    logger.debug(
        f"Generated chunk ({chunk_x}, {chunk_z}) seed={context.seed!r}: "
        f"{len(blocks)} blocks, heights {heightmap.min()}..{heightmap.max()}"
    )

    return Chunk(
        chunk_x=chunk_x,
        chunk_z=chunk_z,
        blocks=blocks,
        heightmap=heightmap,
        timestamp=int(time.time() * 1000),
        material_counts=counts,
    )
