"""Seed-bound world generator orchestration."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable

from ..types import Block, ChunkCoord
from .biomes import Biome, classify_biome
from .chunks import Chunk, generate_chunk
from .config import BiomeConfig, GenerationOptions, StructureConfig
from .noise import NoiseContext, SeedLike, initialize
from .structures import generate_structures

logger = logging.getLogger(__name__)

DEFAULT_SEED = "blockverse-default"


@dataclass
class GeneratedChunk:
    """Terrain, structures and biome generated for one chunk."""

    chunk: Chunk
    structures: list[Block]

    @property
    def chunk_x(self) -> int:
        return self.chunk.chunk_x

    @property
    def chunk_z(self) -> int:
        return self.chunk.chunk_z

    @property
    def biome(self) -> Biome | None:
        return self.chunk.biome


class WorldGenerator:
    """Generates chunks for the seed it is currently bound to.

    A default seed is bound at construction, so there is never an unbound
    noise source. Rebinding swaps in a fresh context and keeps nothing from
    the previous seed. Use one instance per seed when generating several
    worlds concurrently.
    """

    def __init__(
        self,
        seed: SeedLike = DEFAULT_SEED,
        options: GenerationOptions | None = None,
        structures: StructureConfig | None = None,
        biomes: BiomeConfig | None = None,
    ):
        self.options = options or GenerationOptions()
        self.structure_config = structures or StructureConfig()
        self.biome_config = biomes or BiomeConfig()
        self._context = initialize(seed)

    @property
    def context(self) -> NoiseContext:
        """Noise context for the bound seed."""
        return self._context

    @property
    def seed(self) -> str:
        """Currently bound seed."""
        return self._context.seed

    def bind_seed(self, seed: SeedLike) -> NoiseContext:
        """Bind a new seed, replacing the noise context entirely."""
        self._context = initialize(seed)
        logger.info(f"Bound seed {self._context.seed!r} (hash {self._context.seed_hash})")
        return self._context

    def generate_chunk(self, chunk_x: int, chunk_z: int) -> Chunk:
        """Generate terrain blocks for one chunk."""
        return generate_chunk(chunk_x, chunk_z, self._context, self.options)

    def generate_structures(self, chunk_x: int, chunk_z: int) -> list[Block]:
        """Generate structure blocks for one chunk."""
        return generate_structures(
            chunk_x, chunk_z, self._context, self.options, self.structure_config
        )

    def classify_biome(self, chunk_x: int, chunk_z: int) -> Biome:
        """Classify the biome of one chunk."""
        return classify_biome(chunk_x, chunk_z, self._context, self.biome_config)

    def generate(self, chunk_x: int, chunk_z: int) -> GeneratedChunk:
        """Generate terrain, structures and biome for one chunk."""
        return self._generate_with(self._context, chunk_x, chunk_z)

    def _generate_with(
        self, context: NoiseContext, chunk_x: int, chunk_z: int
    ) -> GeneratedChunk:
        chunk = generate_chunk(chunk_x, chunk_z, context, self.options)
        chunk.biome = classify_biome(chunk_x, chunk_z, context, self.biome_config)
        structures = generate_structures(
            chunk_x, chunk_z, context, self.options, self.structure_config
        )
        return GeneratedChunk(chunk=chunk, structures=structures)

    def generate_many(
        self,
        coords: Iterable[ChunkCoord | tuple[int, int]],
        max_workers: int | None = None,
    ) -> list[GeneratedChunk]:
        """Generate several chunks in parallel.

        The seed is captured once, so rebinding mid-batch cannot mix worlds.

        Args:
            coords: Chunk coordinates to generate.
            max_workers: Thread pool size (executor default if None).

        Returns:
            Generated chunks in the order the coordinates were given.
        """
        pairs = [_as_pair(coord) for coord in coords]
        context = self._context

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            results = list(
                executor.map(lambda pair: self._generate_with(context, *pair), pairs)
            )

        logger.info(f"Generated {len(results)} chunks for seed {context.seed!r}")
        return results

    def spawn_area(self, radius: int = 1) -> list[GeneratedChunk]:
        """Generate the (2r+1)^2 chunks around the origin, x outer, z inner."""
        coords = [
            (x, z)
            for x in range(-radius, radius + 1)
            for z in range(-radius, radius + 1)
        ]
        return self.generate_many(coords)


def _as_pair(coord: ChunkCoord | tuple[int, int]) -> tuple[int, int]:
    if isinstance(coord, ChunkCoord):
        return (coord.chunk_x, coord.chunk_z)
    chunk_x, chunk_z = coord
    return (chunk_x, chunk_z)
