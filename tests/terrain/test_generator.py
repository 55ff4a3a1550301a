"""Tests for the seed-bound world generator."""

import numpy as np

from blockverse.terrain.biomes import Biome
from blockverse.terrain.chunks import generate_chunk
from blockverse.terrain.config import GenerationOptions
from blockverse.terrain.generator import DEFAULT_SEED, WorldGenerator
from blockverse.terrain.noise import initialize
from blockverse.terrain.structures import generate_structures
from blockverse.types import ChunkCoord


class TestSeedBinding:
    """Tests for seed binding and rebinding."""

    def test_default_seed_bound_at_construction(self) -> None:
        generator = WorldGenerator()
        assert generator.seed == DEFAULT_SEED
        assert generator.context is initialize(DEFAULT_SEED)

    def test_bind_seed_replaces_context(self) -> None:
        generator = WorldGenerator("seed-A")
        context = generator.bind_seed("seed-B")
        assert generator.context is context
        assert generator.seed == "seed-B"

    def test_rebinding_leaves_no_stale_state(self) -> None:
        """A-B-A rebinding generates exactly what a fresh A generator does."""
        generator = WorldGenerator("seed-A")
        generator.generate_chunk(0, 0)
        generator.bind_seed("seed-B")
        generator.generate_chunk(0, 0)
        generator.bind_seed("seed-A")

        fresh = WorldGenerator("seed-A")
        assert generator.generate_chunk(3, 3).blocks == fresh.generate_chunk(3, 3).blocks

    def test_instances_are_independent(self) -> None:
        a = WorldGenerator("seed-A")
        b = WorldGenerator("seed-B")
        before = a.generate_chunk(1, 1).heightmap.copy()
        b.bind_seed("seed-C")
        np.testing.assert_array_equal(a.generate_chunk(1, 1).heightmap, before)


class TestGenerate:
    """Tests for combined generation."""

    def test_matches_module_functions(self) -> None:
        generator = WorldGenerator("combined")
        result = generator.generate(2, -1)

        assert result.chunk.blocks == generate_chunk(2, -1, "combined").blocks
        assert result.structures == generate_structures(2, -1, "combined")
        assert isinstance(result.biome, Biome)
        assert (result.chunk_x, result.chunk_z) == (2, -1)

    def test_uses_options(self) -> None:
        generator = WorldGenerator("opts", options=GenerationOptions(chunk_size=8))
        assert generator.generate_chunk(0, 0).heightmap.shape == (8, 8)

    def test_classify_biome(self) -> None:
        assert WorldGenerator("any").classify_biome(0, 0) == Biome.FOREST


class TestGenerateMany:
    """Tests for batch generation."""

    def test_results_in_request_order(self) -> None:
        generator = WorldGenerator("batch")
        coords = [(3, 1), (-2, 0), ChunkCoord(chunk_x=0, chunk_z=5), (1, 1)]
        results = generator.generate_many(coords, max_workers=4)
        assert [(r.chunk_x, r.chunk_z) for r in results] == [(3, 1), (-2, 0), (0, 5), (1, 1)]

    def test_parallel_matches_sequential(self) -> None:
        generator = WorldGenerator("batch")
        coords = [(x, z) for x in range(-1, 2) for z in range(-1, 2)]
        parallel = generator.generate_many(coords, max_workers=4)
        for (chunk_x, chunk_z), result in zip(coords, parallel):
            assert result.chunk.blocks == generator.generate_chunk(chunk_x, chunk_z).blocks

    def test_empty_batch(self) -> None:
        assert WorldGenerator().generate_many([]) == []


class TestSpawnArea:
    """Tests for spawn area generation."""

    def test_three_by_three_around_origin(self) -> None:
        results = WorldGenerator("spawn").spawn_area()
        assert [(r.chunk_x, r.chunk_z) for r in results] == [
            (x, z) for x in (-1, 0, 1) for z in (-1, 0, 1)
        ]

    def test_radius_zero(self) -> None:
        results = WorldGenerator("spawn").spawn_area(radius=0)
        assert [(r.chunk_x, r.chunk_z) for r in results] == [(0, 0)]
