"""Shared test fixtures for world generator tests."""

import pytest

from blockverse.terrain.chunks import Chunk, generate_chunk
from blockverse.terrain.config import GenerationOptions
from blockverse.terrain.noise import NoiseContext, initialize

DEMO_SEED = "blockverse-demo"


@pytest.fixture
def options() -> GenerationOptions:
    """Default generation options."""
    return GenerationOptions()


@pytest.fixture
def demo_context() -> NoiseContext:
    """Noise context for the demo seed."""
    return initialize(DEMO_SEED)


@pytest.fixture
def demo_chunk(demo_context: NoiseContext, options: GenerationOptions) -> Chunk:
    """Chunk (0, 0) of the demo world."""
    return generate_chunk(0, 0, demo_context, options)


@pytest.fixture
def tree_chunk_coords() -> tuple[int, int]:
    """First chunk along x at z=0 that holds a tree."""
    from blockverse.terrain.structures import structure_anchor

    for chunk_x in range(1000):
        if structure_anchor(chunk_x, 0) is not None:
            return (chunk_x, 0)
    raise AssertionError("No tree found in the first 1000 chunks")
