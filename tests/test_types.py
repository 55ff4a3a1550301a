"""Tests for core types."""

import pytest
from pydantic import ValidationError

from blockverse.materials import MaterialKind
from blockverse.types import Block, ChunkCoord, world_coords


class TestChunkCoord:
    """Tests for ChunkCoord class."""

    def test_creation(self):
        """ChunkCoord can be created with chunk_x and chunk_z."""
        coord = ChunkCoord(chunk_x=-3, chunk_z=7)
        assert coord.chunk_x == -3
        assert coord.chunk_z == 7

    def test_immutable(self):
        """ChunkCoord is immutable (frozen)."""
        coord = ChunkCoord(chunk_x=1, chunk_z=1)
        with pytest.raises(ValidationError):
            coord.chunk_x = 2  # type: ignore

    def test_hashable(self):
        """ChunkCoord can be used in sets."""
        coords = {
            ChunkCoord(chunk_x=1, chunk_z=2),
            ChunkCoord(chunk_x=1, chunk_z=2),
            ChunkCoord(chunk_x=2, chunk_z=1),
        }
        assert len(coords) == 2


class TestBlock:
    """Tests for Block values."""

    def test_equality(self):
        a = Block(x=1, y=2, z=3, material=MaterialKind.STONE)
        b = Block(x=1, y=2, z=3, material=MaterialKind.STONE)
        assert a == b
        assert hash(a) == hash(b)

    def test_frozen(self):
        block = Block(x=1, y=2, z=3, material=MaterialKind.STONE)
        with pytest.raises(AttributeError):
            block.y = 5  # type: ignore

    def test_to_dict(self):
        block = Block(x=-1, y=0, z=4, material=MaterialKind.BEDROCK)
        assert block.to_dict() == {"x": -1, "y": 0, "z": 4, "type": "bedrock"}


class TestWorldCoords:
    """Tests for chunk-local to world conversion."""

    def test_origin_chunk(self):
        assert world_coords(0, 0, 5, 7, 16) == (5, 7)

    def test_negative_chunks(self):
        """Negative chunks start at negative multiples of the size."""
        assert world_coords(-1, 2, 15, 0, 16) == (-1, 32)
        assert world_coords(-2, -1, 0, 0, 16) == (-32, -16)

    def test_custom_size(self):
        assert world_coords(3, -3, 1, 2, 4) == (13, -10)
