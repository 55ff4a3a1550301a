"""Tests for the world generation service boundary."""

import pytest

from blockverse.config import Config, SpawnConfig
from blockverse.exceptions import InvalidCoordinateError, InvalidWorldRequestError
from blockverse.services import WorldGenService
from blockverse.services.worldgen_service import parse_chunk_coordinate
from blockverse.terrain.chunks import generate_chunk
from blockverse.terrain.generator import DEFAULT_SEED
from blockverse.terrain.structures import generate_structures


@pytest.fixture
def service() -> WorldGenService:
    """Service with a single spawn chunk to keep creation fast."""
    return WorldGenService(Config(spawn=SpawnConfig(radius=0)))


class TestParseChunkCoordinate:
    """Tests for coordinate parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(3, 3), (-12, -12), ("7", 7), (" -4 ", -4), (2.0, 2), ("0", 0)],
    )
    def test_valid(self, value: object, expected: int) -> None:
        assert parse_chunk_coordinate(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", "1.5", 1.5, None, True, [1]])
    def test_invalid(self, value: object) -> None:
        with pytest.raises(InvalidCoordinateError):
            parse_chunk_coordinate(value)

    def test_message_names_axis(self) -> None:
        with pytest.raises(InvalidCoordinateError, match="chunk z"):
            parse_chunk_coordinate("north", "z")


class TestGetChunk:
    """Tests for chunk requests."""

    def test_chunk_payload(self, service: WorldGenService) -> None:
        payload = service.get_chunk(0, 0, "seed-A")

        assert payload.chunk_x == 0
        assert payload.chunk_z == 0
        assert payload.generated is True
        assert payload.blocks == generate_chunk(0, 0, "seed-A").blocks
        assert payload.structures == generate_structures(0, 0, "seed-A")
        assert payload.biome == "forest"

    def test_string_coordinates(self, service: WorldGenService) -> None:
        payload = service.get_chunk("2", "-3", "seed-A")
        assert (payload.chunk_x, payload.chunk_z) == (2, -3)
        assert payload.blocks == service.get_chunk(2, -3, "seed-A").blocks

    def test_default_seed(self, service: WorldGenService) -> None:
        assert service.get_chunk(1, 1).blocks == generate_chunk(1, 1, DEFAULT_SEED).blocks
        assert service.get_chunk(1, 1, "").blocks == generate_chunk(1, 1, DEFAULT_SEED).blocks

    def test_invalid_coordinate(self, service: WorldGenService) -> None:
        with pytest.raises(InvalidCoordinateError):
            service.get_chunk("abc", 0)
        with pytest.raises(InvalidCoordinateError):
            service.get_chunk(0, 0.5)

    def test_to_dict(self, service: WorldGenService) -> None:
        data = service.get_chunk(0, 0, "seed-A").to_dict()
        assert set(data) == {
            "chunk_x",
            "chunk_z",
            "blocks",
            "structures",
            "generated",
            "timestamp",
            "biome",
        }
        assert data["blocks"][0] == {"x": 0, "y": 0, "z": 0, "type": "bedrock"}


class TestCreateWorld:
    """Tests for world creation."""

    def test_same_seed_same_spawn(self, service: WorldGenService) -> None:
        first = service.create_world("One", "seed-A")
        second = service.create_world("Two", "seed-A")

        assert first.info.id != second.info.id
        assert [c.blocks for c in first.spawn_chunks] == [c.blocks for c in second.spawn_chunks]

    def test_spawn_metadata(self, service: WorldGenService) -> None:
        created = service.create_world("Spawnland", "seed-A")
        assert created.info.name == "Spawnland"
        assert created.info.seed == "seed-A"
        assert created.info.type == "procedural"
        assert (created.info.spawn_x, created.info.spawn_y, created.info.spawn_z) == (0, 70, 0)
        assert [(c.chunk_x, c.chunk_z) for c in created.spawn_chunks] == [(0, 0)]

    def test_default_spawn_area(self) -> None:
        created = WorldGenService().create_world("Big", "seed-A")
        assert len(created.spawn_chunks) == 9

    def test_random_seed(self, service: WorldGenService) -> None:
        a = service.create_world("Random A")
        b = service.create_world("Random B")
        assert len(a.info.seed) == 10
        assert a.info.seed != b.info.seed

    @pytest.mark.parametrize("name", ["", "   "])
    def test_name_required(self, service: WorldGenService, name: str) -> None:
        with pytest.raises(InvalidWorldRequestError, match="name is required"):
            service.create_world(name)

    @pytest.mark.parametrize("name", [123, ["Lobby"], b"Lobby"])
    def test_name_must_be_text(self, service: WorldGenService, name: object) -> None:
        with pytest.raises(InvalidWorldRequestError, match="must be a string"):
            service.create_world(name)  # type: ignore[arg-type]

    def test_missing_name(self, service: WorldGenService) -> None:
        with pytest.raises(InvalidWorldRequestError, match="name is required"):
            service.create_world(None)  # type: ignore[arg-type]

    def test_to_dict(self, service: WorldGenService) -> None:
        data = service.create_world("Dict", "seed-A").to_dict()
        assert data["name"] == "Dict"
        assert data["seed"] == "seed-A"
        assert data["generated"] is True
        assert len(data["spawn_chunks"]) == 1
        assert data["created_at"] > 0


class TestWorldInfo:
    """Tests for world metadata lookup."""

    def test_created_world(self, service: WorldGenService) -> None:
        created = service.create_world("Known", "seed-K")
        assert service.get_world_info(created.info.id) == created.info

    def test_unknown_world_uses_id(self, service: WorldGenService) -> None:
        info = service.get_world_info("mystery")
        assert info.id == "mystery"
        assert info.seed == "mystery"
        assert info.spawn_y == 70

    def test_list_worlds(self, service: WorldGenService) -> None:
        first = service.create_world("First", "s1")
        second = service.create_world("Second", "s2")
        assert service.list_worlds() == [first.info, second.info]
