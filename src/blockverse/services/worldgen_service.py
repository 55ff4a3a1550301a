"""World generation request boundary."""

import threading
import time
import uuid
from dataclasses import dataclass
from typing import Any

import structlog
from pydantic import BaseModel

from ..config import Config
from ..exceptions import InvalidCoordinateError, InvalidWorldRequestError
from ..terrain.generator import GeneratedChunk, WorldGenerator
from ..types import Block

logger = structlog.get_logger()


class WorldInfo(BaseModel, frozen=True):
    """World metadata; no geometry."""

    id: str
    name: str
    seed: str
    type: str = "procedural"
    spawn_x: int = 0
    spawn_y: int = 70
    spawn_z: int = 0


@dataclass
class ChunkPayload:
    """Chunk response: terrain blocks plus structures."""

    chunk_x: int
    chunk_z: int
    blocks: list[Block]
    structures: list[Block]
    generated: bool
    timestamp: int
    biome: str | None = None

    @classmethod
    def from_generated(cls, generated: GeneratedChunk) -> "ChunkPayload":
        chunk = generated.chunk
        return cls(
            chunk_x=chunk.chunk_x,
            chunk_z=chunk.chunk_z,
            blocks=chunk.blocks,
            structures=generated.structures,
            generated=chunk.generated,
            timestamp=chunk.timestamp,
            biome=chunk.biome.value if chunk.biome else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "chunk_x": self.chunk_x,
            "chunk_z": self.chunk_z,
            "blocks": [block.to_dict() for block in self.blocks],
            "structures": [block.to_dict() for block in self.structures],
            "generated": self.generated,
            "timestamp": self.timestamp,
            "biome": self.biome,
        }


@dataclass
class CreatedWorld:
    """A newly created world with its pre-generated spawn area."""

    info: WorldInfo
    spawn_chunks: list[ChunkPayload]
    created_at: int

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            **self.info.model_dump(),
            "spawn_chunks": [chunk.to_dict() for chunk in self.spawn_chunks],
            "generated": True,
            "created_at": self.created_at,
        }


def parse_chunk_coordinate(value: Any, name: str = "coordinate") -> int:
    """Parse a chunk coordinate, rejecting anything that is not an integer.

    Accepts ints, integral floats and strings holding a base-10 integer.

    Raises:
        InvalidCoordinateError: If the value is not an integer.
    """
    if isinstance(value, bool):
        raise InvalidCoordinateError(f"Invalid chunk {name}: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise InvalidCoordinateError(f"Invalid chunk {name}: {value!r}")
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            raise InvalidCoordinateError(f"Invalid chunk {name}: {value!r}") from None
    raise InvalidCoordinateError(f"Invalid chunk {name}: {value!r}")


class WorldGenService:
    """Serves chunk, world info and world creation requests.

    Each request builds its own seed-bound generator, so concurrent
    requests for different seeds never share noise state.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self._worlds: dict[str, WorldInfo] = {}
        self._lock = threading.Lock()

    def _generator(self, seed: str) -> WorldGenerator:
        return WorldGenerator(
            seed,
            options=self.config.generation,
            structures=self.config.structures,
            biomes=self.config.biomes,
        )

    def get_chunk(self, x: Any, z: Any, seed: str | None = None) -> ChunkPayload:
        """Generate a chunk at coordinates.

        Args:
            x: Chunk x coordinate (int or integer string).
            z: Chunk z coordinate (int or integer string).
            seed: World seed; the configured default if None or empty.

        Raises:
            InvalidCoordinateError: If either coordinate is not an integer.
        """
        try:
            chunk_x = parse_chunk_coordinate(x, "x")
            chunk_z = parse_chunk_coordinate(z, "z")
        except InvalidCoordinateError as e:
            logger.warning("chunk_request_rejected", x=x, z=z, error=str(e))
            raise

        seed = seed or self.config.default_seed
        start = time.perf_counter()
        generated = self._generator(seed).generate(chunk_x, chunk_z)
        duration_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "chunk_generated",
            chunk_x=chunk_x,
            chunk_z=chunk_z,
            seed=seed,
            blocks=len(generated.chunk.blocks),
            structures=len(generated.structures),
            duration_ms=round(duration_ms, 2),
        )
        return ChunkPayload.from_generated(generated)

    def create_world(self, name: str, seed: str | None = None) -> CreatedWorld:
        """Create a world and pre-generate its spawn area.

        Args:
            name: World name (required).
            seed: World seed; a random one if None or empty.

        Raises:
            InvalidWorldRequestError: If the name is not a string or is empty.
        """
        if name is not None and not isinstance(name, str):
            logger.warning("world_create_rejected", reason="name not a string")
            raise InvalidWorldRequestError(f"World name must be a string, got {name!r}")
        if not name or not name.strip():
            logger.warning("world_create_rejected", reason="name required")
            raise InvalidWorldRequestError("World name is required")

        seed = seed or uuid.uuid4().hex[: self.config.seed_length]
        spawn = self.config.spawn
        info = WorldInfo(
            id=str(uuid.uuid4()),
            name=name,
            seed=seed,
            spawn_x=spawn.x,
            spawn_y=spawn.y,
            spawn_z=spawn.z,
        )

        spawn_chunks = [
            ChunkPayload.from_generated(generated)
            for generated in self._generator(seed).spawn_area(spawn.radius)
        ]

        with self._lock:
            self._worlds[info.id] = info

        logger.info(
            "world_created",
            world_id=info.id,
            name=name,
            seed=seed,
            spawn_chunks=len(spawn_chunks),
        )
        return CreatedWorld(
            info=info,
            spawn_chunks=spawn_chunks,
            created_at=int(time.time() * 1000),
        )

    def get_world_info(self, world_id: str) -> WorldInfo:
        """Get world metadata.

        Worlds created by this service return their stored metadata. Unknown
        ids describe a procedural world that uses the id as name and seed.
        """
        with self._lock:
            info = self._worlds.get(world_id)

        if info is None:
            spawn = self.config.spawn
            info = WorldInfo(
                id=world_id,
                name=world_id,
                seed=world_id,
                spawn_x=spawn.x,
                spawn_y=spawn.y,
                spawn_z=spawn.z,
            )
            logger.debug("world_info_procedural", world_id=world_id)

        return info

    def list_worlds(self) -> list[WorldInfo]:
        """Worlds created by this service, in creation order."""
        with self._lock:
            return list(self._worlds.values())
