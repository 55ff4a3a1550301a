"""Core value types for the world generator."""

from dataclasses import dataclass

from pydantic import BaseModel

from .materials import MaterialKind


class ChunkCoord(BaseModel, frozen=True):
    """Immutable chunk grid coordinate."""

    chunk_x: int
    chunk_z: int


@dataclass(frozen=True)
class Block:
    """A single placed block in world coordinates."""

    x: int
    y: int
    z: int
    material: MaterialKind

    def to_dict(self) -> dict[str, int | str]:
        """JSON-ready representation."""
        return {"x": self.x, "y": self.y, "z": self.z, "type": self.material.value}


def world_coords(
    chunk_x: int, chunk_z: int, local_x: int, local_z: int, chunk_size: int
) -> tuple[int, int]:
    """Convert chunk + local offset to world coordinates."""
    return (chunk_x * chunk_size + local_x, chunk_z * chunk_size + local_z)
