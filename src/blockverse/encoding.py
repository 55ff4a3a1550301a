"""Chunk encoding utilities for compact storage and transmission."""

import base64
from io import BytesIO

import numpy as np
from numpy.typing import NDArray

from .materials import AIR_CODE, material_from_code
from .terrain.chunks import Chunk
from .terrain.config import GenerationOptions
from .types import Block, world_coords


def chunk_to_volume(
    chunk: Chunk, options: GenerationOptions | None = None
) -> NDArray[np.uint8]:
    """Pack a chunk's blocks into a dense material-code volume.

    Args:
        chunk: Generated chunk.
        options: Options the chunk was generated with (defaults if None).

    Returns:
        uint8 array of shape (chunk_size, chunk_size, world_height) indexed
        [x, z, y], AIR_CODE where no block exists.

    Raises:
        ValueError: If a block lies outside the volume, which means the chunk
            was generated with different options.
    """
    options = options or GenerationOptions()
    size = options.chunk_size
    height = options.world_height
    volume = np.full((size, size, height), AIR_CODE, dtype=np.uint8)
    base_x, base_z = world_coords(chunk.chunk_x, chunk.chunk_z, 0, 0, size)

    for block in chunk.blocks:
        local_x = block.x - base_x
        local_z = block.z - base_z
        if not (0 <= local_x < size and 0 <= local_z < size and 0 <= block.y < height):
            raise ValueError(
                f"Block at ({block.x}, {block.y}, {block.z}) does not fit the "
                f"{size}x{size}x{height} volume of chunk ({chunk.chunk_x}, {chunk.chunk_z})"
            )
        volume[local_x, local_z, block.y] = block.material.code

    return volume


def volume_to_blocks(
    volume: NDArray[np.uint8], chunk_x: int, chunk_z: int
) -> list[Block]:
    """Expand a material-code volume back into blocks.

    Blocks come out column by column (x outer, z inner) with y ascending,
    the same order generate_chunk emits them.

    Args:
        volume: uint8 array indexed [x, z, y].
        chunk_x: Chunk x coordinate.
        chunk_z: Chunk z coordinate.

    Returns:
        List of non-air blocks.
    """
    size = volume.shape[0]
    blocks: list[Block] = []
    for local_x, local_z, y in zip(*np.nonzero(volume)):
        material = material_from_code(int(volume[local_x, local_z, y]))
        x, z = world_coords(chunk_x, chunk_z, int(local_x), int(local_z), size)
        blocks.append(Block(x, int(y), z, material))
    return blocks


def encode_volume_rle(volume: NDArray[np.uint8]) -> bytes:
    """Run-length encode a volume.

    Flattens the array in C order and encodes as (value, count) pairs.
    Count is stored as 1 byte (max 255), split into multiple entries if needed.

    Args:
        volume: uint8 array of any shape.

    Returns:
        Compressed bytes: [value, count, value, count, ...]
    """
    flat = volume.ravel()
    if len(flat) == 0:
        return b""

    # Run boundaries, then split runs longer than 255
    change = np.flatnonzero(flat[1:] != flat[:-1]) + 1
    starts = np.concatenate(([0], change))
    lengths = np.diff(np.concatenate((starts, [len(flat)])))

    result = BytesIO()
    for start, length in zip(starts, lengths):
        value = int(flat[start])
        while length > 255:
            result.write(bytes([value, 255]))
            length -= 255
        result.write(bytes([value, int(length)]))
    return result.getvalue()


def decode_volume_rle(data: bytes, shape: tuple[int, ...]) -> NDArray[np.uint8]:
    """Decode RLE-compressed volume data.

    Args:
        data: RLE-encoded bytes from encode_volume_rle.
        shape: Expected output shape.

    Returns:
        uint8 array with the decoded volume.

    Raises:
        ValueError: If decoded length doesn't match expected shape.
    """
    expected_size = int(np.prod(shape))
    result = np.zeros(expected_size, dtype=np.uint8)

    pos = 0
    i = 0
    while i < len(data) - 1:
        value = data[i]
        count = data[i + 1]
        if pos + count > expected_size:
            raise ValueError(
                f"RLE decode overflow: {pos + count} > {expected_size}"
            )
        result[pos : pos + count] = value
        pos += count
        i += 2

    if pos != expected_size:
        raise ValueError(
            f"RLE decode size mismatch: got {pos}, expected {expected_size}"
        )

    return result.reshape(shape)


def encode_chunk_base64(chunk: Chunk, options: GenerationOptions | None = None) -> str:
    """Encode a chunk as a base64 string of its RLE-compressed volume."""
    rle_bytes = encode_volume_rle(chunk_to_volume(chunk, options))
    return base64.b64encode(rle_bytes).decode("ascii")


def decode_chunk_base64(
    data: str, chunk_x: int, chunk_z: int, options: GenerationOptions | None = None
) -> list[Block]:
    """Decode a base64 chunk encoding back into blocks.

    The options must match the ones used to encode, since they fix the
    volume shape.
    """
    options = options or GenerationOptions()
    size = options.chunk_size
    rle_bytes = base64.b64decode(data)
    volume = decode_volume_rle(rle_bytes, (size, size, options.world_height))
    return volume_to_blocks(volume, chunk_x, chunk_z)
