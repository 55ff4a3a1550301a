"""Seeded noise source for terrain generation.

Turns an arbitrary world seed into an immutable NoiseContext that samples
2D simplex noise at continuous coordinates. Every generation call receives
its context explicitly, so there is no shared state to reseed or race on.
"""

import logging
import math
from functools import lru_cache
from typing import overload

import numpy as np
from numpy.typing import NDArray

logger = logging.getLogger(__name__)

SeedLike = str | int | bytes | None

# Skew/unskew factors for the 2D simplex grid
F2 = 0.5 * (math.sqrt(3.0) - 1.0)
G2 = (3.0 - math.sqrt(3.0)) / 6.0

_GRADIENTS = np.array(
    [
        [1, 1], [-1, 1], [1, -1], [-1, -1],
        [1, 0], [-1, 0], [1, 0], [-1, 0],
        [0, 1], [0, -1], [0, 1], [0, -1],
    ],
    dtype=np.float64,
)

_TABLE_SIZE = 256


def seed_text(seed: SeedLike) -> str:
    """Normalize a seed value to the string that gets hashed.

    Integers hash through their decimal form, so 42 and "42" name the same
    world. Unsupported values fall back to the empty string.
    """
    if seed is None:
        return ""
    if isinstance(seed, bool):
        logger.warning("Unsupported seed type bool, using empty seed")
        return ""
    if isinstance(seed, str):
        return seed
    if isinstance(seed, int):
        return str(seed)
    if isinstance(seed, bytes):
        return seed.decode("utf-8", errors="replace")
    logger.warning(f"Unsupported seed type {type(seed).__name__}, using empty seed")
    return ""


def hash_seed(seed: SeedLike) -> int:
    """Hash a seed with the classic ``h = h * 31 + c`` rolling hash.

    Runs over UTF-16 code units, wraps to a signed 32-bit integer after each
    step and returns the absolute value.

    Args:
        seed: World seed.

    Returns:
        Non-negative integer in [0, 2**31].
    """
    units = seed_text(seed).encode("utf-16-le", errors="surrogatepass")
    value = 0
    for i in range(0, len(units), 2):
        value = (value * 31 + (units[i] | (units[i + 1] << 8))) & 0xFFFFFFFF
    if value & 0x80000000:
        value -= 0x100000000
    return abs(value)


class SineRandom:
    """Sine-based pseudo-random generator seeded from a hashed seed.

    Weak, but existing worlds depend on its exact sequence.
    """

    def __init__(self, seed: int):
        self._counter = seed

    def random(self) -> float:
        """Next value in [0, 1)."""
        x = math.sin(self._counter) * 10000
        self._counter += 1
        return x - math.floor(x)


def build_permutation(rng: SineRandom) -> NDArray[np.int64]:
    """Shuffle 0..255 and duplicate it into a 512-entry lookup table."""
    table = list(range(_TABLE_SIZE))
    for i in range(_TABLE_SIZE - 1):
        r = i + int(rng.random() * (_TABLE_SIZE - i))
        table[i], table[r] = table[r], table[i]
    perm = np.array(table + table, dtype=np.int64)
    perm.flags.writeable = False
    return perm


class NoiseContext:
    """Immutable simplex noise function bound to one seed."""

    __slots__ = ("_seed", "_seed_hash", "_perm", "_grad_index")

    def __init__(self, seed: str, seed_hash: int, perm: NDArray[np.int64]):
        self._seed = seed
        self._seed_hash = seed_hash
        self._perm = perm
        grad_index = perm % 12
        grad_index.flags.writeable = False
        self._grad_index = grad_index

    @property
    def seed(self) -> str:
        """Seed string this context was built from."""
        return self._seed

    @property
    def seed_hash(self) -> int:
        """Hashed seed integer."""
        return self._seed_hash

    @property
    def permutation(self) -> NDArray[np.int64]:
        """Read-only 512-entry permutation table."""
        return self._perm

    @overload
    def sample(self, x: float, z: float) -> float: ...

    @overload
    def sample(self, x: NDArray[np.float64], z: NDArray[np.float64]) -> NDArray[np.float64]: ...

    def sample(self, x, z):
        """Sample 2D simplex noise.

        Args:
            x: X coordinate(s), scalar or array.
            z: Z coordinate(s), broadcastable against x.

        Returns:
            Noise value(s) in [-1, 1]; a float for scalar input.
        """
        result = self._simplex(np.asarray(x, dtype=np.float64), np.asarray(z, dtype=np.float64))
        if result.ndim == 0:
            return float(result)
        return result

    def _simplex(self, x: NDArray[np.float64], y: NDArray[np.float64]) -> NDArray[np.float64]:
        perm = self._perm

        # Skew input space to find the containing simplex cell
        s = (x + y) * F2
        i = np.floor(x + s)
        j = np.floor(y + s)
        t = (i + j) * G2
        x0 = x - (i - t)
        y0 = y - (j - t)

        # Lower or upper triangle of the cell
        i1 = (x0 > y0).astype(np.int64)
        j1 = 1 - i1

        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1.0 + 2.0 * G2
        y2 = y0 - 1.0 + 2.0 * G2

        ii = i.astype(np.int64) & 255
        jj = j.astype(np.int64) & 255

        n0 = self._corner(x0, y0, ii + perm[jj])
        n1 = self._corner(x1, y1, ii + i1 + perm[jj + j1])
        n2 = self._corner(x2, y2, ii + 1 + perm[jj + 1])

        return 70.0 * (n0 + n1 + n2)

    def _corner(
        self,
        x: NDArray[np.float64],
        y: NDArray[np.float64],
        index: NDArray[np.int64],
    ) -> NDArray[np.float64]:
        grad = _GRADIENTS[self._grad_index[index]]
        t = 0.5 - x * x - y * y
        t2 = t * t
        contribution = t2 * t2 * (grad[..., 0] * x + grad[..., 1] * y)
        return np.where(t >= 0, contribution, 0.0)

    def __repr__(self) -> str:
        return f"NoiseContext(seed={self._seed!r}, seed_hash={self._seed_hash})"


def initialize(seed: SeedLike) -> NoiseContext:
    """Build the noise context for a seed.

    Never fails on seed content. Contexts are cached per seed hash; they are
    immutable so sharing them is safe.
    """
    text = seed_text(seed)
    return _context_for_hash(hash_seed(text), text)


@lru_cache(maxsize=64)
def _context_for_hash(seed_hash: int, text: str) -> NoiseContext:
    logger.debug(f"Building noise context for seed {text!r} (hash {seed_hash})")
    perm = build_permutation(SineRandom(seed_hash))
    return NoiseContext(text, seed_hash, perm)


def resolve_context(seed: "SeedLike | NoiseContext") -> NoiseContext:
    """Accept either a seed or a ready context."""
    if isinstance(seed, NoiseContext):
        return seed
    return initialize(seed)


def fbm(
    context: NoiseContext,
    x: NDArray[np.float64],
    z: NDArray[np.float64],
    scale: float,
    octaves: int = 4,
    persistence: float = 0.5,
) -> NDArray[np.float64]:
    """Sum octaves of noise at doubling frequency and decaying amplitude.

    Args:
        context: Noise context to sample.
        x: World x coordinates.
        z: World z coordinates.
        scale: Frequency of the base octave.
        octaves: Number of noise layers to sum.
        persistence: Amplitude multiplier between octaves.

    Returns:
        Values normalized by the amplitude sum, in [-1, 1].
    """
    total = np.zeros(np.broadcast(x, z).shape, dtype=np.float64)
    amplitude = 1.0
    frequency = scale
    max_value = 0.0

    for _ in range(octaves):
        total += context.sample(x * frequency, z * frequency) * amplitude
        max_value += amplitude
        amplitude *= persistence
        frequency *= 2

    return total / max_value
