"""
Seeded 2D Perlin gradient noise and fractal Brownian motion.

Evaluation is vectorised over numpy coordinate arrays. Each PerlinNoise
instance owns its permutation table, shuffled by an Alea PRNG, so two
generators never share noise state.
"""

from typing import Optional

import numpy as np

from .random import Seed, create_prng

# 8 gradient directions; hashes select one with ``hash & 7``
GRADIENTS = np.array(
    [[1, 1], [-1, 1], [1, -1], [-1, -1], [1, 0], [-1, 0], [0, 1], [0, -1]],
    dtype=np.float64,
)


def fade(t: np.ndarray) -> np.ndarray:
    """Perlin's quintic smoothstep, 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(t: np.ndarray, a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


class PerlinNoise:
    """
    2D Perlin noise with a seeded permutation.

    Args:
        seed: Seed for the permutation shuffle; None uses the configured default
    """

    def __init__(self, seed: Optional[Seed] = None):
        prng = create_prng(seed, "noise")
        permutation = list(range(256))
        prng.shuffle(permutation)
        # Doubled so corner lookups never wrap
        self.permutation = np.array(permutation + permutation, dtype=np.int64)

    def noise(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        """
        Sample noise at the given coordinates.

        Returns:
            Array with the broadcast shape of ``x`` and ``y``, values in [0, 1]
        """
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        p = self.permutation

        x_floor = np.floor(x)
        y_floor = np.floor(y)
        xi = x_floor.astype(np.int64) & 255
        yi = y_floor.astype(np.int64) & 255
        xf = x - x_floor
        yf = y - y_floor

        u = fade(xf)
        v = fade(yf)

        aa = p[p[xi] + yi]
        ab = p[p[xi] + yi + 1]
        ba = p[p[xi + 1] + yi]
        bb = p[p[xi + 1] + yi + 1]

        x1 = lerp(u, self._grad(aa, xf, yf), self._grad(ba, xf - 1, yf))
        x2 = lerp(u, self._grad(ab, xf, yf - 1), self._grad(bb, xf - 1, yf - 1))
        result = lerp(v, x1, x2)

        return (result + 1) / 2

    def fbm(
        self,
        x: np.ndarray,
        y: np.ndarray,
        octaves: int = 4,
        persistence: float = 0.5,
        lacunarity: float = 2.0,
    ) -> np.ndarray:
        """Sum ``octaves`` layers of noise, normalised back to [0, 1]."""
        x = np.asarray(x, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)

        total = np.zeros(np.broadcast(x, y).shape, dtype=np.float64)
        frequency = 1.0
        amplitude = 1.0
        max_value = 0.0

        for _ in range(octaves):
            total += self.noise(x * frequency, y * frequency) * amplitude
            max_value += amplitude
            amplitude *= persistence
            frequency *= lacunarity

        return total / max_value

    @staticmethod
    def _grad(hashes: np.ndarray, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        gradient = GRADIENTS[hashes & 7]
        return gradient[..., 0] * x + gradient[..., 1] * y
