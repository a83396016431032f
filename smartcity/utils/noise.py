"""Seeded 2D coherent noise used for zone classification and building heights."""
import numpy as np
from opensimplex import OpenSimplex


class NoiseField:
    """Coherent 2D noise determined entirely by its seed.

    ``sample`` is a pure function of ``(x, y)``, so any number of callers can
    share one instance without affecting each other.
    """

    def __init__(self, seed: int):
        """Seed the underlying OpenSimplex generator.

        Args:
            seed: Integer seed.
        """
        self.seed = seed
        self._simplex = OpenSimplex(seed=seed)

    def sample(self, x: float, y: float) -> float:
        """Sample the field.

        Args:
            x: X coordinate in noise space.
            y: Y coordinate in noise space.

        Returns:
            A float in [-1, 1].
        """
        return max(-1.0, min(1.0, float(self._simplex.noise2(x, y))))

    def sample_grid(self, xs, ys) -> np.ndarray:
        """Sample the field on the grid spanned by ``xs`` and ``ys``.

        Args:
            xs: 1D array of x coordinates.
            ys: 1D array of y coordinates.

        Returns:
            Array of shape ``(len(ys), len(xs))`` with values in [-1, 1].
        """
        values = self._simplex.noise2array(np.asarray(xs, dtype=np.float64), np.asarray(ys, dtype=np.float64))
        return np.clip(values, -1.0, 1.0)

    def __call__(self, x: float, y: float) -> float:
        """Alias for :meth:`sample`."""
        return self.sample(x, y)
