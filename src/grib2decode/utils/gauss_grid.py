"""Latitudes of Gaussian grids (Grid Definition Template 3.40)."""
from functools import lru_cache

import numpy as np
import numpy.linalg as la
from numpy.polynomial.legendre import legcompanion, legder, legval
from numpy.typing import NDArray


@lru_cache(maxsize=16)
def gaussian_latitudes(nlat: int) -> NDArray[np.float64]:
    """
    Construct latitudes for a Gaussian grid.

    Latitudes are the roots of the Legendre polynomial of degree `nlat`,
    ordered from North to South.

    Parameters
    ----------
    nlat
        The number of latitudes in the Gaussian grid.

    Returns
    -------
    latitudes
        Read-only `numpy.ndarray` of latitudes (in degrees) with a length of
        `nlat`.
    """
    if nlat <= 0 or int(nlat) != nlat:
        raise ValueError('nlat must be a positive integer')
    cs = np.array([0] * nlat + [1], dtype=int)
    # The companion matrix is symmetric, so eigvalsh gives the roots.
    roots = la.eigvalsh(legcompanion(cs))
    roots.sort()
    # One Newton step to polish the roots.
    roots -= legval(roots, cs) / legval(roots, legder(cs))
    # Enforce symmetry about the equator.
    roots = (roots - roots[::-1]) / 2.
    latitudes = np.flip(np.rad2deg(np.arcsin(roots)))
    latitudes.setflags(write=False)
    return latitudes
