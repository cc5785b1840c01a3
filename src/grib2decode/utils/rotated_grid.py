"""Tools for working with Rotated Lat/Lon Grids (Grid Definition Template 3.1)."""

import numpy as np
from numpy.typing import NDArray

RAD2DEG = 57.29577951308232087684
DEG2RAD = 0.01745329251994329576


def unrotate(
    latin: NDArray[np.float64],
    lonin: NDArray[np.float64],
    aor: float,
    splat: float,
    splon: float,
) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Convert rotated grid coordinates to geographic latitude and longitude.

    Parameters
    ----------
    latin
        Rotated latitudes in units of degrees.
    lonin
        Rotated longitudes in units of degrees.
    aor
        Angle of rotation as defined in GRIB2 GDTN 3.1.
    splat
        Latitude of South Pole as defined in GRIB2 GDTN 3.1.
    splon
        Longitude of South Pole as defined in GRIB2 GDTN 3.1.

    Returns
    -------
    lats, lons
        `numpy.ndarrays` of geographic latitudes and longitudes in units of
        degrees.
    """
    latr = DEG2RAD * np.asarray(latin, dtype=np.float64)
    lonr = DEG2RAD * np.asarray(lonin, dtype=np.float64)

    # Cartesian coordinates on the rotated sphere.
    xd = np.cos(lonr) * np.cos(latr)
    yd = np.sin(lonr) * np.cos(latr)
    zd = np.sin(latr)

    theta = -DEG2RAD * (90.0 + splat)
    phi = -DEG2RAD * splon
    sin_t, cos_t = np.sin(theta), np.cos(theta)
    sin_p, cos_p = np.sin(phi), np.cos(phi)

    x = cos_t * cos_p * xd + sin_p * yd + sin_t * cos_p * zd
    y = -cos_t * sin_p * xd + cos_p * yd - sin_t * sin_p * zd
    z = np.clip(-sin_t * xd + cos_t * zd, -1.0, 1.0)

    lats = np.round(np.arcsin(z) * RAD2DEG, 6)
    lons = np.round(np.arctan2(y, x) * RAD2DEG, 6) - aor
    return lats, lons
