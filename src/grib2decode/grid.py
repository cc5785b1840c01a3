"""
Grid geometry built from the Grid Definition Section (Section 3).

`build_grid_definition` turns a decoded Section 3 into a `GridDefinition`.
Regular latitude/longitude (3.0), rotated latitude/longitude (3.1), polar
stereographic (3.20), Lambert conformal (3.30) and Gaussian (3.40) grids are
understood.  Any other grid template produces an approximate square grid so
that the values of the message can still be decoded.

The scan normalizer (`normalize_scan`) reorders values so that the first row
of every grid is its northernmost row.
"""
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import List, NamedTuple, Optional, Tuple
import logging
import math

import numpy as np
from numpy.typing import NDArray
import pyproj

from . import tables
from .errors import Diagnostic, UnsupportedFeatureError, UnsupportedTemplateError
from .sections import Section, decode_section
from .utils import rotated_grid
from .utils.gauss_grid import gaussian_latitudes

logger = logging.getLogger(__name__)

MISSING_UINT32 = 0xFFFFFFFF
LATLON_TEMPLATES = frozenset({0, 1, 40})
PROJECTED_TEMPLATES = frozenset({20, 30})

# Scanning mode flags are held most significant bit first, so index n is WMO
# bit n+1 of Flag Table 3.4.
_UNSUPPORTED_SCAN_BITS = {
    0: 'points scanning in the -i direction',
    2: 'adjacent points in the j direction being consecutive',
    3: 'boustrophedonic row ordering',
    4: 'odd rows offset in the i direction',
    5: 'even rows offset in the i direction',
    7: 'rows with Ny-1 points',
}


class Bounds(NamedTuple):
    """Geographic extent of a grid in degrees."""
    west: float
    south: float
    east: float
    north: float


@dataclass(frozen=True)
class LambertParameters:
    """Lambert conformal conic parameters, in degrees."""
    lat1: float
    lat2: float
    lov: float
    lad: float


@dataclass(frozen=True)
class GridDefinition:
    """
    Geometry of a GRIB2 grid.

    Angles are in degrees.  `inc_i` and `inc_j` are degrees for
    latitude/longitude grids and metres for projected grids.  The values of
    the grid describe the order points are stored in the message;
    `latlons()` always returns coordinates with the northernmost row first.

    Attributes
    ----------
    template_number
        Grid Definition Template Number (Code Table 3.1).
    nx, ny
        Number of points along a row and along a column.
    num_points
        Number of data points declared in Section 3.
    lat_start, lon_start
        Coordinates of the first grid point.
    lat_end, lon_end
        Coordinates of the last grid point, when the template carries them.
    inc_i, inc_j
        Grid increments.
    scanning_mode
        Tuple of 8 ints (Flag Table 3.4), most significant bit first.
    approximate
        `True` when the grid template is not understood and the grid is a
        square stand-in large enough to hold every value.
    """
    template_number: int
    nx: int
    ny: int
    num_points: int
    lat_start: Optional[float] = None
    lon_start: Optional[float] = None
    lat_end: Optional[float] = None
    lon_end: Optional[float] = None
    inc_i: Optional[float] = None
    inc_j: Optional[float] = None
    scanning_mode: Tuple[int, ...] = (0,)*8
    lambert: Optional[LambertParameters] = None
    lat_true_scale: Optional[float] = None
    orientation: Optional[float] = None
    projection_center: int = 0
    south_pole: Optional[Tuple[float, float]] = None
    rotation_angle: Optional[float] = None
    number_of_parallels: Optional[int] = None
    shape_of_earth: Optional[int] = None
    earth_radius: Optional[float] = None
    earth_major_axis: Optional[float] = None
    earth_minor_axis: Optional[float] = None
    approximate: bool = False

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.ny, self.nx)

    @property
    def name(self) -> str:
        return tables.get_value_from_table(self.template_number, '3.1')

    @property
    def is_latlon(self) -> bool:
        return self.template_number in LATLON_TEMPLATES and not self.approximate

    @property
    def rows_south_to_north(self) -> bool:
        """
        `True` when the first stored row is the southernmost row.

        The latitudes of the first and last points decide when both are known
        and differ; otherwise bit 2 of the scanning mode (+j scanning) does.
        """
        if self.approximate:
            return False
        if self.lat_start is not None and self.lat_end is not None and \
           self.lat_start != self.lat_end:
            return self.lat_start < self.lat_end
        return self.scanning_mode[1] == 1

    @property
    def proj_params(self) -> dict:
        """PROJ parameters describing the coordinate reference system."""
        projparams = {}
        if self.approximate:
            return projparams
        if self.earth_radius is not None:
            projparams['a'] = self.earth_radius
            projparams['b'] = self.earth_radius
        else:
            if self.earth_major_axis is not None: projparams['a'] = self.earth_major_axis
            if self.earth_minor_axis is not None: projparams['b'] = self.earth_minor_axis
        if self.template_number in {0, 40}:
            projparams['proj'] = 'longlat'
        elif self.template_number == 1:
            projparams['o_proj'] = 'longlat'
            projparams['proj'] = 'ob_tran'
            projparams['o_lat_p'] = -1.0*self.south_pole[0]
            projparams['o_lon_p'] = self.rotation_angle
            projparams['lon_0'] = self.south_pole[1]
        elif self.template_number == 20:
            projparams['proj'] = 'stere'
            projparams['lat_ts'] = self.lat_true_scale
            projparams['lat_0'] = -90.0 if self.projection_center else 90.0
            projparams['lon_0'] = self.orientation
        elif self.template_number == 30:
            projparams['proj'] = 'lcc'
            projparams['lat_1'] = self.lambert.lat1
            projparams['lat_2'] = self.lambert.lat2
            projparams['lat_0'] = self.lambert.lad
            projparams['lon_0'] = self.lambert.lov
        return projparams

    def latlons(self) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """
        Return lats, lons (in degrees) of the grid.

        Rows are ordered north to south, matching values returned by
        `normalize_scan`.  Longitudes are in (-180, 180].  Arrays are cached
        and read-only.

        Returns
        -------
        lats, lons : numpy.ndarray
            2-D arrays of shape `(ny, nx)`.

        Raises
        ------
        ValueError
            If the grid is approximate.
        """
        return _latlons(self)

    @property
    def bounds(self) -> Optional[Bounds]:
        """
        West, south, east and north limits of the grid, `None` if approximate.

        Longitudes are in (-180, 180].  A grid that wraps the globe reports
        west = -180 and east = 180.  A regional grid crossing the antimeridian
        reports west > east, as `subset_indices` accepts.
        """
        if self.approximate:
            return None
        if self.template_number == 0:
            south = min(self.lat_start, self.lat_end)
            north = max(self.lat_start, self.lat_end)
            if self.inc_i and self.nx*self.inc_i >= 360.0-1.e-6:
                return Bounds(-180.0, south, 180.0, north)
            return Bounds(self.lon_start, south, self.lon_end, north)
        lats, lons = self.latlons()
        return Bounds(float(lons.min()), float(lats.min()),
                      float(lons.max()), float(lats.max()))

    def subset_indices(self, bbox) -> Tuple[slice, slice]:
        """
        Row and column window covering a bounding box.

        Parameters
        ----------
        bbox
            Sequence of west, south, east, north in degrees.

        Returns
        -------
        rows, cols : slice
            Slices into the north-first 2-D array of values.

        Raises
        ------
        ValueError
            If the grid is approximate or the box does not intersect the grid.
        """
        if self.approximate:
            raise ValueError('Approximate grids have no geographic coordinates')
        west, south, east, north = (float(b) for b in bbox)
        if south > north:
            raise ValueError(f'South edge {south} is north of north edge {north}')
        if self.template_number == 0 and self.inc_i and self.inc_j:
            north0 = max(self.lat_start, self.lat_end)
            row0 = math.floor((north0-north)/self.inc_j)
            row1 = math.ceil((north0-south)/self.inc_j)
            col0 = math.floor(((west-self.lon_start) % 360)/self.inc_i)
            col1 = math.ceil(((east-self.lon_start) % 360)/self.inc_i)
            if col1 < col0:
                raise ValueError('Bounding box crosses the longitude seam of the grid')
            if row1 < 0 or row0 > self.ny-1 or col0 > self.nx-1:
                raise ValueError(f'Bounding box {tuple(bbox)} does not intersect the grid')
            row0, row1 = max(row0, 0), min(row1, self.ny-1)
            col0, col1 = max(col0, 0), min(col1, self.nx-1)
            return slice(row0, row1+1), slice(col0, col1+1)

        lats, lons = self.latlons()
        inside = (lats >= south) & (lats <= north)
        if west <= east:
            inside &= (lons >= west) & (lons <= east)
        else:
            inside &= (lons >= west) | (lons <= east)
        rows = np.flatnonzero(inside.any(axis=1))
        cols = np.flatnonzero(inside.any(axis=0))
        if rows.size == 0:
            raise ValueError(f'Bounding box {tuple(bbox)} does not intersect the grid')
        return slice(int(rows[0]), int(rows[-1])+1), slice(int(cols[0]), int(cols[-1])+1)


def normalize_longitude(lon):
    """Map longitudes in degrees onto (-180, 180]."""
    lon = np.mod(lon, 360.0)
    lon = np.where(lon > 180.0, lon-360.0, lon)
    return float(lon) if np.ndim(lon) == 0 else lon


def _earth(section3: Section) -> Tuple[Optional[float], Optional[float], Optional[float]]:
    """Return earth radius, major axis and minor axis in metres."""
    shape = section3['shapeOfEarth']
    ep = tables.get_value_from_table(shape, 'earth_params')
    if ep is None:
        return None, None, None
    if ep['shape'] == 'spherical':
        if ep['radius'] is None:
            return section3['scaledValueRadiusEarth']/(10.**section3['scaleFactorRadiusEarth']), None, None
        return ep['radius'], None, None
    if ep['major_axis'] is None and ep['minor_axis'] is None:
        # Shape 3 gives the axes in km, shape 7 in metres.
        units = 1000.0 if shape == 3 else 1.0
        major = units*section3['scaledValueMajorAxis']/(10.**section3['scaleFactorMajorAxis'])
        minor = units*section3['scaledValueMinorAxis']/(10.**section3['scaleFactorMinorAxis'])
        return None, major, minor
    return None, ep['major_axis'], ep['minor_axis']


def _angle_scale(section3: Section) -> float:
    """Degrees per unit of the angles of a latitude/longitude template."""
    basic = section3['basicAngleOfInitialProductionDomain']
    subdivisions = section3['subdivisionsOfBasicAngle']
    if basic in {0, MISSING_UINT32} or subdivisions in {0, MISSING_UINT32}:
        return 1.e-6
    return basic/subdivisions


def _common(section3: Section) -> dict:
    radius, major, minor = _earth(section3)
    return dict(template_number=section3.template_number,
                nx=section3['nx'],
                ny=section3['ny'],
                num_points=section3['numberOfDataPoints'],
                scanning_mode=tuple(section3.get_field('scanModeFlags').flags),
                shape_of_earth=section3['shapeOfEarth'],
                earth_radius=radius,
                earth_major_axis=major,
                earth_minor_axis=minor)


def _latlon_grid(section3: Section) -> GridDefinition:
    scale = _angle_scale(section3)
    nx, ny = section3['nx'], section3['ny']
    lat1 = section3['latitudeFirstGridpoint']*scale
    lat2 = section3['latitudeLastGridpoint']*scale
    lon1 = normalize_longitude(section3['longitudeFirstGridpoint']*scale)
    lon2 = normalize_longitude(section3['longitudeLastGridpoint']*scale)
    resflags = section3.get_field('resolutionAndComponentFlags').flags

    di = section3['gridlengthXDirection']
    if di != MISSING_UINT32 and resflags[2]:
        inc_i = di*scale
    else:
        inc_i = ((lon2-lon1) % 360)/(nx-1) if nx > 1 else None

    inc_j = None
    if 'gridlengthYDirection' in section3:
        dj = section3['gridlengthYDirection']
        if dj != MISSING_UINT32 and resflags[3]:
            inc_j = dj*scale
        elif ny > 1:
            inc_j = abs(lat2-lat1)/(ny-1)

    kwargs = _common(section3)
    if section3.template_number == 1:
        kwargs['south_pole'] = (section3['latitudeSouthernPole']*scale,
                                section3['longitudeSouthernPole']*scale)
        kwargs['rotation_angle'] = float(section3['anglePoleRotation'])
    elif section3.template_number == 40:
        kwargs['number_of_parallels'] = section3['numberOfParallels']
    return GridDefinition(lat_start=lat1, lon_start=lon1, lat_end=lat2, lon_end=lon2,
                          inc_i=inc_i, inc_j=inc_j, **kwargs)


def _projected_grid(section3: Section) -> GridDefinition:
    lat1 = section3['latitudeFirstGridpoint']*1.e-6
    lon1 = normalize_longitude(section3['longitudeFirstGridpoint']*1.e-6)
    lad = section3['latitudeTrueScale']*1.e-6
    lov = normalize_longitude(section3['gridOrientation']*1.e-6)
    kwargs = _common(section3)
    if section3.template_number == 30:
        kwargs['lambert'] = LambertParameters(section3['standardLatitude1']*1.e-6,
                                              section3['standardLatitude2']*1.e-6,
                                              lov, lad)
        kwargs['south_pole'] = (section3['latitudeSouthernPole']*1.e-6,
                                normalize_longitude(section3['longitudeSouthernPole']*1.e-6))
    return GridDefinition(lat_start=lat1, lon_start=lon1,
                          inc_i=section3['gridlengthXDirection']/1.e3,
                          inc_j=section3['gridlengthYDirection']/1.e3,
                          lat_true_scale=lad, orientation=lov,
                          projection_center=section3.get_field('projectionCenterFlag').flags[0],
                          **kwargs)


_BUILDERS = {
    0: _latlon_grid,
    1: _latlon_grid,
    20: _projected_grid,
    30: _projected_grid,
    40: _latlon_grid,
}


def approximate_grid(num_points: int, template_number: int,
                     diagnostics: Optional[List[Diagnostic]] = None) -> GridDefinition:
    """
    Square grid of side ceil(sqrt(num_points)) standing in for an unknown grid.
    """
    side = math.isqrt(num_points)
    if side*side < num_points:
        side += 1
    msg = (f'Grid definition template {template_number} is not supported; '
           f'using an approximate {side}x{side} grid')
    logger.debug(msg)
    if diagnostics is not None:
        diagnostics.append(Diagnostic('approximate-grid', msg, section=3))
    return GridDefinition(template_number, side, side, num_points, approximate=True)


def build_grid_definition(section3: Section,
                          diagnostics: Optional[List[Diagnostic]] = None) -> GridDefinition:
    """
    Build the grid geometry of a message.

    Parameters
    ----------
    section3
        Decoded Grid Definition Section.  If it was decoded without its
        template (because the template is not in the catalog) the fallback
        approximate grid is returned.
    diagnostics
        List that notes about the grid are appended to.

    Returns
    -------
    build_grid_definition
        `GridDefinition` as stored in the message.  Apply `normalize_grid`
        to account for the scanning mode.

    Raises
    ------
    UnsupportedFeatureError
        For quasi-regular grids (a list of points per row follows the
        template).
    """
    if diagnostics is None:
        diagnostics = []
    gdtn = section3.template_number
    num_points = section3['numberOfDataPoints']
    builder = _BUILDERS.get(gdtn)
    if builder is None or 'nx' not in section3:
        return approximate_grid(num_points, gdtn, diagnostics)
    if section3['numberOfOctetsForNumberOfPoints'] != 0:
        raise UnsupportedFeatureError('Quasi-regular grids (list of numbers of points) are not supported')
    grid = builder(section3)
    if grid.nx*grid.ny != grid.num_points:
        msg = (f'Grid of {grid.nx}x{grid.ny} points does not match the '
               f'{grid.num_points} data points declared')
        logger.debug(msg)
        diagnostics.append(Diagnostic('point-count-mismatch', msg, section=3, inconsistency=True))
    return grid


def grid_from_section(data, offset: int = 0,
                      diagnostics: Optional[List[Diagnostic]] = None) -> GridDefinition:
    """
    Decode Section 3 bytes and build the grid, falling back to an approximate
    grid when the template is not in the catalog.
    """
    try:
        section3 = decode_section(3, data, offset)
    except(UnsupportedTemplateError):
        section3 = decode_section(3, data, offset, resolve=False)
    return build_grid_definition(section3, diagnostics)


@lru_cache(maxsize=32)
def _latlons(grid: GridDefinition):
    if grid.approximate:
        raise ValueError('Approximate grids have no geographic coordinates')
    gdtn = grid.template_number
    if gdtn in {0, 1}:
        lats = np.linspace(grid.lat_start, grid.lat_end, grid.ny)
        lons = grid.lon_start+grid.inc_i*np.arange(grid.nx)
        lons, lats = np.meshgrid(lons, lats)
        if gdtn == 1:
            lats, lons = rotated_grid.unrotate(lats, lons, grid.rotation_angle,
                                               *grid.south_pole)
    elif gdtn == 40:
        lats = gaussian_latitudes(2*grid.number_of_parallels)
        if lats.size != grid.ny:
            # Regional Gaussian grid; keep the rows between the end points.
            south = min(grid.lat_start, grid.lat_end)
            north = max(grid.lat_start, grid.lat_end)
            eps = 1.e-4
            lats = lats[(lats >= south-eps) & (lats <= north+eps)]
            if lats.size != grid.ny:
                raise ValueError(f'Cannot place {grid.ny} Gaussian latitudes between {south} and {north}')
        if grid.lat_start < grid.lat_end:
            lats = lats[::-1]
        lons = grid.lon_start+grid.inc_i*np.arange(grid.nx)
        lons, lats = np.meshgrid(lons, lats)
    elif gdtn in PROJECTED_TEMPLATES:
        pj = pyproj.Proj(grid.proj_params)
        x0, y0 = pj(grid.lon_start, grid.lat_start)
        jdir = 1 if grid.scanning_mode[1] else -1
        x = x0+grid.inc_i*np.arange(grid.nx)
        y = y0+jdir*grid.inc_j*np.arange(grid.ny)
        x, y = np.meshgrid(x, y)
        lons, lats = pj(x, y, inverse=True)
    else:
        raise ValueError(f'No coordinates for grid template {gdtn}')

    lats = np.asarray(lats, dtype=np.float64)
    lons = np.asarray(normalize_longitude(lons), dtype=np.float64)
    if grid.rows_south_to_north:
        lats, lons = lats[::-1], lons[::-1]
    lats = np.ascontiguousarray(lats)
    lons = np.ascontiguousarray(lons)
    lats.flags.writeable = False
    lons.flags.writeable = False
    return lats, lons


# ----------------------------------------------------------------------------------------
# Scan normalization.
# ----------------------------------------------------------------------------------------
def check_scanning_mode(scanning_mode):
    """
    Raise `UnsupportedFeatureError` for scanning modes other than row-major
    +i scanning, with or without +j, and the half-cell j offset.
    """
    for bit, what in _UNSUPPORTED_SCAN_BITS.items():
        if scanning_mode[bit]:
            raise UnsupportedFeatureError(f'Scanning mode bit {bit+1} ({what}) is not supported')


def flip_rows(values, nx: int, ny: int) -> np.ndarray:
    """
    Reverse the row order of a flat row-major array.

    The point at `row*nx + col` moves to `(ny-1-row)*nx + col`.  Applying
    the function twice returns the original order.
    """
    values = np.asarray(values)
    if values.size != nx*ny:
        raise ValueError(f'Cannot flip {values.size} values as a {ny}x{nx} grid')
    return values.reshape(ny, nx)[::-1].ravel()


def normalize_grid(grid: GridDefinition) -> GridDefinition:
    """
    Validate the scanning mode and apply the half-cell j offset (bit 7).

    Returns
    -------
    normalize_grid
        A new `GridDefinition` with end latitudes shifted by half a grid
        length in the j direction and scanning bit 7 cleared, or `grid`
        itself when bit 7 is not set.
    """
    mode = grid.scanning_mode
    check_scanning_mode(mode)
    if not mode[6]:
        return grid
    if grid.template_number not in LATLON_TEMPLATES or grid.approximate or grid.inc_j is None:
        raise UnsupportedFeatureError(f'Half-cell j offset on grid template {grid.template_number} '
                                      'is not supported')
    jdir = -1 if mode[1] == 0 else 1
    shift = jdir*grid.inc_j/2
    logger.debug('shifting latitudes by %s degrees for half-cell j offset', shift)
    return replace(grid, lat_start=grid.lat_start+shift, lat_end=grid.lat_end+shift,
                   scanning_mode=mode[:6]+(0,)+mode[7:])


def normalize_scan(values, grid: GridDefinition,
                   diagnostics: Optional[List[Diagnostic]] = None):
    """
    Put values in north-first row-major order.

    Parameters
    ----------
    values
        Flat array of values in storage order.
    grid
        Grid the values were stored on.
    diagnostics
        List that notes are appended to.

    Returns
    -------
    values : numpy.ndarray
        Values with the northernmost row first.
    grid : GridDefinition
        Grid adjusted by `normalize_grid`.
    flipped : bool
        `True` when the row order was reversed.
    """
    grid = normalize_grid(grid)
    values = np.asarray(values)
    if not grid.rows_south_to_north:
        return values, grid, False
    if values.size != grid.nx*grid.ny:
        msg = f'{values.size} values do not fill the {grid.ny}x{grid.nx} grid; rows left in stored order'
        logger.debug(msg)
        if diagnostics is not None:
            diagnostics.append(Diagnostic('scan-order', msg, section=3, inconsistency=True))
        return values, grid, False
    return flip_rows(values, grid.nx, grid.ny), grid, True
