import pytest
import numpy as np
from numpy.testing import assert_array_equal, assert_allclose

from grib2decode import utils
from grib2decode.errors import UnsupportedFeatureError
from grib2decode.grid import (Bounds, approximate_grid, check_scanning_mode, flip_rows,
                              grid_from_section, normalize_grid, normalize_longitude,
                              normalize_scan)
from grib2decode.utils.gauss_grid import gaussian_latitudes


def test_latlon_grid(builder):
    grid = grid_from_section(builder.section3_latlon(3, 2, 50, -10, 49, -8))
    assert grid.template_number == 0
    assert grid.shape == (2, 3)
    assert grid.num_points == 6
    assert grid.is_latlon
    assert not grid.approximate
    assert grid.name == 'Latitude/Longitude'
    assert grid.lon_start == pytest.approx(-10)
    assert grid.inc_i == pytest.approx(1)
    assert grid.inc_j == pytest.approx(1)
    assert grid.earth_radius == 6371229.0
    assert grid.proj_params == {'a': 6371229.0, 'b': 6371229.0, 'proj': 'longlat'}
    lats, lons = grid.latlons()
    assert_allclose(lats, [[50, 50, 50], [49, 49, 49]])
    assert_allclose(lons, [[-10, -9, -8], [-10, -9, -8]])
    assert not lats.flags.writeable
    assert grid.latlons()[0] is lats


def test_latlon_grid_increments_from_end_points(builder):
    # Increments flagged as not given are derived from the first and last points.
    grid = grid_from_section(builder.section3_latlon(5, 3, 10, 350, 14, 2, di=9, dj=9, resflags=0))
    assert grid.inc_i == pytest.approx(3)
    assert grid.inc_j == pytest.approx(2)
    assert grid.lon_start == pytest.approx(-10)
    lats, lons = grid.latlons()
    assert_allclose(lats[:, 0], [14, 12, 10])
    assert_allclose(lons[0], [-10, -7, -4, -1, 2])


def test_rows_south_to_north(builder):
    grid = grid_from_section(builder.section3_latlon(2, 3, 48, 0, 50, 1, scan=0x40))
    assert grid.rows_south_to_north
    lats, _ = grid.latlons()
    assert_allclose(lats[:, 0], [50, 49, 48])


def test_rotated_grid(builder):
    grid = grid_from_section(builder.section3_rotated(3, 2, 50, 0, 49, 2))
    assert grid.template_number == 1
    assert grid.south_pole == pytest.approx((-90, 0))
    assert grid.proj_params['proj'] == 'ob_tran'
    assert grid.proj_params['o_lat_p'] == pytest.approx(90)
    # A south pole at -90 degrees leaves coordinates unrotated.
    lats, lons = grid.latlons()
    assert_allclose(lats, [[50, 50, 50], [49, 49, 49]], atol=1.e-6)
    assert_allclose(lons, [[0, 1, 2], [0, 1, 2]], atol=1.e-6)


def test_gaussian_grid(builder):
    lat = gaussian_latitudes(2)[0]
    grid = grid_from_section(builder.section3_latlon(4, 2, lat, 0, -lat, 270, di=90, dj=1, template=40))
    assert grid.template_number == 40
    assert grid.number_of_parallels == 1
    lats, lons = grid.latlons()
    assert_allclose(lats[:, 0], gaussian_latitudes(2))
    assert_allclose(lons[0], [0, 90, 180, -90])


def test_lambert_grid(builder):
    grid = grid_from_section(builder.section3_lambert(3, 2, 25.0, 265.0))
    assert grid.template_number == 30
    assert not grid.is_latlon
    assert grid.lambert.lat1 == pytest.approx(25)
    assert grid.lambert.lov == pytest.approx(-95)
    assert grid.inc_i == pytest.approx(3000)
    assert grid.inc_j == pytest.approx(3000)
    assert grid.rows_south_to_north
    params = grid.proj_params
    assert params['proj'] == 'lcc'
    assert params['lat_0'] == pytest.approx(25)
    assert params['lon_0'] == pytest.approx(-95)
    lats, lons = grid.latlons()
    assert lats.shape == (2, 3)
    # The first stored point is in the southernmost row, now the last row.
    assert lats[1, 0] == pytest.approx(25, abs=1.e-6)
    assert lons[1, 0] == pytest.approx(-95, abs=1.e-6)
    assert np.all(lats[0] > lats[1])
    assert np.all(np.diff(lons, axis=1) > 0)


def test_approximate_grid(builder):
    diagnostics = []
    grid = grid_from_section(builder.section3_unknown(10), diagnostics=diagnostics)
    assert grid.approximate
    assert grid.template_number == 90
    assert grid.shape == (4, 4)
    assert grid.num_points == 10
    assert grid.bounds is None
    assert grid.proj_params == {}
    assert diagnostics[0].code == 'approximate-grid'
    with pytest.raises(ValueError):
        grid.latlons()
    with pytest.raises(ValueError):
        grid.subset_indices((0, 0, 1, 1))


@pytest.mark.parametrize("num_points, side", [(1, 1), (4, 2), (5, 3), (9, 3), (10, 4)])
def test_approximate_grid_side(num_points, side):
    assert approximate_grid(num_points, 90).shape == (side, side)


def test_point_count_mismatch(builder):
    diagnostics = []
    grid_from_section(builder.section3_latlon(2, 2, 50, 0, 49, 1, npoints=5), diagnostics=diagnostics)
    assert diagnostics[0].code == 'point-count-mismatch'
    assert diagnostics[0].inconsistency


def test_quasi_regular_grid(builder):
    with pytest.raises(UnsupportedFeatureError):
        grid_from_section(builder.section3_latlon(2, 2, 50, 0, 49, 1, octets_for_points=1))


@pytest.mark.parametrize("nx, ny", [(1, 1), (3, 1), (1, 3), (4, 3)])
def test_flip_rows_twice(nx, ny):
    values = np.arange(nx*ny)
    flipped = flip_rows(values, nx, ny)
    assert_array_equal(flip_rows(flipped, nx, ny), values)
    for row in range(ny):
        for col in range(nx):
            assert flipped[(ny-1-row)*nx+col] == values[row*nx+col]


def test_flip_rows_size_mismatch():
    with pytest.raises(ValueError):
        flip_rows(np.arange(5), 2, 2)


@pytest.mark.parametrize("flag", [0x80, 0x20, 0x10, 0x08, 0x04, 0x01])
def test_unsupported_scanning_mode(flag):
    with pytest.raises(UnsupportedFeatureError):
        check_scanning_mode(utils.int2bin(flag, output=list))


@pytest.mark.parametrize("flag", [0x00, 0x40, 0x02, 0x42])
def test_supported_scanning_mode(flag):
    check_scanning_mode(utils.int2bin(flag, output=list))


def test_normalize_scan_flips_south_first(builder):
    grid = grid_from_section(builder.section3_latlon(2, 2, 49, 0, 50, 1, scan=0x40))
    values, grid2, flipped = normalize_scan(np.array([10., 20., 30., 40.]), grid)
    assert flipped
    assert grid2 is grid
    assert_array_equal(values, [30, 40, 10, 20])


def test_normalize_scan_north_first(builder):
    grid = grid_from_section(builder.section3_latlon(2, 2, 50, 0, 49, 1))
    values, _, flipped = normalize_scan(np.array([10., 20., 30., 40.]), grid)
    assert not flipped
    assert_array_equal(values, [10, 20, 30, 40])


def test_normalize_scan_size_mismatch(builder):
    grid = grid_from_section(builder.section3_latlon(2, 2, 49, 0, 50, 1, scan=0x40))
    diagnostics = []
    values, _, flipped = normalize_scan(np.arange(3.), grid, diagnostics)
    assert not flipped
    assert_array_equal(values, [0, 1, 2])
    assert diagnostics[0].code == 'scan-order'


@pytest.mark.parametrize(
    "scan, lat1, lat2, expected",
    [
        pytest.param(0x02, 50, 48, (49.5, 47.5), id='minus-j'),
        pytest.param(0x42, 48, 50, (48.5, 50.5), id='plus-j'),
    ],
)
def test_half_cell_offset(builder, scan, lat1, lat2, expected):
    grid = normalize_grid(grid_from_section(builder.section3_latlon(2, 3, lat1, 0, lat2, 1, scan=scan)))
    assert (grid.lat_start, grid.lat_end) == pytest.approx(expected)
    assert grid.scanning_mode[6] == 0
    assert normalize_grid(grid) is grid


def test_half_cell_offset_projected(builder):
    grid = grid_from_section(builder.section3_lambert(3, 2, 25.0, 265.0, scan=0x42))
    with pytest.raises(UnsupportedFeatureError):
        normalize_grid(grid)


@pytest.mark.parametrize(
    "lon, expected",
    [(0, 0), (270, -90), (180, 180), (-180, 180), (360, 0), (-10, -10), (725, 5)],
)
def test_normalize_longitude(lon, expected):
    assert normalize_longitude(lon) == pytest.approx(expected)


def test_normalize_longitude_array():
    assert_allclose(normalize_longitude(np.array([190., 10.])), [-170, 10])


def test_bounds(builder):
    grid = grid_from_section(builder.section3_latlon(2, 2, 49, 0, 50, 1, scan=0x40))
    assert isinstance(grid.bounds, Bounds)
    assert grid.bounds == pytest.approx((0, 49, 1, 50))
    lambert = grid_from_section(builder.section3_lambert(3, 2, 25.0, 265.0))
    bounds = lambert.bounds
    assert bounds.south == pytest.approx(25, abs=1.e-3)
    assert bounds.west == pytest.approx(-95, abs=1.e-6)
    assert bounds.east > bounds.west
    assert bounds.north > bounds.south


@pytest.mark.parametrize(
    "nx, lon1, lon2, di, expected",
    [
        pytest.param(1440, 0.0, 359.75, 0.25, (-180, -90, 180, 90), id='global'),
        pytest.param(21, 170.0, 190.0, 1.0, (170, -90, -170, 90), id='antimeridian'),
    ],
)
def test_bounds_longitude_wrap(builder, nx, lon1, lon2, di, expected):
    grid = grid_from_section(builder.section3_latlon(nx, 2, 90, lon1, -90, lon2, di=di, dj=180.0))
    assert grid.bounds == pytest.approx(expected)


def test_subset_indices(builder):
    grid = grid_from_section(builder.section3_latlon(4, 3, 50, 0, 48, 3))
    rows, cols = grid.subset_indices((1.5, 48.1, 2.5, 48.9))
    assert (rows, cols) == (slice(1, 3), slice(1, 4))
    with pytest.raises(ValueError):
        grid.subset_indices((10.5, 48.1, 12.5, 48.9))
    with pytest.raises(ValueError):
        grid.subset_indices((1.5, 49, 2.5, 48))


def test_subset_indices_projected(builder):
    grid = grid_from_section(builder.section3_lambert(3, 2, 25.0, 265.0))
    lats, lons = grid.latlons()
    rows, cols = grid.subset_indices((lons[1, 0]-0.01, lats[1, 0]-0.01,
                                      lons[1, 0]+0.01, lats[1, 0]+0.01))
    assert (rows, cols) == (slice(1, 2), slice(0, 1))
