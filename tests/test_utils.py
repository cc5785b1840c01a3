import datetime

import pytest
import numpy as np
from numpy.testing import assert_array_equal, assert_allclose

from grib2decode import utils
from grib2decode.errors import FormatError, UnsupportedFeatureError
from grib2decode.utils import BitReader, png
from grib2decode.utils.gauss_grid import gaussian_latitudes


def test_bitreader_crosses_bytes():
    r = BitReader(bytes([0b10110011, 0b01010101]))
    assert r.read(3) == 5
    assert r.read(7) == 77
    assert (r.byte_offset, r.bit_offset) == (1, 2)
    assert_array_equal(r.read_array(3, 2), [2, 5])
    assert r.remaining_bits == 0
    with pytest.raises(FormatError):
        r.read(1)


def test_bitreader_zero_width():
    r = BitReader(b'\xff')
    assert r.read(0) == 0
    assert_array_equal(r.read_array(0, 3), [0, 0, 0])
    assert r.position == 0


def test_bitreader_align_skip_seek():
    r = BitReader(b'\x0f\xf0\xaa')
    r.read(3)
    r.align()
    assert (r.byte_offset, r.bit_offset) == (1, 0)
    r.align()
    assert r.byte_offset == 1
    r.skip(4)
    assert r.read(4) == 0
    r.seek(0, 4)
    assert r.read(8) == 0xff
    with pytest.raises(ValueError):
        r.seek(0, 8)
    with pytest.raises(FormatError):
        r.skip(13)


def test_bitreader_aligned_view():
    r = BitReader(b'\x01\x02\x03\x04\x05')
    assert_array_equal(r.read_array(16, 2), [258, 772])
    assert r.read(8) == 5


@pytest.mark.parametrize("nbits", [1, 5, 12, 17, 31, 33, 64])
def test_bitreader_read_array(builder, nbits):
    rng = np.random.default_rng(nbits)
    values = [int(v) for v in rng.integers(0, 2**min(nbits, 62), size=11)]
    values[0] = 2**nbits-1
    data = b'\xa5'+builder.pack_bits(values, nbits)
    r = BitReader(data, byte_offset=1)
    assert r.read_array(nbits, len(values)).tolist() == values
    r.seek(1)
    assert [r.read(nbits) for _ in values] == values


def test_bitreader_overrun():
    with pytest.raises(FormatError):
        BitReader(b'\x00\x00').read_array(5, 4)


@pytest.mark.parametrize(
    "value, nbits, expected",
    [(5, 16, 5), (0x8005, 16, -5), (0x80, 8, 0), (0xFFFFFFFF, 32, -(2**31-1))],
)
def test_sign_magnitude(value, nbits, expected):
    assert utils.sign_magnitude(value, nbits) == expected


def test_int2bin():
    assert utils.int2bin(0x40) == '01000000'
    assert utils.int2bin(3, nbits=16, output=list) == [0]*14+[1, 1]
    with pytest.raises(ValueError):
        utils.int2bin(1, nbits=12)


def test_leadtime_and_duration():
    refdate = datetime.datetime(2023, 1, 2, 12)
    assert utils.get_leadtime(refdate, 0, dict(forecastTime=90, unitOfForecastTime=0)) == datetime.timedelta(minutes=90)
    assert utils.get_leadtime(refdate, 0, dict(forecastTime=2, unitOfForecastTime=11)) == datetime.timedelta(hours=12)
    pdt = dict(forecastTime=6, unitOfForecastTime=1, yearOfEndOfTimePeriod=2023, monthOfEndOfTimePeriod=1,
               dayOfEndOfTimePeriod=3, hourOfEndOfTimePeriod=0, minuteOfEndOfTimePeriod=0,
               secondOfEndOfTimePeriod=0, timeRangeOfStatisticalProcess=6,
               unitOfTimeRangeOfStatisticalProcess=1)
    assert utils.get_leadtime(refdate, 8, pdt) == datetime.timedelta(hours=12)
    assert utils.get_duration(8, pdt) == datetime.timedelta(hours=6)
    assert utils.get_duration(0, dict(forecastTime=6)) == datetime.timedelta(0)
    with pytest.raises(ValueError):
        utils.get_leadtime(refdate, 0, dict(forecastTime=1, unitOfForecastTime=200))


@pytest.mark.parametrize("filter_type", [0, 1, 2, 3, 4])
def test_read_png_8bit(builder, filter_type):
    rows = [[10, 200, 30], [250, 5, 128], [7, 7, 255]]
    data = builder.png(rows, filter_type=filter_type)
    assert_array_equal(png.read_png(data), np.ravel(rows))


@pytest.mark.parametrize("filter_type", [0, 1, 2, 3, 4])
def test_read_png_16bit(builder, filter_type):
    rows = [[1000, 2000, 3], [3000, 65535, 0], [40000, 17, 512]]
    data = builder.png(rows, bit_depth=16, filter_type=filter_type)
    out = png.read_png(data)
    assert out.dtype == np.uint64
    assert_array_equal(out, np.ravel(rows))


@pytest.mark.parametrize("bit_depth", [1, 2, 4])
def test_read_png_low_bit_depth(builder, bit_depth):
    top = 2**bit_depth-1
    rows = [[0, top, 1, 0, top], [top, 0, 0, 1, 1]]
    assert_array_equal(png.read_png(builder.png(rows, bit_depth=bit_depth)), np.ravel(rows))


def test_read_png_errors(builder):
    with pytest.raises(FormatError):
        png.read_png(b'not a png')
    data = builder.png([[1, 2, 3, 4]]*8)
    with pytest.raises(FormatError):
        png.read_png(data[:len(data)//2])
    palette = bytearray(data)
    # Color type is the tenth octet of the IHDR body.
    palette[8+8+9] = 3
    with pytest.raises(UnsupportedFeatureError):
        png.read_png(bytes(palette))


def test_gaussian_latitudes():
    lats = gaussian_latitudes(4)
    assert lats.shape == (4,)
    assert np.all(np.diff(lats) < 0)
    assert_allclose(lats, -lats[::-1])
    assert_allclose(gaussian_latitudes(2), [35.264389682754654, -35.264389682754654])
    assert not lats.flags.writeable
    assert gaussian_latitudes(4) is lats
    with pytest.raises(ValueError):
        gaussian_latitudes(0)
