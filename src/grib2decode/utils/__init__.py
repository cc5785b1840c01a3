"""
Collection of utility functions to assist in the decoding of GRIB2 Messages.
"""

import datetime
from typing import Dict, Union, Type, List

import numpy as np
from numpy.typing import NDArray

from .. import tables
from ..errors import FormatError

# Number of values unpacked per numpy pass in BitReader.read_array.
_CHUNK_SIZE = 65536

_ALIGNED_DTYPES = {8:'>u1', 16:'>u2', 32:'>u4', 64:'>u8'}


def int2bin(i: int, nbits: int=8, output: Union[Type[str], Type[List]]=str):
    """
    Bits of an integer, most significant first.

    `nbits` (8, 16, 32 or 64) sets the zero-padded width. With `output=list`
    the bits come back as a list of 0/1 ints, which is how flag tables are
    read.
    """
    i = int(i)
    if nbits not in {8,16,32,64}:
        raise ValueError('nbits must be one of 8, 16, 32, or 64')
    bitstr = format(i, f"0{nbits}b")
    if output is str:
        return bitstr
    elif output is list:
        return list(map(int, bitstr))


def sign_magnitude(value: int, nbits: int) -> int:
    """
    Apply WMO regulation 92.1.5 to an unsigned integer.

    The most significant bit is the sign and the remaining bits are the
    magnitude.

    Parameters
    ----------
    value
        Unsigned integer as read from the message.
    nbits
        Width of the integer in bits.

    Returns
    -------
    sign_magnitude
        Signed integer.
    """
    signbit = 1 << (nbits-1)
    magnitude = value & (signbit-1)
    return -magnitude if value & signbit else magnitude


class BitReader:
    """
    Cursor over a byte buffer that extracts MSB-first unsigned integers.

    The cursor is a `(byte_offset, bit_offset)` pair. Reads may start and end
    at any bit and cross byte boundaries.

    Attributes
    ----------
    byte_offset : int
        Index of the byte holding the next unread bit.
    bit_offset : int
        Index (0 = most significant) of the next unread bit in that byte.
    """
    __slots__ = ('_data', 'byte_offset', 'bit_offset')

    def __init__(self, data, byte_offset: int=0, bit_offset: int=0):
        self._data = np.frombuffer(data, dtype=np.uint8)
        self.byte_offset = byte_offset
        self.bit_offset = bit_offset

    def __repr__(self):
        return f'{self.__class__.__name__}(nbytes={self.nbytes}, byte_offset={self.byte_offset}, bit_offset={self.bit_offset})'

    @property
    def nbytes(self) -> int:
        return self._data.size

    @property
    def position(self) -> int:
        """Cursor position in bits from the start of the buffer."""
        return self.byte_offset*8 + self.bit_offset

    @property
    def remaining_bits(self) -> int:
        return self.nbytes*8 - self.position

    def seek(self, byte_offset: int, bit_offset: int=0):
        """Move the cursor to an absolute position."""
        if byte_offset < 0 or not 0 <= bit_offset < 8:
            raise ValueError('Invalid cursor position')
        self.byte_offset = byte_offset
        self.bit_offset = bit_offset

    def _advance(self, nbits: int):
        pos = self.position + nbits
        self.byte_offset, self.bit_offset = divmod(pos, 8)

    def _check(self, nbits: int):
        if nbits > self.remaining_bits:
            raise FormatError(f'Bit read of {nbits} bits at byte {self.byte_offset} '
                              f'runs past end of {self.nbytes}-byte buffer')

    def align(self):
        """Advance the cursor to the next byte boundary."""
        if self.bit_offset:
            self.byte_offset += 1
            self.bit_offset = 0

    def skip(self, nbits: int):
        self._check(nbits)
        self._advance(nbits)

    def read(self, nbits: int) -> int:
        """
        Read one unsigned integer.

        Parameters
        ----------
        nbits
            Width of the integer in bits. A width of 0 returns 0 without moving
            the cursor.

        Returns
        -------
        read
            Python `int`.
        """
        if nbits == 0:
            return 0
        if nbits < 0:
            raise ValueError('nbits must be non-negative')
        self._check(nbits)
        start = self.position
        end = start + nbits
        first, last = start // 8, (end-1) // 8
        chunk = int.from_bytes(self._data[first:last+1].tobytes(), 'big')
        value = (chunk >> ((last+1)*8 - end)) & ((1 << nbits)-1)
        self._advance(nbits)
        return value

    def read_array(self, nbits: int, count: int) -> NDArray[np.uint64]:
        """
        Read `count` consecutive unsigned integers of `nbits` each.

        Parameters
        ----------
        nbits
            Width of each integer in bits, 0 through 64.  A width of 0 returns
            zeros without moving the cursor.
        count
            Number of integers to read.

        Returns
        -------
        read_array
            `numpy.ndarray` with `dtype=numpy.uint64`.
        """
        if count < 0 or not 0 <= nbits <= 64:
            raise ValueError('nbits must be in [0, 64] and count non-negative')
        if nbits == 0 or count == 0:
            return np.zeros(count, dtype=np.uint64)
        self._check(nbits*count)

        # Byte aligned widths can be viewed directly.
        if self.bit_offset == 0 and nbits in _ALIGNED_DTYPES:
            nbytes = nbits//8*count
            buf = self._data[self.byte_offset:self.byte_offset+nbytes]
            out = buf.view(_ALIGNED_DTYPES[nbits]).astype(np.uint64)
            self._advance(nbits*count)
            return out

        out = np.empty(count, dtype=np.uint64)
        for n in range(0, count, _CHUNK_SIZE):
            m = min(_CHUNK_SIZE, count-n)
            start = self.position
            first = start // 8
            last = (start + nbits*m - 1) // 8
            bits = np.unpackbits(self._data[first:last+1])
            skip = start - first*8
            bits = bits[skip:skip+nbits*m].reshape(m, nbits)
            padded = np.zeros((m, 64), dtype=np.uint8)
            padded[:, 64-nbits:] = bits
            out[n:n+m] = np.packbits(padded, axis=1).view('>u8').ravel()
            self._advance(nbits*m)
        return out


def _hours(unit: int) -> float:
    hours = tables.get_value_from_table(unit, 'scale_time_hours')
    if hours is None:
        raise ValueError(f'Unsupported unit of time range {unit}')
    return hours


def get_leadtime(refdate: datetime.datetime, pdtn: int, pdt: Dict[str, int]) -> datetime.timedelta:
    """
    Time from the reference date to the valid (or end of period) time.

    Parameters
    ----------
    refdate
        Reference date of the message (Section 1).
    pdtn
        Product Definition Template Number.
    pdt
        Product Definition Template values keyed by field name.

    Returns
    -------
    get_leadtime
        Lead time as `datetime.timedelta`.
    """
    if 'yearOfEndOfTimePeriod' in pdt:
        enddate = datetime.datetime(*(pdt[k+'OfEndOfTimePeriod'] for k in
                                      ('year','month','day','hour','minute','second')))
        return enddate-refdate
    return datetime.timedelta(hours=pdt['forecastTime']*_hours(pdt['unitOfForecastTime']))


def get_duration(pdtn: int, pdt: Dict[str, int]) -> datetime.timedelta:
    """
    Compute the time duration of a statistically processed product.

    Parameters
    ----------
    pdtn
        Product Definition Template Number.
    pdt
        Product Definition Template values keyed by field name.

    Returns
    -------
    get_duration
        Length of the statistical processing period as `datetime.timedelta`;
        zero for products valid at a point in time.
    """
    try:
        return datetime.timedelta(hours=pdt['timeRangeOfStatisticalProcess']*
                                  _hours(pdt['unitOfTimeRangeOfStatisticalProcess']))
    except(KeyError):
        return datetime.timedelta(0)
