"""
Unpacking of Data Section (Section 7) values.

The Data Representation Section (Section 5) selects one of the variants below
with `data_representation`.  Each variant has an `unpack(payload, num_values)`
method returning a `numpy.float64` array of the packed values; missing values
are `NaN`.  `apply_bitmap` then places the packed values on the grid using the
Bit-Map Section (Section 6).
"""
from dataclasses import dataclass
from typing import ClassVar, List, Optional, Tuple
import logging

import numpy as np
from numpy.typing import NDArray

from .errors import Diagnostic, FormatError, UnsupportedFeatureError, UnsupportedTemplateError
from .sections import Section
from .utils import BitReader, sign_magnitude
from .utils import png

logger = logging.getLogger(__name__)

BITMAP_PRESENT = 0
BITMAP_PREVIOUS = 254
NO_BITMAP = 255

_IEEE_DTYPES = {1:'>f4', 2:'>f8'}


def _fit(values, num_values: int, diagnostics: Optional[List[Diagnostic]], what: str):
    """Truncate or NaN-pad `values` to `num_values`, noting the mismatch."""
    if values.size == num_values:
        return values
    msg = f'{what} gives {values.size} values, expected {num_values}'
    logger.debug(msg)
    if diagnostics is not None:
        diagnostics.append(Diagnostic('value-count-mismatch', msg, section=7, inconsistency=True))
    if values.size > num_values:
        return values[:num_values]
    out = np.full(num_values, np.nan, dtype=np.float64)
    out[:values.size] = values
    return out


@dataclass(frozen=True)
class CompressionContext:
    """
    Scaling of packed integers.

    Unpacked values are Y = (R + X * 2**E) / 10**D.

    Attributes
    ----------
    reference_value
        R, an IEEE 32-bit float.
    binary_scale
        E.
    decimal_scale
        D.
    bits_per_value
        Width of each packed integer, or of each group reference for complex
        packing.
    """
    reference_value: float
    binary_scale: int
    decimal_scale: int
    bits_per_value: int

    @classmethod
    def from_section(cls, section5: Section) -> 'CompressionContext':
        return cls(float(np.float32(section5['refValue'])),
                   section5['binScaleFactor'],
                   section5['decScaleFactor'],
                   section5['nBitsPacking'])

    def decode(self, x) -> NDArray[np.float64]:
        x = np.asarray(x, dtype=np.float64)
        return (self.reference_value + x*2.0**self.binary_scale)/10.0**self.decimal_scale

    def constant(self, num_values: int) -> NDArray[np.float64]:
        """Field of `num_values` copies of R / 10**D."""
        return np.full(num_values, self.decode(0.0), dtype=np.float64)


@dataclass(frozen=True)
class SimplePacking:
    """Grid point data, simple packing (Template 5.0)."""
    template_number: ClassVar[int] = 0
    context: CompressionContext

    @classmethod
    def from_section(cls, section5: Section):
        return cls(CompressionContext.from_section(section5))

    def unpack(self, payload, num_values: int,
               diagnostics: Optional[List[Diagnostic]] = None) -> NDArray[np.float64]:
        nbits = self.context.bits_per_value
        if nbits == 0:
            return self.context.constant(num_values)
        x = BitReader(payload).read_array(nbits, num_values)
        return self.context.decode(x)


@dataclass(frozen=True)
class ComplexPacking:
    """Grid point data, complex packing (Template 5.2)."""
    template_number: ClassVar[int] = 2
    context: CompressionContext
    group_splitting_method: int
    missing_value_management: int
    num_groups: int
    ref_group_width: int
    nbits_group_width: int
    ref_group_length: int
    group_length_increment: int
    last_group_length: int
    nbits_group_length: int

    @staticmethod
    def _kwargs(section5: Section) -> dict:
        return dict(context=CompressionContext.from_section(section5),
                    group_splitting_method=section5['groupSplittingMethod'],
                    missing_value_management=section5['typeOfMissingValueManagement'],
                    num_groups=section5['nGroups'],
                    ref_group_width=section5['refGroupWidth'],
                    nbits_group_width=section5['nBitsGroupWidth'],
                    ref_group_length=section5['refGroupLength'],
                    group_length_increment=section5['groupLengthIncrement'],
                    last_group_length=section5['lengthOfLastGroup'],
                    nbits_group_length=section5['nBitsScaledGroupLength'])

    @classmethod
    def from_section(cls, section5: Section):
        return cls(**cls._kwargs(section5))

    def _check_supported(self, missing_value_modes):
        if self.group_splitting_method != 1:
            raise UnsupportedFeatureError(f'Group splitting method {self.group_splitting_method} '
                                          'is not supported')
        if self.missing_value_management not in missing_value_modes:
            raise UnsupportedFeatureError(f'Missing value management {self.missing_value_management} '
                                          f'is not supported by template 5.{self.template_number}')

    def unpack(self, payload, num_values: int,
               diagnostics: Optional[List[Diagnostic]] = None) -> NDArray[np.float64]:
        self._check_supported({0, 1})
        if self.num_groups == 0:
            return self.context.constant(num_values)
        x, missing = unpack_groups(self, BitReader(payload), num_values, diagnostics)
        values = self.context.decode(x)
        values[missing] = np.nan
        return values


@dataclass(frozen=True)
class ComplexPackingSpatialDiff(ComplexPacking):
    """Grid point data, complex packing and spatial differencing (Template 5.3)."""
    template_number: ClassVar[int] = 3
    order: int = 1
    nbytes: int = 1

    @classmethod
    def from_section(cls, section5: Section):
        return cls(order=section5['spatialDifferenceOrder'],
                   nbytes=section5['nBytesSpatialDifference'],
                   **cls._kwargs(section5))

    def unpack(self, payload, num_values: int,
               diagnostics: Optional[List[Diagnostic]] = None) -> NDArray[np.float64]:
        self._check_supported({0})
        if self.order not in {1, 2}:
            raise UnsupportedFeatureError(f'Spatial differencing of order {self.order} is not supported')
        if not 1 <= self.nbytes <= 4:
            raise FormatError(f'Bad number of octets ({self.nbytes}) for spatial differencing descriptors')
        nb = self.nbytes
        start = nb*(self.order+1)
        if len(payload) < start:
            raise FormatError(f'Data section too short for {self.order+1} spatial differencing descriptors')

        # First values of the field, then the overall minimum of the differences.
        h = [int.from_bytes(payload[i*nb:(i+1)*nb], 'big', signed=True) for i in range(self.order)]
        minimum = sign_magnitude(int.from_bytes(payload[self.order*nb:start], 'big'), 8*nb)
        logger.debug('spatial differencing order %d, first values %s, minimum %d', self.order, h, minimum)

        if self.num_groups == 0:
            x = np.zeros(num_values, dtype=np.int64)
        else:
            x, _ = unpack_groups(self, BitReader(payload, byte_offset=start), num_values, diagnostics)
        f = undo_spatial_differencing(x+minimum, self.order, *h)
        return self.context.decode(f)


@dataclass(frozen=True)
class IEEEFloat:
    """Grid point data, IEEE floating point (Template 5.4)."""
    template_number: ClassVar[int] = 4
    precision: int

    @classmethod
    def from_section(cls, section5: Section):
        return cls(section5['precision'])

    def unpack(self, payload, num_values: int,
               diagnostics: Optional[List[Diagnostic]] = None) -> NDArray[np.float64]:
        if self.precision == 3:
            raise UnsupportedFeatureError('128-bit IEEE floating point data is not supported')
        try:
            dtype = np.dtype(_IEEE_DTYPES[self.precision])
        except(KeyError):
            raise FormatError(f'Bad IEEE precision {self.precision}') from None
        if len(payload) < dtype.itemsize*num_values:
            raise FormatError(f'Data section holds {len(payload)} octets, need '
                              f'{dtype.itemsize*num_values} for {num_values} values')
        return np.frombuffer(payload, dtype=dtype, count=num_values).astype(np.float64)


@dataclass(frozen=True)
class PNGPacking:
    """Grid point data, PNG compression (Template 5.41)."""
    template_number: ClassVar[int] = 41
    context: CompressionContext

    @classmethod
    def from_section(cls, section5: Section):
        return cls(CompressionContext.from_section(section5))

    def unpack(self, payload, num_values: int,
               diagnostics: Optional[List[Diagnostic]] = None) -> NDArray[np.float64]:
        if self.context.bits_per_value == 0:
            return self.context.constant(num_values)
        x = png.read_png(bytes(payload))
        return _fit(self.context.decode(x), num_values, diagnostics, 'PNG image')


_VARIANTS = {cls.template_number: cls for cls in
             (SimplePacking, ComplexPacking, ComplexPackingSpatialDiff, IEEEFloat, PNGPacking)}


def data_representation(section5: Section):
    """
    Build the unpacking variant for a Data Representation Section.

    Raises
    ------
    UnsupportedTemplateError
        If the template number is not one of 0, 2, 3, 4 or 41.
    """
    try:
        cls = _VARIANTS[section5.template_number]
    except(KeyError):
        raise UnsupportedTemplateError(5, section5.template_number) from None
    return cls.from_section(section5)


def unpack_groups(
    params: ComplexPacking,
    reader: BitReader,
    num_values: int,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> Tuple[NDArray[np.int64], NDArray[np.bool_]]:
    """
    Unpack complex packing groups.

    The group references (X1), group widths and scaled group lengths are
    each a block ending on an octet boundary.  The packed values (X2) of all
    groups follow with no padding between groups.

    Parameters
    ----------
    params
        Complex packing parameters.
    reader
        `BitReader` positioned at the group references.
    num_values
        Number of values declared in Section 5.
    diagnostics
        List that notes are appended to.

    Returns
    -------
    x : numpy.ndarray
        X1 + X2 for each value, `num_values` long.
    missing : numpy.ndarray
        Boolean mask of values flagged missing by missing value management 1.
    """
    ng = params.num_groups
    nbits = params.context.bits_per_value
    x1 = reader.read_array(nbits, ng)
    reader.align()
    widths = reader.read_array(params.nbits_group_width, ng).astype(np.int64)+params.ref_group_width
    reader.align()
    lengths = reader.read_array(params.nbits_group_length, ng).astype(np.int64)
    lengths = lengths*params.group_length_increment+params.ref_group_length
    reader.align()
    if lengths[-1] != params.last_group_length:
        logger.debug('replacing last group length %d with true length %d',
                     lengths[-1], params.last_group_length)
    lengths[-1] = params.last_group_length
    if widths.max() > 64:
        raise FormatError(f'Group width of {widths.max()} bits is not valid')

    total = int(lengths.sum())
    if total != num_values:
        msg = f'Group lengths sum to {total}, expected {num_values} values'
        logger.debug(msg)
        if diagnostics is not None:
            diagnostics.append(Diagnostic('group-length-mismatch', msg, section=5, inconsistency=True))

    x = np.zeros(total, dtype=np.int64)
    missing = np.zeros(total, dtype=bool)
    pos = 0
    for g in range(ng):
        n, w = int(lengths[g]), int(widths[g])
        x2 = reader.read_array(w, n)
        x[pos:pos+n] = x1[g]+x2
        if params.missing_value_management == 1:
            if w > 0:
                missing[pos:pos+n] = x2 == (1 << w)-1
            elif nbits > 0 and x1[g] == (1 << nbits)-1:
                missing[pos:pos+n] = True
        pos += n

    if total > num_values:
        x, missing = x[:num_values], missing[:num_values]
    elif total < num_values:
        x = np.concatenate((x, np.zeros(num_values-total, dtype=np.int64)))
        missing = np.concatenate((missing, np.ones(num_values-total, dtype=bool)))
    return x, missing


def undo_spatial_differencing(values, order: int, h1: int, h2: Optional[int] = None) -> NDArray[np.int64]:
    """
    Recover original scaled values from spatial differences.

    Parameters
    ----------
    values
        Differences with the overall minimum already added back.  The first
        `order` entries are placeholders.
    order
        1 or 2.
    h1, h2
        First (and second) original values.

    Returns
    -------
    undo_spatial_differencing
        `numpy.ndarray` of `int64`.
    """
    f = np.array(values, dtype=np.int64)
    if f.size == 0:
        return f
    if order == 1:
        f[0] = h1
        return np.cumsum(f)
    if order == 2:
        f[0] = h1
        if f.size > 1:
            f[1] = h2-h1
            f[1:] = np.cumsum(f[1:])
        return np.cumsum(f)
    raise UnsupportedFeatureError(f'Spatial differencing of order {order} is not supported')


def apply_bitmap(
    values: NDArray[np.float64],
    section6: Section,
    num_points: int,
    diagnostics: Optional[List[Diagnostic]] = None,
) -> Tuple[NDArray[np.float64], Optional[NDArray[np.bool_]]]:
    """
    Place packed values on the grid.

    Parameters
    ----------
    values
        Packed values from `unpack`.
    section6
        Decoded Bit-Map Section.
    num_points
        Number of grid points.
    diagnostics
        List that notes are appended to.

    Returns
    -------
    values : numpy.ndarray
        `num_points` values with `NaN` where the bitmap is 0.
    bitmap : numpy.ndarray or None
        Boolean presence mask, or `None` when the message has no bitmap.

    Raises
    ------
    UnsupportedFeatureError
        For predefined bitmaps (indicators 1-253) and bitmaps defined in a
        previous message (indicator 254).
    """
    flag = section6['bitMapFlag']
    if flag == NO_BITMAP:
        return _fit(np.asarray(values, dtype=np.float64), num_points, diagnostics, 'Data section'), None
    if flag == BITMAP_PREVIOUS:
        raise UnsupportedFeatureError('Bitmap defined in a previous message (indicator 254) is not supported')
    if flag != BITMAP_PRESENT:
        raise UnsupportedFeatureError(f'Predefined bitmap (indicator {flag}) is not supported')

    bitmap = BitReader(section6['bitmap']).read_array(1, num_points).astype(bool)
    present = np.flatnonzero(bitmap)
    if present.size != values.size:
        msg = f'Bitmap marks {present.size} points present but {values.size} values were unpacked'
        logger.debug(msg)
        if diagnostics is not None:
            diagnostics.append(Diagnostic('bitmap-count-mismatch', msg, section=6, inconsistency=True))
        n = min(present.size, values.size)
        present, values = present[:n], values[:n]
    fld = np.full(num_points, np.nan, dtype=np.float64)
    np.put(fld, present, values)
    return fld, bitmap
