"""
GRIB2 section layouts, the template catalog and metadata classes.

Every section is described as a tuple of `FieldSpec` objects.  Sections 3, 4
and 5 carry a template number in their fixed part; the remainder of those
sections is described by a `Template` looked up in `CATALOG`.  Start indices
are 1-based octet numbers within the section, as printed in the WMO Manual on
Codes.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple

from . import tables
from .errors import UnsupportedTemplateError

FIELD_TYPES = {
    'uint8':'>B', 'uint16':'>H', 'uint32':'>I', 'uint64':'>Q',
    'int8':'>b', 'int16':'>h', 'int32':'>i', 'int64':'>q',
    'float32':'>f', 'float64':'>d',
    'string':None, 'bytes':None,
}

# WMO regulation 92.1.5: negative values are stored with the most significant
# bit set and the magnitude in the remaining bits.
SIGN_MAGNITUDE = '92.1.5'


@dataclass(frozen=True)
class FieldSpec:
    """
    Layout of one field within a section.

    Attributes
    ----------
    name
        Attribute name of the field.
    start
        1-based octet index within the section.
    size
        Size in octets. `None` means the field extends to the end of the
        section.
    type
        One of the keys of `FIELD_TYPES`.
    regulation
        `'92.1.5'` when the field is stored as sign and magnitude.
    table
        Code table used to describe the value.
    flag_table
        Flag table used to describe each of the 8 bits of the value.
    """
    name: str
    start: int
    size: Optional[int]
    type: str
    regulation: Optional[str] = None
    table: Optional[str] = None
    flag_table: Optional[str] = None

    def __post_init__(self):
        if self.type not in FIELD_TYPES:
            raise ValueError(f'Unknown field type {self.type}')
        if self.regulation is not None and self.regulation != SIGN_MAGNITUDE:
            raise ValueError(f'Unknown regulation {self.regulation}')

    @property
    def offset(self) -> int:
        """0-based byte offset within the section."""
        return self.start-1


@dataclass(frozen=True)
class Template:
    """A numbered field layout for section 3, 4 or 5."""
    section: int
    number: int
    name: str
    fields: Tuple[FieldSpec, ...]

    @property
    def length(self) -> int:
        """Number of octets from the start of the section to the end of the template."""
        return max(f.offset+f.size for f in self.fields if f.size is not None)


def _f(name, start, size, type, **kwargs):
    return FieldSpec(name, start, size, type, **kwargs)

def _reg(name, start, size, type):
    return FieldSpec(name, start, size, type, regulation=SIGN_MAGNITUDE)

# ----------------------------------------------------------------------------------------
# Fixed parts of each section.
# ----------------------------------------------------------------------------------------
_HEADER = (_f('sectionLength', 1, 4, 'uint32'),
           _f('sectionNumber', 5, 1, 'uint8'))

SECTION_LAYOUTS = MappingProxyType({
    0: (_f('indicator', 1, 4, 'string'),
        _f('reserved', 5, 2, 'bytes'),
        _f('discipline', 7, 1, 'uint8', table='0.0'),
        _f('editionNumber', 8, 1, 'uint8'),
        _f('totalLength', 9, 8, 'uint64')),
    1: _HEADER + (
        _f('originatingCenter', 6, 2, 'uint16', table='originating_centers'),
        _f('originatingSubCenter', 8, 2, 'uint16'),
        _f('masterTableInfo', 10, 1, 'uint8', table='1.0'),
        _f('localTableInfo', 11, 1, 'uint8', table='1.1'),
        _f('significanceOfReferenceTime', 12, 1, 'uint8', table='1.2'),
        _f('year', 13, 2, 'uint16'),
        _f('month', 15, 1, 'uint8'),
        _f('day', 16, 1, 'uint8'),
        _f('hour', 17, 1, 'uint8'),
        _f('minute', 18, 1, 'uint8'),
        _f('second', 19, 1, 'uint8'),
        _f('productionStatus', 20, 1, 'uint8', table='1.3'),
        _f('typeOfData', 21, 1, 'uint8', table='1.4')),
    2: _HEADER + (
        _f('localUse', 6, None, 'bytes'),),
    3: _HEADER + (
        _f('sourceOfGridDefinition', 6, 1, 'uint8', table='3.0'),
        _f('numberOfDataPoints', 7, 4, 'uint32'),
        _f('numberOfOctetsForNumberOfPoints', 11, 1, 'uint8'),
        _f('interpretationOfListOfNumbers', 12, 1, 'uint8', table='3.11'),
        _f('gridDefinitionTemplateNumber', 13, 2, 'uint16', table='3.1')),
    4: _HEADER + (
        _f('numberOfCoordinateValues', 6, 2, 'uint16'),
        _f('productDefinitionTemplateNumber', 8, 2, 'uint16', table='4.0')),
    5: _HEADER + (
        _f('numberOfPackedValues', 6, 4, 'uint32'),
        _f('dataRepresentationTemplateNumber', 10, 2, 'uint16', table='5.0')),
    6: _HEADER + (
        _f('bitMapFlag', 6, 1, 'uint8', table='6.0'),
        _f('bitmap', 7, None, 'bytes')),
    7: _HEADER + (
        _f('data', 6, None, 'bytes'),),
    8: (_f('trailer', 1, 4, 'string'),),
})

# Name of the field in the fixed part that selects the template.
TEMPLATE_SELECTORS = MappingProxyType({
    3: 'gridDefinitionTemplateNumber',
    4: 'productDefinitionTemplateNumber',
    5: 'dataRepresentationTemplateNumber',
})

# ----------------------------------------------------------------------------------------
# Grid Definition Templates (Section 3).
# ----------------------------------------------------------------------------------------
_EARTH = (_f('shapeOfEarth', 15, 1, 'uint8', table='3.2'),
          _f('scaleFactorRadiusEarth', 16, 1, 'uint8'),
          _f('scaledValueRadiusEarth', 17, 4, 'uint32'),
          _f('scaleFactorMajorAxis', 21, 1, 'uint8'),
          _f('scaledValueMajorAxis', 22, 4, 'uint32'),
          _f('scaleFactorMinorAxis', 26, 1, 'uint8'),
          _f('scaledValueMinorAxis', 27, 4, 'uint32'))

_LATLON = _EARTH + (
    _f('nx', 31, 4, 'uint32'),
    _f('ny', 35, 4, 'uint32'),
    _f('basicAngleOfInitialProductionDomain', 39, 4, 'uint32'),
    _f('subdivisionsOfBasicAngle', 43, 4, 'uint32'),
    _reg('latitudeFirstGridpoint', 47, 4, 'int32'),
    _reg('longitudeFirstGridpoint', 51, 4, 'int32'),
    _f('resolutionAndComponentFlags', 55, 1, 'uint8', flag_table='3.3'),
    _reg('latitudeLastGridpoint', 56, 4, 'int32'),
    _reg('longitudeLastGridpoint', 60, 4, 'int32'),
    _f('gridlengthXDirection', 64, 4, 'uint32'))

_PROJECTED = _EARTH + (
    _f('nx', 31, 4, 'uint32'),
    _f('ny', 35, 4, 'uint32'),
    _reg('latitudeFirstGridpoint', 39, 4, 'int32'),
    _reg('longitudeFirstGridpoint', 43, 4, 'int32'),
    _f('resolutionAndComponentFlags', 47, 1, 'uint8', flag_table='3.3'),
    _reg('latitudeTrueScale', 48, 4, 'int32'),
    _reg('gridOrientation', 52, 4, 'int32'),
    _f('gridlengthXDirection', 56, 4, 'uint32'),
    _f('gridlengthYDirection', 60, 4, 'uint32'),
    _f('projectionCenterFlag', 64, 1, 'uint8', flag_table='3.5'),
    _f('scanModeFlags', 65, 1, 'uint8', flag_table='3.4'))

_GRID_TEMPLATES = (
    Template(3, 0, 'Latitude/Longitude', _LATLON + (
        _f('gridlengthYDirection', 68, 4, 'uint32'),
        _f('scanModeFlags', 72, 1, 'uint8', flag_table='3.4'))),
    Template(3, 1, 'Rotated Latitude/Longitude', _LATLON + (
        _f('gridlengthYDirection', 68, 4, 'uint32'),
        _f('scanModeFlags', 72, 1, 'uint8', flag_table='3.4'),
        _reg('latitudeSouthernPole', 73, 4, 'int32'),
        _reg('longitudeSouthernPole', 77, 4, 'int32'),
        _f('anglePoleRotation', 81, 4, 'float32'))),
    Template(3, 20, 'Polar Stereographic', _PROJECTED),
    Template(3, 30, 'Lambert Conformal', _PROJECTED + (
        _reg('standardLatitude1', 66, 4, 'int32'),
        _reg('standardLatitude2', 70, 4, 'int32'),
        _reg('latitudeSouthernPole', 74, 4, 'int32'),
        _reg('longitudeSouthernPole', 78, 4, 'int32'))),
    Template(3, 40, 'Gaussian Latitude/Longitude', _LATLON + (
        _f('numberOfParallels', 68, 4, 'uint32'),
        _f('scanModeFlags', 72, 1, 'uint8', flag_table='3.4'))),
)

# ----------------------------------------------------------------------------------------
# Product Definition Templates (Section 4).
# ----------------------------------------------------------------------------------------
_PRODUCT = (
    _f('parameterCategory', 10, 1, 'uint8'),
    _f('parameterNumber', 11, 1, 'uint8'),
    _f('typeOfGeneratingProcess', 12, 1, 'uint8', table='4.3'),
    _f('backgroundGeneratingProcessIdentifier', 13, 1, 'uint8'),
    _f('generatingProcess', 14, 1, 'uint8'),
    _f('hoursAfterDataCutoff', 15, 2, 'uint16'),
    _f('minutesAfterDataCutoff', 17, 1, 'uint8'),
    _f('unitOfForecastTime', 18, 1, 'uint8', table='4.4'),
    _reg('forecastTime', 19, 4, 'int32'),
    _f('typeOfFirstFixedSurface', 23, 1, 'uint8', table='4.5'),
    _reg('scaleFactorOfFirstFixedSurface', 24, 1, 'int8'),
    _reg('scaledValueOfFirstFixedSurface', 25, 4, 'int32'),
    _f('typeOfSecondFixedSurface', 29, 1, 'uint8', table='4.5'),
    _reg('scaleFactorOfSecondFixedSurface', 30, 1, 'int8'),
    _reg('scaledValueOfSecondFixedSurface', 31, 4, 'int32'))

_ENSEMBLE = (
    _f('typeOfEnsembleForecast', 35, 1, 'uint8', table='4.6'),
    _f('perturbationNumber', 36, 1, 'uint8'),
    _f('numberOfEnsembleForecasts', 37, 1, 'uint8'))

def _statistical(start):
    """Fields for the end of the overall time interval and the first time range."""
    o = start-35
    return (
        _f('yearOfEndOfTimePeriod', 35+o, 2, 'uint16'),
        _f('monthOfEndOfTimePeriod', 37+o, 1, 'uint8'),
        _f('dayOfEndOfTimePeriod', 38+o, 1, 'uint8'),
        _f('hourOfEndOfTimePeriod', 39+o, 1, 'uint8'),
        _f('minuteOfEndOfTimePeriod', 40+o, 1, 'uint8'),
        _f('secondOfEndOfTimePeriod', 41+o, 1, 'uint8'),
        _f('numberOfTimeRanges', 42+o, 1, 'uint8'),
        _f('numberOfMissingValues', 43+o, 4, 'uint32'),
        _f('statisticalProcess', 47+o, 1, 'uint8', table='4.10'),
        _f('typeOfTimeIncrementOfStatisticalProcess', 48+o, 1, 'uint8', table='4.11'),
        _f('unitOfTimeRangeOfStatisticalProcess', 49+o, 1, 'uint8', table='4.4'),
        _f('timeRangeOfStatisticalProcess', 50+o, 4, 'uint32'),
        _f('unitOfTimeIncrementOfStatisticalProcess', 54+o, 1, 'uint8', table='4.4'),
        _f('timeIncrementOfStatisticalProcess', 55+o, 4, 'uint32'))

_PRODUCT_TEMPLATES = (
    Template(4, 0, 'Analysis or forecast at a point in time', _PRODUCT),
    Template(4, 1, 'Individual ensemble forecast at a point in time', _PRODUCT + _ENSEMBLE),
    Template(4, 8, 'Statistically processed values in a time interval', _PRODUCT + _statistical(35)),
    Template(4, 11, 'Individual ensemble forecast in a time interval', _PRODUCT + _ENSEMBLE + _statistical(38)),
)

# ----------------------------------------------------------------------------------------
# Data Representation Templates (Section 5).
# ----------------------------------------------------------------------------------------
_SIMPLE = (
    _f('refValue', 12, 4, 'float32'),
    _reg('binScaleFactor', 16, 2, 'int16'),
    _reg('decScaleFactor', 18, 2, 'int16'),
    _f('nBitsPacking', 20, 1, 'uint8'),
    _f('typeOfValues', 21, 1, 'uint8', table='5.1'))

_COMPLEX = _SIMPLE + (
    _f('groupSplittingMethod', 22, 1, 'uint8', table='5.4'),
    _f('typeOfMissingValueManagement', 23, 1, 'uint8', table='5.5'),
    _f('priMissingValue', 24, 4, 'uint32'),
    _f('secMissingValue', 28, 4, 'uint32'),
    _f('nGroups', 32, 4, 'uint32'),
    _f('refGroupWidth', 36, 1, 'uint8'),
    _f('nBitsGroupWidth', 37, 1, 'uint8'),
    _f('refGroupLength', 38, 4, 'uint32'),
    _f('groupLengthIncrement', 42, 1, 'uint8'),
    _f('lengthOfLastGroup', 43, 4, 'uint32'),
    _f('nBitsScaledGroupLength', 47, 1, 'uint8'))

_DATA_TEMPLATES = (
    Template(5, 0, 'Grid Point Data - Simple Packing', _SIMPLE),
    Template(5, 2, 'Grid Point Data - Complex Packing', _COMPLEX),
    Template(5, 3, 'Grid Point Data - Complex Packing and Spatial Differencing', _COMPLEX + (
        _f('spatialDifferenceOrder', 48, 1, 'uint8', table='5.6'),
        _f('nBytesSpatialDifference', 49, 1, 'uint8'))),
    Template(5, 4, 'Grid Point Data - IEEE Floating Point Data', (
        _f('precision', 12, 1, 'uint8', table='5.7'),)),
    Template(5, 41, 'Grid Point Data - PNG Compression', _SIMPLE),
)

CATALOG = MappingProxyType({(t.section, t.number): t for t in
                            _GRID_TEMPLATES + _PRODUCT_TEMPLATES + _DATA_TEMPLATES})


def get_template(section: int, number: int, catalog=CATALOG) -> Template:
    """
    Return the template for a section and template number.

    Raises
    ------
    UnsupportedTemplateError
        If the catalog does not contain the template.
    """
    try:
        return catalog[(section, number)]
    except(KeyError):
        raise UnsupportedTemplateError(section, number) from None


def resolve_template(
    section: int,
    fields: Tuple[FieldSpec, ...],
    template_number: int,
    catalog=CATALOG,
) -> Tuple[FieldSpec, ...]:
    """
    Append a template's fields to the fixed fields of a section.

    The input sequence is left untouched; a new tuple is returned.

    Parameters
    ----------
    section
        Section number (3, 4 or 5).
    fields
        Field layout of the fixed part of the section.
    template_number
        Template number decoded from the fixed part.
    catalog
        Mapping of `(section, template number)` to `Template`.

    Returns
    -------
    resolve_template
        Tuple of the fixed fields followed by the template fields.
    """
    template = get_template(section, template_number, catalog)
    return tuple(fields) + template.fields


class Grib2Metadata:
    """
    Class to hold GRIB2 metadata.

    Stores both numeric code value as stored in GRIB2 and its plain language
    definition.

    Attributes
    ----------
    value : int
        GRIB2 metadata integer code value.
    table : str, optional
        GRIB2 table to lookup the `value`. Default is None.
    definition : str
        Plain language description of numeric metadata.
    """
    __slots__ = ('value','table')
    def __init__(self, value, table=None):
        self.value = value
        self.table = table
    def __call__(self):
        return self.value
    def __repr__(self):
        return f"{self.__class__.__name__}({self.value}, table = '{self.table}')"
    def __str__(self):
        return f'{self.value} - {self.definition}'
    def __eq__(self,other):
        if isinstance(other,Grib2Metadata):
            return self.value == other.value and self.table == other.table
        return self.value == other or self.definition == other
    def __hash__(self):
        return hash(self.value)
    def __index__(self):
        return int(self.value)
    def __int__(self):
        return int(self.value)
    @property
    def definition(self):
        if self.table is None:
            return None
        return tables.get_value_from_table(self.value,self.table)
    def show_table(self):
        """Provide the table related to this metadata."""
        return tables.get_table(self.table)
