"""
Framing of GRIB2 messages into sections and decoding of section fields.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
import logging
import struct

from . import tables
from . import templates
from . import utils
from .errors import FormatError, UnsupportedFeatureError
from .templates import FieldSpec, Grib2Metadata

logger = logging.getLogger(__name__)

GRIB2_EDITION_NUMBER = 2
INDICATOR = b'GRIB'
TRAILER = b'7777'
SECTION0_LENGTH = 16
SECTION_HEADER_LENGTH = 5
MAX_SECTIONS = 8

# Sections every message must carry. Section 2 is optional.
REQUIRED_SECTIONS = frozenset({0, 1, 3, 4, 5, 6, 7, 8})


@dataclass(frozen=True)
class Field:
    """A decoded field: its layout and value."""
    spec: FieldSpec
    value: Any

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def offset(self) -> int:
        return self.spec.offset

    @property
    def size(self) -> Optional[int]:
        return self.spec.size

    @property
    def type(self) -> str:
        return self.spec.type

    @property
    def flags(self):
        """List of 8 ints, most significant bit first, for flag-table fields."""
        if self.spec.flag_table is None:
            return None
        return utils.int2bin(self.value, output=list)

    @property
    def metadata(self):
        """`Grib2Metadata` for code-table fields."""
        if self.spec.table is None:
            return None
        return Grib2Metadata(self.value, table=self.spec.table)

    @property
    def definition(self):
        """
        Plain language meaning of the value.

        Code-table fields return the table entry; flag-table fields return a
        dict of bit number to meaning.
        """
        if self.spec.table is not None:
            return tables.get_value_from_table(self.value, self.spec.table)
        if self.spec.flag_table is not None:
            return tables.get_flag_meanings(self.flags, self.spec.flag_table)
        return None


def decode_field(spec: FieldSpec, data) -> Field:
    """
    Decode one field from the bytes of its section.

    Parameters
    ----------
    spec
        Field layout.
    data
        Bytes of the whole section, starting with its length octets.

    Returns
    -------
    decode_field
        `Field` holding the decoded value.
    """
    start = spec.offset
    end = len(data) if spec.size is None else start+spec.size
    if start > len(data) or end > len(data):
        raise FormatError(f'Field {spec.name} (octets {spec.start}-{end}) runs past '
                          f'end of {len(data)}-octet section')
    raw = data[start:end]
    if spec.type == 'bytes':
        value = bytes(raw)
    elif spec.type == 'string':
        value = bytes(raw).decode('ascii', errors='replace')
    elif spec.regulation is not None:
        value = utils.sign_magnitude(int.from_bytes(raw, 'big'), 8*spec.size)
    else:
        value = struct.unpack(templates.FIELD_TYPES[spec.type], raw)[0]
    return Field(spec, value)


@dataclass(frozen=True)
class Section:
    """
    A decoded GRIB2 section.

    Field values are available by name with `section['nx']` or
    `section.get('nx')`.
    """
    number: int
    offset: int
    length: int
    fields: Tuple[Field, ...]
    template_number: Optional[int] = None
    _by_name: Dict[str, Field] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, '_by_name', {f.name: f for f in self.fields})

    def __getitem__(self, name: str):
        return self._by_name[name].value

    def __contains__(self, name: str):
        return name in self._by_name

    def get(self, name: str, default=None):
        try:
            return self._by_name[name].value
        except(KeyError):
            return default

    def get_field(self, name: str) -> Field:
        return self._by_name[name]

    def to_dict(self) -> Dict[str, Any]:
        """Return field values keyed by name, excluding raw byte payloads."""
        return {f.name: f.value for f in self.fields if f.type != 'bytes'}


def decode_section(
    number: int,
    data,
    offset: int = 0,
    resolve: bool = True,
    catalog=templates.CATALOG,
) -> Section:
    """
    Decode the fields of a section.

    Parameters
    ----------
    number
        Section number, 0 through 8.
    data
        Bytes of the section.
    offset
        Byte offset of the section in the buffer it came from.
    resolve
        If `True` [DEFAULT], sections 3, 4 and 5 are extended with the fields
        of the template selected in their fixed part.  If `False` only the
        fixed part is decoded.
    catalog
        Template catalog.

    Returns
    -------
    decode_section
        `Section` object.

    Raises
    ------
    UnsupportedTemplateError
        If `resolve` is `True` and the selected template is not in the catalog.
    """
    layout = templates.SECTION_LAYOUTS[number]
    fields = tuple(decode_field(spec, data) for spec in layout)
    template_number = None
    if number in templates.TEMPLATE_SELECTORS:
        selector = templates.TEMPLATE_SELECTORS[number]
        template_number = next(f.value for f in fields if f.name == selector)
        if resolve:
            specs = templates.resolve_template(number, layout, template_number, catalog)
            fields += tuple(decode_field(spec, data) for spec in specs[len(layout):])
    return Section(number, offset, len(data), fields, template_number)


@dataclass(frozen=True)
class SectionSpan:
    """Location of a section within a buffer."""
    number: int
    offset: int
    length: int

    @property
    def end(self) -> int:
        return self.offset+self.length


@dataclass(frozen=True)
class Message:
    """
    Location and framing of one GRIB2 message within a buffer.

    A `Message` holds only offsets; section contents are decoded on demand
    with `Message.section`.
    """
    index: int
    offset: int
    length: int
    edition: int
    discipline: int
    spans: Tuple[SectionSpan, ...]

    @property
    def byte_range(self) -> Tuple[int, int]:
        return (self.offset, self.offset+self.length)

    def span(self, number: int) -> Optional[SectionSpan]:
        for s in self.spans:
            if s.number == number:
                return s
        return None

    def section_bytes(self, buffer, number: int) -> bytes:
        s = self.span(number)
        if s is None:
            raise KeyError(f'Message {self.index} has no section {number}')
        return bytes(buffer[s.offset:s.end])

    def section(self, buffer, number: int, resolve: bool = True) -> Section:
        """Decode section `number` of this message from `buffer`."""
        s = self.span(number)
        if s is None:
            raise KeyError(f'Message {self.index} has no section {number}')
        return decode_section(number, self.section_bytes(buffer, number), s.offset, resolve=resolve)


def frame_message(buffer, offset: int = 0, index: int = 0) -> Message:
    """
    Split the message starting at `offset` into its sections.

    Parameters
    ----------
    buffer
        Object supporting the buffer protocol holding one or more messages.
    offset
        Byte offset of the "GRIB" indicator.
    index
        Position of the message in the buffer, used in error messages.

    Returns
    -------
    frame_message
        `Message` with the location of every section.

    Raises
    ------
    FormatError
        Bad indicator, edition, section lengths, section order or trailer.
    UnsupportedFeatureError
        The message repeats sections (more than eight sections).
    """
    buf = memoryview(buffer)
    size = buf.nbytes
    if offset+SECTION0_LENGTH > size:
        raise FormatError(f'Message {index}: truncated indicator section at byte {offset}')
    sec0 = decode_section(0, bytes(buf[offset:offset+SECTION0_LENGTH]), offset)
    if sec0['indicator'].encode('ascii', errors='replace') != INDICATOR:
        raise FormatError(f'Message {index}: bad indicator {sec0["indicator"]!r} at byte {offset}')
    if sec0['editionNumber'] != GRIB2_EDITION_NUMBER:
        raise FormatError(f'Message {index}: bad GRIB edition number {sec0["editionNumber"]}')
    total = sec0['totalLength']
    if total < SECTION0_LENGTH+len(TRAILER) or offset+total > size:
        raise FormatError(f'Message {index}: declared length {total} does not fit in '
                          f'{size-offset} remaining bytes')

    end = offset+total
    spans = [SectionSpan(0, offset, SECTION0_LENGTH)]
    pos = offset+SECTION0_LENGTH
    last = 0
    while True:
        if pos+len(TRAILER) <= end and bytes(buf[pos:pos+len(TRAILER)]) == TRAILER:
            spans.append(SectionSpan(8, pos, len(TRAILER)))
            pos += len(TRAILER)
            break
        if pos+SECTION_HEADER_LENGTH > end:
            raise FormatError(f'Message {index}: end section "7777" not found')
        secsize, secnum = struct.unpack('>IB', buf[pos:pos+SECTION_HEADER_LENGTH])
        if secsize < SECTION_HEADER_LENGTH or pos+secsize > end:
            raise FormatError(f'Message {index}: section {secnum} at byte {pos} has bad length {secsize}')
        if not 1 <= secnum <= 7:
            raise FormatError(f'Message {index}: bad GRIB2 section number {secnum} at byte {pos}')
        if secnum <= last:
            if last == 7 and secnum >= 2:
                raise UnsupportedFeatureError(f'Message {index}: repeated sections (section {secnum} '
                                              'after section 7) are not supported')
            raise FormatError(f'Message {index}: section {secnum} follows section {last}')
        spans.append(SectionSpan(secnum, pos, secsize))
        if len(spans) > MAX_SECTIONS:
            raise UnsupportedFeatureError(f'Message {index}: more than {MAX_SECTIONS} sections')
        logger.debug('message %d: section %d at byte %d, %d bytes', index, secnum, pos, secsize)
        last = secnum
        pos += secsize

    if pos != end:
        raise FormatError(f'Message {index}: sum of section lengths ({pos-offset}) does not '
                          f'equal declared length ({total})')
    missing = REQUIRED_SECTIONS - {s.number for s in spans}
    if missing:
        raise FormatError(f'Message {index}: missing section(s) {sorted(missing)}')
    return Message(index, offset, total, sec0['editionNumber'], sec0['discipline'], tuple(spans))
