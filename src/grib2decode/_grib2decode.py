"""
Introduction
============
grib2decode is a pure Python package for decoding WMO GRIdded Binary, Edition 2
(GRIB2) messages into numpy arrays of values plus grid and product metadata.
A buffer or physical file can contain one or more GRIB2 messages.

Messages are split into their sections and every section is decoded with the
field layouts of `grib2decode.templates`.  Code values are translated into
plain language by looking them up in the GRIB2 code tables of
`grib2decode.tables`.  Packed values are unpacked in Python with numpy for
simple packing, complex packing (with or without spatial differencing), IEEE
floating point and PNG compression.

Decoding
========
* `decode_all` decodes every message of a buffer.
* `decode_metadata_only` decodes grid and product metadata without unpacking
  values, and reports where each message lives in the buffer.
* `decode_values` unpacks one message located by `decode_metadata_only`.
* `iter_decode` decodes messages one at a time.
* `open` indexes a GRIB2 file and decodes values on demand.

A message that fails to decode does not stop the others; the failure is
recorded in the `errors` of the result.  Values are returned with the
northernmost row first and missing values set to `NaN`.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple, Union
import builtins
import gzip
import logging
import mmap
import os
import struct
import warnings

from numpy.typing import NDArray
import numpy as np

from .config import DecoderConfig
from .errors import (DecodeInconsistencyWarning, Diagnostic, FormatError,
                     Grib2DecodeError, MessageError, ResourceLimitError)
from .grid import GridDefinition, flip_rows, grid_from_section, normalize_grid, normalize_scan
from .product import ProductInfo, build_product_info
from .sections import INDICATOR, SECTION0_LENGTH, SECTION_HEADER_LENGTH, Message, frame_message
from .unpack import NO_BITMAP, apply_bitmap, data_representation

logger = logging.getLogger(__name__)

GRIB1_EDITION_NUMBER = 1

# Errors that are isolated to the message that raised them.
_MESSAGE_ERRORS = (Grib2DecodeError, ValueError, struct.error)


def _to_2d(values: NDArray, grid: GridDefinition) -> NDArray:
    """Reshape flat values to (ny, nx), padding with NaN or truncating as needed."""
    n = grid.nx*grid.ny
    if values.size != n:
        out = np.full(n, np.nan, dtype=np.float64)
        m = min(n, values.size)
        out[:m] = values[:m]
        values = out
    return values.reshape(grid.ny, grid.nx)


@dataclass(frozen=True, eq=False)
class DecodedGrid:
    """
    A fully decoded GRIB2 message.

    Attributes
    ----------
    index
        Position of the message in the buffer, starting at 0.
    byte_range
        `(start, end)` byte offsets of the message in the buffer.
    grid
        `GridDefinition` after scan normalization.
    product
        `ProductInfo` describing the parameter, level and times.
    values
        Flat `numpy.float64` array of `grid.num_points` values in north-first
        row-major order.  Missing values are `NaN`.
    bitmap
        Boolean presence mask in the same order as `values`, or `None` when
        the message has no bitmap.
    rows_flipped
        `True` when rows were stored south to north and have been reversed.
    diagnostics
        Tuple of `Diagnostic` notes recorded while decoding.
    """
    index: int
    byte_range: Tuple[int, int]
    grid: GridDefinition
    product: ProductInfo
    values: NDArray[np.float64]
    bitmap: Optional[NDArray[np.bool_]]
    rows_flipped: bool
    diagnostics: Tuple[Diagnostic, ...] = ()

    def __str__(self):
        return f'{self.index}:{self.product}'

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    @property
    def data(self) -> NDArray[np.float64]:
        """Values as a 2-D array of shape `(ny, nx)`."""
        return _to_2d(self.values, self.grid)

    def latlons(self):
        """Return lats, lons (in degrees) matching `data`."""
        return self.grid.latlons()

    def subset(self, bbox):
        """
        Values and coordinates inside a bounding box.

        Parameters
        ----------
        bbox
            Sequence of west, south, east, north in degrees.

        Returns
        -------
        data, lats, lons : numpy.ndarray
            2-D arrays covering the smallest window of grid rows and columns
            that contains the box.
        """
        rows, cols = self.grid.subset_indices(bbox)
        lats, lons = self.latlons()
        return self.data[rows, cols], lats[rows, cols], lons[rows, cols]

    @property
    def min(self):
        """Return minimum value of data."""
        return np.nanmin(self.values)

    @property
    def max(self):
        """Return maximum value of data."""
        return np.nanmax(self.values)

    @property
    def mean(self):
        """Return mean value of data."""
        return np.nanmean(self.values)


@dataclass(frozen=True, eq=False)
class DecodedValues:
    """Values of one message returned by `decode_values`."""
    values: NDArray[np.float64]
    bitmap: Optional[NDArray[np.bool_]]
    grid: GridDefinition
    rows_flipped: bool
    diagnostics: Tuple[Diagnostic, ...] = ()

    @property
    def data(self) -> NDArray[np.float64]:
        return _to_2d(self.values, self.grid)


@dataclass(frozen=True)
class MessageInfo:
    """
    Metadata of one message returned by `decode_metadata_only`.

    Pass `byte_range` to `decode_values` to unpack the values.
    """
    index: int
    byte_range: Tuple[int, int]
    grid: GridDefinition
    product: ProductInfo
    data_representation_template: int
    num_packed_values: int
    bitmap_flag: int
    diagnostics: Tuple[Diagnostic, ...] = ()

    def __str__(self):
        return f'{self.index}:{self.product}'

    @property
    def has_bitmap(self) -> bool:
        return self.bitmap_flag != NO_BITMAP


class DecodeResult(list):
    """
    List of decoded messages.

    Attributes
    ----------
    errors : list
        `MessageError` for every message that could not be decoded.
    """
    def __init__(self, items=(), errors=()):
        super().__init__(items)
        self.errors = list(errors)

    def __repr__(self):
        return f'{self.__class__.__name__}({list.__repr__(self)}, errors={self.errors!r})'

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self):
        """Raise the exception of the first failed message, if any."""
        if self.errors:
            raise self.errors[0].error


# ----------------------------------------------------------------------------------------
# Message splitting.
# ----------------------------------------------------------------------------------------
def _find_indicator(buf: memoryview, pos: int, limit: int) -> int:
    """Offset of "GRIB" within `limit` bytes of `pos`, or -1."""
    window = bytes(buf[pos:pos+limit+len(INDICATOR)-1])
    i = window.find(INDICATOR)
    return -1 if i < 0 else pos+i


def _declared_length(buf: memoryview, start: int) -> int:
    if start+SECTION0_LENGTH > buf.nbytes:
        return 0
    return int.from_bytes(buf[start+8:start+SECTION0_LENGTH], 'big')


def iter_messages(buffer, config: Optional[DecoderConfig] = None) -> Iterator[Union[Message, MessageError]]:
    """
    Split a buffer into GRIB2 messages.

    Bytes ahead of a message that are not part of it (text headers, for
    example) are skipped when the "GRIB" indicator is found within
    `config.header_search_limit` bytes.  GRIB edition 1 messages are skipped
    with a warning.

    Parameters
    ----------
    buffer
        Object supporting the buffer protocol.
    config
        Decoder configuration.  `max_messages` bounds the number of messages
        yielded.

    Yields
    ------
    Message or MessageError
        A framed message, or the error of a message whose framing failed.
        After a framing failure the search resumes after the declared length
        of the bad message when that is plausible.
    """
    if config is None:
        config = DecoderConfig()
    buf = memoryview(buffer).cast('B')
    size = buf.nbytes
    pos = 0
    index = 0
    while pos < size:
        if config.max_messages is not None and index >= config.max_messages:
            return
        start = _find_indicator(buf, pos, config.header_search_limit)
        if start < 0:
            if index == 0:
                yield MessageError(0, pos, FormatError(f'No "GRIB" indicator found in the first '
                                                       f'{config.header_search_limit} bytes'))
            else:
                logger.debug('ignoring %d trailing bytes after message %d', size-pos, index-1)
            return
        if start > pos:
            logger.debug('skipped %d bytes before message %d', start-pos, index)

        # Check for GRIB1 and ignore.
        if start+8 <= size and buf[start+7] == GRIB1_EDITION_NUMBER:
            warnings.warn("GRIB version 1 message detected.  Ignoring...")
            grib1_size = int.from_bytes(buf[start+4:start+7], 'big')
            logger.warning('skipping GRIB1 message of %d bytes at byte %d', grib1_size, start)
            pos = start+max(grib1_size, len(INDICATOR))
            continue

        try:
            msg = frame_message(buf, start, index)
        except(Grib2DecodeError, struct.error) as e:
            yield MessageError(index, start, e)
            index += 1
            total = _declared_length(buf, start)
            if SECTION0_LENGTH < total and start+total <= size:
                pos = start+total
            else:
                pos = start+len(INDICATOR)
            continue
        yield msg
        index += 1
        pos = msg.offset+msg.length


# ----------------------------------------------------------------------------------------
# Decoding of single messages.
# ----------------------------------------------------------------------------------------
def _report(diagnostics, index: int, config: DecoderConfig):
    for d in diagnostics:
        logger.warning('message %d: %s', index, d)
        if d.inconsistency and config.warn_inconsistencies:
            warnings.warn(f'message {index}: {d}', DecodeInconsistencyWarning, stacklevel=3)


def _grid(buf: memoryview, msg: Message, diagnostics: List[Diagnostic]) -> GridDefinition:
    span = msg.span(3)
    return grid_from_section(bytes(buf[span.offset:span.end]), span.offset, diagnostics)


def _product(buf: memoryview, msg: Message) -> ProductInfo:
    return build_product_info(msg.section(buf, 0), msg.section(buf, 1), msg.section(buf, 4))


def _unpack(buf: memoryview, msg: Message, grid: GridDefinition, diagnostics: List[Diagnostic]):
    """Unpack, expand and scan-normalize the values of a message."""
    section5 = msg.section(buf, 5)
    section6 = msg.section(buf, 6)
    drs = data_representation(section5)
    span = msg.span(7)
    payload = buf[span.offset+SECTION_HEADER_LENGTH:span.end]
    npacked = section5['numberOfPackedValues']
    logger.debug('message %d: unpacking %d values with %s', msg.index, npacked, type(drs).__name__)
    packed = drs.unpack(payload, npacked, diagnostics)
    values, bitmap = apply_bitmap(packed, section6, grid.num_points, diagnostics)
    values, grid, flipped = normalize_scan(values, grid, diagnostics)
    if flipped and bitmap is not None:
        bitmap = flip_rows(bitmap, grid.nx, grid.ny)
    return values, bitmap, grid, flipped


def _decode_grid(buf: memoryview, msg: Message) -> DecodedGrid:
    diagnostics = []
    grid = _grid(buf, msg, diagnostics)
    product = _product(buf, msg)
    values, bitmap, grid, flipped = _unpack(buf, msg, grid, diagnostics)
    return DecodedGrid(msg.index, msg.byte_range, grid, product, values, bitmap,
                       flipped, tuple(diagnostics))


def _decode_isolated(buf: memoryview, msg: Message) -> Union[DecodedGrid, MessageError]:
    try:
        return _decode_grid(buf, msg)
    except _MESSAGE_ERRORS as e:
        return MessageError(msg.index, msg.offset, e)


def _message_info(buf: memoryview, msg: Message) -> MessageInfo:
    diagnostics = []
    grid = normalize_grid(_grid(buf, msg, diagnostics))
    product = _product(buf, msg)
    section5 = msg.section(buf, 5, resolve=False)
    bitmap_flag = buf[msg.span(6).offset+SECTION_HEADER_LENGTH]
    return MessageInfo(msg.index, msg.byte_range, grid, product, section5.template_number,
                       section5['numberOfPackedValues'], bitmap_flag, tuple(diagnostics))


# ----------------------------------------------------------------------------------------
# Public API.
# ----------------------------------------------------------------------------------------
def decode_all(buffer, config: Optional[DecoderConfig] = None,
               num_threads: Optional[int] = None) -> DecodeResult:
    """
    Decode every GRIB2 message in a buffer.

    Parameters
    ----------
    buffer
        Object supporting the buffer protocol holding one or more messages.
    config
        Decoder configuration.  Defaults to `DecoderConfig()`.
    num_threads
        Number of worker threads.  Overrides `config.num_threads`.

    Returns
    -------
    decode_all
        `DecodeResult` of `DecodedGrid` objects in buffer order, with a
        `MessageError` in `errors` for each message that failed.

    Raises
    ------
    ResourceLimitError
        If the buffer is larger than `config.memory_limit`.  Use
        `decode_metadata_only` and `decode_values` instead.
    """
    if config is None:
        config = DecoderConfig()
    buf = memoryview(buffer).cast('B')
    if buf.nbytes > config.memory_limit:
        raise ResourceLimitError(buf.nbytes, config.memory_limit)
    nthreads = config.num_threads if num_threads is None else num_threads
    if nthreads < 1:
        raise ValueError('num_threads must be at least 1')

    def work(item):
        if isinstance(item, MessageError):
            return item
        return _decode_isolated(buf, item)

    framed = list(iter_messages(buf, config))
    if nthreads > 1 and len(framed) > 1:
        with ThreadPoolExecutor(max_workers=nthreads) as pool:
            outcomes = list(pool.map(work, framed))
    else:
        outcomes = [work(item) for item in framed]

    result = DecodeResult()
    for outcome in outcomes:
        if isinstance(outcome, MessageError):
            logger.warning('%s', outcome)
            result.errors.append(outcome)
        else:
            _report(outcome.diagnostics, outcome.index, config)
            result.append(outcome)
    logger.debug('decoded %d messages, %d errors', len(result), len(result.errors))
    return result


def decode_metadata_only(buffer, max_messages: Optional[int] = None,
                         config: Optional[DecoderConfig] = None) -> DecodeResult:
    """
    Decode grid and product metadata of each message without unpacking values.

    The memory limit does not apply; no values are materialized.

    Parameters
    ----------
    buffer
        Object supporting the buffer protocol holding one or more messages.
    max_messages
        Stop after this many messages.  Overrides `config.max_messages`.
    config
        Decoder configuration.

    Returns
    -------
    decode_metadata_only
        `DecodeResult` of `MessageInfo` objects.
    """
    if config is None:
        config = DecoderConfig()
    if max_messages is not None:
        config = config.replace(max_messages=max_messages)
    buf = memoryview(buffer).cast('B')
    result = DecodeResult()
    for item in iter_messages(buf, config):
        if isinstance(item, MessageError):
            logger.warning('%s', item)
            result.errors.append(item)
            continue
        try:
            info = _message_info(buf, item)
        except _MESSAGE_ERRORS as e:
            err = MessageError(item.index, item.offset, e)
            logger.warning('%s', err)
            result.errors.append(err)
            continue
        _report(info.diagnostics, info.index, config)
        result.append(info)
    return result


def decode_values(buffer, byte_range: Tuple[int, int],
                  config: Optional[DecoderConfig] = None) -> DecodedValues:
    """
    Unpack the values of one message.

    Parameters
    ----------
    buffer
        Buffer the message was located in.
    byte_range
        `(start, end)` of the message, as given by `MessageInfo.byte_range`.
    config
        Decoder configuration.

    Returns
    -------
    decode_values
        `DecodedValues` with values in north-first row-major order.

    Raises
    ------
    FormatError
        If `byte_range` does not hold exactly one GRIB2 message.
    UnsupportedTemplateError
        If the data representation template is not one that can be unpacked.
    ResourceLimitError
        If the message is larger than `config.memory_limit`.
    """
    if config is None:
        config = DecoderConfig()
    start, end = (int(b) for b in byte_range)
    if end-start > config.memory_limit:
        raise ResourceLimitError(end-start, config.memory_limit)
    buf = memoryview(buffer).cast('B')
    if not 0 <= start < end <= buf.nbytes:
        raise FormatError(f'Byte range {tuple(byte_range)} is outside the {buf.nbytes}-byte buffer')
    msg = frame_message(buf, start)
    if msg.offset+msg.length != end:
        raise FormatError(f'Byte range {tuple(byte_range)} does not match message length {msg.length}')
    diagnostics = []
    grid = _grid(buf, msg, diagnostics)
    values, bitmap, grid, flipped = _unpack(buf, msg, grid, diagnostics)
    _report(diagnostics, msg.index, config)
    return DecodedValues(values, bitmap, grid, flipped, tuple(diagnostics))


def iter_decode(buffer, config: Optional[DecoderConfig] = None) -> Iterator[Union[DecodedGrid, MessageError]]:
    """
    Decode messages one at a time.

    Stopping iteration stops decoding; no further messages are read.

    Yields
    ------
    DecodedGrid or MessageError
    """
    if config is None:
        config = DecoderConfig()
    buf = memoryview(buffer).cast('B')
    for item in iter_messages(buf, config):
        if isinstance(item, MessageError):
            logger.warning('%s', item)
            yield item
            continue
        outcome = _decode_isolated(buf, item)
        if isinstance(outcome, MessageError):
            logger.warning('%s', outcome)
        else:
            _report(outcome.diagnostics, outcome.index, config)
        yield outcome


def _lookup(obj, name: str):
    try:
        return getattr(obj, name)
    except(AttributeError):
        product = getattr(obj, 'product', None)
        if product is None:
            raise
        return getattr(product, name)


def select_messages(messages: Sequence, **kwargs) -> list:
    """
    Select messages by attribute.

    Attributes are looked up on each message and then on its `product`, so
    both `select_messages(infos, short_name='TMP')` and
    `select_messages(infos, index=3)` work.  A list, tuple or set value
    matches any of its members.

    Returns
    -------
    select_messages
        List of the messages matching every keyword, in input order.
    """
    def matches(msg):
        for k, v in kwargs.items():
            try:
                attr = _lookup(msg, k)
            except(AttributeError):
                return False
            if isinstance(v, (list, tuple, set, frozenset)):
                if attr not in v: return False
            elif attr != v:
                return False
        return True
    return [m for m in messages if matches(m)]


class open():
    """
    GRIB2 File Object.

    A physical file can contain one or more GRIB2 messages.  When instantiated,
    class `grib2decode.open`, the file named `filename` is memory-mapped for
    reading and is automatically indexed.  The indexing procedure decodes the
    metadata of all GRIB2 messages; values are decoded when a message's
    `data` is first accessed.

    It is important to note that GRIB2 files from some Meteorological agencies
    contain other data than GRIB2 messages.  GRIB2 files from ECMWF can contain
    GRIB1 and GRIB2 messages.  grib2decode checks for these and safely ignores
    them.

    Attributes
    ----------
    closed : bool
        `True` is file handle is close; `False` otherwise.
    current_message : int
        Current position of the file in units of GRIB2 Messages.
    errors : list
        `MessageError` for each message that could not be indexed.
    levels : tuple
        Tuple containing a unique list of wgrib2-formatted level/layer strings.
    messages : int
        Count of GRIB2 Messages contained in the file.
    name : str
        Full path name of the GRIB2 file, `None` for in-memory bytes.
    size : int
        Size of the file in units of bytes.
    variables : tuple
        Tuple containing a unique list of variable short names (i.e. GRIB2
        abbreviation names).
    """

    __slots__ = ('_buffer', '_config', '_filehandle', '_index', '_mmap',
                 'closed', 'current_message', 'errors', 'messages', 'name', 'size')

    def __init__(self, filename, config: Optional[DecoderConfig] = None):
        """
        Initialize GRIB2 File object instance.

        Parameters
        ----------
        filename
            File name containing GRIB2 messages, or the bytes of one or more
            messages.
        config
            Decoder configuration.
        """
        self._config = DecoderConfig() if config is None else config
        self._filehandle = None
        self._mmap = None
        if isinstance(filename, (bytes, bytearray, memoryview)):
            self.name = None
            self._buffer = filename
        else:
            self.name = os.path.abspath(filename)
            self._filehandle = builtins.open(filename, mode='rb')
            # Gzip files contain a 2-byte header b'\x1f\x8b'.
            if self._filehandle.read(2) == b'\x1f\x8b':
                self._filehandle.close()
                with gzip.open(filename, mode='rb') as f:
                    self._buffer = f.read()
            elif os.fstat(self._filehandle.fileno()).st_size == 0:
                self._buffer = b''
            else:
                self._mmap = mmap.mmap(self._filehandle.fileno(), 0, access=mmap.ACCESS_READ)
                self._buffer = self._mmap
        self.size = memoryview(self._buffer).nbytes
        self.closed = False
        self.current_message = 0
        self._build_index()

    def __enter__(self):
        return self

    def __exit__(self, atype, value, traceback):
        self.close()

    def __iter__(self):
        yield from self._index

    def __len__(self):
        return self.messages

    def __repr__(self):
        strings = []
        for k in self.__slots__:
            if k.startswith('_') or k == 'errors': continue
            strings.append('%s = %s\n'%(k,getattr(self,k)))
        return ''.join(strings)

    def __getitem__(self, key):
        if isinstance(key,int):
            if abs(key) >= len(self._index):
                raise IndexError("index out of range")
            else:
                return self._index[key]
        elif isinstance(key,str):
            return self.select(short_name=key)
        elif isinstance(key,slice):
            return self._index[key]
        else:
            raise KeyError('Key must be an integer, slice, or GRIB2 variable short name.')

    def _build_index(self):
        """Perform indexing of GRIB2 Messages."""
        infos = decode_metadata_only(self._buffer, config=self._config)
        self.errors = infos.errors
        self._index = [Grib2Message(self, info) for info in infos]
        self.messages = len(self._index)
        logger.debug('indexed %d messages in %s', self.messages, self.name or 'buffer')

    def _decode_values(self, info: MessageInfo) -> DecodedValues:
        if self.closed:
            raise ValueError('I/O operation on closed file.')
        return decode_values(self._buffer, info.byte_range, self._config)

    @property
    def levels(self):
        return tuple(sorted(set([msg.level for msg in self._index])))

    @property
    def variables(self):
        return tuple(sorted(set([msg.short_name for msg in self._index])))

    def close(self):
        """Close the file handle."""
        if self.closed:
            return
        self.messages = 0
        self.current_message = 0
        if self._mmap is not None:
            try:
                self._mmap.close()
            except(BufferError):
                # Views of the map are still alive; it closes when they are released.
                logger.debug('memory map of %s still in use', self.name)
        if self._filehandle is not None:
            self._filehandle.close()
        self._mmap = None
        self._buffer = b''
        self.closed = True

    def read(self, size: Optional[int]=None):
        """
        Read size amount of GRIB2 messages from the current position.

        If no argument is given, then size is None and all messages are returned
        from the current position in the file. This read method follows the
        behavior of Python's builtin open() function, but whereas that operates
        on units of bytes, we operate on units of GRIB2 messages.

        Parameters
        ----------
        size: default=None
            The number of GRIB2 messages to read from the current position. If
            no argument is give, the default value is None and remainder of
            the file is read.

        Returns
        -------
        read
            `Grib2Message` object when size = 1 or a list of Grib2Messages
            otherwise.
        """
        if size is not None and size < 0:
            size = None
        start = self.current_message
        stop = self.messages if size is None else min(start+size, self.messages)
        self.current_message = stop
        msgs = self._index[start:stop]
        if size == 1:
            return msgs[0] if msgs else None
        return msgs

    def seek(self, pos: int):
        """
        Set the position within the file in units of GRIB2 messages.

        Parameters
        ----------
        pos
            The GRIB2 Message number to set the file pointer to.
        """
        if not 0 <= pos <= self.messages:
            raise ValueError(f'Message position {pos} is outside 0-{self.messages}')
        self.current_message = pos

    def tell(self):
        """Returns the position of the file in units of GRIB2 Messages."""
        return self.current_message

    def select(self, **kwargs):
        """Select GRIB2 messages by `Grib2Message` attributes."""
        return select_messages(self._index, **kwargs)

    def levels_by_var(self, name: str):
        """
        Return a list of level strings given a variable short name.

        Parameters
        ----------
        name
            Grib2Message variable short name

        Returns
        -------
        levels_by_var
            A list of unique level strings.
        """
        return list(sorted(set([msg.level for msg in self.select(short_name=name)])))

    def vars_by_level(self, level: str):
        """
        Return a list of variable short name strings given a level.

        Parameters
        ----------
        level
            Grib2Message variable level

        Returns
        -------
        vars_by_level
            A list of unique variable short name strings.
        """
        return list(sorted(set([msg.short_name for msg in self.select(level=level)])))


class Grib2Message:
    """
    A GRIB2 message of a `grib2decode.open` file.

    Metadata attributes of the message's `MessageInfo` and `ProductInfo`
    (`short_name`, `level`, `grid`, `valid_date`, ...) are available directly
    on the message.  Values are decoded on first access to `data`.
    """
    def __init__(self, source: open, info: MessageInfo):
        self._source = source
        self._info = info
        self._values = None

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return _lookup(self._info, name)
        except(AttributeError):
            raise AttributeError(f"'{self.__class__.__name__}' object has no attribute '{name}'") from None

    def __repr__(self):
        return f'{self.__class__.__name__}({self._info!r})'

    def __str__(self):
        return str(self._info)

    def __getitem__(self, item):
        return self.data[item]

    @property
    def info(self) -> MessageInfo:
        return self._info

    @property
    def data(self) -> NDArray[np.float64]:
        """Values as a 2-D array of shape `(ny, nx)`, north first."""
        if self._values is None:
            self._values = self._source._decode_values(self._info)
        return self._values.data

    @property
    def bitmap(self):
        self.data
        return self._values.bitmap

    def flush_data(self):
        """Drop the decoded values; they are decoded again on next access."""
        self._values = None

    def latlons(self):
        """Return lats, lons (in degrees) of grid."""
        return self._info.grid.latlons()

    @property
    def lats(self):
        """Return grid latitudes."""
        return self.latlons()[0]

    @property
    def lons(self):
        """Return grid longitudes."""
        return self.latlons()[1]

    @property
    def min(self):
        """Return minimum value of data."""
        return np.nanmin(self.data)

    @property
    def max(self):
        """Return maximum value of data."""
        return np.nanmax(self.data)

    @property
    def mean(self):
        """Return mean value of data."""
        return np.nanmean(self.data)

    @property
    def median(self):
        """Return median value of data."""
        return np.nanmedian(self.data)
