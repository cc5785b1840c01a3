"""Exceptions and warnings raised while decoding GRIB2 messages."""

from dataclasses import dataclass
from typing import Optional


class Grib2DecodeError(Exception):
    """Base class for all grib2decode errors."""


class FormatError(Grib2DecodeError, ValueError):
    """Bad magic, edition, section framing or field bounds."""


class UnsupportedTemplateError(Grib2DecodeError):
    """
    A grid, product or data representation template is not in the catalog.

    Attributes
    ----------
    section
        GRIB2 section number the template belongs to (3, 4 or 5).
    template_number
        The template number that could not be resolved.
    """
    def __init__(self, section: int, template_number: int):
        self.section = section
        self.template_number = template_number
        super().__init__(f'Unsupported template {section}.{template_number}')


class UnsupportedFeatureError(Grib2DecodeError, NotImplementedError):
    """A valid GRIB2 feature that grib2decode does not implement."""


class ResourceLimitError(Grib2DecodeError, MemoryError):
    """
    The input buffer exceeds the configured memory ceiling.

    Retry with `grib2decode.decode_metadata_only` and decode values per message.
    """
    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f'Buffer of {size} bytes exceeds memory limit of {limit} bytes; '
                         'use decode_metadata_only() and decode_values() instead.')


class DecodeInconsistencyWarning(UserWarning):
    """Non-fatal inconsistency in a message, such as point-count mismatches."""


@dataclass(frozen=True)
class Diagnostic:
    """A structured, non-fatal note attached to a decode result."""
    code: str
    message: str
    section: Optional[int] = None
    inconsistency: bool = False

    def __str__(self):
        where = f' (section {self.section})' if self.section is not None else ''
        return f'{self.code}{where}: {self.message}'


@dataclass(frozen=True)
class MessageError:
    """Record of a message that failed to decode."""
    index: int
    offset: int
    error: Exception

    def __str__(self):
        return f'message {self.index} at byte {self.offset}: {type(self.error).__name__}: {self.error}'
