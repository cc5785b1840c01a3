"""Decoder configuration."""

from dataclasses import dataclass, replace
from typing import Optional
import os

DEFAULT_MEMORY_LIMIT = 100 * 1024**2
DEFAULT_HEADER_SEARCH_LIMIT = 2048
DEFAULT_NUM_THREADS = 1

_ENV_PREFIX = 'GRIB2DECODE_'


@dataclass(frozen=True)
class DecoderConfig:
    """
    Settings passed explicitly into the decode functions.

    Attributes
    ----------
    memory_limit
        Largest buffer, in bytes, that `decode_all` will fully decode.
    max_messages
        Stop after this many messages. `None` means no limit.
    num_threads
        Number of worker threads used to decode independent messages.
    header_search_limit
        Number of bytes searched for the "GRIB" indicator before a message.
        Some files carry a text header ahead of the first message.
    warn_inconsistencies
        If `True` [DEFAULT], issue `DecodeInconsistencyWarning` for
        point-count mismatches in addition to recording a diagnostic.
    """
    memory_limit: int = DEFAULT_MEMORY_LIMIT
    max_messages: Optional[int] = None
    num_threads: int = DEFAULT_NUM_THREADS
    header_search_limit: int = DEFAULT_HEADER_SEARCH_LIMIT
    warn_inconsistencies: bool = True

    def __post_init__(self):
        if self.memory_limit <= 0:
            raise ValueError('memory_limit must be positive')
        if self.max_messages is not None and self.max_messages < 0:
            raise ValueError('max_messages must be non-negative')
        if self.num_threads < 1:
            raise ValueError('num_threads must be at least 1')

    @classmethod
    def from_env(cls, **overrides):
        """
        Build a configuration from `GRIB2DECODE_*` environment variables.

        Recognized variables are `GRIB2DECODE_MEMORY_LIMIT`,
        `GRIB2DECODE_MAX_MESSAGES` and `GRIB2DECODE_NUM_THREADS`. Keyword
        arguments take precedence over the environment.
        """
        kwargs = {}
        for name in ('memory_limit', 'max_messages', 'num_threads'):
            val = os.environ.get(_ENV_PREFIX+name.upper())
            if val is None: continue
            try:
                kwargs[name] = int(val)
            except(ValueError):
                raise ValueError(f'Environment variable {_ENV_PREFIX+name.upper()} must be an integer') from None
        kwargs.update(overrides)
        return cls(**kwargs)

    def replace(self, **changes):
        """Return a copy with the given fields changed."""
        return replace(self, **changes)
