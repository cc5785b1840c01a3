from ._grib2decode import *
from ._grib2decode import __doc__
from .config import DecoderConfig
from .errors import *
from . import tables, templates, utils

import PIL

__all__ = ['open', 'show_config', 'decode_all', 'decode_metadata_only',
           'decode_values', 'iter_decode', 'iter_messages', 'select_messages',
           'tables', 'templates', 'utils',
           'DecoderConfig', 'DecodedGrid', 'DecodedValues', 'DecodeResult',
           'MessageInfo', 'Grib2Message',
           'Grib2DecodeError', 'FormatError', 'UnsupportedTemplateError',
           'UnsupportedFeatureError', 'ResourceLimitError',
           'DecodeInconsistencyWarning', 'Diagnostic', 'MessageError']

try:
    from . import __config__
    __version__ = __config__.grib2decode_version
except(ImportError):
    __version__ = 'unknown'

def show_config():
    """Print grib2decode build configuration information."""
    print(f'grib2decode version {__version__} Configuration:\n')
    for section in (3, 4, 5):
        numbers = sorted(n for s,n in templates.CATALOG.keys() if s == section)
        print(f'\tSection {section} templates: {", ".join(map(str,numbers))}')
    print(f'\tPNG decoding: Pillow {PIL.__version__}')
