"""
PNG decoding for GRIB2 Data Representation Template 5.41.

Pillow decodes the image.  GRIB2 producers store grayscale samples, or
RGB/RGBA pixels whose 8-bit channels are read as one packed integer.
"""

import io
import logging
import struct

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from ..errors import FormatError, UnsupportedFeatureError

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'

# Channels per pixel keyed by PNG color type.
_CHANNELS = {0:1, 2:3, 4:2, 6:4}

# Pillow expands 2- and 4-bit grayscale samples to the 0-255 range.
_GRAY_EXPANSION = {2:0x55, 4:0x11}


def png_header(data: bytes):
    """
    Read the IHDR chunk of a PNG stream.

    Returns
    -------
    png_header
        Tuple of width, height, bit depth and color type.
    """
    if data[:8] != PNG_SIGNATURE or len(data) < 26 or data[12:16] != b'IHDR':
        raise FormatError('Data section does not begin with a PNG image header')
    return struct.unpack('>IIBB', data[16:26])


def read_png(data: bytes) -> NDArray[np.uint64]:
    """
    Decode a PNG stream to its integer samples.

    Parameters
    ----------
    data
        PNG file contents.

    Returns
    -------
    read_png
        Flat `numpy.ndarray` of `width*height` unsigned samples in row-major
        order. Multi-channel pixels are combined big-endian into one integer.
    """
    data = bytes(data)
    width, height, depth, color = png_header(data)
    if color not in _CHANNELS or (color != 0 and depth != 8):
        raise UnsupportedFeatureError(f'PNG images of color type {color} with bit depth '
                                      f'{depth} are not supported')
    logger.debug('PNG %dx%d, bit depth %d, color type %d, %d bytes',
                 width, height, depth, color, len(data))
    try:
        with Image.open(io.BytesIO(data), formats=['PNG']) as im:
            pixels = np.array(im)
    except(OSError, SyntaxError, EOFError) as e:
        raise FormatError(f'Unable to decode PNG image: {e}') from e
    if pixels.shape[:2] != (height, width):
        raise FormatError(f'PNG image decoded to shape {pixels.shape}, expected {(height, width)}')

    samples = pixels.astype(np.uint64)
    if pixels.ndim == 3:
        out = np.zeros((height, width), dtype=np.uint64)
        for b in range(pixels.shape[2]):
            out = (out << np.uint64(8)) | samples[:,:,b]
        samples = out
    elif depth in _GRAY_EXPANSION:
        samples //= np.uint64(_GRAY_EXPANSION[depth])
    return samples.ravel()
