"""
MAX7456 on-screen-display font codecs, image import and edit history.
"""

from . import header, mcm, msp
from .bitpack import pack, unpack
from .document import FontCharacter, FontDocument, PixelValue, blank_pixels
from .errors import ErrorKind, FontError, FormatError, OutOfRangeError
from .history import EditHistory, PixelChange, Stroke
from .imaging import decode_image_data, image_to_tiles, import_image, render_preview
from .mcm import DecodeResult
from .quantize import luminance, quantize_array, quantize_pixel, quantize_raster
from .session import FontSession

__all__ = [
    "header",
    "mcm",
    "msp",
    "pack",
    "unpack",
    "FontCharacter",
    "FontDocument",
    "PixelValue",
    "blank_pixels",
    "ErrorKind",
    "FontError",
    "FormatError",
    "OutOfRangeError",
    "EditHistory",
    "PixelChange",
    "Stroke",
    "decode_image_data",
    "image_to_tiles",
    "import_image",
    "render_preview",
    "DecodeResult",
    "luminance",
    "quantize_array",
    "quantize_pixel",
    "quantize_raster",
    "FontSession",
]
