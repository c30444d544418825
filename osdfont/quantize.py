from __future__ import annotations

import math
from typing import List

import numpy as np

from .constants import ALPHA_CUTOFF, BLACK_BELOW, WHITE_ABOVE
from .document import PixelValue

LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def luminance(r: int, g: int, b: int) -> int:
    # Half-up rounding so .5 luminance values do not depend on banker's rounding.
    return int(math.floor(LUMA_WEIGHTS[0] * r + LUMA_WEIGHTS[1] * g + LUMA_WEIGHTS[2] * b + 0.5))


def quantize_pixel(r: int, g: int, b: int, a: int = 255) -> PixelValue:
    if a < ALPHA_CUTOFF:
        return PixelValue.TRANSPARENT
    gray = luminance(r, g, b)
    if gray < BLACK_BELOW:
        return PixelValue.BLACK
    if gray > WHITE_ABOVE:
        return PixelValue.WHITE
    return PixelValue.TRANSPARENT


def quantize_array(pixels: np.ndarray) -> np.ndarray:
    """Map an ``(height, width, 3|4)`` uint8 array to an ``(height, width)`` array of pixel values."""

    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ValueError(f"expected an RGB or RGBA array, got shape {pixels.shape}")
    channels = pixels.astype(np.float64)
    gray = np.floor(
        LUMA_WEIGHTS[0] * channels[..., 0]
        + LUMA_WEIGHTS[1] * channels[..., 1]
        + LUMA_WEIGHTS[2] * channels[..., 2]
        + 0.5
    )
    out = np.full(gray.shape, int(PixelValue.TRANSPARENT), dtype=np.uint8)
    out[gray < BLACK_BELOW] = PixelValue.BLACK
    out[gray > WHITE_ABOVE] = PixelValue.WHITE
    if pixels.shape[2] == 4:
        out[pixels[..., 3] < ALPHA_CUTOFF] = PixelValue.TRANSPARENT
    return out


def quantize_raster(data: bytes, width: int, height: int, channels: int) -> List[List[int]]:
    if channels not in (3, 4):
        raise ValueError(f"raster must have 3 or 4 channels, got {channels}")
    expected = width * height * channels
    if len(data) < expected:
        raise ValueError(f"raster needs {expected} bytes for {width}x{height}x{channels}, got {len(data)}")
    pixels = np.frombuffer(data, dtype=np.uint8, count=expected).reshape(height, width, channels)
    return quantize_array(pixels).tolist()
