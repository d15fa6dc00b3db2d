#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Normalization
============================================
Downscales decoded images to the conversion bound using a separable
Gaussian resampling filter.
"""

import logging
import math
from typing import Tuple

import numpy as np
from PIL import Image

from asciiframe.constants import GAUSSIAN_SIGMA, GAUSSIAN_SUPPORT

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _gaussian(x: np.ndarray, sigma: float) -> np.ndarray:
    return np.exp(-(x ** 2) / (2.0 * sigma ** 2)) / (math.sqrt(2.0 * math.pi) * sigma)


def target_dimensions(width: int, height: int, bound: int,
                      preserve_aspect: bool = False) -> Tuple[int, int]:
    """
    Calculate the normalized size of a ``width`` x ``height`` image.

    Images narrower than the bound keep their own size. Otherwise both sides
    become ``bound``, or with ``preserve_aspect`` the image is fitted inside a
    ``bound`` x ``bound`` box.
    """
    if width < bound:
        return width, height
    if not preserve_aspect:
        return bound, bound

    ratio = min(bound / width, bound / height)
    return (max(1, _round_half_up(width * ratio)),
            max(1, _round_half_up(height * ratio)))


def resample_weights(src_size: int, dst_size: int) -> np.ndarray:
    """
    Build the (dst_size, src_size) weight matrix for one axis.

    Each output sample is a normalized Gaussian-weighted sum of the source
    samples within the filter support. When downscaling, the kernel is
    stretched by the scale ratio so every source pixel contributes.
    """
    weights = np.zeros((dst_size, src_size), dtype=np.float64)
    ratio = src_size / dst_size
    sratio = max(ratio, 1.0)
    support = GAUSSIAN_SUPPORT * sratio

    for out in range(dst_size):
        center = (out + 0.5) * ratio
        left = min(max(int(math.floor(center - support)), 0), src_size - 1)
        right = min(max(int(math.ceil(center + support)), left + 1), src_size)

        taps = np.arange(left, right, dtype=np.float64)
        w = _gaussian((taps - (center - 0.5)) / sratio, GAUSSIAN_SIGMA)
        total = w.sum()
        if total != 0:
            w /= total
        weights[out, left:right] = w

    return weights


def resize_gaussian(image: Image.Image, width: int, height: int) -> Image.Image:
    """Resize an image to exactly ``width`` x ``height`` with the Gaussian filter."""
    rgba = image.convert('RGBA')
    src_width, src_height = rgba.size

    if 0 in (src_width, src_height, width, height):
        return Image.new('RGBA', (width, height))

    arr = np.asarray(rgba, dtype=np.float64)

    vertical = resample_weights(src_height, height)
    horizontal = resample_weights(src_width, width)

    # Rows first, then columns; channels are filtered independently
    out = np.einsum('yh,hwc->ywc', vertical, arr)
    out = np.einsum('xw,ywc->yxc', horizontal, out)

    out = np.clip(np.floor(out + 0.5), 0, 255).astype(np.uint8)
    return Image.fromarray(out)


def normalize_img(image: Image.Image, bound: int,
                  preserve_aspect: bool = False) -> Image.Image:
    """
    Returns a downscaled RGBA image.

    Args:
        image: Decoded image
        bound: Maximum bound used for the width
        preserve_aspect: Fit inside ``bound`` x ``bound`` keeping the aspect ratio

    Returns:
        RGBA image. Images narrower than ``bound`` still pass through the
        filter at their own size.
    """
    width, height = image.size
    new_width, new_height = target_dimensions(width, height, bound, preserve_aspect)
    logger.debug("Normalizing %dx%d to %dx%d", width, height, new_width, new_height)
    return resize_gaussian(image, new_width, new_height)
