#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Tokenizer
========================================
Maps normalized pixels onto a character ramp.

Only even rows are sampled. Characters are roughly twice as tall as they
are wide, so skipping every other row keeps the rendered aspect ratio close
to the source image.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
from PIL import Image

from asciiframe.constants import LINE_BREAK, LINE_BREAK_RGB, MAX_VALUE


@dataclass(frozen=True)
class AsciiToken:
    """A single output character with the color of the pixel it came from."""
    token: str                                  # Ramp character or line break
    rgb: Tuple[int, int, int]                   # Original pixel color
    parent_img_width: int                       # Normalized image width
    parent_img_height: int                      # Normalized image height

    @property
    def is_line_break(self) -> bool:
        return self.token == LINE_BREAK


def pixel_intensity(r: int, g: int, b: int, a: int) -> int:
    """
    Intensity of one RGBA pixel in [0, 255].

    Each channel is divided by three before summing, so the result can differ
    from ``(r + g + b) // 3``. Fully transparent pixels have intensity 0.
    """
    if a == 0:
        return 0
    return r // 3 + g // 3 + b // 3


def asciify_intensity(intensity: int, ascii_table: Sequence[str]) -> str:
    """Returns the ramp character for a pixel intensity."""
    index = int((intensity / MAX_VALUE) * (len(ascii_table) - 1))
    return ascii_table[index]


def convert_img_to_ascii_tokens(image: Image.Image,
                                ascii_table: Sequence[str]) -> List[AsciiToken]:
    """
    Convert an image's pixel values into AsciiTokens.

    Args:
        image: Normalized image (converted to RGBA)
        ascii_table: Ramp characters, lightest first

    Returns:
        Row-major tokens with a line break token after every sampled row
    """
    width, height = image.size
    if width == 0 or height == 0:
        return []

    arr = np.asarray(image.convert('RGBA'), dtype=np.int64)
    line_break = AsciiToken(LINE_BREAK, LINE_BREAK_RGB, width, height)

    tokens: List[AsciiToken] = []
    for y in range(0, height, 2):
        for x in range(width):
            r, g, b, a = (int(c) for c in arr[y, x])
            token = asciify_intensity(pixel_intensity(r, g, b, a), ascii_table)
            tokens.append(AsciiToken(token, (r, g, b), width, height))
        tokens.append(line_break)

    return tokens


def tokens_to_text(tokens: Sequence[AsciiToken]) -> str:
    """Join token characters, line breaks included."""
    return ''.join(token.token for token in tokens)
