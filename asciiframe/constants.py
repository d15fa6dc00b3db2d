#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Constants
========================================
Character ramps and shared defaults.
"""

from dataclasses import dataclass
from typing import Tuple


# =============================================================================
# CHARACTER SETS
# =============================================================================

@dataclass(frozen=True)
class CharacterSet:
    """Built-in character ramps, ordered light to dense."""

    # Intensity 0 maps to the first entry, 255 to the last
    SIMPLE: str = " .:-=+*#%@"
    DETAILED: str = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

    @classmethod
    def get_preset(cls, detailed: bool) -> str:
        """Get the built-in ramp for the detail flag."""
        return cls.DETAILED if detailed else cls.SIMPLE


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_BOUND = 72                  # Default downscale bound
SEGMENT_SIZE = 12                   # Raster pixels per character cell
FONT_SCALE = 1.5                    # Font size relative to the cell
MAX_VALUE = 255.0                   # Maximum channel intensity

LINE_BREAK = '\n'
LINE_BREAK_RGB: Tuple[int, int, int] = (0, 0, 0)

SUPPORTED_FORMATS = ('jpg', 'png', 'gif')
ANIMATED_FORMATS = ('gif',)
OUTPUT_PREFIX = 'ascii_'

# Gaussian resampling kernel (sigma and support in source pixels)
GAUSSIAN_SIGMA = 0.5
GAUSSIAN_SUPPORT = 3.0

# Neutral glyph color for uncolored raster output
NEUTRAL_RGBA = (255, 255, 255, 255)
# Animated canvases are opaque black
ANIMATION_BACKGROUND = (0, 0, 0, 255)
STILL_BACKGROUND = (0, 0, 0, 0)

FONT_CANDIDATES = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/Library/Fonts/Menlo.ttc",
    "C:\\Windows\\Fonts\\consola.ttf",
)
