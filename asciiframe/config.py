#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Configuration
============================================
One configuration object threaded through the pipeline and renderers.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

from asciiframe.constants import (
    CharacterSet,
    DEFAULT_BOUND,
    FONT_SCALE,
    SEGMENT_SIZE,
)


def supports_truecolor() -> bool:
    """Check whether the terminal advertises 24-bit color."""
    return os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit")


@dataclass
class ConversionConfig:
    """Configuration for converting and rendering one or more files."""

    # Size parameters
    bound: int = DEFAULT_BOUND               # Downscale bound
    preserve_aspect: bool = False            # Fit inside bound x bound

    # Ramp source
    mapping: Optional[str] = None            # Custom ramp, used verbatim
    detailed: bool = False                   # 70 char ramp instead of 10

    # Color settings
    colorize: bool = False                   # Colored terminal/raster output
    truecolor: Optional[bool] = None         # None reads COLORTERM

    # Output target
    output: Optional[str] = None             # Raster output path

    # Raster settings
    cell_size: int = SEGMENT_SIZE            # Pixels per character cell
    font_path: Optional[str] = None          # TrueType font for glyphs
    font_size: Optional[float] = None        # Defaults to cell_size * 1.5

    def __post_init__(self):
        if self.bound <= 0:
            raise ValueError(f"bound must be positive, got {self.bound}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.mapping is not None and len(self.mapping) == 0:
            raise ValueError("custom mapping must contain at least one character")

    def resolve_ramp(self) -> List[str]:
        """
        Resolve the character ramp.

        A custom mapping wins over the detail flag and is kept exactly as
        given, duplicates and whitespace included.
        """
        if self.mapping is not None:
            return list(self.mapping)
        return list(CharacterSet.get_preset(self.detailed))

    def use_truecolor(self) -> bool:
        if self.truecolor is not None:
            return self.truecolor
        return supports_truecolor()

    @property
    def glyph_size(self) -> float:
        if self.font_size is not None:
            return self.font_size
        return self.cell_size * FONT_SCALE
