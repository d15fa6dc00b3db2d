#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Terminal Output
==============================================
Writes token sequences to a text stream, optionally colored with ANSI
escape codes, and plays animations frame by frame.
"""

import logging
import sys
import threading
from typing import List, Optional, Sequence, TextIO, Tuple

import numpy as np

from asciiframe.frames import AsciiFrame
from asciiframe.tokenizer import AsciiToken, tokens_to_text

logger = logging.getLogger(__name__)


# =============================================================================
# 256-COLOR PALETTE
# =============================================================================

SYSTEM_COLORS = [
    (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
    (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
    (128, 128, 128), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
]
CUBE_LEVELS = [0, 95, 135, 175, 215, 255]


def _build_palette() -> np.ndarray:
    palette = list(SYSTEM_COLORS)
    # 6x6x6 color cube, indices 16-231
    for r in CUBE_LEVELS:
        for g in CUBE_LEVELS:
            for b in CUBE_LEVELS:
                palette.append((r, g, b))
    # Grayscale ramp, indices 232-255
    for i in range(24):
        level = 8 + 10 * i
        palette.append((level, level, level))
    return np.array(palette, dtype=np.int64)


ANSI_256_PALETTE = _build_palette()
# Cube and grayscale win ties over the system colors
_SEARCH_ORDER = np.concatenate([np.arange(16, 256), np.arange(0, 16)])


def rgb_to_ansi256(r: int, g: int, b: int) -> int:
    """Index of the nearest 256-color palette entry (squared RGB distance)."""
    candidates = ANSI_256_PALETTE[_SEARCH_ORDER]
    distance = ((candidates - np.array([r, g, b], dtype=np.int64)) ** 2).sum(axis=1)
    return int(_SEARCH_ORDER[int(np.argmin(distance))])


# =============================================================================
# ANSI COLOR OUTPUT
# =============================================================================

class AnsiColorFormatter:
    """ANSI escape codes for terminal output."""

    RESET = "\033[0m"
    CLEAR_SCREEN = "\033[2J\033[H"

    @staticmethod
    def rgb_to_ansi_24bit(r: int, g: int, b: int) -> str:
        """Convert RGB to a 24-bit ANSI foreground code (true color)."""
        return f"\033[38;2;{r};{g};{b}m"

    @staticmethod
    def rgb_to_ansi_256(r: int, g: int, b: int) -> str:
        """Convert RGB to the nearest 256-color ANSI foreground code."""
        return f"\033[38;5;{rgb_to_ansi256(r, g, b)}m"

    @classmethod
    def color_code(cls, rgb: Tuple[int, int, int], truecolor: bool) -> str:
        r, g, b = rgb
        if truecolor:
            return cls.rgb_to_ansi_24bit(r, g, b)
        return cls.rgb_to_ansi_256(r, g, b)


# =============================================================================
# TERMINAL RENDERER
# =============================================================================

class TerminalRenderer:
    """Render token sequences and animations to a text stream."""

    def __init__(self, colorize: bool = False,
                 truecolor: bool = False,
                 stream: Optional[TextIO] = None,
                 stop_event: Optional[threading.Event] = None):
        """
        Args:
            colorize: Color each character with its source pixel
            truecolor: Use 24-bit colors instead of the 256-color palette
            stream: Output stream (stdout if None)
            stop_event: Set to abort animation playback
        """
        self.colorize = colorize
        self.truecolor = truecolor
        self.stream = stream if stream is not None else sys.stdout
        self.stop_event = stop_event or threading.Event()

    def write_color_output(self, tokens: Sequence[AsciiToken]) -> None:
        """Write tokens one at a time, setting the color before each character."""
        for token in tokens:
            if token.is_line_break:
                self.stream.write(token.token)
                continue
            self.stream.write(AnsiColorFormatter.color_code(token.rgb, self.truecolor))
            self.stream.write(token.token)
        self.stream.write(AnsiColorFormatter.RESET)
        self.stream.flush()

    def print_img(self, tokens: Sequence[AsciiToken]) -> None:
        """Print one token sequence."""
        if self.colorize:
            self.write_color_output(tokens)
        else:
            self.stream.write(tokens_to_text(tokens) + "\n")
            self.stream.flush()

    def clear(self) -> None:
        self.stream.write(AnsiColorFormatter.CLEAR_SCREEN)

    def print_gif(self, frames: List[AsciiFrame]) -> int:
        """
        Play frames in order, sleeping each frame's delay after drawing it.

        The delay is the frame's (numerator, denominator) pair divided with
        truncation, so some ratios give no pause at all. There is no catch-up
        for slow rendering.

        Returns:
            Number of frames drawn
        """
        drawn = 0
        try:
            for frame in frames:
                if self.stop_event.is_set():
                    break
                self.clear()
                self.print_img(frame.frame_tokens)
                drawn += 1
                if self.stop_event.wait(frame.delay_ms / 1000.0):
                    break
        except KeyboardInterrupt:
            self.stop_event.set()
            self.stream.write("\nAnimation stopped.\n")
            self.stream.flush()

        if drawn < len(frames):
            logger.info("Playback stopped after %d of %d frames", drawn, len(frames))
        return drawn
