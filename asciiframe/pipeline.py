#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Pipeline
=======================================
Reads one input file, converts it into tokens and hands the result to a
renderer.

Every conversion produces exactly one of:

- ``StillImage``: one token sequence (jpg, png)
- ``AnimatedImage``: one token sequence per frame (gif)
- ``ConversionFailure``: the path, the error kind and a readable reason

Failures are returned rather than raised so that a batch of files can keep
going after one of them fails.
"""

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional, TextIO, Union

from PIL import Image, UnidentifiedImageError

from asciiframe.config import ConversionConfig
from asciiframe.constants import ANIMATED_FORMATS
from asciiframe.errors import AsciiFrameError, DecodeError, ErrorKind, WriteError
from asciiframe.frames import AsciiFrame, convert_gif_to_ascii_tokens, decode_frames
from asciiframe.normalize import normalize_img
from asciiframe.paths import build_output_file_name, check_format
from asciiframe.raster import RasterRenderer
from asciiframe.terminal import TerminalRenderer
from asciiframe.tokenizer import AsciiToken, convert_img_to_ascii_tokens, tokens_to_text

logger = logging.getLogger(__name__)


# =============================================================================
# CONVERTED FILE VARIANTS
# =============================================================================

@dataclass(frozen=True)
class StillImage:
    path: str
    tokens: List[AsciiToken]


@dataclass(frozen=True)
class AnimatedImage:
    path: str
    frames: List[AsciiFrame]


@dataclass(frozen=True)
class ConversionFailure:
    path: str
    kind: ErrorKind
    reason: str

    @classmethod
    def from_exception(cls, error: AsciiFrameError) -> 'ConversionFailure':
        return cls(path=error.path, kind=error.kind, reason=error.reason)

    def __str__(self) -> str:
        return f"{self.path}: {self.kind.value} ({self.reason})"


ConvertedFile = Union[StillImage, AnimatedImage, ConversionFailure]


# =============================================================================
# CONVERSION
# =============================================================================

def decode_image(path: str) -> Image.Image:
    """Decode a still image into RGBA."""
    try:
        with Image.open(path) as img:
            img.load()
            return img.convert('RGBA')
    except FileNotFoundError as e:
        raise DecodeError(path, "File not found") from e
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise DecodeError(path, f"Could not decode image ({e})") from e


def process_file(path: str, config: Optional[ConversionConfig] = None) -> ConvertedFile:
    """
    Read a file and convert its image data into tokens.

    The extension is checked before anything is decoded.

    Args:
        path: Image file path
        config: Conversion settings (defaults if None)

    Returns:
        StillImage, AnimatedImage or ConversionFailure
    """
    config = config or ConversionConfig()
    ascii_table = config.resolve_ramp()

    try:
        ext = check_format(path)
        if ext in ANIMATED_FORMATS:
            decoded = decode_frames(path)
            frames = convert_gif_to_ascii_tokens(decoded, ascii_table, config.bound,
                                                 config.preserve_aspect)
            return AnimatedImage(path=path, frames=frames)

        image = normalize_img(decode_image(path), config.bound, config.preserve_aspect)
        return StillImage(path=path, tokens=convert_img_to_ascii_tokens(image, ascii_table))
    except AsciiFrameError as e:
        logger.debug("Conversion of %s failed: %s", path, e)
        return ConversionFailure.from_exception(e)


def _check_variant(converted: ConvertedFile) -> None:
    if not isinstance(converted, (StillImage, AnimatedImage, ConversionFailure)):
        raise TypeError(f"Unknown conversion result: {converted!r}")


# =============================================================================
# ENTRY POINTS
# =============================================================================

def render_to_terminal(path: str,
                       config: Optional[ConversionConfig] = None,
                       stream: Optional[TextIO] = None,
                       stop_event: Optional[threading.Event] = None) -> ConvertedFile:
    """
    Convert a file and print it to the terminal.

    Animations are played once, frame by frame.

    Returns:
        The converted file, or the ConversionFailure that stopped it
    """
    config = config or ConversionConfig()
    converted = process_file(path, config)
    _check_variant(converted)

    renderer = TerminalRenderer(
        colorize=config.colorize,
        truecolor=config.use_truecolor(),
        stream=stream,
        stop_event=stop_event,
    )

    if isinstance(converted, StillImage):
        renderer.print_img(converted.tokens)
    elif isinstance(converted, AnimatedImage):
        renderer.print_gif(converted.frames)
    return converted


def render_to_file(path: str,
                   config: Optional[ConversionConfig] = None,
                   output_path: Optional[str] = None) -> ConvertedFile:
    """
    Convert a file and save it as a raster image.

    The output path is taken from the argument, then ``config.output``, then
    derived from the input name (``ascii_`` prefix, same extension). Animated
    input is always written as a GIF.

    Returns:
        The converted file, or the ConversionFailure that stopped it
    """
    config = config or ConversionConfig()
    converted = process_file(path, config)
    _check_variant(converted)
    if isinstance(converted, ConversionFailure):
        return converted

    renderer = RasterRenderer(
        colorize=config.colorize,
        cell_size=config.cell_size,
        font_size=config.glyph_size,
        font_path=config.font_path,
    )

    try:
        target = output_path or config.output or build_output_file_name(path)
        if isinstance(converted, StillImage):
            renderer.save_img(converted.tokens, target)
        else:
            renderer.save_gif(converted.frames, target)
    except AsciiFrameError as e:
        logger.debug("Saving %s failed: %s", path, e)
        return ConversionFailure(path=path, kind=e.kind, reason=str(e))

    print(f"Saved to {target}")
    return converted


def render_to_text_file(path: str,
                        text_path: str,
                        config: Optional[ConversionConfig] = None) -> ConvertedFile:
    """
    Convert a file and write the plain characters to a text file.

    Animation frames are separated by a blank line.
    """
    config = config or ConversionConfig()
    converted = process_file(path, config)
    _check_variant(converted)

    if isinstance(converted, StillImage):
        text = tokens_to_text(converted.tokens)
    elif isinstance(converted, AnimatedImage):
        text = "\n".join(frame.text for frame in converted.frames)
    else:
        return converted

    try:
        with open(text_path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        error = WriteError(text_path, f"Could not write text file ({e})")
        return ConversionFailure(path=path, kind=error.kind, reason=str(error))

    print(f"Saved to {text_path}")
    return converted
