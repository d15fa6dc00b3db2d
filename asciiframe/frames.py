#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Animation Frames
===============================================
Decodes every frame of an animated image and tokenizes it independently.
"""

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, List, Sequence, Tuple

from PIL import Image, ImageSequence, UnidentifiedImageError

from asciiframe.errors import DecodeError
from asciiframe.normalize import normalize_img
from asciiframe.tokenizer import AsciiToken, convert_img_to_ascii_tokens, tokens_to_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AsciiFrame:
    """Tokens for one animation frame and its delay in milliseconds."""
    frame_tokens: List[AsciiToken]
    delay: Tuple[int, int]                      # (numerator, denominator) ms

    @property
    def delay_ms(self) -> int:
        """Delay rounded down to whole milliseconds."""
        numerator, denominator = self.delay
        return numerator // denominator

    @property
    def exact_delay_ms(self) -> float:
        numerator, denominator = self.delay
        return numerator / denominator

    @property
    def text(self) -> str:
        return tokens_to_text(self.frame_tokens)


def frame_delay(frame: Image.Image) -> Tuple[int, int]:
    """Read a frame's delay as a reduced (numerator, denominator) pair in ms."""
    duration = Fraction(frame.info.get('duration', 0) or 0).limit_denominator()
    return duration.numerator, duration.denominator


def decode_frames(path: str) -> List[Tuple[Image.Image, Tuple[int, int]]]:
    """
    Decode every frame of an animated image.

    All frames are decoded before any is returned, so a corrupt frame fails
    the whole file.

    Raises:
        DecodeError: the container could not be decoded
    """
    try:
        with Image.open(path) as gif:
            frames = []
            for frame in ImageSequence.Iterator(gif):
                delay = frame_delay(frame)
                frames.append((frame.convert('RGBA'), delay))
    except (UnidentifiedImageError, OSError, ValueError, EOFError) as e:
        raise DecodeError(path, f"Error decoding gif ({e})") from e

    if not frames:
        raise DecodeError(path, "Gif contains no frames")
    return frames


def convert_gif_to_ascii_tokens(frames: Iterable[Tuple[Image.Image, Tuple[int, int]]],
                                ascii_table: Sequence[str],
                                bound: int,
                                preserve_aspect: bool = False) -> List[AsciiFrame]:
    """
    Returns one AsciiFrame per decoded frame, in source order.

    Args:
        frames: Decoded (image, delay) pairs
        ascii_table: Ramp characters, lightest first
        bound: Maximum bound used for the width
        preserve_aspect: Fit frames inside ``bound`` x ``bound``
    """
    tokenized_gif: List[AsciiFrame] = []

    for image, delay in frames:
        normalized = normalize_img(image, bound, preserve_aspect)
        tokens = convert_img_to_ascii_tokens(normalized, ascii_table)
        tokenized_gif.append(AsciiFrame(frame_tokens=tokens, delay=delay))

    logger.debug("Tokenized %d frames", len(tokenized_gif))
    return tokenized_gif
