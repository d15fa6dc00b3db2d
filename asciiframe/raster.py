#!/usr/bin/env python3
"""
Image to ASCII Art Converter - Raster Output
============================================
Draws token sequences back onto an image canvas, one glyph per cell, and
encodes the result as a still image or an animated GIF.
"""

import logging
import os
from typing import List, Optional, Sequence, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from asciiframe.constants import (
    ANIMATION_BACKGROUND,
    FONT_CANDIDATES,
    FONT_SCALE,
    NEUTRAL_RGBA,
    SEGMENT_SIZE,
    STILL_BACKGROUND,
)
from asciiframe.errors import EncodeError, WriteError
from asciiframe.frames import AsciiFrame
from asciiframe.paths import get_file_extension
from asciiframe.tokenizer import AsciiToken

logger = logging.getLogger(__name__)

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def load_font(size: float, font_path: Optional[str] = None) -> Font:
    """
    Load a TrueType font for glyph drawing.

    An explicit ``font_path`` must load. Otherwise the first usable system
    monospace font is used, then Pillow's bundled default font.
    """
    if font_path is not None:
        return ImageFont.truetype(font_path, size)

    for candidate in FONT_CANDIDATES:
        if not os.path.exists(candidate):
            continue
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            logger.debug("Could not load font %s", candidate)
    return ImageFont.load_default(size=size)


class RasterRenderer:
    """Reconstruct images from ASCII tokens."""

    def __init__(self, colorize: bool = False,
                 cell_size: int = SEGMENT_SIZE,
                 font: Optional[Font] = None,
                 font_size: Optional[float] = None,
                 font_path: Optional[str] = None):
        """
        Args:
            colorize: Draw glyphs in their source color instead of white
            cell_size: Canvas pixels per character cell
            font: Font for glyphs (loaded lazily if None)
            font_size: Glyph size when loading the font
            font_path: TrueType font file to load
        """
        self.colorize = colorize
        self.cell_size = cell_size
        self.font_size = font_size if font_size is not None else cell_size * FONT_SCALE
        self.font_path = font_path
        self._font = font

    @property
    def font(self) -> Font:
        if self._font is None:
            self._font = load_font(self.font_size, self.font_path)
        return self._font

    def canvas_size(self, tokens: Sequence[AsciiToken]) -> Tuple[int, int]:
        """
        Canvas dimensions for a token sequence.

        The full image height is used although only every other row was
        tokenized; each text row is two cells tall.
        """
        if not tokens:
            raise ValueError("Cannot render an empty token sequence")
        first = tokens[0]
        return (first.parent_img_width * self.cell_size,
                first.parent_img_height * self.cell_size)

    def write_img(self, canvas: Image.Image, tokens: Sequence[AsciiToken]) -> None:
        """Draw every non line break token onto ``canvas``."""
        draw = ImageDraw.Draw(canvas)
        y_pointer = 0
        x_pointer = -self.cell_size

        for token in tokens:
            if token.is_line_break:
                y_pointer += self.cell_size * 2
                x_pointer = -self.cell_size
                continue

            x_pointer += self.cell_size

            if self.colorize:
                fill = (token.rgb[0], token.rgb[1], token.rgb[2], 255)
            else:
                fill = NEUTRAL_RGBA

            draw.text((x_pointer, y_pointer), token.token, fill=fill, font=self.font)

    def render_img(self, tokens: Sequence[AsciiToken]) -> Image.Image:
        """Draw a still image on a transparent canvas."""
        canvas = Image.new('RGBA', self.canvas_size(tokens), STILL_BACKGROUND)
        self.write_img(canvas, tokens)
        return canvas

    def render_frames(self, frames: Sequence[AsciiFrame]) -> List[Tuple[Image.Image, float]]:
        """Draw each frame on an opaque black canvas, paired with its exact delay in ms."""
        if not frames:
            raise ValueError("Cannot render an animation without frames")
        size = self.canvas_size(frames[0].frame_tokens)

        rendered = []
        for frame in frames:
            canvas = Image.new('RGBA', size, ANIMATION_BACKGROUND)
            self.write_img(canvas, frame.frame_tokens)
            rendered.append((canvas, frame.exact_delay_ms))
        return rendered

    def save_img(self, tokens: Sequence[AsciiToken], output_file_name: str) -> None:
        """
        Write an asciified image to a png or jpg file.

        Raises:
            WriteError: the file could not be written
            EncodeError: the image could not be encoded in that format
        """
        canvas = self.render_img(tokens)
        if get_file_extension(output_file_name) in ('jpg', 'jpeg'):
            # No alpha channel in JPEG
            canvas = canvas.convert('RGB')
        try:
            canvas.save(output_file_name)
        except OSError as e:
            raise WriteError(output_file_name, f"Could not write image ({e})") from e
        except (ValueError, KeyError) as e:
            raise EncodeError(output_file_name, f"Could not encode image ({e})") from e
        logger.info("Saved image %s", output_file_name)

    def save_gif(self, frames: Sequence[AsciiFrame], output_file_name: str) -> None:
        """
        Convert asciified frames into an animated GIF.

        Pillow folds consecutive identical canvases into a single GIF frame
        and adds their durations together, so the file can hold fewer frames
        than ``frames`` while the total playback time stays the same.

        Raises:
            WriteError: the file could not be written
            EncodeError: the frames could not be encoded
        """
        rendered = self.render_frames(frames)
        canvases = [canvas for canvas, _ in rendered]
        durations = [delay for _, delay in rendered]
        try:
            canvases[0].save(
                output_file_name,
                format='GIF',
                save_all=True,
                append_images=canvases[1:],
                duration=durations,
                loop=0,
            )
        except OSError as e:
            raise WriteError(output_file_name, f"Could not write gif ({e})") from e
        except (ValueError, KeyError) as e:
            raise EncodeError(output_file_name, f"Could not encode gif ({e})") from e
        logger.info("Saved %d frame gif %s", len(canvases), output_file_name)
