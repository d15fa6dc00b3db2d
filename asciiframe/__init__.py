"""
asciiframe
==========
Convert jpg, png and gif images into ASCII art for the terminal, or back
into images and animated GIFs drawn from characters.
"""

from asciiframe.config import ConversionConfig, supports_truecolor
from asciiframe.constants import CharacterSet
from asciiframe.errors import (
    AsciiFrameError,
    DecodeError,
    EncodeError,
    ErrorKind,
    InvalidPathError,
    UnsupportedFormatError,
    WriteError,
)
from asciiframe.frames import AsciiFrame, convert_gif_to_ascii_tokens, decode_frames
from asciiframe.normalize import normalize_img
from asciiframe.pipeline import (
    AnimatedImage,
    ConversionFailure,
    ConvertedFile,
    StillImage,
    process_file,
    render_to_file,
    render_to_terminal,
    render_to_text_file,
)
from asciiframe.raster import RasterRenderer
from asciiframe.terminal import AnsiColorFormatter, TerminalRenderer, rgb_to_ansi256
from asciiframe.tokenizer import AsciiToken, asciify_intensity, convert_img_to_ascii_tokens

__version__ = "0.1.0"

__all__ = [
    # Configuration
    'ConversionConfig',
    'CharacterSet',
    'supports_truecolor',

    # Tokens
    'AsciiToken',
    'AsciiFrame',
    'normalize_img',
    'asciify_intensity',
    'convert_img_to_ascii_tokens',
    'convert_gif_to_ascii_tokens',
    'decode_frames',

    # Results
    'StillImage',
    'AnimatedImage',
    'ConversionFailure',
    'ConvertedFile',

    # Entry points
    'process_file',
    'render_to_terminal',
    'render_to_file',
    'render_to_text_file',

    # Renderers
    'TerminalRenderer',
    'RasterRenderer',
    'AnsiColorFormatter',
    'rgb_to_ansi256',

    # Errors
    'ErrorKind',
    'AsciiFrameError',
    'InvalidPathError',
    'UnsupportedFormatError',
    'DecodeError',
    'EncodeError',
    'WriteError',
]
