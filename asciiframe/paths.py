"""Path helpers: extension lookup, format checks and output naming."""

import os
from typing import Optional

from asciiframe.constants import ANIMATED_FORMATS, OUTPUT_PREFIX, SUPPORTED_FORMATS
from asciiframe.errors import InvalidPathError, UnsupportedFormatError


def get_file_extension(path: str) -> Optional[str]:
    """Return the lower-cased extension of ``path`` without the dot, if any."""
    _, ext = os.path.splitext(os.path.basename(path))
    if not ext or ext == '.':
        return None
    return ext[1:].lower()


def is_supported_format(path: str) -> bool:
    return get_file_extension(path) in SUPPORTED_FORMATS


def is_animated_format(path: str) -> bool:
    return get_file_extension(path) in ANIMATED_FORMATS


def check_format(path: str) -> str:
    """
    Validate the extension of ``path`` before any decode attempt.

    Returns:
        The extension, lower-cased

    Raises:
        InvalidPathError: no extension could be extracted
        UnsupportedFormatError: the extension is not jpg, png or gif
    """
    ext = get_file_extension(path)
    if ext is None:
        raise InvalidPathError(path, "Could not read file extension")
    if ext not in SUPPORTED_FORMATS:
        raise UnsupportedFormatError(path, "File format not supported for file")
    return ext


def build_output_file_name(path: str) -> str:
    """Prefix the base file name with ``ascii_``, keeping directory and extension."""
    check_format(path)
    directory, base = os.path.split(path)
    return os.path.join(directory, OUTPUT_PREFIX + base)
