"""Error kinds raised while converting and rendering a single file."""

from enum import Enum


class ErrorKind(Enum):
    """Kind of per-file conversion failure."""
    UNSUPPORTED_FORMAT = "UnsupportedFormat"
    DECODE_FAILURE = "DecodeFailure"
    ENCODE_FAILURE = "EncodeFailure"
    WRITE_FAILURE = "WriteFailure"
    INVALID_PATH = "InvalidPath"


class AsciiFrameError(Exception):
    """Base class for failures tied to one input file."""

    kind: ErrorKind = ErrorKind.DECODE_FAILURE

    def __init__(self, path: str, reason: str):
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class InvalidPathError(AsciiFrameError):
    kind = ErrorKind.INVALID_PATH


class UnsupportedFormatError(AsciiFrameError):
    kind = ErrorKind.UNSUPPORTED_FORMAT


class DecodeError(AsciiFrameError):
    kind = ErrorKind.DECODE_FAILURE


class EncodeError(AsciiFrameError):
    kind = ErrorKind.ENCODE_FAILURE


class WriteError(AsciiFrameError):
    kind = ErrorKind.WRITE_FAILURE
