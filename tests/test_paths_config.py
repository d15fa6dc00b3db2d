from __future__ import annotations

import os

import pytest

from asciiframe.config import ConversionConfig, supports_truecolor
from asciiframe.constants import CharacterSet
from asciiframe.errors import ErrorKind, InvalidPathError, UnsupportedFormatError
from asciiframe.paths import (
    build_output_file_name,
    check_format,
    get_file_extension,
    is_animated_format,
    is_supported_format,
)


@pytest.mark.parametrize("path,ext", [
    ("cat.png", "png"),
    ("photos/Cat.JPG", "jpg"),
    ("a.b/dance.gif", "gif"),
    ("notes.txt", "txt"),
    ("picture", None),
    (".hidden", None),
    ("trailing.", None),
])
def test_get_file_extension(path, ext) -> None:
    assert get_file_extension(path) == ext


def test_supported_formats() -> None:
    assert is_supported_format("a.jpg")
    assert is_supported_format("a.PNG")
    assert is_supported_format("a.gif")
    assert not is_supported_format("a.jpeg")
    assert not is_supported_format("a.bmp")
    assert is_animated_format("a.gif")
    assert not is_animated_format("a.png")


def test_check_format_errors() -> None:
    with pytest.raises(InvalidPathError) as excinfo:
        check_format("picture")
    assert excinfo.value.kind is ErrorKind.INVALID_PATH

    with pytest.raises(UnsupportedFormatError) as excinfo:
        check_format("picture.webp")
    assert excinfo.value.kind is ErrorKind.UNSUPPORTED_FORMAT
    assert excinfo.value.path == "picture.webp"


def test_build_output_file_name() -> None:
    assert build_output_file_name("cat.png") == "ascii_cat.png"
    assert build_output_file_name(os.path.join("pics", "dance.gif")) == os.path.join("pics", "ascii_dance.gif")


def test_ramp_priority() -> None:
    assert ConversionConfig().resolve_ramp() == list(CharacterSet.SIMPLE)
    assert ConversionConfig(detailed=True).resolve_ramp() == list(CharacterSet.DETAILED)
    assert ConversionConfig(detailed=True, mapping="ab").resolve_ramp() == ['a', 'b']


def test_custom_ramp_is_kept_verbatim() -> None:
    assert ConversionConfig(mapping=" a a").resolve_ramp() == [' ', 'a', ' ', 'a']


@pytest.mark.parametrize("kwargs", [{"bound": 0}, {"bound": -5}, {"cell_size": 0}, {"mapping": ""}])
def test_invalid_config(kwargs) -> None:
    with pytest.raises(ValueError):
        ConversionConfig(**kwargs)


def test_glyph_size() -> None:
    assert ConversionConfig().glyph_size == 18.0
    assert ConversionConfig(cell_size=8).glyph_size == 12.0
    assert ConversionConfig(font_size=9).glyph_size == 9


@pytest.mark.parametrize("value,expected", [
    ("truecolor", True),
    ("24bit", True),
    ("TrueColor", True),
    ("", False),
    ("256", False),
])
def test_truecolor_detection(monkeypatch, value, expected) -> None:
    monkeypatch.setenv("COLORTERM", value)
    assert supports_truecolor() is expected
    assert ConversionConfig().use_truecolor() is expected
    assert ConversionConfig(truecolor=not expected).use_truecolor() is (not expected)
