from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from asciiframe.constants import CharacterSet
from asciiframe.errors import DecodeError
from asciiframe.frames import AsciiFrame, convert_gif_to_ascii_tokens, decode_frames

SIMPLE = list(CharacterSet.SIMPLE)


def test_decode_frames_keeps_order_and_delays(gif_path: Path) -> None:
    frames = decode_frames(str(gif_path))
    assert len(frames) == 3
    assert [delay for _, delay in frames] == [(30, 1)] * 3
    assert all(image.mode == "RGBA" for image, _ in frames)


def test_animated_scenario(gif_path: Path) -> None:
    frames = convert_gif_to_ascii_tokens(decode_frames(str(gif_path)), SIMPLE, 20)
    assert len(frames) == 3
    assert [frame.delay_ms for frame in frames] == [30, 30, 30]
    # black, red, white
    assert [frame.text[0] for frame in frames] == [' ', '-', '@']
    for frame in frames:
        assert len(frame.frame_tokens) == 10 * 21
        assert frame.frame_tokens[0].parent_img_width == 20


def test_frames_are_normalized_independently() -> None:
    decoded = [
        (Image.new("RGBA", (40, 40), (255, 255, 255, 255)), (100, 1)),
        (Image.new("RGBA", (10, 6), (0, 0, 0, 255)), (50, 1)),
    ]
    frames = convert_gif_to_ascii_tokens(decoded, SIMPLE, 20)
    assert frames[0].frame_tokens[0].parent_img_width == 20
    assert frames[1].frame_tokens[0].parent_img_width == 10
    assert frames[1].text == (" " * 10 + "\n") * 3


def test_delay_is_kept_as_a_ratio() -> None:
    frame = AsciiFrame(frame_tokens=[], delay=(100, 3))
    assert frame.delay == (100, 3)
    assert frame.delay_ms == 33


def test_delay_truncation_can_reach_zero() -> None:
    # Truncating division drops sub-millisecond delays entirely
    assert AsciiFrame(frame_tokens=[], delay=(1, 3)).delay_ms == 0


def test_exact_delay_keeps_the_fraction() -> None:
    frame = AsciiFrame(frame_tokens=[], delay=(1, 3))
    assert frame.exact_delay_ms == pytest.approx(1 / 3)
    assert AsciiFrame(frame_tokens=[], delay=(125, 2)).exact_delay_ms == 62.5


def test_corrupt_gif_fails_as_a_whole(tmp_path: Path) -> None:
    path = tmp_path / "broken.gif"
    path.write_bytes(b"this is not an image at all")
    with pytest.raises(DecodeError):
        decode_frames(str(path))


def test_missing_gif_fails(tmp_path: Path) -> None:
    with pytest.raises(DecodeError):
        decode_frames(str(tmp_path / "missing.gif"))
