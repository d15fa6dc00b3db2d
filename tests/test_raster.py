from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image, ImageSequence

from asciiframe.constants import CharacterSet
from asciiframe.errors import WriteError
from asciiframe.frames import AsciiFrame
from asciiframe.raster import RasterRenderer
from asciiframe.tokenizer import convert_img_to_ascii_tokens
from tests.conftest import pixels_image

SIMPLE = list(CharacterSet.SIMPLE)
RED = (255, 0, 0, 255)
WHITE = (255, 255, 255, 255)


def _tokens(color=RED, width=6, height=4, ramp=('#',)):
    return convert_img_to_ascii_tokens(pixels_image([[color] * width] * height), list(ramp))


def _colors(image: Image.Image) -> set:
    return {color for _, color in image.getcolors(maxcolors=image.width * image.height)}


def test_canvas_uses_full_image_height() -> None:
    renderer = RasterRenderer(cell_size=12)
    assert renderer.canvas_size(_tokens(width=6, height=4)) == (72, 48)
    assert renderer.canvas_size(_tokens(width=5, height=3)) == (60, 36)


def test_empty_sequence_fails_fast() -> None:
    with pytest.raises(ValueError):
        RasterRenderer().render_img([])
    with pytest.raises(ValueError):
        RasterRenderer().render_frames([])


def test_colorized_glyphs_use_source_color() -> None:
    image = RasterRenderer(colorize=True, cell_size=40).render_img(_tokens(color=RED, width=2, height=2))
    assert image.mode == "RGBA"
    assert (255, 0, 0, 255) in _colors(image)
    assert (255, 255, 255, 255) not in _colors(image)


def test_plain_glyphs_are_white() -> None:
    image = RasterRenderer(colorize=False, cell_size=40).render_img(_tokens(color=RED, width=2, height=2))
    assert (255, 255, 255, 255) in _colors(image)
    assert (255, 0, 0, 255) not in _colors(image)


def test_still_canvas_is_transparent() -> None:
    image = RasterRenderer().render_img(_tokens())
    assert image.getextrema()[3][0] == 0


def test_blank_tokens_draw_nothing() -> None:
    image = RasterRenderer().render_img(_tokens(ramp=(' ',)))
    assert image.getextrema()[3] == (0, 0)


def test_animation_canvases_are_opaque_black() -> None:
    frames = [AsciiFrame(_tokens(), (40, 1)), AsciiFrame(_tokens(ramp=(' ',)), (1, 3))]
    rendered = RasterRenderer().render_frames(frames)

    assert [delay for _, delay in rendered] == [40.0, pytest.approx(1 / 3)]
    for canvas, _ in rendered:
        assert canvas.size == (72, 48)
        assert canvas.getextrema()[3] == (255, 255)
    assert _colors(rendered[1][0]) == {(0, 0, 0, 255)}


def test_save_png(tmp_path: Path) -> None:
    out = tmp_path / "out.png"
    RasterRenderer(colorize=True).save_img(_tokens(), str(out))
    with Image.open(out) as saved:
        assert saved.size == (72, 48)
        assert saved.mode == "RGBA"


def test_save_jpg_drops_alpha(tmp_path: Path) -> None:
    out = tmp_path / "out.jpg"
    RasterRenderer().save_img(_tokens(), str(out))
    with Image.open(out) as saved:
        assert saved.mode == "RGB"


def test_save_gif(tmp_path: Path) -> None:
    out = tmp_path / "out.gif"
    frames = [
        AsciiFrame(_tokens(ramp=(' ',)), (30, 1)),
        AsciiFrame(_tokens(ramp=('#',)), (30, 1)),
        AsciiFrame(_tokens(ramp=('@',)), (30, 1)),
    ]
    RasterRenderer().save_gif(frames, str(out))
    with Image.open(out) as saved:
        assert saved.n_frames == 3
        assert saved.size == (72, 48)
        assert saved.info["duration"] == 30


def test_identical_frames_merge_and_keep_total_duration(tmp_path: Path) -> None:
    out = tmp_path / "out.gif"
    frames = [
        AsciiFrame(_tokens(ramp=(' ',)), (30, 1)),
        AsciiFrame(_tokens(ramp=(' ',)), (30, 1)),
        AsciiFrame(_tokens(ramp=('#',)), (30, 1)),
    ]
    RasterRenderer().save_gif(frames, str(out))
    with Image.open(out) as saved:
        durations = [frame.info["duration"] for frame in ImageSequence.Iterator(saved)]
    assert durations == [60, 30]


def test_unwritable_output(tmp_path: Path) -> None:
    with pytest.raises(WriteError):
        RasterRenderer().save_img(_tokens(), str(tmp_path / "missing" / "out.png"))
