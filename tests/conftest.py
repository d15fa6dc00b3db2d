from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence, Tuple

import numpy as np
import pytest
from PIL import Image

BLACK = (0, 0, 0)
RED = (255, 0, 0)
WHITE = (255, 255, 255)


def pixels_image(rows: Sequence[Sequence[Tuple[int, int, int, int]]]) -> Image.Image:
    """Build an RGBA image from rows of RGBA tuples."""
    return Image.fromarray(np.array(rows, dtype=np.uint8))


@pytest.fixture
def solid_png(tmp_path: Path) -> Callable[..., Path]:
    def _make(size=(100, 50), color=WHITE, name="solid.png") -> Path:
        path = tmp_path / name
        Image.new("RGB", size, color).save(path)
        return path

    return _make


@pytest.fixture
def gif_path(tmp_path: Path) -> Path:
    """Three 40x30 frames (black, red, white), 30ms each."""
    path = tmp_path / "anim.gif"
    frames = [Image.new("RGB", (40, 30), color) for color in (BLACK, RED, WHITE)]
    frames[0].save(path, save_all=True, append_images=frames[1:], duration=30, loop=0)
    return path
