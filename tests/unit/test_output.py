from io import BytesIO

import pytest
from PIL import Image

from punks_remaster.renderer.output import scale_to, snap_output_size, to_png_bytes
from tests.test_utils import tile_with


@pytest.mark.parametrize(
    "requested, expected",
    [
        (None, 24),
        (0, 24),
        (10, 24),
        (24, 24),
        (35, 24),
        (36, 48),
        (100, 96),
        (480, 480),
        (1008, 1008),
        # 1024 is not a multiple of 24; the nearest one lies just above it
        (1024, 1032),
        (5000, 1032),
    ],
)
def test_snap_output_size(requested, expected: int) -> None:
    assert snap_output_size(requested) == expected


def test_snap_output_size_custom_bounds() -> None:
    assert snap_output_size(500, min_size=48, max_size=240) == 240
    assert snap_output_size(1, min_size=48, max_size=240) == 48


def test_snapped_sizes_are_multiples_of_tile() -> None:
    for requested in range(0, 1100, 7):
        size = snap_output_size(requested)
        assert size % 24 == 0
        assert 24 <= size <= 1032


def test_scale_to() -> None:
    tile = tile_with({(0, 0): (1, 2, 3, 255)})
    assert scale_to(tile, 50).size == (48, 48)
    assert scale_to(tile, None).size == (24, 24)


def test_to_png_bytes() -> None:
    tile = tile_with({(5, 5): (9, 8, 7, 255)})
    data = to_png_bytes(tile)
    assert data.startswith(b"\x89PNG\r\n\x1a\n")
    decoded = Image.open(BytesIO(data))
    assert decoded.size == (24, 24)
    assert decoded.convert("RGBA").getpixel((5, 5)) == (9, 8, 7, 255)
