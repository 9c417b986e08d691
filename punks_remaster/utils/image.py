"""Pixel patch primitives over square RGBA tiles.

Every function here is pure: the input image is converted to a NumPy array
copy, patched, and handed back as a new ``PIL.Image``. Cached sprite tiles can
therefore be passed in without risk of being altered. Coordinates are
tile-local ``(x, y)`` with the origin at the top-left corner.
"""

from typing import Iterable, List, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from punks_remaster.catalog.colors import BACKGROUND, is_background
from punks_remaster.catalog.fills import FillSpec, MultiPointFill
from punks_remaster.catalog.sprites import SPRITE_SIZE
from punks_remaster.errors import OutOfRange
from punks_remaster.types import RGB, RGBA, Point

UInt8Array = npt.NDArray[np.uint8]

OPAQUE = 255

# Ear window on the base head: columns 6-7, rows 11-14. Column 7 only holds
# ear pixels on rows 12-14.
EAR_COLUMNS: Tuple[int, ...] = (6, 7)
EAR_ROWS: Tuple[int, ...] = (11, 12, 13, 14)
EAR_COLUMN_7_ROWS: Tuple[int, ...] = (12, 13, 14)


def to_array(tile: Image.Image) -> UInt8Array:
    """Copy ``tile`` into an ``(h, w, 4)`` uint8 array."""
    if tile.mode != "RGBA":
        tile = tile.convert("RGBA")
    return np.array(tile, dtype=np.uint8)


def from_array(arr: UInt8Array) -> Image.Image:
    return Image.fromarray(arr.astype(np.uint8))


def new_tile(color: RGB = BACKGROUND, size: int = SPRITE_SIZE) -> Image.Image:
    """Opaque square tile filled with ``color``."""
    return Image.new("RGBA", (size, size), (*color, OPAQUE))


def _check_point(arr: UInt8Array, x: int, y: int) -> None:
    height, width = arr.shape[:2]
    if not (0 <= x < width and 0 <= y < height):
        raise OutOfRange(f"Pixel ({x}, {y}) outside {width}x{height} tile")


def get_pixel(tile: Image.Image, x: int, y: int) -> RGBA:
    arr = to_array(tile)
    _check_point(arr, x, y)
    r, g, b, a = (int(c) for c in arr[y, x])
    return (r, g, b, a)


def shift_down(tile: Image.Image, n: int) -> Image.Image:
    """Move every row down by ``n``; the top ``n`` rows become transparent."""
    if n < 0:
        raise ValueError(f"Shift must be non-negative, got {n}")
    arr = to_array(tile)
    height = arr.shape[0]
    out: UInt8Array = np.zeros_like(arr)
    if n < height:
        out[n:] = arr[: height - n]
    return from_array(out)


def shift_single_pixel(tile: Image.Image, x: int, y: int) -> Image.Image:
    """Move the pixel at ``(x, y)`` one row down, leaving transparency behind."""
    arr = to_array(tile)
    _check_point(arr, x, y)
    _check_point(arr, x, y + 1)
    pixel = arr[y, x].copy()
    arr[y, x] = 0
    arr[y + 1, x] = pixel
    return from_array(arr)


def fill_pixel(tile: Image.Image, x: int, y: int, color: RGB) -> Image.Image:
    """Set ``(x, y)`` to ``color`` with full opacity."""
    return fill_pixels(tile, [(x, y)], color)


def fill_pixels(tile: Image.Image, points: Iterable[Point], color: RGB) -> Image.Image:
    arr = to_array(tile)
    for x, y in points:
        _check_point(arr, x, y)
        arr[y, x] = (*color, OPAQUE)
    return from_array(arr)


def _ear_pixels(arr: UInt8Array) -> Tuple[List[Tuple[int, int, UInt8Array]], int]:
    """Collect ear pixels in the ear window and the topmost ear row of column 6."""
    height = arr.shape[0]
    found: List[Tuple[int, int, UInt8Array]] = []
    top_row = height
    for x in EAR_COLUMNS:
        for y in EAR_ROWS:
            pixel = arr[y, x]
            if pixel[3] == 0:
                continue
            r, g, b = (int(c) for c in pixel[:3])
            if is_background((r, g, b)):
                continue
            if x == 7 and y not in EAR_COLUMN_7_ROWS:
                continue
            found.append((x, y, pixel.copy()))
            if x == 6 and y < top_row:
                top_row = y
    return found, top_row


def relocate_ear_region(tile: Image.Image, fill_spec: FillSpec) -> Image.Image:
    """Push the ear on a base head down one row and repaint the seam.

    Ear pixels are erased to opaque background, redrawn one row lower, and
    the fill spec is applied relative to the topmost ear row of column 6. If
    column 6 holds no ear pixel the fill step is skipped.
    """
    arr = to_array(tile)
    height = arr.shape[0]
    ear, top_row = _ear_pixels(arr)

    for x, y, _ in ear:
        arr[y, x] = (*BACKGROUND, OPAQUE)
    for x, y, pixel in ear:
        if y + 1 < height:
            arr[y + 1, x] = pixel

    if top_row < height and not fill_spec.no_fill:
        if isinstance(fill_spec, MultiPointFill):
            for entry in fill_spec.entries:
                fy = top_row + entry.y_offset
                _check_point(arr, entry.x, fy)
                arr[fy, entry.x] = (*entry.rgb, OPAQUE)
        else:
            _check_point(arr, fill_spec.x, top_row)
            arr[top_row, fill_spec.x] = (*fill_spec.color, OPAQUE)

    return from_array(arr)


def draw_over(canvas: Image.Image, tile: Image.Image) -> Image.Image:
    """Alpha-composite ``tile`` over ``canvas`` at the origin (new image)."""
    if tile.mode != "RGBA":
        tile = tile.convert("RGBA")
    return Image.alpha_composite(canvas, tile)


def scale(tile: Image.Image, target_size: int) -> Image.Image:
    """Nearest-neighbour upscale of a square tile to ``target_size``.

    Results are pixel exact when ``target_size`` is a multiple of the tile
    size; no smoothing is ever applied.
    """
    if target_size <= 0:
        raise ValueError(f"Target size must be positive, got {target_size}")
    if tile.size == (target_size, target_size):
        return tile.copy()
    return tile.resize((target_size, target_size), Image.Resampling.NEAREST)
