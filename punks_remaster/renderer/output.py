"""Output sizing and encoding.

The compositor always produces native 24x24 tiles. Callers pick an output
size, snap it with :func:`snap_output_size` so every source pixel maps to a
whole block, upscale with :func:`punks_remaster.utils.image.scale`, and encode
with :func:`to_png_bytes`.
"""

import io
from typing import Optional

from PIL import Image

from punks_remaster.catalog.sprites import SPRITE_SIZE
from punks_remaster.utils.image import scale

MIN_OUTPUT_SIZE = SPRITE_SIZE
MAX_OUTPUT_SIZE = 1024


def snap_output_size(
    requested: Optional[int],
    min_size: int = MIN_OUTPUT_SIZE,
    max_size: int = MAX_OUTPUT_SIZE,
    unit: int = SPRITE_SIZE,
) -> int:
    """Clamp ``requested`` to ``[min_size, max_size]`` and round to a multiple of ``unit``.

    A missing or zero request means the native size. Rounding goes to the
    nearest multiple with halves rounding up, so a clamped ``max_size`` that
    is not itself a multiple may come out slightly larger (1024 -> 1032).
    """
    size = requested or unit
    size = max(min_size, min(max_size, size))
    return ((size * 2 + unit) // (unit * 2)) * unit


def scale_to(tile: Image.Image, requested: Optional[int]) -> Image.Image:
    return scale(tile, snap_output_size(requested))


def to_png_bytes(image: Image.Image) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()
