"""Sheet loading.

Sheets are decoded with Pillow once per process and shared read-only
afterwards; every render extracts fresh tiles from them.
"""

from functools import lru_cache
import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from punks_remaster.config import RemasterConfig
from punks_remaster.renderer.compositor import RenderContext
from punks_remaster.renderer.sprite_store import SpriteStore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_sheet(path: PathLike) -> Image.Image:
    """Decode an image file into an RGBA sheet."""
    with Image.open(path) as img:
        sheet = img.convert("RGBA")
    logger.info("Loaded sheet %s (%dx%d)", path, sheet.width, sheet.height)
    return sheet


@lru_cache(maxsize=8)
def _cached_store(accessory_path: str, composite_path: Optional[str]) -> SpriteStore:
    return SpriteStore(
        accessory_sheet=load_sheet(accessory_path),
        composite_sheet=load_sheet(composite_path) if composite_path else None,
    )


def load_sprite_store(
    accessory_path: PathLike, composite_path: Optional[PathLike] = None
) -> SpriteStore:
    """Load (or reuse) a store for the given sheet files."""
    return _cached_store(
        str(accessory_path), str(composite_path) if composite_path else None
    )


def load_render_context(
    config: RemasterConfig, with_composite: bool = True
) -> RenderContext:
    composite = config.composite_path if with_composite else None
    return RenderContext(
        sprites=load_sprite_store(config.sprite_sheet_path, composite)
    )


def clear_cache() -> None:
    _cached_store.cache_clear()
