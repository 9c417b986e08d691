"""Static trait catalog.

This package re-exports the fixed data the renderer and the rule engine are
driven by: sprite sheet geometry and the per-gender sprite tables
(:mod:`.sprites`), accessory draw order (:mod:`.layers`), the trait groupings
behind the ear rule (:mod:`.traits`), palette constants (:mod:`.colors`) and
the ear fill specifications (:mod:`.fills`).

Everything here is immutable (``pyrsistent`` maps/sets and frozen
dataclasses), so the catalog can be shared freely between threads.

Importing::

    from punks_remaster.catalog import SPRITE_SIZE, sprite_table
"""

from .colors import (
    BACKGROUND,
    BACKGROUND_TOLERANCE,
    BLACK,
    FRONT_BEARD_COLOR,
    FRONT_BEARD_DARK_COLOR,
    SKIN_COLORS,
    SkinColor,
    is_background,
)
from .fills import (
    DEFAULT_EAR_FILL,
    TRAIT_FILL_SPECS,
    FillEntry,
    FillSpec,
    MultiPointFill,
    SinglePointFill,
    ear_fill_spec,
    shift_pixel_for,
)
from .layers import LAYER_ORDER, TRAIT_TO_LAYER, UNKNOWN_LAYER_RANK, layer_rank
from .sprites import (
    FEMALE_SPRITE_IDS,
    MALE_SPRITE_IDS,
    SHEET_COLUMNS,
    SPRITE_SIZE,
    base_sprite_key,
    sprite_table,
)
from .traits import BALD, EAR_COVERING_HAIR, EAR_VISIBLE_HAIRSTYLES, HOODIE

__all__ = [
    "BACKGROUND",
    "BACKGROUND_TOLERANCE",
    "BALD",
    "BLACK",
    "DEFAULT_EAR_FILL",
    "EAR_COVERING_HAIR",
    "EAR_VISIBLE_HAIRSTYLES",
    "FEMALE_SPRITE_IDS",
    "FRONT_BEARD_COLOR",
    "FRONT_BEARD_DARK_COLOR",
    "FillEntry",
    "FillSpec",
    "HOODIE",
    "LAYER_ORDER",
    "MALE_SPRITE_IDS",
    "MultiPointFill",
    "SHEET_COLUMNS",
    "SKIN_COLORS",
    "SPRITE_SIZE",
    "SinglePointFill",
    "SkinColor",
    "TRAIT_FILL_SPECS",
    "TRAIT_TO_LAYER",
    "UNKNOWN_LAYER_RANK",
    "base_sprite_key",
    "ear_fill_spec",
    "is_background",
    "layer_rank",
    "shift_pixel_for",
    "sprite_table",
]
