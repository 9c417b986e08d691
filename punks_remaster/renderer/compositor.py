"""Subject compositor.

:func:`composite_subject` rebuilds a subject's 24x24 tile from the accessory
sheet: background, base head, accessories in layer order, and (optionally)
the remaster corrections derived by :mod:`punks_remaster.remaster`.

Corrections land in three places:

* on the base head before it is drawn (eye shadow, ear relocation),
* on individual accessory tiles before they are drawn (shifts, added pixels),
* on the finished canvas (ear seam refill, centered choker).

Everything the compositor needs is passed in through a :class:`RenderContext`;
there is no module-level sheet cache.
"""

from dataclasses import dataclass, field
import logging
from typing import Optional, Sequence, Tuple

from PIL import Image
from pyrsistent.typing import PMap

from punks_remaster.catalog.colors import (
    BACKGROUND,
    BLACK,
    FRONT_BEARD_COLOR,
    FRONT_BEARD_DARK_COLOR,
    SKIN_COLORS,
    SkinColor,
)
from punks_remaster.catalog.fills import (
    TRAIT_FILL_SPECS,
    FillSpec,
    MultiPointFill,
    ear_fill_spec,
    shift_pixel_for,
)
from punks_remaster.catalog.sprites import base_sprite_key, sprite_table
from punks_remaster.errors import UnknownTrait
from punks_remaster.remaster import (
    CHOKER,
    EARRING,
    FRONT_BEARD,
    FRONT_BEARD_DARK,
    REGULAR_SHADES,
    SMALL_SHADES,
    RemasterRecord,
    derive_remasters,
    find_remaster,
)
from punks_remaster.renderer.sprite_store import SpriteStore
from punks_remaster.subject import Subject
from punks_remaster.types import RGB, Point, RemasterType, SkinTone, SpriteIndex, TraitName
from punks_remaster.utils.image import (
    draw_over,
    fill_pixels,
    new_tile,
    relocate_ear_region,
    shift_down,
    shift_single_pixel,
)
from punks_remaster.utils.layers import sort_accessories

logger = logging.getLogger(__name__)

EYE_SHADOW_POINTS: Tuple[Point, ...] = ((10, 13), (15, 13))
EXTRA_EAR_SKIN_POINTS: Tuple[Point, ...] = ((7, 15), (7, 16))
SMALL_SHADES_POINTS: Tuple[Point, ...] = ((11, 12), (11, 13))
FRONT_BEARD_POINTS: Tuple[Point, ...] = ((10, 20), (14, 20))
CHOKER_POINTS: Tuple[Point, ...] = ((9, 22), (10, 22), (11, 22))

# Row the ear seam refill is anchored to on the finished canvas
EAR_SEAM_ROW = 11


@dataclass(frozen=True)
class RenderContext:
    """Inputs shared by every composite call.

    Attributes:
        sprites: Loaded sheets.
        skin_colors: Skin and eye-shadow colors per skin tone.
        fill_specs: Ear fill specification per trait.
    """

    sprites: SpriteStore
    skin_colors: PMap[SkinTone, SkinColor] = field(default=SKIN_COLORS)
    fill_specs: PMap[TraitName, FillSpec] = field(default=TRAIT_FILL_SPECS)

    def skin_for(self, subject: Subject) -> Optional[SkinColor]:
        if subject.skin_tone is None:
            return None
        return self.skin_colors.get(subject.skin_tone)


def _skin_rgb(skin: Optional[SkinColor]) -> Optional[RGB]:
    return skin.rgb if skin is not None else None


def base_tile(context: RenderContext, subject: Subject) -> Image.Image:
    """Extract the base head. A missing table entry propagates as ``UnknownTrait``."""
    key = base_sprite_key(subject.type, subject.skin_tone)
    index = sprite_table(subject.gender).get(key)
    if index is None:
        raise UnknownTrait(key, str(subject.gender))
    return context.sprites.extract_sprite(index)


def _relocate_ear(
    context: RenderContext,
    base: Image.Image,
    ear: RemasterRecord,
    skin: Optional[SkinColor],
) -> Image.Image:
    spec = ear_fill_spec(ear.trait, context.fill_specs).resolve(_skin_rgb(skin))
    base = relocate_ear_region(base, spec)
    if isinstance(spec, MultiPointFill) and spec.extra_ear_skin and skin is not None:
        base = fill_pixels(base, EXTRA_EAR_SKIN_POINTS, skin.rgb)
    return base


def draw_order(
    subject: Subject, remasters: Sequence[RemasterRecord]
) -> Tuple[TraitName, ...]:
    """Accessories in layer order, minus the choker when it is redrawn as a correction."""
    skip_choker = find_remaster(remasters, RemasterType.CHOKER) is not None
    return tuple(
        trait
        for trait in sort_accessories(subject.accessories)
        if not (skip_choker and trait == CHOKER)
    )


def _patch_accessory(
    context: RenderContext,
    tile: Image.Image,
    trait: TraitName,
    remasters: Sequence[RemasterRecord],
    ear: Optional[RemasterRecord],
) -> Image.Image:
    def active(remaster_type: RemasterType) -> bool:
        return find_remaster(remasters, remaster_type) is not None

    if trait == REGULAR_SHADES and active(RemasterType.SHADES):
        tile = shift_down(tile, 1)
    if trait == EARRING and active(RemasterType.EARRING):
        tile = shift_down(tile, 1)
    if trait == SMALL_SHADES and active(RemasterType.SMALL_SHADES):
        tile = fill_pixels(tile, SMALL_SHADES_POINTS, BLACK)
    if trait == FRONT_BEARD and active(RemasterType.FRONT_BEARD):
        tile = fill_pixels(tile, FRONT_BEARD_POINTS, FRONT_BEARD_COLOR)
    if trait == FRONT_BEARD_DARK and active(RemasterType.FRONT_BEARD_DARK):
        tile = fill_pixels(tile, FRONT_BEARD_POINTS, FRONT_BEARD_DARK_COLOR)

    shift = shift_pixel_for(trait, context.fill_specs)
    if shift is not None and ear is not None:
        tile = shift_single_pixel(tile, *shift)
    return tile


def _refill_ear_seam(
    context: RenderContext,
    canvas: Image.Image,
    ear: RemasterRecord,
    skin: Optional[SkinColor],
) -> Image.Image:
    """Repaint offset fill entries that later layers drew over."""
    spec = context.fill_specs.get(ear.trait)
    if not isinstance(spec, MultiPointFill):
        return canvas
    for entry in spec.entries:
        if entry.y_offset == 0:
            continue
        resolved = entry.resolve(_skin_rgb(skin))
        canvas = fill_pixels(
            canvas, [(entry.x, EAR_SEAM_ROW + entry.y_offset)], resolved.rgb
        )
    return canvas


def composite_subject(
    context: RenderContext, subject: Subject, apply_remasters: bool = False
) -> Image.Image:
    """Render ``subject`` as a fresh 24x24 RGBA tile.

    Arguments:
        context: Sheets and color catalogs to draw with.
        subject: Record to render.
        apply_remasters: Apply the corrections from :func:`derive_remasters`.
            With ``False`` the result reproduces the uncorrected artwork,
            apart from the female eye-shadow fix which is always applied.

    Accessories without a sprite for the subject's gender are logged and
    skipped.
    """
    table = sprite_table(subject.gender)
    skin = context.skin_for(subject)
    canvas = new_tile(BACKGROUND)

    base = base_tile(context, subject)
    if subject.is_female and skin is not None:
        base = fill_pixels(base, EYE_SHADOW_POINTS, skin.shadow)

    remasters = derive_remasters(subject) if apply_remasters else ()
    ear = find_remaster(remasters, RemasterType.EAR)
    if remasters:
        logger.debug(
            "Subject #%d remasters: %s",
            subject.id,
            ", ".join(r.type for r in remasters),
        )

    if ear is not None and subject.is_female:
        base = _relocate_ear(context, base, ear, skin)

    canvas = draw_over(canvas, base)

    for trait in draw_order(subject, remasters):
        index: Optional[SpriteIndex] = table.get(trait)
        if index is None:
            logger.warning(
                "No sprite found for %r (gender %s), skipping", trait, subject.gender
            )
            continue
        tile = context.sprites.extract_sprite(index)
        if apply_remasters:
            tile = _patch_accessory(context, tile, trait, remasters, ear)
        canvas = draw_over(canvas, tile)

    if ear is not None:
        canvas = _refill_ear_seam(context, canvas, ear, skin)

    if find_remaster(remasters, RemasterType.CHOKER) is not None:
        canvas = fill_pixels(canvas, CHOKER_POINTS, BLACK)

    return canvas


class Compositor:
    """Convenience wrapper binding a :class:`RenderContext`."""

    context: RenderContext

    def __init__(self, context: RenderContext):
        self.context = context

    @classmethod
    def from_store(cls, sprites: SpriteStore) -> "Compositor":
        return cls(RenderContext(sprites=sprites))

    def remasters(self, subject: Subject) -> Tuple[RemasterRecord, ...]:
        return derive_remasters(subject)

    def render(self, subject: Subject, apply_remasters: bool = False) -> Image.Image:
        return composite_subject(self.context, subject, apply_remasters)

    def render_original(self, subject: Subject) -> Image.Image:
        """Pre-rendered tile from the composite sheet."""
        return self.context.sprites.extract_subject(subject.id)
