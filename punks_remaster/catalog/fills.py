"""Fill specifications for the ear correction.

When the ear is pushed down one row, the pixels it leaves behind must be
repainted in whatever color the hairstyle or headgear would have shown there.
A :data:`FillSpec` is either a single point painted at the top ear row or a
list of entries positioned relative to it. Entries flagged
``use_skin_color`` take the subject's skin RGB at render time.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from pyrsistent import pmap
from pyrsistent.typing import PMap

from punks_remaster.catalog.colors import BACKGROUND, BLACK
from punks_remaster.types import RGB, Point, TraitName

BLONDE: RGB = (255, 246, 142)
CRAZY_RED: RGB = (226, 38, 38)
CLOWN_GREEN: RGB = (21, 112, 4)


@dataclass(frozen=True)
class FillEntry:
    """One relative fill.

    Attributes:
        x: Tile column.
        y_offset: Rows below the top ear row (may be negative).
        color: Explicit RGB; replaced at render time when ``use_skin_color`` is set.
        use_skin_color: Paint with the subject's skin RGB instead.
    """

    x: int
    y_offset: int = 0
    color: Optional[RGB] = None
    use_skin_color: bool = False

    def resolve(self, skin: Optional[RGB]) -> "FillEntry":
        """Return a copy with the skin color substituted.

        Without a known skin the entry resolves to black.
        """
        if self.use_skin_color:
            return replace(self, color=skin if skin is not None else BLACK)
        return self

    @property
    def rgb(self) -> RGB:
        return self.color if self.color is not None else BLACK


@dataclass(frozen=True)
class SinglePointFill:
    """Paint ``color`` at ``(x, top_ear_row)``."""

    color: RGB = BLACK
    x: int = 7
    no_fill: bool = False

    def resolve(self, skin: Optional[RGB]) -> "SinglePointFill":
        return self


@dataclass(frozen=True)
class MultiPointFill:
    """Paint every entry relative to the top ear row.

    Attributes:
        entries: Relative fills, applied in order.
        extra_ear_skin: Also paint skin at (7, 15) and (7, 16) of the base.
        shift_pixel: Pixel of the hairstyle sprite to move down one row
            whenever an ear correction is active.
        no_fill: Skip the fill step of the ear relocation.
    """

    entries: Tuple[FillEntry, ...]
    extra_ear_skin: bool = False
    shift_pixel: Optional[Point] = None
    no_fill: bool = False

    def resolve(self, skin: Optional[RGB]) -> "MultiPointFill":
        return replace(self, entries=tuple(e.resolve(skin) for e in self.entries))


FillSpec = Union[SinglePointFill, MultiPointFill]

DEFAULT_EAR_FILL: FillSpec = SinglePointFill(color=BLACK, x=7)


TRAIT_FILL_SPECS: PMap[TraitName, FillSpec] = pmap(
    {
        "Headband": MultiPointFill(
            entries=(
                FillEntry(x=7, y_offset=0, color=BLACK),
                FillEntry(x=7, y_offset=2, use_skin_color=True),
                FillEntry(x=7, y_offset=3, use_skin_color=True),
            )
        ),
        "Blonde Bob": MultiPointFill(
            entries=(
                FillEntry(x=7, y_offset=0, color=BLONDE),
                FillEntry(x=7, y_offset=2, use_skin_color=True),
                FillEntry(x=7, y_offset=3, use_skin_color=True),
            ),
            extra_ear_skin=True,
        ),
        "Blonde Short": MultiPointFill(
            entries=(
                FillEntry(x=7, color=BLACK),
                FillEntry(x=7, y_offset=1, color=BLONDE),
                FillEntry(x=7, y_offset=2, use_skin_color=True),
                FillEntry(x=6, y_offset=3, color=BLONDE),
                FillEntry(x=6, y_offset=4, color=BLACK),
                FillEntry(x=7, y_offset=4, color=BLONDE),
                FillEntry(x=6, y_offset=5, color=BACKGROUND),
                FillEntry(x=7, y_offset=5, color=BLACK),
            ),
            extra_ear_skin=True,
            shift_pixel=(7, 14),
        ),
        "Crazy Hair": MultiPointFill(
            entries=(
                FillEntry(x=6, color=CRAZY_RED),
                FillEntry(x=7, color=BLACK),
                FillEntry(x=7, y_offset=-1, color=CRAZY_RED),
            )
        ),
        "Orange Side": MultiPointFill(
            entries=(
                FillEntry(x=6, color=BACKGROUND),
                FillEntry(x=6, y_offset=4, color=BACKGROUND),
            )
        ),
        "Wild Blonde": MultiPointFill(
            entries=(
                FillEntry(x=6, color=BLONDE),
                FillEntry(x=7, color=BLONDE),
            )
        ),
        "Clown Hair Green": MultiPointFill(
            entries=(
                FillEntry(x=6, color=CLOWN_GREEN),
                FillEntry(x=7, color=BLACK),
                FillEntry(x=7, y_offset=-1, color=CLOWN_GREEN),
            )
        ),
    }
)


def ear_fill_spec(
    trait: TraitName, specs: PMap[TraitName, FillSpec] = TRAIT_FILL_SPECS
) -> FillSpec:
    """Fill spec for the trait that revealed the ear, or the black single point."""
    return specs.get(trait, DEFAULT_EAR_FILL)


def shift_pixel_for(
    trait: TraitName, specs: PMap[TraitName, FillSpec] = TRAIT_FILL_SPECS
) -> Optional[Point]:
    spec = specs.get(trait)
    if isinstance(spec, MultiPointFill):
        return spec.shift_pixel
    return None
