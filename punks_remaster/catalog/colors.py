"""Fixed colors: background teal, skin tones and correction colors."""

from dataclasses import dataclass

from pyrsistent import pmap
from pyrsistent.typing import PMap

from punks_remaster.types import RGB, SkinTone

BACKGROUND: RGB = (99, 133, 150)
BLACK: RGB = (0, 0, 0)

# Per-channel distance below which a pixel counts as background
BACKGROUND_TOLERANCE = 10

FRONT_BEARD_COLOR: RGB = (168, 103, 55)
FRONT_BEARD_DARK_COLOR: RGB = (53, 31, 12)


@dataclass(frozen=True)
class SkinColor:
    """Skin RGB plus the darker tone used under the eyes."""

    rgb: RGB
    shadow: RGB


SKIN_COLORS: PMap[SkinTone, SkinColor] = pmap(
    {
        SkinTone.LIGHT: SkinColor(rgb=(219, 177, 128), shadow=(201, 175, 145)),
        SkinTone.MEDIUM: SkinColor(rgb=(174, 139, 97), shadow=(156, 124, 88)),
        SkinTone.DARK: SkinColor(rgb=(113, 63, 29), shadow=(96, 53, 24)),
        SkinTone.ALBINO: SkinColor(rgb=(234, 217, 217), shadow=(223, 206, 206)),
    }
)


def is_background(rgb: RGB) -> bool:
    return all(abs(c - b) < BACKGROUND_TOLERANCE for c, b in zip(rgb, BACKGROUND))
