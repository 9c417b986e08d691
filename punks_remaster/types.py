"""Common type aliases and enumerations.

Enumeration values match the strings used by the attribute data and by the
remaster records, so ``SubjectType("Human")`` or ``RemasterType("frontBeard")``
round-trip without any lookup table.
"""

from enum import StrEnum
from typing import Tuple


SubjectID = int
SpriteIndex = int
TraitName = str

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]
Point = Tuple[int, int]


class SubjectType(StrEnum):
    """Base head family. Only humans carry a skin tone."""

    HUMAN = "Human"
    ZOMBIE = "Zombie"
    APE = "Ape"
    ALIEN = "Alien"

    @property
    def is_human(self) -> bool:
        return self is SubjectType.HUMAN


class Gender(StrEnum):
    MALE = "Male"
    FEMALE = "Female"


class SkinTone(StrEnum):
    LIGHT = "Light"
    MEDIUM = "Medium"
    DARK = "Dark"
    ALBINO = "Albino"


class LayerCategory(StrEnum):
    """Draw-order buckets for accessories (see ``catalog.layers.LAYER_ORDER``)."""

    BASE = "base"
    CHEEKS = "cheeks"
    BLEMISH = "blemish"
    HAIR = "hair"
    BEARD = "beard"
    EYES = "eyes"
    EYEWEAR = "eyewear"
    NOSE = "nose"
    MOUTH = "mouth"
    MOUTHPROP = "mouthprop"
    EARRING = "earring"
    HEADGEAR = "headgear"
    NECK = "neck"


class RemasterType(StrEnum):
    """Kinds of pixel correction the rule engine can emit."""

    EAR = "ear"
    SHADES = "shades"
    EARRING = "earring"
    CHOKER = "choker"
    FRONT_BEARD = "frontBeard"
    FRONT_BEARD_DARK = "frontBeardDark"
    SMALL_SHADES = "smallShades"


class SheetId(StrEnum):
    """Source sheets held by the sprite store."""

    ACCESSORY = "accessory"
    COMPOSITE = "composite"
