"""Trait groupings used by the female ear rule.

``EAR_VISIBLE_HAIRSTYLES`` leave the ear exposed even though they cover the
head. ``EAR_COVERING_HAIR`` hides the ear; a female wearing none of either
set (and no hoodie) is treated as bald, which also exposes the ear.
"""

from pyrsistent import pset
from pyrsistent.typing import PSet

from punks_remaster.types import TraitName

HOODIE: TraitName = "Hoodie"
BALD: TraitName = "Bald"

EAR_VISIBLE_HAIRSTYLES: PSet[TraitName] = pset(
    [
        "Mohawk",
        "Mohawk Dark",
        "Mohawk Thin",
        "Red Mohawk",
        "Bandana",
        "Headband",
        "Cap",
        "Knitted Cap",
        "Tiara",
        "Welding Goggles",
        "Blonde Bob",
        "Blonde Short",
        "Crazy Hair",
        "Messy Hair",
        "Orange Side",
        "Pigtails",
        "Stringy Hair",
        "Wild Blonde",
        "Wild White Hair",
        "Clown Hair Green",
    ]
)

EAR_COVERING_HAIR: PSet[TraitName] = pset(
    [
        # Hair
        "Dark Hair",
        "Frumpy Hair",
        "Half Shaved",
        "Pink With Hat",
        "Straight Hair",
        "Straight Hair Blonde",
        "Straight Hair Dark",
        "Wild Hair",
        "Purple Hair",
        # Headgear
        "Pilot Helmet",
        "Tassle Hat",
        "Do-rag",
        "Beanie",
        "Cap Forward",
        "Cowboy Hat",
        "Fedora",
        "Police Cap",
        "Top Hat",
    ]
)
