"""Sprite sheet geometry and per-gender sprite index tables.

Female and male sprites live at different indices of the accessory sheet, so
each gender has its own table. Base heads are keyed ``base_<SkinTone>`` for
humans and ``base_<Type>`` for the non-human families (male table only).
"""

from typing import Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from punks_remaster.types import (
    Gender,
    SheetId,
    SkinTone,
    SpriteIndex,
    SubjectType,
    TraitName,
)

SPRITE_SIZE = 24

SHEET_COLUMNS: PMap[SheetId, int] = pmap(
    {
        SheetId.ACCESSORY: 25,
        SheetId.COMPOSITE: 100,
    }
)

FEMALE_SPRITE_IDS: PMap[TraitName, SpriteIndex] = pmap(
    {
        # Base heads
        "base_Light": 24,
        "base_Medium": 23,
        "base_Dark": 22,
        "base_Albino": 25,
        # Eyewear
        "Regular Shades": 317,
        "3D Glasses": 302,
        "Big Shades": 304,
        "Classic Shades": 306,
        "Eye Mask": 308,
        "Eye Patch": 310,
        "Horned Rim Glasses": 312,
        "Nerd Glasses": 314,
        "Small Shades": 319,
        "VR": 321,
        "Welding Goggles": 322,
        # Eyes
        "Blue Eye Shadow": 334,
        "Green Eye Shadow": 335,
        "Purple Eye Shadow": 337,
        "Clown Eyes Blue": 339,
        "Clown Eyes Green": 341,
        # Blemish
        "Mole": 345,
        "Rosy Cheeks": 347,
        "Spots": 349,
        "Earring": 357,
        # Mouth
        "Black Lipstick": 363,
        "Hot Lipstick": 364,
        "Purple Lipstick": 365,
        # Mouth props
        "Cigarette": 369,
        "Medical Mask": 371,
        "Pipe": 373,
        "Vape": 375,
        # Neck
        "Choker": 380,
        "Gold Chain": 382,
        "Silver Chain": 384,
        # Headgear
        "Bandana": 404,
        "Headband": 416,
        "Knitted Cap": 422,
        "Pilot Helmet": 423,
        "Tassle Hat": 426,
        "Tiara": 427,
        "Cap": 548,
        "Do-rag": 412,
        "Beanie": 406,
        "Cap Forward": 408,
        "Cowboy Hat": 410,
        "Fedora": 414,
        "Police Cap": 425,
        "Top Hat": 429,
        "Hoodie": 420,
        # Hair
        "Blonde Short": 633,
        "Crazy Hair": 635,
        "Dark Hair": 637,
        "Frumpy Hair": 639,
        "Half Shaved": 640,
        "Messy Hair": 642,
        "Mohawk": 644,
        "Mohawk Dark": 646,
        "Mohawk Thin": 648,
        "Orange Side": 649,
        "Pigtails": 651,
        "Pink With Hat": 652,
        "Red Mohawk": 655,
        "Straight Hair": 658,
        "Straight Hair Blonde": 659,
        "Straight Hair Dark": 660,
        "Stringy Hair": 662,
        "Wild Blonde": 664,
        "Wild Hair": 666,
        "Wild White Hair": 668,
        "Blonde Bob": 749,
        "Clown Hair Green": 810,
        "Purple Hair": 654,
        "Shaved Head": 657,
    }
)

MALE_SPRITE_IDS: PMap[TraitName, SpriteIndex] = pmap(
    {
        # Base heads
        "base_Light": 7,
        "base_Medium": 6,
        "base_Dark": 5,
        "base_Albino": 8,
        "base_Zombie": 30,
        "base_Ape": 35,
        "base_Alien": 41,
        # Eyewear
        "Regular Shades": 315,
        "3D Glasses": 301,
        "Big Shades": 303,
        "Classic Shades": 305,
        "Eye Mask": 307,
        "Eye Patch": 309,
        "Horned Rim Glasses": 311,
        "Nerd Glasses": 313,
        "Small Shades": 318,
        "VR": 320,
        # Eyes
        "Clown Eyes Blue": 338,
        "Clown Eyes Green": 340,
        # Blemish
        "Mole": 344,
        "Rosy Cheeks": 346,
        "Spots": 348,
        "Earring": 356,
        # Mouth
        "Buck Teeth": 360,
        "Frown": 361,
        "Smile": 362,
        # Mouth props
        "Cigarette": 368,
        "Medical Mask": 370,
        "Pipe": 372,
        "Vape": 374,
        # Neck
        "Gold Chain": 381,
        "Silver Chain": 383,
        # Beards
        "Big Beard": 387,
        "Chinstrap": 388,
        "Front Beard": 389,
        "Front Beard Dark": 390,
        "Goat": 391,
        "Handlebars": 392,
        "Luxurious Beard": 393,
        "Mustache": 396,
        "Muttonchops": 397,
        "Normal Beard": 398,
        "Normal Beard Black": 399,
        "Shadow Beard": 401,
        # Headgear
        "Bandana": 403,
        "Headband": 415,
        "Knitted Cap": 421,
        "Cap": 547,
        "Do-rag": 411,
        "Beanie": 405,
        "Cap Forward": 407,
        "Cowboy Hat": 409,
        "Fedora": 413,
        "Police Cap": 424,
        "Top Hat": 428,
        "Hoodie": 418,
        # Hair
        "Crazy Hair": 634,
        "Frumpy Hair": 638,
        "Messy Hair": 641,
        "Mohawk": 643,
        "Mohawk Dark": 645,
        "Mohawk Thin": 647,
        "Stringy Hair": 661,
        "Wild Hair": 665,
        "Peak Spike": 650,
        "Purple Hair": 653,
        "Shaved Head": 656,
        "Vampire Hair": 663,
        "Clown Hair Green": 795,
    }
)

SPRITE_TABLES: PMap[Gender, PMap[TraitName, SpriteIndex]] = pmap(
    {
        Gender.FEMALE: FEMALE_SPRITE_IDS,
        Gender.MALE: MALE_SPRITE_IDS,
    }
)


def sprite_table(gender: Gender) -> PMap[TraitName, SpriteIndex]:
    return SPRITE_TABLES[gender]


def base_sprite_key(subject_type: SubjectType, skin_tone: Optional[SkinTone]) -> str:
    """Table key of the base head: ``base_<Type>`` for non-humans, else ``base_<SkinTone>``."""
    if not subject_type.is_human:
        return f"base_{subject_type}"
    return f"base_{skin_tone}"
