"""Accessory draw order.

Accessories are drawn bucket by bucket following :data:`LAYER_ORDER`; a trait
absent from :data:`TRAIT_TO_LAYER` sorts after every known bucket.
"""

from typing import Dict, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from punks_remaster.types import LayerCategory, TraitName

LAYER_ORDER: Tuple[LayerCategory, ...] = (
    LayerCategory.BASE,
    LayerCategory.CHEEKS,
    LayerCategory.BLEMISH,
    LayerCategory.HAIR,
    LayerCategory.BEARD,
    LayerCategory.EYES,
    LayerCategory.EYEWEAR,
    LayerCategory.NOSE,
    LayerCategory.MOUTH,
    LayerCategory.MOUTHPROP,
    LayerCategory.EARRING,
    LayerCategory.HEADGEAR,
    LayerCategory.NECK,
)

LAYER_RANK: PMap[LayerCategory, int] = pmap(
    {layer: rank for rank, layer in enumerate(LAYER_ORDER)}
)

UNKNOWN_LAYER_RANK = len(LAYER_ORDER)


def _group(layer: LayerCategory, *traits: TraitName) -> Dict[TraitName, LayerCategory]:
    return {trait: layer for trait in traits}


TRAIT_TO_LAYER: PMap[TraitName, LayerCategory] = pmap(
    {
        **_group(LayerCategory.CHEEKS, "Rosy Cheeks"),
        **_group(LayerCategory.BLEMISH, "Mole", "Spots"),
        **_group(
            LayerCategory.HAIR,
            "Blonde Bob",
            "Blonde Short",
            "Clown Hair Green",
            "Crazy Hair",
            "Dark Hair",
            "Frumpy Hair",
            "Half Shaved",
            "Messy Hair",
            "Mohawk",
            "Mohawk Dark",
            "Mohawk Thin",
            "Orange Side",
            "Pigtails",
            "Pink With Hat",
            "Red Mohawk",
            "Straight Hair",
            "Straight Hair Blonde",
            "Straight Hair Dark",
            "Stringy Hair",
            "Wild Blonde",
            "Wild Hair",
            "Wild White Hair",
            "Peak Spike",
            "Purple Hair",
            "Shaved Head",
            "Vampire Hair",
        ),
        **_group(
            LayerCategory.BEARD,
            "Front Beard",
            "Front Beard Dark",
            "Big Beard",
            "Chinstrap",
            "Goat",
            "Handlebars",
            "Luxurious Beard",
            "Mustache",
            "Muttonchops",
            "Normal Beard",
            "Normal Beard Black",
            "Shadow Beard",
        ),
        **_group(
            LayerCategory.EYES,
            "Blue Eye Shadow",
            "Green Eye Shadow",
            "Purple Eye Shadow",
            "Clown Eyes Blue",
            "Clown Eyes Green",
        ),
        **_group(
            LayerCategory.EYEWEAR,
            "Regular Shades",
            "Big Shades",
            "Classic Shades",
            "Nerd Glasses",
            "Horned Rim Glasses",
            "3D Glasses",
            "VR",
            "Welding Goggles",
            "Small Shades",
            "Eye Mask",
            "Eye Patch",
        ),
        **_group(LayerCategory.NOSE, "Clown Nose"),
        **_group(
            LayerCategory.MOUTH,
            "Buck Teeth",
            "Frown",
            "Smile",
            "Hot Lipstick",
            "Black Lipstick",
            "Purple Lipstick",
        ),
        **_group(
            LayerCategory.MOUTHPROP, "Cigarette", "Pipe", "Vape", "Medical Mask"
        ),
        **_group(LayerCategory.EARRING, "Earring"),
        **_group(
            LayerCategory.HEADGEAR,
            "Bandana",
            "Headband",
            "Cap",
            "Knitted Cap",
            "Pilot Helmet",
            "Tassle Hat",
            "Tiara",
            "Do-rag",
            "Beanie",
            "Cap Forward",
            "Cowboy Hat",
            "Fedora",
            "Police Cap",
            "Top Hat",
            "Hoodie",
        ),
        **_group(LayerCategory.NECK, "Choker", "Gold Chain", "Silver Chain"),
    }
)


def layer_rank(trait: TraitName) -> int:
    """Position of the trait's bucket in :data:`LAYER_ORDER` (unknown sorts last)."""
    layer = TRAIT_TO_LAYER.get(trait)
    if layer is None:
        return UNKNOWN_LAYER_RANK
    return LAYER_RANK[layer]
