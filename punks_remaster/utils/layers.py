"""Accessory draw-order helpers."""

from typing import Iterable, Optional, Tuple

from punks_remaster.catalog.layers import TRAIT_TO_LAYER, layer_rank
from punks_remaster.types import LayerCategory, TraitName


def layer_of(trait: TraitName) -> Optional[LayerCategory]:
    return TRAIT_TO_LAYER.get(trait)


def sort_accessories(accessories: Iterable[TraitName]) -> Tuple[TraitName, ...]:
    """Order accessories bottom layer first.

    The sort is stable: traits sharing a layer (or all unknown traits) keep
    their source order.
    """
    return tuple(sorted(accessories, key=layer_rank))
