import pytest

from punks_remaster.catalog.layers import LAYER_ORDER, UNKNOWN_LAYER_RANK, layer_rank
from punks_remaster.types import LayerCategory
from punks_remaster.utils.layers import layer_of, sort_accessories


def test_layer_order_starts_with_base_and_ends_with_neck() -> None:
    assert LAYER_ORDER[0] is LayerCategory.BASE
    assert LAYER_ORDER[-1] is LayerCategory.NECK
    assert len(set(LAYER_ORDER)) == len(LAYER_ORDER)


@pytest.mark.parametrize(
    "trait, layer",
    [
        ("Mohawk", LayerCategory.HAIR),
        ("Front Beard", LayerCategory.BEARD),
        ("Small Shades", LayerCategory.EYEWEAR),
        ("Earring", LayerCategory.EARRING),
        ("Hoodie", LayerCategory.HEADGEAR),
        ("Choker", LayerCategory.NECK),
        ("Not A Trait", None),
    ],
)
def test_layer_of(trait: str, layer) -> None:
    assert layer_of(trait) == layer


def test_sort_accessories_by_layer() -> None:
    traits = ["Choker", "Cap", "Earring", "Mohawk", "Regular Shades", "Mole"]
    assert sort_accessories(traits) == (
        "Mole",
        "Mohawk",
        "Regular Shades",
        "Earring",
        "Cap",
        "Choker",
    )


def test_unknown_traits_sort_last_and_keep_order() -> None:
    assert layer_rank("Zzz") == UNKNOWN_LAYER_RANK
    traits = ["Zzz", "Choker", "Aaa", "Mohawk"]
    assert sort_accessories(traits) == ("Mohawk", "Choker", "Zzz", "Aaa")


def test_sort_is_stable_within_a_layer() -> None:
    assert sort_accessories(["Pipe", "Cigarette"]) == ("Pipe", "Cigarette")
    assert sort_accessories(["Cigarette", "Pipe"]) == ("Cigarette", "Pipe")
