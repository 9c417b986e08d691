"""Curated subjects demonstrating each correction."""

from dataclasses import dataclass
from typing import Tuple

from punks_remaster.types import SubjectID


@dataclass(frozen=True)
class TraitExample:
    subject_id: SubjectID
    name: str
    description: str


TRAIT_EXAMPLES: Tuple[TraitExample, ...] = (
    # Female ear corrections
    TraitExample(0, "Blonde Bob", "Ear shifted down 1px"),
    TraitExample(77, "Mohawk", "Ear shifted down 1px"),
    TraitExample(1672, "Wild Blonde", "Ear shifted down 1px"),
    TraitExample(2621, "Orange Side + Earring", "Ear and earring shifted down 1px"),
    TraitExample(395, "Blonde Short", "Ear shifted down 1px"),
    TraitExample(1214, "Pigtails", "Ear shifted down 1px"),
    TraitExample(2140, "Crazy Hair", "Ear shifted down 1px"),
    TraitExample(6089, "Clown Hair Green", "Ear shifted down 1px"),
    TraitExample(2066, "Bald Female", "Ear shifted down 1px"),
    TraitExample(3220, "Mohawk + Regular Shades", "Ear and shades shifted down 1px"),
    TraitExample(1, "Choker", "Choker centered (3 pixels)"),
    # Male corrections
    TraitExample(9, "Front Beard", "Beard pixels added at chin"),
    TraitExample(1189, "Front Beard Dark", "Beard pixels added at chin"),
    TraitExample(5, "Small Shades", "Nose bridge pixels added"),
)
