"""Immutable subject record.

A :class:`Subject` is one member of the collection as described by the
attribute data: its head family, gender, skin tone (humans only) and the
accessory traits it wears. Records are value objects; the compositor and the
rule engine never modify them.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from punks_remaster.errors import InvalidSubject
from punks_remaster.types import Gender, SkinTone, SubjectID, SubjectType, TraitName

MIN_SUBJECT_ID: SubjectID = 0
MAX_SUBJECT_ID: SubjectID = 9999


@dataclass(frozen=True)
class Subject:
    """One collection member.

    Attributes:
        id: Primary key in ``[MIN_SUBJECT_ID, MAX_SUBJECT_ID]``.
        type: Head family; decides which base sprite is drawn.
        gender: Selects the sprite table and the remaster rule set.
        skin_tone: Present iff ``type`` is human.
        accessories: Trait names in source order, no duplicates. Order matters
            for first-match lookups (e.g. which hairstyle reveals the ear).
    """

    id: SubjectID
    type: SubjectType
    gender: Gender
    skin_tone: Optional[SkinTone]
    accessories: Tuple[TraitName, ...] = ()

    def __post_init__(self) -> None:
        if not MIN_SUBJECT_ID <= self.id <= MAX_SUBJECT_ID:
            raise InvalidSubject(f"Subject id {self.id} out of range")
        if self.type.is_human and self.skin_tone is None:
            raise InvalidSubject(f"Human subject #{self.id} has no skin tone")
        if not self.type.is_human and self.skin_tone is not None:
            raise InvalidSubject(
                f"{self.type} subject #{self.id} cannot have a skin tone"
            )
        if len(set(self.accessories)) != len(self.accessories):
            raise InvalidSubject(f"Subject #{self.id} has duplicate accessories")

    @property
    def is_female(self) -> bool:
        return self.gender is Gender.FEMALE

    @property
    def is_male(self) -> bool:
        return self.gender is Gender.MALE

    def has(self, trait: TraitName) -> bool:
        return trait in self.accessories


def make_subject(
    id: SubjectID,
    type: str,
    gender: str,
    skin_tone: Optional[str] = None,
    accessories: Iterable[str] = (),
) -> Subject:
    """Build a :class:`Subject` from raw strings.

    Blank skin tones count as missing, accessory names are trimmed and
    de-duplicated keeping the first occurrence. Unknown enumeration values
    raise :class:`InvalidSubject`.
    """
    try:
        subject_type = SubjectType(type.strip())
        subject_gender = Gender(gender.strip())
        tone = SkinTone(skin_tone.strip()) if skin_tone and skin_tone.strip() else None
    except ValueError as e:
        raise InvalidSubject(f"Subject #{id}: {e}") from e

    seen: List[TraitName] = []
    for name in accessories:
        name = name.strip()
        if name and name not in seen:
            seen.append(name)

    return Subject(
        id=id,
        type=subject_type,
        gender=subject_gender,
        skin_tone=tone,
        accessories=tuple(seen),
    )
