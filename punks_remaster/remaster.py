"""Remaster rule engine.

:func:`derive_remasters` answers *"which pixel corrections apply to this
subject?"* It is a pure function of the subject's gender and accessories; no
image data is involved. The compositor consumes the resulting records and
looks them up by type, so the order of emission is part of the contract:

* Female: ``ear``, ``shades``, ``earring``, ``choker``.
* Male: ``frontBeard``, ``frontBeardDark``, ``smallShades``.

Rules are gated on gender only. A non-human subject whose gender is male and
which carries a beard or small shades trait receives the same correction as a
human would.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from punks_remaster.catalog.traits import (
    BALD,
    EAR_COVERING_HAIR,
    EAR_VISIBLE_HAIRSTYLES,
    HOODIE,
)
from punks_remaster.subject import Subject
from punks_remaster.types import RemasterType, TraitName

REGULAR_SHADES: TraitName = "Regular Shades"
SMALL_SHADES: TraitName = "Small Shades"
EARRING: TraitName = "Earring"
CHOKER: TraitName = "Choker"
FRONT_BEARD: TraitName = "Front Beard"
FRONT_BEARD_DARK: TraitName = "Front Beard Dark"

REMASTER_DESCRIPTIONS: PMap[RemasterType, str] = pmap(
    {
        RemasterType.EAR: "Ear shifted down 1px",
        RemasterType.SHADES: "Regular Shades shifted down 1px",
        RemasterType.EARRING: "Earring shifted down 1px",
        RemasterType.CHOKER: "Choker replaced with 3 centered pixels",
        RemasterType.FRONT_BEARD: "Added beard pixels at chin",
        RemasterType.FRONT_BEARD_DARK: "Added beard pixels at chin",
        RemasterType.SMALL_SHADES: "Added nose bridge pixels",
    }
)


@dataclass(frozen=True)
class RemasterRecord:
    """One correction applicable to a subject.

    Attributes:
        type: Kind of correction; the compositor dispatches on it.
        trait: Trait that triggered it (``"Bald"`` for a bare female head).
        description: Human readable summary for listings.
    """

    type: RemasterType
    trait: TraitName
    description: str = ""


def _record(remaster_type: RemasterType, trait: TraitName) -> RemasterRecord:
    return RemasterRecord(
        type=remaster_type,
        trait=trait,
        description=REMASTER_DESCRIPTIONS[remaster_type],
    )


def ear_visible_trait(subject: Subject) -> Optional[TraitName]:
    """First accessory from the ear-visible hairstyles, if any."""
    return next(
        (a for a in subject.accessories if a in EAR_VISIBLE_HAIRSTYLES), None
    )


def is_ear_visible(subject: Subject) -> bool:
    """Ear shows through an ear-visible style, or nothing covers it at all."""
    if ear_visible_trait(subject) is not None:
        return True
    has_covering_hair = any(a in EAR_COVERING_HAIR for a in subject.accessories)
    return not has_covering_hair and not subject.has(HOODIE)


def female_remasters(subject: Subject) -> List[RemasterRecord]:
    records: List[RemasterRecord] = []
    if is_ear_visible(subject):
        records.append(_record(RemasterType.EAR, ear_visible_trait(subject) or BALD))
        if subject.has(REGULAR_SHADES):
            records.append(_record(RemasterType.SHADES, REGULAR_SHADES))
        if subject.has(EARRING):
            records.append(_record(RemasterType.EARRING, EARRING))
    if subject.has(CHOKER):
        records.append(_record(RemasterType.CHOKER, CHOKER))
    return records


def male_remasters(subject: Subject) -> List[RemasterRecord]:
    records: List[RemasterRecord] = []
    if subject.has(FRONT_BEARD):
        records.append(_record(RemasterType.FRONT_BEARD, FRONT_BEARD))
    if subject.has(FRONT_BEARD_DARK):
        records.append(_record(RemasterType.FRONT_BEARD_DARK, FRONT_BEARD_DARK))
    if subject.has(SMALL_SHADES):
        records.append(_record(RemasterType.SMALL_SHADES, SMALL_SHADES))
    return records


RemasterRule = Callable[[Subject], List[RemasterRecord]]


def derive_remasters(subject: Subject) -> Tuple[RemasterRecord, ...]:
    """Ordered corrections applicable to ``subject`` (at most one per type)."""
    rule: RemasterRule = female_remasters if subject.is_female else male_remasters
    return tuple(rule(subject))


def has_remasters(subject: Subject) -> bool:
    return len(derive_remasters(subject)) > 0


def find_remaster(
    records: Sequence[RemasterRecord], remaster_type: RemasterType
) -> Optional[RemasterRecord]:
    """First record of ``remaster_type`` or ``None``."""
    return next((r for r in records if r.type is remaster_type), None)
