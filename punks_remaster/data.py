"""Attribute data loading.

The attribute CSV has one row per subject::

    id, type, gender, skin tone, count, accessories
    0, Human, Female, Medium, 3, Green Eye Shadow / Earring / Blonde Bob

Skin tone is blank for non-human types and accessories are separated by
``" / "``. Rows that do not match the layout, or that describe an invalid
subject, are logged and skipped rather than failing the whole load.
"""

import json
import logging
from pathlib import Path
import re
from typing import Dict, List, Optional, Union

from pyrsistent import pmap, pset
from pyrsistent.typing import PMap, PSet

from punks_remaster.errors import InvalidSubject
from punks_remaster.subject import Subject, make_subject
from punks_remaster.types import SubjectID

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

ACCESSORY_SEPARATOR = " / "

_ROW_PATTERN = re.compile(r"^(\d+),\s*(\w+),\s*(\w+),\s*(\w*),\s*(\d+),\s*(.*)$")


def split_accessories(field: str) -> List[str]:
    field = field.strip()
    if not field:
        return []
    return [a.strip() for a in field.split(ACCESSORY_SEPARATOR)]


def parse_subject_line(line: str) -> Optional[Subject]:
    """Parse one data row; ``None`` if the row does not match the layout.

    Raises:
        InvalidSubject: The row matches but describes an inconsistent subject.
    """
    match = _ROW_PATTERN.match(line.strip())
    if match is None:
        return None
    subject_id, subject_type, gender, skin_tone, _count, accessories = match.groups()
    return make_subject(
        id=int(subject_id),
        type=subject_type,
        gender=gender,
        skin_tone=skin_tone or None,
        accessories=split_accessories(accessories),
    )


def parse_subjects(text: str) -> PMap[SubjectID, Subject]:
    """Parse the whole CSV (header line first) into an id-keyed map."""
    lines = text.strip().replace("\r\n", "\n").split("\n")
    subjects: Dict[SubjectID, Subject] = {}
    for lineno, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        try:
            subject = parse_subject_line(line)
        except InvalidSubject as e:
            logger.warning("Skipping line %d: %s", lineno, e)
            continue
        if subject is None:
            logger.warning("Skipping malformed line %d: %r", lineno, line)
            continue
        subjects[subject.id] = subject
    return pmap(subjects)


def load_subjects(path: PathLike) -> PMap[SubjectID, Subject]:
    text = Path(path).read_text(encoding="utf-8")
    subjects = parse_subjects(text)
    logger.info("Loaded %d subjects from %s", len(subjects), path)
    return subjects


def parse_eligible_ids(text: str) -> PSet[SubjectID]:
    return pset(int(i) for i in json.loads(text))


def load_eligible_ids(path: PathLike) -> PSet[SubjectID]:
    """Read the JSON list of subject ids eligible for remastering."""
    eligible = parse_eligible_ids(Path(path).read_text(encoding="utf-8"))
    logger.info("Loaded %d eligible subject ids from %s", len(eligible), path)
    return eligible
