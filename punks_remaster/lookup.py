"""Request-level rendering.

:func:`render_lookup` bundles what a caller serving single-subject images has
to decide around the pure compositor: validating the id, finding the record,
gating remasters on the eligibility list, and sizing the output.
"""

from dataclasses import dataclass
import re
from typing import Mapping, Optional, Tuple

from PIL import Image
from pyrsistent.typing import PSet

from punks_remaster.errors import InvalidSubjectId, NotEligible, SubjectNotFound
from punks_remaster.remaster import RemasterRecord, derive_remasters
from punks_remaster.renderer.compositor import RenderContext, composite_subject
from punks_remaster.renderer.output import (
    MAX_OUTPUT_SIZE,
    MIN_OUTPUT_SIZE,
    snap_output_size,
)
from punks_remaster.subject import MAX_SUBJECT_ID, MIN_SUBJECT_ID, Subject
from punks_remaster.types import SubjectID
from punks_remaster.utils.image import scale

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class LookupResult:
    """Outcome of :func:`render_lookup`.

    Attributes:
        subject: The rendered record.
        eligible: Whether the id is on the eligibility list.
        remasters: Corrections available for the subject.
        applied: Whether those corrections were drawn.
        size: Output edge in pixels.
        image: Rendered (and scaled) tile.
    """

    subject: Subject
    eligible: bool
    remasters: Tuple[RemasterRecord, ...]
    applied: bool
    size: int
    image: Image.Image


def validate_subject_id(raw: object) -> SubjectID:
    """Parse the leading integer of ``raw`` and check it is a known id.

    Trailing characters are ignored, so ``"12abc"`` is 12 and ``"5.0"`` is 5.
    """
    match = _LEADING_INT.match(str(raw))
    if match is None:
        raise InvalidSubjectId(
            f"Invalid subject ID {raw!r}. Must be {MIN_SUBJECT_ID}-{MAX_SUBJECT_ID}."
        )
    subject_id = int(match.group(1))
    if not MIN_SUBJECT_ID <= subject_id <= MAX_SUBJECT_ID:
        raise InvalidSubjectId(
            f"Invalid subject ID {subject_id}. Must be {MIN_SUBJECT_ID}-{MAX_SUBJECT_ID}."
        )
    return subject_id


def render_lookup(
    context: RenderContext,
    subjects: Mapping[SubjectID, Subject],
    eligible_ids: PSet[SubjectID],
    subject_id: object,
    size: Optional[int] = None,
    require_eligible: bool = False,
    min_size: int = MIN_OUTPUT_SIZE,
    max_size: int = MAX_OUTPUT_SIZE,
) -> LookupResult:
    """Render one subject the way the image endpoint does.

    Remasters are applied only to eligible subjects that have any. With
    ``require_eligible`` an ineligible subject raises :class:`NotEligible`
    instead of rendering unmodified.
    """
    sid = validate_subject_id(subject_id)
    subject = subjects.get(sid)
    if subject is None:
        raise SubjectNotFound(f"Subject #{sid} not found.")

    eligible = sid in eligible_ids
    if require_eligible and not eligible:
        raise NotEligible(sid)

    remasters = derive_remasters(subject)
    applied = eligible and len(remasters) > 0
    output_size = snap_output_size(size, min_size=min_size, max_size=max_size)
    tile = composite_subject(context, subject, apply_remasters=applied)
    return LookupResult(
        subject=subject,
        eligible=eligible,
        remasters=remasters,
        applied=applied,
        size=output_size,
        image=scale(tile, output_size),
    )
