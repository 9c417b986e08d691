import pytest
from pyrsistent import pmap, pset

from punks_remaster.errors import (
    InvalidSubjectId,
    NotEligible,
    RemasterError,
    SubjectNotFound,
)
from punks_remaster.lookup import render_lookup, validate_subject_id
from punks_remaster.renderer.compositor import composite_subject
from punks_remaster.types import RemasterType
from punks_remaster.utils.image import scale
from tests.test_utils import female, make_context, male, pixel, tile_with

RED = (255, 0, 0, 255)


def lookup_fixture():
    context = make_context({380: tile_with({(12, 22): RED})})
    subjects = pmap(
        {
            1: female(["Choker"], subject_id=1),
            2: female(["Choker"], subject_id=2),
            3: male([], subject_id=3),
        }
    )
    eligible = pset([1, 3])
    return context, subjects, eligible


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0, 0),
        ("42", 42),
        (" 9999 ", 9999),
        # trailing characters after the leading digits are ignored
        ("12abc", 12),
        ("5.0", 5),
    ],
)
def test_validate_subject_id(raw, expected: int) -> None:
    assert validate_subject_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "x12", -1, 10000, "-3px"])
def test_validate_subject_id_rejects(raw) -> None:
    with pytest.raises(InvalidSubjectId):
        validate_subject_id(raw)


def test_eligible_subject_is_remastered() -> None:
    context, subjects, eligible = lookup_fixture()
    result = render_lookup(context, subjects, eligible, 1)
    assert result.eligible
    assert result.applied
    assert [r.type for r in result.remasters] == [
        RemasterType.EAR,
        RemasterType.CHOKER,
    ]
    expected = composite_subject(context, subjects[1], apply_remasters=True)
    assert result.image.tobytes() == expected.tobytes()
    assert result.size == 24


def test_ineligible_subject_renders_unmodified() -> None:
    context, subjects, eligible = lookup_fixture()
    result = render_lookup(context, subjects, eligible, "2")
    assert not result.eligible
    assert not result.applied
    assert len(result.remasters) == 2
    assert pixel(result.image, 12, 22) == RED


def test_require_eligible() -> None:
    context, subjects, eligible = lookup_fixture()
    with pytest.raises(NotEligible) as exc:
        render_lookup(context, subjects, eligible, 2, require_eligible=True)
    assert exc.value.subject_id == 2


def test_eligible_without_remasters() -> None:
    context, subjects, eligible = lookup_fixture()
    result = render_lookup(context, subjects, eligible, 3)
    assert result.eligible
    assert result.remasters == ()
    assert not result.applied


def test_unknown_subject() -> None:
    context, subjects, eligible = lookup_fixture()
    with pytest.raises(SubjectNotFound):
        render_lookup(context, subjects, eligible, 500)


def test_invalid_id_is_a_remaster_error() -> None:
    context, subjects, eligible = lookup_fixture()
    with pytest.raises(RemasterError):
        render_lookup(context, subjects, eligible, "nope")


def test_output_size_snapped() -> None:
    context, subjects, eligible = lookup_fixture()
    result = render_lookup(context, subjects, eligible, 1, size=100)
    assert result.size == 96
    assert result.image.size == (96, 96)
    native = composite_subject(context, subjects[1], apply_remasters=True)
    assert pixel(result.image, 12 * 4, 22 * 4) == pixel(native, 12, 22)


def test_output_size_bounds() -> None:
    context, subjects, eligible = lookup_fixture()
    result = render_lookup(
        context, subjects, eligible, 3, size=1000, min_size=48, max_size=240
    )
    assert result.size == 240


def test_preview_image_matches_scaled_remaster() -> None:
    context, subjects, eligible = lookup_fixture()
    result = render_lookup(context, subjects, eligible, 1, size=120)
    native = composite_subject(context, subjects[1], apply_remasters=True)
    assert result.size == 120
    assert result.image.tobytes() == scale(native, 120).tobytes()
