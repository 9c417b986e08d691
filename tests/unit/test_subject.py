import pytest

from punks_remaster.errors import InvalidSubject
from punks_remaster.subject import Subject, make_subject
from punks_remaster.types import Gender, SkinTone, SubjectType


def test_make_subject_coerces_strings() -> None:
    subject = make_subject(
        id=42,
        type="Human",
        gender="Female",
        skin_tone="Medium",
        accessories=[" Earring ", "Blonde Bob"],
    )
    assert subject.type is SubjectType.HUMAN
    assert subject.gender is Gender.FEMALE
    assert subject.skin_tone is SkinTone.MEDIUM
    assert subject.accessories == ("Earring", "Blonde Bob")
    assert subject.is_female and not subject.is_male


def test_make_subject_dedupes_keeping_first() -> None:
    subject = make_subject(
        id=1, type="Ape", gender="Male", accessories=["Cap", "Pipe", "Cap", ""]
    )
    assert subject.accessories == ("Cap", "Pipe")
    assert subject.skin_tone is None


def test_blank_skin_tone_is_missing() -> None:
    subject = make_subject(id=3, type="Zombie", gender="Male", skin_tone="  ")
    assert subject.skin_tone is None


def test_human_requires_skin_tone() -> None:
    with pytest.raises(InvalidSubject):
        make_subject(id=1, type="Human", gender="Male")


def test_non_human_rejects_skin_tone() -> None:
    with pytest.raises(InvalidSubject):
        make_subject(id=1, type="Alien", gender="Male", skin_tone="Light")


@pytest.mark.parametrize(
    "field, value",
    [("type", "Robot"), ("gender", "Other"), ("skin_tone", "Green")],
)
def test_unknown_enum_values(field: str, value: str) -> None:
    kwargs = {"id": 5, "type": "Human", "gender": "Male", "skin_tone": "Light"}
    kwargs[field] = value
    with pytest.raises(InvalidSubject):
        make_subject(**kwargs)  # type: ignore[arg-type]


@pytest.mark.parametrize("subject_id", [-1, 10000])
def test_id_out_of_range(subject_id: int) -> None:
    with pytest.raises(InvalidSubject):
        make_subject(id=subject_id, type="Ape", gender="Male")


def test_duplicate_accessories_rejected_on_direct_construction() -> None:
    with pytest.raises(InvalidSubject):
        Subject(
            id=1,
            type=SubjectType.APE,
            gender=Gender.MALE,
            skin_tone=None,
            accessories=("Cap", "Cap"),
        )


def test_invalid_subject_is_value_error() -> None:
    with pytest.raises(ValueError):
        make_subject(id=1, type="Human", gender="Female")


def test_has() -> None:
    subject = make_subject(id=9, type="Ape", gender="Male", accessories=["Cap"])
    assert subject.has("Cap")
    assert not subject.has("cap")
