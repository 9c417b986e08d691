"""Error taxonomy.

``UnknownTrait`` is only fatal for the base sprite; accessory layers that
raise it are logged and skipped by the compositor. ``OutOfRange`` signals a
programming error (patch coordinates are constants from the trait catalog).
"""


class RemasterError(Exception):
    """Base class for all errors raised by this package."""


class NotLoaded(RemasterError):
    """A sprite sheet was accessed before it was supplied."""


class UnknownTrait(RemasterError, KeyError):
    """A trait name is absent from the applicable sprite table."""

    def __init__(self, trait: str, table: str = ""):
        self.trait = trait
        self.table = table
        super().__init__(trait)

    def __str__(self) -> str:
        if self.table:
            return f"No sprite for trait {self.trait!r} in {self.table} table"
        return f"No sprite for trait {self.trait!r}"


class InvalidSubject(RemasterError, ValueError):
    """A subject record is missing required fields or is inconsistent."""


class OutOfRange(RemasterError, IndexError):
    """Tile or pixel coordinates fall outside the buffer."""


class InvalidSubjectId(RemasterError, ValueError):
    """Requested subject id is outside the collection's id range."""


class SubjectNotFound(RemasterError, LookupError):
    """No subject record exists for the requested id."""


class NotEligible(RemasterError):
    """Subject is not on the remaster eligibility list."""

    def __init__(self, subject_id: int):
        self.subject_id = subject_id
        super().__init__(f"Subject #{subject_id} is not eligible for remastering.")
