"""Pydantic schemas for Note endpoints."""

import re
import uuid
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 200

# ISO 8601 calendar, week and ordinal dates (year-only and year-month included),
# optionally followed by a time of day and a UTC offset.
_ISO_DATE_RE = re.compile(
    r"(?:[-+]\d{2})?"
    r"(?:\d{4}(?!\d{2}\b))"
    r"(?:(-?)"
    r"(?:(?:0[1-9]|1[0-2])(?:\1(?:[12]\d|0[1-9]|3[01]))?"
    r"|W(?:[0-4]\d|5[0-2])(?:-?[1-7])?"
    r"|(?:00[1-9]|0[1-9]\d|[12]\d{2}|3(?:[0-5]\d|6[1-6])))"
    r"(?!T\Z|T\d+Z\Z)"
    r"(?:[T\s]"
    r"(?:(?:(?:[01]\d|2[0-3])(?:(:?)[0-5]\d)?|24:?00)(?:[.,]\d+(?!:))?)"
    r"(?:\2[0-5]\d(?:[.,]\d+)?)?"
    r"(?:Z|[+-](?:[01]\d|2[0-3])(?::?[0-5]\d)?)?"
    r")?)?",
    re.ASCII,
)


def _check_iso_date(v: str) -> str:
    """Accept ISO 8601 dates and date-times; keep the submitted text as-is."""
    if _ISO_DATE_RE.fullmatch(v) is None:
        raise ValueError(f"Unrecognised ISO 8601 date: {v!r}")
    return v


Title = Annotated[str, Field(min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)]
Schedule = Annotated[
    str,
    AfterValidator(_check_iso_date),
    Field(description="ISO 8601 date or date-time", examples=["2026-10-19T09:30:00Z"]),
]


class Note(BaseModel):
    id: uuid.UUID
    title: Title
    schedule: Schedule | None = None

    model_config = ConfigDict(extra="forbid")


class NewNote(BaseModel):
    title: Title
    schedule: Schedule | None = None

    model_config = ConfigDict(extra="forbid")


class UpdateNote(BaseModel):
    """Partial update. Only fields present in the request body are applied."""

    id: uuid.UUID | None = None
    title: Title | None = None
    schedule: Schedule | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "UpdateNote":
        # Omitting a field leaves it unchanged; null is not a way to clear it.
        for name in ("title", "schedule"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} may be omitted but not null")
        return self


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None
