# buildmate/schemas/resume.py

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


def _scalar_to_text(v: Any) -> str | None:
    """Text form of a JSON scalar, or None for null and structured values."""
    if isinstance(v, str):
        return v
    if isinstance(v, bool):
        # JSON spelling, not Python's
        return "true" if v else "false"
    if isinstance(v, (int, float)):
        return str(v)
    return None


class ResumeSave(BaseModel):
    """
    Body of a resume save. Every save is a full replace, so each field falls
    back to its default independently when the client leaves it out.

    Lenient by contract, a bad value resets its own field and never fails
    the rest of the save:
    - `full_name`, `title`, `summary`: numbers and booleans are stored as
      their text form; null, objects and arrays become "".
    - `photo_data`: numbers and booleans become text; objects and arrays
      become null.
    - `education`, `experience`, `skills`: non-list values become [].
      Skill entries that are null, objects or arrays are dropped; numbers
      and booleans are stored as text.
    """
    full_name: str = ""
    title: str = ""
    summary: str = ""
    education: list[Any] = []
    experience: list[Any] = []
    skills: list[str] = []
    photo_data: str | None = None

    @field_validator("full_name", "title", "summary", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        text = _scalar_to_text(v)
        return "" if text is None else text

    @field_validator("photo_data", mode="before")
    @classmethod
    def coerce_photo(cls, v: Any) -> str | None:
        return _scalar_to_text(v)

    @field_validator("education", "experience", mode="before")
    @classmethod
    def coerce_to_list(cls, v: Any) -> list:
        return v if isinstance(v, list) else []

    @field_validator("skills", mode="before")
    @classmethod
    def coerce_skills(cls, v: Any) -> list[str]:
        if not isinstance(v, list):
            return []
        skills = (_scalar_to_text(s) for s in v)
        return [s for s in skills if s is not None]


class ResumeResponse(BaseModel):
    id: int
    user_id: int
    full_name: str
    title: str
    summary: str
    education: list[Any]
    experience: list[Any]
    skills: list[str]
    photo_data: str | None = None
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
