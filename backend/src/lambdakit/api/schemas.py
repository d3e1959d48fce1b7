"""Pydantic schemas for handler payloads."""

from __future__ import annotations

from typing import Any
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel

from lambdakit.utils.parsers import optional_str

DEFAULT_FIRST_NAME = "Kanji"
DEFAULT_LAST_NAME = "Tanaka"


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel)


class Person(CamelModel):
    """Two optional name fields, as sent by callers."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Person":
        """Build a Person without validation errors.

        Fields that are missing or not strings are treated as absent.
        """
        return cls(
            firstName=optional_str(payload, "firstName"),
            lastName=optional_str(payload, "lastName"),
        )

    def full_name(self) -> str:
        first = self.first_name if self.first_name is not None else DEFAULT_FIRST_NAME
        last = self.last_name if self.last_name is not None else DEFAULT_LAST_NAME
        return f"{first} {last}"

    def last_name_or_default(self) -> str:
        return self.last_name if self.last_name is not None else DEFAULT_LAST_NAME


class Song(CamelModel):
    """One row of the Music table."""

    artist: str = ""
    song_title: str = ""
    album_title: str = ""
    awards: int = 0


class MessageSchema(BaseModel):
    """Single-message response body."""

    message: str
