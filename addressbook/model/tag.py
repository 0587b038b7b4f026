"""
Tag Models
==========

Immutable tag value types attached to persons and listed by the address book.

- Tag: a single alphanumeric word (e.g. "friends")
- EventTag: an event name, alphanumeric words separated by single spaces
  (e.g. "Orientation Week")

Both are frozen pydantic models, so they hash by value and can live in sets.
A Tag never equals an EventTag with the same name.
"""

import re

from pydantic import BaseModel, ConfigDict, field_validator

TAG_MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
TAG_VALIDATION_REGEX = re.compile(r"[A-Za-z0-9]+")

EVENT_TAG_MESSAGE_CONSTRAINTS = (
    "Event tag names should only contain alphanumeric words separated by single spaces, "
    "and it should not be blank"
)
EVENT_TAG_VALIDATION_REGEX = re.compile(r"[A-Za-z0-9]+(?: [A-Za-z0-9]+)*")


def is_valid_tag_name(test: str) -> bool:
    """Return True if ``test`` is a legal tag name."""
    return TAG_VALIDATION_REGEX.fullmatch(test) is not None


def is_valid_event_tag_name(test: str) -> bool:
    """Return True if ``test`` is a legal event tag name."""
    return EVENT_TAG_VALIDATION_REGEX.fullmatch(test) is not None


class Tag(BaseModel):
    """A tag in the address book. Equality is by name."""

    model_config = ConfigDict(frozen=True)

    tag_name: str

    @field_validator("tag_name")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        if not is_valid_tag_name(v):
            raise ValueError(TAG_MESSAGE_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return f"[{self.tag_name}]"


class EventTag(BaseModel):
    """An event tag in the address book. Equality is by name."""

    model_config = ConfigDict(frozen=True)

    tag_name: str

    @field_validator("tag_name")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        if not is_valid_event_tag_name(v):
            raise ValueError(EVENT_TAG_MESSAGE_CONSTRAINTS)
        return v

    def __str__(self) -> str:
        return f"[{self.tag_name}]"
