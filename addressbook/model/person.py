"""
Person Model
============

Immutable person entity with field constraints enforced on construction.

Two notions of sameness:
- ``==`` compares every field (full equality)
- ``is_same_person`` compares names only; the address book uses it to
  reject duplicates, so two contacts with the same name cannot coexist
"""

import re
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from addressbook.model.tag import EventTag, Tag

# =============================================================================
# FIELD CONSTRAINTS
# =============================================================================

NAME_MESSAGE_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, and it should not be blank"
)
NAME_VALIDATION_REGEX = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")

PHONE_MESSAGE_CONSTRAINTS = (
    "Phone numbers should only contain numbers, and it should be at least 3 digits long"
)
PHONE_VALIDATION_REGEX = re.compile(r"[0-9]{3,}")

EMAIL_MESSAGE_CONSTRAINTS = (
    "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
    "1. The local-part should only contain alphanumeric characters and the special characters "
    "+_.-, and may not start or end with a special character or hold two in a row.\n"
    "2. The domain is made up of domain labels separated by periods. Each label starts and ends "
    "with an alphanumeric character and may contain hyphens in between. The final label must be "
    "at least 2 characters long."
)
_EMAIL_LOCAL_PART = r"[A-Za-z0-9]+(?:[+_.\-][A-Za-z0-9]+)*"
_EMAIL_DOMAIN_LABEL = r"[A-Za-z0-9]+(?:-[A-Za-z0-9]+)*"
_EMAIL_DOMAIN_LAST_LABEL = r"[A-Za-z0-9]{2,}(?:-[A-Za-z0-9]+)*"
EMAIL_VALIDATION_REGEX = re.compile(
    rf"{_EMAIL_LOCAL_PART}@(?:{_EMAIL_DOMAIN_LABEL}\.)*{_EMAIL_DOMAIN_LAST_LABEL}"
)

ADDRESS_MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
ADDRESS_VALIDATION_REGEX = re.compile(r"[^\s].*")


def is_valid_name(test: str) -> bool:
    return NAME_VALIDATION_REGEX.fullmatch(test) is not None


def is_valid_phone(test: str) -> bool:
    return PHONE_VALIDATION_REGEX.fullmatch(test) is not None


def is_valid_email(test: str) -> bool:
    return EMAIL_VALIDATION_REGEX.fullmatch(test) is not None


def is_valid_address(test: str) -> bool:
    return ADDRESS_VALIDATION_REGEX.fullmatch(test) is not None


# =============================================================================
# PYDANTIC MODEL
# =============================================================================


class Person(BaseModel):
    """A contact in the address book."""

    model_config = ConfigDict(frozen=True)

    name: str
    phone: str
    email: str
    address: str
    tags: FrozenSet[Tag] = Field(default_factory=frozenset)
    event_tags: FrozenSet[EventTag] = Field(default_factory=frozenset)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not is_valid_name(v):
            raise ValueError(NAME_MESSAGE_CONSTRAINTS)
        return v

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if not is_valid_phone(v):
            raise ValueError(PHONE_MESSAGE_CONSTRAINTS)
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not is_valid_email(v):
            raise ValueError(EMAIL_MESSAGE_CONSTRAINTS)
        return v

    @field_validator("address")
    @classmethod
    def validate_address(cls, v: str) -> str:
        if not is_valid_address(v):
            raise ValueError(ADDRESS_MESSAGE_CONSTRAINTS)
        return v

    def is_same_person(self, other: Optional["Person"]) -> bool:
        """Return True if both persons have the same name."""
        if other is self:
            return True
        return other is not None and other.name == self.name
