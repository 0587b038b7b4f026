"""
JSON Record Adapters
====================

Serializable stand-ins for single model entities.

- JsonAdaptedTag / JsonAdaptedEventTag: a bare JSON string (the name)
- JsonAdaptedPerson: a JSON object with camelCase keys

Records are deliberately loose: construction only checks JSON types, so a
document with bad field values still parses. Field constraints are checked
by ``to_model_type()``, which raises MalformedRecordError with the model's
user-facing constraint message.
"""

from typing import Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator

from addressbook.exceptions import EntityKind, MalformedRecordError
from addressbook.model.address_book import AddressBook
from addressbook.model.person import (
    ADDRESS_MESSAGE_CONSTRAINTS,
    EMAIL_MESSAGE_CONSTRAINTS,
    NAME_MESSAGE_CONSTRAINTS,
    PHONE_MESSAGE_CONSTRAINTS,
    Person,
    is_valid_address,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
)
from addressbook.model.tag import (
    EVENT_TAG_MESSAGE_CONSTRAINTS,
    TAG_MESSAGE_CONSTRAINTS,
    EventTag,
    Tag,
    is_valid_event_tag_name,
    is_valid_tag_name,
)

MISSING_FIELD_MESSAGE_FORMAT = "Person's {} field is missing!"
UNKNOWN_TAG_MESSAGE_FORMAT = "Person references unknown tag: {}"
UNKNOWN_EVENT_TAG_MESSAGE_FORMAT = "Person references unknown event tag: {}"


# =============================================================================
# TAG RECORDS
# =============================================================================


class JsonAdaptedTag(RootModel[str]):
    """Serialized form of a Tag: its name as a plain string."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_model(cls, source: Tag) -> "JsonAdaptedTag":
        return cls(source.tag_name)

    @property
    def tag_name(self) -> str:
        return self.root

    def to_model_type(self) -> Tag:
        """Convert to a Tag.

        Raises:
            MalformedRecordError: the name is not a legal tag name.
        """
        if not is_valid_tag_name(self.root):
            raise MalformedRecordError(EntityKind.TAG, TAG_MESSAGE_CONSTRAINTS)
        return Tag(tag_name=self.root)


class JsonAdaptedEventTag(RootModel[str]):
    """Serialized form of an EventTag: its name as a plain string."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_model(cls, source: EventTag) -> "JsonAdaptedEventTag":
        return cls(source.tag_name)

    @property
    def tag_name(self) -> str:
        return self.root

    def to_model_type(self) -> EventTag:
        """Convert to an EventTag.

        Raises:
            MalformedRecordError: the name is not a legal event tag name.
        """
        if not is_valid_event_tag_name(self.root):
            raise MalformedRecordError(EntityKind.EVENT_TAG, EVENT_TAG_MESSAGE_CONSTRAINTS)
        return EventTag(tag_name=self.root)


# =============================================================================
# PERSON RECORD
# =============================================================================


def _check_field(
    field_label: str,
    value: Optional[str],
    is_valid: Callable[[str], bool],
    message: str,
) -> str:
    if value is None:
        raise MalformedRecordError(EntityKind.PERSON, MISSING_FIELD_MESSAGE_FORMAT.format(field_label))
    if not is_valid(value):
        raise MalformedRecordError(EntityKind.PERSON, message)
    return value


class JsonAdaptedPerson(BaseModel):
    """Serialized form of a Person."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tags: Tuple[JsonAdaptedTag, ...] = ()
    event_tags: Tuple[JsonAdaptedEventTag, ...] = Field(default=(), alias="eventTags")

    @field_validator("tags", "event_tags", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        """Treat an explicit JSON null list as an empty one."""
        return () if v is None else v

    @classmethod
    def from_model(cls, source: Person) -> "JsonAdaptedPerson":
        """Build a record from ``source``. Tags are emitted in name order."""
        return cls(
            name=source.name,
            phone=source.phone,
            email=source.email,
            address=source.address,
            tags=tuple(
                JsonAdaptedTag.from_model(tag)
                for tag in sorted(source.tags, key=lambda t: t.tag_name)
            ),
            eventTags=tuple(
                JsonAdaptedEventTag.from_model(event_tag)
                for event_tag in sorted(source.event_tags, key=lambda t: t.tag_name)
            ),
        )

    def to_model_type(self, address_book: Optional[AddressBook] = None) -> Person:
        """
        Convert this record into a Person.

        Args:
            address_book: When given, every tag and event tag the person
                carries must already be in this book.

        Raises:
            MalformedRecordError: a field is missing or violates its constraint,
                a nested tag is malformed, or a referenced tag is unknown.
        """
        tags = [record.to_model_type() for record in self.tags]
        event_tags = [record.to_model_type() for record in self.event_tags]

        name = _check_field("Name", self.name, is_valid_name, NAME_MESSAGE_CONSTRAINTS)
        phone = _check_field("Phone", self.phone, is_valid_phone, PHONE_MESSAGE_CONSTRAINTS)
        email = _check_field("Email", self.email, is_valid_email, EMAIL_MESSAGE_CONSTRAINTS)
        address = _check_field("Address", self.address, is_valid_address, ADDRESS_MESSAGE_CONSTRAINTS)

        if address_book is not None:
            for tag in tags:
                if not address_book.has_tag(tag):
                    raise MalformedRecordError(
                        EntityKind.PERSON, UNKNOWN_TAG_MESSAGE_FORMAT.format(tag.tag_name)
                    )
            for event_tag in event_tags:
                if not address_book.has_event_tag(event_tag):
                    raise MalformedRecordError(
                        EntityKind.PERSON, UNKNOWN_EVENT_TAG_MESSAGE_FORMAT.format(event_tag.tag_name)
                    )

        return Person(
            name=name,
            phone=phone,
            email=email,
            address=address,
            tags=frozenset(tags),
            event_tags=frozenset(event_tags),
        )
