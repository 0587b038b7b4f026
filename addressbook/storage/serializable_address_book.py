"""
Serializable Address Book Document
==================================

Immutable JSON document form of an AddressBook.

Wire shape (the inner object; the storage layer may wrap it under
``"addressbook"``)::

    {"persons": [...], "tagList": [...], "eventTagList": [...]}

Any member may be absent or null and is read as an empty list. Members are
recognised only by their wire names; snake_case spellings are unknown keys.

Import order is fixed: tags, then event tags, then persons. Persons are
converted only after every tag and event tag is in the model, so a person's
tag references can be checked against the book being built. Changing the
order breaks that check.
"""

from typing import Any, ClassVar, Optional, Tuple

import structlog
from pydantic import BaseModel, ConfigDict, Field, field_validator

from addressbook.exceptions import (
    MESSAGE_DUPLICATE_EVENT_TAG,
    MESSAGE_DUPLICATE_PERSON,
    MESSAGE_DUPLICATE_TAG,
    DuplicateEntityError,
    EntityKind,
)
from addressbook.model.address_book import AddressBook, ReadOnlyAddressBook
from addressbook.storage.adapted import JsonAdaptedEventTag, JsonAdaptedPerson, JsonAdaptedTag
from config import settings

logger = structlog.get_logger(__name__)

__all__ = [
    "JsonSerializableAddressBook",
    "MESSAGE_DUPLICATE_PERSON",
    "MESSAGE_DUPLICATE_TAG",
    "MESSAGE_DUPLICATE_EVENT_TAG",
]


class JsonSerializableAddressBook(BaseModel):
    """An immutable AddressBook that is serializable to JSON."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    ROOT_NAME: ClassVar[str] = "addressbook"

    persons: Tuple[JsonAdaptedPerson, ...] = ()
    tag_list: Tuple[JsonAdaptedTag, ...] = Field(default=(), alias="tagList")
    event_tag_list: Tuple[JsonAdaptedEventTag, ...] = Field(default=(), alias="eventTagList")

    @field_validator("persons", "tag_list", "event_tag_list", mode="before")
    @classmethod
    def null_as_empty(cls, v):
        """Treat an explicit JSON null list as an empty one."""
        return () if v is None else v

    # =========================================================================
    # EXPORT
    # =========================================================================

    @classmethod
    def from_model(cls, source: ReadOnlyAddressBook) -> "JsonSerializableAddressBook":
        """
        Convert ``source`` into a document, keeping each list's order.

        The document holds plain strings only, so later changes to
        ``source`` do not affect it.
        """
        return cls(
            persons=tuple(JsonAdaptedPerson.from_model(p) for p in source.get_person_list()),
            tagList=tuple(JsonAdaptedTag.from_model(t) for t in source.get_tag_list()),
            eventTagList=tuple(
                JsonAdaptedEventTag.from_model(e) for e in source.get_event_tag_list()
            ),
        )

    # =========================================================================
    # IMPORT
    # =========================================================================

    def to_model_type(self, require_known_tags: Optional[bool] = None) -> AddressBook:
        """
        Convert this document into a new AddressBook.

        Args:
            require_known_tags: Reject persons that reference a tag or event
                tag not listed in this document. Defaults to
                ``settings.require_known_tags``.

        Returns:
            The populated AddressBook. Nothing is returned on failure.

        Raises:
            MalformedRecordError: a record violates a field constraint.
            DuplicateEntityError: two records convert to the same entity.
        """
        if require_known_tags is None:
            require_known_tags = settings.require_known_tags

        address_book = AddressBook()

        for json_adapted_tag in self.tag_list:
            tag = json_adapted_tag.to_model_type()
            if address_book.has_tag(tag):
                logger.warning("duplicate_tag_rejected", tag=tag.tag_name)
                raise DuplicateEntityError(EntityKind.TAG)
            address_book.add_tag(tag)

        for json_adapted_event_tag in self.event_tag_list:
            event_tag = json_adapted_event_tag.to_model_type()
            if address_book.has_event_tag(event_tag):
                logger.warning("duplicate_event_tag_rejected", event_tag=event_tag.tag_name)
                raise DuplicateEntityError(EntityKind.EVENT_TAG)
            address_book.add_event_tag(event_tag)

        known = address_book if require_known_tags else None
        for json_adapted_person in self.persons:
            person = json_adapted_person.to_model_type(address_book=known)
            if address_book.has_person(person):
                logger.warning("duplicate_person_rejected", name=person.name)
                raise DuplicateEntityError(EntityKind.PERSON)
            address_book.add_person(person)

        logger.debug(
            "address_book_imported",
            tags=len(self.tag_list),
            event_tags=len(self.event_tag_list),
            persons=len(self.persons),
        )
        return address_book

    # =========================================================================
    # WIRE HELPERS
    # =========================================================================

    @classmethod
    def from_dict(cls, data: Any) -> "JsonSerializableAddressBook":
        """Parse the inner document object. Raises pydantic ValidationError."""
        return cls.model_validate(data)

    @classmethod
    def from_json(cls, text: str | bytes) -> "JsonSerializableAddressBook":
        """Parse the inner document from JSON text. Raises pydantic ValidationError."""
        return cls.model_validate_json(text)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)
