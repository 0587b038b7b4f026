"""
Test Record Adapters — JsonAdaptedTag / EventTag / Person
=========================================================

Conversion of single records to and from model entities.
Malformed records must raise MalformedRecordError carrying the entity kind
and the model's constraint message.
"""

import pytest
from pydantic import ValidationError

from addressbook.exceptions import EntityKind, IllegalValueError, MalformedRecordError
from addressbook.model import AddressBook, EventTag, Person, Tag
from addressbook.model.person import (
    ADDRESS_MESSAGE_CONSTRAINTS,
    EMAIL_MESSAGE_CONSTRAINTS,
    NAME_MESSAGE_CONSTRAINTS,
    PHONE_MESSAGE_CONSTRAINTS,
)
from addressbook.model.tag import EVENT_TAG_MESSAGE_CONSTRAINTS, TAG_MESSAGE_CONSTRAINTS
from addressbook.storage.adapted import (
    MISSING_FIELD_MESSAGE_FORMAT,
    UNKNOWN_EVENT_TAG_MESSAGE_FORMAT,
    UNKNOWN_TAG_MESSAGE_FORMAT,
    JsonAdaptedEventTag,
    JsonAdaptedPerson,
    JsonAdaptedTag,
)


# =============================================================================
# TEST HELPERS
# =============================================================================


VALID_PERSON = {
    "name": "Benson Meier",
    "phone": "98765432",
    "email": "johnd@example.com",
    "address": "311, Clementi Ave 2, #02-25",
    "tags": ["owesMoney", "friends"],
    "eventTags": ["Hackathon"],
}


def make_person_record(**overrides) -> JsonAdaptedPerson:
    """Factory for person records from wire data. Override any key via kwargs."""
    data = dict(VALID_PERSON)
    data.update(overrides)
    return JsonAdaptedPerson.model_validate(data)


# =============================================================================
# Tag records
# =============================================================================


class TestJsonAdaptedTag:
    """Tag records serialize as bare strings."""

    def test_from_model(self):
        record = JsonAdaptedTag.from_model(Tag(tag_name="friends"))
        assert record.tag_name == "friends"
        assert record.model_dump() == "friends"

    def test_to_model_type_valid(self):
        assert JsonAdaptedTag("friends").to_model_type() == Tag(tag_name="friends")

    def test_to_model_type_invalid(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            JsonAdaptedTag("#friend").to_model_type()
        assert exc_info.value.kind == EntityKind.TAG
        assert str(exc_info.value) == TAG_MESSAGE_CONSTRAINTS

    def test_non_string_rejected_at_parse(self):
        with pytest.raises(ValidationError):
            JsonAdaptedTag.model_validate(42)


class TestJsonAdaptedEventTag:
    """Event tag records serialize as bare strings."""

    def test_round_trip(self):
        event_tag = EventTag(tag_name="Orientation Week")
        assert JsonAdaptedEventTag.from_model(event_tag).to_model_type() == event_tag

    def test_to_model_type_invalid(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            JsonAdaptedEventTag("  ").to_model_type()
        assert exc_info.value.kind == EntityKind.EVENT_TAG
        assert exc_info.value.detail == EVENT_TAG_MESSAGE_CONSTRAINTS


# =============================================================================
# Person records
# =============================================================================


class TestJsonAdaptedPerson:
    """Person record conversion and field validation."""

    def test_valid_person_converts(self):
        person = make_person_record().to_model_type()
        assert person.name == "Benson Meier"
        assert person.tags == frozenset({Tag(tag_name="owesMoney"), Tag(tag_name="friends")})
        assert person.event_tags == frozenset({EventTag(tag_name="Hackathon")})

    def test_from_model_sorts_tags(self):
        person = make_person_record().to_model_type()
        dumped = JsonAdaptedPerson.from_model(person).model_dump(by_alias=True)
        assert dumped["tags"] == ("friends", "owesMoney")
        assert dumped["eventTags"] == ("Hackathon",)

    def test_model_round_trip(self):
        person = make_person_record().to_model_type()
        assert JsonAdaptedPerson.from_model(person).to_model_type() == person

    def test_tag_lists_optional(self):
        data = {k: v for k, v in VALID_PERSON.items() if k not in ("tags", "eventTags")}
        person = JsonAdaptedPerson.model_validate(data).to_model_type()
        assert person.tags == frozenset()
        assert person.event_tags == frozenset()

    def test_null_tag_lists_are_empty(self):
        person = make_person_record(tags=None, eventTags=None).to_model_type()
        assert person.tags == frozenset()

    def test_extra_keys_ignored(self):
        assert make_person_record(nickname="Ben").to_model_type().name == "Benson Meier"

    @pytest.mark.parametrize("key, label", [
        ("name", "Name"),
        ("phone", "Phone"),
        ("email", "Email"),
        ("address", "Address"),
    ])
    def test_missing_field(self, key, label):
        record = make_person_record(**{key: None})
        with pytest.raises(MalformedRecordError) as exc_info:
            record.to_model_type()
        assert exc_info.value.kind == EntityKind.PERSON
        assert str(exc_info.value) == MISSING_FIELD_MESSAGE_FORMAT.format(label)

    @pytest.mark.parametrize("key, value, message", [
        ("name", "R@chel", NAME_MESSAGE_CONSTRAINTS),
        ("phone", "+651234", PHONE_MESSAGE_CONSTRAINTS),
        ("email", "example.com", EMAIL_MESSAGE_CONSTRAINTS),
        ("address", " ", ADDRESS_MESSAGE_CONSTRAINTS),
    ])
    def test_invalid_field(self, key, value, message):
        record = make_person_record(**{key: value})
        with pytest.raises(MalformedRecordError) as exc_info:
            record.to_model_type()
        assert str(exc_info.value) == message

    def test_invalid_nested_tag(self):
        record = make_person_record(tags=["friends", "#friend"])
        with pytest.raises(MalformedRecordError) as exc_info:
            record.to_model_type()
        assert exc_info.value.kind == EntityKind.TAG

    def test_malformed_is_illegal_value(self):
        with pytest.raises(IllegalValueError):
            make_person_record(phone="x").to_model_type()

    def test_wrong_json_type_rejected_at_parse(self):
        with pytest.raises(ValidationError):
            make_person_record(tags="friends,owesMoney")

    def test_frozen(self):
        record = make_person_record()
        with pytest.raises(ValidationError):
            record.name = "Other"


class TestJsonAdaptedPersonReferences:
    """Optional check that referenced tags already exist in the book."""

    @pytest.fixture
    def book_with_tags(self) -> AddressBook:
        book = AddressBook()
        book.add_tag(Tag(tag_name="friends"))
        book.add_tag(Tag(tag_name="owesMoney"))
        book.add_event_tag(EventTag(tag_name="Hackathon"))
        return book

    def test_known_tags_pass(self, book_with_tags):
        person = make_person_record().to_model_type(address_book=book_with_tags)
        assert isinstance(person, Person)

    def test_unknown_tag_rejected(self, book_with_tags):
        record = make_person_record(tags=["colleagues"])
        with pytest.raises(MalformedRecordError) as exc_info:
            record.to_model_type(address_book=book_with_tags)
        assert exc_info.value.kind == EntityKind.PERSON
        assert str(exc_info.value) == UNKNOWN_TAG_MESSAGE_FORMAT.format("colleagues")

    def test_unknown_event_tag_rejected(self, book_with_tags):
        record = make_person_record(eventTags=["Graduation"])
        with pytest.raises(MalformedRecordError) as exc_info:
            record.to_model_type(address_book=book_with_tags)
        assert str(exc_info.value) == UNKNOWN_EVENT_TAG_MESSAGE_FORMAT.format("Graduation")

    def test_no_book_means_no_reference_check(self):
        assert make_person_record(tags=["colleagues"]).to_model_type().name == "Benson Meier"
