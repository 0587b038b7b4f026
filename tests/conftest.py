"""
Test Configuration — Address Book
=================================

Shared fixtures: a typical address book and its JSON document form.
"""
import pytest

from addressbook.model import AddressBook, EventTag, Person, Tag


FRIENDS = Tag(tag_name="friends")
OWES_MONEY = Tag(tag_name="owesMoney")
ORIENTATION = EventTag(tag_name="Orientation Week")
HACKATHON = EventTag(tag_name="Hackathon")


def typical_persons() -> list[Person]:
    """Persons used across storage tests, tags drawn from the typical tag lists."""
    return [
        Person(
            name="Alice Pauline",
            phone="94351253",
            email="alice@example.com",
            address="123, Jurong West Ave 6, #08-111",
            tags={FRIENDS},
            event_tags={ORIENTATION},
        ),
        Person(
            name="Benson Meier",
            phone="98765432",
            email="johnd@example.com",
            address="311, Clementi Ave 2, #02-25",
            tags={OWES_MONEY, FRIENDS},
        ),
        Person(
            name="Carl Kurz",
            phone="95352563",
            email="heinz@example.com",
            address="wall street",
        ),
        Person(
            name="Daniel Meier",
            phone="87652533",
            email="cornelia@example.com",
            address="10th street",
            tags={FRIENDS},
            event_tags={ORIENTATION, HACKATHON},
        ),
    ]


@pytest.fixture
def typical_address_book() -> AddressBook:
    """AddressBook with 2 tags, 2 event tags and 4 persons."""
    book = AddressBook()
    for tag in (FRIENDS, OWES_MONEY):
        book.add_tag(tag)
    for event_tag in (ORIENTATION, HACKATHON):
        book.add_event_tag(event_tag)
    for person in typical_persons():
        book.add_person(person)
    return book


@pytest.fixture
def typical_document_dict() -> dict:
    """Wire form of ``typical_address_book``."""
    return {
        "persons": [
            {
                "name": "Alice Pauline",
                "phone": "94351253",
                "email": "alice@example.com",
                "address": "123, Jurong West Ave 6, #08-111",
                "tags": ["friends"],
                "eventTags": ["Orientation Week"],
            },
            {
                "name": "Benson Meier",
                "phone": "98765432",
                "email": "johnd@example.com",
                "address": "311, Clementi Ave 2, #02-25",
                "tags": ["friends", "owesMoney"],
                "eventTags": [],
            },
            {
                "name": "Carl Kurz",
                "phone": "95352563",
                "email": "heinz@example.com",
                "address": "wall street",
                "tags": [],
                "eventTags": [],
            },
            {
                "name": "Daniel Meier",
                "phone": "87652533",
                "email": "cornelia@example.com",
                "address": "10th street",
                "tags": ["friends"],
                "eventTags": ["Hackathon", "Orientation Week"],
            },
        ],
        "tagList": ["friends", "owesMoney"],
        "eventTagList": ["Orientation Week", "Hackathon"],
    }
