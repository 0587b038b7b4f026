"""
Address Book Model Package
==========================

Immutable entities (Tag, EventTag, Person) and the AddressBook aggregate
that enforces their uniqueness.
"""

from .tag import Tag, EventTag
from .person import Person
from .address_book import AddressBook, ReadOnlyAddressBook

__all__ = [
    "Tag",
    "EventTag",
    "Person",
    "AddressBook",
    "ReadOnlyAddressBook",
]
