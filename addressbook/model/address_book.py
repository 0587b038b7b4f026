"""
Address Book Aggregate
======================

In-memory container for tags, event tags and persons.

Each of the three lists is unique under its own membership rule:
- tags / event tags: value equality
- persons: ``Person.is_same_person`` (same name)

``add_*`` methods refuse duplicates with DuplicateEntryError; callers that
build a book from untrusted data are expected to check ``has_*`` first and
report the problem in their own terms.

Every tag and event tag a stored person carries is also in the book's own
lists: adding or replacing a person registers any it is missing, in name
order.
"""

from typing import Iterable, List, Optional, Protocol, Tuple

from addressbook.exceptions import DuplicateEntryError, EntityKind, EntryNotFoundError
from addressbook.model.person import Person
from addressbook.model.tag import EventTag, Tag


class ReadOnlyAddressBook(Protocol):
    """Read-only view of an address book."""

    def get_tag_list(self) -> Tuple[Tag, ...]: ...

    def get_event_tag_list(self) -> Tuple[EventTag, ...]: ...

    def get_person_list(self) -> Tuple[Person, ...]: ...


class AddressBook:
    """Address book holding unique tags, event tags and persons."""

    def __init__(self, to_be_copied: Optional[ReadOnlyAddressBook] = None):
        self._tags: List[Tag] = []
        self._event_tags: List[EventTag] = []
        self._persons: List[Person] = []
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # ─── Bulk Replacement ─────────────────────────────────────────────────

    def set_tags(self, tags: Iterable[Tag]) -> None:
        """Replace all tags. Raises DuplicateEntryError if ``tags`` repeats one."""
        tags = list(tags)
        if len(set(tags)) != len(tags):
            raise DuplicateEntryError(EntityKind.TAG)
        self._tags = tags

    def set_event_tags(self, event_tags: Iterable[EventTag]) -> None:
        """Replace all event tags. Raises DuplicateEntryError on repeats."""
        event_tags = list(event_tags)
        if len(set(event_tags)) != len(event_tags):
            raise DuplicateEntryError(EntityKind.EVENT_TAG)
        self._event_tags = event_tags

    def set_persons(self, persons: Iterable[Person]) -> None:
        """Replace all persons. Raises DuplicateEntryError if two share a name."""
        persons = list(persons)
        for i, person in enumerate(persons):
            if any(person.is_same_person(other) for other in persons[i + 1:]):
                raise DuplicateEntryError(EntityKind.PERSON)
        self._persons = persons
        for person in persons:
            self._register_tags(person)

    def reset_data(self, new_data: ReadOnlyAddressBook) -> None:
        """Replace the contents of this book with ``new_data``."""
        self.set_tags(new_data.get_tag_list())
        self.set_event_tags(new_data.get_event_tag_list())
        self.set_persons(new_data.get_person_list())

    # ─── Tags ─────────────────────────────────────────────────────────────

    def has_tag(self, tag: Tag) -> bool:
        return tag in self._tags

    def add_tag(self, tag: Tag) -> None:
        if self.has_tag(tag):
            raise DuplicateEntryError(EntityKind.TAG)
        self._tags.append(tag)

    # ─── Event Tags ───────────────────────────────────────────────────────

    def has_event_tag(self, event_tag: EventTag) -> bool:
        return event_tag in self._event_tags

    def add_event_tag(self, event_tag: EventTag) -> None:
        if self.has_event_tag(event_tag):
            raise DuplicateEntryError(EntityKind.EVENT_TAG)
        self._event_tags.append(event_tag)

    # ─── Persons ──────────────────────────────────────────────────────────

    def has_person(self, person: Person) -> bool:
        """Return True if a person with the same identity is in the book."""
        return any(existing.is_same_person(person) for existing in self._persons)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicateEntryError(EntityKind.PERSON)
        self._persons.append(person)
        self._register_tags(person)

    def set_person(self, target: Person, edited_person: Person) -> None:
        """Replace ``target`` with ``edited_person``, keeping its position.

        Raises:
            EntryNotFoundError: ``target`` is not in the book.
            DuplicateEntryError: ``edited_person`` clashes with another person.
        """
        try:
            index = self._persons.index(target)
        except ValueError:
            raise EntryNotFoundError(EntityKind.PERSON) from None

        if not target.is_same_person(edited_person) and self.has_person(edited_person):
            raise DuplicateEntryError(EntityKind.PERSON)
        self._persons[index] = edited_person
        self._register_tags(edited_person)

    def _register_tags(self, person: Person) -> None:
        for tag in sorted(person.tags, key=lambda t: t.tag_name):
            if not self.has_tag(tag):
                self._tags.append(tag)
        for event_tag in sorted(person.event_tags, key=lambda t: t.tag_name):
            if not self.has_event_tag(event_tag):
                self._event_tags.append(event_tag)

    def remove_person(self, key: Person) -> None:
        try:
            self._persons.remove(key)
        except ValueError:
            raise EntryNotFoundError(EntityKind.PERSON) from None

    # ─── Read Accessors ───────────────────────────────────────────────────

    def get_tag_list(self) -> Tuple[Tag, ...]:
        return tuple(self._tags)

    def get_event_tag_list(self) -> Tuple[EventTag, ...]:
        return tuple(self._event_tags)

    def get_person_list(self) -> Tuple[Person, ...]:
        return tuple(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return (
            self._tags == other._tags
            and self._event_tags == other._event_tags
            and self._persons == other._persons
        )

    def __repr__(self) -> str:
        return (
            f"AddressBook(tags={len(self._tags)}, event_tags={len(self._event_tags)}, "
            f"persons={len(self._persons)})"
        )
