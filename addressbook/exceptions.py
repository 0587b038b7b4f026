"""
Address Book Exceptions
=======================

Failure types raised while converting between the JSON document and the
in-memory model.

- IllegalValueError: shared "illegal value" category for import failures
- MalformedRecordError: a record's fields cannot become a model entity
- DuplicateEntityError: an entity already exists in the model being built
- DataLoadingError: the storage layer could not load a document
- DuplicateEntryError / EntryNotFoundError: model-level guard failures

Callers branch on the exception type and its ``kind``, never on the
message text. Messages are user-facing.
"""

from enum import StrEnum


class EntityKind(StrEnum):
    """The three entity kinds held by an address book."""
    TAG = "tag"
    EVENT_TAG = "event_tag"
    PERSON = "person"


MESSAGE_DUPLICATE_PERSON = "Persons list contains duplicate person(s)."
MESSAGE_DUPLICATE_TAG = "Tags list contains duplicate tag(s)."
MESSAGE_DUPLICATE_EVENT_TAG = "Events tag list contains duplicate event tag(s)."

DUPLICATE_MESSAGES = {
    EntityKind.TAG: MESSAGE_DUPLICATE_TAG,
    EntityKind.EVENT_TAG: MESSAGE_DUPLICATE_EVENT_TAG,
    EntityKind.PERSON: MESSAGE_DUPLICATE_PERSON,
}


# =============================================================================
# IMPORT FAILURES
# =============================================================================


class IllegalValueError(Exception):
    """Raised when document data violates a model constraint."""

    pass


class MalformedRecordError(IllegalValueError):
    """Raised by a record adapter when its fields cannot be converted."""

    def __init__(self, kind: EntityKind, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail


class DuplicateEntityError(IllegalValueError):
    """Raised when an imported entity already exists in the model."""

    def __init__(self, kind: EntityKind):
        super().__init__(DUPLICATE_MESSAGES[kind])
        self.kind = kind


# =============================================================================
# STORAGE FAILURES
# =============================================================================


class DataLoadingError(Exception):
    """Raised when a stored address book cannot be read or parsed."""

    pass


# =============================================================================
# MODEL GUARDS
# =============================================================================


class DuplicateEntryError(Exception):
    """Raised when an insert would put a duplicate entry into the model."""

    def __init__(self, kind: EntityKind):
        super().__init__(f"Operation would result in duplicate {kind.value.replace('_', ' ')}s")
        self.kind = kind


class EntryNotFoundError(Exception):
    """Raised when an operation targets an entry the model does not hold."""

    def __init__(self, kind: EntityKind):
        super().__init__(f"Cannot find the {kind.value.replace('_', ' ')}")
        self.kind = kind
