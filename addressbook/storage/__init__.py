"""
Address Book Storage Package
============================

JSON document converter, per-record adapters, and file storage.
"""

from .adapted import JsonAdaptedTag, JsonAdaptedEventTag, JsonAdaptedPerson
from .serializable_address_book import JsonSerializableAddressBook
from .json_storage import JsonAddressBookStorage

__all__ = [
    "JsonAdaptedTag",
    "JsonAdaptedEventTag",
    "JsonAdaptedPerson",
    "JsonSerializableAddressBook",
    "JsonAddressBookStorage",
]
