"""
Address Book Core
=================

Converts an in-memory address book (persons, tags, event tags) to and from
its persisted JSON document, rejecting duplicates and malformed records.
"""

__version__ = "0.1.0"
