"""
JSON File Storage
=================

Reads and writes an AddressBook as a UTF-8 JSON file.

- Missing file → ``None`` (caller decides whether to start empty)
- Unreadable file, invalid JSON, wrong document structure, or illegal
  record values → DataLoadingError chained to the original cause
- Accepts a document wrapped under the ``"addressbook"`` root key; writes
  that wrapper only when ``wrap_root`` is on
- Saves go to a temporary file in the target directory that then replaces
  the target, so a failed save leaves the previous file intact
"""

import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Optional

import structlog
from pydantic import ValidationError

from addressbook.exceptions import DataLoadingError, IllegalValueError
from addressbook.model.address_book import AddressBook, ReadOnlyAddressBook
from addressbook.storage.serializable_address_book import JsonSerializableAddressBook
from config import settings

logger = structlog.get_logger(__name__)


def _unwrap_root(raw: Any) -> Any:
    """Strip the optional ``{"addressbook": {...}}`` wrapper.

    Sibling keys next to the root key are ignored. A root key holding
    anything but an object is passed on and fails document validation.
    """
    root = JsonSerializableAddressBook.ROOT_NAME
    if isinstance(raw, dict) and root in raw:
        return raw[root]
    return raw


class JsonAddressBookStorage:
    """File-backed storage for a single address book."""

    def __init__(
        self,
        file_path: str | Path | None = None,
        wrap_root: Optional[bool] = None,
        indent: Optional[int] = None,
    ):
        self._file_path = Path(file_path or settings.address_book_file_path)
        self._wrap_root = settings.wrap_root if wrap_root is None else wrap_root
        self._indent = settings.json_indent if indent is None else indent

    @property
    def file_path(self) -> Path:
        return self._file_path

    def read_address_book(self, file_path: str | Path | None = None) -> Optional[AddressBook]:
        """
        Load the address book stored at ``file_path`` (default: this storage's path).

        Returns:
            The AddressBook, or None if the file does not exist.

        Raises:
            DataLoadingError: the file cannot be read or holds an invalid document.
        """
        path = Path(file_path) if file_path else self._file_path

        if not path.exists():
            logger.info("address_book_file_not_found", path=str(path))
            return None

        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.error("address_book_read_failed", path=str(path), error=str(exc))
            raise DataLoadingError(f"Could not read address book file {path}: {exc}") from exc

        try:
            document = JsonSerializableAddressBook.from_dict(_unwrap_root(raw))
        except ValidationError as exc:
            logger.error("address_book_structure_invalid", path=str(path), errors=exc.error_count())
            raise DataLoadingError(f"Address book file {path} has an invalid structure") from exc

        try:
            address_book = document.to_model_type()
        except IllegalValueError as exc:
            logger.warning("address_book_illegal_values", path=str(path), error=str(exc))
            raise DataLoadingError(str(exc)) from exc

        logger.info(
            "address_book_loaded",
            path=str(path),
            persons=len(address_book.get_person_list()),
        )
        return address_book

    def save_address_book(
        self,
        source: ReadOnlyAddressBook,
        file_path: str | Path | None = None,
    ) -> Path:
        """
        Write ``source`` to ``file_path`` (default: this storage's path).

        Parent directories are created as needed.

        Returns:
            The path written.
        """
        path = Path(file_path) if file_path else self._file_path

        payload = JsonSerializableAddressBook.from_model(source).to_dict()
        if self._wrap_root:
            payload = {JsonSerializableAddressBook.ROOT_NAME: payload}

        text = json.dumps(payload, ensure_ascii=False, indent=self._indent)

        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            if path.exists():
                shutil.copymode(path, tmp_name)
            os.replace(tmp_name, path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            logger.error("address_book_save_failed", path=str(path))
            raise

        logger.info(
            "address_book_saved",
            path=str(path),
            persons=len(source.get_person_list()),
        )
        return path
