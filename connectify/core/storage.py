# connectify/core/storage.py

import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

from .address_book import AddressBook
from .entities import Company, Person
from .errors import DataLoadingError, DuplicateEntityError, IllegalValueError

logger = logging.getLogger(__name__)

MISSING_FIELD_MESSAGE_FORMAT = "{} field is missing!"
WRONG_TYPE_MESSAGE_FORMAT = "{} field must be {}!"

PERSON_FIELDS = ("name", "phone", "email", "address", "note")
COMPANY_FIELDS = ("name", "industry", "location", "description", "website", "email", "phone", "address")


def _require_fields(data: Dict[str, Any], required, kind: str):
    if not isinstance(data, dict):
        raise IllegalValueError(f"Stored {kind} is not a JSON object.")
    for key in required:
        if data.get(key) is None:
            raise IllegalValueError(MISSING_FIELD_MESSAGE_FORMAT.format(key.capitalize()))


def _text(data: Dict[str, Any], key: str) -> str:
    """Returns a stored text field, "" when it is absent or null."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise IllegalValueError(WRONG_TYPE_MESSAGE_FORMAT.format(key.capitalize(), "a string"))
    return value


def _list(data: Dict[str, Any], key: str) -> list:
    """Returns a stored JSON array, [] when it is absent or null."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise IllegalValueError(WRONG_TYPE_MESSAGE_FORMAT.format(key.capitalize(), "a list"))
    return value


# --- JSON adapters ---

def person_to_dict(person: Person) -> Dict[str, Any]:
    return {
        "name": person.name,
        "phone": person.phone,
        "email": person.email,
        "address": person.address,
        "note": person.note,
        "tags": list(person.tags),
    }


def person_from_dict(data: Dict[str, Any]) -> Person:
    """
    Converts a stored person back into a Person.

    Only the name is mandatory, older files may lack the other fields.

    Raises:
        IllegalValueError: If the name is missing, a field has the wrong JSON type
            (e.g. a number for the phone, a string for the tags) or a value is invalid.
    """
    _require_fields(data, ("name",), "person")
    return Person(
        *(_text(data, key) for key in PERSON_FIELDS),
        tags=tuple(_list(data, "tags")),
    )


def company_to_dict(company: Company) -> Dict[str, Any]:
    data = {key: getattr(company, key) for key in COMPANY_FIELDS}
    data["people"] = [person_to_dict(p) for p in company.people]
    return data


def company_from_dict(data: Dict[str, Any]) -> Company:
    """
    Converts a stored company back into a Company.

    Raises:
        IllegalValueError: If any company field is missing, e.g. "Phone field is missing!",
            or holds something other than a string.
    """
    _require_fields(data, COMPANY_FIELDS, "company")
    people = tuple(person_from_dict(p) for p in _list(data, "people"))
    return Company(*(_text(data, key) for key in COMPANY_FIELDS), people=people)


def address_book_to_dict(book) -> Dict[str, Any]:
    return {
        "persons": [person_to_dict(p) for p in book.get_person_list()],
        "companies": [company_to_dict(c) for c in book.get_company_list()],
    }


def address_book_from_dict(data: Dict[str, Any]) -> AddressBook:
    if not isinstance(data, dict):
        raise IllegalValueError("The address book file does not contain a JSON object.")
    book = AddressBook()
    try:
        book.set_persons([person_from_dict(p) for p in _list(data, "persons")])
        book.set_companies([company_from_dict(c) for c in _list(data, "companies")])
    except DuplicateEntityError as e:
        raise IllegalValueError(f"The address book file contains duplicates: {e}") from e
    return book


# --- File storage ---

class JsonAddressBookStorage:
    """Reads and writes the address book as a single JSON file."""

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)

    def read_address_book(self) -> Optional[AddressBook]:
        """
        Returns the stored address book, or None if the file does not exist yet.

        Raises:
            DataLoadingError: If the file cannot be read, is not UTF-8 or is not valid JSON.
            IllegalValueError: If the JSON holds an invalid person or company.
        """
        if not self.file_path.exists():
            logger.info(f"Address book file not found: {self.file_path}")
            return None
        try:
            with open(self.file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        # ValueError covers both JSONDecodeError and UnicodeDecodeError
        except (OSError, ValueError) as e:
            raise DataLoadingError(f"Could not load address book from {self.file_path}: {e}") from e
        book = address_book_from_dict(data)
        logger.info(f"Loaded {len(book.get_person_list())} people and "
                    f"{len(book.get_company_list())} companies from {self.file_path}")
        return book

    def save_address_book(self, book):
        """
        Writes the address book to disk.

        The previous file is kept as a ``.json.bak`` backup, and the new content
        is written to a temporary file first so a failed save never leaves a
        half-written address book behind.
        """
        self.file_path.parent.mkdir(parents=True, exist_ok=True)
        if self.file_path.exists():
            backup_path = self.file_path.with_suffix(".json.bak")
            shutil.copy(self.file_path, backup_path)
            logger.debug(f"Address book backup created at: {backup_path}")

        fd, tmp_name = tempfile.mkstemp(dir=self.file_path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(address_book_to_dict(book), f, indent=2)
            os.replace(tmp_name, self.file_path)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.info(f"Address book saved to {self.file_path}")


def load(file_path: Path) -> Optional[AddressBook]:
    return JsonAddressBookStorage(file_path).read_address_book()


def save(book, file_path: Path):
    JsonAddressBookStorage(file_path).save_address_book(book)
