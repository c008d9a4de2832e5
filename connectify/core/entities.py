# connectify/core/entities.py

import re
from dataclasses import dataclass, field
from typing import Union

from .errors import IllegalValueError

# Lenient checks: the address book stores whatever the user typed, we only
# reject values that are clearly not an email, phone number or tag.
_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")
_PHONE_PATTERN = re.compile(r"^\+?[\d\s-]+$")
_TAG_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


def _validate_name(name: str, entity_kind: str):
    if not isinstance(name, str) or not name.strip():
        raise IllegalValueError(f"{entity_kind} name must not be blank.")


def _validate_text(entity, field_names):
    for field_name in field_names:
        if not isinstance(getattr(entity, field_name), str):
            raise IllegalValueError(f"{field_name.capitalize()} must be text.")


def _validate_email(email: str):
    if email and not _EMAIL_PATTERN.match(email):
        raise IllegalValueError(f"Invalid email address: '{email}'.")


def _validate_phone(phone: str):
    if phone and (not _PHONE_PATTERN.match(phone) or sum(c.isdigit() for c in phone) < 3):
        raise IllegalValueError(f"Invalid phone number: '{phone}'. It needs at least 3 digits.")


def _normalize_tags(tags) -> tuple:
    """Keeps the first occurrence of each tag, in the order given."""
    if isinstance(tags, str):
        raise IllegalValueError(f"Tags must be given as a list of tag names, not the string '{tags}'.")
    normalized = []
    for tag in tags:
        if not isinstance(tag, str) or not _TAG_PATTERN.match(tag):
            raise IllegalValueError(f"Tag names should be alphanumeric: '{tag}'.")
        if tag not in normalized:
            normalized.append(tag)
    return tuple(normalized)


@dataclass(frozen=True)
class Person:
    """
    A person in the address book.

    Instances are immutable values. Two people are the *same person* (and thus
    duplicates in the address book) when their names match, while ``==``
    compares every field.
    """
    name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    note: str = ""
    tags: tuple = field(default_factory=tuple)

    def __post_init__(self):
        _validate_name(self.name, "Person")
        _validate_text(self, ("phone", "email", "address", "note"))
        _validate_email(self.email)
        _validate_phone(self.phone)
        # frozen dataclass, so the normalized tuple has to be written this way
        object.__setattr__(self, "tags", _normalize_tags(self.tags))

    def is_same_person(self, other) -> bool:
        """Returns True if both people have the same name."""
        if other is self:
            return True
        return isinstance(other, Person) and other.name == self.name

    def with_note(self, note: str) -> "Person":
        return Person(self.name, self.phone, self.email, self.address, note, self.tags)

    def __str__(self):
        parts = [self.name]
        if self.phone:
            parts.append(f"Phone: {self.phone}")
        if self.email:
            parts.append(f"Email: {self.email}")
        if self.address:
            parts.append(f"Address: {self.address}")
        if self.tags:
            parts.append("Tags: " + ", ".join(self.tags))
        return "; ".join(parts)


@dataclass(frozen=True)
class Company:
    """
    A company in the address book, together with the people that belong to it.

    Like Person, a company's identity is its name.
    """
    name: str
    industry: str = ""
    location: str = ""
    description: str = ""
    website: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    people: tuple = field(default_factory=tuple)

    def __post_init__(self):
        _validate_name(self.name, "Company")
        _validate_text(self, ("industry", "location", "description", "website", "email", "phone", "address"))
        _validate_email(self.email)
        _validate_phone(self.phone)
        people = tuple(self.people)
        if not all(isinstance(p, Person) for p in people):
            raise IllegalValueError("A company can only hold Person entries.")
        object.__setattr__(self, "people", people)

    def is_same_company(self, other) -> bool:
        """Returns True if both companies have the same name."""
        if other is self:
            return True
        return isinstance(other, Company) and other.name == self.name

    def with_person(self, person: Person) -> "Company":
        """Returns a copy of this company with ``person`` appended to its people."""
        if any(p.is_same_person(person) for p in self.people):
            return self
        return Company(
            self.name, self.industry, self.location, self.description, self.website,
            self.email, self.phone, self.address, self.people + (person,)
        )

    def __str__(self):
        parts = [self.name]
        if self.industry:
            parts.append(f"Industry: {self.industry}")
        if self.location:
            parts.append(f"Location: {self.location}")
        if self.phone:
            parts.append(f"Phone: {self.phone}")
        parts.append(f"People: {len(self.people)}")
        return "; ".join(parts)


# The two variants of anything the address book can display.
Entity = Union[Person, Company]
