# connectify/core/address_book.py

import logging
from typing import Callable, List

from .entities import Company, Person
from .errors import DuplicateEntityError, EntityNotFoundError, require_non_null

logger = logging.getLogger(__name__)


class AddressBook:
    """
    The canonical, unfiltered store of people and companies.

    Duplicates (by name) are rejected on add and edit. After every mutation the
    registered listeners are called synchronously, which is how the filtered
    views and the GUI models stay in sync with the store.
    """

    def __init__(self, to_be_copied=None):
        self._persons: List[Person] = []
        self._companies: List[Company] = []
        self._listeners: List[Callable[[], None]] = []
        if to_be_copied is not None:
            self.reset_data(to_be_copied)

    # --- Listeners ---

    def add_listener(self, listener: Callable[[], None]):
        require_non_null(listener)
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener()

    # --- Wholesale replacement ---

    def set_persons(self, persons):
        self._persons = self._checked_unique(persons, Person.is_same_person, "person")
        self._notify()

    def set_companies(self, companies):
        self._companies = self._checked_unique(companies, Company.is_same_company, "company")
        self._notify()

    def reset_data(self, new_data):
        """Replaces all people and companies with those of ``new_data``."""
        require_non_null(new_data)
        persons = self._checked_unique(new_data.get_person_list(), Person.is_same_person, "person")
        companies = self._checked_unique(new_data.get_company_list(), Company.is_same_company, "company")
        self._persons = persons
        self._companies = companies
        logger.debug(f"Address book reset with {len(persons)} people and {len(companies)} companies.")
        self._notify()

    @staticmethod
    def _checked_unique(entities, is_same, kind: str) -> list:
        checked = []
        for entity in entities:
            if any(is_same(existing, entity) for existing in checked):
                raise DuplicateEntityError(f"Duplicate {kind}: {entity.name}")
            checked.append(entity)
        return checked

    # --- People ---

    def has_person(self, person: Person) -> bool:
        require_non_null(person)
        return any(p.is_same_person(person) for p in self._persons)

    def add_person(self, person: Person):
        if self.has_person(person):
            raise DuplicateEntityError(f"This person already exists in the address book: {person.name}")
        self._persons.append(person)
        self._notify()

    def set_person(self, target: Person, edited_person: Person):
        require_non_null(target, edited_person)
        index = self._index_of(self._persons, target, "person")
        if not target.is_same_person(edited_person) and self.has_person(edited_person):
            raise DuplicateEntityError(f"This person already exists in the address book: {edited_person.name}")
        self._persons[index] = edited_person
        self._notify()

    def remove_person(self, key: Person):
        require_non_null(key)
        del self._persons[self._index_of(self._persons, key, "person")]
        self._notify()

    # --- Companies ---

    def has_company(self, company: Company) -> bool:
        require_non_null(company)
        return any(c.is_same_company(company) for c in self._companies)

    def add_company(self, company: Company):
        if self.has_company(company):
            raise DuplicateEntityError(f"This company already exists in the address book: {company.name}")
        self._companies.append(company)
        self._notify()

    def set_company(self, target: Company, edited_company: Company):
        require_non_null(target, edited_company)
        index = self._index_of(self._companies, target, "company")
        if not target.is_same_company(edited_company) and self.has_company(edited_company):
            raise DuplicateEntityError(
                f"This company already exists in the address book: {edited_company.name}")
        self._companies[index] = edited_company
        self._notify()

    def remove_company(self, key: Company):
        require_non_null(key)
        del self._companies[self._index_of(self._companies, key, "company")]
        self._notify()

    @staticmethod
    def _index_of(entities: list, target, kind: str) -> int:
        for i, entity in enumerate(entities):
            if entity == target:
                return i
        raise EntityNotFoundError(f"The {kind} '{target.name}' is not in the address book.")

    # --- Read-only access ---

    def get_person_list(self) -> tuple:
        return tuple(self._persons)

    def get_company_list(self) -> tuple:
        return tuple(self._companies)

    def snapshot(self) -> "AddressBook":
        """Returns an independent copy of the current contents, without listeners."""
        return AddressBook(self)

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons and self._companies == other._companies

    def __repr__(self):
        return f"AddressBook(persons={len(self._persons)}, companies={len(self._companies)})"
