# connectify/core/model_manager.py

import logging
from enum import Enum
from pathlib import Path

from .address_book import AddressBook
from .entities import Company, Person
from .errors import InvalidEntityError, require_non_null
from .filtered_list import PREDICATE_SHOW_ALL, FilteredList
from .user_prefs import GuiSettings, UserPrefs

logger = logging.getLogger(__name__)


class EntityType(Enum):
    """Which list the UI is currently showing."""
    PEOPLE = "people"
    COMPANIES = "companies"
    ALL = "all"


class ModelManager:
    """
    The in-memory model of the address book.

    Besides the address book and the user prefs, the model tracks the current
    entity type (people, companies or all). Every mutation and filter update
    sets it, and ``get_filtered_entity_list`` uses it to decide which list the
    caller gets back.
    """

    def __init__(self, address_book=None, user_prefs=None):
        address_book = address_book if address_book is not None else AddressBook()
        user_prefs = user_prefs if user_prefs is not None else UserPrefs()
        logger.debug(f"Initializing with address book: {address_book!r} and user prefs {user_prefs!r}")

        self.address_book = AddressBook(address_book)
        self.user_prefs = user_prefs.copy()
        self.filtered_persons = FilteredList(self.address_book, self.address_book.get_person_list)
        self.filtered_companies = FilteredList(self.address_book, self.address_book.get_company_list)
        self.curr_entity = EntityType.COMPANIES

    # --- User prefs ---

    def set_user_prefs(self, user_prefs: UserPrefs):
        require_non_null(user_prefs)
        self.user_prefs.reset_data(user_prefs)

    def get_user_prefs(self) -> UserPrefs:
        return self.user_prefs

    def get_gui_settings(self) -> GuiSettings:
        return self.user_prefs.gui_settings

    def set_gui_settings(self, gui_settings: GuiSettings):
        require_non_null(gui_settings)
        self.user_prefs.gui_settings = gui_settings

    def get_address_book_file_path(self) -> Path:
        return self.user_prefs.address_book_file_path

    def set_address_book_file_path(self, address_book_file_path: Path):
        require_non_null(address_book_file_path)
        self.user_prefs.address_book_file_path = Path(address_book_file_path)

    # --- Address book ---

    def set_address_book(self, address_book):
        self.address_book.reset_data(address_book)

    def get_address_book(self) -> AddressBook:
        return self.address_book

    def has_person(self, person: Person) -> bool:
        require_non_null(person)
        return self.address_book.has_person(person)

    def has_company(self, company: Company) -> bool:
        require_non_null(company)
        return self.address_book.has_company(company)

    def delete_person(self, target: Person):
        self.address_book.remove_person(target)
        self.curr_entity = EntityType.PEOPLE

    def add_person(self, person: Person):
        self.address_book.add_person(person)
        self.update_filtered_person_list(PREDICATE_SHOW_ALL)
        self.curr_entity = EntityType.PEOPLE

    def set_person(self, target: Person, edited_person: Person):
        require_non_null(target, edited_person)
        self.address_book.set_person(target, edited_person)
        self.curr_entity = EntityType.PEOPLE

    def add_company(self, company: Company):
        self.address_book.add_company(company)
        # The people filter is cleared here too, so the new company's people show up.
        self.update_filtered_person_list(PREDICATE_SHOW_ALL)
        self.curr_entity = EntityType.COMPANIES

    def delete_company(self, target: Company):
        self.address_book.remove_company(target)
        self.curr_entity = EntityType.COMPANIES

    def set_company(self, target: Company, edited_company: Company):
        require_non_null(target, edited_company)
        self.address_book.set_company(target, edited_company)
        self.curr_entity = EntityType.COMPANIES

    # --- Filtered lists ---

    def get_filtered_person_list(self) -> FilteredList:
        return self.filtered_persons

    def get_filtered_company_list(self) -> FilteredList:
        return self.filtered_companies

    def update_filtered_person_list(self, predicate):
        require_non_null(predicate)
        self.filtered_persons.set_predicate(predicate)
        self.curr_entity = EntityType.PEOPLE

    def update_filtered_company_list(self, predicate):
        require_non_null(predicate)
        self.filtered_companies.set_predicate(predicate)
        self.curr_entity = EntityType.COMPANIES

    def update_to_all_entities(self):
        self.curr_entity = EntityType.ALL

    def get_curr_entity(self) -> str:
        return self.curr_entity.value

    def set_curr_entity(self, entity_type: str):
        """
        Sets the current entity type from its name.

        Raises:
            InvalidEntityError: If ``entity_type`` is not exactly "people", "companies" or "all".
        """
        try:
            self.curr_entity = EntityType(entity_type)
        except ValueError:
            raise InvalidEntityError(entity_type, [e.value for e in EntityType]) from None

    def get_filtered_entity_list(self):
        """
        Returns the list matching the current entity type.

        For people and companies this is the live filtered view itself. For
        "all" it is a new list holding the filtered companies followed by the
        filtered people, which does not update afterwards.
        """
        if self.curr_entity is EntityType.PEOPLE:
            logger.info("Returning list of filtered persons")
            return self.filtered_persons
        if self.curr_entity is EntityType.COMPANIES:
            logger.info("Returning list of filtered companies")
            return self.filtered_companies
        logger.info("Returning list of all entities")
        return self.filtered_companies.as_list() + self.filtered_persons.as_list()

    # --- Counts ---

    def get_number_of_entities(self) -> int:
        return len(self.get_filtered_entity_list())

    def get_number_of_people(self) -> int:
        return len(self.filtered_persons)

    def get_number_of_companies(self) -> int:
        return len(self.filtered_companies)

    def is_empty(self) -> bool:
        return self.get_number_of_entities() == 0

    def __eq__(self, other):
        if other is self:
            return True
        if not isinstance(other, ModelManager):
            return False
        return (self.address_book == other.address_book
                and self.user_prefs == other.user_prefs
                and self.filtered_persons == other.filtered_persons
                and self.filtered_companies == other.filtered_companies)

    def __str__(self):
        return (f"There are {self.get_number_of_entities()} entities in the address book.\n"
                f"There are {self.get_number_of_people()} people in the address book.\n"
                f"There are {self.get_number_of_companies()} companies in the address book.\n")
