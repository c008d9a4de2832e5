# connectify/core/commands.py

"""
Index-based operations shared by the GUI and the CLI.

Users refer to entries by their 1-based position in the list they are looking
at, so these helpers resolve that position against the right filtered list
before calling into the model.
"""

import logging

from .entities import Company, Person
from .errors import CommandError
from .model_manager import ModelManager
from .predicates import (
    IndustryContainsKeywordsPredicate, NameContainsKeywordsPredicate, TagContainsKeywordsPredicate
)

logger = logging.getLogger(__name__)

MESSAGE_INVALID_INDEX = "The index {} is invalid. It must be between 1 and {}."

# Fields each find command can search, mapped to the predicate that searches it.
PERSON_SEARCH_FIELDS = {
    "name": NameContainsKeywordsPredicate,
    "tag": TagContainsKeywordsPredicate,
}
COMPANY_SEARCH_FIELDS = {
    "name": NameContainsKeywordsPredicate,
    "industry": IndustryContainsKeywordsPredicate,
}


def _resolve(entities, index: int):
    if not 1 <= index <= len(entities):
        raise CommandError(MESSAGE_INVALID_INDEX.format(index, len(entities)))
    return entities[index - 1]


def person_at(model: ModelManager, index: int) -> Person:
    return _resolve(model.get_filtered_person_list().as_list(), index)


def company_at(model: ModelManager, index: int) -> Company:
    return _resolve(model.get_filtered_company_list().as_list(), index)


def delete_person_at(model: ModelManager, index: int) -> Person:
    person = person_at(model, index)
    model.delete_person(person)
    logger.info(f"Deleted person: {person.name}")
    return person


def delete_company_at(model: ModelManager, index: int) -> Company:
    company = company_at(model, index)
    model.delete_company(company)
    logger.info(f"Deleted company: {company.name}")
    return company


def note_person_at(model: ModelManager, index: int, note: str) -> Person:
    """Replaces the note of the person at ``index``. An empty note removes it."""
    person = person_at(model, index)
    edited = person.with_note(note)
    model.set_person(person, edited)
    return edited


def _search_predicate(fields, by: str, keywords):
    if not keywords:
        raise CommandError("Please give at least one keyword to search for.")
    if by not in fields:
        raise CommandError(f"Cannot search by '{by}'. Use one of: {', '.join(fields)}.")
    return fields[by](keywords)


def find_people(model: ModelManager, keywords, by: str = "name") -> int:
    """Shows the people whose ``by`` field (name or tag) contains any of the keywords."""
    model.update_filtered_person_list(_search_predicate(PERSON_SEARCH_FIELDS, by, keywords))
    return model.get_number_of_people()


def find_companies(model: ModelManager, keywords, by: str = "name") -> int:
    model.update_filtered_company_list(_search_predicate(COMPANY_SEARCH_FIELDS, by, keywords))
    return model.get_number_of_companies()
