# connectify/core/predicates.py

"""Reusable filters for the people and company views."""

from .entities import Company, Person


class _KeywordsPredicate:
    """Base class: matches when any keyword appears as a whole word in a field."""

    def __init__(self, keywords):
        self.keywords = tuple(keywords)

    def _field_value(self, entity) -> str:
        raise NotImplementedError

    def __call__(self, entity) -> bool:
        words = self._field_value(entity).lower().split()
        return any(keyword.lower() in words for keyword in self.keywords)

    def __eq__(self, other):
        return type(other) is type(self) and other.keywords == self.keywords

    def __hash__(self):
        return hash((type(self), self.keywords))

    def __repr__(self):
        return f"{type(self).__name__}({list(self.keywords)!r})"


class NameContainsKeywordsPredicate(_KeywordsPredicate):
    """Works for both people and companies."""

    def _field_value(self, entity) -> str:
        return entity.name


class TagContainsKeywordsPredicate(_KeywordsPredicate):
    def _field_value(self, entity: Person) -> str:
        return " ".join(entity.tags)


class IndustryContainsKeywordsPredicate(_KeywordsPredicate):
    def _field_value(self, entity: Company) -> str:
        return entity.industry
