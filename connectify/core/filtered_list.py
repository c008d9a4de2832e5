# connectify/core/filtered_list.py

from typing import Callable, List

from .errors import require_non_null


def PREDICATE_SHOW_ALL(entity) -> bool:
    return True


class FilteredList:
    """
    A live, predicate-filtered view over one of the address book's lists.

    The view subscribes to its source when it is created. Whenever the source
    mutates or the predicate changes, the contents are re-derived before control
    returns to the caller, and then the view's own listeners (the GUI models)
    are notified.
    """

    def __init__(self, source, get_items: Callable[[], tuple], predicate=PREDICATE_SHOW_ALL):
        """
        Args:
            source: The AddressBook to observe.
            get_items: Returns the source's current items, e.g. ``book.get_person_list``.
            predicate: The initial filter; shows everything by default.
        """
        require_non_null(source, get_items, predicate)
        self._get_items = get_items
        self._predicate = predicate
        self._items: List = []
        self._listeners: List[Callable[[], None]] = []
        source.add_listener(self._refresh)
        self._refilter()

    @property
    def predicate(self):
        return self._predicate

    def set_predicate(self, predicate):
        require_non_null(predicate)
        self._predicate = predicate
        self._refresh()

    def add_listener(self, listener: Callable[[], None]):
        require_non_null(listener)
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _refilter(self):
        self._items = [item for item in self._get_items() if self._predicate(item)]

    def _refresh(self):
        self._refilter()
        for listener in list(self._listeners):
            listener()

    def as_list(self) -> list:
        """Returns a copy of the current filtered contents, in source order."""
        return list(self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(list(self._items))

    def __getitem__(self, index):
        return self._items[index]

    def __eq__(self, other):
        if other is self:
            return True
        if isinstance(other, FilteredList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self):
        return f"FilteredList({self._items!r})"
