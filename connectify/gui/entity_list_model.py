# connectify/gui/entity_list_model.py

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt
from PySide6.QtGui import QColor

from connectify.core.filtered_list import FilteredList
from connectify.core.render import render_entity

# Badge colours for the two kinds of cards.
KIND_COLORS = {
    "Person": QColor("#5E81AC"),
    "Company": QColor("#FF4F79"),
}

ENTITY_ROLE = int(Qt.UserRole) + 1


class EntityListModel(QAbstractListModel):
    """
    A Qt list model over one of the model's FilteredLists.

    The filtered list pushes a notification after every change to the address
    book or to its predicate; the model answers by resetting itself, so any
    attached view redraws without the controller having to ask for it.
    """

    def __init__(self, filtered_list: FilteredList, parent=None):
        super().__init__(parent)
        self._filtered_list = filtered_list
        self._entities = filtered_list.as_list()
        filtered_list.add_listener(self._on_source_changed)

    def _on_source_changed(self):
        self.beginResetModel()
        self._entities = self._filtered_list.as_list()
        self.endResetModel()

    def detach(self):
        """Stops listening to the filtered list, e.g. when the owning view is destroyed."""
        self._filtered_list.remove_listener(self._on_source_changed)

    # --- Required Methods for QAbstractListModel ---

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._entities)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):
        if not index.isValid() or not 0 <= index.row() < len(self._entities):
            return None

        entity = self._entities[index.row()]
        card = render_entity(entity, index.row() + 1)

        if role == Qt.DisplayRole:
            return "\n".join((card.heading, "  ".join(f"[{b}]" for b in card.badges)) + card.lines)
        if role == Qt.ToolTipRole:
            return str(entity)
        if role == Qt.ForegroundRole:
            return KIND_COLORS.get(card.kind)
        if role == ENTITY_ROLE:
            return entity
        return None

    # --- Custom Public Methods ---

    def entity_at(self, row: int):
        return self._entities[row]
