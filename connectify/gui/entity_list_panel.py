# connectify/gui/entity_list_panel.py

from PySide6.QtWidgets import (
    QAbstractItemView, QLabel, QListView, QListWidget, QTabWidget, QToolBox, QVBoxLayout, QWidget
)

from connectify.core.model_manager import ModelManager
from connectify.core.render import render_entity
from .entity_list_model import EntityListModel

TAB_ALL, TAB_PEOPLE, TAB_COMPANIES = 0, 1, 2


def get_mode(mode_name: str) -> int:
    """Maps the model's current entity name to the tab that shows it."""
    if mode_name == "people":
        return TAB_PEOPLE
    if mode_name == "companies":
        return TAB_COMPANIES
    return TAB_ALL


def _make_list_view(model: EntityListModel) -> QListView:
    view = QListView()
    view.setModel(model)
    view.setSelectionMode(QAbstractItemView.SingleSelection)
    view.setEditTriggers(QAbstractItemView.NoEditTriggers)
    view.setWordWrap(True)
    view.setAlternatingRowColors(True)
    return view


class EntityListPanel(QTabWidget):
    """
    The three tabs of entities.

    "All" is an accordion with one page per filtered company listing the
    company's people, "People" and "Companies" are plain lists bound to the
    model's filtered views.
    """

    def __init__(self, model: ModelManager, parent=None):
        super().__init__(parent)
        self._model = model

        self.person_model = EntityListModel(model.get_filtered_person_list(), self)
        self.company_model = EntityListModel(model.get_filtered_company_list(), self)

        self.company_accordion = QToolBox()
        all_tab = QWidget()
        all_layout = QVBoxLayout(all_tab)
        all_layout.setContentsMargins(0, 0, 0, 0)
        all_layout.addWidget(self.company_accordion)

        self.people_view = _make_list_view(self.person_model)
        self.companies_view = _make_list_view(self.company_model)

        self.addTab(all_tab, "All")
        self.addTab(self.people_view, "People")
        self.addTab(self.companies_view, "Companies")
        self.setTabsClosable(False)

        self.company_model.modelReset.connect(self.rebuild_accordion)
        self.rebuild_accordion()
        self.select_mode(model.get_curr_entity())

    def detach_models(self):
        """Disconnects both list models from the filtered views they mirror."""
        self.person_model.detach()
        self.company_model.detach()

    def select_mode(self, mode_name: str):
        self.setCurrentIndex(get_mode(mode_name))

    def rebuild_accordion(self):
        """Recreates one accordion page per filtered company."""
        while self.company_accordion.count():
            page = self.company_accordion.widget(0)
            self.company_accordion.removeItem(0)
            page.deleteLater()

        companies = self._model.get_filtered_company_list().as_list()
        if not companies:
            self.company_accordion.addItem(QLabel("No companies to show."), "Nothing here yet")
            return

        for company in companies:
            people_list = QListWidget()
            for i, person in enumerate(company.people, start=1):
                card = render_entity(person, i)
                people_list.addItem("\n".join((card.heading,) + card.lines))
            if not company.people:
                people_list.addItem("No people recorded for this company.")
            self.company_accordion.addItem(people_list, company.name)

    def selected_row(self):
        """
        Returns ``(tab, row)`` for the selected entry in the People or Companies tab.

        ``row`` is None when nothing is selected or the All tab is showing.
        """
        tab = self.currentIndex()
        view = {TAB_PEOPLE: self.people_view, TAB_COMPANIES: self.companies_view}.get(tab)
        if view is None:
            return tab, None
        indexes = view.selectionModel().selectedIndexes()
        return tab, (indexes[0].row() if indexes else None)
