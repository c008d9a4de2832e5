# connectify/gui/action_controller.py

import logging
from typing import Callable

from PySide6.QtCore import QObject, Signal, Slot

from connectify.core.commands import (
    delete_company_at, delete_person_at, find_companies, find_people, note_person_at
)
from connectify.core.entities import Company, Person
from connectify.core.errors import ConnectifyError
from connectify.core.filtered_list import PREDICATE_SHOW_ALL
from connectify.core.model_manager import ModelManager
from connectify.core.session import Session

logger = logging.getLogger(__name__)


class ActionController(QObject):
    """
    The bridge between the widgets and the model.

    Views call the public slots; the controller runs the operation against the
    ModelManager, saves the address book after every successful change and
    reports back through signals. Domain errors never escape into Qt: they are
    logged and turned into a status line plus a message box.
    """
    model_changed = Signal()
    status_updated = Signal(str, bool)
    show_message_box = Signal(str, str, str)

    def __init__(self, session: Session, parent=None):
        super().__init__(parent)
        self.session = session

    @property
    def model(self) -> ModelManager:
        return self.session.model

    def _run(self, action: Callable[[], str], persist: bool = True) -> bool:
        """Runs ``action`` and reports its result message. Returns True on success."""
        try:
            message = action()
            if persist:
                self.session.save_address_book()
        except ConnectifyError as e:
            logger.warning(f"Command failed: {e}")
            self.status_updated.emit(str(e), True)
            self.show_message_box.emit("critical", "Command Failed", str(e))
            return False
        except OSError as e:
            logger.error(f"Could not save the address book: {e}", exc_info=True)
            self.status_updated.emit(f"Could not save the address book: {e}", True)
            self.show_message_box.emit("critical", "Save Failed", f"Could not save the address book:\n{e}")
            self.model_changed.emit()
            return False

        logger.info(message)
        self.status_updated.emit(message, False)
        self.model_changed.emit()
        return True

    # --- Slots for the main window ---

    @Slot(dict)
    def add_person(self, values: dict) -> bool:
        def action():
            person = Person(
                values["name"], values.get("phone", ""), values.get("email", ""), values.get("address", ""),
                tags=tuple(values.get("tags", "").split()),
            )
            self.model.add_person(person)
            return f"New person added: {person.name}"
        return self._run(action)

    @Slot(dict)
    def add_company(self, values: dict) -> bool:
        def action():
            company = Company(
                values["name"], values.get("industry", ""), values.get("location", ""),
                values.get("description", ""), values.get("website", ""), values.get("email", ""),
                values.get("phone", ""), values.get("address", ""),
            )
            self.model.add_company(company)
            return f"New company added: {company.name}"
        return self._run(action)

    @Slot(int)
    def delete_person(self, index: int) -> bool:
        return self._run(lambda: f"Deleted person: {delete_person_at(self.model, index).name}")

    @Slot(int)
    def delete_company(self, index: int) -> bool:
        return self._run(lambda: f"Deleted company: {delete_company_at(self.model, index).name}")

    @Slot(int, str)
    def set_note(self, index: int, note: str) -> bool:
        def action():
            person = note_person_at(self.model, index, note)
            if note:
                return f"Added note to person: {person.name}"
            return f"Removed note from person: {person.name}"
        return self._run(action)

    @Slot(str, list)
    def find(self, target: str, keywords: list) -> bool:
        if target == "companies":
            return self._run(lambda: f"{find_companies(self.model, keywords)} companies listed.", persist=False)
        return self._run(lambda: f"{find_people(self.model, keywords)} people listed.", persist=False)

    @Slot(str)
    def list_entities(self, entity_type: str) -> bool:
        """Shows everything of one kind: clears that kind's filter and switches to it."""
        def action():
            if entity_type == "people":
                self.model.update_filtered_person_list(PREDICATE_SHOW_ALL)
            elif entity_type == "companies":
                self.model.update_filtered_company_list(PREDICATE_SHOW_ALL)
            else:
                self.model.set_curr_entity(entity_type)
            return f"Listed all {entity_type}."
        return self._run(action, persist=False)

    @Slot()
    def show_all(self) -> bool:
        def action():
            self.model.update_to_all_entities()
            return (f"Showing {self.model.get_number_of_companies()} companies and "
                    f"{self.model.get_number_of_people()} people.")
        return self._run(action, persist=False)
