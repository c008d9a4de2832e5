# connectify/gui/main_window.py

import logging
import sys
from pathlib import Path

from PySide6.QtCore import Slot
from PySide6.QtWidgets import (
    QApplication, QHBoxLayout, QInputDialog, QMainWindow, QMessageBox, QPushButton, QVBoxLayout, QWidget
)

from connectify.core.config_manager import load_or_create_config
from connectify.core.errors import ConnectifyError
from connectify.core.session import Session, start_session
from connectify.core.user_prefs import GuiSettings
from connectify.utils.logger import setup_logging
from .action_controller import ActionController
from .entity_dialog import company_dialog, person_dialog
from .entity_list_panel import TAB_COMPANIES, TAB_PEOPLE, EntityListPanel
from .widgets import SearchBar, StatusWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    The application shell: toolbar buttons, search bar, the entity tabs and a
    status line. All work is delegated to the ActionController.
    """

    def __init__(self, session: Session):
        super().__init__()
        self.session = session
        self.setWindowTitle("Connectify")
        self._restore_geometry(session.model.get_gui_settings())

        self.action_controller = ActionController(session, self)

        # --- UI Components ---
        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(15, 15, 15, 15)
        layout.setSpacing(10)

        button_layout = QHBoxLayout()
        self.add_person_button = QPushButton(" Add Person")
        self.add_company_button = QPushButton(" Add Company")
        self.delete_button = QPushButton(" Delete Selected")
        self.note_button = QPushButton(" Note")
        self.show_all_button = QPushButton(" Show All")
        for button in (self.add_person_button, self.add_company_button, self.delete_button,
                       self.note_button, self.show_all_button):
            button_layout.addWidget(button)
        button_layout.addStretch()

        self.search_bar = SearchBar()
        self.entity_panel = EntityListPanel(session.model)
        self.status_widget = StatusWidget()

        # --- Layout Assembly ---
        layout.addLayout(button_layout)
        layout.addWidget(self.search_bar)
        layout.addWidget(self.entity_panel, stretch=1)
        layout.addWidget(self.status_widget)
        self.setCentralWidget(central)

        self._connect_signals()
        self.status_widget.set_status(str(session.model).strip().splitlines()[0])

    def _connect_signals(self):
        self.add_person_button.clicked.connect(self._on_add_person)
        self.add_company_button.clicked.connect(self._on_add_company)
        self.delete_button.clicked.connect(self._on_delete_selected)
        self.note_button.clicked.connect(self._on_note)
        self.show_all_button.clicked.connect(self.action_controller.show_all)
        self.search_bar.search_requested.connect(self.action_controller.find)

        self.action_controller.model_changed.connect(self._follow_current_entity)
        self.action_controller.status_updated.connect(self.status_widget.set_status)
        self.action_controller.show_message_box.connect(self._show_message_box)

    def _restore_geometry(self, settings: GuiSettings):
        self.resize(settings.window_width, settings.window_height)
        if settings.window_x is not None and settings.window_y is not None:
            self.move(settings.window_x, settings.window_y)

    @Slot()
    def _follow_current_entity(self):
        """Switches to the tab matching the model's current entity after each command."""
        self.entity_panel.select_mode(self.session.model.get_curr_entity())

    @Slot()
    def _on_add_person(self):
        dialog = person_dialog(self)
        if dialog.exec():
            values = dialog.get_values()
            if values is None:
                self.show_error_message("A person needs a name.")
                return
            self.action_controller.add_person(values)

    @Slot()
    def _on_add_company(self):
        dialog = company_dialog(self)
        if dialog.exec():
            values = dialog.get_values()
            if values is None:
                self.show_error_message("A company needs a name.")
                return
            self.action_controller.add_company(values)

    @Slot()
    def _on_delete_selected(self):
        tab, row = self.entity_panel.selected_row()
        if row is None:
            self.show_error_message("Select a person or a company in the People or Companies tab first.")
            return
        if tab == TAB_PEOPLE:
            self.action_controller.delete_person(row + 1)
        elif tab == TAB_COMPANIES:
            self.action_controller.delete_company(row + 1)

    @Slot()
    def _on_note(self):
        tab, row = self.entity_panel.selected_row()
        if tab != TAB_PEOPLE or row is None:
            self.show_error_message("Select a person in the People tab to edit their note.")
            return
        person = self.entity_panel.person_model.entity_at(row)
        note, ok = QInputDialog.getText(self, "Note", f"Note for {person.name}:", text=person.note)
        if ok:
            self.action_controller.set_note(row + 1, note.strip())

    @Slot(str, str, str)
    def _show_message_box(self, msg_type, title, message):
        if msg_type == "critical":
            QMessageBox.critical(self, title, message)
        else:
            QMessageBox.information(self, title, message)

    def show_error_message(self, message: str):
        QMessageBox.critical(self, "Error", message)

    def current_gui_settings(self) -> GuiSettings:
        return GuiSettings(self.width(), self.height(), self.x(), self.y())

    def closeEvent(self, event):
        """Saves the window geometry with the user prefs and unhooks the list models before closing."""
        self.session.model.set_gui_settings(self.current_gui_settings())
        try:
            self.session.save_user_prefs()
        except OSError as e:
            logger.error(f"Could not save user preferences: {e}")
        self.entity_panel.detach_models()
        event.accept()


def run_gui(config_path: str = "config.json"):
    """Entry point for the GUI application."""
    try:
        config = load_or_create_config(Path(config_path))
    except ConnectifyError as e:
        print(f"Could not start Connectify: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.log_level)
    logger.info("Starting Connectify")

    app = QApplication(sys.argv)
    session = start_session(config)
    window = MainWindow(session)
    window.show()
    sys.exit(app.exec())
