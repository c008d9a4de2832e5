# connectify/gui/entity_dialog.py

from PySide6.QtWidgets import QDialog, QDialogButtonBox, QFormLayout, QLabel, QLineEdit, QVBoxLayout

PERSON_FIELDS = (
    ("name", "Name"),
    ("phone", "Phone"),
    ("email", "Email"),
    ("address", "Address"),
    ("tags", "Tags (space separated)"),
)

COMPANY_FIELDS = (
    ("name", "Name"),
    ("industry", "Industry"),
    ("location", "Location"),
    ("description", "Description"),
    ("website", "Website"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("address", "Address"),
)


class EntityDialog(QDialog):
    """
    A simple form for entering a new person or company.

    The dialog only collects text; turning it into a Person or Company, and
    reporting invalid values, is the controller's job.
    """

    def __init__(self, title: str, fields, parent=None):
        """
        Args:
            title: The window title, e.g. "Add Person".
            fields: (key, label) pairs, one line edit per pair.
            parent: The parent widget.
        """
        super().__init__(parent)
        self.setWindowTitle(title)

        self.layout = QVBoxLayout(self)
        self.layout.addWidget(QLabel("Fields other than <b>Name</b> may be left empty."))

        form = QFormLayout()
        self.edits = {}
        for key, label in fields:
            edit = QLineEdit()
            self.edits[key] = edit
            form.addRow(label, edit)
        self.layout.addLayout(form)

        self.buttons = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.layout.addWidget(self.buttons)
        self.buttons.accepted.connect(self.accept)
        self.buttons.rejected.connect(self.reject)

    def get_values(self) -> dict | None:
        """Returns the trimmed field values, or None if no name was entered."""
        values = {key: edit.text().strip() for key, edit in self.edits.items()}
        if not values.get("name"):
            return None
        return values


def person_dialog(parent=None) -> EntityDialog:
    return EntityDialog("Add Person", PERSON_FIELDS, parent)


def company_dialog(parent=None) -> EntityDialog:
    return EntityDialog("Add Company", COMPANY_FIELDS, parent)
