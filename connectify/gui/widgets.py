# connectify/gui/widgets.py

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import QComboBox, QHBoxLayout, QLabel, QLineEdit, QPushButton, QSizePolicy, QWidget


class StatusWidget(QWidget):
    """Shows the result of the last command, in red when it failed."""

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 5, 10, 5)

        self.status_label = QLabel("Status:")
        self.status_label.setObjectName("StatusLabel")
        self.status_message = QLabel("Ready.")
        self.status_message.setWordWrap(True)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Minimum)

        layout.addWidget(self.status_label)
        layout.addWidget(self.status_message)
        layout.addStretch()

    def set_status(self, message: str, is_error: bool = False):
        self.status_message.setText(message)
        if is_error:
            self.status_message.setStyleSheet("color: #BF616A;")  # Nord Red
        else:
            self.status_message.setStyleSheet("")


class SearchBar(QWidget):
    """
    A keyword box with a people/companies switch.

    Emits ``search_requested(target, keywords)`` where target is "people" or
    "companies" and keywords is the whitespace-split text.
    """
    search_requested = Signal(str, list)

    def __init__(self, parent=None):
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.target_combo = QComboBox()
        self.target_combo.addItems(["people", "companies"])
        self.keyword_edit = QLineEdit()
        self.keyword_edit.setPlaceholderText("Find by name, e.g. alex yu")
        self.find_button = QPushButton(" Find")

        layout.addWidget(QLabel("Find:"))
        layout.addWidget(self.target_combo)
        layout.addWidget(self.keyword_edit)
        layout.addWidget(self.find_button)

        self.find_button.clicked.connect(self._emit_search)
        self.keyword_edit.returnPressed.connect(self._emit_search)

    @Slot()
    def _emit_search(self):
        self.search_requested.emit(self.target_combo.currentText(), self.keyword_edit.text().split())
