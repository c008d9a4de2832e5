# connectify/core/user_prefs.py

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .errors import DataLoadingError, require_non_null

logger = logging.getLogger(__name__)

DEFAULT_ADDRESS_BOOK_FILE_PATH = Path("data") / "connectify.json"


@dataclass(frozen=True)
class GuiSettings:
    """Window size and position, restored on the next launch."""
    window_width: int = 740
    window_height: int = 600
    window_x: Optional[int] = None
    window_y: Optional[int] = None


@dataclass
class UserPrefs:
    """
    User preferences: GUI geometry and where the address book lives.

    The model treats these as opaque pass-through values.
    """
    gui_settings: GuiSettings = field(default_factory=GuiSettings)
    address_book_file_path: Path = DEFAULT_ADDRESS_BOOK_FILE_PATH

    def reset_data(self, new_prefs: "UserPrefs"):
        require_non_null(new_prefs)
        self.gui_settings = new_prefs.gui_settings
        self.address_book_file_path = Path(new_prefs.address_book_file_path)

    def copy(self) -> "UserPrefs":
        return UserPrefs(self.gui_settings, Path(self.address_book_file_path))


def read_user_prefs(prefs_path: Path) -> UserPrefs:
    """
    Loads the preferences file, falling back to defaults if it does not exist.

    Raises:
        DataLoadingError: If the file exists but is not valid preferences JSON.
    """
    if not prefs_path.exists():
        logger.info(f"Preferences file not found at {prefs_path}. Using default preferences.")
        return UserPrefs()
    try:
        with open(prefs_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        gui = data.get("gui_settings", {})
        return UserPrefs(
            gui_settings=GuiSettings(
                window_width=int(gui.get("window_width", 740)),
                window_height=int(gui.get("window_height", 600)),
                window_x=gui.get("window_x"),
                window_y=gui.get("window_y"),
            ),
            address_book_file_path=Path(data.get("address_book_file_path", DEFAULT_ADDRESS_BOOK_FILE_PATH)),
        )
    except (OSError, json.JSONDecodeError, AttributeError, TypeError, ValueError) as e:
        raise DataLoadingError(f"Could not read preferences from {prefs_path}: {e}") from e


def save_user_prefs(prefs: UserPrefs, prefs_path: Path):
    data = {
        "gui_settings": {
            "window_width": prefs.gui_settings.window_width,
            "window_height": prefs.gui_settings.window_height,
            "window_x": prefs.gui_settings.window_x,
            "window_y": prefs.gui_settings.window_y,
        },
        "address_book_file_path": str(prefs.address_book_file_path),
    }
    prefs_path.parent.mkdir(parents=True, exist_ok=True)
    with open(prefs_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)
    logger.debug(f"User preferences saved to {prefs_path}")
