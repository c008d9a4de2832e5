# connectify/core/session.py

import logging
from dataclasses import dataclass
from pathlib import Path

from .config_manager import DEFAULT_CONFIG_FILE, Config, load_or_create_config
from .errors import DataLoadingError, IllegalValueError
from .model_manager import ModelManager
from .sample_data import get_sample_address_book
from .storage import JsonAddressBookStorage
from .user_prefs import read_user_prefs, save_user_prefs, UserPrefs

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Everything one run of the app works with: config, model and storage."""
    config: Config
    model: ModelManager
    storage: JsonAddressBookStorage

    def save_address_book(self):
        self.storage.save_address_book(self.model.get_address_book())

    def save_user_prefs(self):
        save_user_prefs(self.model.get_user_prefs(), self.config.user_prefs_file_path)


def start_session(config: Config | None = None, config_path: Path = DEFAULT_CONFIG_FILE) -> Session:
    """
    Builds the model from the files on disk.

    A missing address book is seeded with sample data. A corrupt one is
    reported in the log and the session starts with an empty address book,
    leaving the broken file untouched until the next save.
    """
    if config is None:
        config = load_or_create_config(config_path)

    try:
        user_prefs = read_user_prefs(config.user_prefs_file_path)
    except DataLoadingError as e:
        logger.warning(f"{e}. Using default preferences.")
        user_prefs = UserPrefs()

    storage = JsonAddressBookStorage(user_prefs.address_book_file_path)
    try:
        address_book = storage.read_address_book()
        if address_book is None:
            logger.info("Data file not found. Starting with a sample address book.")
            address_book = get_sample_address_book()
    except (DataLoadingError, IllegalValueError) as e:
        logger.warning(f"Data file could not be loaded ({e}). Starting with an empty address book.")
        address_book = None

    return Session(config, ModelManager(address_book, user_prefs), storage)
