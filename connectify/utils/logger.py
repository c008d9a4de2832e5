# connectify/utils/logger.py

import logging
import logging.handlers
from pathlib import Path


class LoggerManager:
    """
    Configures the application-wide logging system.

    Two handlers are attached to the root logger:
    1. Console Handler: INFO and above, for feedback while the app runs.
    2. Rotating File Handler: everything from the configured level down to
       DEBUG, kept in ``connectify.log`` and rotated at 5MB.
    """

    def __init__(self, log_file_name: str = 'connectify.log', log_level=logging.DEBUG):
        """
        Args:
            log_file_name: The name of the log file to be created in the project root.
            log_level: The base logging level to capture (e.g., DEBUG, INFO).
        """
        self.log_file_path = Path(__file__).resolve().parents[2] / log_file_name
        self.log_level = log_level
        self.root_logger = logging.getLogger()

    def setup(self):
        """Attaches the handlers, unless logging has already been configured."""
        if self.root_logger.hasHandlers():
            return

        self.root_logger.setLevel(self.log_level)
        self.root_logger.addHandler(self._create_console_handler())
        self.root_logger.addHandler(self._create_file_handler())

        logging.info("Logging configured successfully.")

    def _create_console_handler(self) -> logging.StreamHandler:
        handler = logging.StreamHandler()
        handler.setLevel(max(logging.INFO, self.log_level))
        formatter = logging.Formatter(
            '%(asctime)s - [%(levelname)s] - %(message)s',
            datefmt='%H:%M:%S'
        )
        handler.setFormatter(formatter)
        return handler

    def _create_file_handler(self) -> logging.handlers.RotatingFileHandler:
        handler = logging.handlers.RotatingFileHandler(
            self.log_file_path, maxBytes=5*1024*1024, backupCount=5, encoding='utf-8'
        )
        handler.setLevel(self.log_level)
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - [%(levelname)s] - %(filename)s:%(lineno)d - %(message)s'
        )
        handler.setFormatter(formatter)
        return handler


def setup_logging(level: str = "DEBUG"):
    """Initializes and configures the application-wide logging system."""
    manager = LoggerManager(log_level=getattr(logging, level.upper(), logging.DEBUG))
    manager.setup()
