# connectify/core/errors.py

"""
Domain exceptions for Connectify.

Every expected failure in the model layer maps to one of these classes, so the
GUI controller and the CLI can turn them into friendly messages without ever
catching a bare Exception from the core.
"""


class ConnectifyError(Exception):
    """Base exception for all Connectify domain failures."""


class InvalidArgumentError(ConnectifyError, ValueError):
    """Raised when a store or view operation receives None or an unusable argument."""


class EntityNotFoundError(ConnectifyError, LookupError):
    """Raised when an edit or remove targets an entity that is not in the address book."""


class DuplicateEntityError(ConnectifyError):
    """Raised when an add or edit would leave two entities with the same identity."""


class IllegalValueError(ConnectifyError, ValueError):
    """Raised when a field value, or a stored record, fails validation."""


class DataLoadingError(ConnectifyError):
    """Raised when a persisted JSON file exists but cannot be read or parsed."""


class CommandError(ConnectifyError):
    """Raised by the command surfaces (GUI and CLI) for bad indexes or arguments."""


class InvalidEntityError(ConnectifyError):
    """
    Raised when the current entity mode is set to an unknown name.

    The message names the offending value and lists the valid options.
    """

    def __init__(self, value, valid_options=("people", "companies", "all")):
        self.value = value
        self.valid_options = tuple(valid_options)
        super().__init__(
            f"Invalid entity type: {value}. Please enter either "
            f"{', '.join(self.valid_options[:-1])} or {self.valid_options[-1]}."
        )


def require_non_null(*values):
    """Raises InvalidArgumentError if any of the given values is None."""
    if any(value is None for value in values):
        raise InvalidArgumentError("Argument must not be None.")
