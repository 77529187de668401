"""Error kinds shared by repositories, the editing core and the routers.

Repositories and services raise these; ``main.py`` maps them onto HTTP responses.
"""


class GymTrackerError(Exception):
    """Base for every recoverable error in the app."""


class NotFoundError(GymTrackerError):
    """A referenced exercise, group, performance or editor does not exist."""


class ValidationFailedError(GymTrackerError):
    """Input was rejected before anything was written."""


class StorageFailureError(GymTrackerError):
    """The database read or write failed."""


class EditorStateError(GymTrackerError):
    """An editor operation was attempted in a status that does not allow it."""
