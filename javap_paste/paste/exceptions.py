class PasteError(Exception):
    """Base exception for paste lifecycle errors.

    ``status_code`` is the HTTP status the serving layer should answer with.
    """

    status_code = 500


class InvalidTokenError(PasteError):
    """Raised when a user token is absent, empty or has disallowed characters."""

    status_code = 400


class PasteNotFoundError(PasteError):
    """Raised when a paste id has no stored or default paste behind it."""

    status_code = 404


class NotAuthorizedError(PasteError):
    """Raised when a valid token does not own the paste it tries to modify."""

    status_code = 401


class PasteStorageError(PasteError):
    """Raised when the paste store rejects a write or cannot be reached."""

    status_code = 500
