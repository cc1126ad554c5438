class BookingError(RuntimeError):
    """Base class for failures reported back to the caller."""

    code = "internal"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(BookingError):
    """Raised when a required field is missing or malformed."""

    code = "invalid_input"


class NotFound(BookingError):
    """Raised when an id or catalog reference does not exist."""

    code = "not_found"


class Conflict(BookingError):
    """Raised when a unique field (e.g. login email) is already taken."""

    code = "conflict"


class Internal(BookingError):
    """Raised when the underlying store fails unexpectedly."""

    code = "internal"


class InvalidCredentials(BookingError):
    """Raised when a login or bearer token does not check out."""

    code = "unauthorized"
