"""
Error taxonomy shared by components and the HTTP layer.

Each error carries the HTTP status the API responds with; the message is
human-readable and safe to show to the caller.
"""


class NavError(Exception):
    """Base class for expected, user-visible failures."""

    status_code = 500
    default_message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class SourceUnavailable(NavError):
    """Upstream content store read or write failed."""

    status_code = 500
    default_message = "Content source unavailable"


class Unauthorized(NavError):
    """Protected operation called without a session credential."""

    status_code = 401
    default_message = "Unauthorized, please log in first"


class InvalidCredentials(NavError):
    status_code = 401
    default_message = "Incorrect username or password"


class ServerMisconfigured(NavError):
    """Required secret or configuration value is absent."""

    status_code = 500
    default_message = "Server configuration error"


class ValidationError(NavError):
    """Malformed caller input."""

    status_code = 400
    default_message = "Invalid input"

    def __init__(self, message: str | None = None, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field
