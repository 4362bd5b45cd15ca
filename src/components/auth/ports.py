from datetime import timedelta
from typing import Any, Protocol


class TokenPort(Protocol):
    """Port for minting and checking session tokens."""

    def create_token(self, subject: str, ttl: timedelta) -> str: ...

    def validate_token(self, token: str) -> Any | None:
        """Return the token subject, or None when invalid or expired."""
        ...
