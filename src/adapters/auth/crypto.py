from datetime import timedelta
from typing import Any

from src.api.auth_utils import create_access_token, decode_access_token


class JWTAuthAdapter:
    """Token adapter that signs session tokens as HS256 JWTs."""

    def __init__(self, secret_key: str) -> None:
        self._secret_key = secret_key

    def create_token(self, subject: str, ttl: timedelta) -> str:
        return create_access_token({"sub": subject}, self._secret_key, expires_delta=ttl)

    def validate_token(self, token: str) -> Any | None:
        payload = decode_access_token(token, self._secret_key)
        return payload.get("sub") if payload else None
