import secrets
from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import jwt

ALGORITHM = "HS256"


def secrets_match(given: str, expected: str) -> bool:
    """Constant-time string comparison."""
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def create_access_token(
    data: dict[str, Any],
    secret_key: str,
    expires_delta: timedelta | None = None,
    now_utc: datetime | None = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Claims to encode in the token
        secret_key: HMAC signing key
        expires_delta: Optional custom expiration delta
        now_utc: Current UTC time (for testing/determinism). Defaults to datetime.now(UTC).
    """
    to_encode = data.copy()
    current_time = now_utc if now_utc is not None else datetime.now(UTC)

    if expires_delta:
        expire = current_time + expires_delta
    else:
        expire = current_time + timedelta(minutes=15)

    to_encode.update({"exp": expire, "iat": current_time})
    encoded_jwt: str = jwt.encode(to_encode, secret_key, algorithm=ALGORITHM)
    return encoded_jwt


def decode_access_token(token: str, secret_key: str) -> dict[str, Any] | None:
    try:
        payload = jwt.decode(token, secret_key, algorithms=[ALGORITHM])
        return cast(dict[str, Any], payload)
    except jwt.JWTError:
        return None
