from dataclasses import dataclass

from src.domain.entities import Identity


@dataclass
class AdminSecrets:
    """Configured admin credentials; either may be unset."""

    username: str | None
    password: str | None


@dataclass
class LoginInput:
    username: str
    password: str


@dataclass
class CheckSessionInput:
    credential: str | None


@dataclass
class AuthOutput:
    identity: Identity = "anonymous"
    token_raw: str | None = None
    success: bool = False
    error: str | None = None
    error_code: str | None = None
