"""
Auth component - Admin session gate.

A single admin identity, configured through two secrets. Login mints a
signed token that the HTTP layer stores in a cookie; any later request
that carries the cookie is treated as admin. Token verification is only
performed when ``verify_tokens`` is switched on.
"""

import logging
from datetime import timedelta

from src.api.auth_utils import secrets_match
from src.domain.entities import Identity

from .models import AdminSecrets, AuthOutput, CheckSessionInput, LoginInput
from .ports import TokenPort

logger = logging.getLogger(__name__)

ERROR_MISCONFIGURED = "server_misconfigured"
ERROR_INVALID_CREDENTIALS = "invalid_credentials"


def run_login(
    inp: LoginInput,
    secrets: AdminSecrets,
    tokens: TokenPort,
    ttl: timedelta,
) -> AuthOutput:
    if not secrets.username or not secrets.password:
        logger.error("Admin credentials are not configured")
        return AuthOutput(
            success=False,
            error="Server configuration error",
            error_code=ERROR_MISCONFIGURED,
        )

    # Evaluate both comparisons so timing doesn't reveal which field failed.
    name_ok = secrets_match(inp.username or "", secrets.username)
    password_ok = secrets_match(inp.password or "", secrets.password)
    if not (name_ok and password_ok):
        logger.warning("Rejected admin login for %r", inp.username)
        return AuthOutput(
            success=False,
            error="Incorrect username or password",
            error_code=ERROR_INVALID_CREDENTIALS,
        )

    token = tokens.create_token(secrets.username, ttl)
    logger.info("Admin logged in")
    return AuthOutput(identity="admin", token_raw=token, success=True)


def run_check_session(
    inp: CheckSessionInput,
    tokens: TokenPort | None = None,
    verify_tokens: bool = False,
) -> Identity:
    # An empty cookie value counts as no cookie.
    if not inp.credential:
        return "anonymous"
    if verify_tokens:
        if tokens is None or tokens.validate_token(inp.credential) is None:
            return "anonymous"
    return "admin"


def run_logout() -> AuthOutput:
    return AuthOutput(identity="anonymous", success=True)
