from datetime import timedelta

from fastapi import APIRouter, Depends, Response

from src.adapters.auth.crypto import JWTAuthAdapter
from src.api.deps import (
    get_admin_secrets,
    get_identity,
    get_rules,
    get_session_ttl,
    get_token_adapter,
)
from src.api.schemas import AuthCheckResponse, LoginRequest, LoginResponse, MessageResponse
from src.components.auth import (
    ERROR_MISCONFIGURED,
    AdminSecrets,
    LoginInput,
    run_login,
    run_logout,
)
from src.domain.entities import Identity
from src.domain.errors import InvalidCredentials, ServerMisconfigured
from src.rules.models import Rules

router = APIRouter()


@router.get("/check", response_model=AuthCheckResponse)
def check_auth(identity: Identity = Depends(get_identity)) -> AuthCheckResponse:
    """Report whether the caller carries an admin session."""
    is_admin = identity == "admin"
    return AuthCheckResponse(
        is_admin=is_admin,
        message="Logged in" if is_admin else "Not logged in",
    )


@router.post("/login", response_model=LoginResponse)
def login(
    data: LoginRequest,
    response: Response,
    secrets: AdminSecrets = Depends(get_admin_secrets),
    tokens: JWTAuthAdapter = Depends(get_token_adapter),
    ttl: timedelta = Depends(get_session_ttl),
    rules: Rules = Depends(get_rules),
) -> LoginResponse:
    """Check the admin credentials and set the session cookie."""
    result = run_login(
        LoginInput(username=data.username, password=data.password),
        secrets=secrets,
        tokens=tokens,
        ttl=ttl,
    )

    if not result.success:
        if result.error_code == ERROR_MISCONFIGURED:
            raise ServerMisconfigured(result.error)
        raise InvalidCredentials(result.error)

    cookie = rules.auth.cookie
    max_age = int(ttl.total_seconds())
    response.set_cookie(
        key=cookie.name,
        value=result.token_raw or "",
        httponly=cookie.http_only,
        max_age=max_age,
        expires=max_age,
        path=cookie.path,
        samesite=cookie.same_site,  # type: ignore[arg-type]
        secure=cookie.secure,
    )
    return LoginResponse(success=True, message="Login successful", is_admin=True)


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response, rules: Rules = Depends(get_rules)) -> MessageResponse:
    """Log out by clearing the session cookie."""
    run_logout()
    response.delete_cookie(key=rules.auth.cookie.name, path=rules.auth.cookie.path)
    return MessageResponse(success=True, message="Logout successful")
