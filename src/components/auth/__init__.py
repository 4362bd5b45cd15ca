"""
Auth component - Admin login and session presence check.

Handles login, logout and the admin/anonymous decision for a request.
"""

from .component import (
    ERROR_INVALID_CREDENTIALS,
    ERROR_MISCONFIGURED,
    run_check_session,
    run_login,
    run_logout,
)
from .models import (
    AdminSecrets,
    AuthOutput,
    CheckSessionInput,
    LoginInput,
)
from .ports import TokenPort

__all__ = [
    # Entry points
    "run_check_session",
    "run_login",
    "run_logout",
    # Error codes
    "ERROR_INVALID_CREDENTIALS",
    "ERROR_MISCONFIGURED",
    # Models
    "AdminSecrets",
    "AuthOutput",
    "CheckSessionInput",
    "LoginInput",
    # Ports
    "TokenPort",
]
