import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.deps import get_settings
from src.api.errors import register_error_handlers
from src.app_shell.config import configure_logging, validate_ops_rules
from src.rules.loader import load_rules

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def _cors_origins() -> list[str]:
    try:
        return load_rules(get_settings().rules_path).ops.cors_origins
    except (FileNotFoundError, ValueError):
        return DEFAULT_CORS_ORIGINS


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = load_rules(settings.rules_path)
    except Exception as e:
        print(f"CRITICAL: Rules load failed: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(rules)
    validate_ops_rules(rules)
    logger.info("Rules loaded from %s", settings.rules_path)

    yield


app = FastAPI(
    title="Notion Nav API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

register_error_handlers(app)

# --- Routers ---
from src.api.routes import admin_links, admin_tools, auth, public  # noqa: E402

app.include_router(auth.router, prefix="/api/auth", tags=["Auth"])
app.include_router(public.router, prefix="/api", tags=["Public"])
app.include_router(admin_links.router, prefix="/api", tags=["Admin Links"])
app.include_router(admin_tools.router, prefix="/api", tags=["Admin Tools"])


# CORS (Allow Frontend)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
