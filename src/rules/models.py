from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class SessionCookieRules(BaseModel):
    name: str = "auth_token"
    secure: bool = False
    http_only: bool = True
    same_site: str = "lax"
    path: str = "/"

class AuthRules(BaseModel):
    session_ttl_days: int = 7
    # Presence of the cookie is enough unless this is switched on.
    verify_tokens: bool = False
    cookie: SessionCookieRules = Field(default_factory=SessionCookieRules)

class SourceRules(BaseModel):
    api_base_url: str = "https://api.notion.com"
    api_version: str = "2022-06-28"
    page_size: int = Field(default=100, ge=1, le=100)
    timeout_seconds: float = 10.0

class CatalogRules(BaseModel):
    pinned_tag: str
    cache_ttl_seconds: int = 43200
    default_favicon: str = "/favicon.ico"
    config_defaults: dict[str, str] = Field(default_factory=dict)

class MetaScrapeRules(BaseModel):
    user_agent: str
    timeout_seconds: float = 10.0

class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=list)

class Rules(BaseModel):
    project: ProjectRules
    auth: AuthRules
    source: SourceRules
    catalog: CatalogRules
    meta_scrape: MetaScrapeRules
    ops: OpsRules
