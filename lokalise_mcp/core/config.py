from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .errors import ConfigurationError

LOKALISE_API = "https://api.lokalise.com/api2"

ALLOWED_PLATFORMS = ("web", "ios", "android", "other")
DEFAULT_PLATFORMS = ALLOWED_PLATFORMS


def env(key: str, default: str | None = None, environ: Mapping[str, str] | None = None) -> str | None:
    source = os.environ if environ is None else environ
    v = source.get(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def parse_platforms(raw: Optional[str]) -> Tuple[str, ...]:
    if raw is None:
        return DEFAULT_PLATFORMS

    platforms = tuple(p.strip() for p in raw.split(",") if p.strip())
    if not platforms:
        return DEFAULT_PLATFORMS

    unknown = [p for p in platforms if p not in ALLOWED_PLATFORMS]
    if unknown:
        raise ConfigurationError(
            f"PLATFORMS contains unknown platform(s) {unknown}. Allowed: {list(ALLOWED_PLATFORMS)}"
        )
    return platforms


def parse_flag(raw: Optional[str]) -> bool:
    return (raw or "").lower() in ("1", "true", "yes")


def parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"LOKALISE_TIMEOUT must be a number of seconds, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    default_project_id: Optional[str] = None
    platforms: Tuple[str, ...] = DEFAULT_PLATFORMS
    force_default_platforms: bool = False
    api_url: str = LOKALISE_API
    timeout: Optional[float] = None
    log_level: str = "INFO"
    service_name: str = "lokalise-mcp"
    version: str = "1.0.0"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read the process configuration once. Raises ConfigurationError on malformed values."""
    return Settings(
        api_key=env("LOKALISE_API_KEY", environ=environ),
        default_project_id=env("DEFAULT_PROJECT_ID", environ=environ),
        platforms=parse_platforms(env("PLATFORMS", environ=environ)),
        force_default_platforms=parse_flag(env("FORCE_DEFAULT_PLATFORMS", environ=environ)),
        api_url=(env("LOKALISE_API_URL", LOKALISE_API, environ=environ) or LOKALISE_API).rstrip("/"),
        timeout=parse_timeout(env("LOKALISE_TIMEOUT", environ=environ)),
        log_level=(env("LOG_LEVEL", "INFO", environ=environ) or "INFO").upper(),
        service_name=env("SERVICE_NAME", "lokalise-mcp", environ=environ) or "lokalise-mcp",
        version=env("VERSION", "1.0.0", environ=environ) or "1.0.0",
    )
