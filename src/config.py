from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_API_TIMEOUT = 5.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(f"Invalid {name} value: {raw}. Using default: {default}")
    return default


def _env_int(name: str, default: int, *, minimum: int = 1, maximum: int = 65535) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid {name} value: {raw}. Error: {e}. Using default: {default}")
        return default
    if value < minimum or value > maximum:
        logger.warning(
            f"{name} value {value} is outside {minimum}-{maximum}. Using default: {default}"
        )
        return default
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid {name} value: {raw}. Error: {e}. Using default: {default}")
        return default
    if value <= 0:
        logger.warning(f"Invalid {name} value: {raw}. Must be positive. Using default: {default}")
        return default
    return value


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if not raw:
        return list(default)
    items = [part.strip() for part in raw.split(",") if part.strip()]
    return items or list(default)


@dataclass
class Settings:
    """Runtime configuration, read from the environment."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    api_url: Optional[str] = None
    api_timeout: float = DEFAULT_API_TIMEOUT
    seed_contacts: bool = True
    enable_frontend: bool = True
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @property
    def contacts_api_url(self) -> str:
        """Base URL the UI uses to reach the contacts API."""
        if self.api_url:
            return self.api_url.rstrip("/")
        return f"http://127.0.0.1:{self.port}/api"

    @classmethod
    def from_env(cls) -> "Settings":
        log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"
        if not isinstance(logging.getLevelName(log_level), int):
            logger.warning(f"Invalid LOG_LEVEL value: {log_level}. Using default: INFO")
            log_level = "INFO"

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", DEFAULT_PORT),
            api_url=os.getenv("CONTACTS_API_URL") or None,
            api_timeout=_env_float("API_TIMEOUT_SECONDS", DEFAULT_API_TIMEOUT),
            seed_contacts=_env_bool("CONTACTS_SEED", True),
            enable_frontend=_env_bool("ENABLE_FRONTEND", True),
            cors_origins=_env_list("CORS_ORIGINS", ["*"]),
            log_level=log_level,
            log_file=os.getenv("LOG_FILE") or None,
        )


def setup_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings.from_env()
    level = logging.getLevelName(settings.log_level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.touch()
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)
    handler.setLevel(level)
    root_logger.addHandler(handler)
