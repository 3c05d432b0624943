import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping

import streamlit as st

DEFAULT_CATALOG_URL = "https://cdn.jsdelivr.net/gh/GCA-Classroom/apod/data.json"
DEFAULT_TIMEOUT = 20.0

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    catalog_url: str = DEFAULT_CATALOG_URL
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)


def _secrets_section() -> Mapping[str, Any]:
    # No secrets.toml (or no Streamlit runtime) is fine: fall back to env vars
    try:
        return st.secrets["catalog"]
    except Exception:
        return {}


def _setting(section: Mapping[str, Any], key: str, env: str, default: Any) -> Any:
    value = section.get(key)
    if value is None:
        value = os.environ.get(env)
    return default if value is None else value


def load_settings() -> Settings:
    section = _secrets_section()
    url = _setting(section, "url", "APOD_CATALOG_URL", DEFAULT_CATALOG_URL)
    raw_timeout = _setting(section, "timeout", "APOD_TIMEOUT", DEFAULT_TIMEOUT)
    try:
        timeout = float(raw_timeout)
    except (TypeError, ValueError):
        timeout = None
    if timeout is None or timeout <= 0:
        logger.warning("Invalid catalog timeout %r, using %s", raw_timeout, DEFAULT_TIMEOUT)
        timeout = DEFAULT_TIMEOUT
    level = str(_setting(section, "log_level", "APOD_LOG_LEVEL", "INFO")).upper()
    # getLevelName maps known names to ints and anything else to "Level <x>"
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown log level %r, using INFO", level)
        level = "INFO"
    return Settings(catalog_url=url, timeout=timeout, log_level=level)
