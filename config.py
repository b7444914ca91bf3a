# config.py — settings from env first, then Streamlit secrets, then defaults
import os
from dataclasses import dataclass
from typing import Optional

try:
    import streamlit as st
except Exception:
    st = None  # local/non-Streamlit env

DELAY_KEY = "SCAM_SHIELD_ANALYSIS_DELAY"
LOG_LEVEL_KEY = "SCAM_SHIELD_LOG_LEVEL"
LOG_FILE_KEY = "SCAM_SHIELD_LOG_FILE"

DEFAULT_DELAY = 2.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    analysis_delay: float = DEFAULT_DELAY
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None


def _normalize(val) -> Optional[str]:
    if val is None:
        return None
    return str(val).strip().strip('"').strip("'") or None


def get_value(key: str) -> Optional[str]:
    v = _normalize(os.getenv(key))
    if v:
        return v
    if st is not None:
        # st.secrets raises when no secrets.toml exists
        try:
            return _normalize(st.secrets.get(key))
        except Exception:
            return None
    return None


def _parse_delay(raw: Optional[str]) -> float:
    if raw is None:
        return DEFAULT_DELAY
    try:
        delay = float(raw)
    except ValueError:
        raise ValueError(f"{DELAY_KEY} must be a number of seconds, got {raw!r}")
    if delay < 0:
        raise ValueError(f"{DELAY_KEY} must not be negative, got {raw!r}")
    return delay


def get_settings() -> Settings:
    return Settings(
        analysis_delay=_parse_delay(get_value(DELAY_KEY)),
        log_level=(get_value(LOG_LEVEL_KEY) or DEFAULT_LOG_LEVEL).upper(),
        log_file=get_value(LOG_FILE_KEY),
    )
