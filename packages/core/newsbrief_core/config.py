# packages/core/newsbrief_core/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError

load_dotenv()

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
# Override without touching code: LLM_MODEL=gpt-4o-mini, NEWS_MODE=chat, etc.
LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4.1")
NEWS_MODE = os.getenv("NEWS_MODE", "web_search")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.6"))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "1100"))
OPENAI_TIMEOUT_SEC = float(os.getenv("OPENAI_TIMEOUT_SEC", "30"))

NEWS_LOCATION_COUNTRY = os.getenv("NEWS_LOCATION_COUNTRY", "NZ")
NEWS_LOCATION_CITY = os.getenv("NEWS_LOCATION_CITY", "Auckland")
NEWS_LOCATION_REGION = os.getenv("NEWS_LOCATION_REGION", "Auckland")

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

PAGE_SIZE = 5
MODES = ("chat", "web_search")


@dataclass(frozen=True)
class Settings:
    api_key: str
    model: str = LLM_MODEL
    mode: str = NEWS_MODE
    temperature: float = LLM_TEMPERATURE
    max_tokens: int = LLM_MAX_TOKENS
    timeout_sec: float = OPENAI_TIMEOUT_SEC
    country: str = NEWS_LOCATION_COUNTRY
    city: str = NEWS_LOCATION_CITY
    region: str = NEWS_LOCATION_REGION


def load_settings(mode: Optional[str] = None) -> Settings:
    """
    Snapshot of the environment for the provider client, read in full at call time.
    Raises ConfigError on a missing key or unknown mode; callers do this once at startup.
    """
    key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if not key:
        raise ConfigError("Missing OPENAI_API_KEY. Please set it in your .env file.")

    mode = (mode or os.getenv("NEWS_MODE", "web_search")).strip()
    if mode not in MODES:
        raise ConfigError(f"Unknown NEWS_MODE {mode!r}; expected one of {', '.join(MODES)}.")

    return Settings(
        api_key=key,
        model=os.getenv("LLM_MODEL", "gpt-4.1"),
        mode=mode,
        temperature=float(os.getenv("LLM_TEMPERATURE", "0.6")),
        max_tokens=int(os.getenv("LLM_MAX_TOKENS", "1100")),
        timeout_sec=float(os.getenv("OPENAI_TIMEOUT_SEC", "30")),
        country=os.getenv("NEWS_LOCATION_COUNTRY", "NZ"),
        city=os.getenv("NEWS_LOCATION_CITY", "Auckland"),
        region=os.getenv("NEWS_LOCATION_REGION", "Auckland"),
    )
