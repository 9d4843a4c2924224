# packages/core/newsbrief_core/pipeline.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Tuple

from .config import PAGE_SIZE
from .extract import extract_json_array
from .fallback import fallback_news
from .validate import is_valid_news_list

logger = logging.getLogger(__name__)

RAW_LOG_LIMIT = 2000


def page_offset(page: int) -> int:
    return (max(page, 1) - 1) * PAGE_SIZE


def normalize_news(raw: str) -> Tuple[List[Dict[str, Any]], bool]:
    """
    Raw provider text → (items, used_fallback).
    Extract → decode → validate; any miss yields the fallback list.
    """
    candidate = extract_json_array(raw)
    if candidate is None:
        logger.warning("No JSON array in provider reply; serving fallback. raw=%r", raw[:RAW_LOG_LIMIT])
        return fallback_news(), True

    try:
        items = json.loads(candidate)
    except (ValueError, RecursionError):
        logger.warning("Provider JSON failed to decode; serving fallback. raw=%r", raw[:RAW_LOG_LIMIT])
        return fallback_news(), True

    if not is_valid_news_list(items):
        logger.warning("Provider items failed validation; serving fallback. raw=%r", raw[:RAW_LOG_LIMIT])
        return fallback_news(), True

    return items, False


def get_news(client, topic: str, page: int = 1) -> Tuple[List[Dict[str, Any]], bool]:
    """One provider call for (topic, page). ProviderError propagates to the caller."""
    raw = client.fetch_raw_news(topic, page_offset(page))
    return normalize_news(raw)
