# packages/core/newsbrief_core/extract.py
from __future__ import annotations

import json
from typing import Optional

_decoder = json.JSONDecoder()


def _is_array_of_objects(value) -> bool:
    return isinstance(value, list) and any(isinstance(v, dict) for v in value)


def extract_json_array(text: str) -> Optional[str]:
    """
    Pull the first JSON array of objects out of free-form LLM output.

    Walks every '[' left to right and lets the JSON decoder find its matching ']',
    so prose, ```json fences and trailing commentary around the array are ignored
    and nested arrays / brackets inside strings don't cut it short.
    Returns the array substring, or None. Never raises.
    """
    if not isinstance(text, str):
        return None
    start = text.find("[")
    while start != -1:
        try:
            value, end = _decoder.raw_decode(text, start)
        except (ValueError, RecursionError):
            pass
        else:
            if _is_array_of_objects(value):
                return text[start:end]
        start = text.find("[", start + 1)
    return None
