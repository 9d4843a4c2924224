import json
from typing import Any

from fastapi import Request

from newsbrief_core import NewsClient


def get_news_client(request: Request) -> NewsClient:
    # Built once in the app lifespan; tests swap it via app.dependency_overrides.
    return request.app.state.news_client


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body; an empty body reads as {}. Raises ValueError on malformed JSON."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw)
    except RecursionError as e:
        raise ValueError("JSON body nested too deeply") from e
