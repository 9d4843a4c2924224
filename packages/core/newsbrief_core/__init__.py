# packages/core/newsbrief_core/__init__.py
from .errors import ConfigError, NewsBriefError, ProviderError
from .extract import extract_json_array
from .fallback import fallback_news
from .llm import NewsClient
from .models import NewsItem
from .pipeline import get_news, normalize_news, page_offset
from .validate import is_valid_news_list

__all__ = [
    "ConfigError",
    "NewsBriefError",
    "ProviderError",
    "extract_json_array",
    "fallback_news",
    "NewsClient",
    "NewsItem",
    "get_news",
    "normalize_news",
    "page_offset",
    "is_valid_news_list",
]
