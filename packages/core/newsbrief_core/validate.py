from typing import Any

from pydantic import TypeAdapter, ValidationError

from .models import NewsList

_news_list = TypeAdapter(NewsList)


def is_valid_news_list(value: Any) -> bool:
    """
    True iff value is a non-empty list whose every element is an object with
    string title/summary/source/date. Extra keys are tolerated.
    """
    if not isinstance(value, (list, tuple)):
        return False
    try:
        _news_list.validate_python(value)
    except ValidationError:
        return False
    return True
