from typing import Annotated, List

from pydantic import BaseModel, Field, StrictStr


class NewsItem(BaseModel):
    title: StrictStr
    summary: StrictStr
    source: StrictStr
    date: StrictStr  # YYYY-MM-DD, as asked of the model; only the type is enforced


NewsList = Annotated[List[NewsItem], Field(min_length=1)]
