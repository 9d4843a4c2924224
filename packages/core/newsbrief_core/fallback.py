from datetime import date
from typing import Dict, List, Optional


def fallback_news(today: Optional[date] = None) -> List[Dict[str, str]]:
    """Placeholder list served when the provider output can't be used."""
    stamp = (today or date.today()).isoformat()
    return [
        {
            "title": "News is temporarily unavailable",
            "summary": "We couldn't fetch fresh stories for this topic right now. Please try again in a few minutes.",
            "source": "NewsBrief",
            "date": stamp,
        },
        {
            "title": "Try a broader topic",
            "summary": "Very narrow or unusual topics sometimes return no results. A more general search term may help.",
            "source": "NewsBrief",
            "date": stamp,
        },
    ]
