# packages/core/newsbrief_core/llm.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import openai
from openai import OpenAI

from .config import PAGE_SIZE, Settings, load_settings
from .errors import ProviderError

logger = logging.getLogger(__name__)

SYSTEM = """You are a careful, factual news assistant.
Return EXACTLY 5 recent news stories about the user's topic as a raw JSON array:
[
  { "title": string, "summary": string, "source": string, "date": "YYYY-MM-DD" }
]
Rules:
- Output the JSON array only. No commentary, no markdown, no code fences.
- Every title must be unique.
- "source" is the publication name; "date" is the publication date.
"""

WEB_SEARCH_INPUT = """Find {count} factual news stories about "{topic}" published in the last 10 days.
Editorial rules:
- Prefer independent and primary reporting over aggregators, press releases and opinion pieces.
- Skip the first {offset} relevant results and return the next {count}.
- Every title must be unique.
Output a raw JSON array only, with no commentary and no markdown:
[{{"title": "...", "summary": "...", "source": "...", "date": "YYYY-MM-DD"}}]
"""


def _user_message(topic: str, offset: int) -> str:
    msg = f'Topic: "{topic}"'
    if offset:
        msg += f"\nSkip the first {offset} stories; return the next {PAGE_SIZE}."
    return msg


class NewsClient:
    """
    Thin adapter over the OpenAI SDK. Issues one request per call, in the shape
    picked by settings.mode ("chat" or "web_search"), and returns the reply text.
    Every failure surfaces as ProviderError; there are no retries.
    """

    def __init__(self, settings: Settings, client: Optional[OpenAI] = None):
        self.settings = settings
        self.client = client or OpenAI(
            api_key=settings.api_key,
            timeout=settings.timeout_sec,
            max_retries=0,
        )

    @classmethod
    def from_env(cls, mode: Optional[str] = None) -> "NewsClient":
        return cls(load_settings(mode))

    @property
    def mode(self) -> str:
        return self.settings.mode

    def fetch_raw_news(self, topic: str, offset: int = 0) -> str:
        if self.settings.mode == "chat":
            text = self._chat(topic, offset)
        else:
            text = self._respond(
                WEB_SEARCH_INPUT.format(topic=topic, offset=offset, count=PAGE_SIZE)
            )
        if not text or not text.strip():
            raise ProviderError("LLM reply contained no text")
        return text

    def search(self, query: str) -> Optional[str]:
        """Free-form web search; None when the reply carries no text."""
        text = self._respond(query)
        return text if text and text.strip() else None

    # -------------------------
    # Request shapes
    # -------------------------

    def _chat(self, topic: str, offset: int) -> Optional[str]:
        messages = [
            {"role": "system", "content": SYSTEM},
            {"role": "user", "content": _user_message(topic, offset)},
        ]
        logger.debug("chat completion model=%s topic=%r offset=%d", self.settings.model, topic, offset)
        try:
            resp = self.client.chat.completions.create(
                model=self.settings.model,
                temperature=self.settings.temperature,
                max_tokens=self.settings.max_tokens,
                messages=messages,
            )
        except openai.OpenAIError as e:
            raise ProviderError(f"LLM request failed: {e}") from e

        try:
            return resp.choices[0].message.content
        except (AttributeError, IndexError, TypeError) as e:
            raise ProviderError("Unexpected chat completion envelope") from e

    def _respond(self, input_text: str) -> Optional[str]:
        logger.debug("web search response model=%s", self.settings.model)
        try:
            resp = self.client.responses.create(
                model=self.settings.model,
                tools=[self._web_search_tool()],
                tool_choice={"type": "web_search_preview"},
                input=input_text,
            )
        except openai.OpenAIError as e:
            raise ProviderError(f"LLM request failed: {e}") from e

        text = getattr(resp, "output_text", None)
        if text is not None and not isinstance(text, str):
            raise ProviderError("Unexpected response envelope")
        return text

    def _web_search_tool(self) -> Dict[str, Any]:
        tool: Dict[str, Any] = {"type": "web_search_preview"}
        if self.settings.country:
            location = {"type": "approximate", "country": self.settings.country}
            if self.settings.city:
                location["city"] = self.settings.city
            if self.settings.region:
                location["region"] = self.settings.region
            tool["user_location"] = location
        return tool

