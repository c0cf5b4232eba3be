"""
advisor.py
Business advice from an OpenAI-compatible chat completions endpoint.

The advisor only reads aggregate stats. Any failure returns FALLBACK_MESSAGE.
"""

from __future__ import annotations

import json
import time
from typing import Any

import requests

import config
from logger import get_logger
from reports import Summary

logger = get_logger(__name__)

FALLBACK_MESSAGE = "The advisory service is unavailable right now. Please try again."

PROMPT_TEMPLATE = """Act as a technology CEO. Analyze my gym statistics:
Members: {total_count}, Revenue: ${total_revenue:,.0f}.
Locations: {locations}.
Give me one disruptive strategic tip to triple my income. Be brief."""


class AdvisorError(RuntimeError):
    """Raised internally when the advisor response cannot be used."""


def build_prompt(summary: Summary) -> str:
    locations = json.dumps(
        [
            {"name": s.location_code, "count": s.count, "income": s.income}
            for s in summary.per_location
        ]
    )
    return PROMPT_TEMPLATE.format(
        total_count=summary.total_count,
        total_revenue=summary.total_revenue,
        locations=locations,
    )


class AdvisorClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        model: str | None = None,
        timeout: int | None = None,
        max_retries: int | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else config.advisor_api_key()
        self.base_url = base_url or config.advisor_base_url()
        self.model = model or config.advisor_model()
        self.timeout = timeout or config.advisor_timeout()
        self.max_retries = max_retries or config.advisor_max_retries()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    def _request(self, prompt: str) -> str:
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        last_err: Exception | None = None
        for attempt in range(self.max_retries):
            try:
                r = requests.post(self.base_url, headers=self._headers(), json=payload, timeout=self.timeout)
                r.raise_for_status()
                return _extract_text(r.json())
            except requests.RequestException as e:
                last_err = e
                logger.warning("Advisor attempt %d failed: %s", attempt + 1, e)
                if attempt < self.max_retries - 1:
                    time.sleep(2 ** attempt)
        raise AdvisorError(f"Advisor request failed after {self.max_retries} attempts") from last_err

    def get_insight(self, summary: Summary) -> str:
        """Advice text for the given stats, or FALLBACK_MESSAGE on any failure."""
        if not self.api_key:
            logger.info("No advisor API key configured")
            return FALLBACK_MESSAGE
        try:
            return self._request(build_prompt(summary))
        except (AdvisorError, ValueError) as e:
            logger.warning("Advisor unavailable: %s", e)
            return FALLBACK_MESSAGE


def _extract_text(body: Any) -> str:
    try:
        text = body["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as e:
        raise AdvisorError(f"Unexpected advisor response: {e!r}") from e
    if not isinstance(text, str) or not text.strip():
        raise AdvisorError("Empty advisor response")
    return text.strip()
