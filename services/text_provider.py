# services/text_provider.py
from __future__ import annotations
import logging
import random
from typing import List, Optional

import httpx

from app.config import QUOTE_COUNT, QUOTES_API_KEY, QUOTES_API_URL, QUOTES_TIMEOUT_SEC
from app.errors import TextProviderError

logger = logging.getLogger(__name__)

# Simple words for the offline text
WORDS: List[str] = [
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "it",
    "for", "not", "on", "with", "he", "as", "you", "do", "at", "this",
    "but", "his", "by", "from", "they", "we", "say", "her", "she", "or",
    "an", "will", "my", "one", "all", "would", "there", "what", "so", "up",
    "out", "if", "about", "who", "get", "which", "go", "me", "when", "make",
]


def generate_local_text(word_count: int = 50, rng: Optional[random.Random] = None) -> str:
    """Random words from WORDS, first one capitalized, ending with a period."""
    rng = rng or random
    count = max(1, int(word_count))
    words = [rng.choice(WORDS) for _ in range(count)]
    words[0] = words[0][:1].upper() + words[0][1:]
    return " ".join(words) + "."


class QuoteTextProvider:
    """
    Builds a practice text out of a few quotes from the quotes API.
    fetch_text() raises TextProviderError for every kind of failure.
    """

    def __init__(
        self,
        api_key: Optional[str] = QUOTES_API_KEY,
        url: str = QUOTES_API_URL,
        quote_count: int = QUOTE_COUNT,
        timeout: float = QUOTES_TIMEOUT_SEC,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key
        self.url = url
        self.quote_count = quote_count
        self.timeout = timeout
        self._transport = transport

    def fetch_quotes(self) -> List[str]:
        if not self.api_key:
            raise TextProviderError("QUOTES_API_KEY is not set")

        headers = {"X-Api-Key": self.api_key}
        quotes: List[str] = []
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                for _ in range(self.quote_count):
                    response = client.get(self.url, headers=headers)
                    response.raise_for_status()
                    data = response.json()
                    if data and isinstance(data, list) and data[0].get("quote"):
                        quotes.append(str(data[0]["quote"]))
        except httpx.HTTPError as e:
            raise TextProviderError(f"Quotes API request failed: {e}") from e
        except (ValueError, AttributeError) as e:
            raise TextProviderError(f"Malformed quotes payload: {e}") from e
        return quotes

    def fetch_text(self, word_count: int) -> str:
        words = " ".join(self.fetch_quotes()).split()[:word_count]
        if not words:
            raise TextProviderError("Quotes API returned no text")
        return " ".join(words)


def fetch_text_with_fallback(provider, word_count: int, rng: Optional[random.Random] = None) -> str:
    """Never raises: a failing provider is replaced by generate_local_text()."""
    if provider is not None:
        try:
            return provider.fetch_text(word_count)
        except TextProviderError as e:
            logger.warning("Text provider failed, using local text: %s", e)
    return generate_local_text(word_count, rng=rng)
