"""
Movie suggestions from a chat-completion model.

The API layer calls a MovieSuggester directly; the catalog service does not
depend on it. ChatCompletionSuggester talks to any OpenAI-compatible
/chat/completions endpoint.
"""

import logging
from typing import Optional, Protocol

import requests

from movie_catalog.core.exceptions import SuggestionUnavailable

logger = logging.getLogger(__name__)


SYSTEM_PROMPT = (
    "You are a movie expert working for a streaming catalog. "
    "Recommend at most 3 movies that match the user's preferences. "
    "Answer with the title and a one-sentence reason for each movie, "
    "and nothing else."
)


class MovieSuggester(Protocol):
    """Free-text movie suggestions for user preferences."""

    def suggest(self, preferences: str) -> str:
        ...


class ChatCompletionSuggester:
    """
    MovieSuggester backed by an OpenAI-compatible chat completion API.

    Usage:
        suggester = ChatCompletionSuggester(api_key="...", model="gpt-4o-mini")
        text = suggester.suggest("action, comedy")
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://api.openai.com/v1",
        model: str = "gpt-4o-mini",
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the suggester.

        Args:
            api_key: Bearer token. Without it every call raises SuggestionUnavailable.
            base_url: API root, '/chat/completions' is appended
            model: Model name sent with each request
            timeout: Request timeout in seconds
            session: Optional requests session (default: module-level requests)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.http = session or requests

    def suggest(self, preferences: str) -> str:
        """
        Ask the model for movie suggestions.

        Args:
            preferences: Free-text user preferences, e.g. 'action, comedy'

        Returns:
            The model's answer as plain text

        Raises:
            SuggestionUnavailable: If no API key is configured or the call fails
        """
        if not self.api_key:
            raise SuggestionUnavailable("Movie suggestions are not configured.")

        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"My preferences are: {preferences}"},
            ],
        }
        try:
            r = self.http.post(
                f"{self.base_url}/chat/completions",
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Suggestion request failed: %s", e)
            raise SuggestionUnavailable("Movie suggestions are temporarily unavailable.") from e

        try:
            return data["choices"][0]["message"]["content"].strip()
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            logger.error("Unexpected suggestion response: %s", data)
            raise SuggestionUnavailable("Movie suggestions are temporarily unavailable.") from e
