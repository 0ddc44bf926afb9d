"""Abstract base for LLM providers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Message:
    role: str  # "user" or "assistant"
    content: str


class LLMProvider(ABC):
    """Interface that all LLM providers must implement.

    Implementations raise ``paperforge.errors.RateLimitError`` when the
    backend rejects a request for quota reasons; every other SDK error is
    left to propagate as-is.
    """

    name: str
    default_model: str

    @abstractmethod
    async def complete(
        self,
        system: str,
        messages: list[Message],
        model: str | None = None,
        max_tokens: int = 8192,
    ) -> str:
        """Send a prompt and return the full response text."""

    def get_model(self, model: str | None) -> str:
        """Return the requested model or the provider's default."""
        return model or self.default_model


def first_env(*names: str) -> str | None:
    """Return the value of the first environment variable that is set."""
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None
