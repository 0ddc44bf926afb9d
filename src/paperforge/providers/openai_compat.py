"""OpenAI-compatible provider: covers OpenAI, Groq, OpenRouter, and Ollama."""

from __future__ import annotations

import os

from paperforge.errors import RateLimitError
from paperforge.providers.base import LLMProvider, Message


class OpenAICompatProvider(LLMProvider):
    """Generic provider for any OpenAI-compatible API."""

    def __init__(
        self,
        name: str,
        default_model: str,
        base_url: str | None = None,
        api_key_env: str | None = None,
    ) -> None:
        from openai import AsyncOpenAI

        self.name = name
        self.default_model = default_model

        api_key = os.environ.get(api_key_env) if api_key_env else None

        self._client = AsyncOpenAI(
            base_url=base_url,
            api_key=api_key or "not-needed",
        )

    async def complete(
        self,
        system: str,
        messages: list[Message],
        model: str | None = None,
        max_tokens: int = 8192,
    ) -> str:
        import openai

        chat_messages = []
        if system:
            chat_messages.append({"role": "system", "content": system})
        chat_messages.extend({"role": m.role, "content": m.content} for m in messages)

        try:
            resp = await self._client.chat.completions.create(
                model=self.get_model(model),
                max_tokens=max_tokens,
                messages=chat_messages,
            )
        except openai.RateLimitError as exc:
            raise RateLimitError(str(exc), provider=self.name) from exc
        return resp.choices[0].message.content or ""


# ── Pre-configured provider factories ──────────────────────────────────────


def openai_provider() -> OpenAICompatProvider:
    """OpenAI (GPT-4o, etc.)"""
    return OpenAICompatProvider(
        name="openai",
        default_model="gpt-4o",
        api_key_env="OPENAI_API_KEY",
    )


def groq_provider() -> OpenAICompatProvider:
    """Groq: fast inference with a free tier."""
    return OpenAICompatProvider(
        name="groq",
        default_model="llama-3.3-70b-versatile",
        base_url="https://api.groq.com/openai/v1",
        api_key_env="GROQ_API_KEY",
    )


def openrouter_provider() -> OpenAICompatProvider:
    """OpenRouter: model aggregator with free options."""
    return OpenAICompatProvider(
        name="openrouter",
        default_model="meta-llama/llama-3.3-70b-instruct:free",
        base_url="https://openrouter.ai/api/v1",
        api_key_env="OPENROUTER_API_KEY",
    )


def ollama_provider() -> OpenAICompatProvider:
    """Ollama: local models, no key."""
    return OpenAICompatProvider(
        name="ollama",
        default_model="llama3.1",
        base_url="http://localhost:11434/v1",
        api_key_env=None,
    )
