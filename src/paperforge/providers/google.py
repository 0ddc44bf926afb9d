"""Google Gemini provider, the default backend."""

from __future__ import annotations

from paperforge.errors import ProviderNotConfiguredError, RateLimitError
from paperforge.providers.base import LLMProvider, Message, first_env

API_KEY_ENVS = ("GEMINI_API_KEY", "GOOGLE_API_KEY")


def is_rate_limited(exc: Exception) -> bool:
    """True for Gemini errors that signal an exhausted quota."""
    return getattr(exc, "code", None) == 429 or getattr(exc, "status", None) == "RESOURCE_EXHAUSTED"


class GeminiProvider(LLMProvider):
    name = "gemini"
    default_model = "gemini-3-flash-preview"

    def __init__(self, api_key: str | None = None) -> None:
        from google import genai

        key = api_key or first_env(*API_KEY_ENVS)
        if not key:
            raise ProviderNotConfiguredError(
                "Set GEMINI_API_KEY (or GOOGLE_API_KEY) to use the Gemini provider."
            )
        self._client = genai.Client(api_key=key)

    async def complete(
        self,
        system: str,
        messages: list[Message],
        model: str | None = None,
        max_tokens: int = 8192,
    ) -> str:
        from google.genai import errors, types

        contents = [
            types.Content(
                role="model" if m.role == "assistant" else m.role,
                parts=[types.Part(text=m.content)],
            )
            for m in messages
        ]

        try:
            response = await self._client.aio.models.generate_content(
                model=self.get_model(model),
                contents=contents,
                config=types.GenerateContentConfig(
                    system_instruction=system or None,
                    max_output_tokens=max_tokens,
                ),
            )
        except errors.APIError as exc:
            if is_rate_limited(exc):
                raise RateLimitError(str(exc), provider=self.name) from exc
            raise
        return response.text or ""
