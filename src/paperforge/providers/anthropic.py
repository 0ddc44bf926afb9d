"""Anthropic (Claude) provider."""

from __future__ import annotations

from paperforge.errors import RateLimitError
from paperforge.providers.base import LLMProvider, Message


class AnthropicProvider(LLMProvider):
    name = "claude"
    default_model = "claude-sonnet-4-20250514"

    def __init__(self) -> None:
        import anthropic

        self._client = anthropic.AsyncAnthropic()

    async def complete(
        self,
        system: str,
        messages: list[Message],
        model: str | None = None,
        max_tokens: int = 8192,
    ) -> str:
        import anthropic

        try:
            msg = await self._client.messages.create(
                model=self.get_model(model),
                max_tokens=max_tokens,
                system=system,
                messages=[{"role": m.role, "content": m.content} for m in messages],
            )
        except anthropic.RateLimitError as exc:
            raise RateLimitError(str(exc), provider=self.name) from exc
        return "".join(block.text for block in msg.content if block.type == "text")
