"""Single generation call with retry + exponential backoff on rate limits."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from paperforge.errors import RateLimitError, SystemOverloadedError
from paperforge.providers import LLMProvider, Message

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 5
BASE_DELAY = 2.0

SYSTEM_PROMPT = "Atue como um professor universitário e redator académico experiente."


async def generate_with_retry(
    provider: LLMProvider,
    model: str | None,
    prompt: str,
    *,
    max_attempts: int = MAX_ATTEMPTS,
    base_delay: float = BASE_DELAY,
    max_tokens: int = 8192,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    caller: str = "unknown",
) -> str:
    """Issue one generation request, retrying while the provider is rate limited.

    Args:
        provider: The LLM backend.
        model: Model ID override (provider default if None).
        prompt: The user prompt.
        max_attempts: Total attempts, including the first.
        base_delay: Seconds to wait before the first retry; doubled each retry.
        max_tokens: Max tokens in the response.
        sleep: Awaitable sleep used between attempts.
        caller: Identifier for logging (e.g. the section being written).

    Returns:
        The generated text.

    Raises:
        SystemOverloadedError: If every attempt was rate limited.
    """
    delay = base_delay
    last_error: RateLimitError | None = None

    for attempt in range(1, max_attempts + 1):
        logger.debug(
            "[%s] generation attempt %d/%d provider=%s",
            caller, attempt, max_attempts, provider.name,
        )
        try:
            return await provider.complete(
                system=SYSTEM_PROMPT,
                messages=[Message(role="user", content=prompt)],
                model=model,
                max_tokens=max_tokens,
            )
        except RateLimitError as exc:
            last_error = exc
            if attempt == max_attempts:
                break
            logger.warning(
                "[%s] rate limited on attempt %d/%d, backing off %.1fs",
                caller, attempt, max_attempts, delay,
            )
            await sleep(delay)
            delay *= 2

    logger.error("[%s] giving up after %d rate-limited attempts", caller, max_attempts)
    raise SystemOverloadedError(max_attempts) from last_error
