"""LLM provider registry.

Providers are loaded lazily, so only the SDK you actually use needs to be installed.
"""

from __future__ import annotations

from dataclasses import dataclass

from paperforge.errors import ProviderNotConfiguredError
from paperforge.providers.base import LLMProvider, Message, first_env

__all__ = [
    "LLMProvider",
    "Message",
    "ProviderInfo",
    "get_provider",
    "check_provider_configured",
    "is_configured",
    "list_providers",
    "PROVIDER_INFO",
]


@dataclass
class ProviderInfo:
    """Metadata about a provider (available before instantiation)."""

    name: str
    description: str
    default_model: str
    free: bool
    api_key_env: tuple[str, ...] = ()  # empty means no key needed


PROVIDER_INFO: dict[str, ProviderInfo] = {
    "gemini": ProviderInfo(
        name="gemini",
        description="Google Gemini (default)",
        default_model="gemini-3-flash-preview",
        free=True,
        api_key_env=("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    ),
    "claude": ProviderInfo(
        name="claude",
        description="Anthropic Claude",
        default_model="claude-sonnet-4-20250514",
        free=False,
        api_key_env=("ANTHROPIC_API_KEY",),
    ),
    "openai": ProviderInfo(
        name="openai",
        description="OpenAI (GPT-4o, etc.)",
        default_model="gpt-4o",
        free=False,
        api_key_env=("OPENAI_API_KEY",),
    ),
    "groq": ProviderInfo(
        name="groq",
        description="Groq, fast inference with a free tier",
        default_model="llama-3.3-70b-versatile",
        free=True,
        api_key_env=("GROQ_API_KEY",),
    ),
    "openrouter": ProviderInfo(
        name="openrouter",
        description="OpenRouter, model aggregator with free options",
        default_model="meta-llama/llama-3.3-70b-instruct:free",
        free=True,
        api_key_env=("OPENROUTER_API_KEY",),
    ),
    "ollama": ProviderInfo(
        name="ollama",
        description="Ollama, local models with no API key",
        default_model="llama3.1",
        free=True,
    ),
}


def _info(name: str) -> ProviderInfo:
    info = PROVIDER_INFO.get(name)
    if info is None:
        raise ValueError(
            f"Unknown provider '{name}'. Available: {', '.join(PROVIDER_INFO.keys())}"
        )
    return info


def is_configured(name: str) -> bool:
    info = _info(name)
    return not info.api_key_env or first_env(*info.api_key_env) is not None


def check_provider_configured(name: str) -> None:
    """Raise ``ProviderNotConfiguredError`` if the provider's API key isn't set.

    Call this *before* any generation so the user gets a clear message
    instead of a cryptic SDK auth failure halfway through a paper.
    """
    info = _info(name)
    if not is_configured(name):
        raise ProviderNotConfiguredError(
            f"Provider '{info.name}' requires the {' or '.join(info.api_key_env)} "
            f"environment variable, but it is not set."
        )


def get_provider(name: str) -> LLMProvider:
    """Instantiate a provider by name.

    Raises ``ProviderNotConfiguredError`` if the required API key isn't set,
    or ``ImportError`` if the required SDK isn't installed.
    """
    check_provider_configured(name)

    if name == "gemini":
        try:
            from paperforge.providers.google import GeminiProvider
            return GeminiProvider()
        except ImportError:
            raise ImportError(
                "Google GenAI SDK not installed. Run: pip install google-genai"
            )

    if name == "claude":
        try:
            from paperforge.providers.anthropic import AnthropicProvider
            return AnthropicProvider()
        except ImportError:
            raise ImportError(
                "Anthropic SDK not installed. Run: pip install paperforge[claude]"
            )

    from paperforge.providers import openai_compat

    factories = {
        "openai": openai_compat.openai_provider,
        "groq": openai_compat.groq_provider,
        "openrouter": openai_compat.openrouter_provider,
        "ollama": openai_compat.ollama_provider,
    }
    try:
        return factories[name]()
    except ImportError:
        raise ImportError(
            f"OpenAI SDK not installed (used for {name}). Run: pip install paperforge[openai]"
        )


def list_providers() -> list[ProviderInfo]:
    """Return all registered providers."""
    return list(PROVIDER_INFO.values())
