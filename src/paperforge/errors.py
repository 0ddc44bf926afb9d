"""Exceptions raised by the generation pipeline."""

from __future__ import annotations

OVERLOADED_MESSAGE = "O sistema está sobrecarregado. Tente novamente em instantes."


class PaperForgeError(Exception):
    """Base class for all paperforge errors."""


class ProviderNotConfiguredError(PaperForgeError):
    """Raised when a provider's API key is not set."""


class RateLimitError(PaperForgeError):
    """The provider rejected a request because of quota or throughput limits."""

    def __init__(self, message: str, provider: str = "unknown") -> None:
        super().__init__(message)
        self.provider = provider


class SystemOverloadedError(PaperForgeError):
    """Every retry attempt was rate limited."""

    def __init__(self, attempts: int) -> None:
        super().__init__(OVERLOADED_MESSAGE)
        self.attempts = attempts


class PipelineCancelledError(PaperForgeError):
    """The caller cancelled generation between two steps."""


def friendly_error(exc: BaseException) -> str:
    """Turn any pipeline failure into a message fit to show a student."""
    if isinstance(exc, SystemOverloadedError):
        return OVERLOADED_MESSAGE
    if isinstance(exc, ProviderNotConfiguredError):
        return f"A chave da API não está configurada. {exc}"
    if isinstance(exc, PipelineCancelledError):
        return "A geração do trabalho foi cancelada."
    if isinstance(exc, RateLimitError):
        return "Limite de pedidos excedido. Aguarde um momento e tente novamente."
    if isinstance(exc, ValueError):
        return f"Pedido inválido: {exc}"
    if isinstance(exc, ImportError):
        return f"O provider não está instalado. {exc}"
    return "Erro ao gerar o trabalho. Por favor, tente novamente."
