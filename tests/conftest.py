"""Shared fixtures: a scripted provider and settings with no waiting."""

from __future__ import annotations

import re

import pytest

from paperforge.config import Settings, get_settings
from paperforge.models import PaperRequest
from paperforge.providers import LLMProvider, Message


def words(n: int, word: str = "palavra") -> str:
    return " ".join([word] * n)


class FakeProvider(LLMProvider):
    """Answers each prompt kind with canned HTML.

    ``failures`` is consumed one entry per call; an exception entry is
    raised instead of answering, ``None`` lets the call through.
    """

    name = "fake"
    default_model = "fake-model"

    def __init__(
        self,
        outline: str = "História do tema; Conceitos fundamentais; Estudo de casos",
        failures: list[Exception | None] | None = None,
        chapter_words: int = 600,
    ) -> None:
        self.outline = outline
        self.failures = list(failures or [])
        self.chapter_words = chapter_words
        self.prompts: list[str] = []
        self.models: list[str | None] = []

    async def complete(
        self,
        system: str,
        messages: list[Message],
        model: str | None = None,
        max_tokens: int = 8192,
    ) -> str:
        prompt = messages[-1].content
        self.prompts.append(prompt)
        self.models.append(model)
        if self.failures:
            failure = self.failures.pop(0)
            if failure is not None:
                raise failure
        return self.answer(prompt)

    def answer(self, prompt: str) -> str:
        if "Liste EXATAMENTE" in prompt:
            return self.outline
        if "capítulo COMPLETO" in prompt:
            number = re.search(r"Este é o capítulo (\d+)", prompt).group(1)
            return (
                f"```html\n<h2>{number}. Capítulo</h2>\n"
                f"<p>{words(self.chapter_words)}</p>\n<!--PAGE_BREAK-->\n```"
            )
        if "INTRODUÇÃO" in prompt:
            return f"<h2>1. Introdução</h2>\n<p>{words(380)}</p>\n<!--PAGE_BREAK-->"
        if "CONCLUSÃO" in prompt:
            return f"<h2>Conclusão</h2>\n<p>{words(320)}</p>"
        if "REFERÊNCIAS" in prompt:
            return (
                "Claro! Aqui está a lista pedida:\n"
                "<h2>Referências bibliográficas</h2>\n"
                "<ul><li>SILVA, J. Economia de Angola. Luanda, 2020 (normas ABNT).</li></ul>"
            )
        raise AssertionError(f"unexpected prompt: {prompt[:80]}")


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, CHAPTER_PAUSE=0.0, MODEL="")


@pytest.fixture
def sleeps() -> list[float]:
    """List that records every delay passed to ``record_sleep``."""
    return []


@pytest.fixture
def record_sleep(sleeps):
    async def _sleep(seconds: float) -> None:
        sleeps.append(seconds)

    return _sleep


@pytest.fixture
def request_6_pages() -> PaperRequest:
    return PaperRequest(
        theme="A economia de Angola",
        discipline="Economia",
        level="Universidade",
        pages=6,
    )


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
