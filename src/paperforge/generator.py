"""Generation pipeline: outline, sections, table of contents, assembly."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from paperforge import prompts
from paperforge.assembler import assemble
from paperforge.cleaning import capitalize_title, clean_text, strip_preamble
from paperforge.config import Settings, get_settings
from paperforge.errors import PipelineCancelledError
from paperforge.models import GeneratedPaper, PaperRequest, Section, SectionKind, core_pages
from paperforge.providers import LLMProvider, get_provider
from paperforge.retry import generate_with_retry
from paperforge.toc import CONCLUSION_LABEL, INTRO_LABEL, REFERENCES_LABEL, estimate_toc, render_toc

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]
Sleep = Callable[[float], Awaitable[None]]

PLACEHOLDER_TITLE = "Análise Aprofundada {n}: {theme}"


@dataclass
class Backend:
    """The provider plus the knobs every generation call shares."""

    provider: LLMProvider
    model: str | None = None
    settings: Settings = field(default_factory=get_settings)
    sleep: Sleep = asyncio.sleep

    async def generate(self, prompt: str, caller: str) -> str:
        return await generate_with_retry(
            self.provider,
            self.model,
            prompt,
            max_attempts=self.settings.MAX_ATTEMPTS,
            base_delay=self.settings.RETRY_BASE_DELAY,
            max_tokens=self.settings.MAX_TOKENS,
            sleep=self.sleep,
            caller=caller,
        )


def _resolve_provider(
    provider: LLMProvider | None = None,
    provider_name: str | None = None,
) -> LLMProvider:
    """Get a provider instance: use the one passed in, or create from name."""
    if provider is not None:
        return provider
    return get_provider(provider_name or get_settings().PROVIDER)


def parse_outline(text: str) -> list[str]:
    return [t.strip() for t in text.split(prompts.OUTLINE_SEPARATOR) if t.strip()]


async def generate_outline(request: PaperRequest, backend: Backend) -> list[str]:
    """Ask for the body chapter titles.

    Pads with placeholder titles when the model returns too few. Extra
    titles are kept.
    """
    expected = core_pages(request.pages)
    raw = await backend.generate(prompts.build_outline_prompt(request), caller="outline")
    titles = parse_outline(clean_text(raw))

    if len(titles) < expected:
        logger.warning("Outline returned %d of %d titles, padding", len(titles), expected)
        titles.extend(
            PLACEHOLDER_TITLE.format(n=n, theme=request.theme)
            for n in range(1, expected - len(titles) + 1)
        )
    elif len(titles) > expected:
        logger.warning("Outline returned %d titles, %d requested", len(titles), expected)
    return titles


async def generate_introduction(request: PaperRequest, backend: Backend) -> Section:
    html = await backend.generate(prompts.build_intro_prompt(request), caller="intro")
    return Section(SectionKind.INTRO, INTRO_LABEL, clean_text(html))


async def generate_chapter(
    request: PaperRequest,
    backend: Backend,
    index: int,
    title: str,
) -> Section:
    """Write body chapter ``index`` (0-based). Its number is ``index + 2``."""
    number = index + 2
    prompt = prompts.build_chapter_prompt(request, number, title, capitalize_title(title))
    html = await backend.generate(prompt, caller=f"chapter-{number}")
    return Section(SectionKind.CHAPTER, title, clean_text(html), index=index)


async def generate_conclusion(request: PaperRequest, backend: Backend) -> Section:
    html = await backend.generate(prompts.build_conclusion_prompt(request), caller="conclusion")
    return Section(SectionKind.CONCLUSION, CONCLUSION_LABEL, clean_text(html))


async def generate_references(request: PaperRequest, backend: Backend) -> Section:
    html = await backend.generate(prompts.build_references_prompt(request), caller="references")
    return Section(SectionKind.REFERENCES, REFERENCES_LABEL, strip_preamble(clean_text(html)))


async def run_pipeline(
    request: PaperRequest,
    on_progress: ProgressCallback | None = None,
    *,
    provider: LLMProvider | None = None,
    provider_name: str | None = None,
    model: str | None = None,
    settings: Settings | None = None,
    cancel_event: asyncio.Event | None = None,
    sleep: Sleep = asyncio.sleep,
) -> str:
    """Generate a complete paper and return it as page-break-delimited HTML.

    Steps run strictly in order. Any failure aborts the whole run.

    Args:
        request: What the student asked for.
        on_progress: Called with a status message before each step.
        provider: A pre-configured LLMProvider instance.
        provider_name: Provider name to instantiate (ignored if provider given).
        model: Model ID override.
        settings: Settings override (defaults to the environment).
        cancel_event: When set, the run stops at the next step boundary.
        sleep: Awaitable sleep used for backoff and the pause between chapters.

    Raises:
        PipelineCancelledError: If ``cancel_event`` was set.
    """
    settings = settings or get_settings()
    backend = Backend(
        provider=_resolve_provider(provider, provider_name or settings.PROVIDER),
        model=model or settings.MODEL or None,
        settings=settings,
        sleep=sleep,
    )

    def step(status: str) -> None:
        if cancel_event is not None and cancel_event.is_set():
            raise PipelineCancelledError(f"Cancelled before: {status}")
        logger.info("%s", status)
        if on_progress:
            on_progress(status)

    step(f"Planeando estrutura para {request.pages} páginas...")
    titles = await generate_outline(request, backend)

    step("Escrevendo Introdução...")
    intro = await generate_introduction(request, backend)

    chapters: list[Section] = []
    for index, title in enumerate(titles):
        step(f"Escrevendo Cap. {index + 2}/{len(titles) + 3}: {title}...")
        chapters.append(await generate_chapter(request, backend, index, title))
        await backend.sleep(settings.CHAPTER_PAUSE)

    step("Escrevendo Conclusão...")
    conclusion = await generate_conclusion(request, backend)

    step("Gerando Referências Bibliográficas...")
    references = await generate_references(request, backend)

    step("Gerando Sumário...")
    entries = estimate_toc(
        intro.html,
        titles,
        [c.html for c in chapters],
        conclusion.html,
        words_per_page=settings.WORDS_PER_PAGE,
    )
    toc = Section(SectionKind.TOC, "Sumário", render_toc(entries))

    document = assemble(
        toc.html,
        intro.html,
        [c.html for c in chapters],
        conclusion.html,
        references.html,
    )
    logger.info("Paper on '%s' assembled: %d chapters", request.theme, len(chapters))
    return document


async def generate_paper(
    request: PaperRequest,
    on_progress: ProgressCallback | None = None,
    **kwargs,
) -> GeneratedPaper:
    """Run the pipeline and wrap the HTML in a ``GeneratedPaper``."""
    content = await run_pipeline(request, on_progress, **kwargs)
    return GeneratedPaper(title=request.theme, content=content, request=request)
