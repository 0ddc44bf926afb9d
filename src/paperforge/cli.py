"""CLI interface for paperforge."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from paperforge.config import get_settings
from paperforge.errors import PaperForgeError, friendly_error
from paperforge.export import word_filename, write_word
from paperforge.generator import generate_paper
from paperforge.models import (
    AcademicLevel,
    GeneratedPaper,
    GradeBand,
    LanguageVariant,
    PaperRequest,
    WritingStyle,
)
from paperforge.providers import PROVIDER_INFO, check_provider_configured, is_configured

app = typer.Typer(
    name="paperforge",
    help="Generate academic papers with an LLM.",
    no_args_is_help=True,
)

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def generate(
    theme: str = typer.Argument(help="Theme of the paper."),
    discipline: str = typer.Option(..., "--discipline", "-d", help="School subject or discipline."),
    level: AcademicLevel = typer.Option(AcademicLevel.SECONDARY, "--level", "-l"),
    pages: int = typer.Option(5, "--pages", "-n", min=1, help="Target number of pages."),
    style: WritingStyle = typer.Option(WritingStyle.NORMAL, "--style", "-s"),
    language: LanguageVariant = typer.Option(LanguageVariant.ANGOLA, "--language"),
    grade: GradeBand = typer.Option(GradeBand.MEDIUM, "--grade", "-g"),
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="LLM provider: gemini, claude, openai, groq, openrouter, ollama.",
    ),
    model: str | None = typer.Option(
        None,
        "--model",
        "-m",
        help="Model ID override (uses provider default if omitted).",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the paper to a .html or .doc file (default: Trabalho_<theme>.doc).",
    ),
) -> None:
    """Generate a paper and save it as HTML or a Word document."""
    settings = get_settings()
    _setup_logging(settings.LOG_LEVEL)
    provider_name = provider or settings.PROVIDER

    try:
        request = PaperRequest(
            theme=theme,
            discipline=discipline,
            level=level,
            pages=pages,
            style=style,
            language=language,
            grade=grade,
        )
        check_provider_configured(provider_name)
    except (PaperForgeError, ValueError) as exc:
        console.print(f"[red]{friendly_error(exc)}[/red]")
        raise typer.Exit(code=1)

    info = PROVIDER_INFO[provider_name]
    console.print(
        Panel(
            f"[bold]paperforge[/bold]\n"
            f"Tema: {theme} ({discipline})\n"
            f"Nível: {level.value} | Páginas: {pages} ({request.chapter_count} capítulos)\n"
            f"Provider: {provider_name} ({model or settings.MODEL or info.default_model})",
            border_style="cyan",
        )
    )

    try:
        paper = asyncio.run(_run_generation(request, provider_name, model))
    except Exception as exc:
        logging.getLogger(__name__).debug("Generation failed", exc_info=exc)
        console.print(f"[red]{friendly_error(exc)}[/red]")
        raise typer.Exit(code=1)

    path = output or Path(word_filename(request))
    if path.suffix.lower() == ".doc":
        write_word(paper, path)
    else:
        path.write_text(paper.content, encoding="utf-8")
    console.print(f"\n[green]{paper.page_count} páginas guardadas em {path}[/green]")


async def _run_generation(
    request: PaperRequest,
    provider_name: str,
    model: str | None,
) -> GeneratedPaper:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("A iniciar...", total=None)

        def on_progress(status: str) -> None:
            progress.update(task, description=status)

        paper = await generate_paper(
            request,
            on_progress,
            provider_name=provider_name,
            model=model,
        )
        progress.update(task, description="[green]Trabalho concluído!")
    return paper


@app.command()
def providers() -> None:
    """List available LLM providers and their configuration status."""
    table = Table(title="Available Providers")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Default Model", style="dim")
    table.add_column("Free?", justify="center")
    table.add_column("Status", justify="center")

    for info in PROVIDER_INFO.values():
        if not info.api_key_env:
            status = "[green]Ready[/green]"
        elif is_configured(info.name):
            status = "[green]Configured[/green]"
        else:
            status = f"[yellow]Set {' or '.join(info.api_key_env)}[/yellow]"

        free = "[green]Yes[/green]" if info.free else "[dim]No[/dim]"

        table.add_row(info.name, info.description, info.default_model, free, status)

    console.print(table)


@app.command()
def options() -> None:
    """Show the accepted values for level, style, language and grade."""
    for label, enum in (
        ("Levels (--level)", AcademicLevel),
        ("Styles (--style)", WritingStyle),
        ("Languages (--language)", LanguageVariant),
        ("Grades (--grade)", GradeBand),
    ):
        console.print(f"[bold]{label}[/bold]")
        for member in enum:
            console.print(f"  [cyan]{member.value}[/cyan]")


if __name__ == "__main__":
    app()
