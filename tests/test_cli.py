from typer.testing import CliRunner

from paperforge import cli
from paperforge.models import PAGE_BREAK, GeneratedPaper

runner = CliRunner()


def test_options_lists_enum_values():
    result = runner.invoke(cli.app, ["options"])

    assert result.exit_code == 0
    assert "Universidade" in result.output
    assert "17-20" in result.output


def test_generate_without_key_exits(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

    result = runner.invoke(cli.app, ["generate", "Água", "-d", "Biologia"])

    assert result.exit_code == 1
    assert "GEMINI_API_KEY" in result.output


def test_generate_writes_html(monkeypatch, tmp_path):
    async def fake_generate_paper(request, on_progress, **kwargs):
        on_progress("Escrevendo Introdução...")
        content = f"<h2>Sumário</h2>{PAGE_BREAK}<h2>1. Introdução</h2>{PAGE_BREAK}"
        return GeneratedPaper(title=request.theme, content=content, request=request)

    monkeypatch.setattr(cli, "check_provider_configured", lambda name: None)
    monkeypatch.setattr(cli, "generate_paper", fake_generate_paper)
    out = tmp_path / "trabalho.html"

    result = runner.invoke(
        cli.app,
        ["generate", "Água", "-d", "Biologia", "--level", "Técnico", "-n", "4", "-o", str(out)],
    )

    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8").count(PAGE_BREAK) == 2
    assert "2 páginas" in result.output
    assert "(2 capítulos)" in result.output
