import asyncio

from paperforge.export import to_word_html, word_filename, write_word
from paperforge.generator import generate_paper
from paperforge.models import PAGE_BREAK, GeneratedPaper, PaperRequest

WORD_BREAK = 'mso-break-type:page-break'


def _paper(fake_provider, settings, record_sleep, request):
    return asyncio.run(
        generate_paper(request, provider=fake_provider, settings=settings, sleep=record_sleep)
    )


def test_word_export_breaks_before_main_sections(fake_provider, settings, record_sleep, request_6_pages):
    paper = _paper(fake_provider, settings, record_sleep, request_6_pages)

    doc = to_word_html(paper)

    assert PAGE_BREAK not in doc
    # Introduction, first chapter, conclusion, references
    assert doc.count(WORD_BREAK) == 4
    assert doc.index(WORD_BREAK) < doc.index("<h2>1. Introdução</h2>")
    assert doc.startswith("<html xmlns:o='urn:schemas-microsoft-com:office:office'")
    assert doc.endswith("</body></html>")


def test_word_export_only_breaks_before_first_chapter():
    request = PaperRequest(theme="Água", discipline="Biologia")
    content = (
        f"<h2>1. Introdução</h2><p>a</p>{PAGE_BREAK}"
        f"<h2>2. Ciclo</h2><p>b</p>{PAGE_BREAK}"
        f"<h2>3. Uso</h2><p>c</p>{PAGE_BREAK}"
    )

    doc = to_word_html(GeneratedPaper(title="Água", content=content, request=request))

    assert doc.count(WORD_BREAK) == 2
    assert "<br/><br/>" in doc or "<br><br>" in doc


def test_word_filename():
    request = PaperRequest(theme="A economia  de Angola", discipline="Economia")
    assert word_filename(request) == "Trabalho_A_economia_de_Angola.doc"


def test_write_word_adds_bom(tmp_path, fake_provider, settings, record_sleep, request_6_pages):
    paper = _paper(fake_provider, settings, record_sleep, request_6_pages)

    path = write_word(paper, tmp_path / "trabalho.doc")

    raw = path.read_bytes()
    assert raw.startswith(b"\xef\xbb\xbf")
    assert "Introdução".encode("utf-8") in raw


def test_word_title_is_escaped():
    request = PaperRequest(theme="Sal & <Açúcar>", discipline="Química")
    paper = GeneratedPaper(title=request.theme, content=f"<h2>1. Introdução</h2>{PAGE_BREAK}", request=request)

    doc = to_word_html(paper)

    assert "<title>Sal &amp; &lt;Açúcar&gt;</title>" in doc
    assert "<Açúcar>" not in doc
