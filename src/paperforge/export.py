"""Export a generated paper as a Word-compatible .doc (HTML) file."""

from __future__ import annotations

import re
from html import escape
from pathlib import Path

from bs4 import BeautifulSoup

from paperforge.models import PAGE_BREAK, GeneratedPaper, PaperRequest

_WORD_HEADER = """\
<html xmlns:o='urn:schemas-microsoft-com:office:office'
      xmlns:w='urn:schemas-microsoft-com:office:word'
      xmlns='http://www.w3.org/TR/REC-html40'>
<head>
  <meta charset='utf-8'>
  <title>{title}</title>
  <style>
    @page {{ size: A4; margin: 3cm 2cm 2cm 3cm; }}
    body {{ font-family: 'Times New Roman', Times, serif; line-height: 1.5; }}
    p, h1, h2, h3, h4, li {{ font-family: 'Times New Roman', Times, serif; }}
    p, li {{ text-align: justify; }}
    p {{ text-indent: 1.25cm; margin-top: 0; margin-bottom: 0; }}
    h1, h2, h3 {{ margin-top: 24pt; margin-bottom: 12pt; }}
  </style>
</head><body>
"""
_WORD_FOOTER = "</body></html>"

_WORD_BREAK_ATTRS = {"clear": "all", "style": "page-break-before:always; mso-break-type:page-break"}

# Headings that must start on a fresh Word page. Each is matched once.
_SECTION_HEADINGS = [
    re.compile(r"^(?:1\.\s*)?Introdução$", re.IGNORECASE),
    re.compile(r"^2\.\s*\S"),
    re.compile(r"^Conclusão$", re.IGNORECASE),
    re.compile(r"^Referências bibliográficas$", re.IGNORECASE),
]


def to_word_html(paper: GeneratedPaper) -> str:
    """Build the Word document source for ``paper``.

    Pagination markers become plain spacing; hard Word page breaks are put
    in front of the Introduction, the first body chapter, the Conclusion
    and the References.
    """
    soup = BeautifulSoup(paper.content.replace(PAGE_BREAK, "<br><br>"), "html.parser")

    pending = list(_SECTION_HEADINGS)
    for heading in soup.find_all("h2"):
        text = heading.get_text(" ", strip=True)
        match = next((p for p in pending if p.search(text)), None)
        if match is None:
            continue
        pending.remove(match)
        heading.insert_before(soup.new_tag("br", attrs=dict(_WORD_BREAK_ATTRS)))

    return _WORD_HEADER.format(title=escape(paper.title)) + str(soup) + _WORD_FOOTER


def word_filename(request: PaperRequest) -> str:
    return "Trabalho_{}.doc".format(re.sub(r"\s+", "_", request.theme.strip()))


def write_word(paper: GeneratedPaper, path: Path) -> Path:
    """Write the .doc file with a UTF-8 BOM so Word keeps the accents."""
    path.write_text("\ufeff" + to_word_html(paper), encoding="utf-8")
    return path
