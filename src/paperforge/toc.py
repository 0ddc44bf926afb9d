"""Table of contents with page numbers estimated from word counts."""

from __future__ import annotations

import math
from html import escape

from paperforge.cleaning import capitalize_title, count_words
from paperforge.models import TocEntry

WORDS_PER_PAGE = 450
FIRST_CONTENT_PAGE = 2  # page 1 is the table of contents itself

INTRO_LABEL = "1. Introdução"
CONCLUSION_LABEL = "Conclusão"
REFERENCES_LABEL = "Referências bibliográficas"


def chapter_label(index: int, title: str) -> str:
    return f"{index + 2}. {capitalize_title(title)}"


def estimate_toc(
    intro_html: str,
    chapter_titles: list[str],
    chapters_html: list[str],
    conclusion_html: str,
    words_per_page: int = WORDS_PER_PAGE,
) -> list[TocEntry]:
    """Estimate the starting page of every section.

    Intro and conclusion occupy at least one page each. Chapter words are
    accumulated across chapters and only rounded up once all of them are
    summed, so short chapters share pages.
    """
    entries = [TocEntry(INTRO_LABEL, FIRST_CONTENT_PAGE)]
    page = FIRST_CONTENT_PAGE + max(1, math.ceil(count_words(intro_html) / words_per_page))

    chapter_words = 0
    for index, title in enumerate(chapter_titles):
        start = page + chapter_words // words_per_page
        entries.append(TocEntry(chapter_label(index, title), start))
        if index < len(chapters_html):
            chapter_words += count_words(chapters_html[index])
    page += math.ceil(chapter_words / words_per_page)

    entries.append(TocEntry(CONCLUSION_LABEL, page))
    page += max(1, math.ceil(count_words(conclusion_html) / words_per_page))

    entries.append(TocEntry(REFERENCES_LABEL, page))
    return entries


_ROW = (
    '    <tr>\n'
    '      <td style="text-align: left; border: none; padding: 5px 0;"><b>{label}</b></td>\n'
    '      <td style="text-align: right; border: none; padding: 5px 0;">{page}</td>\n'
    '    </tr>\n'
)


def render_toc(entries: list[TocEntry]) -> str:
    """Render the entries as the "Sumário" page."""
    rows = "".join(_ROW.format(label=escape(e.label), page=e.page) for e in entries)
    return (
        '<div class="toc-page" style="font-family: \'Times New Roman\', serif; color: black;">\n'
        '  <h2 style="text-align: center; margin-bottom: 40px;">Sumário</h2>\n'
        '  <table width="100%" style="font-size: 12pt; line-height: 1.5; '
        'border-collapse: collapse; border: none;">\n'
        f"{rows}"
        "  </table>\n"
        "</div>"
    )
