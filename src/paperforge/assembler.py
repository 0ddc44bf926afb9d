"""Joins generated sections into one paginated document."""

from __future__ import annotations

from paperforge.cleaning import end_with_page_break, remove_banned_terms


def assemble(
    toc_html: str,
    intro_html: str,
    chapters_html: list[str],
    conclusion_html: str,
    references_html: str,
) -> str:
    """Concatenate sections in presentation order.

    Every piece is forced to end with exactly one page-break marker, so
    splitting the result on the marker yields one page per section even
    when the model forgot its own marker.
    """
    pieces = [toc_html, intro_html, *chapters_html, conclusion_html, references_html]
    document = "\n".join(end_with_page_break(piece) for piece in pieces)
    return remove_banned_terms(document)
