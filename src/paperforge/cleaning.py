"""Text clean-up helpers for model output."""

from __future__ import annotations

import re

from paperforge.models import PAGE_BREAK

_FENCE_RE = re.compile(r"```[a-zA-Z]*")
_TAG_RE = re.compile(r"<[^>]*>?")
_BREAKS_RE = re.compile(r"\s*" + re.escape(PAGE_BREAK) + r"\s*")
_BANNED_RE = re.compile(r"ABNT", re.IGNORECASE)


def clean_text(text: str | None) -> str:
    """Remove markdown code fences (```html, ``` ...) and surrounding whitespace."""
    if not text:
        return ""
    return _FENCE_RE.sub("", text).strip()


def strip_preamble(html: str, tag: str = "<h2") -> str:
    """Drop any chatter the model wrote before the first heading."""
    index = html.find(tag)
    if index > 0:
        return html[index:]
    return html


def strip_tags(html: str) -> str:
    return _TAG_RE.sub("", html)


def count_words(html: str) -> int:
    """Count whitespace-separated words of the text, ignoring markup."""
    return len(strip_tags(html).split())


def end_with_page_break(html: str) -> str:
    """Make ``html`` hold exactly one page-break marker, at its end."""
    return _BREAKS_RE.sub("\n", html).strip() + "\n" + PAGE_BREAK


def remove_banned_terms(html: str) -> str:
    # Papers follow the PALOP norms; mentions of the Brazilian standard are dropped.
    return _BANNED_RE.sub("", html)


def capitalize_title(title: str) -> str:
    """'HISTÓRIA do tema' -> 'História do tema'."""
    return title[:1].upper() + title[1:].lower()
