"""Data models for paper requests and generated papers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

PAGE_BREAK = "<!--PAGE_BREAK-->"

# Intro, conclusion and references each take one page of the request.
RESERVED_PAGES = 3
MIN_CHAPTERS = 2


class AcademicLevel(str, Enum):
    """Academic level the paper is written for."""

    SECONDARY = "Ensino Secundário"
    HIGH_SCHOOL = "Ensino Médio"
    TECHNICAL = "Técnico"
    UNIVERSITY = "Universidade"


class WritingStyle(str, Enum):
    SIMPLE = "Simples"
    NORMAL = "Normal"
    AVERAGE_STUDENT = "Aluno médio"


class LanguageVariant(str, Enum):
    ANGOLA = "Português Angola"
    BRAZIL = "Português Brasil"
    PORTUGAL = "Português Portugal"


class GradeBand(str, Enum):
    """Grade the student is aiming for, on the 0-20 scale."""

    LOW = "10-14"
    MEDIUM = "14-17"
    HIGH = "17-20"


class SectionKind(str, Enum):
    TOC = "toc"
    INTRO = "intro"
    CHAPTER = "chapter"
    CONCLUSION = "conclusion"
    REFERENCES = "references"


def core_pages(pages: int) -> int:
    """Number of body chapters to generate for a requested page count."""
    return max(pages - RESERVED_PAGES, MIN_CHAPTERS)


@dataclass(frozen=True)
class PaperRequest:
    """Everything a student submits when ordering a paper."""

    theme: str
    discipline: str
    level: AcademicLevel = AcademicLevel.SECONDARY
    pages: int = 5
    style: WritingStyle = WritingStyle.NORMAL
    language: LanguageVariant = LanguageVariant.ANGOLA
    grade: GradeBand = GradeBand.MEDIUM

    def __post_init__(self) -> None:
        if not self.theme.strip():
            raise ValueError("theme must not be empty")
        if isinstance(self.pages, bool) or not isinstance(self.pages, int) or self.pages < 1:
            raise ValueError(f"pages must be an integer >= 1, got {self.pages!r}")
        # Accept raw values ("Universidade") as well as enum members
        object.__setattr__(self, "level", AcademicLevel(self.level))
        object.__setattr__(self, "style", WritingStyle(self.style))
        object.__setattr__(self, "language", LanguageVariant(self.language))
        object.__setattr__(self, "grade", GradeBand(self.grade))

    @property
    def chapter_count(self) -> int:
        return core_pages(self.pages)


@dataclass
class Section:
    """One generated unit of the paper."""

    kind: SectionKind
    title: str
    html: str
    index: int | None = None  # chapters only, 0-based


@dataclass(frozen=True)
class TocEntry:
    label: str
    page: int


def split_pages(content: str) -> list[str]:
    """Split a document into renderable pages.

    Documents without any page-break marker are split before each ``<h2``
    heading instead.
    """
    parts = content.split(PAGE_BREAK)
    if len(parts) == 1:
        parts = re.sub(r"(<h2)", PAGE_BREAK + r"\1", content).split(PAGE_BREAK)
    return [p for p in parts if p.strip()]


@dataclass(frozen=True)
class GeneratedPaper:
    """The result of one successful pipeline run."""

    title: str
    content: str
    request: PaperRequest
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def pages(self) -> list[str]:
        return split_pages(self.content)

    @property
    def page_count(self) -> int:
        return len(self.pages())
