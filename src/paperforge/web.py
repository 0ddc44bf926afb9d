"""FastAPI web app for paperforge."""

from __future__ import annotations

import asyncio
import json
import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, Field

from paperforge.config import get_settings
from paperforge.errors import PaperForgeError, friendly_error
from paperforge.generator import generate_paper
from paperforge.models import (
    AcademicLevel,
    GradeBand,
    LanguageVariant,
    PaperRequest,
    WritingStyle,
)
from paperforge.providers import PROVIDER_INFO, get_provider, is_configured

logger = logging.getLogger(__name__)

app = FastAPI(title="paperforge")


class GenerateBody(BaseModel):
    theme: str = Field(min_length=1)
    discipline: str = Field(min_length=1)
    level: AcademicLevel = AcademicLevel.SECONDARY
    pages: int = Field(default=5, ge=1)
    style: WritingStyle = WritingStyle.NORMAL
    language: LanguageVariant = LanguageVariant.ANGOLA
    grade: GradeBand = GradeBand.MEDIUM

    def to_request(self) -> PaperRequest:
        return PaperRequest(**self.model_dump())


@app.get("/api/providers")
async def api_providers() -> JSONResponse:
    """Return available providers and their metadata."""
    return JSONResponse([
        {
            "name": info.name,
            "description": info.description,
            "default_model": info.default_model,
            "free": info.free,
            "configured": is_configured(info.name),
        }
        for info in PROVIDER_INFO.values()
    ])


@app.get("/api/options")
async def api_options() -> JSONResponse:
    """Accepted values for each enumerated request field."""
    return JSONResponse({
        "level": [m.value for m in AcademicLevel],
        "style": [m.value for m in WritingStyle],
        "language": [m.value for m in LanguageVariant],
        "grade": [m.value for m in GradeBand],
    })


@app.post("/generate")
async def generate(body: GenerateBody) -> StreamingResponse:
    """Generate a paper, streaming progress as server-sent events.

    Emits ``progress`` events while the pipeline runs, then either ``done``
    with the full HTML or ``error`` with a message fit for the student.
    """
    settings = get_settings()

    # Validate the request and API key before doing any work
    try:
        request = body.to_request()
        provider = get_provider(settings.PROVIDER)
    except (PaperForgeError, ValueError, ImportError) as exc:
        return StreamingResponse(
            _error_stream(friendly_error(exc)),
            media_type="text/event-stream",
        )

    async def event_stream():
        queue: asyncio.Queue[str] = asyncio.Queue()
        cancel = asyncio.Event()
        task = asyncio.create_task(
            generate_paper(
                request,
                queue.put_nowait,
                provider=provider,
                settings=settings,
                cancel_event=cancel,
            )
        )

        try:
            while not (task.done() and queue.empty()):
                try:
                    status = await asyncio.wait_for(queue.get(), timeout=0.5)
                except asyncio.TimeoutError:
                    continue
                yield _sse("progress", {"status": status})

            try:
                paper = task.result()
            except Exception as exc:
                logger.exception("Generation failed for theme '%s'", request.theme)
                yield _sse("error", {"message": friendly_error(exc)})
                return

            yield _sse(
                "done",
                {
                    "title": paper.title,
                    "html": paper.content,
                    "page_count": paper.page_count,
                    "created_at": paper.created_at.isoformat(),
                },
            )
        finally:
            # Client went away mid-stream
            if not task.done():
                cancel.set()
                task.cancel()

    return StreamingResponse(event_stream(), media_type="text/event-stream")


def _sse(event: str, data: dict) -> str:
    """Format a server-sent event."""
    return f"event: {event}\ndata: {json.dumps(data)}\n\n"


async def _error_stream(message: str):
    yield _sse("error", {"message": message})
