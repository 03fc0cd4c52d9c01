"""Diff API endpoints"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from sse_starlette.sse import EventSourceResponse

from models.diff import (
    ApplyPatchRequest,
    ApplyPatchResponse,
    BatchDiffRequest,
    DiffStats,
    DiffStatsRequest,
    DiffStreamEvent,
    GenerateDiffRequest,
    GenerateDiffResponse,
    ParseDiffRequest,
    ParseDiffResponse,
)
from services.config_manager import ConfigManager
from services.diff_generator import DiffGenerator
from services.exceptions import DiffEngineError, DiffInputTooLargeError, PatchApplyError

logger = logging.getLogger(__name__)

router = APIRouter()


def get_diff_generator() -> DiffGenerator:
    """Diff generator built from the current configuration"""
    config = ConfigManager.get_instance().get_config()
    try:
        return DiffGenerator.from_config(config)
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Invalid diff configuration: {e}")


def check_context_lines(context_lines: int | None) -> None:
    if context_lines is not None and context_lines < 0:
        raise HTTPException(status_code=400, detail="context_lines must be >= 0")


@router.post("/generate", response_model=GenerateDiffResponse)
async def generate_diff(request: GenerateDiffRequest) -> GenerateDiffResponse:
    """Generate a unified diff between two texts"""
    check_context_lines(request.context_lines)
    generator = get_diff_generator()

    try:
        result = await run_in_threadpool(
            generator.generate_structured,
            request.original,
            request.modified,
            request.filename,
            request.context_lines,
        )
    except DiffInputTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))

    return GenerateDiffResponse(diff=result.unified_diff, stats=result.stats)


@router.post("/apply", response_model=ApplyPatchResponse)
async def apply_patch(request: ApplyPatchRequest) -> ApplyPatchResponse:
    """Apply a unified diff to a text"""
    generator = get_diff_generator()

    try:
        patched = await run_in_threadpool(generator.apply_patch, request.original, request.patch)
    except DiffInputTooLargeError as e:
        raise HTTPException(status_code=413, detail=str(e))
    except PatchApplyError as e:
        logger.warning("Patch rejected: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    return ApplyPatchResponse(patched=patched)


@router.post("/parse", response_model=ParseDiffResponse)
async def parse_diff(request: ParseDiffRequest) -> ParseDiffResponse:
    """Parse a unified diff into per-file hunks"""
    patches = get_diff_generator().parse_diff(request.diff_text)
    return ParseDiffResponse(patches=patches)


@router.post("/stats", response_model=DiffStats)
async def diff_stats(request: DiffStatsRequest) -> DiffStats:
    """Summary counts for a unified diff"""
    return get_diff_generator().diff_stats(request.diff_text)


@router.post("/stream")
async def diff_stream(request: BatchDiffRequest):
    """Diff several files and stream one SSE event per file"""
    check_context_lines(request.context_lines)
    generator = get_diff_generator()

    async def event_generator():
        for index, item in enumerate(request.files):
            try:
                result = await run_in_threadpool(
                    generator.generate_structured,
                    item.original,
                    item.modified,
                    item.filename,
                    request.context_lines,
                )
                event = DiffStreamEvent(type="diff", index=index, result=result)
            except DiffEngineError as e:
                logger.warning("Diff failed for file #%d: %s", index, e)
                event = DiffStreamEvent(type="error", index=index, error=str(e))
            yield {"event": "message", "data": event.model_dump_json()}

        event = DiffStreamEvent(type="done", done=True)
        yield {"event": "message", "data": event.model_dump_json()}

    return EventSourceResponse(event_generator())
