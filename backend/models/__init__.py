"""Models module - Pydantic data models"""

from .diff import (
    AddChange,
    ApplyPatchRequest,
    ApplyPatchResponse,
    BatchDiffRequest,
    Change,
    DeleteChange,
    DiffResult,
    DiffStats,
    DiffStatsRequest,
    DiffStreamEvent,
    EqualChange,
    FileDiffInput,
    GenerateDiffRequest,
    GenerateDiffResponse,
    Hunk,
    ParseDiffRequest,
    ParseDiffResponse,
    Patch,
)

__all__ = [
    # Diff structures
    "AddChange",
    "Change",
    "DeleteChange",
    "EqualChange",
    "Hunk",
    "Patch",
    "DiffStats",
    "DiffResult",
    # API models
    "DiffStatsRequest",
    "ApplyPatchRequest",
    "ApplyPatchResponse",
    "BatchDiffRequest",
    "DiffStreamEvent",
    "FileDiffInput",
    "GenerateDiffRequest",
    "GenerateDiffResponse",
    "ParseDiffRequest",
    "ParseDiffResponse",
]
