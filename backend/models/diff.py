"""Diff-related data models"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class EqualChange(BaseModel):
    """Line present in both versions"""

    type: Literal["equal"] = "equal"
    line: str
    old_index: int | None = None  # 0-based, None when parsed from diff text
    new_index: int | None = None


class AddChange(BaseModel):
    """Line only present in the modified version"""

    type: Literal["add"] = "add"
    line: str
    new_index: int | None = None


class DeleteChange(BaseModel):
    """Line only present in the original version"""

    type: Literal["delete"] = "delete"
    line: str
    old_index: int | None = None


Change = Annotated[Union[EqualChange, AddChange, DeleteChange], Field(discriminator="type")]


class Hunk(BaseModel):
    """A contiguous region of changes with surrounding context"""

    old_start: int  # 1-indexed
    old_count: int
    new_start: int  # 1-indexed
    new_count: int
    lines: list[Change] = []

    @classmethod
    def from_lines(cls, old_start: int, new_start: int, lines: list[Change]) -> "Hunk":
        """Build a hunk whose counts are derived from its lines"""
        old_count = sum(1 for c in lines if c.type != "add")
        new_count = sum(1 for c in lines if c.type != "delete")
        return cls(
            old_start=old_start,
            old_count=old_count,
            new_start=new_start,
            new_count=new_count,
            lines=list(lines),
        )


class Patch(BaseModel):
    """All hunks for a single file"""

    old_file: str
    new_file: str | None = None
    hunks: list[Hunk] = []


class DiffStats(BaseModel):
    """Summary counts for a diff document"""

    additions: int = 0
    deletions: int = 0
    hunks: int = 0
    files: list[str] = []


class DiffResult(BaseModel):
    """Complete diff result for a file"""

    file_path: str
    hunks: list[Hunk]
    unified_diff: str  # Standard unified diff format
    stats: DiffStats


# ========== API request/response models ==========


class GenerateDiffRequest(BaseModel):
    """Request to diff two texts"""

    original: str
    modified: str
    filename: str | None = None
    context_lines: int | None = None


class GenerateDiffResponse(BaseModel):
    """Unified diff text with summary counts"""

    diff: str
    stats: DiffStats


class ApplyPatchRequest(BaseModel):
    """Request to apply a unified diff to a text"""

    original: str
    patch: str


class ApplyPatchResponse(BaseModel):
    patched: str


class ParseDiffRequest(BaseModel):
    diff_text: str


class ParseDiffResponse(BaseModel):
    patches: list[Patch]


class DiffStatsRequest(BaseModel):
    """Request for summary counts of a unified diff"""

    diff_text: str


class FileDiffInput(BaseModel):
    """One file of a batch diff request"""

    original: str
    modified: str
    filename: str | None = None


class BatchDiffRequest(BaseModel):
    """Request to diff several files, streamed back one event per file"""

    files: list[FileDiffInput]
    context_lines: int | None = None


class DiffStreamEvent(BaseModel):
    """SSE stream event"""

    type: str  # "diff", "error", "done"
    index: int | None = None
    result: DiffResult | None = None
    error: str | None = None
    done: bool = False
