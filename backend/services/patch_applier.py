"""
Patch Applier - Replay parsed hunks against an original text
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from models.diff import Hunk, Patch
from services.exceptions import InvalidHunkError, PatchConflictError
from services.lcs import join_lines, split_lines
from services.unified_diff import format_hunk_header, parse_diff

logger = logging.getLogger(__name__)


def apply_hunks(lines: list[str], hunks: Iterable[Hunk]) -> list[str]:
    """Apply hunks of one patch to `lines` and return the patched lines.

    Each hunk starts at `old_start - 1 + offset`, where offset is the line
    count drift of the hunks already applied. Context and deleted lines must
    match the text at that position.
    """
    work = list(lines)
    offset = 0
    prev_end = 0

    for hunk in hunks:
        start = hunk.old_start - 1 + offset
        if start < prev_end or start > len(work):
            raise InvalidHunkError(
                f"invalid or overlapping hunk {format_hunk_header(hunk)} "
                f"(resolved start {start + 1}, text has {len(work)} lines)"
            )

        cursor = start
        old_line = hunk.old_start
        added = deleted = 0
        for change in hunk.lines:
            if change.type == "add":
                work.insert(cursor, change.line)
                cursor += 1
                added += 1
                continue

            actual = work[cursor] if cursor < len(work) else None
            if actual != change.line:
                raise PatchConflictError(old_line, change.line, actual)
            if change.type == "delete":
                del work[cursor]
                deleted += 1
            else:
                cursor += 1
            old_line += 1

        prev_end = cursor
        offset += added - deleted

    return work


def apply_patches(original: str, patches: Iterable[Patch]) -> str:
    """Apply each patch of a document in order, starting from `original`"""
    lines = split_lines(original)
    for patch in patches:
        logger.debug("Applying %d hunk(s) for %s", len(patch.hunks), patch.new_file or patch.old_file)
        lines = apply_hunks(lines, patch.hunks)
    return join_lines(lines)


def apply_patch(original: str, patch_text: str) -> str:
    """Parse `patch_text` as a unified diff and apply it to `original`"""
    return apply_patches(original, parse_diff(patch_text))
