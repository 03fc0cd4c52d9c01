"""
Diff Generator Service - Generate, parse and apply unified diffs
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from models.diff import Change, DiffResult, DiffStats, Hunk, Patch
from services import patch_applier, unified_diff
from services.exceptions import DiffInputTooLargeError
from services.hunks import DEFAULT_CONTEXT, group_into_hunks
from services.lcs import build_changes, compute_lcs, split_lines

logger = logging.getLogger(__name__)

DEFAULT_MAX_LINES = 5000
DEFAULT_FILENAME = "file"


def compute_changes(original: str, modified: str) -> list[Change]:
    """Full edit script between two texts"""
    original_lines = split_lines(original)
    modified_lines = split_lines(modified)
    lcs = compute_lcs(original_lines, modified_lines)
    return build_changes(original_lines, modified_lines, lcs)


def generate_diff(
    original: str,
    modified: str,
    filename: str = DEFAULT_FILENAME,
    context: int = DEFAULT_CONTEXT,
) -> str:
    """Unified diff turning `original` into `modified`"""
    hunks = group_into_hunks(compute_changes(original, modified), context)
    return unified_diff.format_unified_diff(hunks, filename)


def diff_stats(patches: Iterable[Patch]) -> DiffStats:
    """Count added/deleted lines, hunks and files in a diff document"""
    stats = DiffStats()
    for patch in patches:
        name = patch.new_file or patch.old_file
        if name and name not in stats.files:
            stats.files.append(name)
        stats.hunks += len(patch.hunks)
        for hunk in patch.hunks:
            for change in hunk.lines:
                if change.type == "add":
                    stats.additions += 1
                elif change.type == "delete":
                    stats.deletions += 1
    return stats


class DiffGenerator:
    """Generate unified diffs for code modifications"""

    def __init__(
        self,
        context_lines: int = DEFAULT_CONTEXT,
        max_lines: int = DEFAULT_MAX_LINES,
        default_filename: str = DEFAULT_FILENAME,
    ):
        if context_lines < 0:
            raise ValueError("context_lines must be >= 0")
        if max_lines <= 0:
            raise ValueError("max_lines must be > 0")
        self.context_lines = context_lines
        self.max_lines = max_lines
        self.default_filename = default_filename

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "DiffGenerator":
        """Build a generator from the `diff` section of the backend config"""
        cfg = config.get("diff", {})
        return cls(
            context_lines=cfg.get("contextLines", DEFAULT_CONTEXT),
            max_lines=cfg.get("maxLines", DEFAULT_MAX_LINES),
            default_filename=cfg.get("defaultFilename", DEFAULT_FILENAME),
        )

    def _check_size(self, label: str, lines: list[str]) -> None:
        # The LCS table grows with the product of both line counts
        if len(lines) > self.max_lines:
            raise DiffInputTooLargeError(
                f"{label} text has {len(lines)} lines, limit is {self.max_lines}"
            )

    def compute_hunks(
        self,
        original: str,
        modified: str,
        context_lines: int | None = None,
    ) -> list[Hunk]:
        """Hunks describing the changes from `original` to `modified`"""
        original_lines = split_lines(original)
        modified_lines = split_lines(modified)
        self._check_size("original", original_lines)
        self._check_size("modified", modified_lines)

        context = self.context_lines if context_lines is None else context_lines
        lcs = compute_lcs(original_lines, modified_lines)
        changes = build_changes(original_lines, modified_lines, lcs)
        return group_into_hunks(changes, context)

    def generate_diff(
        self,
        original: str,
        modified: str,
        filename: str | None = None,
        context_lines: int | None = None,
    ) -> str:
        """Unified diff text for one file"""
        hunks = self.compute_hunks(original, modified, context_lines)
        return unified_diff.format_unified_diff(hunks, filename or self.default_filename)

    def generate_structured(
        self,
        original: str,
        modified: str,
        filename: str | None = None,
        context_lines: int | None = None,
    ) -> DiffResult:
        """Generate structured diff from original and new content"""
        file_path = filename or self.default_filename
        hunks = self.compute_hunks(original, modified, context_lines)
        text = unified_diff.format_unified_diff(hunks, file_path)
        stats = diff_stats([Patch(old_file=f"a/{file_path}", new_file=f"b/{file_path}", hunks=hunks)])
        logger.debug("Generated diff for %s: %d hunk(s)", file_path, len(hunks))

        return DiffResult(
            file_path=file_path,
            hunks=hunks,
            unified_diff=text,
            stats=stats,
        )

    def parse_diff(self, diff_text: str) -> list[Patch]:
        """Parse unified-diff text into one Patch per file"""
        return unified_diff.parse_diff(diff_text)

    def apply_patch(self, original: str, patch_text: str) -> str:
        """Apply a unified diff to `original` and return the patched text"""
        self._check_size("original", split_lines(original))
        return patch_applier.apply_patch(original, patch_text)

    def diff_stats(self, diff_text: str) -> DiffStats:
        """Summary counts for unified-diff text"""
        return diff_stats(self.parse_diff(diff_text))
