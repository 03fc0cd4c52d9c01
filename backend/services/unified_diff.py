"""
Unified Diff Codec - Serialize hunks to unified-diff text and parse it back
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from models.diff import AddChange, Change, DeleteChange, EqualChange, Hunk, Patch

logger = logging.getLogger(__name__)

HUNK_HEADER_RE = re.compile(r"@@ -(\d+),(\d+) \+(\d+),(\d+) @@")

_PREFIXES = {"delete": "-", "add": "+", "equal": " "}


def format_hunk_header(hunk: Hunk) -> str:
    return f"@@ -{hunk.old_start},{hunk.old_count} +{hunk.new_start},{hunk.new_count} @@"


def format_unified_diff(hunks: Iterable[Hunk], filename: str = "file") -> str:
    """Render hunks for one file as a unified diff, every line newline-terminated"""
    out = [f"--- a/{filename}\n", f"+++ b/{filename}\n"]
    for hunk in hunks:
        out.append(format_hunk_header(hunk) + "\n")
        for change in hunk.lines:
            out.append(f"{_PREFIXES[change.type]}{change.line}\n")
    return "".join(out)


def _parse_content_line(line: str) -> Change | None:
    marker, content = line[:1], line[1:]
    if marker == "-":
        return DeleteChange(line=content)
    if marker == "+":
        return AddChange(line=content)
    if marker == " ":
        return EqualChange(line=content)
    return None


def parse_diff(diff_text: str) -> list[Patch]:
    """Parse unified-diff text into one Patch per `---` header.

    Parsing is permissive: text before the first header is ignored, a
    malformed `@@` header drops the content lines that follow it, and hunk
    counts are not checked against the lines actually present.
    """
    patches: list[Patch] = []
    current_patch: Patch | None = None
    current_hunk: Hunk | None = None

    for line in diff_text.split("\n"):
        if line.startswith("---"):
            current_patch = Patch(old_file=line[4:].strip())
            patches.append(current_patch)
            current_hunk = None
        elif line.startswith("+++"):
            if current_patch is not None:
                current_patch.new_file = line[4:].strip()
        elif line.startswith("@@"):
            match = HUNK_HEADER_RE.match(line)
            if match is None:
                logger.debug("Skipping malformed hunk header: %r", line)
                current_hunk = None
                continue
            old_start, old_count, new_start, new_count = (int(g) for g in match.groups())
            current_hunk = Hunk(
                old_start=old_start,
                old_count=old_count,
                new_start=new_start,
                new_count=new_count,
            )
            if current_patch is not None:
                current_patch.hunks.append(current_hunk)
            else:
                logger.debug("Hunk header before any file header is ignored: %r", line)
        elif current_hunk is not None:
            change = _parse_content_line(line)
            if change is not None:
                current_hunk.lines.append(change)

    return patches
