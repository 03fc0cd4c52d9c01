"""
Hunk Assembler - Group an edit script into context-bounded hunks
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from models.diff import Change, EqualChange, Hunk

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT = 3


def group_into_hunks(changes: Iterable[Change], context: int = DEFAULT_CONTEXT) -> list[Hunk]:
    """Partition changes into hunks with at most `context` lines of context.

    Change regions separated by up to 2 * context unchanged lines share one
    hunk. A longer unchanged run closes the open hunk with its first
    `context` lines and its last `context` lines lead the next hunk.
    """
    if context < 0:
        raise ValueError("context must be >= 0")

    hunks: list[Hunk] = []
    current: list[Change] | None = None
    old_start = new_start = 0
    buffer: list[EqualChange] = []
    # 0-based position of the next change in each version
    old_pos = new_pos = 0

    for change in changes:
        if change.type == "equal":
            buffer.append(change)
            if current is None:
                if len(buffer) > context:
                    del buffer[: len(buffer) - context]
            elif len(buffer) > 2 * context:
                current.extend(buffer[:context])
                hunks.append(Hunk.from_lines(old_start, new_start, current))
                current = None
                buffer = buffer[len(buffer) - context :]
        else:
            if current is None:
                old_start = old_pos - len(buffer) + 1
                new_start = new_pos - len(buffer) + 1
                current = []
            current.extend(buffer)
            buffer = []
            current.append(change)

        if change.type != "add":
            old_pos += 1
        if change.type != "delete":
            new_pos += 1

    if current is not None:
        current.extend(buffer[:context])
        hunks.append(Hunk.from_lines(old_start, new_start, current))

    logger.debug("Grouped changes into %d hunk(s) with context %d", len(hunks), context)
    return hunks
