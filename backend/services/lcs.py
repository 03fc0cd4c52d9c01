"""
LCS Alignment - Line splitting, longest common subsequence and edit scripts
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from models.diff import AddChange, Change, DeleteChange, EqualChange

logger = logging.getLogger(__name__)


def split_lines(text: str) -> list[str]:
    """Split text on newlines; terminators are not kept, "" gives [""]"""
    return text.split("\n")


def join_lines(lines: Sequence[str]) -> str:
    """Inverse of split_lines"""
    return "\n".join(lines)


def compute_lcs(original: Sequence[str], modified: Sequence[str]) -> list[str]:
    """Longest common subsequence of two line sequences.

    The DP table is stored row-major in a single flat list of
    (n + 1) * (m + 1) cells. Backtracking steps diagonally on a match and
    otherwise toward the larger neighbour, moving up (through the original)
    when both neighbours are equal.
    """
    n = len(original)
    m = len(modified)
    width = m + 1
    dp = [0] * ((n + 1) * width)

    for i in range(1, n + 1):
        row = i * width
        prev_row = row - width
        line = original[i - 1]
        for j in range(1, m + 1):
            if line == modified[j - 1]:
                dp[row + j] = dp[prev_row + j - 1] + 1
            else:
                up = dp[prev_row + j]
                left = dp[row + j - 1]
                dp[row + j] = up if up >= left else left

    lcs: list[str] = []
    i, j = n, m
    while i > 0 and j > 0:
        if original[i - 1] == modified[j - 1]:
            lcs.append(original[i - 1])
            i -= 1
            j -= 1
        elif dp[(i - 1) * width + j] >= dp[i * width + j - 1]:
            i -= 1
        else:
            j -= 1

    lcs.reverse()
    logger.debug("LCS of %d x %d lines has length %d", n, m, len(lcs))
    return lcs


def build_changes(
    original: Sequence[str],
    modified: Sequence[str],
    lcs: Sequence[str] | None = None,
) -> list[Change]:
    """Walk both sequences against the LCS and emit the edit script"""
    if lcs is None:
        lcs = compute_lcs(original, modified)

    n = len(original)
    m = len(modified)
    changes: list[Change] = []
    i = j = k = 0

    while i < n or j < m:
        common = lcs[k] if k < len(lcs) else None
        if common is not None and i < n and j < m and original[i] == common and modified[j] == common:
            changes.append(EqualChange(line=original[i], old_index=i, new_index=j))
            i += 1
            j += 1
            k += 1
        # Deletions of a change run come before its additions
        elif i < n and original[i] != common:
            changes.append(DeleteChange(line=original[i], old_index=i))
            i += 1
        elif j < m and modified[j] != common:
            changes.append(AddChange(line=modified[j], new_index=j))
            j += 1
        else:
            # Only reachable when `lcs` is not a subsequence of both inputs
            raise ValueError("lcs is not a common subsequence of the inputs")

    return changes
