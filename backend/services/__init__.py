"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .diff_generator import DiffGenerator, diff_stats, generate_diff
from .exceptions import (
    DiffEngineError,
    DiffInputTooLargeError,
    InvalidHunkError,
    PatchApplyError,
    PatchConflictError,
)
from .patch_applier import apply_patch
from .unified_diff import parse_diff

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "generate_diff",
    "apply_patch",
    "parse_diff",
    "diff_stats",
    # Errors
    "DiffEngineError",
    "DiffInputTooLargeError",
    "InvalidHunkError",
    "PatchApplyError",
    "PatchConflictError",
]
