from __future__ import annotations

from nuonce.error.error import (
    error,
    fatal,
    get_culprit_info,
    info,
    nuonce,
    warning,
)
from nuonce.error.exc import InvalidArgument

__all__ = [
    "InvalidArgument",
    "error",
    "fatal",
    "get_culprit_info",
    "info",
    "nuonce",
    "warning",
]
