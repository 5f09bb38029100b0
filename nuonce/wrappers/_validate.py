from __future__ import annotations

from typing import TYPE_CHECKING

from nuonce.error import InvalidArgument

if TYPE_CHECKING:
    from typing import Any


def validate_target(target: Any) -> None:
    if not callable(target):
        raise InvalidArgument("target must be callable")


def validate_callback(callback: Any) -> None:
    # Only `None` means "no callback", falsy non-callables are rejected
    if callback is not None and not callable(callback):
        raise InvalidArgument("callback must be callable")
