from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TypeVar

if sys.version_info >= (3, 10):
    from typing import ParamSpec, TypeAlias
else:
    from typing_extensions import ParamSpec, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from nuonce.wrappers._status import Status


P = ParamSpec("P")
R = TypeVar("R")

Callback: TypeAlias = "Callable[[Status], Any]"
"""The observer of an observed wrapper, its result is returned to the caller."""
