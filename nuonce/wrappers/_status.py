from __future__ import annotations

import threading
from typing import TYPE_CHECKING

import attrs
from attrs import field

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any


@attrs.define
class Status:
    """The observation record passed to the callback of an observed wrapper.

    Set `callback` to `None` to stop "observing", after which the wrapper returns
    `value` directly.
    """

    calls: int = field(default=0)
    """Number of times the wrapper was called, including the first call."""

    value: Any = field(default=None)
    """The value returned by the first call of the target."""

    callback: Callable[[Status], Any] | None = field(default=None)
    """Called with this record on every call, its result is returned to the caller."""

    def notify(self) -> Any:
        callback = self.callback

        if callback is None:
            return self.value

        return callback(self)


@attrs.define
class CallRecord:
    """The pending invocation of a proxied target."""

    target: Callable[..., Any] | None = field()
    lock: threading.RLock = field(factory=threading.RLock, repr=False, eq=False)

    @property
    def invoked(self) -> bool:
        return self.target is None
