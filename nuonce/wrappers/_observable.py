from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from nuonce.wrappers._status import Status
from nuonce.wrappers._validate import validate_callback, validate_target

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from nuonce.wrappers._types import Callback


def observable(
    target: Callable[..., Any],
    callback: Callback | None = None,
) -> Callable[..., Any]:
    """Return a function that will call `target` just once and observe every call.

    Works like `nuonce.stripped` with the addition of a callback that is called
    every time the returned function is called. The callback receives the
    `nuonce.Status` record as its only argument and its result is returned to the
    caller. Set `status.callback` to `None` to stop observing, from then on the
    value of the first call is returned directly.

    Example:
        >>> import random
        >>> def only_once(status):
        ...     if status.calls > 1:
        ...         raise RuntimeError("do not call this more than once")
        ...     status.callback = None
        ...     return status.value
        >>> once = observable(random.random, only_once)
        >>> once() == once()
        True

    Raises:
        InvalidArgument: `target` is not callable, or `callback` is given and is
            not callable.
    """
    validate_target(target)
    validate_callback(callback)

    lock = threading.RLock()
    status = Status(callback=callback)

    def _once(*args, **kwargs):
        nonlocal target

        if target is not None:
            with lock:
                if target is not None:
                    status.value = target(*args, **kwargs)

                    # Free the reference to the target
                    target = None

        with lock:
            status.calls += 1

        return status.notify()

    return _once
