from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from nuonce.wrappers._validate import validate_target

if TYPE_CHECKING:
    from collections.abc import Callable

    from nuonce.wrappers._types import P, R


def stripped(target: Callable[P, R]) -> Callable[P, R]:
    """Return a function that will call `target` just once.

    Every next call returns the value from the first call, regardless of the
    arguments given. Calling a wrapped class constructs a single instance.

    The returned function does not keep the properties or the declared arity of
    the target, use `nuonce.copied` when such decorations are needed.

    Concurrent first calls from other threads wait for the target to return. A call
    made by the target itself, before it returns, calls the target again; the result
    of the outermost call is the one kept.

    Example:
        >>> def announce_winner(worker_id):
        ...     print(f"{worker_id} won the race!")
        ...     return worker_id
        >>> win = stripped(announce_winner)
        >>> win(1)
        1 won the race!
        1
        >>> win(2)  # any later worker is ignored
        1

    Raises:
        InvalidArgument: `target` is not callable.
    """
    validate_target(target)

    lock = threading.RLock()
    result = None

    def _once(*args, **kwargs):
        nonlocal target, result

        if target is not None:
            with lock:
                if target is not None:
                    result = target(*args, **kwargs)

                    # Free the reference to the target
                    target = None

        return result

    return _once
