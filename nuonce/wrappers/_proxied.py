from __future__ import annotations

import inspect
import types
from typing import TYPE_CHECKING

from nuonce.wrappers._status import CallRecord, Status
from nuonce.wrappers._validate import validate_callback, validate_target

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, Final

    from nuonce.wrappers._types import Callback


_SLOT_PREFIX: Final = "_Proxied__"


class _TargetAttribute(property):
    """A read-only property of the proxy's target, the class keeps its own value."""

    def __init__(self, fget: Callable[[Any], Any], class_value: Any = None) -> None:
        super().__init__(fget)
        self.class_value = class_value

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self.class_value
        return super().__get__(instance, owner)


class Proxied:
    """A callable proxy calling its target once, attribute access is forwarded live.

    Only the call is intercepted: reading, writing, deleting and listing attributes
    all operate on the target itself, so changes made to the target after wrapping
    are visible through the proxy and vice versa.

    The proxy keeps the target for attribute forwarding, however the pending call
    record releases its reference once the target has been called.

    When the proxy is stored on a class and accessed through an instance it binds
    like a function, passing the instance as the first argument. There is no
    separate construction form in Python, calling a proxied class constructs the
    instance once and returns it on every later call.
    """

    __slots__ = ("_Proxied__target", "_Proxied__record", "_Proxied__status")

    def __init__(
        self,
        target: Callable[..., Any],
        callback: Callback | None = None,
    ) -> None:
        object.__setattr__(self, "_Proxied__target", target)
        object.__setattr__(self, "_Proxied__record", CallRecord(target))
        object.__setattr__(self, "_Proxied__status", Status(callback=callback))

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        record = self.__record
        status = self.__status

        if record.target is not None:
            with record.lock:
                if record.target is not None:
                    status.value = record.target(*args, **kwargs)
                    record.target = None

        with record.lock:
            status.calls += 1

        return status.notify()

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __copy__(self) -> Proxied:
        # The copy shares the target and the call state
        copy = object.__new__(type(self))

        for name in self.__slots__:
            object.__setattr__(copy, name, object.__getattribute__(self, name))

        return copy

    # ----------------------------------------------------------------------- #
    # Forwarding to the live target
    # ----------------------------------------------------------------------- #

    # On the class itself `__doc__` and `__signature__` keep the class's own values,
    # while `Proxied.__module__` is the descriptor as `type` reads it without binding
    __doc__ = _TargetAttribute(lambda self: self.__target.__doc__, __doc__)
    __module__ = _TargetAttribute(lambda self: self.__target.__module__, __module__)
    __signature__ = _TargetAttribute(lambda self: inspect.signature(self.__target))

    @property
    def __class__(self) -> type:  # type: ignore[override]
        return self.__target.__class__

    def __getattr__(self, name: str) -> Any:
        # An unset slot, i.e. while copying
        if name.startswith(_SLOT_PREFIX):
            raise AttributeError(name)
        return getattr(self.__target, name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith(_SLOT_PREFIX):
            object.__setattr__(self, name, value)
        else:
            setattr(self.__target, name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self.__target, name)

    def __dir__(self) -> list[str]:
        return dir(self.__target)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at 0x{id(self):x} for {self.__target!r}>"


def proxied(
    target: Callable[..., Any],
    callback: Callback | None = None,
) -> Proxied:
    """Return a callable proxy that will call `target` just once.

    Every next call returns the value from the first call. When `callback` is given
    every call is observed as by `nuonce.observable`.

    The proxy points to the target, reading and writing its properties is live:

    Example:
        >>> import itertools
        >>> counter = itertools.count(1)
        >>> def f():
        ...     return next(counter)
        >>> f.my_prop = "original"
        >>> once = proxied(f)
        >>> once() == once()
        True
        >>> f.my_prop = "changed"
        >>> once.my_prop
        'changed'

    Raises:
        InvalidArgument: `target` is not callable, or `callback` is given and is
            not callable.
    """
    validate_target(target)
    validate_callback(callback)

    return Proxied(target, callback)
