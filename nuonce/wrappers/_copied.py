from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

from nuonce.wrappers._arity import Engine, arity, variant
from nuonce.wrappers._validate import validate_callback, validate_target

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import Any, Final

    from nuonce.wrappers._types import Callback


_COPIED_METADATA: Final = (
    "__module__",
    "__name__",
    "__qualname__",
    "__doc__",
    "__annotations__",
)


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _is_class_member(value: Any) -> bool:
    return (
        inspect.isfunction(value)
        or inspect.ismethoddescriptor(value)
        or inspect.isdatadescriptor(value)
    )


def own_properties(target: Any) -> Iterator[tuple[str, Any]]:
    """Yield the own enumerable properties of the given object.

    These are the entries of the object's `__dict__`, less the dunder entries;
    objects without a `__dict__` (i.e. most builtins) have none. For a class the
    methods, class and static methods, and properties defined in its body belong
    to its instances and are skipped; plain class attributes are kept.
    """
    try:
        properties = vars(target)
    except TypeError:
        return

    is_class = isinstance(target, type)

    # Copy the keys so that the target may be mutated while iterating
    for name in list(properties.keys()):
        if _is_dunder(name):
            continue

        value = properties[name]

        if is_class and _is_class_member(value):
            continue

        yield name, value


def _copy_metadata(target: Callable[..., Any], wrapper: Callable[..., Any]) -> None:
    # Like `functools.update_wrapper` but without `__wrapped__`, the wrapper must not
    # hold a reference to the target once it has been called
    for attr in _COPIED_METADATA:
        try:
            value = getattr(target, attr)
        except AttributeError:
            continue
        setattr(wrapper, attr, value)

    try:
        wrapper.__signature__ = inspect.signature(target)  # type: ignore[attr-defined]
    except (TypeError, ValueError):
        pass

    for name, value in own_properties(target):
        setattr(wrapper, name, value)


def copied(
    target: Callable[..., Any],
    callback: Callback | None = None,
) -> Callable[..., Any]:
    """Return a function that will call `target` just once, mirroring its metadata.

    Every next call returns the value from the first call. When `callback` is given
    every call is observed as by `nuonce.observable`.

    The returned function has the same declared arity as the target and a shallow
    copy of the target's own properties, taken once when wrapping: later changes
    to the target's properties are not reflected, see `nuonce.proxied` for that.

    Example:
        >>> import itertools
        >>> counter = itertools.count(1)
        >>> def f(a, b):
        ...     return next(counter)
        >>> f.my_prop = "original"
        >>> once = copied(f)
        >>> once() == once()
        True
        >>> f.my_prop = "changed"
        >>> once.my_prop
        'original'
        >>> arity(once)
        2

    Raises:
        InvalidArgument: `target` is not callable, or `callback` is given and is
            not callable.
    """
    validate_target(target)
    validate_callback(callback)

    declared_arity = arity(target)

    if callback is None:
        wrapper = variant(Engine.stripped, declared_arity)(target)
    else:
        wrapper = variant(Engine.observable, declared_arity)(target, callback)

    _copy_metadata(target, wrapper)

    return wrapper
