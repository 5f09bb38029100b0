"""Declared arity and the arity specialised wrapper factories.

A function's declared arity lives in its code object (`co_argcount`) and is fixed
when the function is created, so a wrapper that reports the same arity as its
target has to be generated with that many named parameters. The factories are
generated lazily, once per `(engine, arity)`, and memoised for the lifetime of the
process; the cache grows with the number of distinct arities wrapped, which is
bounded by realistic parameter counts.
"""

from __future__ import annotations

import inspect
import threading
from enum import Enum
from functools import lru_cache
from itertools import takewhile
from typing import TYPE_CHECKING

from nuonce import error
from nuonce.codegen.util import gen_parameter_list, gen_parameter_names
from nuonce.wrappers._status import Status

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import Any, Final


_POSITIONAL: Final = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class _Unset:
    def __repr__(self) -> str:
        return "<unset>"


_unset: Final = _Unset()


def _given(*parameters: Any) -> Iterator[Any]:
    """Return the positional arguments actually given by the caller."""
    return takewhile(lambda p: p is not _unset, parameters)


class Engine(Enum):
    stripped = "stripped"
    observable = "observable"

    def __str__(self) -> str:
        return self.name


_STRIPPED_TEMPLATE: Final = """\
def make(target):
    lock = RLock()
    result = None

    def _once({parameters}*args, **kwargs):
        nonlocal target, result

        if target is not None:
            with lock:
                if target is not None:
                    result = target({arguments}*args, **kwargs)
                    target = None

        return result

    return _once
"""

_OBSERVABLE_TEMPLATE: Final = """\
def make(target, callback):
    lock = RLock()
    status = Status(callback=callback)

    def _once({parameters}*args, **kwargs):
        nonlocal target

        if target is not None:
            with lock:
                if target is not None:
                    status.value = target({arguments}*args, **kwargs)
                    target = None

        with lock:
            status.calls += 1

        return status.notify()

    return _once
"""

_TEMPLATES: Final = {
    Engine.stripped: _STRIPPED_TEMPLATE,
    Engine.observable: _OBSERVABLE_TEMPLATE,
}


def arity(fn: Callable[..., Any]) -> int:
    """Return the declared arity of the given callable.

    The declared arity is the number of named positional parameters, including
    those with defaults but not `*args`. Bound methods do not count the receiver.
    Callables whose signature cannot be inspected (some builtins) have arity 0.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        error.info("could not inspect signature, assuming an arity of 0", culprit=fn)
        return 0

    return sum(1 for p in signature.parameters.values() if p.kind in _POSITIONAL)


@lru_cache(maxsize=None)
def variant(engine: Engine, arity: int) -> Callable[..., Callable[..., Any]]:
    """Return the wrapper factory of the given engine specialised to `arity`.

    For the stripped engine the factory is `make(target)`, for the observable engine
    it is `make(target, callback)`. The wrappers made declare `arity` positional-only
    parameters, each defaulting to a private sentinel, followed by `*args` and
    `**kwargs`; the caller may thus pass any number of arguments and only those
    actually given are forwarded to the target.
    """
    names = gen_parameter_names(arity)

    if names:
        parameters = gen_parameter_list(names, default="_unset", positional_only=True)
        parameters += ", "
        arguments = f"*_given({', '.join(names)}), "
    else:
        parameters = ""
        arguments = ""

    source = _TEMPLATES[engine].format(parameters=parameters, arguments=arguments)

    namespace: dict[str, Any] = {
        "RLock": threading.RLock,
        "Status": Status,
        "_given": _given,
        "_unset": _unset,
    }
    code = compile(source, f"<nuonce.{engine}[{arity}]>", "exec")
    exec(code, namespace)  # noqa: S102

    return namespace["make"]
