from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def gen_parameter_names(arity: int, *, prefix: str = "a") -> list[str]:
    """Return `arity` positional parameter names, i.e. `["a0", "a1", ...]`."""
    if arity < 0:
        raise ValueError(f"arity must not be negative, got {arity}")

    if not prefix.isidentifier():
        raise ValueError(f"{prefix!r} is not a valid identifier")

    return [f"{prefix}{i}" for i in range(arity)]


def gen_parameter_list(
    names: Iterable[str],
    *,
    default: str | None = None,
    positional_only: bool = False,
) -> str:
    """Return the given names as a parameter list, each with the optional default.

    >>> gen_parameter_list(["a0", "a1"], default="_unset", positional_only=True)
    'a0=_unset, a1=_unset, /'
    """
    names = list(names)

    for name in names:
        if not name.isidentifier():
            raise ValueError(f"{name!r} is not a valid identifier")

    if default is not None and not default.isidentifier():
        raise ValueError(f"{default!r} is not a valid identifier")

    if default is None:
        parameters = list(names)
    else:
        parameters = [f"{name}={default}" for name in names]

    if positional_only and parameters:
        parameters.append("/")

    return ", ".join(parameters)


def gen_function_def(name: str, parameters: str, body: str) -> str:
    """Return the source of a function with the given single expression body."""
    if not name.isidentifier():
        raise ValueError(f"{name!r} is not a valid identifier")

    return f"def {name}({parameters}):\n    return {body}\n"
