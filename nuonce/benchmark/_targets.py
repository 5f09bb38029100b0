from __future__ import annotations

import random
from typing import TYPE_CHECKING

from nuonce.codegen.util import gen_function_def, gen_parameter_list, gen_parameter_names

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

PROPERTY_PREFIX = "foo"


def make_target(arity: int, properties: int) -> Callable[..., Any]:
    """Return a new target declaring `arity` parameters with `properties` properties.

    The target returns something that cannot be folded to a constant, and each of its
    properties (`foo0`, `foo1`, ...) is `random.random`.
    """
    names = gen_parameter_names(arity)

    # The first parameter, if any, scales the result
    body = f"random() * {names[0]}" if names else "random()"
    source = gen_function_def("target", gen_parameter_list(names), body)

    namespace: dict[str, Any] = {"random": random.random}
    exec(compile(source, "<nuonce.benchmark.target>", "exec"), namespace)  # noqa: S102

    target = namespace["target"]
    for i in range(properties):
        setattr(target, f"{PROPERTY_PREFIX}{i}", random.random)

    return target
