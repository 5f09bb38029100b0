from __future__ import annotations

import time
from typing import TYPE_CHECKING

from frozendict import frozendict

from nuonce import error
from nuonce.benchmark._models import BenchmarkResult
from nuonce.benchmark._targets import PROPERTY_PREFIX, make_target
from nuonce.config.state import enter_strategy
from nuonce.wrappers import arity, copied, observable, own_properties, proxied, stripped

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from typing import Any, Final

    from nuonce.config import Arguments
    from nuonce.wrappers import Status


STRATEGIES: Final = frozendict(
    stripped=stripped,
    observable=observable,
    copied=copied,
    proxied=proxied,
)
"""The strategies by name, in the order they are benchmarked."""

ACCEPTS_CALLBACK: Final = frozenset(("observable", "copied", "proxied"))


def _observer(status: Status) -> Any:
    return status.value


def _wrap(
    strategy: str,
    target: Callable[..., Any],
    *,
    use_callback: bool,
) -> Callable[..., Any]:
    wrap = STRATEGIES[strategy]

    if use_callback and strategy in ACCEPTS_CALLBACK:
        return wrap(target, _observer)

    return wrap(target)


def _round(
    strategy: str,
    *,
    declared_arity: int,
    properties: int,
    multiple: int,
    use_callback: bool,
) -> Any:
    target = make_target(declared_arity, properties)
    f = _wrap(strategy, target, use_callback=use_callback)
    first_property = f"{PROPERTY_PREFIX}0"

    result = None
    for i in range(multiple):
        result = f(i) if declared_arity else f()

        if properties and hasattr(f, first_property):
            getattr(f, first_property)()

    return result


def _preserves_metadata(
    strategy: str,
    *,
    declared_arity: int,
    properties: int,
) -> tuple[bool, bool]:
    target = make_target(declared_arity, properties)
    f = _wrap(strategy, target, use_callback=False)

    target_properties = dict(own_properties(target))
    wrapper_properties = {
        name: getattr(f, name) for name in target_properties if hasattr(f, name)
    }

    return arity(f) == arity(target), wrapper_properties == target_properties


def run_strategy(strategy: str, arguments: Arguments) -> BenchmarkResult:
    """Return the result of benchmarking the given strategy."""
    if strategy not in STRATEGIES:
        raise ValueError(f"unknown strategy: {strategy!r}")

    with enter_strategy(strategy):
        arity_preserved, properties_preserved = _preserves_metadata(
            strategy,
            declared_arity=arguments.arity,
            properties=arguments.properties,
        )

        completed = 0
        timed_out = False
        start = time.perf_counter()

        while completed < arguments.calls:
            _round(
                strategy,
                declared_arity=arguments.arity,
                properties=arguments.properties,
                multiple=arguments.multiple,
                use_callback=arguments.use_callback,
            )
            completed += 1

            if time.perf_counter() - start > arguments.timeout:
                timed_out = completed < arguments.calls
                break

        elapsed = time.perf_counter() - start

        if timed_out:
            error.warning(f"timed out after {completed} of {arguments.calls} rounds")

    return BenchmarkResult(
        strategy=strategy,
        rounds=arguments.calls,
        completed=completed,
        elapsed=elapsed,
        timed_out=timed_out,
        arity_preserved=arity_preserved,
        properties_preserved=properties_preserved,
    )


def run_benchmark(arguments: Arguments) -> Iterator[BenchmarkResult]:
    """Yield the result of benchmarking each of the selected strategies in turn."""
    for strategy in arguments.strategies:
        yield run_strategy(strategy, arguments)
