#!/usr/bin/env python3
"""Nuonce benchmark entry point."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from nuonce import error
from nuonce.benchmark import run_benchmark, serialise_results
from nuonce.cli import parse_arguments
from nuonce.cli.exit_codes import EXIT_SUCCESS
from nuonce.config import Config, Output, State

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import NoReturn

    from nuonce.benchmark import BenchmarkResult


def _init_nuonce_config() -> Config:
    return Config(arguments=parse_arguments(), state=State())


def main(config: Config) -> int:
    """Nuonce benchmark entry point."""
    arguments = config.arguments

    error.info(
        f"running {arguments.calls} rounds of {arguments.multiple} call(s), "
        f"target arity {arguments.arity}, {arguments.properties} properties"
    )

    results = list(run_benchmark(arguments))

    if arguments.stdout == Output.table:
        show_table(results, timeout=arguments.timeout)

    if arguments.stdout == Output.json:
        show_json(results)

    for result in results:
        if not result.arity_preserved or not result.properties_preserved:
            error.info(
                f"{result.using} does not preserve the target's "
                f"{_lost_metadata(result)}"
            )

    return EXIT_SUCCESS


def _lost_metadata(result: BenchmarkResult) -> str:
    lost = []

    if not result.arity_preserved:
        lost.append("arity")
    if not result.properties_preserved:
        lost.append("properties")

    return " or ".join(lost)


def show_table(results: Sequence[BenchmarkResult], *, timeout: float) -> None:
    """Print one line per benchmarked strategy."""
    for result in results:
        print(result.describe(timeout))


def show_json(results: Sequence[BenchmarkResult]) -> None:
    """Prettily print the results as json."""
    print(serialise_results(results))


def entry_point() -> NoReturn:
    """Entry point for command line app."""
    sys.exit(main(_init_nuonce_config()))


if __name__ == "__main__":
    entry_point()
