from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from nuonce.config._types import Config

if TYPE_CHECKING:
    from collections.abc import Generator


@contextmanager
def enter_strategy(new_strategy: str | None) -> Generator[None, None, None]:
    """Set the config state's current strategy to the given strategy while in scope.

    >>> config = Config()
    >>> visited: list[str | None] = []
    >>> with enter_strategy("copied"):
    ...     visited.append(config.state.current_strategy)
    ...     with enter_strategy("proxied"):
    ...         visited.append(config.state.current_strategy)
    ...     visited.append(config.state.current_strategy)
    >>> print(visited)
    ['copied', 'proxied', 'copied']
    """
    config = Config()

    old_strategy = config.state.current_strategy
    config.state.current_strategy = new_strategy

    try:
        yield
    finally:
        config.state.current_strategy = old_strategy
