"""Nuonce error/logging functions."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING, NoReturn

from nuonce.config import Config, ShowWarnings

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

__ERROR = "{prefix}: {optional_strategy_info}{optional_culprit_info}{message}"
__STRATEGY_INFO = "\033[1m[{}]\033[0m "
__CULPRIT_INFO = "\033[1m{}\033[0m: "


# --------------------------------------------------------------------------- #
# Nuonce errors
# --------------------------------------------------------------------------- #


class Level(Enum):
    nuonce = "\033[34;1mnuonce\033[0m"  # Blue
    info = "\033[33;1minfo\033[0m"  # Yellow / Orange
    warning = "\033[33;1mwarning\033[0m"  # Yellow / Orange
    error = "\033[31;1merror\033[0m"  # Red
    fatal = "\033[31;1mfatal\033[0m"  # Red


def nuonce(
    message: str,
    culprit: Callable[..., Any] | None = None,
) -> None:
    """Log a message with the prefix "nuonce", always shown."""
    __log(Level.nuonce, message, culprit)


def info(
    message: str,
    culprit: Callable[..., Any] | None = None,
) -> None:
    """Log a low-priority warning and, if given, include culprit info."""
    if ShowWarnings.low_priority not in Config().arguments.show_warnings:
        return

    __log(Level.info, message, culprit)


def warning(
    message: str,
    culprit: Callable[..., Any] | None = None,
) -> None:
    """Log a warning and, if given, include culprit info."""
    if ShowWarnings.default not in Config().arguments.show_warnings:
        return

    __log(Level.warning, message, culprit)


def error(
    message: str,
    culprit: Callable[..., Any] | None = None,
) -> None:
    """Log an error and, if given, include culprit info."""
    __log(Level.error, message, culprit)


def fatal(
    message: str,
    culprit: Callable[..., Any] | None = None,
) -> NoReturn:
    """Log a fatal error and, if given, include culprit info.

    NOTE
        A fatal error will always cause an immediate exit with status 1, regardless
        of the configured warning level.

    """
    __log(Level.fatal, message, culprit)

    sys.exit(1)


def get_culprit_info(culprit: Callable[..., Any] | None) -> tuple[str, str]:
    """Return the formatted strategy and culprit info as strings."""
    return __strategy_info(), __culprit_info(culprit)


def __strategy_info() -> str:
    strategy = Config().state.current_strategy

    if strategy is None:
        return ""

    return __STRATEGY_INFO.format(strategy)


def __culprit_info(culprit: Callable[..., Any] | None) -> str:
    if culprit is None:
        return ""

    name = getattr(culprit, "__qualname__", None) or getattr(culprit, "__name__", None)

    if name is None:
        name = type(culprit).__name__

    return __CULPRIT_INFO.format(name)


def __log(
    level: Level,
    message: str,
    culprit: Callable[..., Any] | None = None,
) -> None:
    strategy_info, culprit_info = get_culprit_info(culprit)

    print(
        __ERROR.format(
            prefix=level.value,
            optional_strategy_info=strategy_info,
            optional_culprit_info=culprit_info,
            message=message,
        ),
        file=sys.stderr,
    )
