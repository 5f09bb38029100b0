from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from enum import Enum, IntFlag, auto
from pathlib import Path
from typing import TYPE_CHECKING

from frozendict import frozendict

from nuonce.config._util import validate_arguments

if TYPE_CHECKING:
    from typing import Any, Final, Literal, overload


STRATEGY_NAMES: Final = ("stripped", "observable", "copied", "proxied")
"""The wrapping strategies, in the order they are benchmarked."""


class ShowWarnings(IntFlag):
    default = auto()
    low_priority = auto()


class Output(Enum):
    table = "table"
    json = "json"
    silent = "silent"

    def __str__(self) -> str:
        return self.name


_DEFAULT_ARGUMENTS: Final = frozendict(
    pyproject_toml_override=None,
    _strategies=None,
    arity=1,
    properties=0,
    calls=1000,
    multiple=1,
    timeout=15.0,
    use_callback=False,
    _warning_level="default",
    stdout=Output.table,
)


class Arguments(argparse.Namespace):
    pyproject_toml_override: Path | None
    """From `[-c PATH | --config PATH]`."""

    _strategies: list[str] | None

    arity: int
    properties: int

    calls: int
    multiple: int
    timeout: float

    use_callback: bool

    _warning_level: Literal["none", "default", "all"]

    stdout: Output

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**{**_DEFAULT_ARGUMENTS, **kwargs})

    @property
    def strategies(self) -> tuple[str, ...]:
        if not self._strategies:
            return STRATEGY_NAMES

        # Keep the canonical order and drop duplicates
        return tuple(s for s in STRATEGY_NAMES if s in self._strategies)

    @property
    def show_warnings(self) -> ShowWarnings:
        if self._warning_level == "none":
            return ShowWarnings(0)
        if self._warning_level == "default":
            return ShowWarnings.default
        if self._warning_level == "all":
            return ShowWarnings.default | ShowWarnings.low_priority
        raise NotImplementedError


@dataclass
class State:
    current_strategy: "str | None" = None

    @property
    def is_in_any_strategy(self) -> bool:
        return self.current_strategy is not None


class ConfigMetaclass(type):
    """Metaclass allowing `Config` to act as a singleton."""

    _instance: Config | None = None

    def __call__(cls, *args: Any, **kwargs: Any):
        if cls._instance is None:
            _instance: Config = super().__call__(*args, **kwargs)
            cls._instance = _instance
            cls._instance.arguments = validate_arguments(cls._instance.arguments)
        return cls._instance


@dataclass
class Config(metaclass=ConfigMetaclass):
    """The global config singleton.

    The library itself only reads the warning level, thus `Config()` is usable
    without any command line arguments.
    """

    arguments: Arguments = field(default_factory=Arguments)
    state: State = field(default_factory=State)

    TOML_TABLE: Final = "nuonce"
    """The `[tool.<name>]` table read from the project's `pyproject.toml`."""

    if TYPE_CHECKING:

        @overload
        def __init__(self) -> None:  # type: ignore[reportNoOverloadImplementation]
            ...

        @overload
        def __init__(  # type: ignore[reportNoOverloadImplementation]
            self,
            arguments: Arguments,
            state: State,
        ) -> None:
            ...

    @property
    def do_not_show_warnings(self) -> bool:
        return self.arguments.show_warnings == ShowWarnings(0)
