from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

import pytest

import nuonce
from nuonce.config import Config

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path
    from typing import Any, Final


STRATEGIES: Final = ("stripped", "observable", "copied", "proxied")
CALLBACK_STRATEGIES: Final = ("observable", "copied", "proxied")
METADATA_STRATEGIES: Final = ("copied", "proxied")
STRIPPING_STRATEGIES: Final = ("stripped", "observable")


@pytest.fixture(params=STRATEGIES)
def wrap(request) -> Callable[..., Any]:
    """Each of the wrapping strategies in turn."""
    return getattr(nuonce, request.param)


@pytest.fixture(params=CALLBACK_STRATEGIES)
def observe(request) -> Callable[..., Any]:
    """Each of the wrapping strategies accepting a callback in turn."""
    return getattr(nuonce, request.param)


@pytest.fixture(params=METADATA_STRATEGIES)
def mirror(request) -> Callable[..., Any]:
    """Each of the wrapping strategies keeping the target's metadata in turn."""
    return getattr(nuonce, request.param)


@pytest.fixture(params=STRIPPING_STRATEGIES)
def strip(request) -> Callable[..., Any]:
    """Each of the wrapping strategies dropping the target's metadata in turn."""
    return getattr(nuonce, request.param)


@pytest.fixture
def arguments():
    @contextmanager
    def _inner(**kwargs: Any) -> Iterator[None]:
        arguments = Config().arguments

        _missing_attrs = {
            attr for attr in kwargs.keys() if not hasattr(arguments, attr)
        }
        if _missing_attrs:
            raise AttributeError(_missing_attrs)

        previous = {attr: getattr(arguments, attr) for attr in kwargs.keys()}

        for attr, value in kwargs.items():
            setattr(arguments, attr, value)

        try:
            yield
        finally:
            for attr, value in previous.items():
                setattr(arguments, attr, value)

    return _inner


@pytest.fixture
def state():
    @contextmanager
    def _inner(**kwargs: Any) -> Iterator[None]:
        state = Config().state

        _missing_attrs = {attr for attr in kwargs.keys() if not hasattr(state, attr)}
        if _missing_attrs:
            raise AttributeError(_missing_attrs)

        previous = {attr: getattr(state, attr) for attr in kwargs.keys()}

        for attr, value in kwargs.items():
            setattr(state, attr, value)

        try:
            yield
        finally:
            for attr, value in previous.items():
                setattr(state, attr, value)

    return _inner


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def make_toml(tmp_path: Path) -> Callable[[str], Path]:
    def _inner(content: str) -> Path:
        toml = tmp_path / "pyproject.toml"
        toml.write_text(content)
        return toml

    return _inner
