from __future__ import annotations

from pathlib import Path
from unittest import mock

import pytest

from nuonce.config import STRATEGY_NAMES, Arguments, Config, Output, ShowWarnings, State
from nuonce.config._util import find_project_root, find_pyproject_toml, validate_arguments
from nuonce.config.state import enter_strategy


class TestArguments:
    def test_defaults(self):
        arguments = Arguments()

        assert arguments.pyproject_toml_override is None
        assert arguments.strategies == STRATEGY_NAMES
        assert arguments.arity == 1
        assert arguments.properties == 0
        assert arguments.calls == 1000
        assert arguments.multiple == 1
        assert arguments.timeout == 15.0
        assert arguments.use_callback is False
        assert arguments.stdout == Output.table
        assert arguments.show_warnings == ShowWarnings.default

    def test_overrides(self):
        arguments = Arguments(calls=10, _warning_level="all")

        assert arguments.calls == 10
        assert arguments.show_warnings == ShowWarnings.default | ShowWarnings.low_priority

    def test_strategies_keep_canonical_order(self):
        arguments = Arguments(_strategies=["proxied", "stripped", "proxied"])

        assert arguments.strategies == ("stripped", "proxied")

    def test_no_warnings(self):
        assert Arguments(_warning_level="none").show_warnings == ShowWarnings(0)

    def test_unknown_warning_level(self):
        with pytest.raises(NotImplementedError):
            Arguments(_warning_level="loud").show_warnings

    def test_output_str(self):
        assert str(Output.json) == "json"


class TestConfig:
    def test_is_singleton(self):
        assert Config() is Config()

    def test_library_defaults(self, config):
        assert isinstance(config.arguments, Arguments)
        assert isinstance(config.state, State)
        assert config.TOML_TABLE == "nuonce"

    def test_do_not_show_warnings(self, config, arguments):
        with arguments(_warning_level="none"):
            assert config.do_not_show_warnings

        with arguments(_warning_level="default"):
            assert not config.do_not_show_warnings


class TestState:
    def test_enter_strategy(self, config):
        visited = []

        with enter_strategy("copied"):
            visited.append(config.state.current_strategy)

            with enter_strategy("proxied"):
                visited.append(config.state.current_strategy)

            visited.append(config.state.current_strategy)

        assert visited == ["copied", "proxied", "copied"]
        assert config.state.current_strategy is None
        assert not config.state.is_in_any_strategy

    def test_enter_strategy_restores_on_error(self, config):
        with pytest.raises(RuntimeError):
            with enter_strategy("copied"):
                assert config.state.is_in_any_strategy
                raise RuntimeError

        assert config.state.current_strategy is None


class TestValidateArguments:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"calls": 0},
            {"multiple": 0},
            {"arity": -1},
            {"properties": -1},
            {"timeout": 0.0},
        ],
    )
    def test_invalid_is_fatal(self, capfd, kwargs):
        with mock.patch("sys.exit") as _exit:
            validate_arguments(Arguments(**kwargs))

        _, stderr = capfd.readouterr()

        assert "fatal" in stderr
        assert _exit.called

    def test_valid(self, capfd):
        arguments = Arguments()

        with mock.patch("sys.exit") as _exit:
            assert validate_arguments(arguments) is arguments

        assert not _exit.called

    def test_callback_with_only_stripped(self, capfd):
        validate_arguments(Arguments(use_callback=True, _strategies=["stripped"]))

        _, stderr = capfd.readouterr()

        assert "ignoring --callback" in stderr


class TestProjectRoot:
    def test_find_project_root(self, tmp_path, monkeypatch):
        (tmp_path / "pyproject.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        monkeypatch.chdir(nested)

        assert find_project_root() == tmp_path.resolve()
        assert find_pyproject_toml() == tmp_path.resolve() / "pyproject.toml"

    def test_git_root_without_pyproject(self, tmp_path, monkeypatch):
        (tmp_path / ".git").mkdir()

        monkeypatch.chdir(tmp_path)

        assert find_project_root() == Path(tmp_path).resolve()
        assert find_pyproject_toml() is None
