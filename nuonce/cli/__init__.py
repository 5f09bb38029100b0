from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

from nuonce import error
from nuonce.cli import _arguments
from nuonce.cli._argparse import ArgumentParser
from nuonce.cli._types import TomlArgumentType
from nuonce.cli._util import get_type_name, multi_paragraph_wrap
from nuonce.cli.toml import TOMLDecodeError, parse_project_toml
from nuonce.config import Arguments
from nuonce.config._util import find_pyproject_toml

if TYPE_CHECKING:
    from typing import Any, NoReturn


TOML_ARGUMENT_NAME_TO_SYS_ARGUMENT_NAME_MAP: dict[str, str] = {
    "strategies": "strategy",
}
"""Map from toml argument name to sys argument name.

If absent the name is the same for both the toml arguments and the sys arguments:

>>> toml_name = "calls"
>>> TOML_ARGUMENT_NAME_TO_SYS_ARGUMENT_NAME_MAP.get(toml_name, toml_name)
'calls'
>>> toml_name = "strategies"
>>> TOML_ARGUMENT_NAME_TO_SYS_ARGUMENT_NAME_MAP.get(toml_name, toml_name)
'strategy'
"""

TOML_ARGUMENT_TYPE_MAP: dict[str, TomlArgumentType] = {
    "strategies": TomlArgumentType.list_of_strings,
    "arity": TomlArgumentType.int,
    "properties": TomlArgumentType.int,
    "calls": TomlArgumentType.int,
    "multiple": TomlArgumentType.int,
    "timeout": TomlArgumentType.float,
    "callback": TomlArgumentType.flag,
    "warning-level": TomlArgumentType.string,
    "stdout": TomlArgumentType.string,
}
"""The expected type of the arguments in the toml config file.

This is used for:
1. Type checking the provided toml arguments;
2. Correctly converting toml arguments to sys arguments (see TomlArgumentType docs).
"""


def parse_arguments(
    *,
    sys_args: list[str] | None = None,
    project_toml_conf: dict[str, Any] | None = None,
    exit_on_error: bool = True,
) -> Arguments:
    cli_parser = make_cli_parser(exit_on_error=exit_on_error)
    toml_parser = make_toml_parser()

    project_toml_conf = _parse_project_config(
        project_toml_conf,
        _get_toml_override(cli_parser, sys_args=sys_args),
        exit_on_error=exit_on_error,
    )
    toml_arguments = _translate_toml_conf_to_sys_args(project_toml_conf)

    # Parse the arguments from the project toml
    # Then add/override with the arguments from the cli
    arguments = Arguments()
    try:
        toml_parser.parse_args(args=toml_arguments, namespace=arguments)
    except argparse.ArgumentError as argument_error:
        _toml_error(argument_error, exit_on_error=exit_on_error)
    cli_parser.parse_args(args=sys_args, namespace=arguments)

    return arguments


def make_cli_parser(exit_on_error: bool = True) -> ArgumentParser:
    parser = ArgumentParser(
        prog="nuonce",
        description=multi_paragraph_wrap(
            """\
            Benchmark the call-once wrapping strategies.

            Each round generates a new target, wraps it, and calls the wrapper.
            Options may also be given in the [tool.nuonce] table of pyproject.toml.
            """
        ),
        formatter_class=argparse.RawTextHelpFormatter,
        exit_on_error=exit_on_error,
    )

    parser = _arguments.add_version_argument(parser)
    parser = _arguments.add_toml_config_override_argument(parser)
    parser = _arguments.add_common_arguments(parser)

    return parser


def make_toml_parser() -> ArgumentParser:
    parser = ArgumentParser(exit_on_error=False)
    parser = _arguments.add_common_arguments(parser)

    return parser


def _get_toml_override(
    cli_parser: ArgumentParser,
    *,
    sys_args: list[str] | None = None,
) -> Path | None:
    """Return the toml config override from the CLI if given, otherwise `None`."""
    cli_arguments = cli_parser.parse_args(args=sys_args, namespace=Arguments())
    pyproject_toml_override = cli_arguments.pyproject_toml_override

    if pyproject_toml_override is None:
        return None

    if not pyproject_toml_override.is_file():
        error.fatal(f"config file {str(pyproject_toml_override)!r} does not exist")

    return pyproject_toml_override


def _toml_error(exc: Exception, *, exit_on_error: bool) -> NoReturn:
    if exit_on_error:
        error.fatal(f"error parsing project toml: {exc}")
    raise exc


def _parse_project_config(
    input_config: dict[str, Any] | None,
    project_toml_override: Path | None,
    *,
    exit_on_error: bool = True,
) -> dict[str, Any]:
    # Allow the use of an explicit config, this is helpful for testing
    if not input_config:
        try:
            conf = parse_project_toml(find_pyproject_toml(), project_toml_override)
        except TOMLDecodeError as toml_decode_error:
            _toml_error(toml_decode_error, exit_on_error=exit_on_error)
    else:
        conf = input_config

    try:
        conf = _validate_toml_config(conf)
    except argparse.ArgumentError as argument_error:
        _toml_error(argument_error, exit_on_error=exit_on_error)

    return conf


def _validate_toml_config(conf: dict[str, Any]) -> dict[str, Any]:
    _type_error: str = (
        "{arg!r} expects type {expected_type}, got {value!r} of type {actual_type}"
    )

    # Prune unrecognised arguments
    conf = {k: v for k, v in conf.items() if k in TOML_ARGUMENT_TYPE_MAP}

    # Validate types
    for arg, value in conf.items():
        expected_type = TOML_ARGUMENT_TYPE_MAP[arg]

        if not expected_type.is_valid(value):
            _error = _type_error.format(
                arg=arg,
                value=value,
                expected_type=str(expected_type),
                actual_type=get_type_name(value),
            )
            raise argparse.ArgumentError(None, _error)

    return conf


def _translate_toml_conf_to_sys_args(toml_conf: dict[str, Any]) -> list[str]:
    """Return the toml conf translated to `sys.argv` style list.

    >>> _translate_toml_conf_to_sys_args(
    ...     {"calls": 10, "callback": True, "strategies": ["copied", "proxied"]}
    ... )
    ['--calls', '10', '--callback', '--strategy', 'copied', '--strategy', 'proxied']
    """
    toml_sys_args: list[str] = []

    for k, v in toml_conf.items():
        arg_name = f"--{TOML_ARGUMENT_NAME_TO_SYS_ARGUMENT_NAME_MAP.get(k, k)}"

        if isinstance(v, bool):
            toml_sys_args += [arg_name] if v else []
        elif isinstance(v, (str, int, float)):
            toml_sys_args += [arg_name, f"{v}"]
        elif isinstance(v, list):
            for arg_value in v:
                toml_sys_args += [arg_name, f"{arg_value}"]

    return toml_sys_args
