from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from nuonce import _version
from nuonce.cli._util import multi_paragraph_wrap
from nuonce.config import STRATEGY_NAMES, Output

if TYPE_CHECKING:
    from nuonce.cli._argparse import ArgumentParser


def add_common_arguments(parser: ArgumentParser) -> ArgumentParser:
    """Apply the arguments common to the cli and toml."""
    parser = add_strategy_argument(parser)
    parser = add_target_shape_arguments(parser)
    parser = add_workload_arguments(parser)
    parser = add_callback_argument(parser)
    parser = add_warning_level_argument(parser)
    parser = add_stdout_arguments(parser)

    return parser


def add_version_argument(parser: ArgumentParser) -> ArgumentParser:
    version_group = parser.add_argument_group()
    version_group.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {_version.version}",
    )

    return parser


def add_toml_config_override_argument(parser: ArgumentParser) -> ArgumentParser:
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        type=Path,
        required=False,
        help=multi_paragraph_wrap(
            """\
            override the default 'pyproject.toml' with another config file
            """
        ),
        metavar="TOML",
        dest="pyproject_toml_override",
    )

    return parser


def add_strategy_argument(parser: ArgumentParser) -> ArgumentParser:
    strategy_group = parser.add_argument_group()
    strategy_group.add_argument(
        "-s",
        "--strategy",
        action="append",
        type=str,
        choices=list(STRATEGY_NAMES),
        help=multi_paragraph_wrap(
            """\
            >the wrapping strategy to benchmark, may be given more than once
            >    stripped   - no metadata, no callback
            >    observable - no metadata, every call observed
            >    copied     - arity and properties copied when wrapping
            >    proxied    - arity and properties forwarded live

            >NB: all strategies are benchmarked when none are given

            >TOML example: strategies=['copied', 'proxied']
            """
        ),
        metavar="NAME",
        dest="_strategies",
    )

    return parser


def add_target_shape_arguments(parser: ArgumentParser) -> ArgumentParser:
    target_group = parser.add_argument_group()

    target_group.add_argument(
        "-a",
        "--arity",
        type=int,
        help=multi_paragraph_wrap(
            """\
            >the number of parameters declared by the target \033[1m(default: 1)\033[0m

            >TOML example: arity=2
            """
        ),
        metavar="N",
        dest="arity",
    )
    target_group.add_argument(
        "-p",
        "--properties",
        type=int,
        help=multi_paragraph_wrap(
            """\
            >the number of own properties set on the target \033[1m(default: 0)\033[0m

            >TOML example: properties=5
            """
        ),
        metavar="N",
        dest="properties",
    )

    return parser


def add_workload_arguments(parser: ArgumentParser) -> ArgumentParser:
    workload_group = parser.add_argument_group()

    workload_group.add_argument(
        "-n",
        "--calls",
        type=int,
        help=multi_paragraph_wrap(
            """\
            >the number of rounds, each wrapping a new target \033[1m(default: 1000)\033[0m

            >TOML example: calls=1000
            """
        ),
        metavar="N",
        dest="calls",
    )
    workload_group.add_argument(
        "-m",
        "--multiple",
        type=int,
        help=multi_paragraph_wrap(
            """\
            >the number of calls of each wrapper per round \033[1m(default: 1)\033[0m

            >TOML example: multiple=10
            """
        ),
        metavar="N",
        dest="multiple",
    )
    workload_group.add_argument(
        "-t",
        "--timeout",
        type=float,
        help=multi_paragraph_wrap(
            """\
            >stop a strategy after this many seconds \033[1m(default: 15)\033[0m

            >TOML example: timeout=15.0
            """
        ),
        metavar="SECONDS",
        dest="timeout",
    )

    return parser


def add_callback_argument(parser: ArgumentParser) -> ArgumentParser:
    callback_group = parser.add_argument_group()
    callback_group.add_argument(
        "--callback",
        action="store_true",
        help=multi_paragraph_wrap(
            """\
            >observe every call, ignored by the 'stripped' strategy

            >TOML example: callback=true
            """
        ),
        dest="use_callback",
    )

    return parser


def add_warning_level_argument(parser: ArgumentParser) -> ArgumentParser:
    warning_level_group = parser.add_argument_group()
    warning_level_group.add_argument(
        "-w",
        "--warning-level",
        type=str,
        choices=["none", "default", "all"],
        help=multi_paragraph_wrap(
            """\
            >warnings level meaning:
            >    none    - do not show warnings
            >    default - show warnings \033[1m(default)\033[0m
            >    all     - show warnings, including low-priority

            >NB: errors and fatal errors are always shown

            >TOML example: warning-level='all'
            """
        ),
        dest="_warning_level",
    )

    return parser


def add_stdout_arguments(parser: ArgumentParser) -> ArgumentParser:
    stdout_group = parser.add_argument_group()
    stdout_group.add_argument(
        "-o",
        "--stdout",
        type=Output,
        choices=list(Output),
        help=multi_paragraph_wrap(
            """\
            >output selection:
            >    silent - do not print to stdout
            >    table  - print a line per strategy \033[1m(default)\033[0m
            >    json   - print the results as json

            >TOML example: stdout='json'
            """
        ),
        dest="stdout",
    )

    return parser
