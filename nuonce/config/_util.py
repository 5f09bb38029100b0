from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nuonce.config._types import Arguments


def _is_project_root(path: Path) -> bool:
    """Return `True` if the given directory is the project root."""
    if not path.is_dir():
        return False

    is_python_project = (path / "pyproject.toml").is_file()

    is_git_repo = (path / ".git").exists()
    is_mercurial_repo = (path / ".hg").is_dir()
    is_apache_svn_repo = (path / ".svn").is_dir()

    return is_python_project or is_git_repo or is_mercurial_repo or is_apache_svn_repo


def find_project_root() -> Path:
    """Return the project root, defaults to current working directory."""
    cwd = Path.cwd().resolve()

    if _is_project_root(cwd):
        return cwd

    for dir in (dir for dir in cwd.parents if _is_project_root(dir)):
        return dir

    return cwd


def find_pyproject_toml() -> Path | None:
    """Return the project's `pyproject.toml` file."""
    pyproject_toml = find_project_root() / "pyproject.toml"

    if pyproject_toml.is_file():
        return pyproject_toml

    return None


def validate_arguments(arguments: Arguments) -> Arguments:
    """Validate and return the given arguments."""
    from nuonce import error  # circular import as error.info(...) etc use config

    if arguments.calls < 1:
        error.fatal("calls must be a positive integer")

    if arguments.multiple < 1:
        error.fatal("multiple must be a positive integer")

    if arguments.arity < 0:
        error.fatal("arity must not be negative")

    if arguments.properties < 0:
        error.fatal("properties must not be negative")

    if arguments.timeout <= 0:
        error.fatal("timeout must be a positive number of seconds")

    if arguments.use_callback and arguments.strategies == ("stripped",):
        error.nuonce("'stripped' accepts no callback, ignoring --callback")

    return arguments
