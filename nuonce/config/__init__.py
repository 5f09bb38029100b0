from __future__ import annotations

# isort: off
from ._types import (
    STRATEGY_NAMES,
    Arguments,
    Config,
    Output,
    ShowWarnings,
    State,
)

__all__ = [
    "STRATEGY_NAMES",
    "Arguments",
    "Config",
    "Output",
    "ShowWarnings",
    "State",
]
