"""Call-once function wrapping.

Nuonce exports four interchangeable strategies: `stripped`, `observable`, `copied`
and `proxied` (also exported as `default`). Each returns a wrapper that calls its
target at most once and replays the first result on every later call; they differ
in what of the target's metadata they mirror and in whether every call is observed.
"""

from __future__ import annotations

from nuonce.error import InvalidArgument
from nuonce.wrappers import (
    Proxied,
    Status,
    arity,
    copied,
    observable,
    proxied,
    stripped,
)

default = proxied

__all__ = [
    "InvalidArgument",
    "Proxied",
    "Status",
    "arity",
    "copied",
    "default",
    "observable",
    "proxied",
    "stripped",
]
