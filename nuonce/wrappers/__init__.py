from __future__ import annotations

from nuonce.wrappers._arity import Engine, arity, variant
from nuonce.wrappers._copied import copied, own_properties
from nuonce.wrappers._observable import observable
from nuonce.wrappers._proxied import Proxied, proxied
from nuonce.wrappers._status import CallRecord, Status
from nuonce.wrappers._stripped import stripped

__all__ = [
    "CallRecord",
    "Engine",
    "Proxied",
    "Status",
    "arity",
    "copied",
    "observable",
    "own_properties",
    "proxied",
    "stripped",
    "variant",
]
