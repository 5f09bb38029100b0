from __future__ import annotations

from typing import TYPE_CHECKING

from cattrs.preconf.json import make_converter

from nuonce.benchmark._models import BenchmarkResult

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any


__json_converter = make_converter()


def serialise(model: Any, **kwargs: Any) -> str:
    return __json_converter.dumps(model, **kwargs)  # type: ignore[reportUnknownMemberType]


def deserialise(json: str, *, type: type[Any], **kwargs: Any) -> Any:
    return __json_converter.loads(json, cl=type, **kwargs)  # type: ignore[reportUnknownMemberType]


def serialise_results(results: Iterable[BenchmarkResult]) -> str:
    return serialise(list(results), unstructure_as=list[BenchmarkResult], indent=4)
