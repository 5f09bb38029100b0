from __future__ import annotations

import attrs
from attrs import field

SECOND_MILLIS = 1000


@attrs.frozen
class BenchmarkResult:
    strategy: str = field()

    rounds: int = field()
    """The number of rounds requested."""

    completed: int = field()
    """The number of rounds completed before the timeout, if any."""

    elapsed: float = field()
    """The wall time in seconds."""

    timed_out: bool = field(default=False)

    arity_preserved: bool = field(default=False)
    properties_preserved: bool = field(default=False)

    @property
    def using(self) -> str:
        return f"nuonce.{self.strategy}"

    def describe(self, timeout: float) -> str:
        """Return the result as a line of the benchmark table."""
        if self.timed_out:
            return f"  timed out after {timeout:g} seconds using {self.using}"

        seconds = int(self.elapsed)
        millis = (self.elapsed - seconds) * SECOND_MILLIS

        return f"  {seconds}s {millis:.3f}ms using {self.using}"
