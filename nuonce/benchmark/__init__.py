from __future__ import annotations

from nuonce.benchmark._models import BenchmarkResult
from nuonce.benchmark._runner import STRATEGIES, run_benchmark, run_strategy
from nuonce.benchmark._targets import make_target
from nuonce.benchmark.serialise import serialise_results

__all__ = [
    "STRATEGIES",
    "BenchmarkResult",
    "make_target",
    "run_benchmark",
    "run_strategy",
    "serialise_results",
]
