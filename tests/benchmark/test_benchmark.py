from __future__ import annotations

import inspect
import json
from unittest import mock

import pytest

from nuonce import arity
from nuonce.benchmark import (
    STRATEGIES,
    BenchmarkResult,
    make_target,
    run_benchmark,
    run_strategy,
    serialise_results,
)
from nuonce.benchmark.serialise import deserialise
from nuonce.config import STRATEGY_NAMES, Arguments


class TestMakeTarget:
    @pytest.mark.parametrize("n", [0, 1, 3])
    def test_arity(self, n):
        target = make_target(n, 0)

        assert arity(target) == n
        assert list(inspect.signature(target).parameters) == [f"a{i}" for i in range(n)]

    def test_properties(self):
        target = make_target(0, 3)

        for name in ("foo0", "foo1", "foo2"):
            assert callable(getattr(target, name))

        assert not hasattr(target, "foo3")

    def test_result_is_not_constant(self):
        target = make_target(1, 0)

        assert {target(1) for _ in range(8)} != {target(1)}
        assert target(0) == 0

    def test_each_target_is_new(self):
        assert make_target(1, 1) is not make_target(1, 1)


class TestRunStrategy:
    @pytest.mark.parametrize("strategy", STRATEGY_NAMES)
    def test_result(self, strategy):
        result = run_strategy(strategy, Arguments(calls=5, multiple=3, properties=2))

        assert result.strategy == strategy
        assert result.rounds == 5
        assert result.completed == 5
        assert result.elapsed >= 0
        assert not result.timed_out

    @pytest.mark.parametrize(
        "strategy, preserved",
        [
            ("stripped", False),
            ("observable", False),
            ("copied", True),
            ("proxied", True),
        ],
    )
    def test_metadata_preserved(self, strategy, preserved):
        result = run_strategy(strategy, Arguments(calls=1, arity=2, properties=1))

        assert result.arity_preserved is preserved
        assert result.properties_preserved is preserved

    def test_zero_arity_target(self):
        result = run_strategy("stripped", Arguments(calls=1, arity=0, properties=0))

        assert result.arity_preserved
        assert result.properties_preserved

    @pytest.mark.parametrize("strategy", STRATEGY_NAMES)
    def test_callback(self, strategy):
        result = run_strategy(strategy, Arguments(calls=3, use_callback=True))

        assert result.completed == 3

    def test_unknown_strategy(self):
        with pytest.raises(ValueError, match="unknown strategy: 'memoised'"):
            run_strategy("memoised", Arguments())

    def test_timeout(self, capfd):
        ticks = iter(range(100))

        with mock.patch("time.perf_counter", side_effect=lambda: next(ticks)):
            result = run_strategy("proxied", Arguments(calls=10, timeout=2.5))

        _, stderr = capfd.readouterr()

        assert result.timed_out
        assert result.completed == 3
        assert "timed out after 3 of 10 rounds" in stderr
        assert "[proxied]" in stderr

    def test_run_benchmark(self):
        arguments = Arguments(calls=1, _strategies=["proxied", "stripped"])

        results = list(run_benchmark(arguments))

        assert [r.strategy for r in results] == ["stripped", "proxied"]

    def test_strategies(self):
        assert tuple(STRATEGIES) == STRATEGY_NAMES


class TestBenchmarkResult:
    def test_describe(self):
        result = BenchmarkResult(
            strategy="copied",
            rounds=10,
            completed=10,
            elapsed=1.25,
        )

        assert result.using == "nuonce.copied"
        assert result.describe(15.0) == "  1s 250.000ms using nuonce.copied"

    def test_describe_timed_out(self):
        result = BenchmarkResult(
            strategy="proxied",
            rounds=10,
            completed=3,
            elapsed=15.1,
            timed_out=True,
        )

        assert result.describe(15.0) == "  timed out after 15 seconds using nuonce.proxied"

    def test_is_frozen(self):
        result = BenchmarkResult(strategy="copied", rounds=1, completed=1, elapsed=0.0)

        with pytest.raises(AttributeError):
            result.completed = 2


class TestSerialise:
    def test_serialise_results(self):
        results = [
            BenchmarkResult(
                strategy="copied",
                rounds=2,
                completed=2,
                elapsed=0.5,
                arity_preserved=True,
                properties_preserved=True,
            ),
        ]

        assert json.loads(serialise_results(results)) == [
            {
                "strategy": "copied",
                "rounds": 2,
                "completed": 2,
                "elapsed": 0.5,
                "timed_out": False,
                "arity_preserved": True,
                "properties_preserved": True,
            }
        ]

    def test_deserialise(self):
        result = BenchmarkResult(strategy="stripped", rounds=1, completed=1, elapsed=0.1)

        assert deserialise(serialise_results([result]), type=list[BenchmarkResult]) == [
            result
        ]
