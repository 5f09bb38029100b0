from __future__ import annotations

import gc
import inspect
import weakref
from unittest import mock

import pytest

from nuonce import InvalidArgument, arity, observable, stripped


class Target:
    """A callable whose lifetime can be observed with `weakref`."""

    def __call__(self, *args, **kwargs):
        return args, kwargs


class TestStripped:
    def test_call_count(self):
        target = mock.Mock(return_value=1)

        once = stripped(target)

        for _ in range(10):
            assert once() == 1

        # Even though we call `once` many times, the target is called exactly once
        assert target.call_count == 1

    def test_arguments_of_the_first_call_are_passed(self):
        target = mock.Mock(return_value=1)

        once = stripped(target)
        once("hi", "there", c=1)
        once("bye", c=2)

        target.assert_called_once_with("hi", "there", c=1)

    def test_none_result_is_cached(self):
        target = mock.Mock(return_value=None)

        once = stripped(target)

        assert once() is None
        assert once() is None
        assert target.call_count == 1

    def test_signature_is_variadic(self):
        def target(a, b, c):
            pass

        signature = inspect.signature(stripped(target))

        assert [p.kind for p in signature.parameters.values()] == [
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ]
        assert arity(stripped(target)) == 0

    def test_no_metadata_is_copied(self):
        def target():
            """The target's docstring."""

        target.custom_property = 1

        once = stripped(target)

        assert once.__name__ != target.__name__
        assert once.__doc__ is None
        assert not hasattr(once, "custom_property")
        assert not hasattr(once, "__wrapped__")

    def test_rejects_non_callable(self):
        with pytest.raises(InvalidArgument) as exc_info:
            stripped(42)

        assert str(exc_info.value) == "target must be callable"


@pytest.mark.parametrize("strategy", [stripped, observable])
class TestRelease:
    def test_target_is_released_after_first_call(self, strategy):
        target = Target()
        target_ref = weakref.ref(target)

        once = strategy(target)
        del target

        gc.collect()
        assert target_ref() is not None

        once()

        gc.collect()
        assert target_ref() is None

    def test_target_is_kept_after_failed_call(self, strategy):
        calls = 0

        def flaky():
            nonlocal calls
            calls += 1
            if calls == 1:
                raise RuntimeError
            return calls

        once = strategy(flaky)

        with pytest.raises(RuntimeError):
            once()

        assert once() == 2
