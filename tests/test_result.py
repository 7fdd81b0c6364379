"""Tests for Result type (Ok and Err)."""

from datetime import UTC, datetime, timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st
from resultkit import Err, Nothing, Ok, Propagate, Some, collect

from tests.strategies import errs, integers, payloads


class TestOkCreation:
    """Tests for Ok instantiation and basic properties."""

    def test_ok_wraps_value(self):
        """Ok stores its payload in data."""
        assert Ok(42).data == 42

    def test_ok_is_tagged(self):
        """Ok reports success and not failure."""
        ok = Ok('x')
        assert ok.is_ok() is True
        assert ok.is_err() is False

    def test_ok_is_frozen(self):
        """Ok instances are immutable."""
        ok = Ok(42)
        with pytest.raises(AttributeError):
            ok.data = 100  # type: ignore[misc]

    def test_ok_can_wrap_none(self):
        """Ok(None) is a valid success."""
        assert Ok(None).is_ok()


class TestErrCreation:
    """Tests for Err instantiation, timestamp and equality."""

    def test_err_wraps_error(self):
        """Err stores its payload in data."""
        assert Err('boom').data == 'boom'

    def test_err_is_tagged(self):
        """Err reports failure and not success."""
        err = Err('boom')
        assert err.is_err() is True
        assert err.is_ok() is False

    def test_err_records_timestamp(self):
        """Err records a timezone-aware construction time."""
        before = datetime.now(UTC)
        err = Err('boom')
        after = datetime.now(UTC)
        assert err.timestamp.tzinfo is not None
        assert before <= err.timestamp <= after

    def test_err_equality_ignores_timestamp(self):
        """Two Errs with equal data are equal even if created at different times."""
        first = Err('boom')
        second = Err('boom', timestamp=first.timestamp + timedelta(seconds=5))
        assert first == second

    def test_err_repr_hides_timestamp(self):
        """repr shows only the payload."""
        assert repr(Err('boom')) == "Err(data='boom')"

    def test_err_is_frozen(self):
        """Err instances are immutable."""
        err = Err('boom')
        with pytest.raises(AttributeError):
            err.data = 'other'  # type: ignore[misc]

    def test_ok_not_equal_to_err(self):
        """Ok and Err with the same payload differ."""
        assert Ok(1) != Err(1)


class TestMap:
    """Tests for the transform shared by both variants."""

    def test_ok_map_applies_function(self):
        """Ok.map returns a new Ok with the transformed value."""
        assert Ok(2).map(lambda x: x * 10) == Ok(20)

    def test_err_map_returns_same_instance(self):
        """Err.map returns the very same Err."""
        err = Err('boom')
        assert err.map(lambda x: x * 10) is err

    def test_err_map_never_calls_function(self):
        """Err.map does not invoke the function."""
        calls: list[object] = []
        Err('boom').map(calls.append)
        assert calls == []

    def test_map_short_circuits_chain(self):
        """A chain of maps stops transforming after the first Err."""
        err = Err('boom')
        result = Ok(1).map(lambda x: x + 1).and_then(lambda _: err).map(lambda x: x + 1)
        assert result is err

    @given(integers)
    def test_transform_law(self, x):
        """Ok(x).map(f) == Ok(f(x))."""

        def f(v: int) -> int:
            return v * 3 - 1

        assert Ok(x).map(f) == Ok(f(x))

    @given(errs)
    def test_absorption_law(self, err):
        """Err.map(f) is Err for every payload."""
        assert err.map(lambda _: pytest.fail('called')) is err


class TestUnwrap:
    """Tests for unwrap, unwrap_or, unwrap_or_else, expect."""

    def test_ok_unwrap(self):
        """Ok.unwrap returns the value."""
        assert Ok(42).unwrap() == 42

    def test_err_unwrap_raises(self):
        """Err.unwrap raises RuntimeError."""
        with pytest.raises(RuntimeError, match='Called unwrap on Err'):
            Err('boom').unwrap()

    def test_unwrap_or(self):
        """unwrap_or returns the value for Ok and the default for Err."""
        assert Ok(1).unwrap_or(0) == 1
        assert Err('boom').unwrap_or(0) == 0

    def test_unwrap_or_else(self):
        """unwrap_or_else computes the fallback from the error."""
        assert Ok(1).unwrap_or_else(len) == 1
        assert Err('boom').unwrap_or_else(len) == 4

    def test_expect(self):
        """expect returns the value or raises with the message."""
        assert Ok(1).expect('needed') == 1
        with pytest.raises(RuntimeError, match='needed'):
            Err('boom').expect('needed')


class TestCombinators:
    """Tests for map_err, and_then, or_else and Option conversion."""

    def test_map_err(self):
        """map_err transforms Err and leaves Ok alone."""
        ok = Ok(1)
        assert ok.map_err(str.upper) is ok
        assert Err('boom').map_err(str.upper) == Err('BOOM')

    def test_and_then(self):
        """and_then chains on Ok and is inert on Err."""
        assert Ok(2).and_then(lambda x: Ok(x + 1)) == Ok(3)
        assert Ok(2).and_then(lambda _: Err('no')) == Err('no')
        err = Err('boom')
        assert err.and_then(lambda x: Ok(x)) is err

    def test_or_else(self):
        """or_else recovers from Err and is inert on Ok."""
        ok = Ok(1)
        assert ok.or_else(lambda _: Ok(0)) is ok
        assert Err('boom').or_else(lambda e: Ok(len(e))) == Ok(4)

    def test_option_conversion(self):
        """ok() and err() convert to Option."""
        assert Ok(1).ok() == Some(1)
        assert Ok(1).err() is Nothing
        assert Err('boom').ok() is Nothing
        assert Err('boom').err() == Some('boom')

    def test_pattern_matching(self):
        """Ok and Err support structural pattern matching on data."""
        match Ok(5):
            case Ok(value):
                assert value == 5
            case _:
                pytest.fail('expected Ok')
        match Err('boom'):
            case Err(error):
                assert error == 'boom'
            case _:
                pytest.fail('expected Err')


class TestBail:
    """Tests for bail()."""

    def test_ok_bail_returns_value(self):
        """Ok.bail returns the value."""
        assert Ok(1).bail() == 1

    def test_err_bail_raises_propagate(self):
        """Err.bail raises Propagate carrying the same Err."""
        err = Err('boom')
        with pytest.raises(Propagate) as exc_info:
            err.bail()
        assert exc_info.value.value is err


class TestCollect:
    """Tests for collect()."""

    def test_collect_all_ok(self):
        """collect gathers Ok values in order."""
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_collect_returns_first_err(self):
        """collect short-circuits on the first Err."""
        first = Err('first')
        assert collect([Ok(1), first, Err('second')]) is first

    def test_collect_empty(self):
        """collect of nothing is Ok([])."""
        assert collect([]) == Ok([])

    @given(st.lists(payloads, max_size=10))
    def test_collect_of_oks_roundtrips_values(self, values):
        """collect(Ok(v) for v in values) == Ok(values)."""
        assert collect(Ok(v) for v in values) == Ok(values)
