import pytest

from deferio.maybe import Maybe, Some, Nothing
from deferio.either import Left, Right
from deferio.errors import ValueAbsent


def test_nothing():
    nothing = Maybe.nothing()
    assert not nothing.is_some()
    assert nothing.is_nothing()
    assert not nothing
    assert nothing.get_or_default(10) == 10
    with pytest.raises(ValueAbsent, match="Value doesn't exist!"):
        nothing.get_some()


def test_nothing_operators():
    nothing = Maybe.nothing()
    assert nothing.flat_map(lambda _: Maybe.some(10)).is_nothing()
    assert nothing.flat_map(lambda _: Maybe.nothing()).is_nothing()
    assert nothing.map(lambda _: 10).is_nothing()
    assert nothing.filter(lambda _: False).is_nothing()
    assert nothing.filter(lambda _: True).is_nothing()


def test_nothing_to_either():
    either = Maybe.nothing().to_either(404)
    assert either.is_left()
    assert either.get_left() == 404


def test_some():
    some = Maybe.some("hello")
    assert some.is_some()
    assert not some.is_nothing()
    assert some
    assert some.get_or_default("hola") == "hello"
    assert some.get_some() == "hello"


def test_some_operators():
    some = Maybe.some("hello")
    assert some.flat_map(lambda _: Maybe.some(10)).get_some() == 10
    assert some.flat_map(lambda _: Maybe.nothing()).is_nothing()
    assert some.map(lambda _: 10) == Some(10)


def test_some_filter():
    some = Maybe.some("hello")

    def broken(_):
        raise RuntimeError()

    assert some.filter(lambda v: isinstance(v, str)).is_some()
    assert some.filter(lambda v: isinstance(v, int)).is_nothing()
    assert some.filter(broken).is_nothing()


def test_some_degrades_on_exceptions():
    some = Maybe.some(0)
    assert some.map(lambda x: 1 / x) == Nothing()
    assert some.flat_map(lambda x: Some(1 / x)) == Nothing()
    assert some.flat_map(lambda x: x + 1).is_nothing()


def test_some_to_either():
    either = Maybe.some("hello").to_either(404)
    assert either == Right("hello")
    assert either != Left(404)


def test_of():
    assert Maybe.of(None) == Nothing()
    assert Maybe.of(0) == Some(0)
    assert Maybe.of("") == Some("")
