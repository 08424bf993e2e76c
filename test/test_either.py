import pytest
from hypothesis import given
from hypothesis.strategies import builds, booleans, text, integers

from deferio.either import Either, Left, Right
from deferio.errors import NoLeftValue, NoRightValue, NoSuchSide


ERROR = "You shall not pass"


eithers = builds(lambda b, t, i: Right(i) if b else Left(t),
                 booleans(), text(min_size=1), integers())


@given(eithers)
def test_either_truthiness(e):
    assert (e and e.is_right() and hasattr(e, "value")) or (not e and e.is_left())


@given(eithers)
def test_left_ignores_right_side_operators(e):
    if e.is_left():
        assert e.map(lambda x: x + 1) is e
        assert e.flat_map(lambda x: Right(x + 1)) is e
    else:
        assert e.map_left(lambda x: x + "!") is e
        assert e.flat_map_left(lambda x: Left(x + "!")) is e


def test_left():
    left = Either.left(ERROR)
    assert left.is_left()
    assert not left.is_right()
    assert left.get_left() == ERROR
    with pytest.raises(NoRightValue, match="No right value found!"):
        left.get_right()


def test_left_mapping():
    left: Either[str, int] = Either.left(ERROR)
    assert left.map(lambda _: "success").get_left() == ERROR
    assert left.flat_map(lambda _: Either.right("success")).get_left() == ERROR
    assert left.map_left(lambda _: "Another one?") == Left("Another one?")
    assert left.flat_map_left(lambda _: Either.left("Another one?")) == Left("Another one?")
    assert left.flat_map_left(lambda e: Either.right(len(e))) == Right(len(ERROR))


def test_right():
    right = Either.right(42)
    assert right.is_right()
    assert not right.is_left()
    assert right.get_right() == 42
    with pytest.raises(NoLeftValue, match="No left value found!"):
        right.get_left()


def test_right_mapping():
    right: Either[str, int] = Either.right(42)
    assert right.map(lambda x: x + 10).get_right() == 52
    assert right.flat_map(lambda x: Either.right(x + 10)) == Right(52)
    assert right.flat_map(lambda _: Either.left("nope")) == Left("nope")
    assert right.map_left(lambda _: "Another one?") == Right(42)
    assert right.flat_map_left(lambda _: Either.left("Another one?")) == Right(42)


def test_missing_side_is_one_error_kind():
    with pytest.raises(NoSuchSide):
        Left(1).get_right()
    with pytest.raises(NoSuchSide):
        Right(1).get_left()


def test_exceptions_propagate():
    with pytest.raises(ZeroDivisionError):
        Right(1).map(lambda x: x / 0)
    with pytest.raises(ZeroDivisionError):
        Left(1).map_left(lambda x: x / 0)


def test_pattern_matching():
    match Either.right(3):
        case Left(_):
            assert False
        case Right(v):
            assert v == 3
