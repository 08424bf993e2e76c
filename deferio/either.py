from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, cast

from .errors import NoLeftValue, NoRightValue


class Either[L, R]:
    """Holds exactly one of a failure (`Left`) or a success (`Right`).

    `Either` is a plain, synchronous algebra: exceptions raised by the
    functions passed to its methods are not caught here.
    """
    __slots__ = ()

    @staticmethod
    def left(error: L) -> Either[L, Any]:
        return Left(error)

    @staticmethod
    def right(value: R) -> Either[Any, R]:
        return Right(value)

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def get_left(self) -> L:
        match self:
            case Left(error):
                return error
            case _:
                raise NoLeftValue()

    def get_right(self) -> R:
        match self:
            case Right(value):
                return value
            case _:
                raise NoRightValue()

    def map[U](self, fn: Callable[[R], U]) -> Either[L, U]:
        match self:
            case Right(value):
                return Right(fn(value))
            case _:
                return cast(Either[L, U], self)

    def map_left[U](self, fn: Callable[[L], U]) -> Either[U, R]:
        match self:
            case Left(error):
                return Left(fn(error))
            case _:
                return cast(Either[U, R], self)

    def flat_map[U](self, fn: Callable[[R], Either[L, U]]) -> Either[L, U]:
        match self:
            case Right(value):
                return fn(value)
            case _:
                return cast(Either[L, U], self)

    def flat_map_left[U](self, fn: Callable[[L], Either[U, R]]) -> Either[U, R]:
        match self:
            case Left(error):
                return fn(error)
            case _:
                return cast(Either[U, R], self)


@dataclass(frozen=True)
class Left[L, R](Either[L, R]):
    error: L

    def __bool__(self):
        return False

    def __repr__(self):
        return f"Left({self.error!r})"


@dataclass(frozen=True)
class Right[L, R](Either[L, R]):
    value: R

    def __bool__(self):
        return True

    def __repr__(self):
        return f"Right({self.value!r})"


def is_either(x: Any) -> bool:
    return isinstance(x, (Left, Right))
