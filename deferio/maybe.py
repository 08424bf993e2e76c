from __future__ import annotations
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .either import Either, Left, Right
from .errors import ValueAbsent
from .logging import logger
from .utility import name_of


log = logger("maybe")


class Maybe[T]:
    """Zero or one value.

    Functions passed to `map`, `flat_map` and `filter` may raise; on a `Some`
    that turns the result into `Nothing` instead of propagating.
    """
    __slots__ = ()

    @staticmethod
    def some(value: T) -> Some[T]:
        return Some(value)

    @staticmethod
    def nothing() -> Nothing:
        return Nothing()

    @staticmethod
    def of(value: T | None) -> Maybe[T]:
        return Nothing() if value is None else Some(value)

    def is_some(self) -> bool:
        return isinstance(self, Some)

    def is_nothing(self) -> bool:
        return isinstance(self, Nothing)

    def get_some(self) -> T:
        match self:
            case Some(value):
                return value
            case _:
                raise ValueAbsent()

    def get_or_default[U](self, default: U) -> T | U:
        match self:
            case Some(value):
                return value
            case _:
                return default

    def map[U](self, fn: Callable[[T], U]) -> Maybe[U]:
        match self:
            case Some(value):
                try:
                    return Some(fn(value))
                except Exception as e:
                    log.debug("`%s` raised %r, degrading to Nothing", name_of(fn), e)
                    return Nothing()
            case _:
                return Nothing()

    def flat_map[U](self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        match self:
            case Some(value):
                try:
                    result = fn(value)
                except Exception as e:
                    log.debug("`%s` raised %r, degrading to Nothing", name_of(fn), e)
                    return Nothing()
                if not isinstance(result, Maybe):
                    log.debug("`%s` returned %r instead of a Maybe", name_of(fn), result)
                    return Nothing()
                return result
            case _:
                return Nothing()

    def filter(self, predicate: Callable[[T], Any]) -> Maybe[T]:
        match self:
            case Some(value):
                try:
                    keep = bool(predicate(value))
                except Exception as e:
                    log.debug("`%s` raised %r, degrading to Nothing", name_of(predicate), e)
                    return Nothing()
                return self if keep else Nothing()
            case _:
                return self

    def to_either[L](self, left_value: L) -> Either[L, T]:
        match self:
            case Some(value):
                return Right(value)
            case _:
                return Left(left_value)


@dataclass(frozen=True)
class Some[T](Maybe[T]):
    value: T

    def __bool__(self):
        return True

    def __repr__(self):
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing(Maybe[Any]):
    def __bool__(self):
        return False

    def __repr__(self):
        return "Nothing"
