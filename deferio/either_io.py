from __future__ import annotations
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from .either import Either, Left, Right, is_either
from .errors import CriticalError, NotAnEither, RaisedFailure, as_exception
from .io import IO
from .logging import logger
from .utility import resolve, name_of


log = logger("either_io")


type ErrorFn[L] = Callable[[Exception], L]


def guard_error_fn[L](error_fn: ErrorFn[L]) -> ErrorFn[L]:
    """Wrap a normalization function so that it never raises. If `error_fn`
    raises, the failure becomes a fresh `CriticalError`, equal to
    `CRITICAL_ERROR`."""
    def guarded(error: Exception) -> L:
        try:
            return error_fn(error)
        except Exception as e:
            log.warning(
                "error handler `%s` raised %r while handling %r",
                name_of(error_fn), e, error)
            return CriticalError()  # type: ignore[return-value]

    return guarded


def _raise_failure():
    raise RaisedFailure()


@dataclass(frozen=True)
class EitherIO[L, R]:
    """An `IO` that produces an `Either`, together with the function that
    turns any exception raised along the chain into a `Left`.

    Every step that calls user code catches what that code raises and passes
    it through the guarded `error_fn`; `safe_run` therefore never raises,
    while `unsafe_run` raises whatever `Left` the chain ends up in.
    """
    error_fn: ErrorFn[L]
    io: IO[Either[L, R]]

    @cached_property
    def _fail(self) -> ErrorFn[L]:
        return guard_error_fn(self.error_fn)

    @staticmethod
    def of(error_fn: ErrorFn[L], value: R) -> EitherIO[L, R]:
        return EitherIO(error_fn, IO.of(Right(value)))

    @staticmethod
    def from_(error_fn: ErrorFn[L], thunk: Callable[[], Awaitable[R] | R]) -> EitherIO[L, R]:
        return EitherIO.of(error_fn, None).map(lambda _: thunk())

    @staticmethod
    def from_either(
        error_fn: ErrorFn[L], thunk: Callable[[], Awaitable[Either[L, R]] | Either[L, R]]
    ) -> EitherIO[L, R]:
        async def adopt(_, error_fn: ErrorFn[L]) -> EitherIO[L, R]:
            either = await resolve(thunk())
            if not is_either(either):
                raise NotAnEither(either)
            return EitherIO(error_fn, IO.of(either))

        return EitherIO.of(error_fn, None).flat_map(adopt)

    @staticmethod
    def raise_(error_thunk: Callable[[], L]) -> EitherIO[L, Any]:
        return EitherIO.from_(lambda _: error_thunk(), _raise_failure)

    def _chain[L2, R2](
        self,
        error_fn: ErrorFn[L2],
        on_left: Callable[[L], Any] | None,
        on_right: Callable[[R], Any] | None,
    ) -> EitherIO[L2, R2]:
        """Bind one side of the `Either`, passing the other side through.

        The bound function returns an `EitherIO` (or an awaitable of one)
        whose outcome replaces the current one. Exceptions are normalized
        with the guarded `error_fn` of the resulting chain.
        """
        fail = self._fail if error_fn is self.error_fn else guard_error_fn(error_fn)

        async def bind(either: Either[L, R]) -> IO[Either[L2, R2]]:
            match either:
                case Left(error) if on_left is not None:
                    fn, arg = on_left, error
                case Right(value) if on_right is not None:
                    fn, arg = on_right, value
                case _:
                    return IO.of(either)

            try:
                next_either_io = await resolve(fn(arg))
                if not isinstance(next_either_io, EitherIO):
                    raise TypeError(
                        f"`{name_of(fn)}` should return an EitherIO, got: {next_either_io!r}")
            except Exception as e:
                return IO.of(Left(fail(e)))
            return next_either_io.io

        return EitherIO(error_fn, self.io.flat_map(bind))

    def flat_map[U](
        self, fn: Callable[[R, ErrorFn[L]], Awaitable[EitherIO[L, U]] | EitherIO[L, U]]
    ) -> EitherIO[L, U]:
        return self._chain(self.error_fn, None, lambda value: fn(value, self.error_fn))

    def map[U](self, fn: Callable[[R], Awaitable[U] | U]) -> EitherIO[L, U]:
        async def step(value: R, error_fn: ErrorFn[L]) -> EitherIO[L, U]:
            return EitherIO.of(error_fn, await resolve(fn(value)))
        return self.flat_map(step)

    def tap(self, fn: Callable[[R], Any]) -> EitherIO[L, R]:
        async def tapped(value: R) -> R:
            try:
                await resolve(fn(value))
            except Exception as e:
                log.debug("tap `%s` raised %r, ignored", name_of(fn), e)
            return value
        return self.map(tapped)

    def filter(self, error_thunk: Callable[[], L], predicate: Callable[[R], Any]) -> EitherIO[L, R]:
        async def check(value: R, error_fn: ErrorFn[L]) -> EitherIO[L, R]:
            try:
                keep = await resolve(predicate(value))
            except Exception as e:
                log.debug("predicate `%s` raised %r", name_of(predicate), e)
                keep = False
            return EitherIO.of(error_fn, value) if keep else EitherIO.raise_(error_thunk)
        return self.flat_map(check)

    def zip[U, V](
        self, other: EitherIO[L, U], fn: Callable[[R, U], Awaitable[V] | V]
    ) -> EitherIO[L, V]:
        async def combine(value: R, error_fn: ErrorFn[L]) -> EitherIO[L, V]:
            match await other.safe_run():
                case Left() as failure:
                    return EitherIO(error_fn, IO.of(failure))
                case Right(other_value):
                    return EitherIO.of(error_fn, await resolve(fn(value, other_value)))
        return self.flat_map(combine)

    def flat_map_left[L2](
        self,
        next_error_fn: ErrorFn[L2],
        fn: Callable[[L], Awaitable[EitherIO[L2, R]] | EitherIO[L2, R]],
    ) -> EitherIO[L2, R]:
        return self._chain(next_error_fn, fn, None)

    def map_left[L2](
        self, next_error_fn: ErrorFn[L2], fn: Callable[[L], Awaitable[L2] | L2]
    ) -> EitherIO[L2, R]:
        async def step(error: L) -> EitherIO[L2, R]:
            next_error = await resolve(fn(error))
            return EitherIO(next_error_fn, IO.of(Left(next_error)))
        return self.flat_map_left(next_error_fn, step)

    def catch(self, fn: Callable[[L], Awaitable[R] | R]) -> EitherIO[L, R]:
        async def recover() -> Either[L, R]:
            match await self.safe_run():
                case Left(error):
                    return Right(await resolve(fn(error)))
                case right:
                    return right
        return EitherIO.from_either(self.error_fn, recover)

    async def unsafe_run(self) -> R:
        match await self.safe_run():
            case Left(error):
                raise as_exception(error)
            case Right(value):
                return value

    async def safe_run(self) -> Either[L, R]:
        match await self.io.safe_run():
            case Left(error):
                return Left(self._fail(error))
            case Right(either) if is_either(either):
                return either
            case Right(other):
                return Left(self._fail(NotAnEither(other)))

    def __await__(self):
        return self.safe_run().__await__()
