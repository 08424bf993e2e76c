from __future__ import annotations
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, cast

from .either import Either, Left, Right
from .errors import as_exception
from .logging import logger
from .utility import resolve, name_of


log = logger("io")


@dataclass(frozen=True)
class Then:
    fn: Callable[[Any], Any]


@dataclass(frozen=True)
class Bind:
    fn: Callable[[Any], IO[Any] | Awaitable[IO[Any]]]


@dataclass(frozen=True)
class Recover:
    fn: Callable[[Exception], Any]


type Step = Then | Bind | Recover


@dataclass(frozen=True)
class IO[T]:
    """A suspended computation. Nothing runs until `unsafe_run` or `safe_run`
    is awaited, and every run starts again from the thunk.

    A chain is the thunk followed by a tuple of steps. Running walks the steps
    in a loop carrying either a value or an exception: `Then` and `Bind` only
    fire on a value, `Recover` only on an exception. A `Bind` runs the `IO`
    returned by its function to completion before the next step, so composing
    is strictly sequential.

    `of` holds its value as is, even an awaitable; results of the thunk given
    to `from_` and of step functions are awaited.
    """
    _thunk: Callable[[], Any]
    _steps: tuple[Step, ...] = ()

    @staticmethod
    def of(value: T) -> IO[T]:
        async def pure() -> T:
            return value
        return IO(pure)

    @staticmethod
    def from_(thunk: Callable[[], Awaitable[T] | T]) -> IO[T]:
        return IO(thunk)

    @staticmethod
    def raise_(error_thunk: Callable[[], Any]) -> IO[Any]:
        def fail():
            raise as_exception(error_thunk())
        return IO(fail)

    def _then[U](self, step: Step) -> IO[U]:
        return IO(self._thunk, self._steps + (step,))

    def map[U](self, fn: Callable[[T], Awaitable[U] | U]) -> IO[U]:
        return self._then(Then(fn))

    def flat_map[U](self, fn: Callable[[T], Awaitable[IO[U]] | IO[U]]) -> IO[U]:
        return self._then(Bind(fn))

    def tap(self, fn: Callable[[T], Any]) -> IO[T]:
        async def tapped(value: T) -> T:
            await resolve(fn(value))
            return value
        return self.map(tapped)

    def filter(self, error_thunk: Callable[[], Any], predicate: Callable[[T], Any]) -> IO[T]:
        async def check(value: T) -> IO[T]:
            if await resolve(predicate(value)):
                return IO.of(value)
            return IO.raise_(error_thunk)
        return self.flat_map(check)

    def zip[U, V](self, other: IO[U], fn: Callable[[T, U], Awaitable[V] | V]) -> IO[V]:
        async def combine(value: T) -> V:
            match await other.safe_run():
                case Left(error):
                    raise error
                case Right(other_value):
                    return await resolve(fn(value, other_value))
        return self.map(combine)

    def catch(self, fn: Callable[[Exception], Awaitable[T] | T]) -> IO[T]:
        return self._then(Recover(fn))

    async def unsafe_run(self) -> T:
        value: Any = None
        error: Exception | None = None
        try:
            value = await resolve(self._thunk())
        except Exception as e:
            error = e

        for step in self._steps:
            recovering = isinstance(step, Recover)
            if (error is None and recovering) or (error is not None and not recovering):
                continue
            try:
                match step:
                    case Then(fn):
                        value = await resolve(fn(value))
                    case Bind(fn):
                        next_io = await resolve(fn(value))
                        if not isinstance(next_io, IO):
                            raise TypeError(
                                f"`{name_of(fn)}` should return an IO, got: {next_io!r}")
                        value = await next_io.unsafe_run()
                    case Recover(fn):
                        value = await resolve(fn(cast(Exception, error)))
                        error = None
            except Exception as e:
                log.debug("step `%s` failed: %r", name_of(step.fn), e)
                value, error = None, e

        if error is not None:
            raise error
        return value

    async def safe_run(self) -> Either[Exception, T]:
        try:
            return Right(await self.unsafe_run())
        except Exception as e:
            return Left(e)

    def __await__(self):
        return self.unsafe_run().__await__()
