from dataclasses import dataclass
from typing import Any


CRITICAL_MESSAGE = "Critical error: the error handler raised an exception."


class EffectError(Exception):
    def __str__(self):
        return "Unknown effect error."


class NoSuchSide(EffectError):
    def __str__(self):
        return "No such side."


class NoRightValue(NoSuchSide):
    def __str__(self):
        return "No right value found!"


class NoLeftValue(NoSuchSide):
    def __str__(self):
        return "No left value found!"


class ValueAbsent(EffectError):
    def __str__(self):
        return "Value doesn't exist!"


class RaisedFailure(EffectError):
    """Thrown to start an explicitly failed chain; never seen by callers."""
    def __str__(self):
        return "Explicit failure."


@dataclass
class NotAnEither(EffectError):
    got: Any

    def __str__(self):
        return f"Expected an Either, got: {self.got!r}"


@dataclass
class UnhandledFailure(EffectError):
    value: Any

    def __str__(self):
        return f"Unhandled failure: {self.value!r}"


@dataclass
class CriticalError(EffectError):
    message: str = CRITICAL_MESSAGE

    def __post_init__(self):
        Exception.__init__(self, self.message)

    def __setattr__(self, name, value):
        # exception machinery still sets __traceback__, __context__ and friends
        if name == "message" and "message" in self.__dict__:
            raise AttributeError("`CriticalError.message` is read-only")
        super().__setattr__(name, value)

    def __str__(self):
        return self.message


CRITICAL_ERROR = CriticalError()


def as_exception(value: Any) -> BaseException:
    """Failure values that are not exceptions can't be raised as such, we
    wrap them in `UnhandledFailure`."""
    if isinstance(value, BaseException):
        return value
    return UnhandledFailure(value)
