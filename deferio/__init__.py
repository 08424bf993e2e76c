from .either import Either, Left, Right
from .maybe import Maybe, Some, Nothing
from .io import IO
from .either_io import EitherIO, ErrorFn, guard_error_fn
from .errors import (
    EffectError,
    NoSuchSide,
    NoLeftValue,
    NoRightValue,
    ValueAbsent,
    NotAnEither,
    UnhandledFailure,
    RaisedFailure,
    CriticalError,
    CRITICAL_ERROR,
)
from .logging import logger, configure_logger
from .version import __version__

__all__ = [
    "Either", "Left", "Right",
    "Maybe", "Some", "Nothing",
    "IO",
    "EitherIO", "ErrorFn", "guard_error_fn",
    "EffectError", "NoSuchSide", "NoLeftValue", "NoRightValue", "ValueAbsent",
    "NotAnEither", "UnhandledFailure", "RaisedFailure", "CriticalError", "CRITICAL_ERROR",
    "logger", "configure_logger",
    "__version__",
]
