from collections.abc import Callable
import inspect
from typing import Any


async def resolve(value: Any) -> Any:
    """Await `value` if it is awaitable, otherwise return it as is. User
    functions handed to this library may be sync or async."""
    if inspect.isawaitable(value):
        return await value
    return value


def name_of(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
