"""Leaf-side helpers. These only read the nearest published context and call its trigger."""
import typing as ty
from functools import wraps

from .conf import DEFAULT_EVENT
from .provider import current
from .types import Fields, Options

F = ty.TypeVar("F", bound=ty.Callable)


def trigger(event: str, fields: ty.Optional[Fields] = None, options: ty.Optional[Options] = None) -> None:
    """Fire an event through the nearest enclosing provider."""
    current().trigger(event, fields or dict(), options or dict())


def fires(
    event: str = "",
    fields: ty.Optional[Fields] = None,
    options: ty.Optional[Options] = None,
) -> ty.Callable[[F], F]:
    """Fire an event every time the decorated function is called, before it runs.

    The provider is looked up at call time, not at decoration time. If no
    event is given, the configured default event is used.
    """

    def deco(f: F) -> F:
        @wraps(f)
        def __fires_wrapper(*args, **kwargs):  # type: ignore
            trigger(event or DEFAULT_EVENT(), fields, options)
            return f(*args, **kwargs)

        return ty.cast(F, __fires_wrapper)

    return deco
