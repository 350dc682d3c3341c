"""Awaitable combinators over ``Option``.

Each helper awaits at most one pending unit of work and then applies the
same presence rule as its synchronous counterpart. On ``Nothing`` the
async function is never called, so no coroutine is created and nothing
is scheduled. Cancellation is left to the awaited object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._validation import _require_callable
from .option import Option, Some

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


async def to_option_async[T](awaitable: Awaitable[T | None]) -> Option[T]:
    """Await a nullable result and lift it into an ``Option``."""
    return Option.of(await awaitable)


async def map_async[T, U](
    option: Option[T], mapper: Callable[[T], Awaitable[U]]
) -> Option[U]:
    """Async ``map``: await ``mapper(value)`` only when a value is present."""
    _require_callable(mapper, "mapper")
    if not option.has_value:
        return Option.none()
    return Some(await mapper(option.value_or_raise()))


async def bind_async[T, U](
    option: Option[T], binder: Callable[[T], Awaitable[Option[U]]]
) -> Option[U]:
    """Async ``bind``: await ``binder(value)`` only when a value is present."""
    _require_callable(binder, "binder")
    if not option.has_value:
        return Option.none()
    return await binder(option.value_or_raise())


async def match_async[T, R](
    option: Option[T],
    on_some: Callable[[T], Awaitable[R]],
    on_none: Callable[[], Awaitable[R]],
) -> R:
    """Async ``match``: exactly one branch is called and awaited."""
    _require_callable(on_some, "on_some")
    _require_callable(on_none, "on_none")
    if option.has_value:
        return await on_some(option.value_or_raise())
    return await on_none()


async def do_async[T](option: Option[T], action: Callable[[T], Awaitable[Any]]) -> None:
    """Await ``action(value)`` for its side effect when a value is present."""
    _require_callable(action, "action")
    if option.has_value:
        await action(option.value_or_raise())


async def as_awaitable[T](option: Option[T]) -> Option[T]:
    """Return ``option`` from a coroutine, for APIs that expect an awaitable."""
    return option
