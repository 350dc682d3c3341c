"""Optional values without ``None`` checks.

``Option[T]`` is either ``Some(value)`` or the ``Nothing`` singleton.
``Some`` never wraps ``None``; use ``Option.of`` to lift a nullable value.

Branch on presence with ``has_value`` or ``match``. Options deliberately
do not define truthiness, so ``if option:`` cannot silently confuse
``Some(0)`` with ``Nothing``.
"""

from __future__ import annotations

import dataclasses
import typing

from ._validation import _require, _require_callable
from .errors import InvalidStateError

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from .outcome import Outcome

_MISSING = object()


class Option[T]:
    """Base of the ``Some`` / ``Nothing`` tagged union."""

    __slots__ = ()

    @property
    def has_value(self) -> bool:
        raise NotImplementedError

    def _unwrap(self) -> T:
        return typing.cast("Some[T]", self).value

    # --- Factories ---

    @staticmethod
    def some[V](value: V) -> Option[V]:
        """Wrap a present value; ``None`` is rejected."""
        return Some(value)

    @staticmethod
    def none[V]() -> Option[V]:
        """Return the canonical empty option."""
        return typing.cast("Option[V]", Nothing)

    @staticmethod
    def of[V](value: V | None) -> Option[V]:
        """Lift a nullable value: ``None`` becomes ``Nothing``."""
        if value is None:
            return Option.none()
        return Some(value)

    @staticmethod
    def when[V](condition: bool, value: V) -> Option[V]:
        """Return ``Some(value)`` if ``condition`` holds, else ``Nothing``."""
        return Some(value) if condition else Option.none()

    @staticmethod
    def when_lazy[V](condition: bool, factory: Callable[[], V]) -> Option[V]:
        """Like ``when`` but only calls ``factory`` if ``condition`` holds."""
        _require_callable(factory, "factory")
        return Some(factory()) if condition else Option.none()

    # --- Access ---

    def value_or_raise(self) -> T:
        """Return the value, or raise ``InvalidStateError`` on ``Nothing``."""
        if not self.has_value:
            raise InvalidStateError("No value present")
        return self._unwrap()

    def value_or_default(self, fallback: T | None = None) -> T | None:
        """Return the value, or ``fallback`` on ``Nothing``. Never raises."""
        return self._unwrap() if self.has_value else fallback

    def match[R](self, on_some: Callable[[T], R], on_none: Callable[[], R]) -> R:
        """Exhaustive case analysis."""
        _require_callable(on_some, "on_some")
        _require_callable(on_none, "on_none")
        if self.has_value:
            return on_some(self._unwrap())
        return on_none()

    def __iter__(self) -> Iterator[T]:
        if self.has_value:
            yield self._unwrap()

    # --- Core combinators ---

    def map[U](self, mapper: Callable[[T], U]) -> Option[U]:
        """Apply ``mapper`` to a present value; ``Nothing`` passes through.

        ``mapper`` returning ``None`` is an error, as ``Some`` cannot wrap it.
        Use ``bind(lambda v: Option.of(...))`` for nullable lookups.
        """
        _require_callable(mapper, "mapper")
        if self.has_value:
            return Some(mapper(self._unwrap()))
        return Option.none()

    def bind[U](self, binder: Callable[[T], Option[U]]) -> Option[U]:
        """Chain an option-returning step without nesting options."""
        _require_callable(binder, "binder")
        if self.has_value:
            return binder(self._unwrap())
        return Option.none()

    # --- Query-style helpers (derived from map/bind/match) ---

    def select[U](self, selector: Callable[[T], U]) -> Option[U]:
        return self.map(selector)

    def select_many[I, R](
        self,
        selector: Callable[[T], Option[I]],
        result_selector: Callable[[T, I], R] | None = None,
    ) -> Option[typing.Any]:
        """``bind``, optionally projecting the source and intermediate values."""
        if result_selector is None:
            return self.bind(selector)
        _require_callable(result_selector, "result_selector")
        return self.bind(
            lambda source: selector(source).map(
                lambda intermediate: result_selector(source, intermediate)
            )
        )

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Keep the value only if ``predicate`` accepts it."""
        _require_callable(predicate, "predicate")
        return self.bind(lambda v: self if predicate(v) else Option.none())

    where = filter

    def any(self, predicate: Callable[[T], bool] | None = None) -> bool:
        if predicate is None:
            return self.has_value
        return self.match(predicate, lambda: False)

    def all(self, predicate: Callable[[T], bool]) -> bool:
        """True for ``Nothing``; otherwise whether the value satisfies ``predicate``."""
        return self.match(predicate, lambda: True)

    def first_or_default(self, default: T | None = None) -> T | None:
        return self.value_or_default(default)

    def first(self) -> T:
        return self.value_or_raise()

    def single(self) -> T:
        return self.value_or_raise()

    def single_or_default(self, default: T | None = None) -> T | None:
        return self.value_or_default(default)

    # --- Composition ---

    def or_(self, alternative: Option[T] | T) -> Option[T]:
        """Return the receiver if present, else ``alternative``.

        A plain value is wrapped with ``Option.some``.
        """
        if self.has_value:
            return self
        if isinstance(alternative, Option):
            return alternative
        return Some(alternative)

    def or_else(self, factory: Callable[[], Option[T] | T]) -> Option[T]:
        """Like ``or_`` but ``factory`` only runs when the receiver is empty."""
        _require_callable(factory, "factory")
        if self.has_value:
            return self
        alternative = factory()
        if isinstance(alternative, Option):
            return alternative
        return Some(alternative)

    def flatten(self) -> Option[typing.Any]:
        """Collapse ``Option[Option[U]]`` into ``Option[U]``."""
        if not self.has_value:
            return Option.none()
        inner = self._unwrap()
        _require(
            condition=isinstance(inner, Option),
            message=f"can only flatten a nested Option, found {type(inner).__name__}",
            exc=InvalidStateError,
        )
        return typing.cast("Option[typing.Any]", inner)

    def zip(
        self, other: Option[typing.Any], third: Option[typing.Any] | None = None
    ) -> Option[tuple[typing.Any, ...]]:
        """Pair (or triple) values; ``Nothing`` if any input is empty."""
        options: tuple[Option[typing.Any], ...] = (
            (self, other) if third is None else (self, other, third)
        )
        if not all(o.has_value for o in options):
            return Option.none()
        return Some(tuple(o._unwrap() for o in options))

    def apply(self, *args: typing.Any) -> Option[typing.Any]:
        """Combine two or three options with a function.

        ``a.apply(b, fn)`` → ``Some(fn(a, b))``;
        ``a.apply(b, c, fn)`` → ``Some(fn(a, b, c))``.
        Any empty input yields ``Nothing`` without calling ``fn``.
        """
        _require(
            condition=len(args) in (2, 3),
            message="expected apply(other, fn) or apply(other, third, fn)",
            field_name="args",
        )
        *others, fn = args
        _require_callable(fn, "fn")
        return self.zip(*others).map(lambda values: fn(*values))

    # --- Option[bool] helpers ---

    def do_when_true(self, action: Callable[[], typing.Any]) -> Option[T]:
        """Run ``action`` when the option holds ``True``; return the receiver."""
        _require_callable(action, "action")
        if self.has_value and self._unwrap() is True:
            action()
        return self

    def do_when_false(self, action: Callable[[], typing.Any]) -> Option[T]:
        """Run ``action`` when the option holds ``False``; return the receiver."""
        _require_callable(action, "action")
        if self.has_value and self._unwrap() is False:
            action()
        return self

    # --- Conversion ---

    def to_outcome(self, error_message: str) -> Outcome[T]:
        """Convert to an outcome failing with ``Error.NullValue`` when empty."""
        from .conversions import to_outcome

        return to_outcome(self, error_message)


@dataclasses.dataclass(frozen=True, slots=True)
class Some[T](Option[T]):
    """A present value."""

    value: T

    def __post_init__(self) -> None:
        _require(
            condition=self.value is not None,
            message="Some cannot wrap None; use Option.of() for nullable values",
            field_name="value",
        )

    @property
    def has_value(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


class _Nothing(Option[typing.Any]):
    """The empty option. Use the module-level ``Nothing`` instance."""

    __slots__ = ()
    _instance: typing.ClassVar[_Nothing | None] = None

    def __new__(cls) -> _Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def has_value(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Nothing)

    def __hash__(self) -> int:
        return hash(_Nothing)

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> str:
        return "Nothing"


Nothing: Option[typing.Any] = _Nothing()


# --- Sequence helpers ---


def first_or_none[T](
    items: Iterable[T | None], predicate: Callable[[T], bool] | None = None
) -> Option[T]:
    """Return the first (matching) element as an option.

    An empty sequence, no match, or a ``None`` element all yield ``Nothing``.
    """
    iterator = iter(items) if predicate is None else (i for i in items if predicate(i))  # type: ignore[arg-type]
    try:
        return Option.of(next(iterator))
    except StopIteration:
        return Option.none()


def single_or_none[T](
    items: Iterable[T | None], predicate: Callable[[T], bool] | None = None
) -> Option[T]:
    """Return the only (matching) element as an option.

    Zero matches or more than one match yield ``Nothing`` rather than raising.
    """
    iterator = iter(items) if predicate is None else (i for i in items if predicate(i))  # type: ignore[arg-type]
    try:
        found = next(iterator)
    except StopIteration:
        return Option.none()
    if next(iterator, _MISSING) is not _MISSING:
        return Option.none()
    return Option.of(found)
