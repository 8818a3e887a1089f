"""Schema engine — one parser, ordered validators, three failure policies.

A ``Schema`` converts a raw string into a typed value. It is never used
directly; callers hold one of three views over it that differ only in
what happens when parsing or validation fails:

- ``RequiredView`` raises the ``SchemaError``
- ``OptionalView`` returns a fallback and notifies listeners
- ``CriticalView`` raises ``CriticalValueError``, for startup values
  the process cannot run without

Views derived from one another share the same ``Schema``. ``must()``
appends to that shared validator list, so validators added through any
view apply to every view of the schema::

    base = integer()
    port = base.optional(8080)
    base.must(positive)        # port now rejects "0" too

Build first, then share: call ``freeze()`` once a schema is complete.
After that ``must()`` raises ``RuntimeError`` and views are safe to use
from any thread.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from typing import Self, assert_never

from wren.errors import CriticalValueError, ParseError, SchemaError, ValidationError
from wren.schema.validators import Validator

logger = logging.getLogger("wren.schema")

# A parser raises ValueError (or a SchemaError) for input it rejects
type Parser[T] = Callable[[str], T]
type FallbackListener[T] = Callable[[T, SchemaError], None]


class Schema[T]:
    """A parser plus the ordered validators run on its output."""

    __slots__ = ("_frozen", "parser", "validators")

    def __init__(self, parser: Parser[T]) -> None:
        self.parser = parser
        self.validators: list[Validator[T]] = []
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add(self, validators: Iterable[Validator[T]]) -> None:
        """Append validators. Must be called before freeze()."""
        if self._frozen:
            msg = "Cannot add validators after the schema is frozen."
            raise RuntimeError(msg)
        self.validators.extend(validators)

    def freeze(self) -> None:
        """Refuse further validators."""
        self._frozen = True

    def resolve(self, raw: str) -> T:
        """Parse *raw* and run every validator in the order they were added.

        Raises ``ParseError`` if the parser rejects *raw*, or
        ``ValidationError`` for the first validator that fails.
        """
        try:
            value = self.parser(raw)
        except SchemaError:
            raise
        except ValueError as exc:
            raise ParseError(str(exc), raw) from exc

        for validator in self.validators:
            error = validator(value)
            if error is not None:
                raise ValidationError(error, value)
        return value


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class _View[T]:
    """Operations shared by every view kind."""

    schema: Schema[T]

    def must(self, *validators: Validator[T]) -> Self:
        """Append *validators* to the shared schema and return this view."""
        self.schema.add(validators)
        return self

    def freeze(self) -> Self:
        """Freeze the shared schema and return this view."""
        self.schema.freeze()
        return self

    def required(self) -> RequiredView[T]:
        """A view of the same schema that raises on failure."""
        return RequiredView(self.schema)

    def optional(self, fallback: T) -> OptionalView[T]:
        """A view of the same schema that returns *fallback* on failure."""
        return OptionalView(self.schema, fallback)

    def critical(self) -> CriticalView[T]:
        """A view of the same schema that aborts on failure."""
        return CriticalView(self.schema)


@dataclass(frozen=True, slots=True)
class RequiredView[T](_View[T]):
    """Returns the value, or raises the ``SchemaError`` that rejected it.

    ::

        try:
            page = integer().must(positive).parse(raw)
        except SchemaError as exc:
            ...
    """

    def parse(self, raw: str) -> T:
        return _settle(self, raw)


@dataclass(frozen=True, slots=True)
class OptionalView[T](_View[T]):
    """Returns the value, or ``fallback`` when parsing or validation fails.

    Never raises a ``SchemaError``. Each listener is called once per
    fallback, in the order they were attached, with the fallback and the
    error that caused it.
    """

    fallback: T
    listeners: tuple[FallbackListener[T], ...] = ()

    def parse(self, raw: str) -> T:
        return _settle(self, raw)

    def on_fallback(self, listener: FallbackListener[T]) -> OptionalView[T]:
        """Return a copy of this view that also notifies *listener*.

        ::

            port = (
                integer().must(positive).optional(8080)
                .on_fallback(lambda fb, err: log.info("port=%s (%s)", fb, err))
            )
        """
        return replace(self, listeners=(*self.listeners, listener))


@dataclass(frozen=True, slots=True)
class CriticalView[T](_View[T]):
    """Returns the value, or raises ``CriticalValueError``.

    For startup configuration where running with bad input is unsafe.
    """

    def parse(self, raw: str) -> T:
        return _settle(self, raw)


type View[T] = RequiredView[T] | OptionalView[T] | CriticalView[T]


def _settle[T](view: View[T], raw: str) -> T:
    """Resolve *raw* through the view's schema and apply its failure policy."""
    try:
        return view.schema.resolve(raw)
    except SchemaError as exc:
        match view:
            case RequiredView():
                raise
            case OptionalView():
                logger.debug("Fallback %r applied: %s", view.fallback, exc)
                for listener in view.listeners:
                    listener(view.fallback, exc)
                return view.fallback
            case CriticalView():
                logger.critical("Critical value rejected: %s", exc)
                raise CriticalValueError(exc) from exc
            case _:
                assert_never(view)


def new_schema[T](parser: Parser[T]) -> RequiredView[T]:
    """Create a schema from a custom parser.

    *parser* takes the raw string and returns the typed value, raising
    ``ValueError`` for input it rejects::

        def csv_sum(raw: str) -> int:
            return sum(int(part) for part in raw.split(","))

        total = new_schema(csv_sum).must(positive).optional(0)
    """
    return RequiredView(Schema(parser))
