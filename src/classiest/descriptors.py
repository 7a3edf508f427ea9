"""Type descriptors: named predicates used to match overload arguments.

A descriptor answers one question, ``is_(value)``: does *value* satisfy this
type?  Primitives cover the common cases, combinators build new descriptors
out of existing ones, and ``of()`` turns ordinary Python hints into
descriptors (parameterized hints are checked with pydantic in strict mode).
"""

from __future__ import annotations

import math
import numbers
import typing
from abc import ABC, abstractmethod
from collections.abc import Mapping as _Mapping
from collections.abc import Sequence as _Sequence
from typing import Callable

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError

from .values import Undefined

Predicate = Callable[[typing.Any], bool]


class TypeDescriptor(ABC):
    """Opaque predicate capability: ``is_(value) -> bool``."""

    name: str = "TypeDescriptor"

    @abstractmethod
    def is_(self, value: typing.Any) -> bool:
        ...

    def __or__(self, other: object) -> "TypeDescriptor":
        return union(self, of(other))

    def __ror__(self, other: object) -> "TypeDescriptor":
        return union(of(other), self)

    def __repr__(self) -> str:
        return self.name


class Irreducible(TypeDescriptor):
    def __init__(self, name: str, predicate: Predicate) -> None:
        self.name = name
        self.predicate = predicate

    def is_(self, value: typing.Any) -> bool:
        return bool(self.predicate(value))


class Refinement(TypeDescriptor):
    """A base descriptor narrowed by an extra predicate."""

    def __init__(self, base: TypeDescriptor, predicate: Predicate, name: str | None = None) -> None:
        self.base = base
        self.predicate = predicate
        self.name = name or f"{{{base.name} | {getattr(predicate, '__name__', 'predicate')}}}"

    def is_(self, value: typing.Any) -> bool:
        return self.base.is_(value) and bool(self.predicate(value))


class Union(TypeDescriptor):
    def __init__(self, members: typing.Sequence[TypeDescriptor]) -> None:
        self.members = tuple(members)
        self.name = " | ".join(m.name for m in self.members)

    def is_(self, value: typing.Any) -> bool:
        return any(m.is_(value) for m in self.members)


class Maybe(TypeDescriptor):
    def __init__(self, inner: TypeDescriptor) -> None:
        self.inner = inner
        self.name = f"?{inner.name}"

    def is_(self, value: typing.Any) -> bool:
        return value is None or value is Undefined or self.inner.is_(value)


class ListOf(TypeDescriptor):
    def __init__(self, inner: TypeDescriptor) -> None:
        self.inner = inner
        self.name = f"list[{inner.name}]"

    def is_(self, value: typing.Any) -> bool:
        return isinstance(value, list) and all(self.inner.is_(item) for item in value)


class TupleOf(TypeDescriptor):
    def __init__(self, items: typing.Sequence[TypeDescriptor]) -> None:
        self.items = tuple(items)
        self.name = "tuple[" + ", ".join(i.name for i in self.items) + "]"

    def is_(self, value: typing.Any) -> bool:
        return (
            isinstance(value, tuple)
            and len(value) == len(self.items)
            and all(d.is_(v) for d, v in zip(self.items, value))
        )


class DictOf(TypeDescriptor):
    def __init__(self, key: TypeDescriptor, value: TypeDescriptor) -> None:
        self.key = key
        self.value = value
        self.name = f"dict[{key.name}, {value.name}]"

    def is_(self, value: typing.Any) -> bool:
        return isinstance(value, _Mapping) and all(
            self.key.is_(k) and self.value.is_(v) for k, v in value.items()
        )


class Enums(TypeDescriptor):
    def __init__(self, values: typing.Iterable[typing.Any]) -> None:
        self.values = tuple(values)
        self.name = " | ".join(repr(v) for v in self.values)

    def is_(self, value: typing.Any) -> bool:
        # bool == int in Python, so compare types as well
        return any(type(value) is type(v) and value == v for v in self.values)


class Interface(TypeDescriptor):
    """Structural check over mapping keys or object attributes.

    Members the value lacks are tested as ``Undefined``, so ``maybe(...)``
    props are optional.
    """

    def __init__(self, props: _Mapping[str, TypeDescriptor], name: str | None = None) -> None:
        self.props = dict(props)
        self.name = name or "{" + ", ".join(f"{k}: {d.name}" for k, d in self.props.items()) + "}"

    def is_(self, value: typing.Any) -> bool:
        if value is None or value is Undefined:
            return False
        return all(d.is_(_member(value, k)) for k, d in self.props.items())


def _member(value: typing.Any, key: str) -> typing.Any:
    if isinstance(value, _Mapping):
        return value.get(key, Undefined)
    return getattr(value, key, Undefined)


class Hint(TypeDescriptor):
    """Descriptor backed by a pydantic ``TypeAdapter`` in strict mode."""

    def __init__(self, hint: typing.Any) -> None:
        self.hint = hint
        self.name = repr(hint).replace("typing.", "")
        self._adapter = TypeAdapter(hint)

    def is_(self, value: typing.Any) -> bool:
        if value is Undefined:
            return False
        try:
            self._adapter.validate_python(value, strict=True)
        except ValidationError:
            return False
        return True


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def _is_number(x: typing.Any) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool) and math.isfinite(x)


Any = Irreducible("Any", lambda x: True)
Nil = Irreducible("Nil", lambda x: x is None or x is Undefined)
String = Irreducible("String", lambda x: isinstance(x, str))
Number = Irreducible("Number", _is_number)
Integer = Irreducible("Integer", lambda x: isinstance(x, numbers.Integral) and not isinstance(x, bool))
Boolean = Irreducible("Boolean", lambda x: isinstance(x, bool))
Function = Irreducible("Function", callable)
Mapping = Irreducible("Mapping", lambda x: isinstance(x, _Mapping))
Sequence = Irreducible(
    "Sequence", lambda x: isinstance(x, _Sequence) and not isinstance(x, (str, bytes, bytearray))
)
Type = Irreducible("Type", lambda x: isinstance(x, TypeDescriptor))


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------

def irreducible(name: str, predicate: Predicate) -> TypeDescriptor:
    return Irreducible(name, predicate)


def refinement(base: typing.Any, predicate: Predicate, name: str | None = None) -> TypeDescriptor:
    return Refinement(of(base), predicate, name)


def union(*members: typing.Any) -> TypeDescriptor:
    return Union([of(m) for m in members])


def maybe(inner: typing.Any) -> TypeDescriptor:
    return Maybe(of(inner))


def list_of(inner: typing.Any) -> TypeDescriptor:
    return ListOf(of(inner))


def tuple_of(*items: typing.Any) -> TypeDescriptor:
    return TupleOf([of(i) for i in items])


def dict_of(key: typing.Any, value: typing.Any) -> TypeDescriptor:
    return DictOf(of(key), of(value))


def enums(*values: typing.Any) -> TypeDescriptor:
    return Enums(values)


def interface(props: _Mapping[str, typing.Any], name: str | None = None) -> TypeDescriptor:
    return Interface({k: of(v) for k, v in props.items()}, name)


def instance_of(cls: type) -> TypeDescriptor:
    """Descriptor accepting exactly the instances of *cls* (and subclasses)."""
    return Refinement(Any, lambda x: isinstance(x, cls), name=cls.__name__)


def of(hint: typing.Any) -> TypeDescriptor:
    """Coerce a Python type hint into a TypeDescriptor.

    Raises ``TypeError`` when *hint* cannot describe a type.
    """
    if isinstance(hint, TypeDescriptor):
        return hint
    if hint is typing.Any:
        return Any
    if hint is None or hint is type(None):
        return Nil
    if isinstance(hint, type) and typing.get_origin(hint) is None:
        return instance_of(hint)
    if typing.get_origin(hint) is not None or isinstance(hint, typing.TypeVar):
        try:
            return Hint(hint)
        except PydanticSchemaGenerationError as exc:
            raise TypeError(f"Cannot build a type descriptor from {hint!r}") from exc
    raise TypeError(f"Cannot build a type descriptor from {hint!r}")
