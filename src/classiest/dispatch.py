"""Overload resolution: pick the first case whose argument descriptors match."""

from __future__ import annotations

from typing import Annotated, Any, Callable, Iterator, Sequence

from pydantic import BaseModel, BeforeValidator, ConfigDict, RootModel

from .descriptors import TypeDescriptor, of
from .errors import NoOverloadMatchError
from .values import Undefined


def _as_descriptor(value: Any) -> Any:
    """Turn plain hints (``int``, ``list[str]``...) into descriptors.

    Values that cannot describe a type are passed through unchanged so the
    instance check reports them.
    """
    if isinstance(value, TypeDescriptor):
        return value
    try:
        return of(value)
    except TypeError:
        return value


ArgType = Annotated[TypeDescriptor, BeforeValidator(_as_descriptor)]


class OverloadCase(BaseModel):
    """One candidate: positional argument descriptors and the implementation."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True, extra="forbid")

    args: tuple[ArgType, ...]
    fn: Callable[..., Any]

    def accepts(self, call_args: Sequence[Any]) -> bool:
        """True when every declared position accepts the actual argument.

        Extra actual arguments are ignored; missing ones are tested as
        ``Undefined``.
        """
        n = len(call_args)
        return all(
            descriptor.is_(call_args[i] if i < n else Undefined)
            for i, descriptor in enumerate(self.args)
        )

    @property
    def signature(self) -> str:
        return "(" + ", ".join(d.name for d in self.args) + ")"


class OverloadSet(RootModel[tuple[OverloadCase, ...]]):
    """Ordered overload candidates; declaration order is the priority."""

    model_config = ConfigDict(frozen=True)

    def __iter__(self) -> Iterator[OverloadCase]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> OverloadCase:
        return self.root[index]

    def resolve(self, call_args: Sequence[Any]) -> OverloadCase | None:
        for case in self.root:
            if case.accepts(call_args):
                return case
        return None

    @property
    def signatures(self) -> list[str]:
        return [case.signature for case in self.root]


def dispatch(
    overloads: OverloadSet,
    qualname: str,
    call_args: Sequence[Any],
    bound: Sequence[Any] = (),
) -> Any:
    """Invoke the first case of *overloads* accepting *call_args*.

    *bound* is prepended to the forwarded arguments (the receiver for
    instance members) but never takes part in matching.

    Raises ``NoOverloadMatchError`` naming *qualname* when nothing matches.
    """
    case = overloads.resolve(call_args)
    if case is None:
        raise NoOverloadMatchError(qualname, call_args, overloads.signatures)
    return case.fn(*bound, *call_args)
