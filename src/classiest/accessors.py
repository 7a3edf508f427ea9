"""Property wiring for getters and setters of a built type."""

from __future__ import annotations

from typing import Any, Callable

from .dispatch import OverloadSet, dispatch
from .typedef import Member


def make_setter(qualname: str, setter: Member) -> Callable[[Any, Any], Any]:
    """Return an ``fset`` for *setter*.

    A plain callable runs unconditionally; an overload set dispatches on the
    assigned value.
    """
    if not isinstance(setter, OverloadSet):
        return setter

    def fset(self, value):
        return dispatch(setter, qualname, (value,), bound=(self,))

    fset.__name__ = qualname.rpartition(".")[2]
    fset.__qualname__ = qualname
    return fset


def make_property(
    type_name: str,
    name: str,
    getter: Callable[[Any], Any] | None = None,
    setter: Member | None = None,
) -> property:
    """Build the accessor for *name*; either side may be missing.

    A missing getter makes the property write-only and a missing setter makes
    it read-only; Python raises ``AttributeError`` on the absent side.
    """
    fset = make_setter(f"{type_name}.{name}", setter) if setter is not None else None
    return property(getter, fset, None, f"{type_name}.{name}")
