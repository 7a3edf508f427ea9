"""define_type: build a named class from a descriptor function."""

from __future__ import annotations

import logging
import re
import sys
import types
from typing import Any, Callable

from .accessors import make_property
from .descriptors import TypeDescriptor, instance_of
from .dispatch import OverloadSet, dispatch
from .errors import InvalidNameError
from .typedef import Member, TypeSpecification, is_overloaded, validate_specification

logger = logging.getLogger(__name__)

CLASS_NAME = re.compile(r"[A-Z][a-z0-9_]*", re.IGNORECASE | re.ASCII)

DescriptorFn = Callable[[type, TypeDescriptor], Any]


def is_valid_class_name(name: object) -> bool:
    return isinstance(name, str) and CLASS_NAME.fullmatch(name) is not None


def define_type(name: str, descriptor_fn: DescriptorFn) -> type:
    """Build a class called *name* from the specification *descriptor_fn* returns.

    *descriptor_fn* is called as ``descriptor_fn(cls, instance)`` where *cls*
    is the class being built and *instance* a descriptor accepting its
    instances, so overloads may refer to the type itself.  It returns a
    mapping with any of ``constructors``, ``statics``, ``methods``,
    ``getters`` and ``setters``.

    Raises ``InvalidNameError`` or ``SpecificationError`` before any member is
    installed.
    """
    if not is_valid_class_name(name):
        raise InvalidNameError(name)

    # Phase 1: an empty class the descriptor function can refer to.
    cls = type(name, (), {"__module__": _caller_module(), "__qualname__": name})

    # Phase 2: produce and validate the specification.
    spec = validate_specification(descriptor_fn(cls, instance_of(cls)))

    # Phase 3: install members.
    _install_constructor(cls, spec.constructors)
    for member_name, impl in (spec.methods or {}).items():
        setattr(cls, member_name, _make_method(name, member_name, impl))
    for member_name, impl in (spec.statics or {}).items():
        setattr(cls, member_name, classmethod(_make_static(name, member_name, impl)))
    _install_properties(cls, spec)

    logger.debug(
        "Built type %s: %d constructor(s), %d method(s), %d static(s), %d propert%s",
        name,
        len(spec.constructors or ()),
        len(spec.methods or {}),
        len(spec.statics or {}),
        len(spec.property_names),
        "y" if len(spec.property_names) == 1 else "ies",
    )
    return cls


def _caller_module() -> str:
    try:
        return sys._getframe(2).f_globals.get("__name__", "__main__")
    except (AttributeError, ValueError):
        return "__main__"


def _install_constructor(cls: type, constructors: OverloadSet | None) -> None:
    qualname = f"{cls.__name__}.__init__"

    def __init__(self, *args):
        if constructors is None:
            return
        dispatch(constructors, qualname, args, bound=(self,))

    __init__.__qualname__ = qualname
    cls.__init__ = __init__


def _make_method(type_name: str, member_name: str, impl: Member) -> Callable[..., Any]:
    if isinstance(impl, types.FunctionType):
        return impl
    qualname = f"{type_name}.{member_name}"

    if is_overloaded(impl):
        def method(self, *args):
            return dispatch(impl, qualname, args, bound=(self,))
    else:
        # callable objects, partials and builtins are not bound by Python
        def method(self, *args):
            return impl(self, *args)

    method.__name__ = member_name
    method.__qualname__ = qualname
    return method


def _make_static(type_name: str, member_name: str, impl: Member) -> Callable[..., Any]:
    """Statics receive the class as their first argument, like classmethods."""
    if not is_overloaded(impl):
        return impl
    qualname = f"{type_name}.{member_name}"

    def static(cls, *args):
        return dispatch(impl, qualname, args, bound=(cls,))

    static.__name__ = member_name
    static.__qualname__ = qualname
    return static


def _install_properties(cls: type, spec: TypeSpecification) -> None:
    getters = spec.getters or {}
    setters = spec.setters or {}
    for prop_name in spec.property_names:
        prop = make_property(cls.__name__, prop_name, getters.get(prop_name), setters.get(prop_name))
        setattr(cls, prop_name, prop)
