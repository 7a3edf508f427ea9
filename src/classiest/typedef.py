"""TypeSpecification: the validated shape of a type descriptor."""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .dispatch import OverloadSet
from .errors import SpecificationError

# A member is either called directly or dispatched over its overloads.
Member = Union[Callable[..., Any], OverloadSet]


class TypeSpecification(BaseModel):
    """Member collections of a type; every collection is optional."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True, extra="forbid")

    constructors: Optional[OverloadSet] = None
    statics: Optional[dict[str, Member]] = None
    methods: Optional[dict[str, Member]] = None
    getters: Optional[dict[str, Callable[..., Any]]] = None  # never overloaded
    setters: Optional[dict[str, Member]] = None

    @property
    def property_names(self) -> list[str]:
        """Names in ``getters`` or ``setters``, getters first, without repeats."""
        names = dict.fromkeys(self.getters or {})
        names.update(dict.fromkeys(self.setters or {}))
        return list(names)


def is_overloaded(member: Member) -> bool:
    return isinstance(member, OverloadSet)


def validate_specification(raw: Any) -> TypeSpecification:
    """Check *raw* against the TypeSpecification shape.

    Raises ``SpecificationError`` describing the first violation; nothing is
    accepted partially.
    """
    try:
        return TypeSpecification.model_validate(raw)
    except ValidationError as exc:
        raise SpecificationError.from_validation_error(exc) from exc
