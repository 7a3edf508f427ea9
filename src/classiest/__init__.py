"""classiest — classes with overloaded constructors, methods and accessors."""

from . import descriptors
from .builder import define_type, is_valid_class_name
from .descriptors import TypeDescriptor, instance_of
from .dispatch import OverloadCase, OverloadSet, dispatch
from .errors import (
    ClassiestError,
    InvalidNameError,
    NoOverloadMatchError,
    SpecificationError,
)
from .typedef import TypeSpecification, validate_specification
from .values import Undefined

__all__ = [
    "define_type",
    "instance_of",
    "is_valid_class_name",
    "descriptors",
    "TypeDescriptor",
    "OverloadCase",
    "OverloadSet",
    "dispatch",
    "TypeSpecification",
    "validate_specification",
    "Undefined",
    "ClassiestError",
    "InvalidNameError",
    "NoOverloadMatchError",
    "SpecificationError",
]
