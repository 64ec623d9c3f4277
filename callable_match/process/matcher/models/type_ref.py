# Path: callable_match/process/matcher/models/type_ref.py
"""
Type Reference Model

Wraps a parameter annotation and answers the one question the parameter
matchers ask of it: would a value of a given concrete class be an
acceptable argument for this declared type?

Supported annotation shapes:
- Missing annotation, Any, object: accept everything
- Plain classes: issubclass() against the concrete class
- Parameterised generics (list[int], Callable[..., T]): compared by origin
- Optional / Union / X | None: accepted if any member accepts
- TypeVar: checked against its bound or constraints
- NewType / Annotated: unwrapped
- Unresolved forward references: compared by class name
"""

import inspect
import types
import typing
from dataclasses import dataclass
from typing import Any, ForwardRef, TypeVar, Union, get_args, get_origin

NONE_TYPE = type(None)

_UNION_ORIGINS = (Union, types.UnionType)


def type_name(annotation: Any) -> str:
    """
    Readable name of a class or annotation for messages.

    Builtins render bare (int), other classes by qualified name,
    typing constructs by their repr without the 'typing.' prefix.
    """
    if annotation is None or annotation is NONE_TYPE:
        return 'None'
    if annotation is Any:
        return 'Any'
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, ForwardRef):
        return annotation.__forward_arg__
    if isinstance(annotation, type) and get_origin(annotation) is None:
        if annotation.__module__ == 'builtins':
            return annotation.__qualname__
        return f'{annotation.__module__}.{annotation.__qualname__}'
    return repr(annotation).replace('typing.', '')


def _normalize_expected(expected: Any) -> tuple[Any, ...]:
    """Reduce a caller supplied type to the concrete classes it stands for."""
    if expected is None:
        return (NONE_TYPE,)
    if expected is Any:
        return (object,)

    origin = get_origin(expected)
    if origin is typing.Annotated:
        return _normalize_expected(get_args(expected)[0])
    if origin in _UNION_ORIGINS:
        normalized: tuple[Any, ...] = ()
        for arg in get_args(expected):
            normalized += _normalize_expected(arg)
        return normalized
    if origin is not None:
        # Star projection: list[int] is compared as list
        return (origin,)
    return (expected,)


def _accepts(declared: Any, concrete: Any) -> bool:
    """Check whether declared is a supertype of (or equal to) concrete."""
    if declared is Any or declared is object:
        return True
    if declared is None or declared is NONE_TYPE:
        return concrete is NONE_TYPE

    origin = get_origin(declared)
    if origin in _UNION_ORIGINS:
        return any(_accepts(arg, concrete) for arg in get_args(declared))
    if origin in (typing.Annotated, typing.ClassVar, typing.Final):
        return _accepts(get_args(declared)[0], concrete)
    if origin is typing.Literal:
        # A literal is narrower than any class
        return False
    if origin is not None:
        declared = origin

    if isinstance(declared, TypeVar):
        if declared.__bound__ is not None:
            return _accepts(declared.__bound__, concrete)
        if declared.__constraints__:
            return any(_accepts(c, concrete) for c in declared.__constraints__)
        return True

    supertype = getattr(declared, '__supertype__', None)
    if supertype is not None:
        return _accepts(supertype, concrete)

    if isinstance(declared, (str, ForwardRef)):
        name = declared if isinstance(declared, str) else declared.__forward_arg__
        return name in (
            getattr(concrete, '__name__', None),
            getattr(concrete, '__qualname__', None),
        )

    if not isinstance(declared, type) or not isinstance(concrete, type):
        return False

    try:
        return issubclass(concrete, declared)
    except TypeError:
        # Non runtime-checkable protocols refuse class checks
        return False


@dataclass(frozen=True)
class TypeRef:
    """
    Declared type of a parameter or return value.

    Attributes:
        annotation: The resolved annotation (Any when undeclared)
        is_declared: Whether the source carried an annotation at all
    """
    annotation: Any = Any
    is_declared: bool = True

    @classmethod
    def undeclared(cls) -> 'TypeRef':
        """Type of a parameter without annotation."""
        return cls(annotation=Any, is_declared=False)

    @classmethod
    def of(cls, annotation: Any) -> 'TypeRef':
        """
        Build a TypeRef from an inspect annotation.

        Args:
            annotation: Annotation value, inspect.Parameter.empty when missing

        Returns:
            TypeRef wrapping the annotation
        """
        if annotation is inspect.Parameter.empty:
            return cls.undeclared()
        if annotation is None:
            return cls(annotation=NONE_TYPE)
        return cls(annotation=annotation)

    @property
    def is_nullable(self) -> bool:
        """Whether None is an acceptable value for this type."""
        return _accepts(self.annotation, NONE_TYPE)

    def is_supertype_of(self, expected: Any) -> bool:
        """
        Check if a value of the expected type is acceptable here.

        Declared types may be broader than the expected class, never
        narrower. A Union given as expected must be accepted in full.

        Args:
            expected: Concrete class (or typing construct) to test

        Returns:
            True if every class expected stands for is accepted
        """
        return all(
            _accepts(self.annotation, concrete)
            for concrete in _normalize_expected(expected)
        )

    def __str__(self) -> str:
        return type_name(self.annotation)


__all__ = ['TypeRef', 'type_name', 'NONE_TYPE']
