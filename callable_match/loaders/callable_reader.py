# Path: callable_match/loaders/callable_reader.py
"""
Callable Reader for callable_match

Builds CallableDescriptor snapshots from live Python objects using the
inspect and typing modules.

Python has no access modifiers or final/open keywords, so the reader maps
conventions onto the descriptor fields:
- visibility: '__name' is private, '_name' is protected, anything inside a
  '_'-prefixed module or class is internal, the rest is public
- final: typing.final on the member or its class, name-mangled members,
  and module-level functions (nothing can override them)
- abstract: abc.abstractmethod (__isabstractmethod__)
- open: a class member that is neither final nor abstract
- suspendable: coroutine functions and async generator functions

Slot 0 of the parameter list is the receiver: 'self' for methods and
properties, 'cls' for class methods. Functions and static methods have
no receiver, so a synthetic slot (name None) stands in for it.
"""

import functools
import inspect
import sys
import typing
from typing import Any, Optional

from ..config_loader import ConfigLoader
from ..constants import (
    DEFAULT_RECEIVER_NAMES,
    DUNDER_SUFFIX,
    INTERNAL_MODULE_PREFIX,
    MemberKind,
    ParameterKind,
    PRIVATE_PREFIX,
    PROTECTED_PREFIX,
    Visibility,
)
from ..core.logger import get_input_logger
from ..process.matcher.models.callable_descriptor import (
    CallableDescriptor,
    ParameterDescriptor,
)
from ..process.matcher.models.type_ref import TypeRef


_PARAMETER_KINDS = {
    inspect.Parameter.POSITIONAL_ONLY: ParameterKind.VALUE,
    inspect.Parameter.POSITIONAL_OR_KEYWORD: ParameterKind.VALUE,
    inspect.Parameter.KEYWORD_ONLY: ParameterKind.KEYWORD_ONLY,
    inspect.Parameter.VAR_POSITIONAL: ParameterKind.VARARG,
    inspect.Parameter.VAR_KEYWORD: ParameterKind.KEYWORD_VARARG,
}

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

_RECEIVER_KINDS = (MemberKind.METHOD, MemberKind.CLASS_METHOD, MemberKind.PROPERTY)


def _is_dunder(name: str) -> bool:
    return name.startswith(PRIVATE_PREFIX) and name.endswith(DUNDER_SUFFIX)


def _underlying(raw: Any) -> Any:
    """Function wrapped by a property, staticmethod or classmethod."""
    if isinstance(raw, property):
        return raw.fget
    if isinstance(raw, (staticmethod, classmethod)):
        return raw.__func__
    return raw


class CallableReader:
    """
    Reader producing descriptors for functions, methods and properties.

    Example:
        reader = CallableReader()

        # From a class attribute
        descriptor = reader.describe_member(Shape, 'area')

        # From a live object
        descriptor = reader.describe(Shape.area)
        print(descriptor.visibility, descriptor.parameters)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize callable reader.

        Args:
            config: Optional ConfigLoader instance
        """
        self.config = config if config else ConfigLoader()
        self.logger = get_input_logger('callable_reader')
        self.receiver_names = tuple(
            self.config.get('receiver_names', DEFAULT_RECEIVER_NAMES)
        )
        self.infer_internal = self.config.get('infer_internal_visibility', True)

    # ==========================================================================
    # PUBLIC API
    # ==========================================================================

    def describe(self, member: Any, owner: Optional[type] = None) -> CallableDescriptor:
        """
        Describe a live callable member.

        Accepts plain functions, functions accessed through their class,
        bound methods, staticmethod/classmethod/property objects and
        classes (described through __init__). Descriptors pass through.

        Args:
            member: Object to describe
            owner: Class declaring the member, found from the member when omitted

        Returns:
            CallableDescriptor snapshot

        Raises:
            TypeError: If member is not a callable member
        """
        if isinstance(member, CallableDescriptor):
            return member

        if inspect.isclass(member):
            return self.describe_member(member, '__init__')

        if isinstance(member, functools.partial):
            raise TypeError(
                f"Cannot describe functools.partial {member!r}: not a declared member"
            )

        if inspect.ismethod(member):
            bound_to = member.__self__
            if owner is None:
                owner = bound_to if inspect.isclass(bound_to) else type(bound_to)
            return self._describe_in_owner(member.__func__, owner)

        if isinstance(member, (property, staticmethod, classmethod)):
            if owner is None:
                owner = self._owner_from_qualname(_underlying(member))
            return self._build(member, owner)

        if not callable(member):
            raise TypeError(f"Cannot describe {member!r}: not callable")

        if owner is None:
            owner = self._owner_from_qualname(member)
        if owner is not None:
            return self._describe_in_owner(member, owner)
        return self._build(member, None)

    def describe_member(self, cls: type, name: str) -> CallableDescriptor:
        """
        Describe a member by name, as declared in the class or its bases.

        Reads the raw class attribute so static methods, class methods and
        properties are recognised. Private names may be given unmangled.

        Args:
            cls: Class to inspect
            name: Attribute name (e.g., 'area' or '__secret')

        Returns:
            CallableDescriptor snapshot

        Raises:
            AttributeError: If no class in the MRO declares the member
            TypeError: If the attribute is not a callable member
        """
        raw = self._lookup(cls, name)
        if raw is None:
            raise AttributeError(f"{cls.__qualname__} has no member {name!r}")
        return self._build(raw, cls)

    # ==========================================================================
    # LOOKUP
    # ==========================================================================

    def _lookup(self, cls: type, name: str) -> Any:
        """Find the raw attribute in the MRO, trying the mangled name too."""
        for klass in inspect.getmro(cls):
            candidates = [name]
            if name.startswith(PRIVATE_PREFIX) and not _is_dunder(name):
                candidates.append(f"_{klass.__name__.lstrip('_')}{name}")
            for candidate in candidates:
                if candidate in klass.__dict__:
                    return klass.__dict__[candidate]
        return None

    def _describe_in_owner(self, function: Any, owner: type) -> CallableDescriptor:
        """Describe function through its raw attribute on owner when it is there."""
        name = getattr(function, '__name__', None)
        if name:
            raw = self._lookup(owner, name)
            if raw is not None and _underlying(raw) is function:
                return self._build(raw, owner)
        return self._build(function, owner)

    def _owner_from_qualname(self, function: Any) -> Optional[type]:
        """
        Resolve the declaring class from __qualname__.

        Only works for classes reachable from their module; classes
        defined inside functions return None.
        """
        qualname = getattr(function, '__qualname__', '')
        parts = qualname.split('.')[:-1]
        if not parts or '<locals>' in parts:
            return None

        target: Any = sys.modules.get(getattr(function, '__module__', None) or '')
        for part in parts:
            target = getattr(target, part, None)
            if target is None:
                return None
        return target if inspect.isclass(target) else None

    # ==========================================================================
    # DESCRIPTOR CONSTRUCTION
    # ==========================================================================

    def _classify(self, raw: Any, owner: Optional[type]) -> tuple[MemberKind, Any]:
        """Determine the member kind and the function carrying the signature."""
        if isinstance(raw, property):
            if raw.fget is None:
                raise TypeError(f"Cannot describe property {raw!r}: no getter")
            return MemberKind.PROPERTY, raw.fget
        if isinstance(raw, staticmethod):
            return MemberKind.STATIC_METHOD, raw.__func__
        if isinstance(raw, classmethod):
            return MemberKind.CLASS_METHOD, raw.__func__
        if inspect.isfunction(raw):
            if owner is not None or self._looks_like_method(raw):
                return MemberKind.METHOD, raw
            if self._declared_in_class(raw):
                return MemberKind.STATIC_METHOD, raw
            return MemberKind.FUNCTION, raw
        if inspect.isroutine(raw):
            if getattr(raw, '__objclass__', None) is not None:
                return MemberKind.METHOD, raw
            return MemberKind.FUNCTION, raw
        raise TypeError(f"Cannot describe {raw!r}: not a function, method or property")

    def _declared_in_class(self, function: Any) -> bool:
        """Class segment before the name, e.g. 'test_x.<locals>.Local.helper'."""
        parts = function.__qualname__.split('.')
        return len(parts) >= 2 and parts[-2] != '<locals>'

    def _looks_like_method(self, function: Any) -> bool:
        """Guess method-ness for functions of classes that cannot be resolved."""
        parts = function.__qualname__.split('.')
        if len(parts) < 2 or parts[-2] == '<locals>':
            return False
        try:
            params = list(inspect.signature(function).parameters.values())
        except (TypeError, ValueError):
            return False
        return bool(params) and params[0].name in self.receiver_names

    def _build(self, raw: Any, owner: Optional[type]) -> CallableDescriptor:
        """Build the descriptor for a raw class attribute or function."""
        member_kind, function = self._classify(raw, owner)
        if owner is None:
            owner = getattr(function, '__objclass__', None)

        name = getattr(function, '__name__', repr(function))
        module = getattr(function, '__module__', None) or ''
        qualname = getattr(function, '__qualname__', name)
        qualified_name = f"{module}.{qualname}" if module else qualname

        try:
            signature = inspect.signature(function)
        except (TypeError, ValueError) as exc:
            raise TypeError(f"Cannot read signature of {qualified_name}: {exc}") from exc

        hints = self._resolve_hints(function)
        parameters = self._build_parameters(signature, hints, member_kind, owner)

        return_annotation = hints.get('return', signature.return_annotation)
        visibility = self._visibility(name, module, owner)

        is_abstract = bool(
            getattr(raw, '__isabstractmethod__', False)
            or getattr(function, '__isabstractmethod__', False)
        )
        marked_final = bool(
            getattr(raw, '__final__', False)
            or getattr(function, '__final__', False)
            or (owner is not None and getattr(owner, '__final__', False))
        )
        overridable = member_kind != MemberKind.FUNCTION and visibility != Visibility.PRIVATE

        descriptor = CallableDescriptor(
            name=name,
            qualified_name=qualified_name,
            visibility=visibility,
            is_final=marked_final or (not overridable and not is_abstract),
            is_open=overridable and not marked_final and not is_abstract,
            is_abstract=is_abstract,
            is_suspend=(
                inspect.iscoroutinefunction(function)
                or inspect.isasyncgenfunction(function)
            ),
            parameters=parameters,
            return_type=TypeRef.of(return_annotation),
            member_kind=member_kind,
        )

        self.logger.debug(
            f"Described {member_kind.value} {qualified_name} "
            f"with {len(parameters) - 1} declared parameters"
        )
        return descriptor

    def _build_parameters(
        self,
        signature: inspect.Signature,
        hints: dict[str, Any],
        member_kind: MemberKind,
        owner: Optional[type]
    ) -> tuple[ParameterDescriptor, ...]:
        """
        Build the parameter slots, receiver first.

        Args:
            signature: Signature of the underlying function
            hints: Resolved annotations by parameter name
            member_kind: Kind of member being described
            owner: Declaring class, if known

        Returns:
            Tuple of ParameterDescriptor with the receiver at index 0
        """
        params = list(signature.parameters.values())
        slots: list[ParameterDescriptor] = []

        has_receiver = (
            member_kind in _RECEIVER_KINDS
            and bool(params)
            and params[0].kind in _POSITIONAL
        )
        if has_receiver:
            receiver = params.pop(0)
            if owner is not None:
                receiver_type = TypeRef(
                    type[owner] if member_kind == MemberKind.CLASS_METHOD else owner
                )
            else:
                receiver_type = TypeRef.of(hints.get(receiver.name, receiver.annotation))
            slots.append(ParameterDescriptor(
                index=0,
                name=receiver.name,
                type=receiver_type,
                kind=ParameterKind.INSTANCE,
            ))
        else:
            slots.append(ParameterDescriptor(
                index=0,
                name=None,
                type=TypeRef.undeclared(),
                kind=ParameterKind.INSTANCE,
            ))

        for index, param in enumerate(params, start=1):
            slots.append(ParameterDescriptor(
                index=index,
                name=param.name,
                type=TypeRef.of(hints.get(param.name, param.annotation)),
                kind=_PARAMETER_KINDS[param.kind],
                is_optional=param.default is not inspect.Parameter.empty,
            ))

        return tuple(slots)

    def _resolve_hints(self, function: Any) -> dict[str, Any]:
        """
        Resolve annotations, evaluating string and forward references.

        Falls back to the raw __annotations__ when a name cannot be
        resolved; unresolved strings are then compared by class name.
        """
        try:
            return typing.get_type_hints(function)
        except (NameError, TypeError, AttributeError) as e:
            self.logger.debug(
                f"Could not resolve annotations of "
                f"{getattr(function, '__qualname__', function)!r}: {e}"
            )
            return dict(getattr(function, '__annotations__', None) or {})

    def _visibility(self, name: str, module: str, owner: Optional[type]) -> Visibility:
        """Map naming conventions to a visibility value."""
        if not _is_dunder(name):
            if name.startswith(PRIVATE_PREFIX):
                return Visibility.PRIVATE
            if name.startswith(PROTECTED_PREFIX):
                return Visibility.PROTECTED

        if self.infer_internal:
            segments = module.split('.')
            if owner is not None:
                segments += owner.__qualname__.split('.')
            for segment in segments:
                if segment.startswith(INTERNAL_MODULE_PREFIX) and not _is_dunder(segment):
                    return Visibility.INTERNAL

        return Visibility.PUBLIC


def describe(member: Any, owner: Optional[type] = None) -> CallableDescriptor:
    """Describe a live callable member with the default configuration."""
    return CallableReader().describe(member, owner)


def describe_member(cls: type, name: str) -> CallableDescriptor:
    """Describe a class member by name with the default configuration."""
    return CallableReader().describe_member(cls, name)


def as_descriptor(value: Any) -> CallableDescriptor:
    """Return value unchanged if it is a descriptor, else describe it."""
    if isinstance(value, CallableDescriptor):
        return value
    return describe(value)


__all__ = [
    'CallableReader',
    'describe',
    'describe_member',
    'as_descriptor',
]
