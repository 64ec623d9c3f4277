# Path: callable_match/process/matcher/models/callable_descriptor.py
"""
Callable Descriptor Models

Read-only snapshots of a callable member's reflection metadata.
Built by the loaders from live Python objects, or by hand for code that
has no live object to inspect.

Parameter slot 0 is always the receiver (self, cls, or a synthetic slot
for functions without one); slots 1..n are the declared parameters in
declaration order.
"""

from dataclasses import dataclass, field
from typing import Optional

from ....constants import MemberKind, ParameterKind, Visibility
from .type_ref import TypeRef


@dataclass(frozen=True)
class ParameterDescriptor:
    """
    A single parameter slot of a callable.

    Attributes:
        index: Position in the descriptor's parameter list
        name: Declared name, None for a synthetic receiver
        type: Declared type
        kind: Receiver, plain value, keyword-only or variadic
        is_optional: Whether the parameter declares a default
    """
    index: int
    name: Optional[str]
    type: TypeRef = field(default_factory=TypeRef.undeclared)
    kind: ParameterKind = ParameterKind.VALUE
    is_optional: bool = False

    @property
    def is_vararg(self) -> bool:
        """Check if this is *args or **kwargs."""
        return self.kind in (ParameterKind.VARARG, ParameterKind.KEYWORD_VARARG)

    @property
    def is_receiver(self) -> bool:
        """Check if this is the receiver slot."""
        return self.kind == ParameterKind.INSTANCE

    @property
    def is_synthetic(self) -> bool:
        """Check if this slot was added by the loader rather than declared."""
        return self.name is None

    def render(self) -> str:
        """Render as it would appear in a def statement."""
        prefix = {
            ParameterKind.VARARG: '*',
            ParameterKind.KEYWORD_VARARG: '**',
        }.get(self.kind, '')
        text = f'{prefix}{self.name}'
        if self.type.is_declared:
            text += f': {self.type}'
        if self.is_optional:
            text += ' = ...'
        return text

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'index': self.index,
            'name': self.name,
            'type': str(self.type),
            'kind': self.kind.value,
            'is_optional': self.is_optional,
        }


@dataclass(frozen=True)
class CallableDescriptor:
    """
    Reflection snapshot of a callable member.

    Attributes:
        name: Simple name (e.g., "area")
        qualified_name: Module and qualified name (e.g., "shapes.Circle.area")
        visibility: Flat visibility value
        is_final: Cannot be overridden
        is_open: Can be overridden and has a body
        is_abstract: Declared abstract
        is_suspend: Coroutine or async generator function
        parameters: Receiver slot followed by declared parameters
        return_type: Declared return type, None when not recorded
        member_kind: What kind of member was described
    """
    name: str
    qualified_name: str
    visibility: Visibility = Visibility.PUBLIC
    is_final: bool = False
    is_open: bool = False
    is_abstract: bool = False
    is_suspend: bool = False
    parameters: tuple[ParameterDescriptor, ...] = ()
    return_type: Optional[TypeRef] = None
    member_kind: MemberKind = MemberKind.FUNCTION

    @property
    def value_parameters(self) -> tuple[ParameterDescriptor, ...]:
        """Declared parameters without the receiver slot."""
        return tuple(p for p in self.parameters if not p.is_receiver)

    def __str__(self) -> str:
        """Render the member the way failure messages show it."""
        if self.member_kind == MemberKind.PROPERTY:
            text = f'property {self.qualified_name}'
            if self.return_type is not None and self.return_type.is_declared:
                text += f': {self.return_type}'
            return text

        rendered = ', '.join(
            p.render() for p in self.parameters if not p.is_synthetic
        )
        keyword = 'async def' if self.is_suspend else 'def'
        text = f'{keyword} {self.qualified_name}({rendered})'
        if self.return_type is not None and self.return_type.is_declared:
            text += f' -> {self.return_type}'
        return text

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'name': self.name,
            'qualified_name': self.qualified_name,
            'visibility': self.visibility.value,
            'is_final': self.is_final,
            'is_open': self.is_open,
            'is_abstract': self.is_abstract,
            'is_suspend': self.is_suspend,
            'parameters': [p.to_dict() for p in self.parameters],
            'return_type': str(self.return_type) if self.return_type else None,
            'member_kind': self.member_kind.value,
        }


__all__ = ['ParameterDescriptor', 'CallableDescriptor']
