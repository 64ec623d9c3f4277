# Path: callable_match/constants.py
"""
System-Wide Constants for callable_match

Central repository for all constant values used across the library.
NO HARDCODED VALUES in module code - all constants defined here.

Constants are organized by category:
- Visibility
- Parameter Kinds
- Member Traits
- Message Templates
- Naming Conventions
- Log Categories
"""

from enum import Enum
from typing import Final


# ==============================================================================
# VISIBILITY
# ==============================================================================

class Visibility(str, Enum):
    """
    Visibility of a callable member.

    Python has no access modifiers, so visibility is read from naming
    conventions by the loaders. Compared as a flat value, never ordered.
    """
    PUBLIC = 'public'
    INTERNAL = 'internal'
    PROTECTED = 'protected'
    PRIVATE = 'private'

    @property
    def human_name(self) -> str:
        """Lowercase name used in failure messages."""
        return self.value


# ==============================================================================
# PARAMETER KINDS
# ==============================================================================

class ParameterKind(str, Enum):
    """
    Kind of a parameter slot.

    INSTANCE is the receiver at slot 0 (self, cls or a synthetic slot).
    """
    INSTANCE = 'instance'
    VALUE = 'value'
    KEYWORD_ONLY = 'keyword_only'
    VARARG = 'vararg'
    KEYWORD_VARARG = 'keyword_vararg'


# ==============================================================================
# MEMBER KINDS
# ==============================================================================

class MemberKind(str, Enum):
    """What the loader found when describing a member."""
    FUNCTION = 'function'
    METHOD = 'method'
    CLASS_METHOD = 'classmethod'
    STATIC_METHOD = 'staticmethod'
    PROPERTY = 'property'


# ==============================================================================
# MEMBER TRAITS
# ==============================================================================

class Trait(str, Enum):
    """Boolean traits checked by the flag matchers."""
    FINAL = 'final'
    OPEN = 'open'
    ABSTRACT = 'abstract'
    SUSPENDABLE = 'suspendable'


# Descriptor attribute holding each trait
TRAIT_ATTRIBUTES: Final[dict[Trait, str]] = {
    Trait.FINAL: 'is_final',
    Trait.OPEN: 'is_open',
    Trait.ABSTRACT: 'is_abstract',
    Trait.SUSPENDABLE: 'is_suspend',
}


# ==============================================================================
# MESSAGE TEMPLATES
# ==============================================================================

class Messages:
    """
    Failure message templates.

    Each pair holds the positive form (shown when "should" fails) and the
    negated form (shown when "should not" fails).
    """

    VISIBILITY: Final[str] = 'Member {member} should have visibility {expected}'
    NOT_VISIBILITY: Final[str] = 'Member {member} should not have visibility {expected}'

    TRAIT: Final[str] = 'Member {member} should be {trait}'
    NOT_TRAIT: Final[str] = 'Member {member} should not be {trait}'

    ACCEPT_PARAMETERS: Final[str] = 'Member {member} should accept these parameters: {expected}'
    NOT_ACCEPT_PARAMETERS: Final[str] = (
        'Member {member} should not accept these parameters: {expected}'
    )

    PARAMETER_NAMES: Final[str] = 'Member {member} should have these parameters name: {expected}'
    NOT_PARAMETER_NAMES: Final[str] = (
        'Member {member} should not have these parameters name: {expected}'
    )


# Separator used when listing expected parameters in messages
PARAMETER_SEPARATOR: Final[str] = ', '


# ==============================================================================
# NAMING CONVENTIONS
# ==============================================================================

PRIVATE_PREFIX: Final[str] = '__'
PROTECTED_PREFIX: Final[str] = '_'
DUNDER_SUFFIX: Final[str] = '__'
INTERNAL_MODULE_PREFIX: Final[str] = '_'

DEFAULT_RECEIVER_NAMES: Final[tuple[str, ...]] = ('self', 'cls')


# ==============================================================================
# LOG CATEGORIES
# ==============================================================================

class LogCategory(str, Enum):
    """Logger name prefixes for each library layer."""
    INPUT = 'input'
    PROCESS = 'process'
    OUTPUT = 'output'


__all__ = [
    'Visibility',
    'ParameterKind',
    'MemberKind',
    'Trait',
    'TRAIT_ATTRIBUTES',
    'Messages',
    'PARAMETER_SEPARATOR',
    'PRIVATE_PREFIX',
    'PROTECTED_PREFIX',
    'DUNDER_SUFFIX',
    'INTERNAL_MODULE_PREFIX',
    'DEFAULT_RECEIVER_NAMES',
    'LogCategory',
]
