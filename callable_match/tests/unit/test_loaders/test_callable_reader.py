# Path: callable_match/tests/unit/test_loaders/test_callable_reader.py
"""
Unit Tests for CallableReader

Tests descriptor construction from live functions, methods, static and
class methods, properties and coroutine functions.
"""

import functools
import os
from abc import ABC, abstractmethod
from typing import Optional, final
from unittest.mock import MagicMock, patch

import pytest

from callable_match.constants import MemberKind, ParameterKind, Visibility
from callable_match.loaders import CallableReader, as_descriptor, describe, describe_member
from callable_match.process.matcher.models import CallableDescriptor, TypeRef


# ==============================================================================
# SAMPLE MEMBERS
# ==============================================================================

class Shape(ABC):
    sides = 0

    @abstractmethod
    def area(self) -> float:
        pass

    def scale(self, factor: float) -> None:
        pass

    def _cache_key(self) -> str:
        return ''

    def __secret(self) -> None:
        pass

    @staticmethod
    def unit(size: int) -> 'Shape':
        pass

    @classmethod
    def create(cls, name: str, sides: int = 3) -> 'Shape':
        pass

    @property
    def label(self) -> str:
        return ''

    async def render(self, target: Optional[str] = None) -> None:
        pass

    @final
    def describe(self) -> str:
        return ''


class Square(Shape):

    def __init__(self, side: float):
        self.side = side

    def area(self) -> float:
        return self.side ** 2


@final
class Sealed:

    def run(self) -> None:
        pass

    @property
    def size(self) -> int:
        return 0


class _Hidden:

    def run(self) -> None:
        pass


class Pending:

    def store(self, item: 'Missing') -> None:
        pass


def helper(x: int, *args: str, key: bool = False, **options) -> int:
    return x


def _private_helper() -> None:
    pass


async def fetch(url: str) -> bytes:
    return b''


async def stream(url: str):
    yield b''


# ==============================================================================
# TESTS
# ==============================================================================

class TestDescribeFunctions:
    """Test module-level functions."""

    def test_function_has_synthetic_receiver(self):
        """Slot 0 is a nameless receiver for plain functions."""
        descriptor = describe(helper)

        receiver = descriptor.parameters[0]
        assert receiver.is_synthetic
        assert receiver.kind == ParameterKind.INSTANCE
        assert descriptor.member_kind == MemberKind.FUNCTION

    def test_parameter_kinds(self):
        """Every Python parameter kind is mapped."""
        descriptor = describe(helper)

        assert [p.name for p in descriptor.value_parameters] == ['x', 'args', 'key', 'options']
        assert [p.kind for p in descriptor.value_parameters] == [
            ParameterKind.VALUE,
            ParameterKind.VARARG,
            ParameterKind.KEYWORD_ONLY,
            ParameterKind.KEYWORD_VARARG,
        ]
        assert descriptor.parameters[3].is_optional is True
        assert descriptor.parameters[1].is_optional is False

    def test_annotations_resolved(self):
        """Declared types and return type are read from annotations."""
        descriptor = describe(helper)

        assert descriptor.parameters[1].type == TypeRef(int)
        assert descriptor.parameters[2].type == TypeRef(str)
        assert descriptor.parameters[4].type.is_declared is False
        assert descriptor.return_type == TypeRef(int)

    def test_function_is_final(self):
        """Nothing can override a module-level function."""
        descriptor = describe(helper)
        assert descriptor.is_final is True
        assert descriptor.is_open is False
        assert descriptor.is_abstract is False

    def test_protected_function(self):
        """A leading underscore means protected."""
        assert describe(_private_helper).visibility == Visibility.PROTECTED

    def test_public_function(self):
        """Plain names are public."""
        assert describe(helper).visibility == Visibility.PUBLIC

    def test_coroutine_is_suspendable(self):
        """async def functions are suspendable."""
        assert describe(fetch).is_suspend is True
        assert describe(stream).is_suspend is True
        assert describe(helper).is_suspend is False

    def test_qualified_name(self):
        """Qualified name joins module and qualname."""
        descriptor = describe(helper)
        assert descriptor.qualified_name == f'{helper.__module__}.helper'
        assert descriptor.name == 'helper'


class TestDescribeMethods:
    """Test methods read through their class."""

    def test_method_receiver_typed_as_owner(self):
        """self is slot 0 and typed as the declaring class."""
        descriptor = describe(Shape.scale)

        assert descriptor.member_kind == MemberKind.METHOD
        assert descriptor.parameters[0].name == 'self'
        assert descriptor.parameters[0].type == TypeRef(Shape)
        assert [p.name for p in descriptor.value_parameters] == ['factor']

    def test_plain_method_is_open(self):
        """Public methods can be overridden."""
        descriptor = describe(Shape.scale)
        assert descriptor.is_open is True
        assert descriptor.is_final is False

    def test_abstract_method(self):
        """abstractmethod marks the member abstract, not open, not final."""
        descriptor = describe(Shape.area)
        assert descriptor.is_abstract is True
        assert descriptor.is_open is False
        assert descriptor.is_final is False

    def test_override_is_concrete(self):
        """Overriding an abstract method yields an open member."""
        descriptor = describe(Square.area)
        assert descriptor.is_abstract is False
        assert descriptor.is_open is True

    def test_typing_final_method(self):
        """typing.final marks a method final."""
        descriptor = describe(Shape.describe)
        assert descriptor.is_final is True
        assert descriptor.is_open is False

    def test_final_class_members(self):
        """Members of a typing.final class are final."""
        descriptor = describe(Sealed.run)
        assert descriptor.is_final is True
        assert descriptor.is_open is False

    def test_protected_method(self):
        """Single underscore methods are protected."""
        assert describe(Shape._cache_key).visibility == Visibility.PROTECTED

    def test_private_method_by_mangled_attribute(self):
        """Name-mangled methods are private and final."""
        descriptor = describe(Shape._Shape__secret)
        assert descriptor.visibility == Visibility.PRIVATE
        assert descriptor.is_final is True
        assert descriptor.is_open is False

    def test_async_method(self):
        """async methods are suspendable and keep their optional parameters."""
        descriptor = describe(Shape.render)
        assert descriptor.is_suspend is True
        assert descriptor.parameters[1].is_optional is True
        assert descriptor.parameters[1].type.is_nullable is True

    def test_bound_method(self):
        """Bound methods are described through the instance's class."""
        descriptor = describe(Square(2.0).scale)
        assert descriptor.parameters[0].type == TypeRef(Square)
        assert [p.name for p in descriptor.value_parameters] == ['factor']

    def test_class_describes_constructor(self):
        """A class is described through __init__."""
        descriptor = describe(Square)
        assert descriptor.name == '__init__'
        assert descriptor.visibility == Visibility.PUBLIC
        assert [p.name for p in descriptor.value_parameters] == ['side']

    def test_internal_class_members(self):
        """Members of '_'-prefixed classes are internal."""
        assert describe(_Hidden.run).visibility == Visibility.INTERNAL

    def test_internal_inference_can_be_disabled(self):
        """Internal visibility is only inferred when configured."""
        config = MagicMock()
        config.get.side_effect = lambda key, default=None: {
            'infer_internal_visibility': False,
            'receiver_names': ('self', 'cls'),
        }.get(key, default)

        descriptor = CallableReader(config).describe(_Hidden.run)
        assert descriptor.visibility == Visibility.PUBLIC

    def test_local_class_method(self):
        """Methods of classes defined in functions are recognised by receiver name."""
        class Local:
            def work(self, amount: int) -> None:
                pass

        descriptor = describe(Local.work)
        assert descriptor.member_kind == MemberKind.METHOD
        assert descriptor.parameters[0].name == 'self'
        assert [p.name for p in descriptor.value_parameters] == ['amount']

    def test_local_class_staticmethod(self):
        """Static methods of classes defined in functions stay class members."""
        class Local:
            @staticmethod
            def helper(amount: int) -> int:
                return amount

        descriptor = describe(Local.helper)
        assert descriptor.member_kind == MemberKind.STATIC_METHOD
        assert descriptor.parameters[0].is_synthetic
        assert descriptor.is_open is True
        assert descriptor.is_final is False

    def test_local_and_module_staticmethods_agree(self):
        """Where the class is defined does not change modality."""
        class Local:
            @staticmethod
            def unit(size: int) -> int:
                return size

        local = describe(Local.unit)
        module = describe(Shape.unit)
        assert (local.member_kind, local.is_final, local.is_open) == (
            module.member_kind, module.is_final, module.is_open
        )

    def test_nested_function_is_function(self):
        """Functions defined inside functions are plain functions."""
        def inner(x: int) -> int:
            return x

        descriptor = describe(inner)
        assert descriptor.member_kind == MemberKind.FUNCTION
        assert descriptor.is_final is True

    def test_explicit_owner(self):
        """An explicit owner is used for the receiver type."""
        descriptor = describe(Shape.scale, owner=Square)
        assert descriptor.parameters[0].type == TypeRef(Square)


class TestDescribeSpecialMembers:
    """Test static methods, class methods and properties."""

    def test_staticmethod(self):
        """Static methods get a synthetic receiver."""
        descriptor = describe(Shape.unit)

        assert descriptor.member_kind == MemberKind.STATIC_METHOD
        assert descriptor.parameters[0].is_synthetic
        assert [p.name for p in descriptor.value_parameters] == ['size']
        assert descriptor.return_type == TypeRef(Shape)

    def test_classmethod(self):
        """Class methods take cls at slot 0, typed as the class object."""
        descriptor = describe(Shape.create)

        assert descriptor.member_kind == MemberKind.CLASS_METHOD
        assert descriptor.parameters[0].name == 'cls'
        assert descriptor.parameters[0].type == TypeRef(type[Shape])
        assert [p.name for p in descriptor.value_parameters] == ['name', 'sides']
        assert descriptor.parameters[2].is_optional is True

    def test_property_by_name(self):
        """Properties are described through their getter."""
        descriptor = describe_member(Shape, 'label')

        assert descriptor.member_kind == MemberKind.PROPERTY
        assert descriptor.parameters[0].name == 'self'
        assert len(descriptor.parameters) == 1
        assert descriptor.return_type == TypeRef(str)
        assert descriptor.is_open is True

    def test_property_object(self):
        """Raw property objects are described through their declaring class."""
        descriptor = describe(Shape.label)

        assert descriptor.member_kind == MemberKind.PROPERTY
        assert descriptor.parameters[0].type == TypeRef(Shape)
        assert descriptor.visibility == Visibility.PUBLIC
        assert descriptor.is_open is True
        assert descriptor.is_final is False

    def test_property_on_final_class(self):
        """Properties of a typing.final class are final when read off the class."""
        descriptor = describe(Sealed.size)

        assert descriptor.is_final is True
        assert descriptor.is_open is False
        assert descriptor == describe_member(Sealed, 'size')

    def test_raw_staticmethod_and_classmethod_objects(self):
        """Raw staticmethod/classmethod objects resolve their declaring class."""
        static = describe(Shape.__dict__['unit'])
        klass = describe(Shape.__dict__['create'])

        assert static == describe_member(Shape, 'unit')
        assert klass.parameters[0].type == TypeRef(type[Shape])

    def test_describe_member_unmangled_private(self):
        """Private members can be looked up by their source name."""
        descriptor = describe_member(Shape, '__secret')
        assert descriptor.visibility == Visibility.PRIVATE

    def test_describe_member_inherited(self):
        """Members are found in base classes."""
        descriptor = describe_member(Square, 'scale')
        assert descriptor.parameters[0].type == TypeRef(Square)


class TestDescribeErrors:
    """Test rejected inputs."""

    def test_partial_rejected(self):
        """functools.partial is not a declared member."""
        with pytest.raises(TypeError, match='partial'):
            describe(functools.partial(helper, 1))

    def test_non_callable_rejected(self):
        """Plain values are rejected."""
        with pytest.raises(TypeError, match='not callable'):
            describe(42)

    def test_missing_member(self):
        """Unknown member names raise AttributeError."""
        with pytest.raises(AttributeError, match='missing'):
            describe_member(Shape, 'missing')

    def test_data_attribute_rejected(self):
        """Class data attributes are not callable members."""
        with pytest.raises(TypeError):
            describe_member(Shape, 'sides')

    def test_getterless_property_rejected(self):
        """Properties without a getter have no signature."""
        with pytest.raises(TypeError, match='no getter'):
            describe(property())


class TestUnresolvedAnnotations:
    """Test fallback for annotations that cannot be evaluated."""

    def test_forward_reference_kept_as_string(self):
        """Unresolvable names stay as strings."""
        descriptor = describe(Pending.store)
        assert descriptor.parameters[1].type == TypeRef('Missing')

    def test_forward_reference_matches_by_name(self):
        """String annotations accept classes of the same name."""
        class Missing:
            pass

        descriptor = describe(Pending.store)
        assert descriptor.parameters[1].type.is_supertype_of(Missing)


class TestAsDescriptor:
    """Test as_descriptor."""

    def test_descriptor_passes_through(self, int_param_function):
        """Descriptors are returned unchanged."""
        assert as_descriptor(int_param_function) is int_param_function

    def test_live_member_described(self):
        """Live members are described."""
        assert isinstance(as_descriptor(helper), CallableDescriptor)

    def test_logs_description(self, capture_logs):
        """Descriptions are logged on the input layer."""
        describe(helper)
        assert 'Described function' in capture_logs.getvalue()


class TestReaderConfiguration:
    """Test reader behaviour under unusual configuration."""

    def test_invalid_log_level_does_not_break_reflection(self, reset_singletons):
        """A bad logging setting only matters when logging is set up."""
        with patch.dict(os.environ, {'CALLABLE_MATCH_LOG_LEVEL': 'verbose'}):
            descriptor = describe(Shape.scale)

        assert [p.name for p in descriptor.value_parameters] == ['factor']
