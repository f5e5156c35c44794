"""Unit tests for domain models."""

from typing import Generic, TypeVar

import pytest
from pydantic import ValidationError

from miraveja_conventions.domain.models import (
    ContainerRegistration,
    RegistrationKey,
    TypeSelectors,
    no_from_types,
    no_injection_members,
    no_lifetime,
    no_name,
)

T = TypeVar("T")


class IFoo:
    pass


class Foo(IFoo):
    pass


class IRepository(Generic[T]):
    pass


class TestRegistrationKey:
    """Test cases for the RegistrationKey model."""

    def test_key_defaults_to_unnamed(self):
        """Test that name defaults to None."""
        key = RegistrationKey(from_type=IFoo)

        assert key.from_type is IFoo
        assert key.name is None

    def test_keys_with_same_values_are_equal_and_hash_equal(self):
        """Test that keys work as dictionary keys."""
        first = RegistrationKey(from_type=IFoo, name="primary")
        second = RegistrationKey(from_type=IFoo, name="primary")

        assert first == second
        assert hash(first) == hash(second)
        assert {first: Foo}[second] is Foo

    def test_keys_with_different_names_differ(self):
        """Test that the name is part of the key identity."""
        assert RegistrationKey(from_type=IFoo) != RegistrationKey(from_type=IFoo, name="primary")

    def test_keys_with_different_types_differ(self):
        """Test that the type is part of the key identity."""
        assert RegistrationKey(from_type=IFoo) != RegistrationKey(from_type=Foo)

    def test_key_is_frozen(self):
        """Test that RegistrationKey is immutable."""
        key = RegistrationKey(from_type=IFoo)

        with pytest.raises(ValidationError):
            key.name = "other"

    def test_key_accepts_subscripted_generic(self):
        """Test that a parameterized generic works as a key type."""
        first = RegistrationKey(from_type=IRepository[Foo])
        second = RegistrationKey(from_type=IRepository[Foo])

        assert first == second
        assert hash(first) == hash(second)
        assert first != RegistrationKey(from_type=IRepository[IFoo])

    def test_key_rejects_unhashable_type(self):
        """Test that an unhashable from_type is rejected."""
        with pytest.raises(ValidationError):
            RegistrationKey(from_type=[IFoo])


class TestContainerRegistration:
    """Test cases for the ContainerRegistration model."""

    def test_mapping_registration(self):
        """Test a registration mapping an interface to a concrete type."""
        registration = ContainerRegistration(registered_type=IFoo, mapped_to_type=Foo)

        assert registration.is_mapping is True
        assert registration.key == RegistrationKey(from_type=IFoo)

    def test_self_registration_is_not_a_mapping(self):
        """Test that a type registered as itself is not a mapping."""
        registration = ContainerRegistration(registered_type=Foo, mapped_to_type=Foo, name="named")

        assert registration.is_mapping is False
        assert registration.key == RegistrationKey(from_type=Foo, name="named")

    def test_registration_is_frozen(self):
        """Test that ContainerRegistration is immutable."""
        registration = ContainerRegistration(registered_type=IFoo, mapped_to_type=Foo)

        with pytest.raises(ValidationError):
            registration.mapped_to_type = IFoo


class TestDefaultSelectors:
    """Test cases for the named default selectors."""

    def test_no_from_types(self):
        """Test that no_from_types returns an empty list."""
        assert no_from_types(Foo) == []

    def test_no_name(self):
        """Test that no_name returns None."""
        assert no_name(Foo) is None

    def test_no_lifetime(self):
        """Test that no_lifetime returns None."""
        assert no_lifetime(Foo) is None

    def test_no_injection_members(self):
        """Test that no_injection_members returns an empty list."""
        assert no_injection_members(Foo) == []


class TestTypeSelectors:
    """Test cases for the TypeSelectors model."""

    def test_defaults(self):
        """Test that unspecified selectors use the named defaults."""
        selectors = TypeSelectors()

        assert selectors.get_from_types is no_from_types
        assert selectors.get_name is no_name
        assert selectors.get_lifetime is no_lifetime
        assert selectors.get_injection_members is no_injection_members

    def test_custom_selectors_are_kept(self):
        """Test that supplied callables are stored unchanged."""
        get_name = lambda t: t.__name__
        selectors = TypeSelectors(get_name=get_name)

        assert selectors.get_name is get_name
        assert selectors.get_name(Foo) == "Foo"

    def test_from_optional_substitutes_defaults_for_none(self):
        """Test that None selectors fall back to the defaults."""
        get_lifetime = lambda t: "singleton"
        selectors = TypeSelectors.from_optional(None, None, get_lifetime, None)

        assert selectors.get_from_types is no_from_types
        assert selectors.get_name is no_name
        assert selectors.get_lifetime is get_lifetime
        assert selectors.get_injection_members is no_injection_members

    def test_non_callable_selector_is_rejected(self):
        """Test that a non-callable selector fails validation."""
        with pytest.raises(ValidationError):
            TypeSelectors(get_name="Foo")

    def test_selectors_are_frozen(self):
        """Test that TypeSelectors is immutable."""
        selectors = TypeSelectors()

        with pytest.raises(ValidationError):
            selectors.get_name = lambda t: "other"


class TestGenericContainerRegistration:
    """Test cases for registrations keyed by parameterized generics."""

    def test_generic_mapping_registration(self):
        """Test that a generic alias can be the registered type."""
        registration = ContainerRegistration(registered_type=IRepository[Foo], mapped_to_type=Foo)

        assert registration.is_mapping is True
        assert registration.key == RegistrationKey(from_type=IRepository[Foo])
