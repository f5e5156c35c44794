"""Stock selectors deciding the lifetime directive of a concrete type."""

from typing import Any, Type

from miraveja_conventions.domain import Lifetime, no_lifetime


def none(cls: Type) -> Any:
    """Leave the lifetime up to the container."""
    return no_lifetime(cls)


def transient(cls: Type) -> Lifetime:
    return Lifetime.TRANSIENT


def scoped(cls: Type) -> Lifetime:
    return Lifetime.SCOPED


def singleton(cls: Type) -> Lifetime:
    return Lifetime.SINGLETON
