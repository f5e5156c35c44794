"""Stock selectors deciding the registration name of a concrete type."""

from typing import Optional, Type

from miraveja_conventions.domain import no_name


def default(cls: Type) -> Optional[str]:
    """Use the default (unnamed) registration."""
    return no_name(cls)


def type_name(cls: Type) -> Optional[str]:
    """Use the type's name as the registration name."""
    return cls.__name__
