"""Stock selectors deciding the injection members of a concrete type."""

from typing import Any, List, Type

from miraveja_conventions.domain import no_injection_members


def none(cls: Type) -> List[Any]:
    """Attach no injection members."""
    return no_injection_members(cls)
