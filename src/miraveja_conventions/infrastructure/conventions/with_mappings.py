"""Stock selectors deciding which types a concrete type is exposed as."""

import inspect
from abc import ABC
from typing import Generic, List, Protocol, Type

from miraveja_conventions.domain import no_from_types

_IGNORED_BASES = (object, ABC, Generic, Protocol)


def none(cls: Type) -> List[Type]:
    """Expose the type only as itself."""
    return no_from_types(cls)


def from_all_bases(cls: Type) -> List[Type]:
    """Expose the type as every base class in its MRO.

    Example:
        >>> class Repository: ...
        >>> class SqlRepository(Repository): ...
        >>> from_all_bases(SqlRepository)
        [Repository]
    """
    return [base for base in cls.__mro__[1:] if base not in _IGNORED_BASES]


def from_all_interfaces(cls: Type) -> List[Type]:
    """Expose the type as every abstract base class or protocol it derives from.

    A base counts as an interface when it still declares abstract methods
    or is a typing.Protocol.

    Example:
        >>> class IUserRepository(ABC):
        ...     @abstractmethod
        ...     def get(self, user_id: int) -> User: ...
        >>> class SqlUserRepository(IUserRepository): ...
        >>> from_all_interfaces(SqlUserRepository)
        [IUserRepository]
    """
    return [base for base in from_all_bases(cls) if _is_interface(base)]


def from_matching_interface(cls: Type) -> List[Type]:
    """Expose the type as the interface named after it with an "I" prefix.

    Example:
        >>> from_matching_interface(UserService)  # implements IUserService and IDisposable
        [IUserService]
    """
    expected_name = f"I{cls.__name__}"
    return [base for base in from_all_interfaces(cls) if base.__name__ == expected_name]


def _is_interface(base: Type) -> bool:
    return inspect.isabstract(base) or bool(getattr(base, "_is_protocol", False))
