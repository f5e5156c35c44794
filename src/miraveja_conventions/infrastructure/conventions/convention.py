from typing import Any, Callable, Iterable, List, Optional, Type

from miraveja_conventions.domain import (
    InvalidArgumentError,
    RegistrationConvention,
    TypeSelectors,
)


class Convention(RegistrationConvention):
    """Registration convention composed from a type list and selectors.

    Selectors left out fall back to registering every type only as itself,
    with no name, lifetime or injection members.

    Attributes:
        _types: The concrete types to register, in registration order.
        _selectors: The selectors applied to each type.

    Example:
        >>> convention = Convention(
        ...     [SqlUserRepository, SmtpEmailSender],
        ...     get_from_types=with_mappings.from_matching_interface,
        ...     get_lifetime=with_lifetime.singleton,
        ... )
        >>> register_types_by_convention(container, convention)
    """

    def __init__(
        self,
        types: Iterable[Type],
        get_from_types: Optional[Callable[[Type], Optional[Iterable[Type]]]] = None,
        get_name: Optional[Callable[[Type], Optional[str]]] = None,
        get_lifetime: Optional[Callable[[Type], Any]] = None,
        get_injection_members: Optional[Callable[[Type], Optional[Iterable[Any]]]] = None,
    ) -> None:
        """Initialize the convention.

        Args:
            types: The concrete types to register.
            get_from_types: Types each concrete type is exposed as.
            get_name: Registration name for each type.
            get_lifetime: Lifetime directive for each type.
            get_injection_members: Injection members for each type.

        Raises:
            InvalidArgumentError: If types is None.
        """
        if types is None:
            raise InvalidArgumentError("types")
        self._types: List[Type] = list(types)
        self._selectors = TypeSelectors.from_optional(get_from_types, get_name, get_lifetime, get_injection_members)

    def get_types(self) -> List[Type]:
        return list(self._types)

    def get_from_types(self) -> Callable[[Type], Optional[Iterable[Type]]]:
        return self._selectors.get_from_types

    def get_name(self) -> Callable[[Type], Optional[str]]:
        return self._selectors.get_name

    def get_lifetime(self) -> Callable[[Type], Any]:
        return self._selectors.get_lifetime

    def get_injection_members(self) -> Callable[[Type], Optional[Iterable[Any]]]:
        return self._selectors.get_injection_members
