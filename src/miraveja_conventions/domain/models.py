from typing import Any, Callable, Hashable, Iterable, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field


class RegistrationKey(BaseModel):
    """Value object identifying a registration slot in a container.

    Attributes:
        from_type: The type a dependency is requested as.
        name: Optional discriminator, None for the default registration.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    from_type: Hashable = Field(..., description="The type a dependency is requested as.")
    name: Optional[str] = Field(default=None, description="Registration name, None for the default registration.")


class ContainerRegistration(BaseModel):
    """Value object describing a registration already present in a container.

    Attributes:
        registered_type: The type the registration is keyed by.
        mapped_to_type: The concrete type built for the registration.
        name: Registration name, None for the default registration.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    registered_type: Hashable = Field(..., description="The type the registration is keyed by.")
    mapped_to_type: Any = Field(..., description="The concrete type built for the registration.")
    name: Optional[str] = Field(default=None, description="Registration name, None for the default registration.")

    @property
    def key(self) -> RegistrationKey:
        """Registration key of this entry."""
        return RegistrationKey(from_type=self.registered_type, name=self.name)

    @property
    def is_mapping(self) -> bool:
        """Whether the entry maps a type to a different concrete type."""
        return self.registered_type != self.mapped_to_type


def no_from_types(cls: Type) -> List[Type]:
    """Expose a type only as itself."""
    return []


def no_name(cls: Type) -> Optional[str]:
    """Register under the default (unnamed) registration."""
    return None


def no_lifetime(cls: Type) -> Any:
    """Leave the lifetime up to the container."""
    return None


def no_injection_members(cls: Type) -> List[Any]:
    """Attach no injection members."""
    return []


class TypeSelectors(BaseModel):
    """The four functions deciding how each concrete type gets registered.

    Every selector receives the concrete type. Missing selectors fall back
    to the named defaults above.

    Attributes:
        get_from_types: Types each concrete type is exposed as.
        get_name: Registration name for each concrete type.
        get_lifetime: Lifetime directive for each concrete type.
        get_injection_members: Injection members for each concrete type.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    get_from_types: Callable[[Type], Optional[Iterable[Type]]] = Field(
        default=no_from_types, description="Types each concrete type is exposed as."
    )
    get_name: Callable[[Type], Optional[str]] = Field(
        default=no_name, description="Registration name for each concrete type."
    )
    get_lifetime: Callable[[Type], Any] = Field(
        default=no_lifetime, description="Lifetime directive for each concrete type."
    )
    get_injection_members: Callable[[Type], Optional[Iterable[Any]]] = Field(
        default=no_injection_members, description="Injection members for each concrete type."
    )

    @classmethod
    def from_optional(
        cls,
        get_from_types: Optional[Callable[[Type], Optional[Iterable[Type]]]] = None,
        get_name: Optional[Callable[[Type], Optional[str]]] = None,
        get_lifetime: Optional[Callable[[Type], Any]] = None,
        get_injection_members: Optional[Callable[[Type], Optional[Iterable[Any]]]] = None,
    ) -> "TypeSelectors":
        """Build selectors from optional callables, substituting defaults for None.

        Example:
            >>> selectors = TypeSelectors.from_optional(get_name=lambda t: t.__name__)
            >>> selectors.get_from_types(MyService)
            []
        """
        return cls(
            get_from_types=get_from_types or no_from_types,
            get_name=get_name or no_name,
            get_lifetime=get_lifetime or no_lifetime,
            get_injection_members=get_injection_members or no_injection_members,
        )
