from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional, Sequence, Type

from miraveja_conventions.domain.models import ContainerRegistration


class IDisposable(ABC):
    """Marker for types that release resources on disposal.

    Disposal is an incidental capability rather than a contract worth
    resolving, so it is never used as a registration key.
    """

    @abstractmethod
    def dispose(self) -> None:
        """Release resources held by the instance."""


class IContainer(ABC):
    """Abstract interface for the container registrations are issued to."""

    @abstractmethod
    def list_registrations(self) -> List[ContainerRegistration]:
        """Return the registrations currently held by the container.

        The list may be computed on demand, so callers should query it once.
        """

    @abstractmethod
    def register_type(
        self,
        from_type: Optional[Type],
        to_type: Type,
        name: Optional[str],
        lifetime: Any,
        injection_members: Sequence[Any],
    ) -> None:
        """Register a concrete type, optionally mapped from another type.

        Args:
            from_type: The type requested by consumers, None to register the concrete type as itself.
            to_type: The concrete type to build.
            name: Registration name, None for the default registration.
            lifetime: Opaque lifetime directive, None to use the container default.
            injection_members: Opaque injection members attached to the registration.
        """


class RegistrationConvention(ABC):
    """Abstract policy describing which types to register and how."""

    @abstractmethod
    def get_types(self) -> Iterable[Type]:
        """Get the concrete types to register."""

    @abstractmethod
    def get_from_types(self) -> Callable[[Type], Optional[Iterable[Type]]]:
        """Get the function returning the types each concrete type is exposed as."""

    @abstractmethod
    def get_name(self) -> Callable[[Type], Optional[str]]:
        """Get the function returning the registration name for each concrete type."""

    @abstractmethod
    def get_lifetime(self) -> Callable[[Type], Any]:
        """Get the function returning the lifetime directive for each concrete type."""

    @abstractmethod
    def get_injection_members(self) -> Callable[[Type], Optional[Iterable[Any]]]:
        """Get the function returning the injection members for each concrete type."""
