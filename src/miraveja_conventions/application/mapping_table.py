"""Application layer - Duplicate mapping detection."""

from typing import Dict, Iterable, Optional, Type

from miraveja_conventions.domain import (
    ContainerRegistration,
    DuplicateTypeMappingError,
    RegistrationKey,
)


class MappingTable:
    """Tracks which concrete type owns each registration key during one bulk registration.

    Seeded from a snapshot of the container's registrations and updated as
    new mappings are claimed. Lives only for the duration of one call.

    Attributes:
        _mappings: Dictionary mapping registration keys to concrete types.
    """

    def __init__(self, mappings: Optional[Dict[RegistrationKey, Type]] = None) -> None:
        """Initialize the table.

        Args:
            mappings: Optional initial key to concrete type mappings.
        """
        self._mappings: Dict[RegistrationKey, Type] = dict(mappings or {})

    @classmethod
    def from_registrations(cls, registrations: Iterable[ContainerRegistration]) -> "MappingTable":
        """Build a table from existing container registrations.

        Pure self-registrations are skipped, as they map no type to another.

        Args:
            registrations: The container's current registrations.

        Returns:
            A table holding the existing mappings.
        """
        return cls(
            {registration.key: registration.mapped_to_type for registration in registrations if registration.is_mapping}
        )

    def claim(self, key: RegistrationKey, mapped_to_type: Type) -> None:
        """Record a concrete type as the owner of a key.

        Claiming a key already owned by the same concrete type is allowed.

        Args:
            key: The registration key being claimed.
            mapped_to_type: The concrete type claiming the key.

        Raises:
            DuplicateTypeMappingError: If the key is owned by a different concrete type.

        Example:
            >>> table = MappingTable()
            >>> table.claim(RegistrationKey(from_type=IFoo), Foo)
            >>> table.claim(RegistrationKey(from_type=IFoo), Foo)  # No error
            >>> table.claim(RegistrationKey(from_type=IFoo), Bar)  # Raises DuplicateTypeMappingError
        """
        if key in self._mappings and self._mappings[key] is not mapped_to_type:
            raise DuplicateTypeMappingError(key.name, key.from_type, self._mappings[key], mapped_to_type)

        self._mappings[key] = mapped_to_type

    def get(self, key: RegistrationKey) -> Optional[Type]:
        """Get the concrete type owning a key, or None."""
        return self._mappings.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._mappings

    def __len__(self) -> int:
        return len(self._mappings)
