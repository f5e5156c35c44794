from typing import Optional, Type


class DIException(Exception):
    """Base exception for convention registration errors."""


class InvalidArgumentError(DIException, ValueError):
    """Raised when a required argument is missing.

    This occurs when:
    - The container is None.
    - The types sequence is None.
    - The convention is None.

    Attributes:
        argument_name: Name of the offending argument.
    """

    def __init__(self, argument_name: str) -> None:
        self.argument_name = argument_name
        super().__init__(f"Argument '{argument_name}' must not be None")


class DuplicateTypeMappingError(DIException):
    """Raised when two concrete types claim the same registration key.

    Only raised while overwriting existing mappings is disabled.

    Attributes:
        name: Registration name of the conflicting key, None for the default registration.
        from_type: The type being requested.
        current_mapped_to_type: The concrete type that already owns the key.
        new_mapped_to_type: The concrete type that attempted to claim the key.
    """

    def __init__(
        self,
        name: Optional[str],
        from_type: Type,
        current_mapped_to_type: Type,
        new_mapped_to_type: Type,
    ) -> None:
        self.name = name
        self.from_type = from_type
        self.current_mapped_to_type = current_mapped_to_type
        self.new_mapped_to_type = new_mapped_to_type
        message = (
            f"An attempt to override an existing mapping was detected for type {_type_name(from_type)} "
            f"with name '{name}', currently mapped to type {_type_name(current_mapped_to_type)}, "
            f"to type {_type_name(new_mapped_to_type)}"
        )
        super().__init__(message)


def _type_name(cls: Type) -> str:
    return getattr(cls, "__name__", repr(cls))
