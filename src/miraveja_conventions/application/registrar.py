import logging
from typing import Any, Callable, Iterable, Optional, Type

from miraveja_conventions.application.mapping_table import MappingTable
from miraveja_conventions.domain import (
    DuplicateTypeMappingError,
    IContainer,
    IDisposable,
    InvalidArgumentError,
    RegistrationConvention,
    RegistrationKey,
    TypeSelectors,
)

logger = logging.getLogger(__name__)


class ConventionRegistrar:
    """Registers many types against a container at once.

    Each type is registered according to a set of selectors. Unless
    overwriting is enabled, mapping two different concrete types to the
    same (type, name) pair is rejected.

    Attributes:
        _container: The container registrations are issued to.
    """

    def __init__(self, container: IContainer) -> None:
        """Initialize the registrar.

        Args:
            container: The container to configure.

        Raises:
            InvalidArgumentError: If container is None.
        """
        if container is None:
            raise InvalidArgumentError("container")
        self._container = container

    @property
    def container(self) -> IContainer:
        """The container this registrar configures."""
        return self._container

    def register_types(
        self,
        types: Iterable[Type],
        selectors: Optional[TypeSelectors] = None,
        overwrite_existing_mappings: bool = False,
    ) -> IContainer:
        """Register the supplied types using the given selectors.

        Types are processed in the order given; the first failure aborts the
        call and registrations issued before it stay in the container.

        Args:
            types: The concrete types to register.
            selectors: Selectors for from types, name, lifetime and injection members.
                      Defaults register every type only as itself.
            overwrite_existing_mappings: Allow replacing existing mappings.

        Returns:
            The container this registrar configures.

        Raises:
            InvalidArgumentError: If types is None.
            DuplicateTypeMappingError: If a new registration would override an existing mapping
                                       and overwrite_existing_mappings is False.

        Example:
            >>> registrar = ConventionRegistrar(container)
            >>> registrar.register_types(
            ...     [SqlUserRepository, SmtpEmailSender],
            ...     TypeSelectors(get_from_types=with_mappings.from_all_interfaces),
            ... )
        """
        if types is None:
            raise InvalidArgumentError("types")
        if selectors is None:
            selectors = TypeSelectors()

        # The container may compute its registrations on the fly, query them once
        mappings: Optional[MappingTable] = None
        if not overwrite_existing_mappings:
            mappings = MappingTable.from_registrations(self._container.list_registrations())
            logger.debug("Captured %d existing mappings", len(mappings))

        processed = 0
        issued = 0
        for cls in types:
            issued += self._register_type(cls, selectors, mappings)
            processed += 1

        logger.info("Registered %d types by convention with %d registrations", processed, issued)
        return self._container

    def register_convention(
        self,
        convention: RegistrationConvention,
        overwrite_existing_mappings: bool = False,
    ) -> IContainer:
        """Register the types described by a convention.

        Args:
            convention: The convention determining which types are registered and how.
            overwrite_existing_mappings: Allow replacing existing mappings.

        Returns:
            The container this registrar configures.

        Raises:
            InvalidArgumentError: If convention is None.
            DuplicateTypeMappingError: If a new registration would override an existing mapping
                                       and overwrite_existing_mappings is False.
        """
        if convention is None:
            raise InvalidArgumentError("convention")

        selectors = TypeSelectors.from_optional(
            convention.get_from_types(),
            convention.get_name(),
            convention.get_lifetime(),
            convention.get_injection_members(),
        )
        return self.register_types(convention.get_types(), selectors, overwrite_existing_mappings)

    def _register_type(self, cls: Type, selectors: TypeSelectors, mappings: Optional[MappingTable]) -> int:
        """Register a single type and return the number of registrations issued."""
        from_types = list(selectors.get_from_types(cls) or [])
        name = selectors.get_name(cls)
        lifetime = selectors.get_lifetime(cls)
        injection_members = list(selectors.get_injection_members(cls) or [])

        if not from_types:
            # A bare self-registration is implicit in the container
            if lifetime is None and not injection_members:
                logger.debug("Skipping %s, nothing to register", _type_name(cls))
                return 0
            self._container.register_type(None, cls, name, lifetime, injection_members)
            logger.debug("Registered %s as itself with name %r", _type_name(cls), name)
            return 1

        issued = 0
        for from_type in from_types:
            if from_type is IDisposable:
                continue

            if mappings is not None:
                try:
                    mappings.claim(RegistrationKey(from_type=from_type, name=name), cls)
                except DuplicateTypeMappingError as e:
                    logger.debug("%s", e)
                    raise

            self._container.register_type(from_type, cls, name, lifetime, injection_members)
            logger.debug("Registered %s as %s with name %r", _type_name(cls), _type_name(from_type), name)
            issued += 1

        return issued


def register_types(
    container: IContainer,
    types: Iterable[Type],
    get_from_types: Optional[Callable[[Type], Optional[Iterable[Type]]]] = None,
    get_name: Optional[Callable[[Type], Optional[str]]] = None,
    get_lifetime: Optional[Callable[[Type], Any]] = None,
    get_injection_members: Optional[Callable[[Type], Optional[Iterable[Any]]]] = None,
    overwrite_existing_mappings: bool = False,
) -> IContainer:
    """Register the supplied types using the specified selectors.

    Args:
        container: The container to configure.
        types: The concrete types to register.
        get_from_types: Types each concrete type is exposed as. Defaults to none,
                        registering only the supplied types.
        get_name: Registration name for each type. Defaults to no name.
        get_lifetime: Lifetime directive for each type. Defaults to none.
        get_injection_members: Injection members for each type. Defaults to none.
        overwrite_existing_mappings: Allow replacing existing mappings. Defaults to False.

    Returns:
        The container that was configured.

    Raises:
        InvalidArgumentError: If container or types is None.
        DuplicateTypeMappingError: If a new registration would override an existing mapping
                                   and overwrite_existing_mappings is False.

    Example:
        >>> register_types(
        ...     container,
        ...     [SqlUserRepository, SmtpEmailSender],
        ...     get_from_types=with_mappings.from_matching_interface,
        ...     get_lifetime=with_lifetime.singleton,
        ... )
    """
    selectors = TypeSelectors.from_optional(get_from_types, get_name, get_lifetime, get_injection_members)
    return ConventionRegistrar(container).register_types(types, selectors, overwrite_existing_mappings)


def register_types_by_convention(
    container: IContainer,
    convention: RegistrationConvention,
    overwrite_existing_mappings: bool = False,
) -> IContainer:
    """Register the types according to a convention.

    Args:
        container: The container to configure.
        convention: The convention determining which types are registered and how.
        overwrite_existing_mappings: Allow replacing existing mappings. Defaults to False.

    Returns:
        The container that was configured.

    Raises:
        InvalidArgumentError: If container or convention is None.
        DuplicateTypeMappingError: If a new registration would override an existing mapping
                                   and overwrite_existing_mappings is False.
    """
    return ConventionRegistrar(container).register_convention(convention, overwrite_existing_mappings)


def _type_name(cls: Optional[Type]) -> str:
    return getattr(cls, "__name__", repr(cls))
