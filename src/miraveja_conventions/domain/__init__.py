"""
Domain layer - Core registration rules and models.

This layer contains the fundamental models and contracts for registration by convention.
It has no dependencies on other layers.
"""

from .enums import Lifetime
from .exceptions import DIException, DuplicateTypeMappingError, InvalidArgumentError
from .interfaces import IContainer, IDisposable, RegistrationConvention
from .models import (
    ContainerRegistration,
    RegistrationKey,
    TypeSelectors,
    no_from_types,
    no_injection_members,
    no_lifetime,
    no_name,
)

__all__ = [
    # Enums
    "Lifetime",
    # Exceptions
    "DIException",
    "DuplicateTypeMappingError",
    "InvalidArgumentError",
    # Interfaces
    "IContainer",
    "IDisposable",
    "RegistrationConvention",
    # Models
    "ContainerRegistration",
    "RegistrationKey",
    "TypeSelectors",
    # Default selectors
    "no_from_types",
    "no_name",
    "no_lifetime",
    "no_injection_members",
]
