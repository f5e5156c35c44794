"""
miraveja-conventions: Registration by convention for dependency injection containers.

Public API exports for the miraveja-conventions package.
"""

# Application exports
from miraveja_conventions.application.registrar import (
    ConventionRegistrar,
    register_types,
    register_types_by_convention,
)

# Domain exports
from miraveja_conventions.domain.enums import Lifetime
from miraveja_conventions.domain.exceptions import (
    DIException,
    DuplicateTypeMappingError,
    InvalidArgumentError,
)
from miraveja_conventions.domain.interfaces import IContainer, IDisposable, RegistrationConvention
from miraveja_conventions.domain.models import ContainerRegistration, RegistrationKey, TypeSelectors

# Infrastructure exports
from miraveja_conventions.infrastructure.conventions import (
    Convention,
    with_injection_members,
    with_lifetime,
    with_mappings,
    with_name,
)

__version__ = "0.1.0"

__all__ = [
    # Registration
    "ConventionRegistrar",
    "register_types",
    "register_types_by_convention",
    # Conventions
    "Convention",
    "RegistrationConvention",
    "with_mappings",
    "with_name",
    "with_lifetime",
    "with_injection_members",
    # Contracts and models
    "IContainer",
    "IDisposable",
    "ContainerRegistration",
    "RegistrationKey",
    "TypeSelectors",
    # Enums
    "Lifetime",
    # Exceptions
    "DIException",
    "DuplicateTypeMappingError",
    "InvalidArgumentError",
]
