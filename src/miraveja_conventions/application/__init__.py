"""
Application layer - Use cases and orchestration.

This layer contains the bulk registration use cases that orchestrate domain objects.
It depends only on the Domain layer.
"""

from .mapping_table import MappingTable
from .registrar import ConventionRegistrar, register_types, register_types_by_convention

__all__ = [
    "ConventionRegistrar",
    "MappingTable",
    "register_types",
    "register_types_by_convention",
]
