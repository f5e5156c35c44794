"""
Conventions module.

Provides stock selectors and a composable convention for registering types by convention.
"""

from . import with_injection_members, with_lifetime, with_mappings, with_name
from .convention import Convention

__all__ = [
    "Convention",
    "with_injection_members",
    "with_lifetime",
    "with_mappings",
    "with_name",
]
