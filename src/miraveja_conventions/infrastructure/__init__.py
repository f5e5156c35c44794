"""
Infrastructure layer - Stock conventions and tooling.

This layer contains ready-made conventions and testing helpers.
It depends on both Application and Domain layers.
"""

from . import conventions, testing

__all__ = [
    "conventions",
    "testing",
]
