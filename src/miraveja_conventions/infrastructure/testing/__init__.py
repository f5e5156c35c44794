"""
Testing utilities module.

Provides helpers for testing registration by convention without a real container.
"""

from .utilities import RecordingContainer, RegisterTypeCall, create_recording_container

__all__ = [
    "RecordingContainer",
    "RegisterTypeCall",
    "create_recording_container",
]
