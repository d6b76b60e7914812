"""
Core Ports (Interfaces).

This package defines the Protocols that the Adapters must implement.
They let the use cases reach profile storage and input normalization
without knowing the implementation details.
"""

from .number_normalizer import INumberNormalizer
from .profile_repository import IProfileRepository

__all__ = [
    "INumberNormalizer",
    "IProfileRepository",
]
