"""
Grammar profiles.

Importing this package registers every language profile, grouped by
family (germanic, slavic, romance, koreanic, bantu), in PROFILE_REGISTRY.
"""

from .base import (
    PROFILE_REGISTRY,
    CountClass,
    GrammarProfile,
    get_profile,
    list_registered_profiles,
    register_profile,
)
from . import bantu, germanic, koreanic, romance, slavic  # noqa: F401  (registration side effect)

__all__ = [
    "PROFILE_REGISTRY",
    "CountClass",
    "GrammarProfile",
    "get_profile",
    "list_registered_profiles",
    "register_profile",
]
