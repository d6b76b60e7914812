from .profile_registry import InMemoryProfileRepository

__all__ = ["InMemoryProfileRepository"]
