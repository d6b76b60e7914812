"""
Core Domain Layer.

This package contains the pure conversion logic of the system.
It follows the Hexagonal Architecture (Ports & Adapters) pattern:
- The domain has no dependencies on infrastructure (settings, DI container).
- Defines Interfaces (Ports) that the Adapters layer implements.
"""
