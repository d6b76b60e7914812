"""
Shared utilities package.

This module contains cross-cutting concerns used by the use cases and
the public API, including:
- Configuration management
- Structured logging
- Tracing (Observability)
- Dependency Injection wiring
"""
