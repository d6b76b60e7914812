# tests\__init__.py
"""
Test Suite for numwords.

Organization:
- `core`: Domain models, grammar profiles, the cardinal engine and the use case (ports mocked or real).
- `adapters`: Normalizer and profile repository.
- `shared`: Configuration, DI container, logging and tracing setup.
- `integration`: Per-language samples through the public API.
"""
