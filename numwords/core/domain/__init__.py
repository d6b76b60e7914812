"""
Domain Entities and Value Objects.

This package defines the core data structures of the conversion engine:
options and currency records (models), the error taxonomy (exceptions),
the per-language grammar profiles and the currency catalogue.
"""
