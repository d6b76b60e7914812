"""
Adapters (Infrastructure Layer).

Concrete implementations of the core ports: input normalization and
grammar profile storage.
"""
