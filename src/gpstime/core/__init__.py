"""
Core domain models, mathematical primitives, and data contracts.

Everything here is pure: no I/O apart from reading the packaged JSON schemas.
"""
