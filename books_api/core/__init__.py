"""
Core utilities shared across the books API.

This package hosts configuration helpers (env vars, storage paths) and
cross-cutting concerns such as logging setup.
"""
