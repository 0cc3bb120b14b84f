"""
Core utilities shared across the Artistes API.

This package hosts configuration helpers (env vars, storage path, id
strategy) and cross-cutting concerns such as logging setup. Routers and
services should depend on these primitives instead of reading os.environ
directly.
"""
