"""Infrastructure Layer — database engine, sessions, and logging setup.

Invariants:
    - Infrastructure never imports from core/ domain logic other than core/errors
"""
