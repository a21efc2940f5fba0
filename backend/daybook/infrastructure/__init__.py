"""Infrastructure Layer — database plumbing, repositories and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - SQLAlchemy exceptions are mapped to core errors at this boundary
"""
