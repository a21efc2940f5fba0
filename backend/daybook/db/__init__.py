"""Database Package — declarative Base shared by every ORM model.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
