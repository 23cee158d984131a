"""Database Infrastructure — SQLAlchemy declarative base for the SQL post store.

Invariants:
    - One async engine per SqlPostStore (owned by DatabaseSessionManager)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite by default, asyncpg for PostgreSQL deployments
"""
