"""Database Base — declarative metadata shared by models and the session manager.

Invariants:
    - Single async engine per application (owned by DatabaseSessionManager)
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite driver for SQLite (native asyncio interface over the stdlib driver)
"""
