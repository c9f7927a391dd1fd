"""Infrastructure Layer — database sessions and logging setup.

Invariants:
    - Only this layer and repositories/ touch SQLAlchemy engines and sessions
"""
