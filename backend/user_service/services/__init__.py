"""Services Layer — use-case orchestration between routes and repositories.

Invariants:
    - Services depend on core/ and the UserRepository Protocol only
    - Errors raised, never written: the API layer owns HTTP responses
"""
