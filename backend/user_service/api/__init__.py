"""API Layer — FastAPI routes, request dependencies, response writer and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every response body is JSON; errors use the {"message": ...} envelope

Design Decisions:
    - Thin routes delegate to services/user_service.py
"""
