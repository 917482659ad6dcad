"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All workout endpoints return the {success, data?, error?} envelope
"""
