"""Core Layer - domain types, error taxonomy, storage contract. No IO, no DB.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
"""
