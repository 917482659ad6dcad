"""Infrastructure Layer - database engine, SQL store, logging.

Invariants:
    - All driver exceptions mapped to core/errors.py types before leaving this layer
"""
