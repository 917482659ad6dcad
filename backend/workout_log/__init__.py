"""Workout Log - personal workout-logging backend.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
