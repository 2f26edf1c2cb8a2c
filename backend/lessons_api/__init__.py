"""Lessons API Package — REST façade over a MongoDB document store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
