"""Infrastructure Layer — document store client and cross-cutting concerns.

Invariants:
    - All driver exceptions mapped to core/errors.py types before leaving this layer
    - No retries, no timeouts beyond the driver's server selection timeout
"""
