"""Services Layer — async orchestration of core rules over the persistence gateway.

Invariants:
    - Acting user passed explicitly as Identity | None (never read from globals)
    - Mutating operations return OperationResult and never raise
    - Each mutating operation commits once; any failure rolls back
    - Read operations return empty results for an unauthenticated caller
"""
