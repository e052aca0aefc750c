"""Services Layer - chaincode handlers and dispatch.

Invariants:
    - Handlers split by entity (NGO, donation request, donation)
    - Dispatch uses an explicit dict mapping (no auto-discovery)
"""
