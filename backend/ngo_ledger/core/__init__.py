"""Core Layer - key encoding, argument parsing, existence policy, error taxonomy.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - No IO: the ledger is only reached through repository_protocols.LedgerStub

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
