"""Infrastructure Layer - ledger store adapters, database pool, logging.

Invariants:
    - Store failures surface as HostStoreError, never as raw driver exceptions
"""
