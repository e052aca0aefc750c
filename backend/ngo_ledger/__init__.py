"""NGO Ledger - chaincode-style entity service over a key-value ledger.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
