"""ORM Models - SQLAlchemy declarative models backing the ledger world state.

Invariants:
    - All models inherit from Base (db/base.py)
"""

from ngo_ledger.models.ledger_state import LedgerState  # noqa: F401
