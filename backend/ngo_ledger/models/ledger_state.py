"""LedgerState ORM - one row per world-state key.

Invariants:
    - key is the exact ledger key (simple or composite) encoded as UTF-8 bytes
    - value is opaque bytes; the store decodes it back to str on read
    - object_type is the composite key namespace, NULL for simple keys

Design Decisions:
    - LargeBinary key and value: composite keys contain U+0000, which PostgreSQL text rejects
    - object_type is observability only; no query filters on it
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from ngo_ledger.db.base import Base


class LedgerState(Base):
    __tablename__ = "ledger_state"

    key: Mapped[bytes] = mapped_column(LargeBinary, primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    object_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
