"""PointTransaction model: append-only ledger entry keyed by user id."""
import enum

from sqlalchemy import Column, DateTime, Integer, String

from app.db.defaults import new_id, utcnow
from app.db.session import Base


class TransactionType(str, enum.Enum):
    AI_STEP = "AI_STEP"
    COMPLETE_STEP = "COMPLETE_STEP"
    ASSESSMENT = "ASSESSMENT"


class PointTransaction(Base):
    __tablename__ = "point_transactions"

    id = Column(String(36), primary_key=True, default=new_id)
    # no FK: the ledger is an independent stream, entries may precede the user row
    user_id = Column(String(64), nullable=False, index=True)
    type = Column(String(32), nullable=False)  # TransactionType value
    amount = Column(Integer, nullable=False)  # signed
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
