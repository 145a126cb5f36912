"""Scenario model: a named training exercise owning an ordered list of steps."""
from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from app.db.defaults import new_id, utcnow
from app.db.session import Base


class Scenario(Base):
    __tablename__ = "scenarios"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    author_id = Column(String(64), ForeignKey("users.id"), nullable=False, index=True)

    author = relationship("User", back_populates="scenarios")
    # creation time is the only ordering key for steps
    steps = relationship("Step", back_populates="scenario", order_by="Step.created_at")
