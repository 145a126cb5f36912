"""Step model: one immutable unit of content inside a scenario."""
from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from app.db.defaults import new_id, utcnow
from app.db.session import Base


class Step(Base):
    __tablename__ = "steps"

    id = Column(String(36), primary_key=True, default=new_id)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    scenario_id = Column(String(36), ForeignKey("scenarios.id"), nullable=False, index=True)

    scenario = relationship("Scenario", back_populates="steps")
