"""User model. The app runs as one implicit user created on first use."""
from sqlalchemy import Column, DateTime, String
from sqlalchemy.orm import relationship

from app.db.defaults import utcnow
from app.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(64), primary_key=True)  # fixed well-known id for the implicit user
    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False, default="")  # placeholder, no auth
    role = Column(String(16), nullable=False, default="USER")
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    scenarios = relationship("Scenario", back_populates="author")
