# venues/models/turnstile.py
"""Turnstiles table — same shape as gates, reconciled the same way."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from venues.database import Base
from venues.utils.clock import utcnow


class Turnstile(Base):
    __tablename__ = "turnstiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    place_id = Column(Integer, ForeignKey("places.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Turnstile {self.id} name={self.name} place={self.place_id}>"
