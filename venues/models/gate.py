# venues/models/gate.py
"""Gates table — named access points, owned by exactly one place."""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from venues.database import Base
from venues.utils.clock import utcnow


class Gate(Base):
    __tablename__ = "gates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    place_id = Column(Integer, ForeignKey("places.id"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f"<Gate {self.id} name={self.name} place={self.place_id}>"
