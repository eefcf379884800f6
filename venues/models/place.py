# venues/models/place.py
"""
Places (venues) table.
A place owns its gates and turnstiles and hosts events. Children hold the
parent reference; nothing cascades at the ORM level, place_service deletes
children explicitly before the place itself.
"""

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from venues.database import Base
from venues.utils.clock import utcnow


class Place(Base):
    __tablename__ = "places"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False, index=True)
    address = Column(String(300), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    gates = relationship("Gate", order_by="Gate.id", viewonly=True)
    turnstiles = relationship("Turnstile", order_by="Turnstile.id", viewonly=True)
    events = relationship("Event", order_by="Event.date_start", viewonly=True)

    def __repr__(self):
        return f"<Place {self.id} name={self.name}>"
