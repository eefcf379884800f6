# venues/models/event.py
"""
Events table — a scheduled occupation of a place over [date_start, date_end].
Windows at the same place must not overlap (checked by the admission pipeline,
not by a DB constraint). date_start / date_end are naive UTC.
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from venues.database import Base
from venues.utils.clock import utcnow


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    place_id = Column(Integer, ForeignKey("places.id"), nullable=False, index=True)
    event = Column(String(200), nullable=False, index=True)   # display name
    type = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False)
    phone = Column(String(50), nullable=False)
    date_start = Column(DateTime, nullable=False, index=True)
    date_end = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    place = relationship("Place", viewonly=True)

    def __repr__(self):
        return f"<Event {self.id} name={self.event} place={self.place_id} {self.date_start}→{self.date_end}>"
