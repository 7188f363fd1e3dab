"""Reservations: a date-ranged booking of a number of rooms by one user."""
from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sunescape.database import Base


class Reservation(Base):
    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    # Inclusive on both ends
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    rooms = Column(Integer, nullable=False)

    occasion = Column(String(255), nullable=True)
    guests = Column(Text, nullable=True)  # free-text, separate from reservation_guests

    created_by = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    owner = relationship("Profile", backref="reservations")
