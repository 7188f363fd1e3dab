"""Per-reservation guest roster and notes feed."""
from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sunescape.database import Base


class ReservationGuest(Base):
    __tablename__ = "reservation_guests"

    id = Column(Integer, primary_key=True, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    count = Column(Integer, nullable=False, default=1)

    # Set when the guest is a registered profile (directory pick or approved join request)
    user_id = Column(Integer, ForeignKey("profiles.id"), nullable=True, index=True)

    created_by = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    reservation = relationship("Reservation", backref="guest_entries")


class ReservationNote(Base):
    __tablename__ = "reservation_notes"

    id = Column(Integer, primary_key=True, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False, index=True)
    note = Column(Text, nullable=False)

    created_by = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    reservation = relationship("Reservation", backref="notes")
