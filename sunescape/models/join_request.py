"""Targeted request from a non-owner to join an existing reservation."""
import enum

from sqlalchemy import Column, Integer, Text, ForeignKey, DateTime, Enum as SQLEnum, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sunescape.database import Base


class JoinRequestStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    denied = "denied"


class JoinRequest(Base):
    __tablename__ = "join_requests"
    __table_args__ = (
        UniqueConstraint("reservation_id", "requester_id", name="uq_join_requests_reservation_requester"),
    )

    id = Column(Integer, primary_key=True, index=True)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"), nullable=False, index=True)
    requester_id = Column(Integer, ForeignKey("profiles.id"), nullable=False, index=True)
    rooms_needed = Column(Integer, nullable=False, default=1)
    message = Column(Text, nullable=True)
    status = Column(SQLEnum(JoinRequestStatus), nullable=False, default=JoinRequestStatus.pending)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    reservation = relationship("Reservation", backref="join_requests")
    requester = relationship("Profile")
