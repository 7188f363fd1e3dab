"""Singleton house settings (total bedrooms). Only admins change it."""
from sqlalchemy import Column, Integer, ForeignKey, DateTime
from sqlalchemy.sql import func
from sunescape.database import Base

SETTINGS_ROW_ID = 1


class HouseSettings(Base):
    __tablename__ = "settings"

    id = Column(Integer, primary_key=True, default=SETTINGS_ROW_ID)
    total_rooms = Column(Integer, nullable=False)
    updated_by = Column(Integer, ForeignKey("profiles.id"), nullable=True)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
