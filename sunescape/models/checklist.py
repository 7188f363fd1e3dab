"""Shared groceries and to-do lists."""
from sqlalchemy import Column, Integer, String, Boolean, ForeignKey, DateTime
from sqlalchemy.sql import func
from sunescape.database import Base


class Grocery(Base):
    __tablename__ = "groceries"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    owner = Column(String(255), nullable=True)  # free-text "who is bringing it"
    completed = Column(Boolean, nullable=False, default=False)

    created_by = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Todo(Base):
    __tablename__ = "todos"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    owner = Column(String(255), nullable=True)
    completed = Column(Boolean, nullable=False, default=False)

    created_by = Column(Integer, ForeignKey("profiles.id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
