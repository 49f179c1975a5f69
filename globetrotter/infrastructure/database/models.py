"""SQLAlchemy ORM models -- PostgreSQL schema definition."""
import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    Column, String, Integer, Boolean, DateTime, Text, ForeignKey,
)
from sqlalchemy.orm import DeclarativeBase, relationship


def _utcnow():
    return datetime.now(timezone.utc)


def _new_uuid():
    return str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class Base(DeclarativeBase):
    pass


# ---------------------------------------------------------------------------
# Destinations (seeded, read-only at runtime)
# ---------------------------------------------------------------------------

class DestinationModel(Base):
    __tablename__ = "destinations"

    id = Column(String(64), primary_key=True, default=_new_uuid)
    name = Column(String(100), nullable=False, index=True)
    country = Column(String(100), nullable=False, default="")
    continent = Column(String(50), nullable=False, default="")

    clues = relationship(
        "ClueModel",
        back_populates="destination",
        order_by="ClueModel.position",
        lazy="selectin",
        cascade="all, delete-orphan",
    )
    facts = relationship(
        "FactModel",
        back_populates="destination",
        order_by="FactModel.position",
        lazy="selectin",
        cascade="all, delete-orphan",
    )


class ClueModel(Base):
    __tablename__ = "clues"

    id = Column(String(64), primary_key=True, default=_new_uuid)
    destination_id = Column(String(64), ForeignKey("destinations.id"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    difficulty = Column(String(10), nullable=False, default="medium")
    position = Column(Integer, nullable=False, default=0)

    destination = relationship("DestinationModel", back_populates="clues")


class FactModel(Base):
    __tablename__ = "facts"

    id = Column(String(64), primary_key=True, default=_new_uuid)
    destination_id = Column(String(64), ForeignKey("destinations.id"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    is_funny = Column(Boolean, nullable=False, default=False)
    position = Column(Integer, nullable=False, default=0)

    destination = relationship("DestinationModel", back_populates="facts")


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

class UserModel(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=_new_uuid)
    username = Column(String(50), unique=True, nullable=False, index=True)
    score = Column(Integer, nullable=False, default=0, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    stat = relationship("GameStatModel", back_populates="user", uselist=False, lazy="select")


# ---------------------------------------------------------------------------
# Game stats (one row per user, upserted on every answer)
# ---------------------------------------------------------------------------

class GameStatModel(Base):
    __tablename__ = "game_stats"

    id = Column(String(36), primary_key=True, default=_new_uuid)
    user_id = Column(String(36), ForeignKey("users.id"), unique=True, nullable=False, index=True)
    score = Column(Integer, nullable=False, default=0)
    correct = Column(Integer, nullable=False, default=0)
    incorrect = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    user = relationship("UserModel", back_populates="stat")
