from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from fittrack.db.base import Base, new_id, utcnow

FITNESS_GOALS = ("weight_loss", "muscle_gain", "endurance", "general_health")
FITNESS_LEVELS = ("beginner", "intermediate", "advanced")


class FitnessProfile(Base):
    __tablename__ = "fitness_profiles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # Not unique: the newest row is the one served (see DatabaseStorage.get_fitness_profile)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)  # kg
    height: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)  # cm
    fitness_goal: Mapped[str | None] = mapped_column(String(50), nullable=True)
    fitness_level: Mapped[str | None] = mapped_column(String(20), nullable=True)
    preferences: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user: Mapped["User"] = relationship("User", back_populates="fitness_profiles")
