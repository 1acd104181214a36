from __future__ import annotations

from datetime import datetime
from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from fittrack.db.base import Base, new_id, utcnow


class User(Base):
    """Account mirrored from the identity provider; written only by upsert on sync."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True, index=True)
    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    profile_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Child rows are removed by ON DELETE CASCADE in the database
    fitness_profiles: Mapped[list["FitnessProfile"]] = relationship(
        "FitnessProfile", back_populates="user", passive_deletes=True
    )
    workouts: Mapped[list["Workout"]] = relationship("Workout", back_populates="user", passive_deletes=True)
    health_metrics: Mapped[list["HealthMetric"]] = relationship(
        "HealthMetric", back_populates="user", passive_deletes=True
    )
    hiking_sessions: Mapped[list["HikingSession"]] = relationship(
        "HikingSession", back_populates="user", passive_deletes=True
    )
    notifications: Mapped[list["Notification"]] = relationship(
        "Notification", back_populates="user", passive_deletes=True
    )
