import datetime
from decimal import Decimal
from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from fittrack.db.base import Base, new_id, utcnow


class HikingSession(Base):
    __tablename__ = "hiking_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    distance: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)  # km
    elevation_gain: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)  # m
    duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    calories_burned: Mapped[int | None] = mapped_column(Integer, nullable=True)
    route_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    user: Mapped["User"] = relationship("User", back_populates="hiking_sessions")
