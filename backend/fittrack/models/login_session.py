"""Server-side login sessions created on identity sync; exchanged for access tokens."""

from datetime import datetime
from sqlalchemy import DateTime, String
from sqlalchemy.types import JSON
from sqlalchemy.orm import Mapped, mapped_column

from fittrack.db.base import Base


class LoginSession(Base):
    __tablename__ = "sessions"

    sid: Mapped[str] = mapped_column(String(64), primary_key=True)  # sha256 of the session id handed out
    sess: Mapped[dict] = mapped_column(JSON, nullable=False)  # {"user_id": ..., "claims": {...}}
    expire: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, index=True)
