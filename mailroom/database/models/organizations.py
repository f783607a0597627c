"""Organization model."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from mailroom.utils.nanoid import NANO_ID_LENGTH, nano_id

from .base import Base

ORG_NAME_MIN_LENGTH = 3
ORG_NAME_MAX_LENGTH = 32


class Organization(Base):
    __tablename__ = "organizations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    public_id: Mapped[str] = mapped_column(
        String(NANO_ID_LENGTH), unique=True, nullable=False, default=nano_id
    )
    name: Mapped[str] = mapped_column(String(ORG_NAME_MAX_LENGTH), nullable=False)
    avatar_id: Mapped[str | None] = mapped_column(String, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    members = relationship(
        "OrgMember", back_populates="organization", cascade="all, delete-orphan"
    )
