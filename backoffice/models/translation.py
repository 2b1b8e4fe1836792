"""Translation model: one row per translatable item, locale → string map."""

from datetime import datetime
from typing import Optional

from sqlalchemy import JSON, DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Translation(Base):
    __tablename__ = "translations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # "<listType>_<itemId>", e.g. "skills_42"
    key: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    list_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, index=True)
    translations: Mapped[dict[str, str]] = mapped_column(JSON, default=dict, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, server_default=func.now(), onupdate=func.now(), nullable=False
    )
