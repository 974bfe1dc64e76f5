"""User and UserSettings ORM models."""

from sqlalchemy import Boolean, ForeignKey, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from acp.infrastructure.persistence.database import Base
from acp.infrastructure.persistence.models.mixins import EntityModel


class User(EntityModel, Base):
    """User model. Table: app_user. Registration and deletion live elsewhere."""

    __tablename__ = "app_user"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )

    __table_args__ = (UniqueConstraint("email", name="uq_app_user_email"),)


class UserSettings(EntityModel, Base):
    """Per-user delivery settings. Table: user_settings. One row per user."""

    __tablename__ = "user_settings"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    push_key: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (UniqueConstraint("user_id", name="uq_user_settings_user"),)
