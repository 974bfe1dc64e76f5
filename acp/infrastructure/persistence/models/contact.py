"""ContactTopic and ContactSetting ORM models (notification subscriptions)."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from acp.infrastructure.persistence.database import Base
from acp.infrastructure.persistence.models.mixins import CuidMixin, EntityModel


class ContactTopic(EntityModel, Base):
    """Subscribable notification category. Table: contact_topic. Reference data."""

    __tablename__ = "contact_topic"

    name: Mapped[str] = mapped_column(String(128), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (UniqueConstraint("name", name="uq_contact_topic_name"),)


class ContactSetting(CuidMixin, Base):
    """Existence means: deliver this topic to this user via this mode.

    Table: contact_setting. Unique (user_id, topic, mode). Rows are inserted
    and deleted, never updated.
    """

    __tablename__ = "contact_setting"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False
    )
    topic: Mapped[str] = mapped_column(String(128), nullable=False)
    mode: Mapped[str] = mapped_column(String(16), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("user_id", "topic", "mode", name="uq_contact_setting_cell"),
        Index("ix_contact_setting_topic_mode", "topic", "mode"),
    )
