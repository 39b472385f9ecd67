"""SQLAlchemy ORM models."""

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from snippet_studio.infrastructure.database.base import Base


class Account(Base):
    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(100), unique=True)
    role = Column(String(20), nullable=False, default="user")
    is_active = Column(Boolean, default=True)
    subscription_status = Column(String(20))
    subscription_plan = Column(String(20))
    subscription_provider = Column(String(20))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())


class UiTemplate(Base):
    __tablename__ = "ui_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False, index=True)
    description = Column(Text, nullable=False)
    code_html = Column(Text, nullable=False)
    code_css = Column(Text, nullable=False, default="")
    code_js = Column(Text, nullable=False, default="")
    preview_image = Column(String(500))
    tags = Column(JSON)
    created_by = Column(Integer, ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    author = relationship("Account")
