"""User model."""

from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import relationship

from jsonpulse.database import Base
from jsonpulse.models.enums import UserType
from jsonpulse.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Account that owns JSON files and at most one API key."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)  # always lowercase
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    mobile = Column(String(50), nullable=True)
    type = Column(
        Enum(UserType, name="user_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserType.USER,
        server_default=UserType.USER.value,
    )
    api_key = Column(String(20), unique=True, nullable=True, index=True)
    preview_url = Column(String(2048), nullable=True)

    # Relationships
    files = relationship("JsonFile", back_populates="owner", cascade="all, delete-orphan")
