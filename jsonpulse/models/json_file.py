"""JSON file model."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship, validates

from jsonpulse.database import Base
from jsonpulse.models.mixins import TimestampMixin


def file_name_key(file_name: str) -> str:
    """Case-folded form of a file name; names are unique per owner on this key."""
    return file_name.casefold()


class JsonFile(Base, TimestampMixin):
    """A named JSON document owned by a single user."""

    __tablename__ = "json_files"
    __table_args__ = (
        UniqueConstraint("user_id", "file_name_key", name="uq_json_files_user_file_name_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    file_name = Column(String(255), nullable=False)
    # casefold() can lengthen a name ("ß" -> "ss"), hence the wider column
    file_name_key = Column(String(1024), nullable=False)
    content = Column(Text, nullable=False)  # raw JSON text, validated on write
    views = Column(Integer, nullable=False, default=0, server_default="0")

    # Relationships
    owner = relationship("User", back_populates="files")

    @validates("file_name")
    def _sync_file_name_key(self, key: str, value: str) -> str:
        """Keep file_name_key in step with file_name."""
        self.file_name_key = file_name_key(value)
        return value
