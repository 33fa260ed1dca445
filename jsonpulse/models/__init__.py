"""SQLAlchemy models."""

from jsonpulse.models.json_file import JsonFile
from jsonpulse.models.user import User

__all__ = [
    "User",
    "JsonFile",
]
