"""Enums for model fields."""

from enum import Enum


class UserType(str, Enum):
    """Account types. Every account is owner-only; admin is a label for now."""

    USER = "user"
    ADMIN = "admin"
