"""API key generation, rotation and removal."""

import logging
import secrets
import string

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jsonpulse.models.user import User

logger = logging.getLogger(__name__)

API_KEY_ALPHABET = string.ascii_letters + string.digits
API_KEY_LENGTH = 20
MAX_GENERATION_ATTEMPTS = 5


class ApiKeyGenerationError(RuntimeError):
    """Every generated key collided with an existing one."""


def generate_api_key() -> str:
    """Return a fresh 20-character alphanumeric key drawn from the OS CSPRNG."""
    return "".join(secrets.choice(API_KEY_ALPHABET) for _ in range(API_KEY_LENGTH))


def get_api_key(user: User) -> str | None:
    """Current API key of the user, or None if none was generated."""
    return user.api_key


def rotate_api_key(db: Session, user: User) -> str:
    """Replace the user's API key with a new one.

    The previous key stops resolving as soon as the update commits. A
    collision with another user's key violates the unique constraint and
    is retried with a new key.
    """
    for attempt in range(1, MAX_GENERATION_ATTEMPTS + 1):
        user.api_key = generate_api_key()
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.warning(f"API key collision for user {user.id} (attempt {attempt})")
            continue
        db.refresh(user)
        logger.info(f"Rotated API key for user {user.id}")
        return user.api_key

    raise ApiKeyGenerationError(
        f"Could not generate a unique API key after {MAX_GENERATION_ATTEMPTS} attempts"
    )


def delete_api_key(db: Session, user: User) -> None:
    """Remove the user's API key, revoking public access to their files."""
    user.api_key = None
    db.commit()
    logger.info(f"Deleted API key for user {user.id}")
