"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jsonpulse.config import get_settings
from jsonpulse.exceptions import ConflictError
from jsonpulse.models.enums import UserType
from jsonpulse.models.user import User
from jsonpulse.schemas.auth import Identity

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def normalize_email(email: str) -> str:
    """Emails are stored and compared in lowercase."""
    return email.strip().lower()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def identity_for(user: User) -> Identity:
    """Identity claims for a user row."""
    return Identity(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        type=user.type,
    )


def create_access_token(identity: Identity) -> str:
    """Create a signed JWT carrying the caller's identity."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = identity.model_dump(mode="json", by_alias=True)
    to_encode.update(
        {
            "sub": str(identity.id),
            "iat": datetime.now(UTC),
            "exp": expire,
        }
    )
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Identity | None:
    """Verify a JWT and return its identity, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    try:
        return Identity.model_validate(payload)
    except ValidationError:
        return None


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email (case-insensitive)."""
    return db.query(User).filter(User.email == normalize_email(email)).first()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by primary key."""
    return db.query(User).filter(User.id == user_id).first()


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """Authenticate a user by email and password.

    Returns None both for an unknown email and for a wrong password so that
    callers cannot tell the two apart.
    """
    user = get_user_by_email(db, email)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def create_user(
    db: Session,
    email: str,
    password: str,
    first_name: str,
    last_name: str,
    mobile: str | None = None,
    user_type: UserType = UserType.USER,
) -> User:
    """Register a new user.

    Raises:
        ConflictError: if the email is already registered.
    """
    email = normalize_email(email)
    if get_user_by_email(db, email):
        raise ConflictError("Email already registered")

    user = User(
        email=email,
        password_hash=get_password_hash(password),
        first_name=first_name,
        last_name=last_name,
        mobile=mobile or None,
        type=user_type,
        api_key=None,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent signup for the same email
        db.rollback()
        raise ConflictError("Email already registered") from None
    db.refresh(user)
    logger.info(f"Registered user {user.id}")
    return user
