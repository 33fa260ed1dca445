"""Service-level tests for tokens and password handling."""

from datetime import UTC, datetime, timedelta

from jose import jwt

from jsonpulse.config import get_settings
from jsonpulse.models.enums import UserType
from jsonpulse.schemas.auth import Identity
from jsonpulse.services.auth import (
    authenticate_user,
    create_access_token,
    create_user,
    decode_access_token,
    get_password_hash,
    verify_password,
)

settings = get_settings()


def make_identity() -> Identity:
    return Identity(
        id=7, email="t@example.com", first_name="T", last_name="User", type=UserType.ADMIN
    )


def test_password_hash_roundtrip():
    hashed = get_password_hash("s3cret-pass")
    assert hashed != "s3cret-pass"
    assert verify_password("s3cret-pass", hashed)
    assert not verify_password("other-pass", hashed)


def test_token_carries_identity():
    token = create_access_token(make_identity())
    payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    assert payload["firstName"] == "T"
    assert payload["type"] == "admin"
    assert payload["sub"] == "7"

    assert decode_access_token(token) == make_identity()


def test_expired_token_rejected():
    claims = make_identity().model_dump(mode="json", by_alias=True)
    claims["exp"] = datetime.now(UTC) - timedelta(minutes=1)
    token = jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    assert decode_access_token(token) is None


def test_token_signed_with_other_secret_rejected():
    claims = make_identity().model_dump(mode="json", by_alias=True)
    token = jwt.encode(claims, "another-secret", algorithm=settings.jwt_algorithm)
    assert decode_access_token(token) is None


def test_token_missing_claims_rejected():
    token = jwt.encode({"sub": "1"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    assert decode_access_token(token) is None


def test_authenticate_user(db):
    user = create_user(db, "Svc@Example.com", "pw-123456", "Svc", "User")
    assert user.email == "svc@example.com"
    assert user.type == UserType.USER
    assert user.api_key is None

    assert authenticate_user(db, "SVC@example.com", "pw-123456").id == user.id
    assert authenticate_user(db, "svc@example.com", "wrong") is None
    assert authenticate_user(db, "nobody@example.com", "pw-123456") is None
