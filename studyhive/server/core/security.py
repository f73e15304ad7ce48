# studyhive/server/core/security.py

import re
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from studyhive.server.config import (
    SECRET_KEY,
    ALGORITHM,
    ACCESS_TOKEN_EXPIRE_DAYS,
    BCRYPT_ROUNDS,
)
from studyhive.server.core.errors import AuthError, ValidationError


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Checked in order; the first failing rule is reported.
PASSWORD_RULES = [
    (lambda pwd: len(pwd) >= 8, "Password must be at least 8 characters long"),
    (lambda pwd: re.search(r"[A-Z]", pwd), "Password must contain at least one uppercase letter"),
    (lambda pwd: re.search(r"[a-z]", pwd), "Password must contain at least one lowercase letter"),
    (lambda pwd: re.search(r"\d", pwd), "Password must contain at least one number"),
    (lambda pwd: re.search(r'[!@#$%^&*(),.?":{}|<>]', pwd), "Password must contain at least one special character"),
]


def validate_password(password: str) -> None:
    for test, message in PASSWORD_RULES:
        if not test(password):
            raise ValidationError(message)


def validate_email(email: str) -> None:
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Please enter a valid email address")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def create_access_token(user_id: str, email: str, expires_delta: timedelta | None = None) -> str:
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS))
    to_encode = {"sub": user_id, "email": email, "iat": issued_at, "exp": expire}
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> str:
    """
    Returns the user id bound to the token.
    Raises AuthError if the signature or expiry check fails.
    """
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError:
        raise AuthError("Invalid token")
    user_id = payload.get("sub")
    if not user_id:
        raise AuthError("Invalid token")
    return user_id
