# studyhive/server/api/auth.py

import logging
from pydantic import BaseModel
from fastapi import APIRouter, Depends, status

from studyhive.server.api.deps import get_store, get_current_user_id, server_errors
from studyhive.server.core.errors import AuthError, ConflictError, NotFoundError, ValidationError
from studyhive.server.core.security import (
    create_access_token,
    get_password_hash,
    normalize_email,
    validate_email,
    validate_password,
    verify_password,
)
from studyhive.server.core.store import Store, new_id
from studyhive.server.core.timeutil import utc_now


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth")


class RegisterRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


def public_user(user: dict) -> dict:
    return {"id": user["id"], "name": user["name"], "email": user["email"]}


def authenticate_user(store: Store, email: str, password: str) -> dict | None:
    user = store.users.find_first(email=normalize_email(email))
    if not user or not verify_password(password, user["password"]):
        return None
    return user


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(req: RegisterRequest, store: Store = Depends(get_store)):
    with server_errors("Register", "Server error occurred during registration"):
        if not req.name or not req.email or not req.password:
            raise ValidationError("All fields are required")

        email = normalize_email(req.email)
        validate_email(email)
        validate_password(req.password)

        if store.users.find_first(email=email):
            logger.info("Registration rejected, email already registered")
            raise ConflictError("An account with this email already exists")

        user = store.users.insert_unique({
            "id": new_id(),
            "name": req.name.strip(),
            "email": email,
            "password": get_password_hash(req.password),
            "created_at": utc_now(),
        }, email=email)
        if user is None:
            # registered by a concurrent request while hashing
            logger.info("Registration rejected, email already registered")
            raise ConflictError("An account with this email already exists")
        logger.info(f"User created: {user['id']}")

        return {
            "token": create_access_token(user["id"], user["email"]),
            "user": public_user(user),
        }


@router.post("/login")
def login(req: LoginRequest, store: Store = Depends(get_store)):
    with server_errors("Login", "Server error occurred during login"):
        if not req.email or not req.password:
            raise ValidationError("Email and password are required")

        user = authenticate_user(store, req.email, req.password)
        if not user:
            raise AuthError("Invalid email or password")

        logger.info(f"Login successful: {user['id']}")
        return {
            "token": create_access_token(user["id"], user["email"]),
            "user": public_user(user),
        }


@router.get("/me")
def read_users_me(
    user_id: str = Depends(get_current_user_id),
    store: Store = Depends(get_store),
):
    with server_errors("Get user"):
        user = store.users.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return public_user(user)
