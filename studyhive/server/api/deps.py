# studyhive/server/api/deps.py

import logging
from contextlib import contextmanager

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from studyhive.server.core.errors import AuthError, ServerError, StudyHiveError
from studyhive.server.core.owned import OwnedCollection
from studyhive.server.core.security import decode_access_token
from studyhive.server.core.store import Store


logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """
    Resolves the caller from 'Authorization: Bearer <token>'.
    This is the only gate in front of the resource routes; ownership of
    individual records is checked by the collections themselves.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError("No token provided")
    try:
        return decode_access_token(credentials.credentials)
    except AuthError:
        logger.warning("Token verification failed")
        raise


def get_deadlines(store: Store = Depends(get_store)) -> OwnedCollection:
    return OwnedCollection(store.deadlines, "Deadline")


def get_courses(store: Store = Depends(get_store)) -> OwnedCollection:
    return OwnedCollection(store.courses, "Course")


def get_study_sessions(store: Store = Depends(get_store)) -> OwnedCollection:
    return OwnedCollection(store.study_sessions, "Study session")


@contextmanager
def server_errors(action: str, message: str = "Server error"):
    """
    Lets StudyHiveError through untouched and turns anything else into a
    logged ServerError carrying a short, internals-free message.
    """
    try:
        yield
    except StudyHiveError:
        raise
    except Exception as e:
        logger.exception(f"{action} error")
        raise ServerError(message) from e
