# studyhive/app/services/api.py

import requests

from studyhive.app.config import API_URL, REQUEST_TIMEOUT


class ApiError(Exception):
    """
    A failed call to the backend. status is 0 when the server could not be
    reached at all; message is the server's 'error' string when it sent one.
    """

    def __init__(self, status: int, message: str):
        super().__init__(message)
        self.status = status
        self.message = message


def _auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


def _request(method, path, token=None, json=None):
    headers = _auth_headers(token) if token else {}
    try:
        res = requests.request(
            method,
            f"{API_URL}{path}",
            json=json,
            headers=headers,
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        raise ApiError(0, f"Could not reach the server: {e}")

    if res.status_code == 204:
        return None

    try:
        data = res.json()
    except ValueError:
        data = None

    if not res.ok:
        message = data.get("error") if isinstance(data, dict) else None
        raise ApiError(res.status_code, message or f"Request failed ({res.status_code})")
    return data


# -------------------------------
# Authentication-related functions
# -------------------------------

def register_user(name, email, password):
    """
    Creates an account. Returns {"token", "user"}.
    """
    return _request("POST", "/api/auth/register", json={"name": name, "email": email, "password": password})


def login_user(email, password):
    """
    Logs in a user. Returns {"token", "user"}.
    """
    return _request("POST", "/api/auth/login", json={"email": email, "password": password})


def get_user_info(token):
    return _request("GET", "/api/auth/me", token=token)


# -------------------------
# Deadlines
# -------------------------

def list_deadlines(token):
    return _request("GET", "/api/deadlines", token=token)


def create_deadline(token, deadline):
    return _request("POST", "/api/deadlines", token=token, json=deadline)


def update_deadline(token, deadline_id, updates):
    return _request("PUT", f"/api/deadlines/{deadline_id}", token=token, json=updates)


def delete_deadline(token, deadline_id):
    _request("DELETE", f"/api/deadlines/{deadline_id}", token=token)


# -------------------------
# Courses and Study Sessions
# -------------------------

def list_courses(token):
    return _request("GET", "/api/courses", token=token)


def create_course(token, course):
    return _request("POST", "/api/courses", token=token, json=course)


def list_study_sessions(token):
    return _request("GET", "/api/study-sessions", token=token)


def create_study_session(token, session):
    return _request("POST", "/api/study-sessions", token=token, json=session)

