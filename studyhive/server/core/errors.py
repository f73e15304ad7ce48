# studyhive/server/core/errors.py


class StudyHiveError(Exception):
    """
    Base class for errors that map to a client-visible HTTP response.
    The message is sent to the client as-is under the 'error' key.
    """
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StudyHiveError):
    status_code = 400


class AuthError(StudyHiveError):
    status_code = 401


class ConflictError(StudyHiveError):
    status_code = 400


class NotFoundError(StudyHiveError):
    status_code = 404


class ServerError(StudyHiveError):
    status_code = 500
