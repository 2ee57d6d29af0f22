# backend/projecthub/errors.py


class ProjectHubError(Exception):
    """Base error; status_code is what the HTTP layer answers with"""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ProjectHubError):
    """A required form field is missing or malformed"""
    status_code = 400


class BadRequest(ProjectHubError):
    status_code = 400


class NotFound(ProjectHubError):
    status_code = 404


class UploadRejected(ProjectHubError):
    """Attachment refused: disallowed media type or too large"""
    status_code = 400

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class ConstraintViolation(ProjectHubError):
    """The database refused the row (foreign key or NOT NULL)"""
    status_code = 500


class StoreError(ProjectHubError):
    status_code = 500
