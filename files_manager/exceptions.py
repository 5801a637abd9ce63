"""
Domain exceptions raised by the service layer.

Services never build HTTP responses themselves. They raise one of these
exceptions and the handlers registered in ``files_manager.main`` turn them
into ``{"error": message}`` bodies with the matching status code.
"""


class FilesManagerError(Exception):
    """Base exception for files manager operations."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AuthenticationError(FilesManagerError):
    """Raised when the request carries no valid session token."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ValidationError(FilesManagerError):
    """Raised when a request payload breaks an input rule."""

    status_code = 400


class NotFoundError(FilesManagerError):
    """Raised when a record does not exist or is not visible to the caller."""

    status_code = 404

    def __init__(self, message: str = "Not found"):
        super().__init__(message)
