from typing import Optional


class AdapterError(Exception):
    """Request-level failure that maps to an HTTP status and an {"error": ...} body."""
    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AuthorizationError(AdapterError):
    """Shared secret missing or wrong."""
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class BadRequestError(AdapterError):
    """Envelope is not a tool-calls message."""
    status_code = 400


class ToolArgumentError(AdapterError):
    """A known tool was called without its required arguments. Aborts the batch."""
    status_code = 500
