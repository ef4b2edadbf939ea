"""Exceptions for Toon API Client."""
from typing import Optional

class ToonError(Exception):
    """Base class for all Toon errors."""
    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status

class ToonConfigError(ToonError):
    """Missing credentials or unusable configuration file."""
    pass

class ToonConnectionError(ToonError):
    """Network connection issues (DNS, Timeout, etc)."""
    pass

class ToonDecodeError(ToonError):
    """Response body is not the expected JSON document."""
    pass

class ToonAuthError(ToonError):
    """Login rejected, no usable agreement, or 401/403."""
    pass

class ToonNotFoundError(ToonError):
    """404 Resource not found."""
    pass

class ToonServerError(ToonError):
    """5xx Server Error."""
    pass

class ToonResponseError(ToonError):
    """The API answered with success=false."""
    pass

class ToonValidationError(ToonError):
    """Invalid input rejected before any request is sent."""
    pass

class ToonUnsupportedError(ToonError):
    """Operation is not supported by this client."""
    pass
