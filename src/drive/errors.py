"""Error types raised by the Drive upload flow."""

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    RESOURCE_NOT_FOUND = "resource_not_found"
    FILE_NOT_FOUND = "file_not_found"
    AUTH_FAILURE = "auth_failure"
    REMOTE_REJECTED = "remote_rejected"
    SECURITY_FAILURE = "security_failure"


class DriveUploadError(Exception):
    """Base class for every failure of an upload run."""

    kind: ErrorKind


class ResourceNotFoundError(DriveUploadError):
    """The client-secret resource could not be located."""

    kind = ErrorKind.RESOURCE_NOT_FOUND


class SourceFileNotFoundError(DriveUploadError):
    """The local file to upload is missing or unreadable."""

    kind = ErrorKind.FILE_NOT_FOUND


class AuthFailureError(DriveUploadError):
    """The OAuth2 flow was denied, timed out or could not be completed."""

    kind = ErrorKind.AUTH_FAILURE


class SecurityFailureError(DriveUploadError):
    """Transport or TLS setup failed."""

    kind = ErrorKind.SECURITY_FAILURE


class RemoteRejectedError(DriveUploadError):
    """Drive rejected the request (bad folder id, quota, permission, ...)."""

    kind = ErrorKind.REMOTE_REJECTED

    def __init__(
        self, message: str, status: Optional[int] = None, reason: str = "", details: Any = None
    ) -> None:
        super().__init__(message)
        self.status = status
        self.reason = reason
        self.details = details
