"""Google Drive authentication and upload."""

from .auth import CredentialLoader
from .client import GoogleDriveClient
from .errors import (
    AuthFailureError,
    DriveUploadError,
    ErrorKind,
    RemoteRejectedError,
    ResourceNotFoundError,
    SecurityFailureError,
    SourceFileNotFoundError,
)
from .folder import GoogleDriveFolder

__all__ = [
    "AuthFailureError",
    "CredentialLoader",
    "DriveUploadError",
    "ErrorKind",
    "GoogleDriveClient",
    "GoogleDriveFolder",
    "RemoteRejectedError",
    "ResourceNotFoundError",
    "SecurityFailureError",
    "SourceFileNotFoundError",
]
