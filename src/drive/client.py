import pathlib
import ssl
from typing import Any, Optional, Union

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload
from loguru import logger

from uploader.settings import Settings

from .errors import RemoteRejectedError, SecurityFailureError, SourceFileNotFoundError
from .folder import GoogleDriveFolder


class GoogleDriveClient:
    """Client for uploading files to Google Drive.

    Wraps an authorized Drive v3 service built from already loaded credentials.
    """

    def __init__(self, credentials: Credentials, settings: Optional[Settings] = None):
        """Initialize the Google Drive client.

        Args:
            credentials: Authorized OAuth2 credentials, see drive.auth.CredentialLoader
            settings: Upload defaults (file name, content type). Defaults to Settings().
        """
        self.credentials = credentials
        self.settings = settings or Settings()
        self._service = None

    @property
    def service(self) -> Any:
        """Get or create the Drive API service."""
        if self._service is None:
            self._service = build(
                "drive", "v3", credentials=self.credentials, cache_discovery=False
            )
        return self._service

    def folder(self, folder_id: str) -> GoogleDriveFolder:
        """Get a handle on a folder by its ID without calling the API."""
        return GoogleDriveFolder(self, folder_id=folder_id)

    def upload_file(
        self,
        local_path: Union[str, pathlib.Path],
        folder_id: str,
        name: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> str:
        """Upload a local file into a Drive folder in a single multipart request.

        Every call creates a new remote file, even for identical arguments.

        Args:
            local_path: Path to the local file to upload
            folder_id: ID of the destination folder (shared drives are supported)
            name: Remote file name. Defaults to settings.upload_name
            mime_type: Content type. Defaults to settings.upload_mime_type

        Returns:
            ID of the uploaded file

        Raises:
            SourceFileNotFoundError: If the local file is missing or unreadable
            RemoteRejectedError: If Drive rejects the request
            SecurityFailureError: If the TLS connection to Drive fails
        """
        path = pathlib.Path(local_path)
        body = {"name": name or self.settings.upload_name, "parents": [folder_id]}

        try:
            fh = path.open("rb")
        except OSError as e:
            raise SourceFileNotFoundError(f"Unable to read file to upload: {path} ({e})") from e

        with fh:
            media = MediaIoBaseUpload(
                fh, mimetype=mime_type or self.settings.upload_mime_type, resumable=False
            )
            try:
                created = (
                    self.service.files()
                    .create(body=body, media_body=media, fields="id", supportsAllDrives=True)
                    .execute()
                )
            except HttpError as e:
                detail = e.error_details or e.reason
                logger.error(f"Unable to upload file: {detail}")
                raise RemoteRejectedError(
                    f"Drive rejected upload of {path} ({e.resp.status}): {e.reason}",
                    status=e.resp.status,
                    reason=e.reason,
                    details=e.error_details,
                ) from e
            except ssl.SSLError as e:
                raise SecurityFailureError(f"TLS failure talking to Drive: {e}") from e

        file_id = created["id"]
        logger.info(f"Uploaded {path} as {file_id} into folder {folder_id}")
        return file_id
