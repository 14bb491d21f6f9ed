import pathlib
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .client import GoogleDriveClient


class GoogleDriveFolder:
    """Represents a folder in Google Drive."""

    def __init__(
        self,
        client: "GoogleDriveClient",  # using string to avoid circular import
        folder_id: str,
        web_link: Optional[str] = None,
    ):
        """Initialize a Google Drive folder.

        Args:
            client: The GoogleDriveClient instance
            folder_id: The folder's Google Drive ID
            web_link: Optional web link to the folder
        """
        self.client = client
        self.id = folder_id
        self.web_link = web_link or f"https://drive.google.com/drive/folders/{folder_id}"

    def upload_file(self, local_path: Union[str, pathlib.Path]) -> str:
        """Upload a file to this folder.

        Args:
            local_path: Path to the local file to upload

        Returns:
            ID of the uploaded file
        """
        return self.client.upload_file(local_path, folder_id=self.id)
