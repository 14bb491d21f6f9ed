import os
import pathlib
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

DEFAULT_SCOPES = ["https://www.googleapis.com/auth/drive.file"]  # files created by this app only


def _scopes_from_env() -> List[str]:
    raw = os.getenv("DRIVE_UPLOAD_SCOPES", "")
    scopes = [s.strip() for s in raw.split(",") if s.strip()]
    return scopes or list(DEFAULT_SCOPES)


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


class Settings(BaseModel):
    """Runtime configuration for a single upload run."""

    client_secret_path: pathlib.Path = pathlib.Path("credential.json")
    token_dir: pathlib.Path = pathlib.Path("tokens")
    user_id: str = "user"
    scopes: List[str] = DEFAULT_SCOPES
    auth_port: int = 8888
    auth_timeout_seconds: Optional[int] = None
    refresh_horizon_seconds: int = 90000
    upload_name: str = "export.csv"
    upload_mime_type: str = "text/csv"
    log_level: str = "INFO"

    @property
    def token_path(self) -> pathlib.Path:
        return self.token_dir / f"{self.user_id}.json"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment, reading a local .env first."""
        load_dotenv()
        return cls(
            client_secret_path=pathlib.Path(
                os.getenv("DRIVE_UPLOAD_CLIENT_SECRET", "credential.json")
            ),
            token_dir=pathlib.Path(os.getenv("DRIVE_UPLOAD_TOKEN_DIR", "tokens")),
            user_id=os.getenv("DRIVE_UPLOAD_USER_ID", "user"),
            scopes=_scopes_from_env(),
            auth_port=int(os.getenv("DRIVE_UPLOAD_AUTH_PORT", "8888")),
            auth_timeout_seconds=_optional_int("DRIVE_UPLOAD_AUTH_TIMEOUT"),
            refresh_horizon_seconds=int(os.getenv("DRIVE_UPLOAD_REFRESH_HORIZON", "90000")),
            upload_name=os.getenv("DRIVE_UPLOAD_NAME", "export.csv"),
            upload_mime_type=os.getenv("DRIVE_UPLOAD_MIME_TYPE", "text/csv"),
            log_level=os.getenv("DRIVE_UPLOAD_LOG_LEVEL", "INFO"),
        )
