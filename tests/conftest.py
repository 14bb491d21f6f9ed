import json
from datetime import datetime, timedelta, timezone

import pytest
from google.oauth2.credentials import Credentials

from uploader.settings import Settings

TOKEN_URI = "https://oauth2.googleapis.com/token"
CLIENT_SECRET = {
    "installed": {
        "client_id": "cid.apps.googleusercontent.com",
        "client_secret": "csecret",
        "auth_uri": "https://accounts.google.com/o/oauth2/auth",
        "token_uri": TOKEN_URI,
        "redirect_uris": ["http://localhost"],
    }
}


def make_creds(expires_in: float, token: str = "access", refresh_token="refresh") -> Credentials:
    expiry = datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(seconds=expires_in)
    return Credentials(
        token=token,
        refresh_token=refresh_token,
        token_uri=TOKEN_URI,
        client_id="cid.apps.googleusercontent.com",
        client_secret="csecret",
        scopes=["https://www.googleapis.com/auth/drive.file"],
        expiry=expiry,
    )


class FakeRequest:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error

    def execute(self):
        if self.error is not None:
            raise self.error
        return self.result


class FakeDriveService:
    """In-memory stand-in for the Drive v3 service; stores created files."""

    def __init__(self, error=None):
        self.error = error
        self.calls = []
        self.created = {}

    def files(self):
        return self

    def create(self, body, media_body, fields, supportsAllDrives):
        self.calls.append(
            {
                "body": body,
                "fields": fields,
                "supportsAllDrives": supportsAllDrives,
                "mimetype": media_body.mimetype(),
                "content": media_body.getbytes(0, media_body.size()),
            }
        )
        if self.error is not None:
            return FakeRequest(error=self.error)
        file_id = f"file-{len(self.created) + 1}"
        self.created[file_id] = body
        return FakeRequest(result={"id": file_id})


@pytest.fixture
def settings(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    secret = tmp_path / "credential.json"
    secret.write_text(json.dumps(CLIENT_SECRET))
    return Settings(client_secret_path=secret, token_dir=tmp_path / "tokens")


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "report.csv"
    path.write_text("a,b\n1,2\n")
    return path
