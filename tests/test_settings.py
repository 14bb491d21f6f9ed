import pathlib

from uploader.settings import Settings


def test_defaults():
    s = Settings()
    assert s.refresh_horizon_seconds == 90000
    assert s.scopes == ["https://www.googleapis.com/auth/drive.file"]
    assert s.auth_port == 8888
    assert s.auth_timeout_seconds is None
    assert s.upload_name == "export.csv"
    assert s.upload_mime_type == "text/csv"
    assert s.token_path == pathlib.Path("tokens/user.json")


def test_from_env(monkeypatch):
    monkeypatch.setenv("DRIVE_UPLOAD_TOKEN_DIR", "/tmp/tok")
    monkeypatch.setenv("DRIVE_UPLOAD_USER_ID", "alice")
    monkeypatch.setenv(
        "DRIVE_UPLOAD_SCOPES",
        "https://www.googleapis.com/auth/drive.file, https://www.googleapis.com/auth/drive",
    )
    monkeypatch.setenv("DRIVE_UPLOAD_AUTH_TIMEOUT", "120")
    monkeypatch.setenv("DRIVE_UPLOAD_REFRESH_HORIZON", "600")
    s = Settings.from_env()
    assert s.token_path == pathlib.Path("/tmp/tok/alice.json")
    assert s.scopes == [
        "https://www.googleapis.com/auth/drive.file",
        "https://www.googleapis.com/auth/drive",
    ]
    assert s.auth_timeout_seconds == 120
    assert s.refresh_horizon_seconds == 600


def test_from_env_blank_scopes_fall_back(monkeypatch):
    monkeypatch.setenv("DRIVE_UPLOAD_SCOPES", " , ")
    assert Settings.from_env().scopes == ["https://www.googleapis.com/auth/drive.file"]
