import pathlib
from datetime import datetime, timezone
from typing import Any, Callable, Optional

import requests
from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from loguru import logger
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from uploader.settings import Settings

from .errors import AuthFailureError, ResourceNotFoundError, SecurityFailureError

BUNDLE_DIR = pathlib.Path(__file__).resolve().parent

FlowFactory = Callable[..., Any]


class CredentialLoader:
    """Loads OAuth2 credentials for Drive, running the browser consent when needed.

    Tokens are cached as JSON under ``settings.token_dir`` so later runs skip the consent.
    """

    def __init__(
        self,
        settings: Settings,
        flow_factory: FlowFactory = InstalledAppFlow.from_client_secrets_file,
        bundle_dir: pathlib.Path = BUNDLE_DIR,
    ) -> None:
        """Initialize the loader.

        Args:
            settings: Run configuration (secret path, token dir, scopes, port, horizon)
            flow_factory: Builds the installed-app flow from a client secrets file
            bundle_dir: Fallback directory holding the bundled client secret
        """
        self.settings = settings
        self.flow_factory = flow_factory
        self.bundle_dir = bundle_dir

    def load(self) -> Credentials:
        """Return credentials whose remaining lifetime exceeds the refresh horizon.

        Raises:
            ResourceNotFoundError: If the client secret cannot be found.
            AuthFailureError: If consent or the refresh exchange fails.
            SecurityFailureError: If the token endpoint cannot be reached securely.
        """
        secret_path = self.resolve_client_secret()

        creds = self._read_cached()
        if creds is not None and (creds.refresh_token or creds.valid):
            logger.info(f"Using cached token {self.settings.token_path}")
        else:
            creds = self._run_consent(secret_path)
            self._write_token(creds)

        if self.seconds_until_expiry(creds) <= self.settings.refresh_horizon_seconds:
            self._refresh(creds)
        return creds

    def resolve_client_secret(self) -> pathlib.Path:
        path = self.settings.client_secret_path
        candidates = [path] if path.is_absolute() else [path, self.bundle_dir / path]
        for candidate in candidates:
            if candidate.is_file():
                return candidate
        raise ResourceNotFoundError(f"Resource could not be found: {path}")

    @staticmethod
    def seconds_until_expiry(creds: Credentials) -> float:
        """Seconds left before the access token expires; 0 when the expiry is unknown."""
        if creds.expiry is None:
            return 0.0
        now = datetime.now(timezone.utc)
        if creds.expiry.tzinfo is None:
            # google-auth keeps expiry as naive UTC
            now = now.replace(tzinfo=None)
        return (creds.expiry - now).total_seconds()

    def _read_cached(self) -> Optional[Credentials]:
        path = self.settings.token_path
        if not path.exists():
            return None
        try:
            return Credentials.from_authorized_user_file(str(path), self.settings.scopes)
        except (ValueError, KeyError) as e:
            logger.warning(f"token file {path} unreadable, asking for consent again: {e}")
            return None

    def _write_token(self, creds: Credentials) -> None:
        path = self.settings.token_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(creds.to_json())
        logger.debug(f"Wrote token: {path}")

    def _run_consent(self, secret_path: pathlib.Path) -> Credentials:
        try:
            flow = self.flow_factory(str(secret_path), self.settings.scopes)
        except ValueError as e:
            raise AuthFailureError(f"Invalid client secret {secret_path}: {e}") from e

        port = self.settings.auth_port
        logger.info(f"Opening browser for consent, waiting for redirect on localhost:{port}")
        # run_local_server closes its listener on every exit path
        try:
            creds = flow.run_local_server(
                port=port,
                access_type="offline",
                prompt="consent",
                timeout_seconds=self.settings.auth_timeout_seconds,
            )
        except OAuth2Error as e:
            raise AuthFailureError(f"OAuth consent failed: {e.description or e.error}") from e
        except requests.exceptions.SSLError as e:
            raise SecurityFailureError(f"TLS failure talking to the token endpoint: {e}") from e
        except AttributeError as e:
            # no redirect arrived before the listener timeout, so there is no request uri
            if self.settings.auth_timeout_seconds is None:
                raise
            raise AuthFailureError("OAuth consent timed out waiting for the redirect") from e

        logger.info("OAuth consent completed")
        return creds

    def _refresh(self, creds: Credentials) -> None:
        if not creds.refresh_token:
            logger.warning("token is near expiry but has no refresh token, skipping refresh")
            return
        try:
            creds.refresh(Request())
        except RefreshError as e:
            raise AuthFailureError(f"Token refresh rejected: {e}") from e
        except TransportError as e:
            raise SecurityFailureError(f"Token refresh transport failure: {e}") from e
        self._write_token(creds)
        logger.info("Refreshed access token")
