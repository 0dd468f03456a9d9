"""OAuth2 authorization for the Google Tasks API.

Tokens are obtained through the installed-app flow on first use and cached
to disk; later runs reuse or refresh the cached token.
"""

from __future__ import annotations

import logging
from pathlib import Path

from google.auth.exceptions import GoogleAuthError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from oauthlib.oauth2.rfc6749.errors import OAuth2Error

from ..exceptions import AuthError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/tasks"]


def _load_cached(token_cache: Path) -> Credentials | None:
    """Read cached credentials, ignoring an unreadable cache."""
    if not token_cache.exists():
        return None
    try:
        return Credentials.from_authorized_user_file(str(token_cache), SCOPES)
    except (ValueError, OSError) as e:
        logger.warning("Ignoring unreadable token cache %s: %s", token_cache, e)
        return None


def _save_cached(credentials: Credentials, token_cache: Path) -> None:
    try:
        token_cache.parent.mkdir(parents=True, exist_ok=True)
        token_cache.write_text(credentials.to_json())
    except OSError as e:
        logger.warning("Could not write token cache %s: %s", token_cache, e)
        return
    logger.debug("Saved token cache to %s", token_cache)


def _run_installed_flow(credentials_file: Path) -> Credentials:
    """Authorize interactively using the client secrets file."""
    if not credentials_file.exists():
        raise AuthError(
            f"OAuth client secrets not found at {credentials_file}.\n"
            "Download an OAuth client ID (Desktop app) from Google Cloud Console."
        )
    logger.info("Starting OAuth2 authorization flow with %s", credentials_file)
    try:
        flow = InstalledAppFlow.from_client_secrets_file(str(credentials_file), SCOPES)
        return flow.run_local_server(port=0)
    except (ValueError, OSError, GoogleAuthError, OAuth2Error) as e:
        raise AuthError(f"OAuth2 authorization failed: {e}") from e


def load_credentials(credentials_file: Path, token_cache: Path) -> Credentials:
    """Return valid credentials for the tasks scope.

    Tries in order:
    1. A valid cached token
    2. Refreshing an expired cached token
    3. The interactive installed-app flow

    Args:
        credentials_file: OAuth2 client secrets JSON
        token_cache: Authorized user token JSON (read and written)

    Raises:
        AuthError: If no valid credentials could be obtained
    """
    credentials = _load_cached(token_cache)

    if credentials is not None and credentials.valid:
        logger.debug("Using cached token from %s", token_cache)
        return credentials

    if credentials is not None and credentials.expired and credentials.refresh_token:
        try:
            credentials.refresh(Request())
            logger.info("Refreshed cached token")
        except GoogleAuthError as e:
            logger.warning("Token refresh failed, re-authorizing: %s", e)
            credentials = None
    else:
        credentials = None

    if credentials is None:
        credentials = _run_installed_flow(credentials_file)

    if not credentials.token:
        raise AuthError("Authorization did not return an access token")

    _save_cached(credentials, token_cache)
    return credentials


def refresh_credentials(credentials: Credentials, token_cache: Path) -> str:
    """Refresh an access token rejected mid-session and re-save the cache.

    Returns:
        The new access token

    Raises:
        AuthError: If there is no refresh token or the refresh fails
    """
    if not credentials.refresh_token:
        raise AuthError("Access token expired and no refresh token is cached")
    try:
        credentials.refresh(Request())
    except GoogleAuthError as e:
        raise AuthError(f"Token refresh failed: {e}") from e
    if not credentials.token:
        raise AuthError("Token refresh did not return an access token")

    logger.info("Refreshed access token")
    _save_cached(credentials, token_cache)
    return credentials.token
