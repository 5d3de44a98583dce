import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import requests
from pydantic import ValidationError

from .config import XPO_TOKEN_URL, XPOConfig
from .errors import STEP_TOKEN, ConfigurationError, TokenError, TransportError
from .models import TokenResponse

logger = logging.getLogger(__name__)


def fetch_token(config: XPOConfig, session: requests.Session) -> TokenResponse:
    """
    Trades the XPO login and account token for a short-lived bearer token.

    The account token goes out as-is in the Basic auth header; XPO issues it
    already encoded.

    Raises:
        ConfigurationError: username, password or account token is unset
        TransportError: the POST itself failed
        TokenError: the body is not a token response or has no access_token
    """
    missing = config.missing_credentials()
    if missing:
        raise ConfigurationError(f"missing credentials: {', '.join(missing)}")

    headers = {
        "Authorization": f"Basic {config.access_token}",
        "Content-Type": "application/x-www-form-urlencoded",
    }
    form = {
        "grant_type": "password",
        "username": config.username,
        "password": config.password,
    }

    logger.info(f"Requesting XPO bearer token for {config.username}")
    try:
        response = session.post(XPO_TOKEN_URL, data=form, headers=headers, timeout=config.timeout)
    except requests.RequestException as e:
        logger.error(f"XPO token request failed: {e}")
        raise TransportError(f"could not make token request: {e}", step=STEP_TOKEN) from e

    try:
        token = TokenResponse.model_validate_json(response.content)
    except ValidationError as e:
        logger.error(f"XPO token response could not be read: {response.status_code} - {response.text[:500]}")
        raise TokenError(
            "could not unmarshal token response",
            details={"status": response.status_code},
        ) from e

    if not token.access_token:
        raise TokenError("token response had no access_token", details={"status": response.status_code})

    logger.info(f"XPO bearer token obtained, expires in {token.expires_in}s")
    return token


class TokenManager:
    """Hands out bearer tokens for one client, optionally reusing them until near expiry."""

    def __init__(self, config: XPOConfig):
        self.config = config
        self._token: Optional[str] = None
        self._expires_at: Optional[datetime] = None

    def clear(self):
        self._token = None
        self._expires_at = None

    def _is_fresh(self) -> bool:
        if not self._token or not self._expires_at:
            return False
        margin = timedelta(seconds=self.config.token_refresh_margin)
        return datetime.now(timezone.utc) < self._expires_at - margin

    def get_token(self, session: requests.Session) -> str:
        if self.config.cache_token and self._is_fresh():
            return self._token

        token = fetch_token(self.config, session)
        if self.config.cache_token:
            self._token = token.access_token
            self._expires_at = datetime.now(timezone.utc) + timedelta(seconds=token.expires_in)
        return token.access_token
