"""
Custom token to ID token exchange through the Identity Toolkit REST API.
"""
import logging
from typing import Optional

import requests

from .exceptions import TokenExchangeError

logger = logging.getLogger(__name__)

SIGN_IN_WITH_CUSTOM_TOKEN_URL = "https://identitytoolkit.googleapis.com/v1/accounts:signInWithCustomToken"


def _error_message(response: requests.Response) -> str:
    """Firebase puts a machine readable reason in error.message."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and isinstance(body.get('error'), dict):
        return body['error'].get('message', response.text)
    return response.text


class TokenExchanger:
    """Trades custom tokens for ID tokens using the project's web API key."""

    def __init__(self, api_key: str):
        self.api_key = api_key

    @property
    def url(self) -> str:
        return f"{SIGN_IN_WITH_CUSTOM_TOKEN_URL}?key={self.api_key}"

    def request_id_token(self, custom_token: str) -> str:
        """
        Perform the exchange.

        Raises:
            TokenExchangeError: On network failure, non-2xx status or a body without idToken
        """
        payload = {"token": custom_token, "returnSecureToken": True}
        try:
            response = requests.post(
                self.url,
                json=payload,
                headers={'Content-Type': 'application/json'},
            )
        except requests.RequestException as e:
            raise TokenExchangeError(f"Request to identity endpoint failed: {e}") from e

        if not response.ok:
            raise TokenExchangeError(
                f"HTTP error! status: {response.status_code} ({_error_message(response)})",
                status_code=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TokenExchangeError(f"Identity endpoint returned invalid JSON: {e}",
                                     status_code=response.status_code) from e

        id_token = data.get('idToken') if isinstance(data, dict) else None
        if not id_token:
            raise TokenExchangeError("Identity endpoint response has no idToken",
                                     status_code=response.status_code)
        return id_token

    def exchange(self, custom_token: str) -> Optional[str]:
        """Exchange a custom token, or None if the exchange failed (the error is logged)."""
        try:
            return self.request_id_token(custom_token)
        except TokenExchangeError as e:
            logger.error(f"❌ Error exchanging custom token for ID token: {e}")
            return None
