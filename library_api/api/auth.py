"""
API key authentication for mutation routes.

A single shared secret is compared with the raw value of the Authorization
header. There is no bearer prefix and no token signature.
"""

import logging
import secrets
from typing import Optional

from library_api.domain.value_objects import AuthenticatedPrincipal

logger = logging.getLogger(__name__)

API_KEY_HEADER = "Authorization"


class AuthenticationError(Exception):
    """Raised when the credential is missing or does not match the secret."""


class ApiKeyAuthenticator:
    """
    Checks request credentials against the configured shared secret.

    Usage:
        authenticator = ApiKeyAuthenticator(settings.api_key)
        principal = authenticator.authenticate(request.headers.get("Authorization"))
    """

    def __init__(self, api_key: str) -> None:
        if not api_key:
            raise ValueError("api_key cannot be empty")
        self._api_key = api_key.encode("utf-8")

    def authenticate(self, credential: Optional[str]) -> AuthenticatedPrincipal:
        """
        Authenticate a raw header value.

        Args:
            credential: Value of the Authorization header, or None if absent

        Returns:
            The fixed principal shared by every authenticated caller

        Raises:
            AuthenticationError: If the header is missing or does not match
        """
        if credential is None:
            raise AuthenticationError("Invalid API Key")

        if not secrets.compare_digest(credential.encode("utf-8"), self._api_key):
            raise AuthenticationError("Invalid API Key")

        return AuthenticatedPrincipal()
