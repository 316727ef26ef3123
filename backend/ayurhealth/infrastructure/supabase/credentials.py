"""Credential providers for store requests."""

from ayurhealth.application.interfaces import CredentialProvider


class StaticCredentialProvider(CredentialProvider):
    """Always returns the same token — a configured service JWT, or nothing."""

    def __init__(self, token: str | None = None):
        self._token = token or None

    async def get_token(self) -> str | None:
        return self._token


class BearerHeaderCredentialProvider(CredentialProvider):
    """Forwards the caller's ``Authorization: Bearer <jwt>`` header to the store.

    Row-level-security policies then see the same identity that called the API.
    A missing or non-bearer header yields ``None`` (unauthenticated).
    """

    def __init__(self, authorization: str | None):
        self._authorization = authorization

    async def get_token(self) -> str | None:
        if not self._authorization:
            return None
        scheme, _, token = self._authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            return None
        return token.strip()
