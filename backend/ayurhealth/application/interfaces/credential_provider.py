"""Credential provider port — supplies the bearer token attached to store requests."""

from abc import ABC, abstractmethod


class CredentialProvider(ABC):
    """Port — yields an access token for the current caller, if there is one.

    Returning ``None`` (or raising) means the request runs in an
    unauthenticated context; the gateway decides how to fall back.
    """

    @abstractmethod
    async def get_token(self) -> str | None:
        ...
