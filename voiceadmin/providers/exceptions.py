"""Provider-agnostic exceptions raised by inventory providers."""

from __future__ import annotations


class ProviderError(Exception):
    """Base class for errors raised while talking to a cloud provider."""


class ProviderCredentialsError(ProviderError):
    """Cloud credentials are missing or incomplete."""


class ProviderAPIError(ProviderError):
    """The provider API rejected a request.

    Parameters
    ----------
    message : str
        Human-readable description of the failure
    error_code : str | None
        Provider error code (e.g. 'UnauthorizedOperation')
    """

    def __init__(self, message: str, error_code: str | None = None) -> None:
        super().__init__(message)
        self.error_code = error_code


class ProviderConnectionError(ProviderError):
    """The provider endpoint could not be reached."""


class ProviderTimeoutError(ProviderConnectionError):
    """A provider call did not complete within the configured timeout."""
