"""Failure classes for the provider proxies.

Each error carries the HTTP status the API layer answers with, so routers only
need to translate ``ProxyError`` into ``HTTPException``.
"""


class ProxyError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class MissingInputError(ProxyError):
    """A required request field is missing or empty."""
    status_code = 400


class ProviderNotConfiguredError(ProxyError):
    """Provider credentials are not configured on the backend."""
    status_code = 503


class UpstreamTransportError(ProxyError):
    """The provider could not be reached."""
    status_code = 502


class UpstreamResponseError(ProxyError):
    """The provider answered with a non-success status; it is passed through."""

    def __init__(self, provider: str, status_code: int, body: str):
        super().__init__(f"{provider} API returned an error: {body}", status_code)
        self.provider = provider
        self.body = body


class UpstreamParseError(ProxyError):
    """The provider answered successfully but the body could not be used."""
    status_code = 500


class StoredPlanError(Exception):
    """The persisted plan blob exists but cannot be read."""
