from __future__ import annotations


class WebhookError(Exception):
    """Base class for errors raised while delivering a webhook message."""


class ConfigurationError(WebhookError, ValueError):
    """The webhook destination is missing or unusable."""


class TransportError(WebhookError):
    """
    Sending the request failed: DNS, connection, TLS, I/O or a non-2xx
    status reported by the HTTP client.
    """

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "ConfigurationError",
    "TransportError",
    "WebhookError",
]
