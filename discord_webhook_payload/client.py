from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from .errors import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "discord-webhook-payload/0.1.0"


class WebhookClient:
    """
    Posts JSON documents to a webhook URL. No retries and no status code
    interpretation beyond raising on non-2xx responses.
    """

    def __init__(
        self,
        *,
        timeout: float = 30,
        user_agent: str = DEFAULT_USER_AGENT,
        session: httpx.Client | None = None,
        dry_run: bool = False,
    ):
        self.timeout = timeout
        self.user_agent = user_agent
        self.dry_run = dry_run
        self._session = session or httpx.Client()
        self._owns_session = session is None

    def __enter__(self) -> "WebhookClient":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def post_json(self, url: str | None, payload: dict[str, Any]) -> httpx.Response | None:
        if not url:
            raise ConfigurationError("Url is empty")

        if self.dry_run:
            logger.info("Dry run, not posting to %s: %s", url, payload)
            return None

        logger.debug(payload)
        try:
            response = self._session.post(
                url,
                json=payload,
                headers={
                    "Content-Type": "application/json",
                    "User-Agent": self.user_agent,
                },
                timeout=self.timeout,
            )
            logger.debug(response.content)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning("Webhook responded with HTTP %s", status_code)
            raise TransportError(f"Webhook responded with HTTP {status_code}", status_code=status_code) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.error("Webhook request failed: %s", exc)
            raise TransportError(f"Webhook request failed: {exc}") from exc

        return response


__all__ = [
    "DEFAULT_USER_AGENT",
    "WebhookClient",
]
