"""
Top-level webhook message.

Reference:
https://discord.com/developers/docs/resources/webhook#execute-webhook-jsonform-params
"""

from __future__ import annotations

import copy
import json
import os
from typing import Any

import httpx

from .client import WebhookClient
from .models import EmbedPanel

DEFAULT_URL_VARIABLE = "DISCORD_WEBHOOK_URL"


class MessagePayload:
    """
    Builds one webhook message: optional username, avatar and text content
    plus any number of embed panels, rendered in the order they were added.
    Unset values are left out of the serialized document.

    Panels are serialized when they are added; changing a panel afterwards
    does not change the message.
    """

    def __init__(self, url: str | None):
        self._url = url
        self.username: str | None = None
        self.avatar_url: str | None = None
        self.content: str | None = None
        self._embeds: list[dict[str, Any]] = []

    @classmethod
    def from_env(cls, variable: str = DEFAULT_URL_VARIABLE) -> MessagePayload:
        return cls(os.environ.get(variable))

    @property
    def url(self) -> str | None:
        return self._url

    @property
    def embeds(self) -> list[dict[str, Any]]:
        return copy.deepcopy(self._embeds)

    def set_username(self, username: str | None) -> MessagePayload:
        self.username = username
        return self

    def set_avatar_url(self, avatar_url: str | None) -> MessagePayload:
        self.avatar_url = avatar_url
        return self

    def set_content(self, content: str | None) -> MessagePayload:
        self.content = content
        return self

    def add_embed_panels(self, *panels: EmbedPanel) -> MessagePayload:
        self._embeds.extend(panel.to_dict() for panel in panels)
        return self

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.username is not None:
            payload["username"] = self.username
        if self.avatar_url is not None:
            payload["avatar_url"] = self.avatar_url
        if self.content is not None:
            payload["content"] = self.content
        if self._embeds:
            payload["embeds"] = self.embeds
        return payload

    serialize = to_dict

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    def deliver(self, client: WebhookClient | None = None) -> httpx.Response | None:
        """
        Serialize the message and POST it to ``url``.

        Without a ``client`` a temporary :class:`WebhookClient` is opened for
        this call and closed afterwards. Each call sends a new request.

        Raises:
            ConfigurationError: ``url`` is empty; nothing is sent.
            TransportError: the request could not be completed.
        """
        payload = self.to_dict()
        if client is not None:
            return client.post_json(self._url, payload)

        with WebhookClient() as owned:
            return owned.post_json(self._url, payload)


__all__ = ["MessagePayload"]
