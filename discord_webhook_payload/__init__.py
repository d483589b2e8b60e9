from .client import WebhookClient
from .errors import ConfigurationError, TransportError, WebhookError
from .message import MessagePayload
from .models import Author, Color, EmbedField, EmbedPanel, Footer, Image, Thumbnail

__all__ = [
    "Author",
    "Color",
    "ConfigurationError",
    "EmbedField",
    "EmbedPanel",
    "Footer",
    "Image",
    "MessagePayload",
    "Thumbnail",
    "TransportError",
    "WebhookClient",
    "WebhookError",
]
