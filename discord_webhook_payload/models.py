"""
Dataclass representations of Discord embed objects.

Reference:
https://discord.com/developers/docs/resources/message#embed-object
"""

from __future__ import annotations

import dataclasses
from typing import Any

_MAX_CHANNEL = 0xFF
_MAX_COLOR = 0xFFFFFF


def _compact(**values: Any) -> dict[str, Any]:
    """Drop keys whose value is None so the payload never carries null."""
    return {key: value for key, value in values.items() if value is not None}


@dataclasses.dataclass(frozen=True)
class Color:
    """RGB accent color, serialized as a single 24-bit integer."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            channel = getattr(self, name)
            if isinstance(channel, bool) or not isinstance(channel, int):
                raise TypeError(f"Color channel {name} must be an int, got {type(channel).__name__}")
            if not 0 <= channel <= _MAX_CHANNEL:
                raise ValueError(f"Color channel {name} must be between 0 and 255, got {channel}")

    @property
    def int_color(self) -> int:
        return (self.red << 16) | (self.green << 8) | self.blue

    @classmethod
    def from_int(cls, value: int) -> Color:
        if not 0 <= value <= _MAX_COLOR:
            raise ValueError("Color value must be between 0x000000 and 0xFFFFFF")
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hex(cls, value: str) -> Color:
        digits = value[1:] if value.startswith("#") else value
        if len(digits) != 6:
            raise ValueError(f"Expected a hex color like '#5865F2', got {value!r}")
        try:
            return cls.from_int(int(digits, 16))
        except ValueError as exc:
            raise ValueError(f"Expected a hex color like '#5865F2', got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class Author:
    name: str | None = None
    url: str | None = None
    icon_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(name=self.name, url=self.url, icon_url=self.icon_url)


@dataclasses.dataclass(frozen=True)
class Footer:
    text: str | None = None
    icon_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(text=self.text, icon_url=self.icon_url)


@dataclasses.dataclass(frozen=True)
class Thumbnail:
    url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(url=self.url)


@dataclasses.dataclass(frozen=True)
class Image:
    url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _compact(url=self.url)


@dataclasses.dataclass(frozen=True)
class EmbedField:
    """Represents a single field in an embed."""

    name: str
    value: str
    inline: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "inline": self.inline}


@dataclasses.dataclass
class EmbedPanel:
    """
    Mutable builder for one embed. Every setter returns the panel so calls
    can be chained; setting a value again replaces the previous one.
    """

    title: str | None = None
    description: str | None = None
    url: str | None = None
    color: Color | None = None
    footer: Footer | None = None
    thumbnail: Thumbnail | None = None
    image: Image | None = None
    author: Author | None = None
    fields: list[EmbedField] = dataclasses.field(default_factory=list)

    def set_title(self, title: str | None) -> EmbedPanel:
        self.title = title
        return self

    def set_description(self, description: str | None) -> EmbedPanel:
        self.description = description
        return self

    def set_url(self, url: str | None) -> EmbedPanel:
        self.url = url
        return self

    def set_color(self, color: Color | None) -> EmbedPanel:
        self.color = color
        return self

    def set_footer(self, text: str | None, icon_url: str | None = None) -> EmbedPanel:
        self.footer = Footer(text, icon_url)
        return self

    def set_thumbnail(self, url: str | None) -> EmbedPanel:
        self.thumbnail = Thumbnail(url)
        return self

    def set_image(self, url: str | None) -> EmbedPanel:
        self.image = Image(url)
        return self

    def set_author(self, name: str | None, url: str | None = None, icon_url: str | None = None) -> EmbedPanel:
        self.author = Author(name, url, icon_url)
        return self

    def add_field(self, name: str, value: str, inline: bool = False) -> EmbedPanel:
        self.fields.append(EmbedField(name, value, inline))
        return self

    def to_dict(self) -> dict[str, Any]:
        embed: dict[str, Any] = {}

        if self.author is not None:
            embed["author"] = self.author.to_dict()
        if self.title is not None:
            embed["title"] = self.title
        if self.url is not None:
            embed["url"] = self.url
        if self.description is not None:
            embed["description"] = self.description
        if self.color is not None:
            embed["color"] = self.color.int_color
        if self.thumbnail is not None:
            embed["thumbnail"] = self.thumbnail.to_dict()
        if self.image is not None:
            embed["image"] = self.image.to_dict()
        if self.footer is not None:
            embed["footer"] = self.footer.to_dict()

        # always present, even when empty
        embed["fields"] = [field.to_dict() for field in self.fields]

        return embed

    serialize = to_dict


__all__ = [
    "Author",
    "Color",
    "EmbedField",
    "EmbedPanel",
    "Footer",
    "Image",
    "Thumbnail",
]
