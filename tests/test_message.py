import json

import pytest

from discord_webhook_payload import Color, ConfigurationError, EmbedPanel, MessagePayload, WebhookClient


class _RecordingSession:
    def __init__(self) -> None:
        self.calls: list[tuple[tuple, dict]] = []

    def post(self, *args, **kwargs):
        self.calls.append((args, kwargs))
        raise AssertionError("post should not be called")

    def close(self) -> None:
        pass


def test_empty_payload_serializes_to_empty_object():
    assert MessagePayload("https://example.com/webhook").to_dict() == {}


def test_scalars_overwrite():
    payload = MessagePayload("https://example.com/webhook").set_content("one").set_content("two")
    payload.set_username("").set_avatar_url("https://example.com/avatar.png")

    assert payload.serialize() == {
        "username": "",
        "avatar_url": "https://example.com/avatar.png",
        "content": "two",
    }


def test_embeds_append_across_calls():
    first, second, third = EmbedPanel().set_title("1"), EmbedPanel().set_title("2"), EmbedPanel().set_title("3")
    payload = MessagePayload("https://example.com/webhook")

    payload.add_embed_panels()
    assert "embeds" not in payload.to_dict()

    payload.add_embed_panels(first, second)
    payload.add_embed_panels(third)

    titles = [embed["title"] for embed in payload.to_dict()["embeds"]]
    assert titles == ["1", "2", "3"]


def test_end_to_end_serialization():
    payload = (
        MessagePayload("https://example.com/webhook")
        .set_username("Bot")
        .set_content("hi")
        .add_embed_panels(EmbedPanel().set_title("T").set_color(Color(0, 0, 0)))
    )

    assert json.loads(payload.to_json()) == {
        "username": "Bot",
        "content": "hi",
        "embeds": [{"title": "T", "color": 0, "fields": []}],
    }


def test_to_json_is_compact_and_keeps_unicode():
    payload = MessagePayload("https://example.com/webhook").set_content("héllo 🧪")
    assert payload.to_json() == '{"content":"héllo 🧪"}'


def test_url_is_read_only():
    payload = MessagePayload("https://example.com/webhook")
    with pytest.raises(AttributeError):
        payload.url = "https://other.example"  # type: ignore[misc]


@pytest.mark.parametrize("url", [None, ""])
def test_deliver_without_url_never_touches_transport(url):
    session = _RecordingSession()
    client = WebhookClient(session=session)

    with pytest.raises(ConfigurationError, match="Url is empty"):
        MessagePayload(url).set_content("hi").deliver(client)

    assert session.calls == []


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        MessagePayload(None).deliver()


def test_from_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DISCORD_WEBHOOK_URL", "https://example.com/from-env")
    monkeypatch.setenv("OTHER_HOOK", "https://example.com/other")

    assert MessagePayload.from_env().url == "https://example.com/from-env"
    assert MessagePayload.from_env("OTHER_HOOK").url == "https://example.com/other"

    monkeypatch.delenv("OTHER_HOOK")
    assert MessagePayload.from_env("OTHER_HOOK").url is None


def test_panel_changes_after_adding_do_not_affect_payload():
    panel = EmbedPanel().set_title("a")
    payload = MessagePayload("https://example.com/webhook").add_embed_panels(panel)

    panel.set_title("b").add_field("late", "field")

    assert payload.to_dict()["embeds"] == [{"title": "a", "fields": []}]


def test_serialized_embeds_are_copies():
    payload = MessagePayload("https://example.com/webhook").add_embed_panels(EmbedPanel().add_field("HP", "100"))

    payload.to_dict()["embeds"][0]["fields"].clear()

    assert payload.to_dict()["embeds"][0]["fields"] == [{"name": "HP", "value": "100", "inline": False}]
