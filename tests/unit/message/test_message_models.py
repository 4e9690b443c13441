"""
Tests for Message and MessageEntity.
"""

import pytest
from readingtime.message import EntityKind, Message, MessageEntity


@pytest.mark.unit
class TestMessageEntity:
    def test_text_link_has_explicit_url(self):
        entity = MessageEntity(EntityKind.TEXT_LINK, 0, 4, url="https://x.test")
        assert entity.has_explicit_url

    def test_text_link_without_url(self):
        assert not MessageEntity(EntityKind.TEXT_LINK, 0, 4).has_explicit_url

    @pytest.mark.parametrize("kind", [EntityKind.URL, EntityKind.BOLD, EntityKind.MENTION])
    def test_other_kinds_have_no_explicit_url(self, kind):
        assert not MessageEntity(kind, 0, 4, url="https://x.test").has_explicit_url

    def test_unknown_kind_maps_to_other(self):
        assert EntityKind("date_time") is EntityKind.OTHER

    def test_from_telegram(self):
        entity = MessageEntity.from_telegram({"type": "text_link", "offset": 6, "length": 4, "url": "https://x.test"})

        assert entity == MessageEntity(EntityKind.TEXT_LINK, 6, 4, url="https://x.test")


@pytest.mark.unit
class TestMessage:
    def test_empty(self):
        message = Message()
        assert message.text is None
        assert message.caption is None
        assert message.entities == ()
        assert message.caption_entities == ()

    def test_from_telegram_text_message(self):
        payload = {
            "message_id": 42,
            "from": {"id": 7, "is_bot": False, "first_name": "A"},
            "chat": {"id": -100, "type": "group"},
            "date": 1700000000,
            "text": "read this please",
            "entities": [
                {"type": "bold", "offset": 0, "length": 4},
                {"type": "text_link", "offset": 5, "length": 4, "url": "https://x.test/article"},
            ],
        }

        message = Message.from_telegram(payload)

        assert message.text == "read this please"
        assert message.caption is None
        assert [e.kind for e in message.entities] == [EntityKind.BOLD, EntityKind.TEXT_LINK]
        assert message.entities[1].url == "https://x.test/article"
        assert message.chat_id == -100
        assert message.message_id == 42
        assert message.sender_id == 7

    def test_from_telegram_photo_caption(self):
        payload = {
            "message_id": 3,
            "chat": {"id": 1, "type": "private"},
            "photo": [],
            "caption": "source",
            "caption_entities": [{"type": "text_link", "offset": 0, "length": 6, "url": "https://c.test"}],
        }

        message = Message.from_telegram(payload)

        assert message.text is None
        assert message.caption == "source"
        assert message.caption_entities[0].has_explicit_url
        assert message.sender_id is None
