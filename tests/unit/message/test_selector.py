"""
Tests for URL candidate extraction and selection.
"""

import pytest
from readingtime.exceptions import UrlParseFailed
from readingtime.message import (
    EntityKind,
    Message,
    MessageEntity,
    UrlSource,
    find_urls,
    iter_url_candidates,
    parse_url,
    select_url,
)


def link(url, offset=0, length=4):
    return MessageEntity(EntityKind.TEXT_LINK, offset, length, url=url)


@pytest.mark.unit
class TestFindUrls:
    def test_all_matches_in_order(self):
        text = "Check this out https://example.com/a and also https://example.com/b"
        assert find_urls(text) == ["https://example.com/a", "https://example.com/b"]

    def test_http_and_www(self):
        assert find_urls("go to http://www.example.org now") == ["http://www.example.org"]

    def test_query_and_fragment(self):
        assert find_urls("see https://news.example.com/story?id=5&ref=x#top.") == [
            "https://news.example.com/story?id=5&ref=x#top."
        ]

    def test_trailing_punctuation_outside_class(self):
        assert find_urls("(https://example.com/page), ok") == ["https://example.com/page"]

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "no links here",
            "ftp://example.com/file",
            "example.com without scheme",
            "https://y.test",  # host needs at least two characters before the dot
            "https://EXAMPLE.COM",  # top-level domain must be lower case
            "https://example.abcdefgh",  # top-level domain is 2-4 letters followed by a boundary
        ],
    )
    def test_no_match(self, text):
        assert find_urls(text) == []

    def test_embedded_in_word_noise(self):
        assert find_urls("xxhttps://example.com/zz") == ["https://example.com/zz"]


@pytest.mark.unit
class TestParseUrl:
    def test_valid(self):
        candidate = parse_url("https://example.com/a", UrlSource.TEXT)

        assert str(candidate) == "https://example.com/a"
        assert candidate.url.host == "example.com"
        assert candidate.raw == "https://example.com/a"
        assert candidate.source is UrlSource.TEXT

    @pytest.mark.parametrize(
        "raw", ["not a url", "/relative/path", "https://", "https://:foo.com", "https://xn--a.com", "https://a.com:99999"]
    )
    def test_invalid(self, raw):
        with pytest.raises(UrlParseFailed) as exc_info:
            parse_url(raw)

        assert exc_info.value.raw == raw
        assert str(exc_info.value) == "Not a valid URL"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_url("nope")


@pytest.mark.unit
class TestSelectUrl:
    def test_empty_message(self):
        assert select_url(Message()) is None

    def test_text_without_links(self):
        assert select_url(Message(text="hello", caption="world")) is None

    def test_non_link_entities_ignored(self):
        message = Message(text="hello", entities=(MessageEntity(EntityKind.BOLD, 0, 5),))
        assert select_url(message) is None

    def test_first_text_match_wins(self):
        message = Message(text="Check this out https://example.com/a and also https://example.com/b")

        assert str(select_url(message)) == "https://example.com/a"

    def test_entity_beats_text(self):
        message = Message(
            text="see https://y.test and https://other.example.com",
            entities=(link("https://x.test"),),
        )

        candidate = select_url(message)

        assert str(candidate) == "https://x.test"
        assert candidate.source is UrlSource.ENTITY

    def test_body_entity_beats_caption_entity(self):
        message = Message(
            entities=(link("https://body.example.com"),),
            caption_entities=(link("https://caption.example.com"),),
        )
        assert str(select_url(message)) == "https://body.example.com"

    def test_caption_entity_beats_body_text(self):
        message = Message(
            text="https://text.example.com",
            caption_entities=(link("https://caption.example.com"),),
        )

        candidate = select_url(message)

        assert str(candidate) == "https://caption.example.com"
        assert candidate.source is UrlSource.CAPTION_ENTITY

    def test_body_text_beats_caption_text(self):
        message = Message(text="a https://text.example.com", caption="b https://caption.example.com")
        assert select_url(message).source is UrlSource.TEXT

    def test_caption_text(self):
        message = Message(caption="photo from https://caption.example.com/p/1")

        candidate = select_url(message)

        assert str(candidate) == "https://caption.example.com/p/1"
        assert candidate.source is UrlSource.CAPTION

    def test_entity_order_preserved(self):
        message = Message(entities=(link("https://first.example.com"), link("https://second.example.com")))
        assert str(select_url(message)) == "https://first.example.com"

    def test_malformed_first_candidate_is_reported(self):
        message = Message(text="https://ok.example.com", entities=(link("not a url"),))

        with pytest.raises(UrlParseFailed) as exc_info:
            select_url(message)

        assert exc_info.value.raw == "not a url"

    def test_bad_punycode_host_is_reported(self):
        with pytest.raises(UrlParseFailed) as exc_info:
            select_url(Message(text="read https://xn--a.com now"))

        assert exc_info.value.raw == "https://xn--a.com"

    def test_candidate_order(self):
        message = Message(
            text="t https://text.example.com",
            caption="c https://caption.example.com",
            entities=(link("https://e.example.com"),),
            caption_entities=(link("https://ce.example.com"),),
        )

        assert [source for source, _ in iter_url_candidates(message)] == [
            UrlSource.ENTITY,
            UrlSource.CAPTION_ENTITY,
            UrlSource.TEXT,
            UrlSource.CAPTION,
        ]
