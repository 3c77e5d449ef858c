"""Tests for per-channel language resolution from the topic text."""

import pytest

from ddbot.domain.channel_config import first_success, resolve
from ddbot.domain.models import ChannelLanguageConfig

DEFAULTS = ChannelLanguageConfig(default_lang="JA", target_lang="EN")


class TestResolveFallback:
    def test_absent_topic(self):
        assert resolve(None, DEFAULTS) is DEFAULTS

    def test_blank_topic(self):
        assert resolve("   ", DEFAULTS) is DEFAULTS

    @pytest.mark.parametrize("topic", [
        "General chat, be nice",
        "{not json",
        "[]",
        '"EN"',
        '{"default_lang": "EN"}',
        '{"target_lang": "JA"}',
        '{"default_lang": 1, "target_lang": "JA"}',
        '{"default_lang": "", "target_lang": "JA"}',
    ])
    def test_malformed_topic_returns_defaults(self, topic):
        assert resolve(topic, DEFAULTS) == DEFAULTS

    @pytest.mark.parametrize("depth", [1024, 4096])
    def test_deeply_nested_topic_returns_defaults(self, depth):
        assert resolve("[" * depth, DEFAULTS) == DEFAULTS
        assert resolve("{\"a\": " * depth, DEFAULTS) == DEFAULTS


class TestResolveFromTopic:
    def test_full_record(self):
        config = resolve('{"default_lang": "EN", "target_lang": "JA"}', DEFAULTS)
        assert config == ChannelLanguageConfig(default_lang="EN", target_lang="JA")

    def test_codes_are_upper_cased(self):
        config = resolve('{"default_lang": "en", "target_lang": "ja"}', DEFAULTS)
        assert config.default_lang == "EN"
        assert config.target_lang == "JA"

    def test_extra_fields_ignored(self):
        config = resolve(
            '{"default_lang": "EN", "target_lang": "DE", "note": "x"}', DEFAULTS
        )
        assert config.target_lang == "DE"


class TestFirstSuccess:
    def test_returns_first_non_none(self):
        a = ChannelLanguageConfig("EN", "JA")
        b = ChannelLanguageConfig("DE", "FR")
        steps = [lambda _: None, lambda _: a, lambda _: b]
        assert first_success(steps, "x") is a

    def test_none_when_all_fail(self):
        assert first_success([lambda _: None], "x") is None


class TestChannelLanguageConfig:
    def test_normalizes_case(self):
        c = ChannelLanguageConfig(default_lang=" en ", target_lang="pt-br")
        assert c.default_lang == "EN"
        assert c.target_lang == "PT-BR"

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            ChannelLanguageConfig(default_lang="", target_lang="JA")

    @pytest.mark.parametrize("default_lang, target_lang", [
        (" ", "JA"),
        ("EN", "\t"),
        ("  ", "  "),
    ])
    def test_rejects_whitespace_only(self, default_lang, target_lang):
        with pytest.raises(ValueError):
            ChannelLanguageConfig(default_lang=default_lang, target_lang=target_lang)
