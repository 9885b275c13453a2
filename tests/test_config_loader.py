"""Tests for config_loader module."""

import os
from datetime import datetime

import pytest
import config_loader
from config_loader import (
    load_curator_config,
    load_podcast_config,
    get_feeds,
    get_base_rules,
    get_target_duration,
    get_items_per_feed,
    get_mode_config,
    get_local_now,
    get_all_config,
    load_env,
)


class TestConfigLoader:
    def test_load_curator_config(self):
        config = load_curator_config()
        assert "rules" in config
        assert "feeds" in config

    def test_load_podcast_config(self):
        podcast = load_podcast_config()
        assert podcast["title"]
        assert podcast["feed_filename"].endswith(".xml")

    def test_feeds_have_name_url_tags(self):
        feeds = get_feeds()
        assert len(feeds) > 0
        for feed in feeds:
            assert feed["name"]
            assert feed["url"].startswith("http")
            assert isinstance(feed["tags"], list)

    def test_has_a_briefing_feed(self):
        assert any({"news", "briefing"} <= set(f["tags"]) for f in get_feeds())

    def test_rules_lists(self):
        rules = get_base_rules()
        for key in ("boost_keywords", "block_keywords", "boost_guests"):
            assert isinstance(rules[key], list)
        mode_name = get_mode_config()["name"]
        assert isinstance(rules.get(f"{mode_name}_keywords", []), list)
        assert isinstance(rules.get(f"{mode_name}_block", []), list)

    def test_target_duration(self):
        assert get_target_duration() == 70

    def test_items_per_feed(self):
        assert get_items_per_feed() == 5

    def test_mode_config(self):
        mode = get_mode_config()
        assert mode["name"] == "datenight"
        assert 0 <= mode["weekday"] <= 6
        assert mode["affinity_tag"]

    def test_get_all_config(self):
        assert set(get_all_config().keys()) == {"curator", "podcast"}

    def test_configs_are_cached(self):
        """Verify lru_cache returns the same object on repeated calls."""
        assert load_curator_config() is load_curator_config()


class TestDefaults:
    @pytest.fixture
    def bare_config(self, monkeypatch):
        monkeypatch.setattr(config_loader, "load_curator_config", lambda: {"feeds": []})

    def test_target_defaults_to_70(self, bare_config):
        assert get_target_duration() == 70

    def test_items_default(self, bare_config):
        assert get_items_per_feed() == 5

    def test_mode_defaults_to_thursday_date_night(self, bare_config):
        mode = get_mode_config()
        assert mode["weekday"] == 3
        assert mode["affinity_tag"] == "date_night"


class TestEnvironment:
    def test_local_now_is_aware(self):
        now = get_local_now("America/Vancouver")
        assert isinstance(now, datetime)
        assert now.tzinfo is not None

    def test_load_env(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CURATOR_TEST_TOKEN", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("CURATOR_TEST_TOKEN=abc123\n")
        assert load_env(env_file) is True
        assert os.environ["CURATOR_TEST_TOKEN"] == "abc123"
        monkeypatch.delenv("CURATOR_TEST_TOKEN")

    def test_load_env_missing(self, tmp_path):
        assert load_env(tmp_path / "missing.env") is False
