#!/usr/bin/env python3
"""
Configuration loader for the Commute Curator
Loads feed list, scoring rules and channel metadata from config/ directory
"""

import os
import json
from datetime import datetime
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

BASE_DIR = Path(__file__).parent
CONFIG_DIR = Path(os.getenv("CURATOR_CONFIG_DIR", BASE_DIR / "config"))

DEFAULT_TARGET_DURATION = 70
DEFAULT_ITEMS_PER_FEED = 5
DEFAULT_TIMEZONE = "America/Vancouver"
DEFAULT_MODE = {
    "name": "datenight",
    "weekday": 3,  # Thursday
    "affinity_tag": "date_night",
    "title_suffix": " (Date Night)",
}


def load_env(env_path=None):
    """Load secrets (GITHUB_TOKEN, R2 credentials) from .env if present."""
    env_path = Path(env_path) if env_path else BASE_DIR / ".env"
    if env_path.exists():
        load_dotenv(env_path)
        return True
    return False


def _load_json(filename):
    path = CONFIG_DIR / filename
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


@lru_cache(maxsize=1)
def load_curator_config():
    """Load feeds, rules and run settings (cached)."""
    return _load_json("feeds.json")


@lru_cache(maxsize=1)
def load_podcast_config():
    """Load output channel metadata (cached)."""
    return _load_json("podcast.json")


def get_feeds():
    return load_curator_config().get("feeds", [])


def get_base_rules():
    """Base scoring rules. Callers must not mutate the returned dict."""
    return load_curator_config().get("rules", {})


def get_target_duration():
    """Target listening time in minutes (70 when unset)."""
    return load_curator_config().get("target_duration_minutes") or DEFAULT_TARGET_DURATION


def get_items_per_feed():
    return load_curator_config().get("items_per_feed") or DEFAULT_ITEMS_PER_FEED


def get_mode_config():
    """Mode settings merged over the date-night defaults."""
    mode = dict(DEFAULT_MODE)
    mode.update(load_curator_config().get("mode", {}))
    return mode


def get_timezone_name():
    return load_curator_config().get("timezone", DEFAULT_TIMEZONE)


def get_local_now(tz_name=None):
    """Current time in the configured timezone. Capture once per run."""
    return datetime.now(ZoneInfo(tz_name or get_timezone_name()))


def get_all_config():
    """Load all configuration at once."""
    return {
        'curator': load_curator_config(),
        'podcast': load_podcast_config(),
    }


if __name__ == "__main__":
    print("Testing configuration loader...")

    config = get_all_config()

    print(f"\n📻 Feed title: {config['podcast']['title']}")
    print(f"📡 Sources: {len(get_feeds())} feeds")
    print(f"⏱️  Target: {get_target_duration()} mins")
    print(f"❤️  Mode: {get_mode_config()['name']} on weekday {get_mode_config()['weekday']}")

    print("\n✅ All configs loaded successfully!")
