"""Shared fixtures: a frozen clock and an episode factory."""

from datetime import datetime, timedelta, timezone

import pytest

from episodes import EpisodeCandidate
from rules import EffectiveRules

NOW = datetime(2026, 2, 12, 18, 0, tzinfo=timezone.utc)  # a Thursday


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_episode():
    """Build an EpisodeCandidate aged relative to NOW."""
    def _make(title="Episode", minutes=30, age_days=1.0, tags=(), summary="",
              source="Test Feed", guid=None, link=None, audio_url=None):
        return EpisodeCandidate(
            title=title,
            link=link if link is not None else f"https://example.com/{title.replace(' ', '-').lower()}",
            guid=guid,
            audio_url=audio_url or f"https://cdn.example.com/{title.replace(' ', '_')}.mp3",
            published_at=NOW - timedelta(days=age_days),
            duration_minutes=minutes,
            summary=summary,
            source_name=source,
            tags=frozenset(tags),
        )
    return _make


@pytest.fixture
def plain_rules():
    return EffectiveRules()
