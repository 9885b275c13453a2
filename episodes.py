#!/usr/bin/env python3
"""
Episode records for the Commute Curator.
Normalizes feed entries into immutable candidates the scorer and packer consume.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import FrozenSet, Optional


@dataclass(frozen=True)
class EpisodeCandidate:
    """A fetched episode eligible for scoring and selection."""

    title: str
    link: str
    audio_url: str
    published_at: datetime
    duration_minutes: float
    summary: str = ""
    source_name: str = ""
    guid: Optional[str] = None
    tags: FrozenSet[str] = field(default_factory=frozenset)

    def age_days(self, now):
        """Fractional days between publish time and now."""
        return (now - self.published_at).total_seconds() / 86400

    def age_hours(self, now):
        return (now - self.published_at).total_seconds() / 3600


def parse_duration(raw):
    """Convert an itunes:duration value to minutes.

    Accepts seconds (int/float or numeric string), "MM:SS" or "H:MM:SS".
    Anything unrecognised is treated as unknown and returns 0.
    """
    if not raw or isinstance(raw, bool):
        return 0
    if isinstance(raw, (int, float)):
        return raw / 60 if math.isfinite(raw) else 0
    if not isinstance(raw, str):
        return 0

    value = raw.strip()
    try:
        return int(float(value)) / 60
    except (ValueError, OverflowError):
        pass

    try:
        parts = [float(p) for p in value.split(':')]
    except ValueError:
        return 0
    if not all(math.isfinite(p) for p in parts):
        return 0

    if len(parts) == 3:
        return parts[0] * 60 + parts[1] + parts[2] / 60
    if len(parts) == 2:
        return parts[0] + parts[1] / 60
    return 0


def _parse_published(entry):
    for key in ('published_parsed', 'updated_parsed'):
        parsed = entry.get(key)
        if parsed:
            return datetime(*parsed[:6], tzinfo=timezone.utc)
    return None


def _enclosure_url(entry):
    for enclosure in entry.get('enclosures') or []:
        url = enclosure.get('href') or enclosure.get('url')
        if url:
            return url
    return None


def _summary(entry):
    summary = entry.get('summary')
    if summary:
        return summary
    content = entry.get('content') or []
    if content:
        return content[0].get('value', '')
    return ''


def episode_from_entry(entry, feed_config, fallback_time):
    """Build an EpisodeCandidate from a feedparser entry.

    Returns None when the entry has no audio enclosure. Entries without a
    publish date are stamped with fallback_time (the fetch time).
    """
    audio_url = _enclosure_url(entry)
    if not audio_url:
        return None

    duration = parse_duration(entry.get('itunes_duration') or entry.get('duration'))

    return EpisodeCandidate(
        title=(entry.get('title') or '').strip(),
        link=entry.get('link') or '',
        guid=entry.get('id') or entry.get('guid') or None,
        audio_url=audio_url,
        published_at=_parse_published(entry) or fallback_time,
        duration_minutes=max(duration, 0),
        summary=_summary(entry),
        source_name=feed_config.get('name', ''),
        tags=frozenset(feed_config.get('tags') or []),
    )
