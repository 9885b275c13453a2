#!/usr/bin/env python3
"""
RSS feed writer for the Commute Curator.
Renders the ordered selection as an RSS 2.0 / iTunes podcast feed.
"""

import hashlib
import xml.sax.saxutils as saxutils
from email.utils import format_datetime

ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"


def episode_guid(episode):
    """Stable identifier: feed guid, else link, else md5 of title + publish date."""
    if episode.guid:
        return episode.guid
    if episode.link:
        return episode.link
    seed = f"{episode.title}{episode.published_at.isoformat()}"
    return hashlib.md5(seed.encode('utf-8')).hexdigest()


def feed_item(entry):
    """Fields the publisher needs for one selected episode."""
    episode = entry.episode
    return {
        'title': f"[{episode.source_name}] {episode.title}",
        'description': episode.summary or '',
        'audio_url': episode.audio_url,
        'guid': episode_guid(episode),
        'pub_date': format_datetime(episode.published_at),
        'duration_seconds': round(episode.duration_minutes * 60),
    }


def _attr(value):
    return saxutils.escape(value, {'"': "&quot;"})


def render_feed(selection, podcast_config, now, mode_active=False, mode_title_suffix=""):
    """Build the commute feed XML for the selection."""
    title = podcast_config["title"] + (mode_title_suffix if mode_active else "")
    explicit = "yes" if podcast_config.get("explicit") else "no"

    rss_lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<rss version="2.0" xmlns:itunes="{ITUNES_NS}">',
        '<channel>',
        f'<title>{saxutils.escape(title)}</title>',
        f'<description>{saxutils.escape(podcast_config.get("description", ""))}</description>',
        f'<link>{saxutils.escape(podcast_config.get("url", ""))}</link>',
        f'<language>{podcast_config.get("language", "en-us")}</language>',
        f'<pubDate>{format_datetime(now)}</pubDate>',
        f'<itunes:author>{saxutils.escape(podcast_config.get("author", ""))}</itunes:author>',
    ]
    if podcast_config.get("image"):
        rss_lines.append(f'<itunes:image href="{_attr(podcast_config["image"])}"/>')
    if podcast_config.get("category"):
        rss_lines.append(f'<itunes:category text="{_attr(podcast_config["category"])}"/>')
    rss_lines.append(f'<itunes:explicit>{explicit}</itunes:explicit>')

    seen_guids = {}
    for entry in selection:
        item = feed_item(entry)
        # Episodes sharing a link or guid still need distinct ids
        count = seen_guids.get(item["guid"], 0)
        seen_guids[item["guid"]] = count + 1
        if count:
            item["guid"] = f'{item["guid"]}#{count + 1}'
        rss_lines.extend([
            '<item>',
            f'<title>{saxutils.escape(item["title"])}</title>',
            f'<description>{saxutils.escape(item["description"])}</description>',
            f'<enclosure url="{_attr(item["audio_url"])}" type="audio/mpeg" length="0"/>',
            f'<guid isPermaLink="false">{saxutils.escape(item["guid"])}</guid>',
            f'<pubDate>{item["pub_date"]}</pubDate>',
            f'<itunes:duration>{item["duration_seconds"]}</itunes:duration>',
            '</item>'
        ])

    rss_lines.extend([
        '</channel>',
        '</rss>'
    ])
    return '\n'.join(rss_lines)


def write_feed(xml, path):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(xml)
    print(f"✅ Wrote feed to {path}")
    return path
