#!/usr/bin/env python3
"""
Feed fetching for the Commute Curator.
Downloads each configured podcast feed and converts its newest entries
into EpisodeCandidates. A failing feed contributes nothing; the rest continue.
"""

import feedparser
import requests

from briefing_selector import is_briefing_feed
from episodes import episode_from_entry

USER_AGENT = 'CommuteCurator/1.0 (+https://github.com/commute-curator/commute-feed)'
REQUEST_TIMEOUT = 10


def fetch_feed(feed_config, now, items_per_feed=5, timeout=REQUEST_TIMEOUT):
    """Fetch one feed and return its playable episodes (newest first)."""
    name = feed_config.get('name', feed_config.get('url', '?'))
    try:
        headers = {
            'User-Agent': USER_AGENT,
            'Accept': 'application/rss+xml, application/xml, text/xml, */*'
        }
        response = requests.get(feed_config['url'], headers=headers, timeout=timeout)
        response.raise_for_status()

        parsed = feedparser.parse(response.content)

        episodes = []
        for entry in parsed.entries[:items_per_feed]:
            episode = episode_from_entry(entry, feed_config, now)
            if episode is not None:
                episodes.append(episode)

        print(f"  ✓ {name}: {len(episodes)} episodes")
        return episodes

    except Exception as e:
        print(f"  ❌ Failed to fetch {name}: {e}")
        return []


def fetch_all_feeds(feeds, now, items_per_feed=5, timeout=REQUEST_TIMEOUT):
    """Fetch every feed in order. Returns [(feed_config, episodes), ...]."""
    print(f"📥 Fetching {len(feeds)} feeds...")
    results = []
    for feed_config in feeds:
        episodes = fetch_feed(feed_config, now, items_per_feed=items_per_feed, timeout=timeout)
        results.append((feed_config, episodes))
    return results


def split_candidates(feed_results):
    """Separate briefing feeds from the general candidate pool."""
    briefing_feeds = []
    candidates = []
    for feed_config, episodes in feed_results:
        if is_briefing_feed(feed_config):
            briefing_feeds.append((feed_config, episodes))
        else:
            candidates.extend(episodes)
    return briefing_feeds, candidates
