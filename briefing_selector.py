#!/usr/bin/env python3
"""
News briefing selector for the Commute Curator.
Reserves the opening slot for the freshest short briefing from feeds
tagged both "news" and "briefing".
"""

BRIEFING_TAGS = {'news', 'briefing'}
BRIEFING_MAX_MINUTES = 15
BRIEFING_MAX_AGE_HOURS = 24


def is_briefing_feed(feed_config):
    """A feed is reserved for briefings only when it has both tags."""
    return BRIEFING_TAGS.issubset(set(feed_config.get('tags') or []))


def select_briefing(feed_results):
    """Pick the newest short briefing across briefing feeds.

    feed_results is a list of (feed_config, episodes) pairs. Within each
    feed the first episode under BRIEFING_MAX_MINUTES is taken; a later
    feed only replaces the holder if it was published strictly later.
    """
    briefing = None
    for feed_config, episodes in feed_results:
        if not is_briefing_feed(feed_config):
            continue
        pick = next((e for e in episodes if e.duration_minutes < BRIEFING_MAX_MINUTES), None)
        if pick and (briefing is None or pick.published_at > briefing.published_at):
            briefing = pick
    return briefing


def is_fresh(briefing, now, max_age_hours=BRIEFING_MAX_AGE_HOURS):
    return briefing.age_hours(now) < max_age_hours


def fresh_briefing(briefing, now, max_age_hours=BRIEFING_MAX_AGE_HOURS):
    """Return the briefing if it is recent enough to open the commute."""
    if briefing is None:
        print("  ℹ️ No news briefing available")
        return None
    if not is_fresh(briefing, now, max_age_hours):
        print(f"  ⏭️  Briefing too old ({briefing.age_hours(now):.0f}h): {briefing.title}")
        return None
    return briefing
