#!/usr/bin/env python3
"""
Commute Curator
Builds a time-boxed evening commute playlist from podcast feeds and
publishes it as a single synthetic podcast feed.
"""

import sys
from pathlib import Path

from config_loader import (
    load_env,
    load_podcast_config,
    get_feeds,
    get_base_rules,
    get_target_duration,
    get_items_per_feed,
    get_mode_config,
    get_local_now,
)
from rules import build_rules, is_mode_day
from feed_fetcher import fetch_all_feeds, split_candidates
from briefing_selector import select_briefing, fresh_briefing
from scoring import score_candidates
from packer import pack_selection
from feed_writer import render_feed, write_feed
from publisher import publish
from validate_feed import validate_feed

SCRIPT_DIR = Path(__file__).parent


def curate(feed_results, base_rules, mode_config, target_minutes, now):
    """Run the scoring and selection engine over already-fetched feeds.

    Returns (selection, rules). No I/O beyond progress output.
    """
    special_day = is_mode_day(now, mode_config)
    rules = build_rules(base_rules, special_day, mode_config)
    if rules.mode_active:
        print(f"❤️ {rules.mode_name.upper()} MODE ACTIVE")

    briefing_feeds, candidates = split_candidates(feed_results)
    briefing = fresh_briefing(select_briefing(briefing_feeds), now)

    scored = score_candidates(candidates, rules, now)
    selection = pack_selection(briefing, scored, target_minutes)
    return selection, rules


def main(publish_feed=True):
    """Main curation workflow."""
    load_env()
    now = get_local_now()
    mode_config = get_mode_config()

    print(f"🎧 Starting Commute Curator... ({now.strftime('%A')}, "
          f"{mode_config['name']}: {is_mode_day(now, mode_config)})")

    feed_results = fetch_all_feeds(get_feeds(), now, items_per_feed=get_items_per_feed())

    selection, rules = curate(
        feed_results, get_base_rules(), mode_config, get_target_duration(), now
    )
    if not selection:
        print("⚠️  Nothing selected, writing an empty feed")

    podcast_config = load_podcast_config()
    xml = render_feed(
        selection, podcast_config, now,
        mode_active=rules.mode_active,
        mode_title_suffix=mode_config.get("title_suffix", ""),
    )
    feed_path = SCRIPT_DIR / podcast_config.get("feed_filename", "commute.xml")
    write_feed(xml, feed_path)

    passed, _, errors = validate_feed(str(feed_path))
    if not passed:
        for error in errors:
            print(f"  ❌ {error}")
        print("⏭️  Feed failed validation, not publishing")
        return 1

    if publish_feed:
        if publish(feed_path, now) and podcast_config.get("url"):
            print(f"Subscribe to:\n{podcast_config['url']}{feed_path.name}")
    return 0


if __name__ == "__main__":
    sys.exit(main(publish_feed="--no-publish" not in sys.argv))
