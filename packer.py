#!/usr/bin/env python3
"""
Greedy packer for the commute playlist.
Fills the target listening time from the highest scored episodes, with a
small overflow allowance that only strong episodes may use.
"""

from scoring import ScoredEpisode

OVERFLOW_MINUTES = 15
OVERFLOW_MIN_SCORE = 60
LONG_EPISODE_MINUTES = 90
LONG_EPISODE_MIN_SCORE = 50


def total_minutes(selection):
    return sum(entry.duration_minutes for entry in selection)


def _is_duplicate(entry, selection):
    """Same title as an episode already selected."""
    return any(chosen.title == entry.title for chosen in selection)


def pack_selection(briefing, scored, target_minutes):
    """Select episodes in descending score order until the target is met.

    briefing should already have passed the freshness gate; when given it
    always opens the selection. Returns ScoredEpisode entries in play order.
    """
    selection = []
    current = 0

    if briefing is not None:
        selection.append(ScoredEpisode(episode=briefing, score=None))
        current += briefing.duration_minutes
        print(f"[{round(briefing.duration_minutes)}m] START: {briefing.source_name}: {briefing.title}")

    # sorted() is stable, so equal scores keep their fetch order
    ranked = sorted(scored, key=lambda e: e.score, reverse=True)

    print("\n--- Selected for Commute ---")
    for entry in ranked:
        if current >= target_minutes:
            break
        if _is_duplicate(entry, selection):
            continue

        duration = entry.duration_minutes
        if duration > LONG_EPISODE_MINUTES and entry.score < LONG_EPISODE_MIN_SCORE:
            print(f"  ⏭️  Too long for its score ({round(duration)}m, {entry.score}): {entry.title}")
            continue
        if current + duration > target_minutes + OVERFLOW_MINUTES and entry.score < OVERFLOW_MIN_SCORE:
            continue

        selection.append(entry)
        current += duration
        print(f"[{round(duration)}m] {entry.episode.source_name}: {entry.title} (Score: {entry.score})")
        if current >= target_minutes:
            break

    print(f"\nTotal: {round(current)} mins")
    return selection
