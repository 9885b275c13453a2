#!/usr/bin/env python3
"""
Relevance scoring for commute candidates.

Additive point system over keywords, guests, recency and length, with
extra tag adjustments when the run's mode (date night) is active.
"""

from dataclasses import dataclass
from typing import Optional

from episodes import EpisodeCandidate

BOOST_KEYWORD_POINTS = 15
BOOST_GUEST_POINTS = 50
BLOCK_KEYWORD_POINTS = -100

# Tags whose content goes stale quickly
TIMELY_TAGS = {'news', 'tech', 'space', 'business'}

# Anything at or below this never reaches the packer
DISCARD_THRESHOLD = -20

MODE_AFFINITY_POINTS = 40
MODE_COMEDY_POINTS = 30
MODE_TECH_POINTS = -20


@dataclass(frozen=True)
class ScoredEpisode:
    """An episode plus its score. The briefing carries score=None."""

    episode: EpisodeCandidate
    score: Optional[int] = None

    @property
    def title(self):
        return self.episode.title

    @property
    def duration_minutes(self):
        return self.episode.duration_minutes


def _keyword_points(text, terms, points):
    return sum(points for term in terms if term.lower() in text)


def recency_points(episode, now):
    """Timely tags decay fast; evergreen content only gets a freshness nudge."""
    age = episode.age_days(now)
    if episode.tags & TIMELY_TAGS:
        if age < 2:
            return 30
        if age < 5:
            return 10
        return -50
    if age < 7:
        return 10
    return 0


def duration_points(minutes):
    points = 0
    if 15 <= minutes <= 60:
        points += 10
    if minutes > 90:
        points -= 30
    if minutes < 5:
        points -= 10
    return points


def mode_points(episode, rules):
    if not rules.mode_active:
        return 0
    points = 0
    if rules.affinity_tag in episode.tags:
        points += MODE_AFFINITY_POINTS
    if 'comedy' in episode.tags:
        points += MODE_COMEDY_POINTS
    if 'tech' in episode.tags:
        points += MODE_TECH_POINTS
    return points


def score_episode(episode, rules, now):
    """Score one candidate. Pure function of (episode, rules, now)."""
    text = f"{episode.title} {episode.summary}".lower()

    score = 0
    score += _keyword_points(text, rules.boost_keywords, BOOST_KEYWORD_POINTS)
    score += _keyword_points(text, rules.boost_guests, BOOST_GUEST_POINTS)
    score += _keyword_points(text, rules.block_keywords, BLOCK_KEYWORD_POINTS)
    score += recency_points(episode, now)
    score += duration_points(episode.duration_minutes)
    score += mode_points(episode, rules)
    return score


def score_candidates(candidates, rules, now):
    """Score all candidates and drop those at or below DISCARD_THRESHOLD."""
    kept = []
    discarded = 0
    for episode in candidates:
        score = score_episode(episode, rules, now)
        if score <= DISCARD_THRESHOLD:
            discarded += 1
            continue
        kept.append(ScoredEpisode(episode=episode, score=score))

    print(f"📊 Scored {len(candidates)} candidates: {len(kept)} kept, {discarded} discarded")
    return kept
