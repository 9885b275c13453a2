#!/usr/bin/env python3
"""
Rule context for a curation run.
Merges base scoring rules with the mode-specific lists (e.g. date night)
into a fresh immutable ruleset, leaving the loaded config untouched.
"""

from dataclasses import dataclass
from typing import Tuple

from config_loader import DEFAULT_MODE


@dataclass(frozen=True)
class EffectiveRules:
    """Per-run scoring rules after any mode extensions are applied."""

    boost_keywords: Tuple[str, ...] = ()
    block_keywords: Tuple[str, ...] = ()
    boost_guests: Tuple[str, ...] = ()
    mode_active: bool = False
    mode_name: str = DEFAULT_MODE["name"]
    affinity_tag: str = DEFAULT_MODE["affinity_tag"]


def is_mode_day(today, mode_config):
    """True when today's weekday (Monday=0) matches the mode trigger."""
    weekday = mode_config.get("weekday")
    if weekday is None:
        return False
    return today.weekday() == int(weekday)


def build_rules(base_rules, is_special_day, mode_config=None):
    """Build EffectiveRules from the config's rules block.

    On a special day, `<mode>_keywords` extends the boost list and
    `<mode>_block` extends the block list.
    """
    mode_config = mode_config or {}
    mode_name = mode_config.get("name", DEFAULT_MODE["name"])

    boost = list(base_rules.get("boost_keywords", []))
    block = list(base_rules.get("block_keywords", []))
    guests = list(base_rules.get("boost_guests", []))

    if is_special_day:
        boost.extend(base_rules.get(f"{mode_name}_keywords", []))
        block.extend(base_rules.get(f"{mode_name}_block", []))

    return EffectiveRules(
        boost_keywords=tuple(boost),
        block_keywords=tuple(block),
        boost_guests=tuple(guests),
        mode_active=bool(is_special_day),
        mode_name=mode_name,
        affinity_tag=mode_config.get("affinity_tag", DEFAULT_MODE["affinity_tag"]),
    )
