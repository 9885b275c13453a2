#!/usr/bin/env python3
"""Validate the generated commute feed before it is published."""

import sys
import os
import xml.etree.ElementTree as ET

ITUNES_NS = "http://www.itunes.com/dtds/podcast-1.0.dtd"
FEED_PATH = "commute.xml"


def validate_feed(feed_path=FEED_PATH):
    """Check the commute feed is playable in podcast apps. Returns (pass, warnings, errors)."""
    errors = []
    warnings = []

    if not os.path.exists(feed_path):
        return False, [], [f"Feed file not found: {feed_path}"]

    try:
        tree = ET.parse(feed_path)
    except ET.ParseError as e:
        return False, [], [f"XML parse error: {e}"]

    root = tree.getroot()
    channel = root.find("channel")
    if channel is None:
        return False, [], ["Missing <channel> element"]

    # --- Required channel tags ---
    for tag in ("title", "link", "description"):
        if not channel.findtext(tag):
            errors.append(f"Missing required channel tag: <{tag}>")

    if not channel.findtext(f"{{{ITUNES_NS}}}explicit"):
        warnings.append("Missing recommended channel tag: <itunes:explicit>")

    # --- Episode checks ---
    items = channel.findall("item")
    if not items:
        # An empty commute is a valid outcome, just worth flagging
        warnings.append("Feed has no episodes")
    else:
        print(f"  Episodes: {len(items)}")

    guids = set()
    for i, item in enumerate(items):
        title = item.findtext("title") or f"Episode {i+1}"
        enclosure = item.find("enclosure")
        if enclosure is None:
            errors.append(f'Episode "{title}": missing <enclosure> tag')
        else:
            if not enclosure.get("url", ""):
                errors.append(f'Episode "{title}": empty enclosure URL')
            enc_type = enclosure.get("type", "")
            if not enc_type.startswith("audio/"):
                warnings.append(
                    f'Episode "{title}": enclosure type is "{enc_type}" (expected audio/*)'
                )

        guid = item.findtext("guid")
        if not guid:
            warnings.append(f'Episode "{title}": missing <guid> — may cause dedup issues')
        elif guid in guids:
            warnings.append(f'Episode "{title}": duplicate <guid> {guid}')
        else:
            guids.add(guid)

        duration = item.findtext(f"{{{ITUNES_NS}}}duration")
        if not duration:
            warnings.append(f'Episode "{title}": missing <itunes:duration>')
        elif not duration.isdigit():
            warnings.append(f'Episode "{title}": non-numeric <itunes:duration> "{duration}"')

    passed = len(errors) == 0
    return passed, warnings, errors


def main():
    feed_path = sys.argv[1] if len(sys.argv) > 1 else FEED_PATH
    print(f"Validating: {feed_path}\n")

    passed, warnings, errors = validate_feed(feed_path)

    if errors:
        print(f"\n ERRORS ({len(errors)}):")
        for e in errors:
            print(f"  - {e}")

    if warnings:
        print(f"\n WARNINGS ({len(warnings)}):")
        for w in warnings:
            print(f"  - {w}")

    if passed and not warnings:
        print("\n  Feed passes all checks!")
    elif passed:
        print(f"\n  Feed passes required checks but has {len(warnings)} warning(s)")
    else:
        print(f"\n  Feed has {len(errors)} error(s) to fix before publishing")

    return 0 if passed else 1


if __name__ == "__main__":
    sys.exit(main())
