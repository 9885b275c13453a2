"""Tests for validate_feed module."""

from feed_writer import render_feed, write_feed
from scoring import ScoredEpisode
from validate_feed import ITUNES_NS, validate_feed, main

PODCAST = {
    "title": "Evening Commute",
    "description": "Smart, relaxing mix for the drive home.",
    "url": "https://example.github.io/commute-feed/",
}


class TestValidateFeed:
    def test_generated_feed_passes(self, tmp_path, make_episode, now):
        selection = [
            ScoredEpisode(episode=make_episode(title="One", guid="g1")),
            ScoredEpisode(episode=make_episode(title="Two", guid="g2"), score=20),
        ]
        path = write_feed(render_feed(selection, PODCAST, now), tmp_path / "commute.xml")
        passed, warnings, errors = validate_feed(str(path))
        assert passed
        assert errors == []
        assert warnings == []

    def test_empty_feed_warns_but_passes(self, tmp_path, now):
        path = write_feed(render_feed([], PODCAST, now), tmp_path / "commute.xml")
        passed, warnings, errors = validate_feed(str(path))
        assert passed
        assert any("no episodes" in w for w in warnings)

    def test_missing_file(self, tmp_path):
        passed, _, errors = validate_feed(str(tmp_path / "nope.xml"))
        assert not passed
        assert "not found" in errors[0]

    def test_parse_error(self, tmp_path):
        path = tmp_path / "broken.xml"
        path.write_text("<rss><channel>")
        passed, _, errors = validate_feed(str(path))
        assert not passed
        assert "XML parse error" in errors[0]

    def test_missing_enclosure_and_non_audio_type(self, tmp_path):
        path = tmp_path / "bad.xml"
        path.write_text(
            '<rss version="2.0"><channel><title>t</title><link>l</link><description>d</description>'
            '<item><title>A</title><guid>same</guid></item>'
            '<item><title>B</title><guid>same</guid>'
            '<enclosure url="https://x/b.mp3" type="video/mp4"/></item>'
            '</channel></rss>'
        )
        passed, warnings, errors = validate_feed(str(path))
        assert not passed
        assert any("missing <enclosure>" in e for e in errors)
        assert any("video/mp4" in w for w in warnings)

    def test_duplicate_guid_is_only_a_warning(self, tmp_path):
        path = tmp_path / "dupes.xml"
        items = "".join(
            f'<item><title>Part {n}</title><guid>https://show.example/ep</guid>'
            f'<enclosure url="https://x/{n}.mp3" type="audio/mpeg"/>'
            f'<itunes:duration>600</itunes:duration></item>'
            for n in (1, 2, 3)
        )
        path.write_text(
            f'<rss version="2.0" xmlns:itunes="{ITUNES_NS}"><channel>'
            '<title>t</title><link>l</link><description>d</description>'
            f'{items}</channel></rss>'
        )
        passed, warnings, errors = validate_feed(str(path))
        assert passed
        assert errors == []
        assert sum("duplicate <guid>" in w for w in warnings) == 2

    def test_main_exit_codes(self, tmp_path, now, monkeypatch):
        path = write_feed(render_feed([], PODCAST, now), tmp_path / "commute.xml")
        monkeypatch.setattr("sys.argv", ["validate_feed.py", str(path)])
        assert main() == 0
        monkeypatch.setattr("sys.argv", ["validate_feed.py", str(tmp_path / "missing.xml")])
        assert main() == 1
