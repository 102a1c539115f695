"""Tests for SRT serialization and parsing."""

from pathlib import Path

import pytest

from capline.core.errors import FormatError
from capline.core.events import CaptionEvent
from capline.core.models import CaptionEntry, Segment
from capline.subtitles.srt import parse, parse_with_diagnostics, serialize, to_entries


class TestSerialize:
    def test_empty(self):
        assert serialize([]) == ""

    def test_exact_output(self):
        segments = [
            Segment(start=0, end=1.5, text="hello world"),
            Segment(start=2, end=3.25, text="second   line ."),
        ]
        assert serialize(segments) == (
            "1\n"
            "00:00:00,000 --> 00:00:01,500\n"
            "Hello world\n"
            "\n"
            "2\n"
            "00:00:02,000 --> 00:00:03,250\n"
            "Second line."
        )

    def test_no_trailing_whitespace(self, segments):
        out = serialize(segments)
        assert out == out.rstrip()

    def test_keeps_input_order(self):
        segments = [Segment(start=5, end=6, text="later"), Segment(start=1, end=2, text="earlier")]
        out = serialize(segments)
        assert out.index("Later") < out.index("Earlier")
        assert out.startswith("1\n00:00:05,000")

    def test_to_entries_numbers_from_one(self, segments):
        entries = to_entries(segments)
        assert [e.index for e in entries] == [1, 2, 3]
        assert entries[0] == CaptionEntry(index=1, start=0.0, end=2.5, text="Hello there")


class TestParse:
    def test_sample_file(self, sample_srt: Path):
        segments = parse(sample_srt.read_text())
        assert len(segments) == 3
        assert segments[0] == Segment(start=1.0, end=3.5, text="Bonjour tout le monde.")
        assert segments[1].start == 3.5
        assert segments[1].end == 6.25
        assert segments[2].text == "Merci!"

    def test_multiline_text_joined_with_space(self, sample_srt: Path):
        segments = parse(sample_srt.read_text())
        assert segments[1].text == "Aujourd'hui nous parlons de sous-titres."

    def test_crlf_line_endings(self):
        text = (
            "1\r\n00:00:01,000 --> 00:00:02,000\r\nHello\r\n\r\n"
            "2\r\n00:00:02,000 --> 00:00:03,000\r\nWorld\r\n"
        )
        assert [s.text for s in parse(text)] == ["Hello", "World"]

    def test_whitespace_only_separator_line(self):
        text = "1\n00:00:01,000 --> 00:00:02,000\nA\n   \n2\n00:00:03,000 --> 00:00:04,000\nB"
        assert [s.text for s in parse(text)] == ["A", "B"]

    def test_index_lines_not_checked(self):
        text = "7\n00:00:01,000 --> 00:00:02,000\nA\n\nx\n00:00:03,000 --> 00:00:04,000\nB"
        assert [s.text for s in parse(text)] == ["A", "B"]

    def test_wide_hours(self):
        text = "1\n100:00:00,000 --> 100:00:01,000\nLate"
        assert parse(text)[0].start == 360000

    def test_skips_malformed_blocks(self):
        text = (
            "1\n00:00:01,000 --> 00:00:02,000\nGood one\n\n"
            "2\n00:00:02,000 --> 00:00:03,000\n\n"
            "3\nnot a timestamp\nText\n\n"
            "4\n00:00:04,000 --> 00:00:05,000\nGood two"
        )
        assert [s.text for s in parse(text)] == ["Good one", "Good two"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n"])
    def test_blank_input_gives_no_segments(self, text):
        assert parse(text) == []

    @pytest.mark.parametrize(
        "text",
        ["garbage", "1\n00:00:01 --> 00:00:02\nNo millis", "1\n00:00:01,000 --> 00:00:02,000"],
    )
    def test_no_valid_entry_raises(self, text):
        with pytest.raises(FormatError):
            parse(text)


class TestParseDiagnostics:
    TEXT = (
        "1\n00:00:01,000 --> 00:00:02,000\nGood\n\n"
        "2\n00:00:02,000 --> 00:00:03,000\n\n"
        "3\nnot a timestamp\nText"
    )

    def test_reports_skipped_blocks(self):
        result = parse_with_diagnostics(self.TEXT)
        assert len(result.segments) == 1
        assert [s.block for s in result.skipped] == [2, 3]
        assert "at least 3 lines" in result.skipped[0].reason
        assert "timestamp" in result.skipped[1].reason
        assert result.skipped[1].raw.startswith("3\nnot a timestamp")

    def test_does_not_raise_without_entries(self):
        result = parse_with_diagnostics("garbage")
        assert result.segments == []
        assert len(result.skipped) == 1

    def test_events_emitted(self):
        events: list[CaptionEvent] = []
        parse(self.TEXT, on_event=events.append)
        skip_events = [e for e in events if e.data and "block" in e.data]
        assert [e.data["block"] for e in skip_events] == [2, 3]
        assert all(e.stage == "parse" for e in events)
        assert events[-1].data == {"parsed": 1, "skipped": 2}


class TestRoundTrip:
    def test_serialize_parse_serialize(self, segments):
        first = serialize(segments)
        assert serialize(parse(first)) == first

    def test_times_and_text_survive(self):
        segments = [
            Segment(start=0.1234, end=1.9999, text="first  line"),
            Segment(start=2.0, end=3.5, text="<i>second</i> line.and more"),
        ]
        parsed = parse(serialize(segments))
        assert len(parsed) == 2
        for orig, back in zip(segments, parsed):
            assert abs(orig.start - back.start) < 1e-3
            assert abs(orig.end - back.end) < 1e-3
        assert [s.text for s in parsed] == ["First line", "Second line. And more"]
