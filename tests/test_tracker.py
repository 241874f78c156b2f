"""Tests for BlockTracker."""

from sqlblocks.parsing.diagnostics import DiagnosticKind
from sqlblocks.parsing.scanner import scan
from sqlblocks.parsing.schemas import Source
from sqlblocks.parsing.tracker import BlockTracker


def _track(*contents: str) -> BlockTracker:
    tracker = BlockTracker()
    for i, content in enumerate(contents, start=1):
        tracker.track(scan(Source(content=content, name=f"s{i}.sql")))
    return tracker


class TestBlockTrackerPairs:
    """Tests for pairing start and end markers."""

    def test_single_block(self) -> None:
        """Test a well-formed block yields one statement."""
        tracker = _track("-- #start# One\nSELECT 1\n-- #end# One")
        assert tracker.diagnostics == []
        assert [(s.name, s.body) for s in tracker.statements] == [("One", "SELECT 1")]

    def test_end_matches_case_insensitively(self) -> None:
        """Test that the end marker may use different casing."""
        tracker = _track("-- #start# Report\nSELECT 1\n-- #end# REPORT")
        assert tracker.diagnostics == []
        assert tracker.statements[0].name == "Report"

    def test_blank_lines_do_not_end_block(self) -> None:
        """Test that blank lines inside a block are dropped from the body."""
        tracker = _track("-- #start# T\n\nSELECT a,\n\n\n  b\nFROM x\n\n-- #end# T")
        assert tracker.statements[0].body == "SELECT a,\nb\nFROM x"

    def test_text_outside_blocks_is_ignored(self) -> None:
        """Test that lines outside any block are not collected."""
        tracker = _track("SELECT 0\n-- #start# T\nSELECT 1\n-- #end# T\nSELECT 2")
        assert tracker.statements[0].body == "SELECT 1"


class TestBlockTrackerDiagnostics:
    """Tests for malformed block detection."""

    def test_duplicate_in_one_source(self) -> None:
        """Test that a second start of the same tag is a duplicate."""
        tracker = _track(
            "-- #start# first\nSELECT 1\n-- #end# first\n"
            "-- #start# FIRST\nSELECT 2\n-- #end# FIRST"
        )
        duplicates = [d for d in tracker.diagnostics if d.kind == DiagnosticKind.DUPLICATE_TAG]
        assert len(duplicates) == 1
        assert duplicates[0].tag == "FIRST"
        assert duplicates[0].line == 4
        assert duplicates[0].column == 11

    def test_duplicate_across_sources(self) -> None:
        """Test that duplicates are detected across sources of one run."""
        tracker = _track(
            "-- #start# Shared\nSELECT 1\n-- #end# Shared",
            "\n-- #start# SHARED\nSELECT 2\n-- #end# SHARED",
        )
        kinds = [d.kind for d in tracker.diagnostics]
        assert DiagnosticKind.DUPLICATE_TAG in kinds
        duplicate = tracker.diagnostics[kinds.index(DiagnosticKind.DUPLICATE_TAG)]
        assert duplicate.source == "s2.sql"
        assert duplicate.line == 2
        assert str(duplicate).startswith("s2.sql:(line 2, col 11): error: Duplicate tag 'SHARED'")

    def test_end_cannot_close_block_from_other_source(self) -> None:
        """Test that an end marker only closes blocks of its own source."""
        tracker = _track("-- #start# Split\nSELECT 1", "-- #end# Split")
        assert [d.kind for d in tracker.diagnostics] == [DiagnosticKind.MISSING_END]
        assert tracker.diagnostics[0].source == "s1.sql"
        assert tracker.statements == []

    def test_repeated_block_in_other_source_only_duplicate(self) -> None:
        """Test that closing a duplicated block is not also an unmatched end."""
        block = "-- #start# X\nSELECT 1\n-- #end# X"
        tracker = _track(block, block)

        assert [d.kind for d in tracker.diagnostics] == [DiagnosticKind.DUPLICATE_TAG]
        assert str(tracker.diagnostics[0]) == (
            "s2.sql:(line 1, col 11): error: Duplicate tag 'X' found. Each tag must be unique."
        )

    def test_missing_end_names_opening_source(self) -> None:
        """Test that close-out diagnostics name the source that opened the block."""
        tracker = _track("SELECT 0", "-- #start# Open\nSELECT 1", "-- #start# Empty\n-- #end# Empty")
        assert [(d.kind, d.source) for d in tracker.diagnostics] == [
            (DiagnosticKind.MISSING_END, "s2.sql"),
            (DiagnosticKind.EMPTY_BLOCK, "s3.sql"),
        ]

    def test_unmatched_end(self) -> None:
        """Test an end marker without a start."""
        tracker = _track("SELECT 1\n-- #end# Orphan")
        assert len(tracker.diagnostics) == 1
        diagnostic = tracker.diagnostics[0]
        assert diagnostic.kind == DiagnosticKind.UNMATCHED_END
        assert str(diagnostic) == (
            "s1.sql:(line 2, col 9): error: End tag 'Orphan' found without corresponding start tag."
        )

    def test_missing_end_reported_at_start_line(self) -> None:
        """Test a block that is never closed."""
        tracker = _track("\n\n-- #start# MySpecialTag\nSELECT 1\n-- Missing end tag")
        assert len(tracker.diagnostics) == 1
        assert str(tracker.diagnostics[0]) == "s1.sql:(line 3): error: End tag 'MySpecialTag' is missing."
        assert tracker.statements == []

    def test_empty_block(self) -> None:
        """Test a block with only blank lines."""
        tracker = _track("-- #start# Nothing\n\n   \n-- #end# Nothing")
        assert len(tracker.diagnostics) == 1
        assert tracker.diagnostics[0].kind == DiagnosticKind.EMPTY_BLOCK
        assert tracker.diagnostics[0].line == 1
        assert tracker.statements == []

    def test_scanning_continues_after_problems(self) -> None:
        """Test that every problem in a source is reported, in line order."""
        tracker = _track(
            "-- #end# Early\n"
            "-- #start#\n"
            "-- #start# Good\nSELECT 1\n-- #end# Good\n"
            "-- #start# Good\nSELECT 2\n"
            "-- #start# Empty\n-- #end# Empty\n"
            "-- #start# Open\nSELECT 3"
        )
        kinds = [d.kind for d in tracker.diagnostics]
        assert kinds == [
            DiagnosticKind.UNMATCHED_END,
            DiagnosticKind.MALFORMED_MARKER_TAG,
            DiagnosticKind.DUPLICATE_TAG,
            DiagnosticKind.MISSING_END,
            DiagnosticKind.EMPTY_BLOCK,
        ]
        assert [d.line for d in tracker.diagnostics] == [1, 2, 6, 10, 8]

    def test_tags_keep_first_casing(self) -> None:
        """Test that tracked tags keep the casing that opened them."""
        tracker = _track("-- #start# CamelCase\nSELECT 1\n-- #end# camelcase")
        assert tracker.tags == ["CamelCase"]
