"""
Integration tests for the diff viewer pipeline.

These tests drive DiffViewer with GitHub pull request file objects
the way the review UI does.
"""

import pytest

from codereview_diff import DiffViewer, DisplayOptions, FileChange
from codereview_diff.config import AppConfig, DisplayConfig, PairingConfig
from codereview_diff.models.diff_line import LineKind
from codereview_diff.viewer.diff_viewer import NO_FILE_MESSAGE, NO_PATCH_MESSAGE
from codereview_diff.viewer.file_list import (
    group_files_by_directory,
    filter_files,
    status_code,
    display_name,
)


SIMPLE_PATCH = "@@ -1,2 +1,3 @@\n context line\n-old line\n+new line\n+added line"

FULL_PATCH = (
    "diff --git a/src/app.py b/src/app.py\n"
    "index 83db48f..bf269f4 100644\n"
    "--- a/src/app.py\n"
    "+++ b/src/app.py\n"
    "@@ -1,3 +1,3 @@\n"
    " import os\n"
    "-def main():\n"
    "+def main(argv):\n"
    "     pass\n"
    "@@ -40,2 +40,3 @@\n"
    " if __name__ == '__main__':\n"
    "-    main()\n"
    "+    import sys\n"
    "+    main(sys.argv)"
)


def github_file(**overrides):
    data = {
        "sha": "bbcd538c8e72b8c175046e27cc8f907076331401",
        "filename": "src/app.py",
        "status": "modified",
        "additions": 3,
        "deletions": 2,
        "changes": 5,
        "patch": FULL_PATCH,
    }
    data.update(overrides)
    return FileChange.from_github(data)


class TestDiffViewer:
    """Test the complete render pipeline."""

    def setup_method(self):
        """Set up test fixtures."""
        self.viewer = DiffViewer(AppConfig())

    def test_side_by_side_is_default(self):
        view = self.viewer.render(github_file())

        assert view.view_mode == "side_by_side"
        assert view.filename == "src/app.py"
        assert view.status_label == "~ Modified"
        assert view.stats.additions == 3
        assert view.stats.deletions == 2
        assert view.reported_additions == 3
        assert not view.is_empty

        # meta lines hidden, hunk headers shown
        assert all(line.kind != LineKind.META for line in view.lines)
        assert [row.row_type for row in view.side_by_side_rows] == [
            "hunk-header", "context", "change", "context",
            "hunk-header", "context", "deletion", "addition", "addition",
        ]
        change_row = view.side_by_side_rows[2]
        assert (change_row.left_number, change_row.left_text) == (2, "def main():")
        assert (change_row.right_number, change_row.right_text) == (2, "def main(argv):")

    def test_unified_view(self):
        view = self.viewer.render(github_file(), view_mode="unified")

        assert view.pairs == []
        assert view.side_by_side_rows == []
        numbers = [row.line_number for row in view.unified_rows]
        assert numbers == [None, 1, 2, 2, 3, None, 40, 41, 41, 42]

    def test_plain_view_shows_every_line(self):
        view = self.viewer.render(github_file(), view_mode="plain")

        assert len(view.plain_rows) == len(FULL_PATCH.split("\n"))
        assert view.plain_rows[0].text.startswith("diff --git")
        assert view.plain_rows[0].position == 1

    def test_hidden_hunk_headers_keep_numbering(self):
        options = DisplayOptions(show_hunk_headers=False)
        view = self.viewer.render(github_file(), options=options, view_mode="unified")

        assert all(line.kind != LineKind.HUNK_HEADER for line in view.lines)
        by_text = {row.text: row.line_number for row in view.unified_rows}
        assert by_text[" if __name__ == '__main__':"] == 40

    def test_full_context_shows_meta(self):
        view = self.viewer.render(github_file(), options=DisplayOptions(show_full_context=True))

        meta_rows = [row for row in view.side_by_side_rows if row.row_type == "meta"]
        assert len(meta_rows) == 4
        assert meta_rows[0].left_text == meta_rows[0].right_text
        assert meta_rows[0].left_number is None

    def test_no_file_selected(self):
        view = self.viewer.render(None)

        assert view.is_empty
        assert view.message == NO_FILE_MESSAGE
        assert view.filename is None
        assert view.status_label == ""

    def test_binary_file(self):
        view = self.viewer.render(github_file(filename="logo.png", status="added", patch=None))

        assert view.is_empty
        assert view.is_binary
        assert view.message == NO_PATCH_MESSAGE
        assert view.status_label == "+ Added"
        assert view.reported_additions == 3
        assert view.pairs == []
        assert view.side_by_side_rows == []

    def test_reported_counts_may_disagree(self):
        view = self.viewer.render(github_file(additions=10, deletions=0))

        assert view.stats.additions == 3
        assert view.reported_additions == 10

    def test_unknown_status_label_falls_back(self):
        view = self.viewer.render(github_file(status="copied"))

        assert view.status_label == "copied"

    def test_invalid_view_mode(self):
        with pytest.raises(ValueError):
            self.viewer.render(github_file(), view_mode="split")

    def test_config_drives_defaults(self):
        config = AppConfig(
            display=DisplayConfig(show_hunk_headers=False, view_mode="unified"),
            pairing=PairingConfig(lookahead_window=0),
        )
        viewer = DiffViewer(config)
        view = viewer.render(github_file())

        assert view.view_mode == "unified"
        assert all(row.kind != LineKind.HUNK_HEADER for row in view.unified_rows)

        paired = viewer.render(github_file(), view_mode="side_by_side")
        assert all(pair.pair_type != "change" for pair in paired.pairs)

    def test_render_is_idempotent(self):
        first = self.viewer.render(github_file())
        second = self.viewer.render(github_file())

        assert first.side_by_side_rows == second.side_by_side_rows


class TestConcreteScenarios:
    """Rendering of bare patches."""

    def setup_method(self):
        self.viewer = DiffViewer(AppConfig())

    def test_simple_patch(self):
        view = self.viewer.render_patch(SIMPLE_PATCH)

        assert [line.kind for line in view.lines] == [
            LineKind.HUNK_HEADER, LineKind.CONTEXT, LineKind.DELETION,
            LineKind.ADDITION, LineKind.ADDITION,
        ]
        assert [line.old_line_number for line in view.lines] == [None, 1, 2, None, None]
        assert [line.new_line_number for line in view.lines] == [None, 1, None, 2, 3]
        assert [pair.pair_type for pair in view.pairs] == ["hunk-header", "context", "change", "addition"]

    def test_meta_only_patch(self):
        view = self.viewer.render_patch("diff --git a/x b/x\nindex abc..def 100644\n--- a/x\n+++ b/x")

        assert view.lines == []
        assert view.side_by_side_rows == []
        assert view.stats.additions == 0
        assert view.stats.deletions == 0

    def test_empty_patch(self):
        view = self.viewer.render_patch("")

        assert view.stats.additions == 0
        assert view.stats.deletions == 0
        assert view.lines == []
        assert view.pairs == []

    def test_identical_lines_pair_as_change(self):
        view = self.viewer.render_patch("-foo bar baz\n+foo bar baz")

        assert [pair.pair_type for pair in view.pairs] == ["change"]

    def test_unrelated_lines_stay_separate(self):
        view = self.viewer.render_patch("-xyz\n+abc")

        assert [pair.pair_type for pair in view.pairs] == ["deletion", "addition"]


class TestFileList:
    """Test grouping and filtering of changed files."""

    def setup_method(self):
        self.files = [
            FileChange(filename="README.md", status="modified", patch="@@ -1,1 +1,1 @@\n-a\n+b"),
            FileChange(filename="src/b.py", status="added", patch="@@ -0,0 +1,1 @@\n+x"),
            FileChange(filename="docs/logo.png", status="added"),
            FileChange(filename="src/a.py", status="removed", patch="@@ -1,1 +0,0 @@\n-x"),
            FileChange(filename="Api/routes.py", status="renamed", patch=" x"),
            FileChange(filename="setup.cfg", status="copied", patch=" x"),
        ]

    def test_group_by_directory(self):
        groups = group_files_by_directory(self.files)

        assert [group.directory for group in groups] == ["", "Api", "docs", "src"]
        assert [f.filename for f in groups[0].files] == ["README.md", "setup.cfg"]
        assert [f.filename for f in groups[3].files] == ["src/b.py", "src/a.py"]
        assert groups[0].label == ""
        assert groups[3].label == "src/"

    def test_group_empty(self):
        assert group_files_by_directory([]) == []

    def test_status_codes(self):
        assert [status_code(f.status) for f in self.files] == ["M", "A", "A", "D", "R", ""]

    def test_display_name(self):
        assert display_name(self.files[1], "src") == "b.py"
        assert display_name(self.files[0], "") == "README.md"

    def test_binary_indicator(self):
        assert [f.filename for f in self.files if f.is_binary] == ["docs/logo.png"]

    def test_filter_files(self):
        assert [f.filename for f in filter_files(self.files, "SRC/")] == ["src/b.py", "src/a.py"]
        assert filter_files(self.files, "  ") == self.files
        assert filter_files(self.files, "nothing") == []
