"""
Unit tests for the changelog core: Change parsing and ChangeLog rendering.

Run with:
    pytest tests/test_changelog.py -v
"""

import pytest

from subchangelog import COMMIT_TYPE_NAMES
from subchangelog.changelog import Change, ChangeLog


# ---------------------------------------------------------------------------
# Change — parsing
# ---------------------------------------------------------------------------

class TestChangeParse:
    """Change.parse() type and message extraction."""

    @pytest.mark.parametrize("commit_type", COMMIT_TYPE_NAMES)
    def test_known_types_are_valid(self, commit_type):
        change = Change.parse(f"{commit_type}: do the thing")
        assert change.is_valid
        assert change.type == commit_type
        assert change.message == "do the thing"

    @pytest.mark.parametrize("comment", [
        "chore: bump version",
        "style: reformat",
        "Feat: capitalized type",
        "feat(api): scoped type",
        "Merge branch 'main' into dev",
        "no colon at all",
    ])
    def test_unknown_leading_token_is_invalid(self, comment):
        change = Change.parse(comment)
        assert not change.is_valid
        assert change.type is None

    def test_message_is_everything_after_first_colon(self):
        change = Change.parse("fix: handle a: b ratios")
        assert change.type == "fix"
        assert change.message == "handle a: b ratios"

    def test_trailing_newline_ignored(self):
        change = Change.parse("feat: add retry logic\n")
        assert change.type == "feat"
        assert change.message == "add retry logic"

    def test_first_matching_line_wins(self):
        comment = "Release 1.2\n\nfix: close socket on error\nfeat: add retry logic\n"
        change = Change.parse(comment)
        assert change.type == "fix"
        assert change.message == "close socket on error"

    @pytest.mark.parametrize("comment", ["", None])
    def test_empty_comment_is_invalid(self, comment):
        assert not Change.parse(comment).is_valid

    def test_module_defaults_to_empty(self):
        assert Change.parse("docs: readme").module == ""
        assert Change.parse("docs: readme", None).module == ""

    def test_module_is_kept(self):
        change = Change.parse("perf: faster lookup", "vendor-lib")
        assert change.module == "vendor-lib"

    def test_str_renders_bullet(self):
        assert str(Change.parse("test: cover parser")) == "- cover parser"

    def test_change_is_immutable(self):
        change = Change.parse("fix: x")
        with pytest.raises(AttributeError):
            change.message = "y"


# ---------------------------------------------------------------------------
# ChangeLog — grouping
# ---------------------------------------------------------------------------

class TestChangeLogAdd:

    def test_invalid_change_is_ignored(self):
        changelog = ChangeLog()
        changelog.add(Change.parse("chore: nothing to see"))
        assert changelog.is_empty
        assert len(changelog) == 0
        assert changelog.build() == ""

    def test_counts_valid_changes(self):
        changelog = ChangeLog()
        changelog.extend([
            Change.parse("feat: a"),
            Change.parse("fix: b", "lib"),
            Change.parse("wip: c"),
        ])
        assert len(changelog) == 2
        assert not changelog.is_empty

    def test_invalid_change_never_rendered(self):
        changelog = ChangeLog()
        changelog.add(Change.parse("feat: shown"))
        changelog.add(Change.parse("oops: hidden"))
        assert "hidden" not in changelog.build()


# ---------------------------------------------------------------------------
# ChangeLog — rendering
# ---------------------------------------------------------------------------

class TestChangeLogBuild:

    def test_single_top_level_change(self):
        changelog = ChangeLog()
        changelog.add(Change.parse("feat: add retry logic\n"))
        result = changelog.build()
        assert "Enhancements:" in result
        assert "- add retry logic" in result
        assert result == "\nEnhancements:\n- add retry logic\n\n"

    def test_module_block_layout(self):
        changelog = ChangeLog()
        changelog.add(Change.parse("fix: first", "core"))
        changelog.add(Change.parse("fix: second", "core"))
        changelog.add(Change.parse("fix: third", "ui"))
        assert changelog.build() == (
            "\nBugs:\n"
            "core\n"
            "- first\n"
            "- second\n"
            "\n"
            "ui\n"
            "- third\n"
            "\n"
        )

    def test_types_render_in_insertion_order(self):
        changelog = ChangeLog()
        changelog.add(Change.parse("docs: guide"))
        changelog.add(Change.parse("feat: new"))
        changelog.add(Change.parse("docs: more"))
        result = changelog.build()
        assert result.index("Documentation:") < result.index("Enhancements:")
        assert result.count("Documentation:") == 1

    def test_build_is_idempotent(self):
        changelog = ChangeLog()
        changelog.add(Change.parse("refactor: split module", "lib"))
        changelog.add(Change.parse("ci: cache deps"))
        assert changelog.build() == changelog.build()

    def test_shared_header_types_stay_separate(self):
        changelog = ChangeLog()
        changelog.add(Change.parse("build: bump cmake"))
        changelog.add(Change.parse("ci: add matrix"))
        assert changelog.build().count("Build system:") == 2

    def test_header_override(self):
        changelog = ChangeLog(headers={"fix": "Bug fixes"})
        changelog.add(Change.parse("fix: crash"))
        assert changelog.build().startswith("\nBug fixes:\n")

    def test_type_without_header_uses_raw_name(self):
        changelog = ChangeLog()
        del changelog.headers["docs"]
        changelog.add(Change.parse("docs: guide"))
        assert changelog.build() == "\ndocs\n- guide\n\n"
