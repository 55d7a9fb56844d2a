"""
Unit tests for core modules: log parsing, message generation, Config.

Run with:
    pytest tests/test_core.py -v
"""

import json

import pytest

from svnmerge.config import Config, ConfigManager
from svnmerge.message import (
    FALLBACK_MESSAGE,
    MergeDirection,
    RevisionMode,
    build_message,
    generate_commit_message,
)
from svnmerge.cli.selection import SelectionResult
from svnmerge.svn import LOG_DIVIDER, Revision, parse_log
from svnmerge.svn.log_parser import collapse_message, parse_entry


BRANCH = "/branches/feature-x"


def _entry(number, body, author="alice", date="2024-01-15 10:32:11 +0100", lines=1):
    suffix = "line" if lines == 1 else "lines"
    return f"r{number} | {author} | {date} | {lines} {suffix}\n\n{body}\n"


def _log(*entries):
    parts = [LOG_DIVIDER]
    for entry in entries:
        parts.append(entry + LOG_DIVIDER)
    return "\n".join(parts) + "\n"


# ---------------------------------------------------------------------------
# parse_log
# ---------------------------------------------------------------------------

class TestParseLog:

    def test_parses_sample_in_order(self, sample_log):
        revisions = parse_log(sample_log)
        assert [r.number for r in revisions] == ["r1024", "r1023", "r1020"]

    def test_fields(self, sample_log):
        first = parse_log(sample_log)[0]
        assert first == Revision(
            number="r1024",
            author="alice",
            date="2024-01-15 10:32:11 +0100 (Mon, 15 Jan 2024)",
            message="Fix null pointer in login handler",
        )

    def test_author_kept_in_full(self, sample_log):
        assert parse_log(sample_log)[1].author == "bartholomew.longname"

    def test_multiline_message_joined(self, sample_log):
        assert parse_log(sample_log)[2].message == "Refactor report builder split into sections"

    def test_empty_text(self):
        assert parse_log("") == []

    def test_text_without_entries(self):
        assert parse_log("svn: E155007: '/tmp/x' is not a working copy\n") == []

    def test_divider_only(self):
        assert parse_log(LOG_DIVIDER + "\n") == []

    def test_skips_bad_header(self):
        text = _log(
            _entry(10, "good one"),
            "x10 | bob | 2024-01-01 | 1 line\n\nnot a revision\n",
            _entry(12, "another good one"),
        )
        assert [r.number for r in parse_log(text)] == ["r10", "r12"]

    def test_skips_header_without_line_count(self):
        text = _log("r10 | bob | 2024-01-01\n\nmessage\n")
        assert parse_log(text) == []

    def test_skips_single_line_entry(self):
        text = _log("r10 | bob | 2024-01-01 | 1 line")
        assert parse_log(text) == []

    def test_header_with_only_blank_body_is_dropped(self):
        # Trailing blank lines are trimmed away, leaving a header-only entry
        text = _log("r10 | bob | 2024-01-01 | 0 lines\n \n")
        assert parse_log(text) == []

    def test_blank_body_lines_give_empty_message(self):
        assert collapse_message(["", "   ", "\t"]) == ""

    def test_singular_and_plural_line_counts(self):
        text = _log(_entry(10, "one", lines=1), _entry(11, "two", lines=2))
        assert len(parse_log(text)) == 2

    def test_windows_line_endings(self):
        text = _log(_entry(10, "crlf message")).replace("\n", "\r\n")
        revisions = parse_log(text)
        assert revisions[0].number == "r10"
        assert revisions[0].message == "crlf message"

    def test_idempotent(self, sample_log):
        assert parse_log(sample_log) == parse_log(sample_log)

    def test_parse_entry_rejects_blank(self):
        assert parse_entry("   \n  ") is None


class TestMessageCap:

    def test_short_message_unchanged(self):
        assert collapse_message(["short"]) == "short"

    def test_exactly_60_unchanged(self):
        message = "a" * 60
        assert collapse_message([message]) == message

    def test_61_truncated(self):
        result = collapse_message(["b" * 61])
        assert result == "b" * 57 + "..."
        assert len(result) == 60

    def test_cap_applies_after_joining(self):
        lines = ["x" * 30, "", "y" * 30]
        result = collapse_message(lines)
        # 30 + 1 space + 30 = 61 characters before capping
        assert result == "x" * 30 + " " + "y" * 26 + "..."

    def test_parsed_long_message(self):
        text = _log(_entry(10, "word " * 20))
        message = parse_log(text)[0].message
        assert len(message) == 60
        assert message.endswith("...")


# ---------------------------------------------------------------------------
# generate_commit_message
# ---------------------------------------------------------------------------

class TestGenerateCommitMessage:

    def test_single_trunk_to_branch(self):
        message = generate_commit_message(RevisionMode.SINGLE, MergeDirection.TRUNK_TO_BRANCH, "r10", None, None, BRANCH)
        assert message == "Merged r10 from trunk to /branches/feature-x"

    def test_single_branch_to_trunk(self):
        message = generate_commit_message(RevisionMode.SINGLE, MergeDirection.BRANCH_TO_TRUNK, "r10", None, "T555", BRANCH)
        assert message == "Merged r10 from /branches/feature-x to trunk (T555)"

    def test_range_trunk_to_branch(self):
        message = generate_commit_message(RevisionMode.RANGE, MergeDirection.TRUNK_TO_BRANCH, "r10", "r12", None, BRANCH)
        assert message == "Merged branches r10 - r12 from trunk to /branches/feature-x"

    def test_range_branch_to_trunk(self):
        message = generate_commit_message(RevisionMode.RANGE, MergeDirection.BRANCH_TO_TRUNK, "r10", "r12", "T555", BRANCH)
        assert message == "Merged branches r10 - r12 from /branches/feature-x to trunk (T555)"

    def test_range_keeps_user_order(self):
        message = generate_commit_message(RevisionMode.RANGE, MergeDirection.TRUNK_TO_BRANCH, "r12", "r10", None, BRANCH)
        assert message == "Merged branches r12 - r10 from trunk to /branches/feature-x"

    def test_empty_task_id(self):
        message = generate_commit_message(RevisionMode.SINGLE, MergeDirection.BRANCH_TO_TRUNK, "r10", None, "", BRANCH)
        assert message == "Merged r10 from /branches/feature-x to trunk ()"

    def test_branch_label_used_verbatim(self):
        message = generate_commit_message(RevisionMode.SINGLE, MergeDirection.TRUNK_TO_BRANCH, "r10", None, None, "")
        assert message == "Merged r10 from trunk to "

    def test_accepts_menu_values(self):
        message = generate_commit_message(1, "trunk-to-branch", "r10", None, None, BRANCH)
        assert message == "Merged r10 from trunk to /branches/feature-x"

    @pytest.mark.parametrize("mode", list(RevisionMode))
    @pytest.mark.parametrize("direction", list(MergeDirection))
    def test_fallback_never_produced_for_legal_pairs(self, mode, direction):
        message = generate_commit_message(mode, direction, "r1", "r2", "T1", BRANCH)
        assert message != FALLBACK_MESSAGE

    @pytest.mark.parametrize("mode, direction", [
        (3, MergeDirection.TRUNK_TO_BRANCH),
        (RevisionMode.SINGLE, "sideways"),
    ])
    def test_fallback_for_unknown_pairs(self, mode, direction):
        assert generate_commit_message(mode, direction, "r1", None, None, BRANCH) == FALLBACK_MESSAGE

    def test_build_message_from_result(self):
        result = SelectionResult(
            direction=MergeDirection.BRANCH_TO_TRUNK,
            mode=RevisionMode.RANGE,
            first="r10",
            second="r12",
            task_id="T555",
        )
        assert build_message(result, BRANCH) == "Merged branches r10 - r12 from /branches/feature-x to trunk (T555)"


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.repo_base == ""
        assert config.branch_path == ""
        assert config.local_repo_path == ""
        assert config.log_limit == 10

    def test_derived_locations(self):
        config = Config(
            repo_base="https://svn.example.com/proj",
            branch_path="/branches/feature-x",
            local_repo_path="/work/proj",
        )
        assert config.trunk_url == "https://svn.example.com/proj/trunk"
        assert config.branch_url == "https://svn.example.com/proj/branches/feature-x"
        assert config.local_trunk_path == "/work/proj/trunk"
        assert config.local_branch_path == "/work/proj/branches/feature-x"
        assert config.branch_label == "/branches/feature-x"

    def test_degenerate_defaults_still_derive(self):
        config = Config()
        assert config.trunk_url == "/trunk"
        assert config.local_branch_path == ""

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"repo_base": "https://svn", "unknown_key": "value"})
        assert config.repo_base == "https://svn"
        assert not hasattr(config, "unknown_key")

    def test_validate_invalid_log_limit(self):
        config = Config(log_limit=0)
        warnings = config.validate()
        assert any("log_limit" in w for w in warnings)
        assert config.log_limit == 10

    def test_validate_numeric_string_log_limit(self):
        config = Config(log_limit="25")
        assert config.validate() == []
        assert config.log_limit == 25

    def test_validate_valid_config_no_warnings(self):
        assert Config().validate() == []

    def test_from_dict_triggers_validation(self, capsys):
        Config.from_dict({"log_limit": -3})
        err = capsys.readouterr().err
        assert "Config warning" in err


class TestConfigManager:

    @pytest.fixture
    def workdir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
        return tmp_path

    def test_load_returns_defaults_when_no_file(self, workdir):
        config = ConfigManager().load()
        assert config == Config()

    def test_load_reads_local_file(self, workdir):
        (workdir / ".svnmergerc").write_text(json.dumps({"repo_base": "https://svn/proj", "log_limit": 5}))

        manager = ConfigManager()
        config = manager.load()
        assert config.repo_base == "https://svn/proj"
        assert config.log_limit == 5
        assert manager.get_config_path() == workdir / ".svnmergerc"

    def test_environment_overrides_file(self, workdir, monkeypatch):
        (workdir / ".svnmergerc").write_text(json.dumps({"branch_path": "/branches/old"}))
        monkeypatch.setenv("BRANCH_PATH", "/branches/new")

        manager = ConfigManager()
        config = manager.load()
        assert config.branch_path == "/branches/new"
        assert manager.get_env_overrides() == {"BRANCH_PATH": "/branches/new"}

    def test_dotenv_file_loaded(self, workdir):
        (workdir / ".env").write_text("REPO_BASE=https://svn.example.com/proj\nLOCAL_REPO_PATH=/work/proj\n")

        config = ConfigManager().load()
        assert config.repo_base == "https://svn.example.com/proj"
        assert config.local_repo_path == "/work/proj"

    def test_real_environment_beats_dotenv(self, workdir, monkeypatch):
        (workdir / ".env").write_text("REPO_BASE=https://from-dotenv\n")
        monkeypatch.setenv("REPO_BASE", "https://from-env")

        assert ConfigManager().load().repo_base == "https://from-env"

    def test_env_log_limit_converted(self, workdir, monkeypatch):
        monkeypatch.setenv("SVNMERGE_LOG_LIMIT", "20")
        assert ConfigManager().load().log_limit == 20

    def test_save_and_load_roundtrip(self, workdir):
        (workdir / "fakehome").mkdir()
        manager = ConfigManager()
        original = Config(repo_base="https://svn/proj", branch_path="/branches/x", local_repo_path="/w")
        manager.save(original, global_config=True)

        loaded = ConfigManager().load()
        assert loaded == original

    def test_malformed_json_returns_defaults(self, workdir, capsys):
        (workdir / ".svnmergerc").write_text("not valid json {{{")

        config = ConfigManager().load()
        assert config == Config()
        assert "Could not load" in capsys.readouterr().err
