"""Tests for command parsing and verb suggestions."""

from __future__ import annotations

import pytest

from deptctl.domain.commands import (
    GRAMMAR,
    KNOWN_VERBS,
    Command,
    CommandParseError,
    Verb,
    parse_command,
    suggest_verb,
)


class TestParseCommand:
    def test_blank_line(self) -> None:
        assert parse_command("") is None
        assert parse_command("   \n") is None

    def test_add(self) -> None:
        cmd = parse_command("Add Sally to Engineering")
        assert cmd == Command(verb=Verb.ADD, name="Sally", department="Engineering")

    def test_add_multi_word(self) -> None:
        cmd = parse_command("Add Mary Jane Watson to Research and Development\n")
        assert cmd is not None
        assert cmd.name == "Mary Jane Watson"
        assert cmd.department == "Research and Development"

    def test_remove(self) -> None:
        cmd = parse_command("Remove Sally from Engineering")
        assert cmd == Command(verb=Verb.REMOVE, name="Sally", department="Engineering")

    def test_move(self) -> None:
        cmd = parse_command("Move Sally from Engineering to Sales Ops")
        assert cmd == Command(
            verb=Verb.MOVE, name="Sally", department="Engineering", target="Sales Ops"
        )

    def test_rename(self) -> None:
        cmd = parse_command("Rename Amir in Sales to Zed")
        assert cmd == Command(verb=Verb.RENAME, name="Amir", department="Sales", target="Zed")

    def test_print_all(self) -> None:
        cmd = parse_command("Print")
        assert cmd == Command(verb=Verb.PRINT, department="")

    def test_print_department(self) -> None:
        cmd = parse_command("Print Human Resources")
        assert cmd is not None
        assert cmd.department == "Human Resources"

    @pytest.mark.parametrize("line", ["Help", "Help me please", "Exit", "Exit now"])
    def test_no_argument_verbs_ignore_trailing_tokens(self, line: str) -> None:
        cmd = parse_command(line)
        assert cmd is not None
        assert cmd.verb.value == line.split()[0]
        assert cmd.name == ""

    def test_verb_is_case_sensitive(self) -> None:
        cmd = parse_command("add Sally to Sales")
        assert cmd is not None
        assert cmd.verb is Verb.UNKNOWN
        assert cmd.raw == "add"
        assert cmd.suggestion is Verb.ADD

    def test_unknown_without_suggestion(self) -> None:
        cmd = parse_command("Frobnicate everything")
        assert cmd is not None
        assert cmd.verb is Verb.UNKNOWN
        assert cmd.suggestion is None


class TestParseErrors:
    @pytest.mark.parametrize(
        ("line", "code"),
        [
            ("Add Sally Engineering", "MALFORMED"),
            ("Add", "MALFORMED"),
            ("Add to Engineering", "MISSING_ARGUMENT"),
            ("Add Sally to", "MISSING_ARGUMENT"),
            ("Remove Sally", "MALFORMED"),
            ("Remove from Sales", "MISSING_ARGUMENT"),
            ("Remove Sally from", "MISSING_ARGUMENT"),
            ("Move Sally from Engineering", "MALFORMED"),
            ("Move Sally from Engineering to", "MISSING_ARGUMENT"),
            ("Move Sally from to Sales", "MISSING_ARGUMENT"),
            ("Rename Amir to Zed", "MALFORMED"),
            ("Rename Amir in Sales", "MALFORMED"),
            ("Rename Amir in Sales to", "MISSING_ARGUMENT"),
        ],
    )
    def test_error_codes(self, line: str, code: str) -> None:
        with pytest.raises(CommandParseError) as exc_info:
            parse_command(line)
        assert exc_info.value.code == code
        assert exc_info.value.verb is Verb(line.split()[0])

    def test_malformed_message_names_stop_word(self) -> None:
        with pytest.raises(CommandParseError, match="expected 'from'"):
            parse_command("Remove Sally")


class TestSuggestVerb:
    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("add", Verb.ADD),
            ("ADD", Verb.ADD),
            ("remove", Verb.REMOVE),
            ("PRINT", Verb.PRINT),
            ("exit", Verb.EXIT),
            ("Prnt", Verb.PRINT),
            ("Renam", Verb.RENAME),
            ("mvoe", Verb.MOVE),
        ],
    )
    def test_suggestions(self, token: str, expected: Verb) -> None:
        assert suggest_verb(token) is expected

    def test_no_suggestion(self) -> None:
        assert suggest_verb("xyzzy") is None

    def test_unknown_is_never_suggested(self) -> None:
        assert suggest_verb("unknown") is None

    def test_cutoff_one_requires_exact(self) -> None:
        assert suggest_verb("Prnt", cutoff=1.0) is None


def test_grammar_covers_every_verb() -> None:
    firsts = {usage.split()[0] for usage in GRAMMAR}
    assert firsts == {v.value for v in KNOWN_VERBS}
