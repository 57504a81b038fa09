"""Command grammar: verbs, parsed commands, and verb suggestions.

Grammar (one command per line, verb case-sensitive)::

    Add <name...> to <department...>
    Remove <name...> from <department...>
    Move <name...> from <department...> to <department...>
    Rename <name...> in <department...> to <newName...>
    Print [<department...>]
    Help
    Exit
"""

from __future__ import annotations

import difflib
from enum import StrEnum

from pydantic import BaseModel

from deptctl.domain.tokenizer import FieldKind, TokenStream, read_field, tokenize

DEFAULT_SUGGEST_CUTOFF = 0.6


class Verb(StrEnum):
    """First token of a command line."""

    ADD = "Add"
    REMOVE = "Remove"
    MOVE = "Move"
    RENAME = "Rename"
    PRINT = "Print"
    HELP = "Help"
    EXIT = "Exit"
    UNKNOWN = "Unknown"


KNOWN_VERBS: tuple[Verb, ...] = tuple(v for v in Verb if v is not Verb.UNKNOWN)

GRAMMAR: tuple[str, ...] = (
    "Add <name...> to <department...>",
    "Remove <name...> from <department...>",
    "Move <name...> from <department...> to <department...>",
    "Rename <name...> in <department...> to <newName...>",
    "Print [<department...>]",
    "Help",
    "Exit",
)


class CommandParseError(Exception):
    """A command line whose arguments could not be extracted."""

    def __init__(self, code: str, message: str, *, verb: Verb | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.verb = verb


class Command(BaseModel):
    """One parsed command line.

    ``target`` holds the destination department for ``Move`` and the new
    name for ``Rename``.  ``raw`` and ``suggestion`` are only set for
    ``Unknown``.
    """

    model_config = {"frozen": True}

    verb: Verb
    name: str = ""
    department: str = ""
    target: str = ""
    raw: str = ""
    suggestion: Verb | None = None


def suggest_verb(token: str, *, cutoff: float = DEFAULT_SUGGEST_CUTOFF) -> Verb | None:
    """Return the known verb closest to *token*, ignoring case.

    Examples:
        >>> suggest_verb("add")
        <Verb.ADD: 'Add'>
        >>> suggest_verb("Prnt")
        <Verb.PRINT: 'Print'>
        >>> suggest_verb("xyzzy") is None
        True
    """
    lowered = token.lower()
    by_lower = {v.value.lower(): v for v in KNOWN_VERBS}
    if lowered in by_lower:
        return by_lower[lowered]
    matches = difflib.get_close_matches(lowered, list(by_lower), n=1, cutoff=cutoff)
    return by_lower[matches[0]] if matches else None


def _require(tokens: TokenStream, stop_word: str | None, label: str, verb: Verb) -> str:
    field = read_field(tokens, stop_word)
    if field.kind is FieldKind.MALFORMED:
        raise CommandParseError(
            "MALFORMED",
            f"{verb.value}: expected '{stop_word}' after the {label}",
            verb=verb,
        )
    if field.kind is FieldKind.EMPTY:
        raise CommandParseError(
            "MISSING_ARGUMENT",
            f"{verb.value}: missing {label}",
            verb=verb,
        )
    return field.value


def parse_command(line: str, *, suggest_cutoff: float = DEFAULT_SUGGEST_CUTOFF) -> Command | None:
    """Parse one input line into a :class:`Command`.

    Returns None for a blank line.  Raises :class:`CommandParseError` when a
    known verb's arguments are missing or a stop-word never appears.
    """
    tokens = tokenize(line)
    head = tokens.next()
    if head is None:
        return None

    try:
        verb = Verb(head)
    except ValueError:
        verb = Verb.UNKNOWN
    if verb is Verb.UNKNOWN:
        return Command(verb=verb, raw=head, suggestion=suggest_verb(head, cutoff=suggest_cutoff))

    if verb is Verb.ADD:
        name = _require(tokens, "to", "employee name", verb)
        department = _require(tokens, None, "department", verb)
        return Command(verb=verb, name=name, department=department)

    if verb is Verb.REMOVE:
        name = _require(tokens, "from", "employee name", verb)
        department = _require(tokens, None, "department", verb)
        return Command(verb=verb, name=name, department=department)

    if verb is Verb.MOVE:
        name = _require(tokens, "from", "employee name", verb)
        department = _require(tokens, "to", "source department", verb)
        target = _require(tokens, None, "destination department", verb)
        return Command(verb=verb, name=name, department=department, target=target)

    if verb is Verb.RENAME:
        name = _require(tokens, "in", "employee name", verb)
        department = _require(tokens, "to", "department", verb)
        target = _require(tokens, None, "new name", verb)
        return Command(verb=verb, name=name, department=department, target=target)

    if verb is Verb.PRINT:
        return Command(verb=verb, department=read_field(tokens, None).value)

    # Help / Exit take no arguments; trailing tokens are ignored.
    return Command(verb=verb)
