"""Command tokenizer: whitespace tokens and stop-word delimited fields.

A command line is split on whitespace (no quoting, no escapes).  Multi-word
arguments are reconstructed by :func:`read_field`, which consumes tokens up to
a reserved stop-word or the end of the line.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

STOP_WORDS: tuple[str, ...] = ("to", "from", "in")


class FieldKind(StrEnum):
    """Outcome of reading one field from a token stream."""

    PRESENT = "present"
    EMPTY = "empty"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class Field:
    """A field read from a command line.

    ``EMPTY`` means the stop-word (or end of line) was reached before any
    token was consumed.  ``MALFORMED`` means a stop-word was expected but the
    line ran out first.
    """

    kind: FieldKind
    value: str = ""

    @classmethod
    def present(cls, value: str) -> Field:
        return cls(FieldKind.PRESENT, value)

    @classmethod
    def empty(cls) -> Field:
        return cls(FieldKind.EMPTY)

    @classmethod
    def malformed(cls) -> Field:
        return cls(FieldKind.MALFORMED)

    @property
    def is_present(self) -> bool:
        return self.kind is FieldKind.PRESENT


class TokenStream:
    """Forward-only cursor over the tokens of a single line."""

    def __init__(self, tokens: list[str]) -> None:
        self._tokens = tokens
        self._pos = 0

    def __len__(self) -> int:
        return len(self._tokens) - self._pos

    @property
    def exhausted(self) -> bool:
        return self._pos >= len(self._tokens)

    def peek(self) -> str | None:
        if self.exhausted:
            return None
        return self._tokens[self._pos]

    def next(self) -> str | None:
        token = self.peek()
        if token is not None:
            self._pos += 1
        return token

    def rest(self) -> list[str]:
        """Consume and return every remaining token."""
        remaining = self._tokens[self._pos :]
        self._pos = len(self._tokens)
        return remaining


def tokenize(line: str) -> TokenStream:
    """Split *line* on runs of whitespace.

    Examples:
        >>> tokenize("  Add   Sally to  Sales ").rest()
        ['Add', 'Sally', 'to', 'Sales']
    """
    return TokenStream(line.split())


def read_field(tokens: TokenStream, stop_word: str | None = None) -> Field:
    """Read a multi-word field, stopping at *stop_word* or end of input.

    The stop-word itself is consumed but not included in the value.  With no
    stop-word every remaining token belongs to the field.
    """
    if stop_word is None:
        remaining = tokens.rest()
        return Field.present(" ".join(remaining)) if remaining else Field.empty()

    words: list[str] = []
    while (token := tokens.next()) is not None:
        if token == stop_word:
            return Field.present(" ".join(words)) if words else Field.empty()
        words.append(token)
    return Field.malformed()
