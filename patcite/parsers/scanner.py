"""
Cursor scanner used by the citation grammars.

Each grammar walks the input with a Scanner. A failed step raises Mismatch
with the position it stopped at and what it was looking for; the dispatcher
catches it and moves on to the next grammar with a fresh cursor.
"""
from __future__ import annotations

import re
from typing import Callable

Token = Callable[[str], object]

# Single-character token classes. A letter is anything str.isalpha accepts.
DIGIT: Token = re.compile(r"[0-9]").fullmatch
LETTER: Token = str.isalpha
SPACE: Token = str.isspace
ANY_CHAR: Token = re.compile(r".", re.DOTALL).fullmatch


class Mismatch(Exception):
    """A grammar step did not match at ``position``."""

    def __init__(self, position: int, expected: tuple[str, ...]):
        super().__init__(position, expected)
        self.position = position
        self.expected = expected


class Scanner:
    """
    Read-only cursor over one citation string.

    Usage:
        scanner = Scanner("US2016/0012345A1")
        scanner.literal("US")
        year = scanner.count(4, DIGIT, "digit")
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str | None:
        """Character under the cursor, or None at end of input."""
        return None if self.at_end else self.text[self.pos]

    def mark(self) -> int:
        return self.pos

    def reset(self, pos: int) -> None:
        self.pos = pos

    def fail(self, *expected: str) -> Mismatch:
        return Mismatch(self.pos, expected)

    def literal(self, word: str) -> str:
        """Consume ``word`` exactly. On mismatch the cursor does not move."""
        if not self.text.startswith(word, self.pos):
            raise self.fail(f'"{word}"')
        self.pos += len(word)
        return word

    def choice(self, words: tuple[str, ...]) -> str:
        """Consume the first of ``words`` that matches here."""
        word = self.optional_choice(words)
        if word is None:
            raise self.fail(*(f'"{w}"' for w in words))
        return word

    def optional_choice(self, words: tuple[str, ...]) -> str | None:
        for word in words:
            if self.text.startswith(word, self.pos):
                self.pos += len(word)
                return word
        return None

    def token(self, token: Token, label: str) -> str:
        """Consume one character matching ``token``."""
        char = self.peek()
        if char is None or not token(char):
            raise self.fail(label)
        self.pos += 1
        return char

    def count(self, n: int, token: Token, label: str) -> str:
        """Consume exactly ``n`` characters matching ``token``."""
        return "".join(self.token(token, label) for _ in range(n))

    def many1(self, token: Token, label: str) -> str:
        """Consume one or more characters matching ``token``, greedily."""
        chars = [self.token(token, label)]
        while not self.at_end and token(self.text[self.pos]):
            chars.append(self.text[self.pos])
            self.pos += 1
        return "".join(chars)

    def optional_char(self, char: str) -> bool:
        if self.peek() == char:
            self.pos += 1
            return True
        return False

    def spaces(self) -> None:
        """Skip zero or more whitespace characters."""
        while not self.at_end and SPACE(self.text[self.pos]):
            self.pos += 1

    def rest(self) -> str | None:
        """Consume everything left. None if nothing is left."""
        if self.at_end:
            return None
        remaining = self.text[self.pos:]
        self.pos = len(self.text)
        return remaining
