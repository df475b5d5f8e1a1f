"""
Lexer (Tokenizer)
=================

This module converts source text into a flat list of tokens for the
parser. The language is tiny, so there are only four kinds of token.

Token Categories
----------------
| Type        | Text          | Example  |
|-------------|---------------|----------|
| PAREN_OPEN  | (             | (        |
| PAREN_CLOSE | )             | )        |
| NAME        | letter+       | subtract |
| NUMBER      | digit+        | 007      |

The scan is a single left-to-right pass with no backtracking. Names and
numbers are maximal runs of their character class, so ``add2`` lexes as
NAME ``add`` followed by NUMBER ``2``. Only the space character is
skipped; every other character is an error.

Example Usage
-------------
>>> from super_tiny_compiler.lexer import tokenize
>>> for token in tokenize("(add 2 (subtract 4 2))"):
...     print(token)
Token(PAREN_OPEN, '(')
Token(NAME, 'add')
Token(NUMBER, '2')
Token(PAREN_OPEN, '(')
Token(NAME, 'subtract')
Token(NUMBER, '4')
Token(NUMBER, '2')
Token(PAREN_CLOSE, ')')
Token(PAREN_CLOSE, ')')
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator
import string

from super_tiny_compiler.errors import SourceLocation, InvalidCharacterError


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types for the S-expression language."""

    PAREN_OPEN = auto()     # (
    PAREN_CLOSE = auto()    # )
    NAME = auto()           # Call names
    NUMBER = auto()         # Integer literals, kept as text


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token of source text.

    Tokens carry no position information; the value is the exact text
    the token was scanned from.

    Attributes:
        type: The TokenType classification
        value: The token text
    """
    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes S-expression source text.

    Usage:
        lexer = Lexer(source_text, filename)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The source text being tokenized
        filename: Name of the source (for error reporting)
    """

    NAME_CHARS = string.ascii_letters
    NUMBER_CHARS = string.digits
    WHITESPACE = " "

    def __init__(self, source: str, filename: str = "<input>"):
        self.source = source
        self.filename = filename
        self._pos = 0

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source text.

        Yields:
            Token objects in source order

        Raises:
            InvalidCharacterError: On any character outside the alphabet
        """
        while not self._at_end():
            char = self._peek()

            if char in self.WHITESPACE:
                self._advance()
            elif char == "(":
                self._advance()
                yield Token(TokenType.PAREN_OPEN, char)
            elif char == ")":
                self._advance()
                yield Token(TokenType.PAREN_CLOSE, char)
            elif char in self.NUMBER_CHARS:
                yield Token(TokenType.NUMBER, self._scan_run(self.NUMBER_CHARS))
            elif char in self.NAME_CHARS:
                yield Token(TokenType.NAME, self._scan_run(self.NAME_CHARS))
            else:
                raise self._invalid_character(char)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.source)

    def _peek(self) -> str:
        """Return the current character, or an empty string at end of input."""
        if self._at_end():
            return ""
        return self.source[self._pos]

    def _advance(self) -> str:
        char = self.source[self._pos]
        self._pos += 1
        return char

    def _scan_run(self, charset: str) -> str:
        """Consume the longest run of characters drawn from charset."""
        start = self._pos
        while not self._at_end() and self._peek() in charset:
            self._advance()
        return self.source[start:self._pos]

    def _invalid_character(self, char: str) -> InvalidCharacterError:
        """
        Build an InvalidCharacterError pointing at the current position.

        The language has no newline token, but the error location still
        counts lines so that multi-line input points at the right place.
        """
        line_start = self.source.rfind("\n", 0, self._pos) + 1
        line_end = self.source.find("\n", self._pos)
        if line_end == -1:
            line_end = len(self.source)

        line = self.source.count("\n", 0, self._pos) + 1
        column = self._pos - line_start + 1
        source_line = self.source[line_start:line_end]

        return InvalidCharacterError(
            char,
            SourceLocation(self.filename, line, column),
            source_line=source_line,
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(source: str, filename: str = "<input>") -> list[Token]:
    """
    Tokenize source text into a list.

    Args:
        source: Source text
        filename: Name used in error locations

    Returns:
        List of tokens (empty for empty input)

    Raises:
        InvalidCharacterError: On any character outside the alphabet
    """
    return list(Lexer(source, filename).tokenize())
