"""
Super Tiny Compiler Error Hierarchy
===================================

This module defines the exception hierarchy for the compiler. Every
pipeline stage raises a subclass of TinyCompilerError, so callers can
catch all compilation failures with a single except clause.

Exception Hierarchy
-------------------
TinyCompilerError (base for all compiler errors)
├── LexerError - tokenization errors
│   └── InvalidCharacterError - character outside the language alphabet
├── ParserError - grammar errors
│   ├── UnexpectedTokenError - token not allowed in its position
│   └── UnbalancedParensError - input ended inside an expression
├── TraversalError - tree handed to the traverser is malformed
├── TransformerError - target tree construction errors
│   └── MalformedTargetShapeError - no enclosing call for a node
├── CodeGenError - unknown node handed to the code generator
└── NestingTooDeepError - nesting exhausted the recursion budget

Every stage fails on the first problem it finds. There is no recovery
and no partial output: the only fix is to correct the input.

Error Message Format
--------------------
Errors name the stage that failed and, when a location is known, follow
the usual compiler layout:

    <input>:1:8: lexer error: invalid character '#' (0x23)
        (add 2 #)
               ^
    hint: only letters, digits, parentheses and spaces are allowed
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in the source text, used for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception
# =============================================================================

class TinyCompilerError(Exception):
    """
    Base exception for all compiler errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text at the error location (optional)
    """

    stage = "compiler"

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with stage, location, source context and hint.

        Example output:
            <input>:1:2: parser error: unexpected token '2'
            hint: expected a name after '('
        """
        parts = []

        # Location prefix
        if self.location:
            parts.append(f"{self.location}: {self.stage} error: {self.message}")
        else:
            parts.append(f"{self.stage} error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexer Errors
# =============================================================================

class LexerError(TinyCompilerError):
    """Error raised while turning source text into tokens."""

    stage = "lexer"


class InvalidCharacterError(LexerError):
    """
    Invalid character in source text.

    Raised when the lexer meets anything other than parentheses, ASCII
    letters, ASCII digits or the space character.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"invalid character {char!r} (0x{ord(char):02X})",
            location=location,
            hint="only letters, digits, parentheses and spaces are allowed",
            source_line=source_line,
        )


# =============================================================================
# Parser Errors
# =============================================================================

class ParserError(TinyCompilerError):
    """Error raised while building the source AST from tokens."""

    stage = "parser"


class UnexpectedTokenError(ParserError):
    """
    Unexpected token during parsing.

    Raised when a token violates the grammar position it occupies, such
    as a number or ')' directly after '('.

    Attributes:
        found: Text of the offending token
        expected: Description of what the grammar required (optional)
        position: Index of the offending token in the token list
    """

    def __init__(
        self,
        found: str,
        expected: Optional[str] = None,
        position: Optional[int] = None,
    ):
        self.found = found
        self.expected = expected
        self.position = position

        message = f"unexpected token {found!r}"
        if position is not None:
            message += f" at token {position}"

        hint = f"expected {expected}" if expected else None
        super().__init__(message, hint=hint)


class UnbalancedParensError(ParserError):
    """
    Input ended while an expression was still open.

    Raised when the parser needs another token (a name, an argument or a
    closing parenthesis) but the token list is exhausted.
    """

    def __init__(self, expected: str, open_calls: int = 0):
        self.expected = expected
        self.open_calls = open_calls
        hint = None
        if open_calls:
            noun = "parentheses" if open_calls > 1 else "parenthesis"
            hint = f"add {open_calls} closing {noun}"
        super().__init__(
            f"unexpected end of input, expected {expected}",
            hint=hint,
        )


# =============================================================================
# Traversal and Transformation Errors
# =============================================================================

class TraversalError(TinyCompilerError):
    """Raised when the traverser is handed something that is not a source AST."""

    stage = "traverser"


class TransformerError(TinyCompilerError):
    """Error raised while building the target AST."""

    stage = "transformer"


class MalformedTargetShapeError(TransformerError):
    """
    The target tree cannot represent the node being visited.

    Raised when a number literal arrives with no enclosing call to
    receive it, or when the transformer's stack is used out of order.
    """
    pass


# =============================================================================
# Code Generation Errors
# =============================================================================

class CodeGenError(TinyCompilerError):
    """Raised when the code generator meets a node it cannot render."""

    stage = "codegen"


# =============================================================================
# Resource Limits
# =============================================================================

class NestingTooDeepError(TinyCompilerError):
    """
    Call nesting exceeded the supported depth.

    Parsing, traversal and code generation all recurse once per nesting
    level. Input nested beyond the configured limit is rejected instead
    of being allowed to exhaust the interpreter stack.
    """

    def __init__(self, depth: Optional[int] = None, limit: Optional[int] = None):
        self.depth = depth
        self.limit = limit
        if depth is not None and limit is not None:
            message = f"call nesting depth {depth} exceeds the limit of {limit}"
        else:
            message = "call nesting exhausted the interpreter recursion limit"
        super().__init__(
            message,
            hint="flatten the expression or raise max_depth",
        )
