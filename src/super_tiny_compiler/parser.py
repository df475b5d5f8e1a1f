"""
Recursive Descent Parser
========================

This module turns the lexer's token list into a source AST.

Grammar (EBNF)
--------------
program     ::= call*
expression  ::= NUMBER | call
call        ::= '(' NAME expression* ')'

Top-level expressions must be calls. A bare number at the top level is
rejected here, because the output language has no statement form for it.

The parser uses one token of lookahead and a cursor that only moves
forward. Running out of tokens inside a call is reported as
UnbalancedParensError; any token in the wrong place is reported as
UnexpectedTokenError.

Example Usage
-------------
>>> from super_tiny_compiler.parser import parse_source
>>> program = parse_source("(add 2 (subtract 4 2))")
>>> program.body[0].name
'add'
"""

import logging
from typing import Iterable

from super_tiny_compiler.lexer import Lexer, Token, TokenType
from super_tiny_compiler.lisp_ast import Program, CallExpression, NumberLiteral, Node
from super_tiny_compiler.errors import (
    UnexpectedTokenError,
    UnbalancedParensError,
    NestingTooDeepError,
)

logger = logging.getLogger(__name__)


# Each nesting level costs a few interpreter frames in the parser, the
# traverser and the code generator; this keeps all three well inside
# Python's default recursion limit of 1000.
MAX_NESTING_DEPTH = 256


class Parser:
    """
    Recursive descent parser for the S-expression language.

    Attributes:
        tokens: List of tokens to parse
        max_depth: Deepest call nesting accepted
    """

    def __init__(self, tokens: Iterable[Token], max_depth: int = MAX_NESTING_DEPTH):
        self.tokens = list(tokens)
        self.max_depth = max_depth

        # Current position in token list
        self._pos = 0

        # Number of calls currently open
        self._depth = 0

    def parse(self) -> Program:
        """
        Parse the token list into a Program.

        Returns:
            Program whose body holds every top-level call in order

        Raises:
            UnexpectedTokenError: If a token violates the grammar
            UnbalancedParensError: If the tokens end inside a call
            NestingTooDeepError: If calls nest deeper than max_depth
        """
        body: list[Node] = []

        while not self._at_end():
            token = self._peek("a call")
            if token.type != TokenType.PAREN_OPEN:
                raise UnexpectedTokenError(
                    token.value,
                    expected="'(' to start a top-level call",
                    position=self._pos,
                )
            body.append(self._parse_call())

        logger.debug(f"Parsed {len(body)} top-level calls from {len(self.tokens)} tokens")
        return Program(body=tuple(body))

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.tokens)

    def _peek(self, expected: str) -> Token:
        """
        Return the current token without consuming it.

        Args:
            expected: What the grammar needs here, for the error message

        Raises:
            UnbalancedParensError: If there are no tokens left
        """
        if self._at_end():
            raise UnbalancedParensError(expected, open_calls=self._depth)
        return self.tokens[self._pos]

    def _advance(self) -> Token:
        token = self.tokens[self._pos]
        self._pos += 1
        return token

    # =========================================================================
    # Expression Parsing
    # =========================================================================

    def _parse_expression(self) -> Node:
        """Parse a number or a call."""
        token = self._peek("an expression")

        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(value=token.value)

        if token.type == TokenType.PAREN_OPEN:
            return self._parse_call()

        raise UnexpectedTokenError(
            token.value,
            expected="a number or '('",
            position=self._pos,
        )

    def _parse_call(self) -> CallExpression:
        """Parse ``'(' NAME expression* ')'`` with the cursor on '('."""
        self._advance()
        self._depth += 1
        if self._depth > self.max_depth:
            raise NestingTooDeepError(self._depth, self.max_depth)

        name_token = self._peek("a name after '('")
        if name_token.type != TokenType.NAME:
            raise UnexpectedTokenError(
                name_token.value,
                expected="a name after '('",
                position=self._pos,
            )
        self._advance()

        params: list[Node] = []
        while self._peek("an argument or ')'").type != TokenType.PAREN_CLOSE:
            params.append(self._parse_expression())

        # Consume ')'
        self._advance()
        self._depth -= 1

        return CallExpression(name=name_token.value, params=tuple(params))


# =============================================================================
# Convenience Functions
# =============================================================================

def parse(tokens: Iterable[Token], max_depth: int = MAX_NESTING_DEPTH) -> Program:
    """Parse a token sequence into a source AST."""
    return Parser(tokens, max_depth).parse()


def parse_source(source: str, filename: str = "<input>") -> Program:
    """Tokenize and parse source text in one step."""
    tokens = list(Lexer(source, filename).tokenize())
    return Parser(tokens).parse()
