"""
Compiler Main Module
====================

This module provides the compiler interface. It runs the complete
pipeline:

    Source → Lex → Parse → Traverse/Transform → Generate → Text

Usage
-----
Command line:
    $ stc program.lisp -o program.c

Programmatic:
    >>> from super_tiny_compiler import compile
    >>> compile("(add 2 (subtract 4 2))")
    'add(2, subtract(4, 2))'

Compilation Pipeline
--------------------
1. **Lexical Analysis**: Convert source to tokens
2. **Parsing**: Build the source (Lisp-shaped) AST
3. **Transformation**: Rebuild it as the target (C-shaped) AST
4. **Code Generation**: Render the target AST as text

Error Handling
--------------
Every stage stops at the first error and raises a TinyCompilerError
subclass. Nothing is returned on failure, so callers never see partial
output. Nesting deep enough to exhaust the interpreter stack is reported
as NestingTooDeepError.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from super_tiny_compiler import c_ast, lisp_ast
from super_tiny_compiler.lexer import Lexer, Token
from super_tiny_compiler.parser import Parser, MAX_NESTING_DEPTH
from super_tiny_compiler.transformer import transform
from super_tiny_compiler.codegen import CodeGenerator
from super_tiny_compiler.errors import NestingTooDeepError

logger = logging.getLogger(__name__)


@dataclass
class CompilerOptions:
    """
    Compiler configuration options.

    Attributes:
        filename: Source name shown in error locations
        max_depth: Deepest call nesting the parser accepts. Each level
                   costs a few interpreter frames in every recursive stage.
    """
    filename: str = "<input>"
    max_depth: int = MAX_NESTING_DEPTH

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")


@dataclass
class CompilerResult:
    """
    Result of a compilation.

    Attributes:
        filename: Source filename
        output: Generated C-like text
        tokens: Tokens produced by the lexer
        ast: Source AST
        target_ast: Target AST
    """
    filename: str = ""
    output: str = ""
    tokens: list[Token] = field(default_factory=list)
    ast: Optional[lisp_ast.Program] = None
    target_ast: Optional[c_ast.Program] = None

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class TinyCompiler:
    """
    S-expression to C-like compiler.

    The compiler keeps no state between calls, so one instance can
    compile any number of sources.

    Example:
        compiler = TinyCompiler()
        result = compiler.compile_source("(add 1 2)")
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: Optional[str] = None) -> CompilerResult:
        """
        Compile source text.

        Args:
            source: S-expression source text
            filename: Source name for error messages (defaults to options.filename)

        Returns:
            CompilerResult with the output and every intermediate structure

        Raises:
            TinyCompilerError: If any stage fails
        """
        filename = filename or self.options.filename
        result = CompilerResult(filename=filename)

        try:
            # Stage 1: Lexical analysis
            result.tokens = self._lex(source, filename)

            # Stage 2: Parsing
            result.ast = self._parse(result.tokens)

            # Stage 3: Transformation
            result.target_ast = self._transform(result.ast)

            # Stage 4: Code generation
            result.output = self._generate(result.target_ast)
        except RecursionError as e:
            raise NestingTooDeepError() from e

        logger.debug(f"Compiled {filename}: {len(result.output)} characters of output")
        return result

    def compile_file(self, filepath: str) -> CompilerResult:
        """
        Compile a source file.

        Line breaks at the end of the file are dropped; anywhere else a
        line break is an invalid character like any other.

        Raises:
            TinyCompilerError: If compilation fails
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8").rstrip("\r\n")
        return self.compile_source(source, str(filepath))

    def _lex(self, source: str, filename: str) -> list[Token]:
        tokens = list(Lexer(source, filename).tokenize())
        logger.debug(f"Lexed {len(tokens)} tokens from {filename}")
        return tokens

    def _parse(self, tokens: list[Token]) -> lisp_ast.Program:
        return Parser(tokens, self.options.max_depth).parse()

    def _transform(self, ast: lisp_ast.Program) -> c_ast.Program:
        return transform(ast)

    def _generate(self, ast: c_ast.Program) -> str:
        return CodeGenerator().generate(ast)


# =============================================================================
# Convenience Functions
# =============================================================================

def compile(source: str, filename: str = "<input>") -> str:
    """
    Compile S-expression source to C-like call syntax.

    This is the primary high-level interface.

    Args:
        source: Source text
        filename: Source name for error messages

    Returns:
        Generated text, one line per top-level call

    Raises:
        TinyCompilerError: If compilation fails

    Example:
        >>> compile("(add 2 (subtract 4 2))")
        'add(2, subtract(4, 2))'
    """
    compiler = TinyCompiler(CompilerOptions(filename=filename))
    return compiler.compile_source(source).output


def compile_file(filepath: str, output_path: Optional[str] = None) -> str:
    """
    Compile a source file, optionally writing the result to output_path.

    Raises:
        TinyCompilerError: If compilation fails
        FileNotFoundError: If source file not found
    """
    result = TinyCompiler().compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.output, encoding="utf-8")

    return result.output
