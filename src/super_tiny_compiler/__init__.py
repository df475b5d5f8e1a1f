"""
Super Tiny Compiler
===================

A minimal source-to-source compiler from a tiny S-expression language to
C-like call syntax:

    (add 2 (subtract 4 2))   →   add(2, subtract(4, 2))

It exists to show the structure of a compiler pipeline in as little code
as possible:

- A lexer turning text into tokens
- A recursive descent parser producing a Lisp-shaped AST
- A generic traverser driving visitor callbacks over that AST
- A transformer visitor rebuilding it as a C-shaped AST
- A code generator rendering the C-shaped AST as text

Pipeline
--------
    Source → Lexer → Parser → Traverser + Transformer → Code Generator → Text

Usage
-----
>>> from super_tiny_compiler import compile
>>> compile("(add 2 (subtract 4 2))")
'add(2, subtract(4, 2))'

Language
--------
    program    := expression*
    expression := number | "(" name expression* ")"
    number     := digit+
    name       := letter+

Spaces between tokens are ignored. There are no strings, comments,
negative numbers or other bracket types.
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Imports
# =============================================================================

from super_tiny_compiler.compiler import (
    TinyCompiler,
    CompilerOptions,
    CompilerResult,
    compile,
    compile_file,
)
from super_tiny_compiler.errors import (
    TinyCompilerError,
    SourceLocation,
    LexerError,
    InvalidCharacterError,
    ParserError,
    UnexpectedTokenError,
    UnbalancedParensError,
    TraversalError,
    TransformerError,
    MalformedTargetShapeError,
    CodeGenError,
    NestingTooDeepError,
)
from super_tiny_compiler.lexer import Lexer, Token, TokenType, tokenize
from super_tiny_compiler.parser import Parser, MAX_NESTING_DEPTH, parse
from super_tiny_compiler.lisp_ast import Visitor, ASTPrinter
from super_tiny_compiler.traverser import traverse
from super_tiny_compiler.transformer import Transformer, transform
from super_tiny_compiler.codegen import CodeGenerator, generate

__all__ = [
    # Version
    "__version__",
    # Main API
    "TinyCompiler",
    "CompilerOptions",
    "CompilerResult",
    "compile",
    "compile_file",
    # Errors
    "TinyCompilerError",
    "SourceLocation",
    "LexerError",
    "InvalidCharacterError",
    "ParserError",
    "UnexpectedTokenError",
    "UnbalancedParensError",
    "TraversalError",
    "TransformerError",
    "MalformedTargetShapeError",
    "CodeGenError",
    "NestingTooDeepError",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    # Parser
    "Parser",
    "MAX_NESTING_DEPTH",
    "parse",
    # Traversal
    "Visitor",
    "ASTPrinter",
    "traverse",
    "Transformer",
    "transform",
    # Code Generator
    "CodeGenerator",
    "generate",
]
