#!/usr/bin/env python3
"""
Compiler Pipeline Demo
======================

This script runs each stage of the compiler by hand and prints what it
produces:
1. Tokenize the source text
2. Parse the tokens into the Lisp-shaped AST
3. Transform it into the C-shaped AST
4. Generate the output text

Usage:
    python examples/pipeline_demo.py
    python examples/pipeline_demo.py "(mul 3 (add 1 2))"
"""

import sys

from super_tiny_compiler import c_ast
from super_tiny_compiler.lexer import tokenize
from super_tiny_compiler.parser import parse
from super_tiny_compiler.lisp_ast import ASTPrinter
from super_tiny_compiler.transformer import transform
from super_tiny_compiler.codegen import generate


def main():
    source = sys.argv[1] if len(sys.argv) > 1 else "(add 2 (subtract 4 2))"
    print(f"Source: {source}")

    # ==========================================================================
    # 1. Lexing
    # ==========================================================================
    tokens = tokenize(source)
    print(f"\nTokens ({len(tokens)}):")
    for token in tokens:
        print(f"  {token!r}")

    # ==========================================================================
    # 2. Parsing
    # ==========================================================================
    ast = parse(tokens)
    print("\nSource AST:")
    print(ASTPrinter().print(ast))

    # ==========================================================================
    # 3. Transformation
    # ==========================================================================
    target_ast = transform(ast)
    print("\nTarget AST:")
    print(c_ast.format_tree(target_ast))

    # ==========================================================================
    # 4. Code generation
    # ==========================================================================
    print("\nOutput:")
    print(generate(target_ast))


if __name__ == "__main__":
    main()
