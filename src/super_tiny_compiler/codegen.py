"""
C-like Code Generator
=====================

Renders a target AST as text. Each node type has one rendering rule:

| Node                | Output                           |
|---------------------|----------------------------------|
| Program             | statements joined by newlines    |
| ExpressionStatement | its expression, no terminator    |
| CallExpression      | ``name(arg0, arg1, ...)``        |
| NumberLiteral       | its digits, verbatim             |

Generation never modifies the tree, so rendering the same tree twice
gives the same text.

Usage
-----
>>> from super_tiny_compiler.parser import parse_source
>>> from super_tiny_compiler.transformer import transform
>>> from super_tiny_compiler.codegen import generate
>>> generate(transform(parse_source("(add 2 (subtract 4 2))")))
'add(2, subtract(4, 2))'
"""

from super_tiny_compiler.c_ast import (
    Node,
    Program,
    ExpressionStatement,
    CallExpression,
    NumberLiteral,
)
from super_tiny_compiler.errors import CodeGenError


class CodeGenerator:
    """
    Code generator for the target AST.

    Example:
        generator = CodeGenerator()
        text = generator.generate(target_ast)
    """

    ARGUMENT_SEPARATOR = ", "
    STATEMENT_SEPARATOR = "\n"

    def generate(self, node: Node) -> str:
        """
        Render a target AST node and everything below it.

        Raises:
            CodeGenError: If the tree contains something that is not a target node
        """
        if isinstance(node, Program):
            return self.STATEMENT_SEPARATOR.join(
                self.generate(statement) for statement in node.body
            )
        if isinstance(node, ExpressionStatement):
            return self.generate(node.expression)
        if isinstance(node, CallExpression):
            arguments = self.ARGUMENT_SEPARATOR.join(
                self.generate(argument) for argument in node.arguments
            )
            return f"{node.callee.name}({arguments})"
        if isinstance(node, NumberLiteral):
            return node.value
        raise CodeGenError(f"cannot generate code for {type(node).__name__}")


def generate(ast: Node) -> str:
    """Render a target AST as C-like text."""
    return CodeGenerator().generate(ast)
