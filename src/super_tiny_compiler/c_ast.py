"""
Target Abstract Syntax Tree (AST) Definitions
=============================================

This module defines the tree for the C-like output language. It is a
separate set of classes from the source AST: the transformer reads one
shape and writes the other, and the code generator only accepts this one.

Node Hierarchy
--------------
Node (base)
├── Program - list of statements
├── ExpressionStatement - a statement wrapping one expression
├── CallExpression - callee plus argument expressions
└── NumberLiteral - digit string, copied from the source
Identifier - callee of a CallExpression

Every top-level source call becomes one ExpressionStatement; nested calls
appear directly as CallExpression arguments. Nodes are frozen dataclasses
with tuple children, so a finished tree has exactly one owner per node.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    """Base class for all target AST nodes."""
    pass


@dataclass(frozen=True)
class Identifier:
    """
    Plain identifier used as a callee.

    Attributes:
        name: The identifier text
    """
    name: str


@dataclass(frozen=True)
class NumberLiteral(Node):
    """
    Integer literal.

    Attributes:
        value: The digits, verbatim from the source
    """
    value: str = ""


@dataclass(frozen=True)
class CallExpression(Node):
    """
    Function call expression ``callee(arguments...)``.

    Attributes:
        callee: What is being called
        arguments: Argument expressions in order
    """
    callee: Identifier = None
    arguments: tuple[Node, ...] = ()


@dataclass(frozen=True)
class ExpressionStatement(Node):
    """
    Expression evaluated as a statement.

    Attributes:
        expression: The wrapped expression
    """
    expression: Node = None


@dataclass(frozen=True)
class Program(Node):
    """
    Root node of the target AST.

    Attributes:
        body: Statements in order
    """
    body: tuple[Node, ...] = ()


# =============================================================================
# Tree Dump
# =============================================================================

def format_tree(node: Node, indent_level: int = 0) -> str:
    """
    Render an indented outline of a target AST for debugging.

    Example output:
        Program
          ExpressionStatement
            CallExpression: add
              NumberLiteral: 2
    """
    lines: list[str] = []
    _format_node(node, indent_level, lines)
    return "\n".join(lines)


def _format_node(node: Node, indent_level: int, lines: list[str]) -> None:
    indent = "  " * indent_level
    if isinstance(node, Program):
        lines.append(f"{indent}Program")
        for statement in node.body:
            _format_node(statement, indent_level + 1, lines)
    elif isinstance(node, ExpressionStatement):
        lines.append(f"{indent}ExpressionStatement")
        _format_node(node.expression, indent_level + 1, lines)
    elif isinstance(node, CallExpression):
        lines.append(f"{indent}CallExpression: {node.callee.name}")
        for argument in node.arguments:
            _format_node(argument, indent_level + 1, lines)
    elif isinstance(node, NumberLiteral):
        lines.append(f"{indent}NumberLiteral: {node.value}")
    else:
        lines.append(f"{indent}<{type(node).__name__}>")
