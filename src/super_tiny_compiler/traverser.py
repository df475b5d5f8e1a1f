"""
Generic Tree Traversal
======================

``traverse`` walks a source AST depth-first and calls a Visitor on the
way in and the way out of every node, passing each node's immediate
parent. It builds nothing itself; all behaviour lives in the visitor.

Callback Order
--------------
For ``(add 2 (subtract 4 2))``:

    enter_program
      enter_call_expression    add       (parent: Program)
        enter_number_literal   2         (parent: add)
        exit_number_literal    2
        enter_call_expression  subtract  (parent: add)
          enter_number_literal 4         (parent: subtract)
          exit_number_literal  4
          enter_number_literal 2         (parent: subtract)
          exit_number_literal  2
        exit_call_expression   subtract
      exit_call_expression     add
    exit_program

Children are visited in stored order and every subtree's enter/exit pair
nests inside its parent's pair.
"""

from typing import TypeVar

from super_tiny_compiler.lisp_ast import (
    Node,
    Program,
    CallExpression,
    NumberLiteral,
    Visitor,
)
from super_tiny_compiler.errors import TraversalError

V = TypeVar("V", bound=Visitor)


def traverse(ast: Program, visitor: V) -> V:
    """
    Walk a source AST, invoking the visitor's enter/exit callbacks.

    Args:
        ast: Root of the source AST
        visitor: Callbacks to invoke

    Returns:
        The visitor, so callers can read whatever it accumulated

    Raises:
        TraversalError: If the root is not a Program or a node is unknown
    """
    if not isinstance(ast, Program):
        raise TraversalError(f"expected a Program at the root, got {type(ast).__name__}")

    visitor.enter_program(ast)
    _traverse_nodes(ast.body, ast, visitor)
    visitor.exit_program(ast)
    return visitor


def _traverse_nodes(nodes: tuple[Node, ...], parent: Node, visitor: Visitor) -> None:
    for node in nodes:
        _traverse_node(node, parent, visitor)


def _traverse_node(node: Node, parent: Node, visitor: Visitor) -> None:
    if isinstance(node, CallExpression):
        visitor.enter_call_expression(node, parent)
        _traverse_nodes(node.params, node, visitor)
        visitor.exit_call_expression(node, parent)
    elif isinstance(node, NumberLiteral):
        visitor.enter_number_literal(node, parent)
        visitor.exit_number_literal(node, parent)
    else:
        raise TraversalError(f"unexpected node type {type(node).__name__}")
