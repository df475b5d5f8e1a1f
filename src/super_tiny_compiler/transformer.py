"""
Source-to-Target AST Transformer
================================

The transformer is a Visitor driven by ``traverse``. It rebuilds the
Lisp-shaped source tree as a C-shaped target tree in a single pass.

Construction Strategy
---------------------
The visitor keeps an explicit stack of *open* calls: calls that have been
entered but not yet exited. The top of the stack is where new arguments
go. A call is only turned into an immutable ``c_ast.CallExpression`` when
it is exited, at which point it is attached to its destination:

- the enclosing open call, as its next argument, or
- the program body, wrapped in an ExpressionStatement, when no call is
  open (a top-level call).

Unfinished calls are owned by the stack alone and finished ones by their
parent alone, so no node is ever reachable from two places. Stack depth
equals the current nesting depth of the source tree.

Example
-------
>>> from super_tiny_compiler.parser import parse_source
>>> from super_tiny_compiler.transformer import transform
>>> target = transform(parse_source("(add 2 (subtract 4 2))"))
>>> target.body[0].expression.callee.name
'add'
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from super_tiny_compiler import c_ast, lisp_ast
from super_tiny_compiler.lisp_ast import Visitor
from super_tiny_compiler.traverser import traverse
from super_tiny_compiler.errors import MalformedTargetShapeError

logger = logging.getLogger(__name__)


@dataclass
class _OpenCall:
    """A target call whose arguments are still being collected."""
    callee: c_ast.Identifier
    arguments: list[c_ast.Node] = field(default_factory=list)

    def finish(self) -> c_ast.CallExpression:
        return c_ast.CallExpression(callee=self.callee, arguments=tuple(self.arguments))


class Transformer(Visitor):
    """
    Visitor that builds a target AST from a source AST.

    Use a fresh instance per source tree. After ``traverse`` returns, the
    finished tree is available as ``program``.

    Usage:
        transformer = traverse(source_ast, Transformer())
        target_ast = transformer.program
    """

    def __init__(self):
        self._stack: list[_OpenCall] = []
        self._body: Optional[list[c_ast.Node]] = None
        self._program: Optional[c_ast.Program] = None

    @property
    def program(self) -> c_ast.Program:
        """The finished target Program."""
        if self._program is None:
            raise MalformedTargetShapeError("target program requested before traversal finished")
        return self._program

    def enter_program(self, program: lisp_ast.Program) -> None:
        self._stack = []
        self._body = []
        self._program = None

    def exit_program(self, program: lisp_ast.Program) -> None:
        if self._stack:
            raise MalformedTargetShapeError(
                f"{len(self._stack)} call(s) still open at end of program"
            )
        self._program = c_ast.Program(body=tuple(self._body))
        logger.debug(f"Built target program with {len(self._program.body)} statements")

    def enter_call_expression(self, node: lisp_ast.CallExpression, parent: lisp_ast.Node) -> None:
        if self._body is None:
            raise MalformedTargetShapeError(
                f"call {node.name!r} visited before the program was entered"
            )
        self._stack.append(_OpenCall(callee=c_ast.Identifier(node.name)))

    def exit_call_expression(self, node: lisp_ast.CallExpression, parent: lisp_ast.Node) -> None:
        if not self._stack:
            raise MalformedTargetShapeError(f"call {node.name!r} exited but no call is open")

        call = self._stack.pop().finish()
        if self._stack:
            self._stack[-1].arguments.append(call)
        else:
            self._body.append(c_ast.ExpressionStatement(expression=call))

    def enter_number_literal(self, node: lisp_ast.NumberLiteral, parent: lisp_ast.Node) -> None:
        if not self._stack:
            raise MalformedTargetShapeError(
                f"number literal {node.value!r} has no enclosing call",
                hint="wrap the number in a call, for example (print N)",
            )
        self._stack[-1].arguments.append(c_ast.NumberLiteral(value=node.value))


def transform(source_ast: lisp_ast.Program) -> c_ast.Program:
    """
    Transform a source AST into a target AST.

    Raises:
        MalformedTargetShapeError: If a node has no place in the target tree
        TraversalError: If the source tree is not a Program
    """
    return traverse(source_ast, Transformer()).program
