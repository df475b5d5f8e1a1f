"""
Source Abstract Syntax Tree (AST) Definitions
=============================================

This module defines the tree the parser builds from S-expression
source, together with the visitor interface used to walk it.

Node Hierarchy
--------------
Node (base)
├── Program - root node holding the top-level expressions
├── CallExpression - ``(name param...)``
└── NumberLiteral - digit string, kept verbatim

Design Notes
------------
- All nodes are frozen dataclasses with tuple children, so a parsed tree
  cannot be changed after construction
- The tree is strict: every node except the Program root has exactly one
  parent
- Number values stay as text, so ``007`` and arbitrarily long digit
  strings survive unchanged
"""

from dataclasses import dataclass


# =============================================================================
# AST Node Classes
# =============================================================================

@dataclass(frozen=True)
class Node:
    """Base class for all source AST nodes."""
    pass


@dataclass(frozen=True)
class NumberLiteral(Node):
    """
    Integer literal.

    Attributes:
        value: The digits exactly as written in the source
    """
    value: str = ""


@dataclass(frozen=True)
class CallExpression(Node):
    """
    Call expression ``(name param...)``.

    Attributes:
        name: Name of the called function
        params: Argument nodes in source order
    """
    name: str = ""
    params: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Program(Node):
    """
    Root node of the source AST.

    Attributes:
        body: Top-level expressions in source order
    """
    body: tuple[Node, ...] = ()


# =============================================================================
# Visitor Interface
# =============================================================================

class Visitor:
    """
    Callbacks invoked by ``traverse`` on entering and leaving each node.

    Every method is a no-op here; subclasses override the ones they need.
    Call and number callbacks receive the immediate parent, which is the
    Program for top-level nodes and the enclosing CallExpression otherwise.

    Usage:
        class CallCounter(Visitor):
            def __init__(self):
                self.calls = 0

            def enter_call_expression(self, node, parent):
                self.calls += 1

        counter = traverse(program, CallCounter())
    """

    def enter_program(self, program: Program) -> None:
        pass

    def exit_program(self, program: Program) -> None:
        pass

    def enter_call_expression(self, node: CallExpression, parent: Node) -> None:
        pass

    def exit_call_expression(self, node: CallExpression, parent: Node) -> None:
        pass

    def enter_number_literal(self, node: NumberLiteral, parent: Node) -> None:
        pass

    def exit_number_literal(self, node: NumberLiteral, parent: Node) -> None:
        pass


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter(Visitor):
    """
    Pretty printer for source AST debugging.

    Indents on every enter callback and dedents on the matching exit, so
    the output mirrors the bracket structure of the traversal.

    Usage:
        printer = ASTPrinter()
        print(printer.print(program))
    """

    def __init__(self):
        self.output: list[str] = []
        self.indent_level = 0

    def print(self, program: Program) -> str:
        """Print the AST and return it as a string."""
        from super_tiny_compiler.traverser import traverse

        self.output = []
        self.indent_level = 0
        traverse(program, self)
        return "\n".join(self.output)

    def _emit(self, text: str) -> None:
        indent = "  " * self.indent_level
        self.output.append(f"{indent}{text}")

    def enter_program(self, program: Program) -> None:
        self._emit("Program")
        self.indent_level += 1

    def exit_program(self, program: Program) -> None:
        self.indent_level -= 1

    def enter_call_expression(self, node: CallExpression, parent: Node) -> None:
        self._emit(f"CallExpression: {node.name}")
        self.indent_level += 1

    def exit_call_expression(self, node: CallExpression, parent: Node) -> None:
        self.indent_level -= 1

    def enter_number_literal(self, node: NumberLiteral, parent: Node) -> None:
        self._emit(f"NumberLiteral: {node.value}")
