# =============================================================================
# test_codegen.py - Code Generator Unit Tests
# =============================================================================
# Tests for rendering the target AST as C-like text.
#
# Test coverage includes:
#   - Each node type's rendering rule
#   - Separators and zero-argument calls
#   - Idempotence of generation
#   - Unknown nodes
# =============================================================================

import pytest
from super_tiny_compiler import c_ast
from super_tiny_compiler.codegen import CodeGenerator, generate
from super_tiny_compiler.errors import CodeGenError


def call(name: str, *arguments) -> c_ast.CallExpression:
    return c_ast.CallExpression(callee=c_ast.Identifier(name), arguments=tuple(arguments))


def number(value: str) -> c_ast.NumberLiteral:
    return c_ast.NumberLiteral(value=value)


def program(*expressions) -> c_ast.Program:
    return c_ast.Program(body=tuple(c_ast.ExpressionStatement(expression=e) for e in expressions))


class TestCodeGen:
    """Tests for the code generator."""

    def test_number_literal(self):
        assert generate(number("42")) == "42"

    def test_number_leading_zeros(self):
        assert generate(number("007")) == "007"

    def test_zero_argument_call(self):
        assert generate(call("foo")) == "foo()"

    def test_single_argument_call(self):
        assert generate(call("neg", number("1"))) == "neg(1)"

    def test_argument_separator(self):
        """Arguments are comma-space separated with no trailing separator."""
        assert generate(call("add", number("1"), number("2"), number("3"))) == "add(1, 2, 3)"

    def test_nested_call(self):
        tree = call("add", number("2"), call("subtract", number("4"), number("2")))
        assert generate(tree) == "add(2, subtract(4, 2))"

    def test_expression_statement_has_no_terminator(self):
        statement = c_ast.ExpressionStatement(expression=call("f"))
        assert generate(statement) == "f()"

    def test_empty_program(self):
        assert generate(c_ast.Program()) == ""

    def test_program_one_statement_per_line(self):
        tree = program(call("a", number("1")), call("b"), call("c", call("d")))
        assert generate(tree) == "a(1)\nb()\nc(d())"

    def test_generation_is_idempotent(self):
        """Rendering the same tree twice gives the same text."""
        tree = program(call("add", number("2"), call("subtract", number("4"), number("2"))))
        generator = CodeGenerator()
        first = generator.generate(tree)
        assert generator.generate(tree) == first
        assert generate(tree) == first

    def test_unknown_node(self):
        with pytest.raises(CodeGenError) as exc_info:
            generate(c_ast.Program(body=("oops",)))
        assert str(exc_info.value) == "codegen error: cannot generate code for str"
