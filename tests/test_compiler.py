"""
Compiler Pipeline Test Suite
============================

End-to-end tests for the compile() entry point and the TinyCompiler
driver: literal cases, whitespace invariance, nesting depth, number
text preservation, error propagation and file handling.
"""

import sys

import pytest
from super_tiny_compiler import (
    compile,
    compile_file,
    TinyCompiler,
    CompilerOptions,
    MAX_NESTING_DEPTH,
)
from super_tiny_compiler.lisp_ast import Program
from super_tiny_compiler import c_ast
from super_tiny_compiler.errors import (
    TinyCompilerError,
    InvalidCharacterError,
    UnexpectedTokenError,
    UnbalancedParensError,
    NestingTooDeepError,
)


def nested(depth: int) -> str:
    return "(f " * depth + "1" + ")" * depth


# =============================================================================
# Literal Cases
# =============================================================================

class TestCompile:
    """Tests for compile() on well-formed input."""

    def test_nested_example(self):
        assert compile("(add 2 (subtract 4 2))") == "add(2, subtract(4, 2))"

    def test_simple_call(self):
        assert compile("(add 1 2)") == "add(1, 2)"

    def test_zero_argument_call(self):
        assert compile("(foo)") == "foo()"

    def test_empty_input(self):
        assert compile("") == ""

    def test_multiple_top_level_calls(self):
        assert compile("(add 1 2) (print (add 1 2))") == "add(1, 2)\nprint(add(1, 2))"

    @pytest.mark.parametrize("source", [
        "(add  2   3)",
        "  (add 2 3)  ",
        "( add 2 3 )",
        "(add 2 3)",
    ])
    def test_whitespace_invariance(self, source):
        assert compile(source) == "add(2, 3)"

    def test_number_text_preserved(self):
        assert compile("(f 007)") == "f(007)"

    def test_long_number_preserved(self):
        digits = "9" * 60
        assert compile(f"(big {digits})") == f"big({digits})"

    def test_deterministic(self):
        source = "(a 1 (b 2 (c 3)) (d))"
        assert compile(source) == compile(source)

    @pytest.mark.parametrize("depth", [1, 2, 10, 100, MAX_NESTING_DEPTH])
    def test_nesting_depth_preserved(self, depth):
        """Call structure survives the pipeline at every supported depth."""
        assert compile(nested(depth)) == "f(" * depth + "1" + ")" * depth

    def test_argument_order_preserved(self):
        assert compile("(f 3 (g 2 1) 0)") == "f(3, g(2, 1), 0)"


# =============================================================================
# Error Propagation
# =============================================================================

class TestCompileErrors:
    """Tests that each stage's error reaches the caller untouched."""

    def test_unbalanced_parens(self):
        with pytest.raises(UnbalancedParensError):
            compile("(add 2")

    def test_number_where_name_required(self):
        with pytest.raises(UnexpectedTokenError):
            compile("(2 3)")

    def test_invalid_character(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            compile("(add 2 x!)", filename="prog.lisp")
        assert str(exc_info.value).startswith("prog.lisp:1:9: lexer error:")

    def test_top_level_number(self):
        with pytest.raises(UnexpectedTokenError):
            compile("(f 1) 2")

    def test_too_deep(self):
        with pytest.raises(NestingTooDeepError):
            compile(nested(MAX_NESTING_DEPTH + 1))

    def test_all_errors_share_base(self):
        for source in ["#", "(2)", "(a", nested(MAX_NESTING_DEPTH + 1)]:
            with pytest.raises(TinyCompilerError):
                compile(source)

    def test_recursion_error_reported_as_nesting(self):
        """Running out of interpreter stack is a resource error, not a crash."""
        options = CompilerOptions(max_depth=MAX_NESTING_DEPTH)
        compiler = TinyCompiler(options)
        depth = sys.getrecursionlimit()
        compiler.options.max_depth = depth * 2
        with pytest.raises(NestingTooDeepError) as exc_info:
            compiler.compile_source(nested(depth))
        assert isinstance(exc_info.value.__cause__, RecursionError)


# =============================================================================
# Compiler Driver
# =============================================================================

class TestTinyCompiler:
    """Tests for TinyCompiler and CompilerOptions."""

    def test_result_exposes_every_stage(self):
        result = TinyCompiler().compile_source("(add 2 (subtract 4 2))")
        assert result.output == "add(2, subtract(4, 2))"
        assert result.token_count == 9
        assert isinstance(result.ast, Program)
        assert isinstance(result.target_ast, c_ast.Program)
        assert result.filename == "<input>"

    def test_filename_from_options(self):
        compiler = TinyCompiler(CompilerOptions(filename="demo.lisp"))
        with pytest.raises(InvalidCharacterError) as exc_info:
            compiler.compile_source("(a %)")
        assert exc_info.value.location.filename == "demo.lisp"

    def test_compiler_is_reusable(self):
        compiler = TinyCompiler()
        assert compiler.compile_source("(a 1)").output == "a(1)"
        assert compiler.compile_source("(b 2)").output == "b(2)"

    def test_custom_max_depth(self):
        compiler = TinyCompiler(CompilerOptions(max_depth=2))
        assert compiler.compile_source("(a (b 1))").output == "a(b(1))"
        with pytest.raises(NestingTooDeepError):
            compiler.compile_source("(a (b (c 1)))")

    def test_invalid_max_depth(self):
        with pytest.raises(ValueError):
            CompilerOptions(max_depth=0)

    def test_generation_idempotent_on_result(self):
        from super_tiny_compiler.codegen import generate

        result = TinyCompiler().compile_source("(a 1 (b 2))")
        assert generate(result.target_ast) == result.output
        assert generate(result.target_ast) == result.output


# =============================================================================
# File Compilation
# =============================================================================

class TestCompileFile:
    """Tests for compiling from and to files."""

    def test_compile_file(self, tmp_path):
        source = tmp_path / "prog.lisp"
        source.write_text("(add 2 (subtract 4 2))\n")
        assert compile_file(str(source)) == "add(2, subtract(4, 2))"

    def test_compile_file_writes_output(self, tmp_path):
        source = tmp_path / "prog.lisp"
        source.write_text("(add 1 2)")
        output = tmp_path / "prog.c"
        compile_file(str(source), str(output))
        assert output.read_text() == "add(1, 2)"

    def test_interior_newline_rejected(self, tmp_path):
        source = tmp_path / "prog.lisp"
        source.write_text("(a 1)\n(b 2)\n")
        with pytest.raises(InvalidCharacterError) as exc_info:
            compile_file(str(source))
        assert exc_info.value.location.filename == str(source)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            compile_file(str(tmp_path / "missing.lisp"))
