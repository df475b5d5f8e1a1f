"""
stc - Super Tiny Compiler Command-Line Interface
================================================

This module implements the command-line interface for the compiler.

Usage Examples
--------------
Compile the built-in demo program:
    $ stc

Compile inline source:
    $ stc -e "(add 2 (subtract 4 2))"

Compile a file to a file:
    $ stc program.lisp -o program.c

Inspect the intermediate structures:
    $ stc -e "(add 1 2)" --tokens
    $ stc -e "(add 1 2)" --ast
    $ stc -e "(add 1 2)" --target-ast
"""

import logging
from pathlib import Path
from typing import Optional

import click

from super_tiny_compiler import __version__
from super_tiny_compiler.c_ast import format_tree
from super_tiny_compiler.cli.errors import handle_cli_exception
from super_tiny_compiler.compiler import TinyCompiler, CompilerOptions
from super_tiny_compiler.lisp_ast import ASTPrinter
from super_tiny_compiler.parser import MAX_NESTING_DEPTH

logger = logging.getLogger(__name__)

DEMO_SOURCE = "(add 2 (subtract 4 2))"


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-e", "--expr",
    help="Compile this source text instead of a file",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the output to a file (default: stdout)",
)
@click.option(
    "--tokens", "show_tokens",
    is_flag=True,
    help="Print the token list and exit",
)
@click.option(
    "--ast", "show_ast",
    is_flag=True,
    help="Print the source AST and exit",
)
@click.option(
    "--target-ast", "show_target_ast",
    is_flag=True,
    help="Print the target AST and exit",
)
@click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=MAX_NESTING_DEPTH,
    show_default=True,
    help="Deepest call nesting accepted",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="stc")
def main(
    input_file: Optional[Path],
    expr: Optional[str],
    output: Optional[Path],
    show_tokens: bool,
    show_ast: bool,
    show_target_ast: bool,
    max_depth: int,
    verbose: bool,
) -> None:
    """
    Compile S-expressions to C-like call syntax.

    INPUT_FILE is the source file to compile. Without INPUT_FILE or
    --expr, the demo program (add 2 (subtract 4 2)) is compiled.

    \b
    Examples:
        stc                          # Compile the demo program
        stc -e "(add 1 2)"           # Prints add(1, 2)
        stc prog.lisp -o prog.c      # Specify output file
        stc -e "(add 1 2)" --ast     # Dump the source AST
    """
    if input_file is not None and expr is not None:
        raise click.UsageError("give either INPUT_FILE or --expr, not both")

    setup_logging(verbose)

    try:
        options = CompilerOptions(max_depth=max_depth)
        compiler = TinyCompiler(options)

        if input_file is not None:
            logger.debug(f"Compiling {input_file}")
            result = compiler.compile_file(str(input_file))
        else:
            source = DEMO_SOURCE if expr is None else expr
            logger.debug(f"Compiling {source!r}")
            result = compiler.compile_source(source)

        if show_tokens:
            for token in result.tokens:
                click.echo(repr(token))
            return

        if show_ast:
            click.echo(ASTPrinter().print(result.ast))
            return

        if show_target_ast:
            click.echo(format_tree(result.target_ast))
            return

        if output is not None:
            output.write_text(result.output + "\n", encoding="utf-8")
            logger.debug(f"Tokenized: {result.token_count} tokens")
            click.echo(f"Compiled {input_file or '<expr>'} -> {output}")
        else:
            click.echo(result.output)

    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
