"""
Super Tiny Compiler Command-Line Interface
==========================================

This package provides the command-line tool for the compiler:

- **stc**: compile S-expression source to C-like call syntax

The tool is a Click-based CLI application with help and error reporting.
"""

__all__ = ["stc"]
