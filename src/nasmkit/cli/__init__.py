"""
nasmkit Command-Line Interface
==============================

This package provides the ``nasmed`` command-line tool:

- **nasmed indent**: re-indent a NASM source file
- **nasmed outline**: list labels and %define/%macro definitions
- **nasmed highlight**: dump the classified regions of every line

The tool is a Click-based application with a unified error handler.
"""

__all__ = ["nasmed"]
