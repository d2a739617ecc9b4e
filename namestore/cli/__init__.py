"""
cli — command-line interface for namestore.

Entry points
────────────
  python -m namestore        (via namestore/__main__.py)
  namestore                  (via pyproject.toml [project.scripts])

Subcommands: gui | list | add | delete
"""

from namestore.cli.main import build_parser, cmd_add, cmd_delete, cmd_list, main

__all__ = ["build_parser", "cmd_add", "cmd_delete", "cmd_list", "main"]
