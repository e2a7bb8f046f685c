"""Argument parser for the prompt library CLI.

Updates:
  v0.2.0 - 2026-10-14 - Add raw channel invocation and JSON-lines serve commands.
  v0.1.0 - 2026-10-11 - Add list/create/update/delete subcommands.
"""

from __future__ import annotations

import argparse
from pathlib import Path


def _add_prompt_fields(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--title", required=True, help="Prompt title (required).")
    parser.add_argument("--content", required=True, help="Prompt body text (required).")
    parser.add_argument("--description", default=None, help="Optional short description.")
    parser.add_argument(
        "--tag",
        dest="tags",
        action="append",
        default=None,
        help="Tag to attach; repeat the flag to keep several tags in order.",
    )


def build_parser() -> argparse.ArgumentParser:
    """Return the configured argument parser."""
    parser = argparse.ArgumentParser(description="Prompt library backend")
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("list", help="Print every stored prompt as JSON.")

    create_parser = subparsers.add_parser("create", help="Create a prompt and print it.")
    _add_prompt_fields(create_parser)

    update_parser = subparsers.add_parser(
        "update",
        help="Replace the title, content, description, and tags of a prompt.",
    )
    update_parser.add_argument("id", type=int, help="Identifier of the prompt to update.")
    _add_prompt_fields(update_parser)

    delete_parser = subparsers.add_parser("delete", help="Delete a prompt permanently.")
    delete_parser.add_argument("id", type=int, help="Identifier of the prompt to delete.")

    invoke_parser = subparsers.add_parser(
        "invoke",
        help="Send a raw JSON payload to a dispatch channel (e.g. prompts:create).",
    )
    invoke_parser.add_argument("channel", help="Channel name such as prompts:list.")
    invoke_parser.add_argument(
        "payload",
        nargs="?",
        default=None,
        help="JSON payload passed to the channel handler.",
    )

    subparsers.add_parser(
        "serve",
        help="Answer JSON-lines channel requests read from stdin until EOF.",
    )
    return parser
