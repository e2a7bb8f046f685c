"""CLI command handlers for the prompt library.

Every command goes through the command dispatcher so the CLI exercises the
same channel contract as the desktop UI.

Updates:
  v0.3.0 - 2026-10-18 - Answer unexpected handler failures with InternalError.
  v0.2.0 - 2026-10-14 - Add JSON-lines serve loop for UI processes.
  v0.1.0 - 2026-10-11 - Add list/create/update/delete/invoke handlers.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TextIO

from core.exceptions import PromptLibraryError

from .utils import print_and_log, print_json, prompt_fields_payload

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from core.dispatch import CommandDispatcher
    from core.factory import PromptServices
else:  # pragma: no cover - runtime placeholders for type-only imports
    CommandDispatcher = Any
    PromptServices = Any

serve_logger = logging.getLogger("prompt_library.serve")

CommandHandler = Callable[[PromptServices, argparse.Namespace, logging.Logger], int]

EXIT_OK = 0
EXIT_PROMPT_ERROR = 1


@dataclass(frozen=True)
class CommandSpec:
    """Metadata for dispatching CLI command handlers."""

    handler: CommandHandler


def _invoke_and_print(
    services: PromptServices,
    channel: str,
    payload: Any,
    logger: logging.Logger,
) -> int:
    try:
        result = services.dispatcher.invoke(channel, payload)
    except PromptLibraryError as exc:
        print_and_log(logger, logging.ERROR, f"{channel} failed: {exc}")
        return EXIT_PROMPT_ERROR
    if result is not None:
        print_json(result)
    return EXIT_OK


def run_list(services: PromptServices, args: argparse.Namespace, logger: logging.Logger) -> int:
    return _invoke_and_print(services, "prompts:list", None, logger)


def run_create(services: PromptServices, args: argparse.Namespace, logger: logging.Logger) -> int:
    return _invoke_and_print(services, "prompts:create", prompt_fields_payload(args), logger)


def run_update(services: PromptServices, args: argparse.Namespace, logger: logging.Logger) -> int:
    payload = prompt_fields_payload(args)
    payload["id"] = args.id
    status = _invoke_and_print(services, "prompts:update", payload, logger)
    if status == EXIT_OK:
        print_and_log(logger, logging.INFO, f"Prompt {args.id} updated")
    return status


def run_delete(services: PromptServices, args: argparse.Namespace, logger: logging.Logger) -> int:
    status = _invoke_and_print(services, "prompts:delete", args.id, logger)
    if status == EXIT_OK:
        print_and_log(logger, logging.INFO, f"Prompt {args.id} deleted")
    return status


def run_invoke(services: PromptServices, args: argparse.Namespace, logger: logging.Logger) -> int:
    payload: Any = None
    if args.payload is not None:
        try:
            payload = json.loads(args.payload)
        except json.JSONDecodeError as exc:
            print_and_log(logger, logging.ERROR, f"Invalid JSON payload: {exc}")
            return EXIT_PROMPT_ERROR
    return _invoke_and_print(services, args.channel, payload, logger)


def serve_json_lines(
    dispatcher: CommandDispatcher,
    stdin: TextIO,
    stdout: TextIO,
) -> int:
    """Answer one JSON request per input line; return the number handled.

    Requests look like ``{"id": 1, "channel": "prompts:list", "payload": null}``.
    Each response echoes ``id`` and carries either ``result`` or ``error``.
    """
    handled = 0
    for raw_line in stdin:
        line = raw_line.strip()
        if not line:
            continue
        response = _answer(dispatcher, line)
        stdout.write(json.dumps(response, ensure_ascii=False))
        stdout.write("\n")
        stdout.flush()
        handled += 1
    return handled


def _error(request_id: Any, kind: str, message: str) -> dict[str, Any]:
    return {"id": request_id, "ok": False, "error": {"type": kind, "message": message}}


def _answer(dispatcher: CommandDispatcher, line: str) -> dict[str, Any]:
    try:
        request: object = json.loads(line)
    except json.JSONDecodeError as exc:
        return _error(None, "ParseError", f"Invalid JSON request: {exc.msg}")
    if not isinstance(request, Mapping):
        return _error(None, "ParseError", "Request must be a JSON object")
    request_id = request.get("id")
    channel = request.get("channel")
    if not isinstance(channel, str):
        return _error(request_id, "ParseError", "Request is missing a channel name")
    try:
        result = dispatcher.invoke(channel, request.get("payload"))
    except PromptLibraryError as exc:
        return _error(request_id, type(exc).__name__, str(exc))
    except Exception as exc:
        serve_logger.exception("Unexpected failure while serving %s", channel)
        return _error(request_id, "InternalError", str(exc) or type(exc).__name__)
    return {"id": request_id, "ok": True, "result": result}


def run_serve(services: PromptServices, args: argparse.Namespace, logger: logging.Logger) -> int:
    logger.info("Serving prompt channels on stdin/stdout")
    handled = serve_json_lines(services.dispatcher, sys.stdin, sys.stdout)
    logger.info("Input closed after %d request(s)", handled)
    return EXIT_OK


COMMAND_SPECS: dict[str, CommandSpec] = {
    "list": CommandSpec(run_list),
    "create": CommandSpec(run_create),
    "update": CommandSpec(run_update),
    "delete": CommandSpec(run_delete),
    "invoke": CommandSpec(run_invoke),
    "serve": CommandSpec(run_serve),
}

__all__ = ["COMMAND_SPECS", "CommandSpec", "serve_json_lines"]
