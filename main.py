"""Application entry point for the prompt library backend.

Updates:
  v0.2.0 - 2026-10-14 - Route CLI commands through the shared command dispatcher.
  v0.1.0 - 2026-10-11 - Wire settings, logging, and prompt services.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from cli.commands import COMMAND_SPECS
from cli.parser import build_parser
from cli.runtime import apply_log_level, setup_logging
from cli.settings_summary import print_settings_summary
from config import PromptLibrarySettings, SettingsError, load_settings
from core.exceptions import PromptLibraryError
from core.factory import PromptServices, build_prompt_services

EXIT_SETTINGS_ERROR = 2
EXIT_INIT_ERROR = 3


def _initialise_services(
    settings: PromptLibrarySettings,
    logger: logging.Logger,
) -> PromptServices | None:
    try:
        return build_prompt_services(settings)
    except PromptLibraryError as exc:
        logger.error("Failed to initialise prompt store: %s", exc)
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint that wires settings, services, and CLI commands."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.logging_config)

    logger = logging.getLogger("prompt_library.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        logger.error("Failed to load settings: %s", exc)
        return EXIT_SETTINGS_ERROR
    apply_log_level(settings.log_level)

    if args.print_settings:
        print_settings_summary(settings)
        return 0

    spec = COMMAND_SPECS.get(args.command) if args.command else None
    if spec is None:
        parser.print_help()
        return 0

    services = _initialise_services(settings, logger)
    if services is None:
        return EXIT_INIT_ERROR
    return spec.handler(services, args, logger)


if __name__ == "__main__":
    raise SystemExit(main())
