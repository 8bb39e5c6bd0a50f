"""Entry point used by the desktop shell.

Startup: load settings, configure logging, build the command context and
resolve the server URL the UI should start with.
"""

from __future__ import annotations

import logging

from employee_client.commands import COMMANDS, CommandContext
from employee_client.config.local_config import resolve_server_url
from employee_client.config.settings import ClientSettings
from employee_client.errors import ConfigIOError
from employee_client.logging_config import configure_logging

logger = logging.getLogger(__name__)


def bootstrap(settings: ClientSettings | None = None) -> tuple[CommandContext, str]:
    """Prepare the bindings for the UI.

    Returns the command context and the initial server URL. A corrupt config
    file is logged and the default server URL is used instead.
    """
    settings = settings or ClientSettings()
    configure_logging(settings.log_level)

    context = CommandContext.from_settings(settings)
    try:
        server_url = resolve_server_url(settings.default_server_url, context.config_dir)
    except ConfigIOError as exc:
        logger.warning("Ignoring unreadable config: %s", exc.message)
        server_url = settings.default_server_url

    logger.info(
        "Employee client ready with %d commands, server %s",
        len(COMMANDS),
        server_url,
    )
    return context, server_url
