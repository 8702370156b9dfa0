"""The greeting command.

The command accepts any command-line tokens and ignores them. Configuration
and logging problems fall back to defaults, so every run ends with the
greeting on standard output and nothing on standard error.

Contents:
    * :func:`cli` - The single command behind the ``hello-world`` script.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from hello_world import __init__conf__
from hello_world.adapters.logging import command_scope
from hello_world.domain.behaviors import build_greeting
from hello_world.domain.errors import ConfigurationError

from .constants import IGNORED_ARGUMENTS_CONTEXT_SETTINGS
from .context import CliSettings, apply_traceback_preferences, load_cli_settings

if TYPE_CHECKING:
    from hello_world.composition import AppServices

logger = logging.getLogger(__name__)


@click.command(
    __init__conf__.shell_command,
    help=__init__conf__.title,
    context_settings=IGNORED_ARGUMENTS_CONTEXT_SETTINGS,
    add_help_option=False,
)
@click.argument("ignored", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, ignored: tuple[str, ...]) -> None:
    """Write the canonical greeting to standard output.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_world.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["--verbose"], obj=build_testing)
        >>> result.exit_code
        0
        >>> result.output
        'Hello, World!\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any

    problems: list[ConfigurationError] = []
    try:
        config = services.get_config()
    except ConfigurationError as exc:
        problems.append(exc)
        config = Config({}, {})
    try:
        settings = load_cli_settings(config)
    except ConfigurationError as exc:
        problems.append(exc)
        settings = CliSettings()
    apply_traceback_preferences(settings.traceback)
    try:
        services.init_logging(config)
    except ConfigurationError as exc:
        problems.append(exc)

    with command_scope("hello-world", command="hello", ignored_arguments=len(ignored)):
        # Without a runtime, stdlib's last-resort handler would print warnings to stderr.
        if lib_log_rich.runtime.is_initialised():
            for problem in problems:
                logger.warning("Continuing with defaults: %s", problem)
        logger.info("Writing greeting")
        click.echo(build_greeting())


__all__ = ["cli"]
