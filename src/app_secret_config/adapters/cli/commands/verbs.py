"""Verb commands: ``ManageConfiguration`` and ``ManageTestConfiguration``.

Domain errors raised by a verb end the invocation with a non-zero exit code:

* ``ProviderNotFoundError`` -> ``CONFIG_ERROR`` (78)
* ``ConstructionError`` -> ``DATA_ERROR`` (65)
* any other ``ConfigurationError`` -> ``CONFIG_ERROR`` (78)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NoReturn

import lib_log_rich.runtime
import rich_click as click

from app_secret_config.application.verbs import ManageConfiguration, ManageTestConfiguration
from app_secret_config.domain.errors import ConfigurationError, ConstructionError, ProviderNotFoundError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

if TYPE_CHECKING:
    from lib_layered_config import Config

    from app_secret_config.application.verbs import VerbOutcome

    Verb = ManageConfiguration | ManageTestConfiguration

logger = logging.getLogger(__name__)


def _fail(message: str, exit_code: ExitCode, exc: Exception) -> NoReturn:
    logger.error(message, extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"Error: {exc}", err=True)
    raise SystemExit(exit_code) from exc


def run_verb(verb: Verb, config: Config) -> VerbOutcome:
    """Execute ``verb`` and echo its message, mapping domain errors to exit codes.

    Raises:
        SystemExit: With ``CONFIG_ERROR`` or ``DATA_ERROR`` on domain errors.
    """
    extra = {"command": verb.name}
    with lib_log_rich.runtime.bind(job_id=f"cli-{verb.name}", extra=extra):
        logger.info("Executing verb", extra={"verb": verb.name})
        try:
            outcome = verb.execute(config)
        except ProviderNotFoundError as exc:
            _fail("Provider not found", ExitCode.CONFIG_ERROR, exc)
        except ConstructionError as exc:
            _fail("Provider configuration has the wrong shape", ExitCode.DATA_ERROR, exc)
        except ConfigurationError as exc:
            _fail("Invalid integration configuration", ExitCode.CONFIG_ERROR, exc)
        click.echo(outcome.message)
        return outcome


@click.command(
    ManageConfiguration.name,
    help=ManageConfiguration.help,
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.pass_context
def cli_manage_configuration(ctx: click.Context) -> None:
    cli_ctx = get_cli_context(ctx)
    verb = ManageConfiguration(load_integration=cli_ctx.services.load_integration_configuration)
    run_verb(verb, cli_ctx.config)


@click.command(
    ManageTestConfiguration.name,
    help=ManageTestConfiguration.help,
    context_settings=CLICK_CONTEXT_SETTINGS,
)
@click.pass_context
def cli_manage_test_configuration(ctx: click.Context) -> None:
    cli_ctx = get_cli_context(ctx)
    run_verb(ManageTestConfiguration(), cli_ctx.config)


__all__ = [
    "cli_manage_configuration",
    "cli_manage_test_configuration",
    "run_verb",
]
