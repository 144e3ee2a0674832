"""CLI entry point for devnet-deployments."""

import dataclasses
import math
import sys
from typing import Optional

import click

from .config import load_config
from .exceptions import ConfigurationError, ReadinessTimeoutError, StepFailedError
from .keepalive import block_forever
from .logging import configure_logging, get_logger
from .orchestrator import deploy

logger = get_logger(__name__)


def finite_seconds(
    ctx: click.Context, param: click.Parameter, value: Optional[float]
) -> Optional[float]:
    if value is not None and not math.isfinite(value):
        raise click.BadParameter("must be a finite number of seconds")
    return value


def exit_status(returncode: Optional[int]) -> int:
    """Map a failed step's return code to a process exit status."""
    if returncode is not None and 0 < returncode < 256:
        return returncode
    return 1


@click.command()
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="info",
    show_default=True,
    help="Log level",
)
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
@click.option(
    "--poll-interval",
    type=click.FloatRange(min=0),
    default=None,
    callback=finite_seconds,
    help="Seconds between readiness polls (overrides $READINESS_POLL_INTERVAL)",
)
@click.option(
    "--max-poll-attempts",
    type=click.IntRange(min=1),
    default=None,
    help="Give up after this many readiness polls (default: poll forever)",
)
def main(
    log_level: str,
    json_logs: bool,
    poll_interval: Optional[float],
    max_poll_attempts: Optional[int],
) -> None:
    """Deploy the darkpool contracts to a devnet, then stay alive.

    Settings are read from the environment: DEVNET_RPC_URL, INIT_CHECK_ADDRESS,
    DEVNET_PKEY, DEPLOYMENTS_PATH and DEVNET_ACCOUNT_ADDRESS are required;
    NO_VERIFY and UPLOAD_VKEYS are enabled by any non-empty value.
    """
    configure_logging(log_level, json_output=json_logs)

    try:
        config = load_config()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    overrides = {}
    if poll_interval is not None:
        overrides["poll_interval"] = poll_interval
    if max_poll_attempts is not None:
        overrides["max_poll_attempts"] = max_poll_attempts
    if overrides:
        config = dataclasses.replace(config, **overrides)

    try:
        deploy(config)
    except ReadinessTimeoutError as e:
        logger.error("devnet_never_ready", attempts=e.attempts, last_error=e.last_error)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except StepFailedError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(exit_status(e.returncode))

    block_forever()
