"""Main API for devnet-deployments."""

import time
from typing import Callable, List, Optional

from .logging import get_logger
from .readiness import CodeFetcher, get_code, wait_until_ready
from .runner import CommandRunner, SubprocessRunner
from .sequencer import run_sequence
from .steps import build_sequence
from .types import DeploymentConfig, StepResult

logger = get_logger(__name__)


def deploy(
    config: DeploymentConfig,
    runner: Optional[CommandRunner] = None,
    sleep: Callable[[float], None] = time.sleep,
    fetch: CodeFetcher = get_code,
) -> List[StepResult]:
    """
    Deploy the contract set to a devnet once it is ready.

    The sequence is only built after the readiness poll succeeds. Keeping the
    process alive afterwards is left to the caller.

    Args:
        config: Deployment configuration
        runner: Command runner (defaults to a SubprocessRunner using
            config.scripts_command)
        sleep: Delay function used between readiness polls
        fetch: Code lookup function used by the readiness poll

    Returns:
        Results of every executed step, in order

    Raises:
        ReadinessTimeoutError: If a bounded readiness poll gives up
        StepFailedError: If a step fails; later steps are not run
    """
    if runner is None:
        runner = SubprocessRunner(config.scripts_command)

    wait_until_ready(config, sleep=sleep, fetch=fetch)

    sequence = build_sequence(config)
    logger.info(
        "deployment_started",
        steps=sequence.names(),
        no_verify=config.no_verify,
        upload_vkeys=config.upload_vkeys,
    )
    return run_sequence(sequence, runner)
