"""Fail-fast execution of a deployment sequence."""

from typing import List

from .exceptions import StepFailedError
from .logging import get_logger
from .runner import CommandRunner
from .types import DeploymentSequence, StepResult

logger = get_logger(__name__)


def run_sequence(sequence: DeploymentSequence, runner: CommandRunner) -> List[StepResult]:
    """
    Execute every step of a sequence in order, stopping at the first failure.

    Failed steps are never retried and earlier steps are never rolled back;
    their on-chain effects stay in place.

    Args:
        sequence: Steps to execute
        runner: Command runner invoked once per step

    Returns:
        Results of all steps, in execution order

    Raises:
        StepFailedError: If a step exits unsuccessfully. No later step is run.
    """
    results: List[StepResult] = []
    total = len(sequence)

    for position, step in enumerate(sequence, start=1):
        log = logger.bind(step=step.name, position=position, total=total)
        log.info("step_started", target=step.target)

        result = runner.run(step)

        if not result.ok:
            log.error("step_failed", returncode=result.returncode, error=result.error)
            message = (
                f"Step {position}/{total} '{step.name}' failed "
                f"with exit status {result.returncode}"
            )
            if result.error:
                message += f": {result.error}"
            raise StepFailedError(
                message,
                step=step,
                returncode=result.returncode,
                position=position,
                completed=len(results),
            )

        log.info("step_succeeded")
        results.append(result)

    logger.info("sequence_complete", steps=total)
    return results
