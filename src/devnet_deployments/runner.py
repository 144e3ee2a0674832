"""External command execution for devnet-deployments."""

import subprocess
from typing import Protocol, Sequence, Tuple

from .constants import DEFAULT_SCRIPTS_COMMAND
from .logging import get_logger
from .types import DeploymentStep, StepResult

logger = get_logger(__name__)

# Shell convention for "command not found"
COMMAND_NOT_FOUND = 127


class CommandRunner(Protocol):
    """Runs a single deployment step and reports its outcome."""

    def run(self, step: DeploymentStep) -> StepResult:
        ...


class SubprocessRunner:
    """
    Run steps as child processes of the deploy scripts command.

    The child inherits stdout and stderr so its output reaches the operator
    unchanged. There is no timeout; a step runs until its process exits.
    """

    def __init__(self, command: Sequence[str] = DEFAULT_SCRIPTS_COMMAND):
        """
        Initialize the runner.

        Args:
            command: Command prefix; each step's args are appended to it
        """
        self.command: Tuple[str, ...] = tuple(command)

    def argv(self, step: DeploymentStep) -> Tuple[str, ...]:
        return self.command + step.args

    def run(self, step: DeploymentStep) -> StepResult:
        logger.debug(
            "spawning_command",
            step=step.name,
            argv=list(self.command + step.redacted_args()),
        )
        try:
            completed = subprocess.run(list(self.argv(step)), check=False)
        except OSError as e:
            return StepResult(
                step=step,
                returncode=COMMAND_NOT_FOUND,
                error=f"Failed to launch {self.command[0]!r}: {e}",
            )
        return StepResult(step=step, returncode=completed.returncode)
