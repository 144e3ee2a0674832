"""Custom exception classes for devnet-deployments."""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .types import DeploymentStep


class DeploymentError(Exception):
    """Base exception for deployment orchestration errors."""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when the environment does not describe a usable deployment."""

    pass


class ReadinessTimeoutError(DeploymentError, TimeoutError):
    """Raised when a bounded readiness poll runs out of attempts."""

    def __init__(self, message: str, attempts: int = 0, last_error: Optional[str] = None):
        super().__init__(message)
        self.attempts = attempts
        self.last_error = last_error


class StepFailedError(DeploymentError, RuntimeError):
    """
    Raised when a deployment step exits unsuccessfully.

    Attributes:
        step: The step that failed
        returncode: Exit status reported by the runner
        position: 1-based index of the step in its sequence
        completed: Number of steps that succeeded before the failure
    """

    def __init__(
        self,
        message: str,
        step: Optional["DeploymentStep"] = None,
        returncode: Optional[int] = None,
        position: Optional[int] = None,
        completed: int = 0,
    ):
        super().__init__(message)
        self.step = step
        self.returncode = returncode
        self.position = position
        self.completed = completed
