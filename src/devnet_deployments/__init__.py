"""
devnet-deployments: ordered contract deployment to a freshly started devnet
"""

from importlib.metadata import PackageNotFoundError, version

from .config import load_config
from .exceptions import (
    ConfigurationError,
    DeploymentError,
    ReadinessTimeoutError,
    StepFailedError,
)
from .keepalive import block_forever
from .orchestrator import deploy
from .readiness import wait_until_ready
from .runner import CommandRunner, SubprocessRunner
from .sequencer import run_sequence
from .steps import build_sequence
from .types import (
    DeploymentConfig,
    DeploymentSequence,
    DeploymentStep,
    ReadinessState,
    StepKind,
    StepResult,
)

try:
    __version__ = version("devnet-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "deploy",
    "load_config",
    "wait_until_ready",
    "build_sequence",
    "run_sequence",
    "block_forever",
    "CommandRunner",
    "SubprocessRunner",
    "DeploymentConfig",
    "DeploymentSequence",
    "DeploymentStep",
    "ReadinessState",
    "StepKind",
    "StepResult",
    "DeploymentError",
    "ConfigurationError",
    "ReadinessTimeoutError",
    "StepFailedError",
]
