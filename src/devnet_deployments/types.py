"""Data types and dataclasses for devnet-deployments."""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .constants import DEFAULT_POLL_INTERVAL, DEFAULT_RPC_TIMEOUT, DEFAULT_SCRIPTS_COMMAND

REDACTED = "***"


class StepKind(Enum):
    """
    Kinds of deployment step.

    Value strings are the subcommands of the deploy scripts binary.
    """

    DEPLOY_STYLUS = "deploy-stylus"
    DEPLOY_PROXY = "deploy-proxy"
    UPLOAD_VKEY = "upload-vkey"


@dataclass(frozen=True)
class DeploymentConfig:
    """Process-wide deployment settings, read once at startup."""

    # Required fields
    rpc_url: str  # Devnet JSON-RPC endpoint
    init_check_address: str  # Readiness marker address
    private_key: str  # Signer key, never logged
    deployments_path: str  # File the scripts record deployed addresses in
    proxy_owner: str  # Owner of the darkpool proxy

    # Presence-based flags
    no_verify: bool = False
    upload_vkeys: bool = False

    # Runner and poller settings
    scripts_command: Tuple[str, ...] = DEFAULT_SCRIPTS_COMMAND
    poll_interval: float = DEFAULT_POLL_INTERVAL
    max_poll_attempts: Optional[int] = None  # None polls forever
    rpc_timeout: float = DEFAULT_RPC_TIMEOUT

    def __repr__(self) -> str:
        shown = ", ".join(
            f"{f.name}={REDACTED if f.name == 'private_key' else getattr(self, f.name)!r}"
            for f in fields(self)
        )
        return f"DeploymentConfig({shown})"


@dataclass(frozen=True)
class DeploymentStep:
    """One invocation of the deploy scripts binary."""

    name: str  # Human-readable label, e.g. "deploy-darkpool"
    kind: StepKind
    target: str  # Contract or circuit identifier
    args: Tuple[str, ...]  # Arguments after the scripts command
    included: bool = True  # Decided once when the sequence is built

    def redacted_args(self) -> Tuple[str, ...]:
        """Return args with the signer key masked, for logging."""
        redacted = list(self.args)
        for i, arg in enumerate(redacted[:-1]):
            if arg == "-p":
                redacted[i + 1] = REDACTED
        return tuple(redacted)


@dataclass(frozen=True)
class DeploymentSequence:
    """Ordered steps of a single deployment run."""

    steps: Tuple[DeploymentStep, ...] = ()

    def __iter__(self) -> Iterator[DeploymentStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> DeploymentStep:
        return self.steps[index]

    def names(self) -> List[str]:
        return [step.name for step in self.steps]


@dataclass
class ReadinessState:
    """Outcome of the readiness poll."""

    attempts: int = 0
    ready: bool = False
    code: Optional[str] = None  # Last eth_getCode result
    last_error: Optional[str] = None


@dataclass(frozen=True)
class StepResult:
    """Outcome of running a single step."""

    step: DeploymentStep
    returncode: int
    error: Optional[str] = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.returncode == 0
