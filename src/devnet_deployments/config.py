"""Environment configuration for devnet-deployments."""

import math
import os
import shlex
from typing import List, Mapping, Optional, Tuple

from .constants import (
    DEFAULT_POLL_INTERVAL,
    DEFAULT_RPC_TIMEOUT,
    DEFAULT_SCRIPTS_COMMAND,
    ENV_DEPLOYMENTS_PATH,
    ENV_INIT_CHECK_ADDRESS,
    ENV_MAX_POLL_ATTEMPTS,
    ENV_NO_VERIFY,
    ENV_POLL_INTERVAL,
    ENV_PRIVATE_KEY,
    ENV_PROXY_OWNER,
    ENV_RPC_TIMEOUT,
    ENV_RPC_URL,
    ENV_SCRIPTS_COMMAND,
    ENV_UPLOAD_VKEYS,
)
from .exceptions import ConfigurationError
from .types import DeploymentConfig

REQUIRED_VARS = (
    ENV_RPC_URL,
    ENV_INIT_CHECK_ADDRESS,
    ENV_PRIVATE_KEY,
    ENV_DEPLOYMENTS_PATH,
    ENV_PROXY_OWNER,
)


def flag_is_set(value: Optional[str]) -> bool:
    """
    Interpret a presence-based flag.

    Any non-empty value enables the flag; unset and empty both disable it.
    """
    return bool(value)


def _parse_float(
    environ: Mapping[str, str],
    name: str,
    default: float,
    problems: List[str],
    positive: bool = False,
) -> float:
    raw = environ.get(name)
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        problems.append(f"{name} must be a number, got {raw!r}")
        return default
    if not math.isfinite(value):
        problems.append(f"{name} must be finite, got {raw!r}")
        return default
    if positive and value <= 0:
        problems.append(f"{name} must be positive, got {raw!r}")
        return default
    if value < 0:
        problems.append(f"{name} must not be negative, got {raw!r}")
        return default
    return value


def _parse_attempts(environ: Mapping[str, str], problems: List[str]) -> Optional[int]:
    raw = environ.get(ENV_MAX_POLL_ATTEMPTS)
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        problems.append(f"{ENV_MAX_POLL_ATTEMPTS} must be an integer, got {raw!r}")
        return None
    if value < 1:
        problems.append(f"{ENV_MAX_POLL_ATTEMPTS} must be positive, got {raw!r}")
        return None
    return value


def _parse_command(environ: Mapping[str, str], problems: List[str]) -> Tuple[str, ...]:
    raw = environ.get(ENV_SCRIPTS_COMMAND)
    if not raw:
        return DEFAULT_SCRIPTS_COMMAND
    try:
        command = tuple(shlex.split(raw))
    except ValueError as e:
        problems.append(f"{ENV_SCRIPTS_COMMAND} is not a valid command line: {e}")
        return DEFAULT_SCRIPTS_COMMAND
    if not command:
        problems.append(f"{ENV_SCRIPTS_COMMAND} must name a command")
    return command


def load_config(environ: Optional[Mapping[str, str]] = None) -> DeploymentConfig:
    """
    Build the deployment configuration from environment variables.

    All problems are collected and reported together so an operator can fix
    the environment in one pass.

    Args:
        environ: Variables to read (defaults to os.environ)

    Returns:
        Immutable DeploymentConfig

    Raises:
        ConfigurationError: If a required variable is missing or empty, or an
            optional numeric setting is malformed
    """
    if environ is None:
        environ = os.environ

    problems: List[str] = []

    missing = [name for name in REQUIRED_VARS if not environ.get(name)]
    if missing:
        problems.append(f"missing required environment variables: {', '.join(missing)}")

    poll_interval = _parse_float(environ, ENV_POLL_INTERVAL, DEFAULT_POLL_INTERVAL, problems)
    rpc_timeout = _parse_float(
        environ, ENV_RPC_TIMEOUT, DEFAULT_RPC_TIMEOUT, problems, positive=True
    )
    max_poll_attempts = _parse_attempts(environ, problems)
    scripts_command = _parse_command(environ, problems)

    if problems:
        raise ConfigurationError("; ".join(problems))

    return DeploymentConfig(
        rpc_url=environ[ENV_RPC_URL],
        init_check_address=environ[ENV_INIT_CHECK_ADDRESS],
        private_key=environ[ENV_PRIVATE_KEY],
        deployments_path=environ[ENV_DEPLOYMENTS_PATH],
        proxy_owner=environ[ENV_PROXY_OWNER],
        no_verify=flag_is_set(environ.get(ENV_NO_VERIFY)),
        upload_vkeys=flag_is_set(environ.get(ENV_UPLOAD_VKEYS)),
        scripts_command=scripts_command,
        poll_interval=poll_interval,
        max_poll_attempts=max_poll_attempts,
        rpc_timeout=rpc_timeout,
    )
