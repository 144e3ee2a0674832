"""Devnet readiness polling for devnet-deployments."""

import time
from typing import Callable, Optional

import requests

from .constants import EMPTY_CODE
from .exceptions import ReadinessTimeoutError
from .logging import get_logger
from .types import DeploymentConfig, ReadinessState

logger = get_logger(__name__)

CodeFetcher = Callable[[str, str, float], Optional[str]]


def get_code(rpc_url: str, address: str, timeout: float) -> Optional[str]:
    """
    Fetch the deployed code at an address via eth_getCode.

    Args:
        rpc_url: RPC endpoint URL
        address: Contract address to query
        timeout: Request timeout in seconds

    Returns:
        Hex-encoded code from the response's result field, None if absent

    Raises:
        ValueError: If the RPC returns an error or a malformed body
        RuntimeError: If a network error occurs
    """
    try:
        response = requests.post(
            rpc_url,
            json={
                "jsonrpc": "2.0",
                "method": "eth_getCode",
                "params": [address, "latest"],
                "id": 1,
            },
            timeout=timeout,
        )

        # Check for HTTP errors
        if response.status_code != 200:
            raise RuntimeError(f"RPC request failed with status {response.status_code}")

        result = response.json()

    except requests.RequestException as e:
        raise RuntimeError(f"Network error during RPC call: {e}") from e

    if not isinstance(result, dict):
        raise ValueError(f"Malformed RPC response: {result!r}")

    # Check for RPC errors
    if "error" in result:
        raise ValueError(f"RPC error: {result['error']}")

    return result.get("result")


def is_ready(code: Optional[str]) -> bool:
    """Return True if an eth_getCode result shows deployed code."""
    return isinstance(code, str) and code not in ("", EMPTY_CODE)


def wait_until_ready(
    config: DeploymentConfig,
    sleep: Callable[[float], None] = time.sleep,
    fetch: CodeFetcher = get_code,
) -> ReadinessState:
    """
    Block until the readiness marker address holds code.

    Transport errors, RPC errors and empty results all mean "not yet ready":
    the endpoint is expected to be unreachable while the devnet boots.

    Args:
        config: Deployment configuration (rpc_url, init_check_address and
            the poll settings are used)
        sleep: Delay function, called with config.poll_interval between attempts
        fetch: Code lookup function with the signature of get_code

    Returns:
        ReadinessState describing the successful poll

    Raises:
        ReadinessTimeoutError: If config.max_poll_attempts is set and all
            attempts pass without the marker being deployed
    """
    state = ReadinessState()
    log = logger.bind(rpc_url=config.rpc_url, address=config.init_check_address)
    log.info("waiting_for_devnet")

    while True:
        state.attempts += 1
        try:
            state.code = fetch(config.rpc_url, config.init_check_address, config.rpc_timeout)
            state.last_error = None
        except (RuntimeError, ValueError) as e:
            state.code = None
            state.last_error = str(e)

        if is_ready(state.code):
            state.ready = True
            log.info("devnet_ready", attempts=state.attempts)
            return state

        log.debug("devnet_not_ready", attempt=state.attempts, error=state.last_error)

        if config.max_poll_attempts is not None and state.attempts >= config.max_poll_attempts:
            raise ReadinessTimeoutError(
                f"Devnet not ready after {state.attempts} attempts "
                f"(no code at {config.init_check_address})",
                attempts=state.attempts,
                last_error=state.last_error,
            )

        sleep(config.poll_interval)
