"""Keep the orchestrator process alive after a successful deployment."""

import threading
from typing import Optional

from .logging import get_logger

logger = get_logger(__name__)

# Seconds between wake-ups; only bounds how long a set event goes unnoticed
WAKE_INTERVAL = 3600.0


def block_forever(stop_event: Optional[threading.Event] = None) -> None:
    """
    Suspend the calling thread until the process is terminated.

    Container supervisors treat process exit as completion and tear the devnet
    stack down, so a finished deployment must not exit.

    Args:
        stop_event: Event that releases the block when set. Nothing sets it
            outside of tests.
    """
    if stop_event is None:
        stop_event = threading.Event()

    logger.info("deployment_complete_keeping_alive")
    while not stop_event.wait(WAKE_INTERVAL):
        pass
