"""Shared pytest fixtures for devnet-deployments tests."""

from typing import Callable, Dict, Iterable, List, Optional, Set

import pytest

from devnet_deployments.types import DeploymentConfig, DeploymentStep, StepResult

RPC_URL = "http://devnet.example.com:8547"
INIT_CHECK_ADDRESS = "0x0000000000000000000000000000000000000064"
PRIVATE_KEY = "0xb6b15c8cb491557369f3c7d2c287b053eb229daa9c22138887752191c9520659"
DEPLOYMENTS_PATH = "/deployments/devnet.json"
PROXY_OWNER = "0x3f1Eae7D46d88F08fc2F8ed27FCb2AB183EB2d0E"


class FakeRunner:
    """Records invoked steps; fails the steps whose names are in `fail`."""

    def __init__(self, fail: Iterable[str] = (), returncode: int = 1):
        self.fail: Set[str] = set(fail)
        self.returncode = returncode
        self.calls: List[DeploymentStep] = []

    def run(self, step: DeploymentStep) -> StepResult:
        self.calls.append(step)
        if step.name in self.fail:
            return StepResult(step=step, returncode=self.returncode)
        return StepResult(step=step, returncode=0)

    @property
    def names(self) -> List[str]:
        return [step.name for step in self.calls]


class ScriptedFetcher:
    """Replays a list of eth_getCode outcomes; exceptions in the list are raised."""

    def __init__(self, outcomes: List[object], default: object = None):
        self.outcomes = list(outcomes)
        self.default = default
        self.calls = 0

    def __call__(self, rpc_url: str, address: str, timeout: float) -> Optional[str]:
        self.calls += 1
        outcome = self.outcomes.pop(0) if self.outcomes else self.default
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class BoundedSleep:
    """Fake sleep that records delays and aborts after `limit` calls."""

    class LimitReached(Exception):
        """Raised once the iteration cap is hit."""

    def __init__(self, limit: int = 1000):
        self.limit = limit
        self.delays: List[float] = []

    def __call__(self, seconds: float) -> None:
        if len(self.delays) >= self.limit:
            raise self.LimitReached(f"slept {self.limit} times")
        self.delays.append(seconds)


@pytest.fixture
def base_env() -> Dict[str, str]:
    """Environment with every required variable set and no flags."""
    return {
        "DEVNET_RPC_URL": RPC_URL,
        "INIT_CHECK_ADDRESS": INIT_CHECK_ADDRESS,
        "DEVNET_PKEY": PRIVATE_KEY,
        "DEPLOYMENTS_PATH": DEPLOYMENTS_PATH,
        "DEVNET_ACCOUNT_ADDRESS": PROXY_OWNER,
    }


@pytest.fixture
def make_config() -> Callable[..., DeploymentConfig]:
    """Factory for configs with test defaults; keyword args override fields."""

    def _make(**overrides) -> DeploymentConfig:
        fields = {
            "rpc_url": RPC_URL,
            "init_check_address": INIT_CHECK_ADDRESS,
            "private_key": PRIVATE_KEY,
            "deployments_path": DEPLOYMENTS_PATH,
            "proxy_owner": PROXY_OWNER,
            "poll_interval": 1.0,
        }
        fields.update(overrides)
        return DeploymentConfig(**fields)

    return _make


@pytest.fixture
def config(make_config) -> DeploymentConfig:
    return make_config()


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    """Factory for recording runners, e.g. make_runner(fail=["deploy-merkle"])."""
    return FakeRunner


@pytest.fixture
def make_fetcher() -> Callable[..., ScriptedFetcher]:
    """Factory for scripted eth_getCode lookups, e.g. make_fetcher(["0x", code])."""
    return ScriptedFetcher


@pytest.fixture
def make_sleep() -> Callable[..., BoundedSleep]:
    """Factory for fake sleeps with an iteration cap."""
    return BoundedSleep


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def bounded_sleep() -> BoundedSleep:
    return BoundedSleep()
