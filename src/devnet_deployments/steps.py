"""Deployment step construction for devnet-deployments."""

from typing import List, Tuple

from .constants import (
    DARKPOOL_CONTRACT,
    MERKLE_CONTRACT,
    NO_VERIFY_FLAG,
    VERIFIER_CONTRACT,
    VKEY_CIRCUITS,
)
from .types import DeploymentConfig, DeploymentSequence, DeploymentStep, StepKind


def shared_args(config: DeploymentConfig) -> Tuple[str, ...]:
    """Arguments every invocation of the deploy scripts takes."""
    return (
        "-p", config.private_key,
        "-r", config.rpc_url,
        "-d", config.deployments_path,
    )


def stylus_step(
    config: DeploymentConfig, name: str, contract: str, no_verify: bool = False
) -> DeploymentStep:
    """Build a `deploy-stylus` step for a contract."""
    args = shared_args(config) + (StepKind.DEPLOY_STYLUS.value, "--contract", contract)
    if no_verify:
        args += (NO_VERIFY_FLAG,)
    return DeploymentStep(name=name, kind=StepKind.DEPLOY_STYLUS, target=contract, args=args)


def proxy_step(config: DeploymentConfig) -> DeploymentStep:
    """Build the step pointing a proxy owned by config.proxy_owner at the darkpool."""
    args = shared_args(config) + (StepKind.DEPLOY_PROXY.value, "-o", config.proxy_owner)
    return DeploymentStep(
        name="deploy-proxy", kind=StepKind.DEPLOY_PROXY, target="proxy", args=args
    )


def vkey_step(config: DeploymentConfig, circuit: str) -> DeploymentStep:
    """Build a verification key upload step, included only if config.upload_vkeys."""
    args = shared_args(config) + (StepKind.UPLOAD_VKEY.value, "-c", circuit)
    return DeploymentStep(
        name=f"upload-vkey-{circuit}",
        kind=StepKind.UPLOAD_VKEY,
        target=circuit,
        args=args,
        included=config.upload_vkeys,
    )


def candidate_steps(config: DeploymentConfig) -> List[DeploymentStep]:
    """
    List every step a run may execute, in dependency order.

    The verifier and Merkle contracts must exist before the darkpool, the
    darkpool before the proxy, and verification keys are uploaded through the
    proxy, so the order here is the execution order.

    Args:
        config: Deployment configuration

    Returns:
        All candidate steps, with `included` already decided
    """
    steps = [
        stylus_step(config, "deploy-verifier", VERIFIER_CONTRACT),
        stylus_step(config, "deploy-merkle", MERKLE_CONTRACT),
        stylus_step(config, "deploy-darkpool", DARKPOOL_CONTRACT, no_verify=config.no_verify),
        proxy_step(config),
    ]
    steps.extend(vkey_step(config, circuit) for circuit in VKEY_CIRCUITS)
    return steps


def build_sequence(config: DeploymentConfig) -> DeploymentSequence:
    """
    Build the ordered sequence of steps to execute for a configuration.

    Args:
        config: Deployment configuration

    Returns:
        DeploymentSequence with 4 mandatory steps, followed by the 5
        verification key uploads when config.upload_vkeys is set
    """
    return DeploymentSequence(
        steps=tuple(step for step in candidate_steps(config) if step.included)
    )
