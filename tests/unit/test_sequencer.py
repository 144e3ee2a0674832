"""Unit tests for fail-fast sequence execution."""

import pytest

from devnet_deployments.exceptions import StepFailedError
from devnet_deployments.sequencer import run_sequence
from devnet_deployments.steps import build_sequence
from devnet_deployments.types import DeploymentSequence


class TestRunSequence:
    """Test the run_sequence function."""

    def test_runs_all_steps_in_order(self, config, fake_runner):
        sequence = build_sequence(config)

        results = run_sequence(sequence, fake_runner)

        assert fake_runner.names == sequence.names()
        assert [result.step for result in results] == list(sequence)
        assert all(result.ok for result in results)

    def test_empty_sequence(self, fake_runner):
        assert run_sequence(DeploymentSequence(), fake_runner) == []
        assert fake_runner.calls == []

    @pytest.mark.parametrize("failing_index", range(9))
    def test_failure_stops_remaining_steps(self, make_config, make_runner, failing_index):
        """Test that steps after a failing step are never invoked."""
        sequence = build_sequence(make_config(upload_vkeys=True))
        failing = sequence[failing_index].name
        runner = make_runner(fail=[failing])

        with pytest.raises(StepFailedError) as exc_info:
            run_sequence(sequence, runner)

        assert len(runner.calls) == failing_index + 1
        assert runner.names == sequence.names()[: failing_index + 1]
        assert exc_info.value.step.name == failing
        assert exc_info.value.position == failing_index + 1
        assert exc_info.value.completed == failing_index

    def test_failure_propagates_return_code(self, config, make_runner):
        runner = make_runner(fail=["deploy-darkpool"], returncode=101)

        with pytest.raises(StepFailedError, match="deploy-darkpool") as exc_info:
            run_sequence(build_sequence(config), runner)

        assert exc_info.value.returncode == 101
        assert "3/4" in str(exc_info.value)

    def test_failed_step_is_not_retried(self, config, make_runner):
        runner = make_runner(fail=["deploy-verifier"])

        with pytest.raises(StepFailedError):
            run_sequence(build_sequence(config), runner)

        assert runner.names == ["deploy-verifier"]
