"""Tests for the pipeline state machine and step model."""

import pytest

from cleandeploy.model import Phase, PipelineRun, Status, Step


class TestPipelineRun:

    def test_starts_pending(self):
        run = PipelineRun()
        assert run.status is Status.PENDING
        assert run.history == []
        assert run.exit_code is None
        assert not run.ok

    def test_happy_path(self):
        run = PipelineRun()
        run.advance(Phase.CLEAN)
        assert run.status is Status.CLEAN
        run.advance(Phase.BUILD)
        assert run.status is Status.BUILD
        run.advance(Phase.DEPLOY)
        assert run.status is Status.DEPLOY
        run.succeed()

        assert run.ok
        assert run.exit_code == 0
        assert run.history == [Phase.CLEAN, Phase.BUILD, Phase.DEPLOY]

    @pytest.mark.parametrize("phase", [Phase.CLEAN, Phase.BUILD])
    def test_cannot_reenter_prior_phase(self, phase):
        run = PipelineRun()
        run.advance(Phase.CLEAN)
        run.advance(Phase.BUILD)
        with pytest.raises(ValueError):
            run.advance(phase)

    def test_fail_records_phase_and_code(self):
        run = PipelineRun()
        run.advance(Phase.CLEAN)
        run.advance(Phase.BUILD)
        run.fail(101)

        assert run.status is Status.FAILED
        assert run.failed_phase is Phase.BUILD
        assert run.exit_code == 101
        assert not run.ok

    def test_no_transition_out_of_failed(self):
        run = PipelineRun()
        run.advance(Phase.CLEAN)
        run.fail(1)
        with pytest.raises(ValueError):
            run.advance(Phase.BUILD)
        with pytest.raises(ValueError):
            run.succeed()
        with pytest.raises(ValueError):
            run.fail(2)

    def test_cannot_succeed_before_any_phase(self):
        with pytest.raises(ValueError):
            PipelineRun().succeed()


def test_step_command_is_shell_quoted():
    s = Step(name="deploy", phase=Phase.DEPLOY, argv=("vercel", "--prod", "my app"), banner="b")
    assert s.tool == "vercel"
    assert s.command == "vercel --prod 'my app'"
