"""
Tests for the generate use case — a full invocation end to end.
"""

import logging
import sys
from pathlib import Path

import pytest

from fluxgen.adapters.mock import MockInvoker
from fluxgen.core.errors import ClasspathError, ConfigurationError, GenerationFailure, LaunchError
from fluxgen.core.use_cases.generate import InvocationState, plan_generate, run_generate

S = InvocationState


class TestPlanGenerate:
    def test_composes_command(self, base_dir: Path, make_config):
        plan = plan_generate(make_config(classpathSeparator=":"), ["/a.jar", "/b.jar"])
        assert plan.state == S.COMMAND_COMPOSED
        assert plan.classpath == "/a.jar:/b.jar"
        assert plan.command[-2:] == ["-cp", "/a.jar:/b.jar"]
        out_at = plan.command.index("-outDirectory")
        assert plan.command[out_at + 1] == str(
            base_dir.resolve() / "target/generated-sources/fluxtionFx"
        )

    def test_empty_classpath_raises_before_compose(self, make_config):
        with pytest.raises(ClasspathError):
            plan_generate(make_config(), [])

    def test_bad_base_dir_raises(self, tmp_path: Path, make_config):
        with pytest.raises(ConfigurationError):
            plan_generate(make_config(projectBaseDir=str(tmp_path / "missing")), ["/a.jar"])


class TestRunGenerate:
    def test_success_state_history(self, make_config):
        mock = MockInvoker()
        result = run_generate(make_config(), ["/a.jar"], invoker=mock)
        assert result.succeeded
        assert result.history == [
            S.IDLE,
            S.PATHS_RESOLVED,
            S.CLASSPATH_BUILT,
            S.COMMAND_COMPOSED,
            S.PROCESS_RUNNING,
            S.TERMINATED,
            S.SUCCESS,
        ]
        assert mock.call_count == 1
        assert mock.call_log[0].command == result.command

    def test_runs_in_project_base_dir(self, base_dir: Path, make_config):
        mock = MockInvoker()
        run_generate(make_config(), ["/a.jar"], invoker=mock)
        assert mock.call_log[0].working_dir == str(base_dir.resolve())

    def test_empty_classpath_launches_nothing(self, make_config):
        mock = MockInvoker()
        with pytest.raises(ClasspathError):
            run_generate(make_config(), [], invoker=mock)
        assert mock.call_count == 0

    def test_configuration_error_launches_nothing(self, make_config):
        mock = MockInvoker()
        with pytest.raises(ConfigurationError):
            run_generate(make_config(className=""), ["/a.jar"], invoker=mock)
        assert mock.call_count == 0

    def test_failed_exit_raises(self, make_config):
        with pytest.raises(GenerationFailure):
            run_generate(make_config(), ["/a.jar"], invoker=MockInvoker(exit_code=1))

    def test_failed_exit_ignored(self, make_config):
        result = run_generate(
            make_config(ignoreErrors=True), ["/a.jar"], invoker=MockInvoker(exit_code=1)
        )
        assert result.state == S.FAILED
        assert not result.succeeded
        assert result.receipt.exit_code == 1

    def test_launch_failure_does_not_abort_by_default(self, make_config):
        mock = MockInvoker()
        mock.set_launch_failure()
        result = run_generate(make_config(), ["/a.jar"], invoker=mock)
        assert result.state == S.FAILED

    def test_launch_failure_aborts_with_fail_policy(self, make_config):
        mock = MockInvoker()
        mock.set_launch_failure()
        with pytest.raises(LaunchError):
            run_generate(make_config(launchErrorPolicy="fail"), ["/a.jar"], invoker=mock)

    def test_to_dict(self, make_config):
        result = run_generate(make_config(), ["/a.jar"], invoker=MockInvoker())
        data = result.to_dict()
        assert data["state"] == "success"
        assert data["succeeded"] is True
        assert data["exit_code"] == 0
        assert data["config"]["packageName"] == "com.example.generated"


@pytest.mark.skipif(sys.platform == "win32", reason="uses /bin/sh generator scripts")
class TestRunGenerateWithProcess:
    def test_real_generator_receives_command(self, base_dir: Path, make_config, make_generator):
        script, args_file = make_generator()
        config = make_config(fluxtionExe=str(script), logDebug=True, classpathSeparator=":")
        result = run_generate(config, ["/a.jar", "/b.jar"])
        assert result.succeeded
        args = args_file.read_text().splitlines()
        assert args[0] == "--debug"
        assert args[args.index("-biasConfig") + 1] == ""
        assert args[-2:] == ["-cp", "/a.jar:/b.jar"]

    def test_real_generator_failure(self, make_config, make_generator):
        script, _ = make_generator(exit_code=2)
        with pytest.raises(GenerationFailure):
            run_generate(make_config(fluxtionExe=str(script)), ["/a.jar"])

    def test_historical_policy_ignores_exit_status(self, make_config, make_generator):
        script, _ = make_generator(exit_code=2)
        config = make_config(fluxtionExe=str(script), exitStatusPolicy="negative")
        assert run_generate(config, ["/a.jar"]).succeeded

    def test_missing_generator_logged_not_raised(self, tmp_path: Path, make_config):
        config = make_config(fluxtionExe=str(tmp_path / "missing"))
        result = run_generate(config, ["/a.jar"])
        assert result.receipt.status == "launch_failed"
        assert result.state == S.FAILED

    def test_launch_failure_reported_once(self, tmp_path: Path, make_config, caplog):
        config = make_config(fluxtionExe=str(tmp_path / "missing"))
        run_generate(config, ["/a.jar"])
        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert "not found" in errors[0].getMessage()
