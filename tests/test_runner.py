"""Tests for the bash task runner."""

import shutil
from pathlib import Path

import pytest

from xcpick.errors import CatalogError, TaskFailedError, TaskNotFoundError
from xcpick.models import Task
from xcpick.runner import RunContext, ShellTaskRunner

requires_bash = pytest.mark.skipif(shutil.which("bash") is None, reason="bash not available")


class TestFromTasks:
    """Tests for building a runner from the catalog."""

    def test_builds_lookup_by_name(self, tmp_path: Path):
        tasks = [Task("build", "make"), Task("test", "make test")]
        runner = ShellTaskRunner.from_tasks(tasks, tmp_path)
        assert set(runner.tasks) == {"build", "test"}
        assert runner.tasks["build"] is tasks[0]

    def test_duplicate_names_rejected(self, tmp_path: Path):
        with pytest.raises(CatalogError, match="Duplicate task 'build'"):
            ShellTaskRunner.from_tasks([Task("build", "make"), Task("build", "ninja")], tmp_path)

    def test_task_without_script_rejected(self, tmp_path: Path):
        with pytest.raises(CatalogError, match="has no script"):
            ShellTaskRunner.from_tasks([Task("build", "  \n")], tmp_path)

    def test_execution_command_passes_args(self, tmp_path: Path):
        task = Task("greet", 'echo "$1"')
        runner = ShellTaskRunner.from_tasks([task], tmp_path)
        command = runner.get_execution_command(task, ["world"])
        assert command[1:] == ["-c", 'echo "$1"', "greet", "world"]


@requires_bash
class TestRun:
    """Tests for running task scripts."""

    def test_runs_script_in_working_dir(self, tmp_path: Path):
        runner = ShellTaskRunner.from_tasks([Task("touch", "echo done > marker.txt")], tmp_path)
        runner.run(RunContext(working_dir=tmp_path), "touch")
        assert (tmp_path / "marker.txt").read_text() == "done\n"

    def test_passes_arguments(self, tmp_path: Path):
        runner = ShellTaskRunner.from_tasks([Task("greet", 'echo "$1" > out.txt')], tmp_path)
        runner.run(RunContext(working_dir=tmp_path), "greet", ["hello"])
        assert (tmp_path / "out.txt").read_text() == "hello\n"

    def test_uses_context_environment(self, tmp_path: Path):
        runner = ShellTaskRunner.from_tasks([Task("env", 'echo "$GREETING" > out.txt')], tmp_path)
        context = RunContext(working_dir=tmp_path, env={"GREETING": "hi", "PATH": "/usr/bin:/bin"})
        runner.run(context, "env")
        assert (tmp_path / "out.txt").read_text() == "hi\n"

    def test_non_zero_exit_raises(self, tmp_path: Path):
        runner = ShellTaskRunner.from_tasks([Task("fail", "exit 3")], tmp_path)
        with pytest.raises(TaskFailedError) as exc_info:
            runner.run(RunContext(working_dir=tmp_path), "fail")
        assert exc_info.value.exit_code == 3
        assert exc_info.value.task_name == "fail"

    def test_unknown_task_raises(self, tmp_path: Path):
        runner = ShellTaskRunner.from_tasks([Task("build", "true")], tmp_path)
        with pytest.raises(TaskNotFoundError):
            runner.run(RunContext(working_dir=tmp_path), "deploy")
