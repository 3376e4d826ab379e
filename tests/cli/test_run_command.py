"""
Tests for the run, validate and demo commands.
"""

import json

import pytest
from click.testing import CliRunner

from taskorder.cli.main import cli

runner = CliRunner()


def assert_exit(result, code):
    """Exit code matches and the command ended through click, not an escaped exception."""
    assert result.exit_code == code, result.output
    assert result.exception is None or isinstance(result.exception, SystemExit), repr(result.exception)


def _write(path, data):
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def pipeline_file(tmp_path):
    return _write(tmp_path / "pipeline.json", {
        "tasks": ["Compile", "Test", "Deploy"],
        "dependencies": {"Test": ["Compile"], "Deploy": ["Test"]},
    })


@pytest.fixture
def cyclic_file(tmp_path):
    return _write(tmp_path / "cyclic.json", {
        "tasks": ["A", "B"],
        "dependencies": {"A": ["B"], "B": ["A"]},
    })


class TestRunCommand:
    """Test `taskorder run`"""

    def test_run_plain(self, pipeline_file):
        result = runner.invoke(cli, ["run", str(pipeline_file), "--format", "plain"])
        assert_exit(result, 0)
        assert "Execution Order: Compile, Test, Deploy" in result.output

    def test_run_json(self, pipeline_file):
        result = runner.invoke(cli, ["run", str(pipeline_file), "-f", "json"])
        assert_exit(result, 0)
        assert json.loads(result.output) == ["Compile", "Test", "Deploy"]

    def test_run_table_is_default(self, pipeline_file):
        result = runner.invoke(cli, ["run", str(pipeline_file)])
        assert_exit(result, 0)
        assert "Execution Order (3 tasks)" in result.output
        for name in ("Compile", "Test", "Deploy"):
            assert name in result.output

    def test_run_restricted_to_task(self, tmp_path):
        task_file = _write(tmp_path / "tasks.json", {
            "tasks": ["A", "B", "C", "D"],
            "dependencies": {"D": ["C"], "C": ["A"]},
        })
        result = runner.invoke(cli, ["run", str(task_file), "-f", "plain", "--task", "C"])
        assert_exit(result, 0)
        assert "Execution Order: A, C" in result.output

    def test_run_restricted_to_unknown_task(self, pipeline_file):
        result = runner.invoke(cli, ["run", str(pipeline_file), "--task", "Lint"])
        assert_exit(result, 1)
        assert "Lint" in result.output

    def test_run_cycle_fails(self, cyclic_file):
        result = runner.invoke(cli, ["run", str(cyclic_file)])
        assert_exit(result, 1)
        assert "❌" in result.output
        assert "Circular dependency detected" in result.output

    def test_run_cycle_reports_error_once(self, cyclic_file):
        result = runner.invoke(cli, ["run", str(cyclic_file)])
        assert_exit(result, 1)
        assert result.output.count("Circular dependency detected") == 1
        assert "Traceback" not in result.output
        assert "WARNING" not in result.output

    def test_run_directory_instead_of_file(self, tmp_path):
        result = runner.invoke(cli, ["run", str(tmp_path)])
        assert_exit(result, 1)
        assert "Cannot read task file" in result.output

    def test_run_missing_file(self, tmp_path):
        result = runner.invoke(cli, ["run", str(tmp_path / "nope.json")])
        assert_exit(result, 1)
        assert "Task file not found" in result.output

    def test_run_unknown_format(self, pipeline_file):
        result = runner.invoke(cli, ["run", str(pipeline_file), "-f", "xml"])
        assert_exit(result, 1)
        assert "Unknown output format" in result.output

    def test_run_uses_configured_format(self, pipeline_file):
        runner.invoke(cli, ["config", "set", "output_format", "json"])
        result = runner.invoke(cli, ["run", str(pipeline_file)])
        assert_exit(result, 0)
        assert json.loads(result.output) == ["Compile", "Test", "Deploy"]

    def test_run_non_string_configured_format(self, pipeline_file, isolated_config):
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.json").write_text(json.dumps({"output_format": 5}))
        result = runner.invoke(cli, ["run", str(pipeline_file)])
        assert_exit(result, 1)
        assert "Unknown output format '5'" in result.output

    def test_run_uses_environment_format(self, pipeline_file, monkeypatch):
        monkeypatch.setenv("TASKORDER_OUTPUT_FORMAT", "plain")
        result = runner.invoke(cli, ["run", str(pipeline_file)])
        assert_exit(result, 0)
        assert "Execution Order: Compile, Test, Deploy" in result.output


class TestValidateCommand:
    """Test `taskorder validate`"""

    def test_validate_ok(self, pipeline_file):
        result = runner.invoke(cli, ["validate", str(pipeline_file)])
        assert_exit(result, 0)
        assert "✅" in result.output
        assert "3 tasks, 2 dependencies, no cycles" in result.output

    def test_validate_reports_cycle_path(self, cyclic_file):
        result = runner.invoke(cli, ["validate", str(cyclic_file)])
        assert_exit(result, 1)
        assert "A -> B -> A" in result.output


class TestMiscCommands:
    """demo, version, help"""

    def test_demo(self):
        result = runner.invoke(cli, ["demo", "-f", "plain"])
        assert_exit(result, 0)
        assert "Execution Order: Compile, Test, Deploy" in result.output

    def test_version(self):
        from taskorder import __version__

        result = runner.invoke(cli, ["version"])
        assert_exit(result, 0)
        assert f"taskorder version {__version__}" in result.output

    def test_help_lists_lazy_commands(self):
        result = runner.invoke(cli, ["--help"])
        assert_exit(result, 0)
        for name in ("run", "validate", "demo", "config", "version"):
            assert name in result.output

    def test_unknown_command(self):
        result = runner.invoke(cli, ["bogus"])
        assert result.exit_code != 0
