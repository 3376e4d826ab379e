"""Shared fixtures for taskorder tests."""

import pytest

from taskorder.core.config_manager import get_config_manager
from taskorder.core.dependency import DependencyGraph


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the CLI config at a temp dir and clear environment overrides."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("TASKORDER_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("TASKORDER_OUTPUT_FORMAT", raising=False)
    monkeypatch.chdir(tmp_path)
    get_config_manager().clear()
    yield config_dir
    get_config_manager().clear()


@pytest.fixture
def pipeline_graph():
    """Compile <- Test <- Deploy"""
    graph = DependencyGraph()
    graph.add_tasks(["Compile", "Test", "Deploy"])
    graph.add_dependency("Test", "Compile")
    graph.add_dependency("Deploy", "Test")
    return graph
