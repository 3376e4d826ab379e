"""
Tests for JSON task definition loading.
"""

import pytest

from taskorder.cli.task_file import build_graph, load_task_file
from taskorder.core.errors import InvalidArgumentError, TaskFileError


def test_build_graph_registration_order():
    graph = build_graph({
        "tasks": ["Deploy"],
        "dependencies": {"Deploy": ["Test"], "Test": "Compile"},
    })
    assert list(graph.nodes) == ["Deploy", "Test", "Compile"]
    assert graph.dependencies_of("Deploy") == ["Test"]
    assert graph.dependencies_of("Test") == ["Compile"]
    assert graph.execute_all() == ["Compile", "Test", "Deploy"]


def test_tasks_key_is_optional():
    graph = build_graph({"dependencies": {"B": ["A"]}})
    assert list(graph.nodes) == ["B", "A"]


def test_empty_definition():
    assert len(build_graph({})) == 0


@pytest.mark.parametrize("data,match", [
    ([], "JSON object"),
    ({"tasks": "A", "extra": 1}, "Unknown keys"),
    ({"tasks": [1, 2]}, "'tasks'"),
    ({"dependencies": ["A"]}, "'dependencies'"),
    ({"dependencies": {"A": [None]}}, "dependencies of 'A'"),
])
def test_bad_shapes(data, match):
    with pytest.raises(TaskFileError, match=match):
        build_graph(data)


def test_blank_task_name():
    with pytest.raises(InvalidArgumentError):
        build_graph({"tasks": ["A", " "]})


def test_load_task_file(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text('{"tasks": ["A", "B"], "dependencies": {"A": ["B"]}}')
    assert load_task_file(path).execute_all() == ["B", "A"]


def test_load_invalid_json(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text("{")
    with pytest.raises(TaskFileError, match="Invalid JSON") as exc_info:
        load_task_file(path)
    assert exc_info.value.context["line"] == 1


def test_load_missing_file(tmp_path):
    with pytest.raises(TaskFileError, match="not found"):
        load_task_file(tmp_path / "missing.json")


def test_load_non_utf8_file(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_bytes(b'{"tasks": ["\xff"]}')
    with pytest.raises(TaskFileError, match="not valid UTF-8"):
        load_task_file(path)


def test_load_directory(tmp_path):
    with pytest.raises(TaskFileError, match="Cannot read task file"):
        load_task_file(tmp_path)
