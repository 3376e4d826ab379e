"""
Dependency graph and execution ordering

DependencyGraph owns every TaskNode, registers tasks and dependency edges,
and resolves the whole vertex set into a single execution order with a
depth-first walk. Cycles are detected lazily, when the walk re-enters a
task that is still on the active path.
"""

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping

from taskorder.core.dependency.node import TaskNode, TaskStatus, require_name
from taskorder.core.errors import (
    CircularDependencyError,
    InvalidArgumentError,
    TaskNotFoundError,
)
from taskorder.logger import get_logger

logger = get_logger(__name__)


class DependencyGraph:
    """
    Task scheduler over a set of named tasks.

    Usage:
        graph = DependencyGraph()
        graph.add_tasks(["Compile", "Test", "Deploy"])
        graph.add_dependency("Test", "Compile")
        graph.add_dependency("Deploy", "Test")
        graph.execute_all()  # ["Compile", "Test", "Deploy"]

    Not thread-safe; callers must serialize registration and execution
    on a given instance.
    """

    def __init__(self):
        self._nodes: Dict[str, TaskNode] = {}
        self._execution_order: List[str] = []
        self._positions: Dict[str, int] = {}

    @property
    def nodes(self) -> Mapping[str, TaskNode]:
        """Read-only view of name -> node, in registration order."""
        return MappingProxyType(self._nodes)

    @property
    def execution_order(self) -> List[str]:
        """Names committed by successful execute_all() calls."""
        return list(self._execution_order)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[TaskNode]:
        return iter(self._nodes.values())

    def __repr__(self) -> str:
        return f"DependencyGraph(tasks={list(self._nodes)})"

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def add_task(self, name: str) -> TaskNode:
        """
        Register a task. Re-adding an existing name is a no-op.

        Args:
            name: Unique task name

        Returns:
            The registered node (existing one if already present)

        Raises:
            InvalidArgumentError: If name is empty or whitespace
        """
        require_name(name, "task_name")
        node = self._nodes.get(name)
        if node is None:
            node = TaskNode(name)
            self._nodes[name] = node
            logger.debug("Registered task %s", name)
        return node

    def add_tasks(self, names: Iterable[str]) -> None:
        for name in names:
            self.add_task(name)

    def add_dependency(self, task_name: str, dependency_name: str) -> None:
        """
        Declare that task_name depends on dependency_name.

        Both tasks must already be registered. No cycle check is done here;
        cycles surface in execute_all(). A task that has already been
        executed can only gain dependencies that were executed before it.

        Raises:
            InvalidArgumentError: If either name is empty or whitespace, or
                the edge contradicts the committed execution order
            TaskNotFoundError: If either name is not registered
        """
        task = self._lookup(task_name, "task_name")
        dependency = self._lookup(dependency_name, "dependency_name")
        self._check_committed_edge(task, dependency)
        task.add_dependency(dependency)
        logger.debug("Added dependency %s -> %s", task_name, dependency_name)

    def add_dependencies(self, task_name: str, dependency_names: Iterable[str]) -> None:
        """Add several edges for one task; all names are checked before any edge is added."""
        task = self._lookup(task_name, "task_name")
        dependencies = [self._lookup(name, "dependency_name") for name in dependency_names]
        for dependency in dependencies:
            self._check_committed_edge(task, dependency)
        for dependency in dependencies:
            task.add_dependency(dependency)
        logger.debug(
            "Added dependencies %s -> %s", task_name, [d.name for d in dependencies]
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_task(self, name: str) -> TaskNode:
        return self._lookup(name, "task_name")

    def dependencies_of(self, name: str) -> List[str]:
        """Declared dependency names of a task, duplicates included."""
        return [dep.name for dep in self._lookup(name, "task_name").dependencies]

    def dependents_of(self, name: str) -> List[str]:
        """Tasks that directly depend on name, in registration order."""
        target = self._lookup(name, "task_name")
        return [
            node.name
            for node in self._nodes.values()
            if any(dep is target for dep in node.dependencies)
        ]

    def _lookup(self, name: str, field_name: str) -> TaskNode:
        require_name(name, field_name)
        node = self._nodes.get(name)
        if node is None:
            label = "Dependency" if field_name == "dependency_name" else "Task"
            raise TaskNotFoundError(name, f"{label} '{name}' does not exist.")
        return node

    def _check_committed_edge(self, task: TaskNode, dependency: TaskNode) -> None:
        # An executed task keeps its committed position, so its new
        # dependency must already sit earlier in execution_order.
        if not task.executed:
            return
        if dependency.executed and self._positions[dependency.name] < self._positions[task.name]:
            return
        raise InvalidArgumentError(
            f"Task '{task.name}' has already been executed and cannot depend on '{dependency.name}'.",
            context={"task": task.name, "dependency": dependency.name},
        )

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def execute_all(self) -> List[str]:
        """
        Resolve every registered task into one execution order.

        Tasks are visited in registration order and each task's
        dependencies in declaration order, so the result is deterministic.
        Executed flags are only committed once the whole walk succeeds;
        a cycle leaves the graph untouched.

        Returns:
            All task names, every dependency before its dependents. On a
            graph that has been executed before, tasks committed earlier
            come first, followed by any registered since.

        Raises:
            CircularDependencyError: If any task transitively depends on itself
        """
        run_status: Dict[str, TaskStatus] = {}
        order: List[str] = []

        for root in self._nodes.values():
            if root.executed or root.name in run_status:
                continue
            self._visit(root, run_status, order)

        for name in order:
            self._nodes[name].mark_executed()
            self._positions[name] = len(self._positions)
        self._execution_order.extend(order)

        if order:
            logger.debug("Execution order: %s", ", ".join(self._execution_order))
        return list(self._execution_order)

    def _visit(
        self,
        root: TaskNode,
        run_status: Dict[str, TaskStatus],
        order: List[str],
    ) -> None:
        # Explicit stack of [node, next dependency index] frames; path mirrors
        # the names currently IN_PROGRESS, outermost first.
        run_status[root.name] = TaskStatus.IN_PROGRESS
        path: List[str] = [root.name]
        stack: List[list] = [[root, 0]]

        while stack:
            frame = stack[-1]
            node, index = frame
            dependencies = node._dependencies

            if index < len(dependencies):
                frame[1] = index + 1
                dependency = dependencies[index]
                state = run_status.get(dependency.name)

                if state is TaskStatus.IN_PROGRESS:
                    cycle = path[path.index(dependency.name):] + [dependency.name]
                    logger.debug(
                        "Circular dependency detected for task %s: %s",
                        dependency.name,
                        " -> ".join(cycle),
                    )
                    raise CircularDependencyError(dependency.name, cycle=cycle)

                if dependency.executed or state is TaskStatus.DONE:
                    continue

                run_status[dependency.name] = TaskStatus.IN_PROGRESS
                path.append(dependency.name)
                stack.append([dependency, 0])
            else:
                stack.pop()
                path.pop()
                run_status[node.name] = TaskStatus.DONE
                order.append(node.name)


__all__ = ["DependencyGraph"]
