"""
Dependency validation utilities

Read-only checks over a DependencyGraph: cycle detection that reports the
full cycle path, and verification of a proposed execution order. None of
these functions touch the executed flags of the graph's nodes.
"""

from typing import Dict, List, Optional, Sequence, Set

from taskorder.core.dependency.graph import DependencyGraph
from taskorder.core.errors import CircularDependencyError, ValidationError
from taskorder.logger import get_logger

logger = get_logger(__name__)


def find_cycle(graph: DependencyGraph) -> Optional[List[str]]:
    """
    Find the first cycle reachable in registration order.

    Args:
        graph: Graph to inspect

    Returns:
        Closed cycle path such as ["A", "B", "A"], or None if the graph is acyclic
    """
    visited: Set[str] = set()

    for root in graph:
        if root.name in visited:
            continue

        # DFS with an explicit path so deep chains don't hit the recursion limit
        path: List[str] = [root.name]
        on_path: Set[str] = {root.name}
        stack = [iter(root.dependencies)]
        visited.add(root.name)

        while stack:
            dependency = next(stack[-1], None)
            if dependency is None:
                stack.pop()
                on_path.discard(path.pop())
                continue
            if dependency.name in on_path:
                cycle_start = path.index(dependency.name)
                return path[cycle_start:] + [dependency.name]
            if dependency.name in visited:
                continue
            visited.add(dependency.name)
            path.append(dependency.name)
            on_path.add(dependency.name)
            stack.append(iter(dependency.dependencies))

    return None


def detect_circular_dependencies(graph: DependencyGraph) -> None:
    """
    Raise if the graph contains a cycle of any length, self-edges included.

    Raises:
        CircularDependencyError: With cycle set to the full closed path
    """
    cycle = find_cycle(graph)
    if cycle:
        logger.debug("Cycle found during validation: %s", " -> ".join(cycle))
        raise CircularDependencyError(
            cycle[0],
            cycle=cycle,
            what=f"Circular dependency detected: {' -> '.join(cycle)}",
            why="Tasks cannot have circular dependencies as no valid execution order exists.",
            how_to_fix=f"Remove one of the dependencies along the cycle starting at '{cycle[0]}'.",
            context={"task": cycle[0], "cycle_length": len(cycle) - 1},
        )


def validate_execution_order(graph: DependencyGraph, order: Sequence[str]) -> None:
    """
    Check that order is a permutation of the graph's tasks respecting every edge.

    Raises:
        ValidationError: Naming the first problem found
    """
    position: Dict[str, int] = {}
    for index, name in enumerate(order):
        if name in position:
            raise ValidationError(f"Task '{name}' appears more than once in the order.")
        if name not in graph:
            raise ValidationError(f"Task '{name}' in the order is not registered.")
        position[name] = index

    missing = [node.name for node in graph if node.name not in position]
    if missing:
        raise ValidationError(f"Order is missing tasks: {', '.join(missing)}")

    for node in graph:
        for dependency in node.dependencies:
            if position[dependency.name] > position[node.name]:
                raise ValidationError(
                    f"Task '{node.name}' is ordered before its dependency '{dependency.name}'."
                )


__all__ = [
    "find_cycle",
    "detect_circular_dependencies",
    "validate_execution_order",
]
