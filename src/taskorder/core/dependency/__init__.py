# Dependency module exports
from .node import TaskNode, TaskStatus
from .graph import DependencyGraph
from .validator import (
    detect_circular_dependencies,
    find_cycle,
    validate_execution_order,
)

__all__ = [
    # Model
    "TaskNode",
    "TaskStatus",
    "DependencyGraph",
    # Validation
    "detect_circular_dependencies",
    "find_cycle",
    "validate_execution_order",
]
