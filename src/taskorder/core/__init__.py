"""
Core of taskorder: the dependency graph, its validators and error types.
"""

from taskorder.core.errors import (
    TaskorderError,
    BusinessError,
    ValidationError,
    InvalidArgumentError,
    TaskNotFoundError,
    TaskFileError,
    CircularDependencyError,
    ConfigurationError,
)
from taskorder.core.dependency import (
    TaskNode,
    TaskStatus,
    DependencyGraph,
    detect_circular_dependencies,
    find_cycle,
    validate_execution_order,
)

__all__ = [
    "TaskNode",
    "TaskStatus",
    "DependencyGraph",
    "detect_circular_dependencies",
    "find_cycle",
    "validate_execution_order",
    "TaskorderError",
    "BusinessError",
    "ValidationError",
    "InvalidArgumentError",
    "TaskNotFoundError",
    "TaskFileError",
    "CircularDependencyError",
    "ConfigurationError",
]
