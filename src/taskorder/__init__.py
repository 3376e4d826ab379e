"""
taskorder - Dependency-ordered task scheduling

Resolves named tasks with declared dependencies into a single execution
order, detecting circular dependencies before any task runs.

Core modules:
- core.dependency: TaskNode, DependencyGraph and read-only validators
- core.errors: Structured exception hierarchy
- core.config_manager: Environment and .env configuration

Optional:
- cli: `taskorder` console script
"""

__version__ = "0.1.0"

# Lazy imports keep `import taskorder` cheap for the CLI
__all__ = [
    "TaskNode",
    "TaskStatus",
    "DependencyGraph",
    "find_cycle",
    "detect_circular_dependencies",
    "validate_execution_order",
    "TaskorderError",
    "InvalidArgumentError",
    "TaskNotFoundError",
    "CircularDependencyError",
    "__version__",
]


def __getattr__(name):
    """Lazy import of core exports"""

    if name in (
        "TaskNode",
        "TaskStatus",
        "DependencyGraph",
        "find_cycle",
        "detect_circular_dependencies",
        "validate_execution_order",
    ):
        from taskorder.core.dependency import (
            TaskNode,  # noqa: F401
            TaskStatus,  # noqa: F401
            DependencyGraph,  # noqa: F401
            find_cycle,  # noqa: F401
            detect_circular_dependencies,  # noqa: F401
            validate_execution_order,  # noqa: F401
        )

        return locals()[name]

    if name in (
        "TaskorderError",
        "InvalidArgumentError",
        "TaskNotFoundError",
        "CircularDependencyError",
    ):
        from taskorder.core.errors import (
            TaskorderError,  # noqa: F401
            InvalidArgumentError,  # noqa: F401
            TaskNotFoundError,  # noqa: F401
            CircularDependencyError,  # noqa: F401
        )

        return locals()[name]

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
