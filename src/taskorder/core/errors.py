"""
Custom exceptions for taskorder.

Exception Hierarchy:
    TaskorderError (base)
        ├── BusinessError (user/expected errors, no stack trace)
        │   ├── ValidationError (input validation failures)
        │   │   ├── InvalidArgumentError (empty names, bad node references)
        │   │   ├── TaskNotFoundError (unregistered task names)
        │   │   └── TaskFileError (malformed task definition files)
        │   ├── CircularDependencyError (a task transitively depends on itself)
        │   └── ConfigurationError (config/environment issues)
        └── SystemError (unexpected errors, with stack trace)

Usage Guidelines:
    - The core raises these synchronously and never retries or swallows them
    - The CLI prints BusinessError messages without a traceback
    - Use structured error format: what/why/how_to_fix/context

Structured Error Format:
    All error classes support optional structured information:
    - what: What went wrong (brief description)
    - why: Why it happened (root cause)
    - how_to_fix: How to resolve it (actionable steps)
    - context: Additional context (dict with relevant details)
"""

from typing import Optional, Sequence


class TaskorderError(RuntimeError):
    """
    Base exception for all taskorder-specific errors.

    Supports structured error information:
    - what: What went wrong
    - why: Why it happened
    - how_to_fix: How to resolve it
    - context: Additional context dict
    """

    def __init__(
        self,
        message: str,
        *,
        what: str | None = None,
        why: str | None = None,
        how_to_fix: str | None = None,
        context: dict | None = None,
    ):
        self.message = message
        self.what = what
        self.why = why
        self.how_to_fix = how_to_fix
        self.context = context or {}

        if what:
            formatted_msg = f"❌ {what}"
            if why:
                formatted_msg += f"\n\n💡 Reason: {why}"
            if how_to_fix:
                formatted_msg += f"\n\n✅ Solution: {how_to_fix}"
            if context:
                context_str = "\n".join(f"  - {k}: {v}" for k, v in context.items())
                formatted_msg += f"\n\n📝 Context:\n{context_str}"
            super().__init__(formatted_msg)
        else:
            super().__init__(message)


class BusinessError(TaskorderError):
    """
    Base exception for expected/user-facing failures.

    These represent bad input that the caller must fix before calling
    again. The CLI reports them without exc_info.
    """

    pass


class ValidationError(BusinessError):
    """
    Validation-specific business error.

    Example:
        >>> raise ValidationError("order is missing task 'Deploy'")
    """

    pass


class InvalidArgumentError(ValidationError, ValueError):
    """
    An empty or blank task name, or a missing node reference.

    Also a ValueError so callers that only know the builtin still catch it.
    """

    pass


class TaskNotFoundError(ValidationError, LookupError):
    """A task or dependency name that has not been registered."""

    def __init__(self, task_name: str, message: Optional[str] = None, **kwargs):
        self.task_name = task_name
        super().__init__(message or f"Task '{task_name}' does not exist.", **kwargs)


class TaskFileError(ValidationError):
    """A task definition file that cannot be read or has the wrong shape."""

    pass


class CircularDependencyError(BusinessError):
    """
    Raised when a task transitively depends on itself.

    Attributes:
        task_name: The task whose re-visit closed the cycle. Always a member
            of the cycle, but not necessarily the first one registered.
        cycle: Closed path from task_name back to itself, if known,
            e.g. ["A", "B", "A"].
    """

    def __init__(
        self,
        task_name: str,
        cycle: Optional[Sequence[str]] = None,
        message: Optional[str] = None,
        **kwargs,
    ):
        self.task_name = task_name
        self.cycle = list(cycle) if cycle else []
        if message is None:
            message = f"Circular dependency detected for task '{task_name}'."
            if self.cycle:
                message += f" Cycle: {' -> '.join(self.cycle)}"
        super().__init__(message, **kwargs)


class ConfigurationError(BusinessError):
    """
    Configuration-specific business error.

    Example:
        >>> raise ConfigurationError("Unknown output format 'xml'")
    """

    pass


class SystemError(TaskorderError):
    """
    Base exception for unexpected system-level errors.

    These are logged with full stack traces since they represent
    unexpected failures that need investigation.
    """

    pass


__all__ = [
    "TaskorderError",
    "BusinessError",
    "ValidationError",
    "InvalidArgumentError",
    "TaskNotFoundError",
    "TaskFileError",
    "CircularDependencyError",
    "ConfigurationError",
    "SystemError",
]
