"""Exception hierarchy for providers, agents, tools and workflows."""

from __future__ import annotations

from datetime import timedelta


def _format_duration(duration: float | timedelta) -> str:
    """Render a duration given in seconds (or as a timedelta) compactly."""
    seconds = duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
    if seconds == 0 or seconds >= 1:
        return f"{seconds:g}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:g}ms"
    return f"{seconds * 1e6:g}µs"


# ---------------------------------------------------------------------------
# LLM / provider errors
# ---------------------------------------------------------------------------


class LlmError(Exception):
    """Base class for errors from model providers."""


class ProviderError(LlmError):
    """A provider reported a failure of its own."""

    def __init__(self, source: BaseException | str) -> None:
        self.source = source
        super().__init__(f"Provider error: {source}")
        if isinstance(source, BaseException):
            self.__cause__ = source


class ConfigurationError(LlmError):
    """The provider or model configuration is unusable."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Configuration error: {message}")


class ValidationError(LlmError):
    """A field of a request failed validation."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"Validation error in {field}: {message}")


class NetworkError(LlmError):
    """The network transport failed."""

    def __init__(self, source: BaseException | str) -> None:
        self.source = source
        super().__init__(f"Network error: {source}")
        if isinstance(source, BaseException):
            self.__cause__ = source


class SerializationError(LlmError):
    """A payload could not be encoded or decoded."""

    def __init__(self, source: BaseException | str) -> None:
        self.source = source
        super().__init__(f"Serialization error: {source}")
        if isinstance(source, BaseException):
            self.__cause__ = source


class LlmTimeoutError(LlmError):
    """A request did not finish in time; ``duration`` is in seconds."""

    def __init__(self, duration: float | timedelta) -> None:
        self.duration = (
            duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
        )
        super().__init__(f"Timeout after {_format_duration(self.duration)}")


class RateLimitError(LlmError):
    """The provider refused the request because of rate limiting."""

    def __init__(self, retry_after: float | timedelta | None = None) -> None:
        if isinstance(retry_after, timedelta):
            retry_after = retry_after.total_seconds()
        self.retry_after = retry_after
        when = "unknown" if retry_after is None else _format_duration(retry_after)
        super().__init__(f"Rate limit exceeded: retry after {when}")


class AuthenticationError(LlmError):
    """Credentials were missing or rejected."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Authentication failed: {message}")


class NotFoundError(LlmError):
    """A named resource does not exist."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f"Resource not found: {resource_type} {resource_id}")


class OperationCancelledError(LlmError):
    """The operation was cancelled before it completed."""

    def __init__(self) -> None:
        super().__init__("Operation cancelled")


# ---------------------------------------------------------------------------
# Agent errors
# ---------------------------------------------------------------------------


class AgentError(Exception):
    """Base class for errors raised by agents."""


class AgentLlmError(AgentError):
    """An agent failed because the underlying model call failed."""

    def __init__(self, source: LlmError) -> None:
        self.source = source
        super().__init__(f"LLM error: {source}")
        self.__cause__ = source


class ToolCallError(AgentError):
    """A tool invoked by an agent failed."""

    def __init__(self, tool_name: str, source: BaseException | str) -> None:
        self.tool_name = tool_name
        self.source = source
        super().__init__(f"Tool error: {tool_name}: {source}")
        if isinstance(source, BaseException):
            self.__cause__ = source


class AgentContextError(AgentError):
    """The conversation context is invalid."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Context error: {message}")


class AgentConfigurationError(AgentError):
    """The agent is misconfigured."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Configuration error: {message}")


# ---------------------------------------------------------------------------
# Tool errors
# ---------------------------------------------------------------------------


class ToolError(Exception):
    """Base class for errors raised by tools."""


class ToolExecutionError(ToolError):
    """The tool ran but failed."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Execution failed: {message}")


class InvalidInputError(ToolError):
    """A tool input field is invalid."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"Invalid input: {field}: {message}")


class MissingDependencyError(ToolError):
    """Something the tool needs is not available."""

    def __init__(self, dependency: str) -> None:
        self.dependency = dependency
        super().__init__(f"Missing dependency: {dependency}")


class PermissionDeniedError(ToolError):
    """The tool is not allowed to perform an operation."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Permission denied: {operation}")


class ResourceUnavailableError(ToolError):
    """A resource the tool relies on cannot be reached."""

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"Resource unavailable: {resource}")


# ---------------------------------------------------------------------------
# Workflow errors
# ---------------------------------------------------------------------------


class WorkflowError(Exception):
    """Base class for errors raised by workflows."""


class StepFailedError(WorkflowError):
    """A named workflow step failed."""

    def __init__(self, step_name: str, source: BaseException | str) -> None:
        self.step_name = step_name
        self.source = source
        super().__init__(f"Step {step_name} failed: {source}")
        if isinstance(source, BaseException):
            self.__cause__ = source


class WorkflowAgentError(WorkflowError):
    """An agent used by the workflow failed."""

    def __init__(self, source: AgentError) -> None:
        self.source = source
        super().__init__(f"Agent error: {source}")
        self.__cause__ = source


class CyclicDependencyError(WorkflowError):
    """The step dependency graph contains a cycle."""

    def __init__(self) -> None:
        super().__init__("Dependency cycle detected in workflow")


class WorkflowContextError(WorkflowError):
    """The workflow context is invalid."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Context error: {message}")


class WorkflowValidationError(WorkflowError):
    """The workflow definition failed validation."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Validation error: {message}")


class UnsupportedOperationError(WorkflowError):
    """The workflow type does not support the requested operation."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Operation '{operation}' not supported by this workflow type")