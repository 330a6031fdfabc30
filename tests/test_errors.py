from datetime import timedelta

import pytest

from llmspell.errors import (
    AgentConfigurationError,
    AgentContextError,
    AgentError,
    AgentLlmError,
    AuthenticationError,
    ConfigurationError,
    CyclicDependencyError,
    InvalidInputError,
    LlmError,
    LlmTimeoutError,
    MissingDependencyError,
    NetworkError,
    NotFoundError,
    OperationCancelledError,
    PermissionDeniedError,
    ProviderError,
    RateLimitError,
    ResourceUnavailableError,
    SerializationError,
    StepFailedError,
    ToolCallError,
    ToolError,
    ToolExecutionError,
    UnsupportedOperationError,
    ValidationError,
    WorkflowAgentError,
    WorkflowContextError,
    WorkflowError,
    WorkflowValidationError,
)


@pytest.mark.parametrize(
    "error, text",
    [
        (ConfigurationError("bad model"), "Configuration error: bad model"),
        (ValidationError("temperature", "too high"), "Validation error in temperature: too high"),
        (AuthenticationError("no key"), "Authentication failed: no key"),
        (NotFoundError("model", "gpt-9"), "Resource not found: model gpt-9"),
        (OperationCancelledError(), "Operation cancelled"),
        (AgentContextError("empty"), "Context error: empty"),
        (AgentConfigurationError("broken"), "Configuration error: broken"),
        (ToolExecutionError("crashed"), "Execution failed: crashed"),
        (InvalidInputError("path", "missing"), "Invalid input: path: missing"),
        (MissingDependencyError("curl"), "Missing dependency: curl"),
        (PermissionDeniedError("write"), "Permission denied: write"),
        (ResourceUnavailableError("disk"), "Resource unavailable: disk"),
        (CyclicDependencyError(), "Dependency cycle detected in workflow"),
        (WorkflowContextError("lost"), "Context error: lost"),
        (WorkflowValidationError("no steps"), "Validation error: no steps"),
        (
            UnsupportedOperationError("pause"),
            "Operation 'pause' not supported by this workflow type",
        ),
    ],
)
def test_messages(error, text):
    assert str(error) == text


@pytest.mark.parametrize(
    "factory, base, text",
    [
        (lambda: ProviderError("x"), LlmError, "Provider error: x"),
        (lambda: RateLimitError(), LlmError, "Rate limit exceeded: retry after unknown"),
        (lambda: ToolCallError("calc", "x"), AgentError, "Tool error: calc: x"),
        (lambda: ToolExecutionError("x"), ToolError, "Execution failed: x"),
        (lambda: StepFailedError("s", "x"), WorkflowError, "Step s failed: x"),
        (
            lambda: UnsupportedOperationError("resume"),
            WorkflowError,
            "Operation 'resume' not supported by this workflow type",
        ),
    ],
)
def test_hierarchy(factory, base, text):
    error = factory()
    with pytest.raises(base) as info:
        raise error
    assert info.value is error
    assert str(error) == text


def test_wrapping_errors_chain_their_source():
    inner = ValueError("boom")
    for wrapper, prefix in [
        (ProviderError(inner), "Provider error: "),
        (NetworkError(inner), "Network error: "),
        (SerializationError(inner), "Serialization error: "),
    ]:
        assert wrapper.__cause__ is inner
        assert str(wrapper) == prefix + "boom"


def test_agent_llm_error_wraps_llm_error():
    inner = AuthenticationError("denied")
    err = AgentLlmError(inner)
    assert err.__cause__ is inner
    assert str(err) == "LLM error: Authentication failed: denied"


def test_tool_call_error():
    inner = RuntimeError("overflow")
    err = ToolCallError("calculator", inner)
    assert err.tool_name == "calculator"
    assert err.__cause__ is inner
    assert str(err) == "Tool error: calculator: overflow"


def test_step_failed_and_workflow_agent_error():
    agent_err = AgentContextError("gone")
    err = WorkflowAgentError(agent_err)
    assert str(err) == "Agent error: Context error: gone"
    step_err = StepFailedError("analyze", agent_err)
    assert step_err.step_name == "analyze"
    assert str(step_err) == "Step analyze failed: Context error: gone"


def test_timeout_formats_duration():
    assert str(LlmTimeoutError(30)) == "Timeout after 30s"
    assert str(LlmTimeoutError(timedelta(milliseconds=500))) == "Timeout after 500ms"
    assert LlmTimeoutError(timedelta(seconds=2)).duration == 2.0


def test_rate_limit_without_retry_after():
    err = RateLimitError()
    assert err.retry_after is None
    assert str(err) == "Rate limit exceeded: retry after unknown"


def test_rate_limit_with_retry_after_matches_timeout_format():
    err = RateLimitError(timedelta(seconds=30))
    assert err.retry_after == 30.0
    assert str(err).endswith(str(LlmTimeoutError(30)).removeprefix("Timeout after "))


def test_can_be_raised_and_caught_by_base():
    err = PermissionDeniedError("delete")
    with pytest.raises(ToolError) as info:
        raise err
    assert info.value is err
    assert err.operation == "delete"
    assert str(err) == "Permission denied: delete"