"""Data types shared by providers, agents, tools and workflows."""

from __future__ import annotations

import base64
import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from llmspell.errors import AgentError

T = TypeVar("T")


def _to_json(value: Any) -> Any:
    """Convert a value into plain JSON-compatible data."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        data: dict[str, Any] = {}
        kind = getattr(value, "kind", None)
        if kind is not None:
            data["type"] = kind
        for f in dataclasses.fields(value):
            data[f.name] = _to_json(getattr(value, f.name))
        return data
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, BaseException):
        return str(value)
    if isinstance(value, dict):
        return {str(k): _to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_json(v) for v in value]
    return value


class _Serializable:
    def to_dict(self) -> dict[str, Any]:
        """Return the object as JSON-compatible data."""
        return _to_json(self)


def _check_unsigned(**values: int | None) -> None:
    for name, number in values.items():
        if number is not None and number < 0:
            raise ValueError(f"{name} must not be negative, got {number}")


class Role(str, Enum):
    """Author of a message in a conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


class FinishReason(str, Enum):
    """Why a completion stopped."""

    STOP = "stop"
    LENGTH = "length"
    TOOL_CALL = "tool_call"
    CONTENT_FILTER = "content_filter"
    ERROR = "error"


@dataclass
class TokenUsage(_Serializable):
    """Token counts for one request."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int

    def __post_init__(self) -> None:
        _check_unsigned(
            prompt_tokens=self.prompt_tokens,
            completion_tokens=self.completion_tokens,
            total_tokens=self.total_tokens,
        )


@dataclass
class TextPart(_Serializable):
    """Text segment of multimodal content."""

    kind: ClassVar[str] = "text"
    text: str


@dataclass
class ImagePart(_Serializable):
    """Image segment of multimodal content, by URL or inline bytes."""

    kind: ClassVar[str] = "image"
    mime_type: str
    url: str | None = None
    data: bytes | None = None


ContentPart = TextPart | ImagePart
Content = str | list


@dataclass
class MessageMetadata(_Serializable):
    """Extra information attached to a message."""

    timestamp: datetime
    id: str | None = None
    tags: list[str] = field(default_factory=list)


@dataclass
class Message(_Serializable):
    """One message in a conversation; content is text or a list of parts."""

    role: Role
    content: str | list[TextPart | ImagePart]
    metadata: MessageMetadata | None = None


@dataclass
class ToolDefinition(_Serializable):
    """A tool as described to a model; ``parameters`` is a JSON Schema."""

    name: str
    description: str
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass
class CompletionRequest(_Serializable):
    """A text generation request."""

    messages: list[Message]
    model: str
    temperature: float | None = None
    max_tokens: int | None = None
    stop_sequences: list[str] | None = None
    tools: list[ToolDefinition] | None = None
    stream: bool = False

    def __post_init__(self) -> None:
        _check_unsigned(max_tokens=self.max_tokens)


@dataclass
class ResponseMetadata(_Serializable):
    """Provider-side details of a response."""

    created_at: datetime
    processing_time_ms: int
    provider: str
    request_id: str | None = None

    def __post_init__(self) -> None:
        _check_unsigned(processing_time_ms=self.processing_time_ms)


@dataclass
class CompletionResponse(_Serializable):
    """A finished completion."""

    message: Message
    usage: TokenUsage
    model: str
    finish_reason: FinishReason
    metadata: ResponseMetadata


@dataclass
class TextDelta(_Serializable):
    """Streamed piece of text."""

    kind: ClassVar[str] = "text"
    text: str


@dataclass
class ToolCallDelta(_Serializable):
    """Streamed tool invocation."""

    kind: ClassVar[str] = "tool_call"
    name: str
    input: Any = None


@dataclass
class DoneDelta(_Serializable):
    """Marks the end of a stream."""

    kind: ClassVar[str] = "done"


@dataclass
class CompletionChunk(_Serializable):
    """One item of a streamed completion."""

    delta: TextDelta | ToolCallDelta | DoneDelta
    usage: TokenUsage | None = None
    finish_reason: FinishReason | None = None


@dataclass
class EmbeddingRequest(_Serializable):
    """Texts to embed with a given model."""

    input: list[str]
    model: str


@dataclass
class EmbeddingResponse(_Serializable):
    """Embedding vectors, one per input text."""

    embeddings: list[list[float]]
    usage: TokenUsage
    model: str


@dataclass
class ModelInfo(_Serializable):
    """A model offered by a provider and its capabilities."""

    id: str
    name: str
    description: str
    max_tokens: int | None = None
    supports_streaming: bool = False
    supports_tools: bool = False
    supports_vision: bool = False


@dataclass
class AgentConfig(_Serializable):
    """Agent behaviour settings; ``timeout`` is in seconds."""

    model: str = "gpt-3.5-turbo"
    temperature: float | None = 0.7
    max_tokens: int | None = 1000
    timeout: float = 30.0
    max_retries: int = 3
    enable_streaming: bool = False

    def __post_init__(self) -> None:
        _check_unsigned(max_tokens=self.max_tokens, max_retries=self.max_retries)
        if self.timeout < 0:
            raise ValueError(f"timeout must not be negative, got {self.timeout}")


@dataclass
class ToolCall(_Serializable):
    """A tool invocation made by an agent and its outcome."""

    id: str
    name: str
    input: Any = None
    output: Any = None
    error: str | None = None


@dataclass
class AgentMetadata(_Serializable):
    """Details of one agent execution."""

    agent_id: str
    execution_time_ms: int
    retry_count: int
    provider_used: str

    def __post_init__(self) -> None:
        _check_unsigned(
            execution_time_ms=self.execution_time_ms, retry_count=self.retry_count
        )


@dataclass
class AgentResponse(_Serializable):
    """Result of running an agent."""

    content: str | list[TextPart | ImagePart]
    usage: TokenUsage
    metadata: AgentMetadata
    tool_calls: list[ToolCall] = field(default_factory=list)


@dataclass
class AgentContentChunk(_Serializable):
    """Streamed agent text."""

    kind: ClassVar[str] = "content"
    text: str


@dataclass
class AgentToolCallChunk(_Serializable):
    """Streamed agent tool call."""

    kind: ClassVar[str] = "tool_call"
    tool_call: ToolCall


@dataclass
class AgentDoneChunk(_Serializable):
    """End of an agent stream."""

    kind: ClassVar[str] = "done"
    metadata: AgentMetadata


@dataclass
class AgentErrorChunk(_Serializable):
    """An error reported inside an agent stream."""

    kind: ClassVar[str] = "error"
    error: AgentError


@dataclass
class ConversationContext(_Serializable):
    """Prior messages and metadata for a conversation."""

    messages: list[Message] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolContext(_Serializable):
    """Who is running a tool and under which execution."""

    agent_id: str
    execution_id: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ToolMetadata(_Serializable):
    """Details of one tool execution."""

    execution_time_ms: int
    success: bool
    error_message: str | None = None

    def __post_init__(self) -> None:
        _check_unsigned(execution_time_ms=self.execution_time_ms)


@dataclass
class ToolResult(_Serializable, Generic[T]):
    """Output of a tool with its execution details."""

    output: T
    metadata: ToolMetadata


@dataclass
class WorkflowMetadata(_Serializable):
    """Details of a workflow execution."""

    workflow_id: str
    execution_id: str
    started_at: datetime
    completed_at: datetime | None = None
    step_count: int = 0
    errors: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_unsigned(step_count=self.step_count)


@dataclass
class WorkflowResult(_Serializable):
    """Outcome of a whole workflow run."""

    success: bool
    step_results: dict[str, Any]
    execution_time_ms: int
    metadata: WorkflowMetadata
    final_output: Any = None

    def __post_init__(self) -> None:
        _check_unsigned(execution_time_ms=self.execution_time_ms)


@dataclass
class WorkflowProgress(_Serializable):
    """Progress report during a workflow run."""

    current_step: str
    completed_steps: int
    total_steps: int
    percentage: float
    estimated_remaining_ms: int | None = None

    def __post_init__(self) -> None:
        _check_unsigned(
            completed_steps=self.completed_steps,
            total_steps=self.total_steps,
            estimated_remaining_ms=self.estimated_remaining_ms,
        )