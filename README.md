# llmspell

Building blocks for scripting LLM interactions: agents and sequential
workflows set up through chained configuration calls, plus the request and
response data types and the exception hierarchy that LLM tooling shares.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
```

## Agents

`llmspell.core.Agent` is configured with chained calls, each of which returns
the same agent:

```python
from llmspell.core import Agent

agent = (
    Agent()
    .with_model("gpt-4")
    .with_system("You are a helpful assistant")
    .with_tools(["calculator", "web_search"])
)
print(agent.run("Explain quantum computing"))
# Agent response to: Explain quantum computing
```

- A new agent uses the model `gpt-3.5-turbo`, has no system prompt and no tools.
- `with_tools` replaces the tool list with the given names.
- `run(prompt)` returns the text `Agent response to: <prompt>`.

`ModelConfig` is a small dataclass holding a model `name` and optional
`max_tokens` and `temperature`.

## Workflows

`llmspell.core.Workflow` is an ordered list of named steps. Each step is
described by a `StepType`, made with `StepType.agent(agent)` or
`StepType.tool(name)`; giving an agent step something other than an `Agent`,
or a tool step something other than a string, raises `TypeError`.

```python
from llmspell.core import Agent, StepType, Workflow

workflow = (
    Workflow.sequential()
    .add_step("analyze", StepType.agent(Agent().with_model("gpt-4")))
    .add_step("save", StepType.tool("file_writer"))
)
print(workflow.run("some input"))  # Workflow completed
```

`add_step` appends a `WorkflowStep` (with `name` and `step_type`) to
`workflow.steps`. `run` goes through the steps in order, handing each agent's
answer on as the input of the next agent, and returns `"Workflow completed"`.

## Data types

`llmspell.types` holds dataclasses for messages (`Message`, `Role`,
`TextPart`, `ImagePart`, `MessageMetadata`), completions (`CompletionRequest`,
`CompletionResponse`, `CompletionChunk` with `TextDelta`, `ToolCallDelta` or
`DoneDelta`, `FinishReason`, `TokenUsage`, `ResponseMetadata`), embeddings
(`EmbeddingRequest`, `EmbeddingResponse`), models (`ModelInfo`), agents
(`AgentConfig`, `AgentResponse`, `AgentMetadata`, `ToolCall`,
`ConversationContext` and the stream chunks `AgentContentChunk`,
`AgentToolCallChunk`, `AgentDoneChunk`, `AgentErrorChunk`), tools
(`ToolDefinition`, `ToolContext`, `ToolMetadata`, `ToolResult`) and workflows
(`WorkflowMetadata`, `WorkflowResult`, `WorkflowProgress`).

- Counts and durations that cannot be negative (token counts, `max_tokens`,
  `max_retries`, milliseconds, step counts) raise `ValueError` when negative.
- `AgentConfig()` defaults to model `gpt-3.5-turbo`, temperature `0.7`,
  `max_tokens` 1000, a `timeout` of 30 seconds, 3 retries and no streaming.
- Every type has `to_dict()`, which returns JSON-compatible data: enums become
  their values, datetimes ISO strings, bytes base64 text, exceptions their
  message, and the part, delta and chunk types carry a `"type"` key.

```python
from llmspell.types import Message, Role, TextPart

message = Message(Role.USER, [TextPart("hello")])
message.to_dict()
# {'role': 'user', 'content': [{'type': 'text', 'text': 'hello'}], 'metadata': None}
```

## Errors

`llmspell.errors` defines one base class per family, each with specific
subclasses whose messages name the details given to them:

- `LlmError`: `ProviderError`, `ConfigurationError`, `ValidationError`,
  `NetworkError`, `SerializationError`, `LlmTimeoutError`, `RateLimitError`,
  `AuthenticationError`, `NotFoundError`, `OperationCancelledError`
- `AgentError`: `AgentLlmError`, `ToolCallError`, `AgentContextError`,
  `AgentConfigurationError`
- `ToolError`: `ToolExecutionError`, `InvalidInputError`,
  `MissingDependencyError`, `PermissionDeniedError`, `ResourceUnavailableError`
- `WorkflowError`: `StepFailedError`, `WorkflowAgentError`,
  `CyclicDependencyError`, `WorkflowContextError`, `WorkflowValidationError`,
  `UnsupportedOperationError`

Errors that wrap another exception keep it as `source` and as `__cause__`.
Durations are given in seconds or as a `timedelta`.

```python
from llmspell.errors import RateLimitError

str(RateLimitError(2))  # 'Rate limit exceeded: retry after 2s'
```

## What this package does not do

It does not talk to any model service: `Agent.run` returns a fixed reply built
from the prompt, and tool steps in a workflow are recorded but not run. There
are no provider, tool or step classes to extend, no streaming, retries or
timeouts, and no command-line program. The data types and errors describe such
interactions but nothing here carries them out.