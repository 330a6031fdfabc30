"""Agents and sequential workflows built with a fluent interface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass
class ModelConfig:
    """Name and sampling settings of a model."""

    name: str
    max_tokens: int | None = None
    temperature: float | None = None


class Agent:
    """An LLM agent configured through chained ``with_*`` calls."""

    def __init__(self) -> None:
        self.model: str = "gpt-3.5-turbo"
        self.system_prompt: str | None = None
        self.tools: list[str] = []
        self.config: dict[str, str] = {}

    def with_model(self, model: str) -> Agent:
        """Set the model and return the agent."""
        self.model = model
        return self

    def with_system(self, system: str) -> Agent:
        """Set the system prompt and return the agent."""
        self.system_prompt = system
        return self

    def with_tools(self, tools) -> Agent:
        """Replace the agent's tools with the given names and return the agent."""
        self.tools = [str(tool) for tool in tools]
        return self

    def run(self, prompt: str) -> str:
        """Answer a prompt."""
        return f"Agent response to: {prompt}"

    def __repr__(self) -> str:
        return (
            f"Agent(model={self.model!r}, system_prompt={self.system_prompt!r}, "
            f"tools={self.tools!r})"
        )


@dataclass(frozen=True)
class StepType:
    """What a workflow step runs: an agent or a named tool."""

    kind: str
    target: Union[Agent, str]

    def __post_init__(self) -> None:
        if self.kind == "agent":
            if not isinstance(self.target, Agent):
                raise TypeError("an agent step needs an Agent")
        elif self.kind == "tool":
            if not isinstance(self.target, str):
                raise TypeError("a tool step needs a tool name")
        else:
            raise ValueError(f"unknown step kind: {self.kind!r}")

    @classmethod
    def agent(cls, agent: Agent) -> StepType:
        """A step that runs an agent."""
        return cls("agent", agent)

    @classmethod
    def tool(cls, name: str) -> StepType:
        """A step that runs the named tool."""
        return cls("tool", name)


@dataclass
class WorkflowStep:
    """A named step of a workflow."""

    name: str
    step_type: StepType


class Workflow:
    """An ordered collection of steps."""

    def __init__(self) -> None:
        self.steps: list[WorkflowStep] = []

    @classmethod
    def sequential(cls) -> Workflow:
        """Create an empty workflow whose steps run in order."""
        return cls()

    def add_step(self, name: str, step: StepType) -> Workflow:
        """Append a step and return the workflow."""
        self.steps.append(WorkflowStep(name=name, step_type=step))
        return self

    def run(self, input_text: str) -> str:
        """Run the steps in order, passing each agent's answer on to the next step."""
        current = input_text
        for step in self.steps:
            target = step.step_type.target
            if isinstance(target, Agent):
                current = target.run(current)
        return "Workflow completed"