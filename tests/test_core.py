import pytest

from llmspell.core import Agent, ModelConfig, StepType, Workflow, WorkflowStep


def test_agent_creation():
    agent = Agent()
    assert agent.model == "gpt-3.5-turbo"
    assert agent.system_prompt is None
    assert agent.tools == []


def test_agent_with_model():
    agent = Agent().with_model("gpt-4")
    assert agent.model == "gpt-4"


def test_agent_with_system():
    agent = Agent().with_system("You are helpful")
    assert agent.system_prompt == "You are helpful"


def test_agent_run():
    result = Agent().run("test prompt")
    assert "test prompt" in result


def test_workflow_creation():
    assert len(Workflow().steps) == 0


def test_workflow_add_step():
    workflow = Workflow.sequential().add_step("test", StepType.agent(Agent()))
    assert len(workflow.steps) == 1
    assert workflow.steps[0].name == "test"


def test_agent_integration():
    agent = Agent().with_model("gpt-4").with_system("You are helpful")
    result = agent.run("Hello world")
    assert "Hello world" in result


def test_agent_with_tools():
    agent = Agent().with_tools(["calculator", "web_search"])
    assert agent.tools == ["calculator", "web_search"]
    result = agent.run("Calculate 2+2")
    assert "Calculate 2+2" in result


def test_workflow_integration():
    agent = Agent().with_model("gpt-4")
    workflow = (
        Workflow.sequential()
        .add_step("analyze", StepType.agent(agent))
        .add_step("save", StepType.tool("file_writer"))
    )
    assert workflow.run("test input") == "Workflow completed"
    assert [s.name for s in workflow.steps] == ["analyze", "save"]
    assert workflow.steps[0].step_type.target is agent
    assert workflow.steps[1].step_type == StepType.tool("file_writer")


def test_step_type_validation():
    with pytest.raises(ValueError):
        StepType("script", "x")
    with pytest.raises(TypeError):
        StepType("agent", "not an agent")
    with pytest.raises(TypeError):
        StepType("tool", Agent())


def test_workflow_step_holds_type():
    step = WorkflowStep("w", StepType.tool("search"))
    assert step.step_type.kind == "tool"
    assert step.step_type.target == "search"


def test_model_config_defaults():
    config = ModelConfig("gpt-4")
    assert config.name == "gpt-4"
    assert config.max_tokens is None
    assert config.temperature is None