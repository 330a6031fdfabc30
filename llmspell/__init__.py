"""Fluent agents and workflows, shared data types and errors for LLM tooling."""

__version__ = "0.1.0"

__all__ = ["core", "errors", "types"]