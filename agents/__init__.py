"""Agents package: one agent per kind of model request."""

from agents.base_agent import BaseAgent
from agents.planner_agent import PlannerAgent
from agents.writer_agent import WriterAgent
from agents.editor_agent import EditorAgent
from agents.illustrator_agent import IllustratorAgent

__all__ = [
    "BaseAgent",
    "PlannerAgent",
    "WriterAgent",
    "EditorAgent",
    "IllustratorAgent",
]
