"""Markdown renderings shared by exporters."""

from __future__ import annotations

from actant.models import AgentConfig, AgentDefinition, Command
from actant.utils import join_sections, slugify


def instruction_parts(config: AgentConfig) -> list[str]:
    """Instructions body followed by each non-empty rule body, titles dropped."""
    parts: list[str] = []
    if config.instructions.content:
        parts.append(config.instructions.content)
    for rule in config.rules:
        if rule.content:
            parts.append(rule.content)
    return parts


def combined_content(config: AgentConfig) -> str:
    return join_sections(instruction_parts(config))


def render_command_section(command: Command) -> str:
    lines = [f"## /{slugify(command.name, default='command')}"]
    if command.description:
        lines.append(command.description)
    if command.argument_hint:
        lines.append(f"Arguments: `{command.argument_hint}`")
    if command.allowed_tools:
        lines.append(f"Allowed tools: {', '.join(command.allowed_tools)}")
    if command.prompt:
        lines.append(command.prompt)
    return "\n\n".join(lines)


def render_commands_markdown(commands: list[Command]) -> str:
    sections = ["# Commands"]
    sections.extend(render_command_section(command) for command in commands)
    return "\n\n".join(sections)


def render_agent_definition_section(agent: AgentDefinition) -> str:
    lines = [f"## {agent.name}"]
    if agent.description:
        lines.append(agent.description)
    if agent.tools:
        lines.append(f"Tools: {', '.join(agent.tools)}")
    if agent.instructions:
        lines.append(agent.instructions)
    return "\n\n".join(lines)


def render_agent_definitions_markdown(agents: list[AgentDefinition]) -> str:
    sections = ["# Agent Definitions"]
    sections.extend(render_agent_definition_section(agent) for agent in agents)
    return "\n\n".join(sections)
