"""Claude Code exporter: CLAUDE.md plus settings, MCP, skills and extensions."""

from __future__ import annotations

from actant.constants import (
    CLAUDE_AGENTS_DIR,
    CLAUDE_COMMANDS_DIR,
    CLAUDE_FILENAME,
    CLAUDE_SETTINGS_PATH,
    CLAUDE_SKILLS_DIR,
    MCP_FILENAME,
    SKILL_FILENAME,
)
from actant.exporters.base import IConfigExporter, unique_path
from actant.frontmatter import render_frontmatter
from actant.mcp import render_mcp_json
from actant.models import AgentConfig, AgentType, ExportFile, ExportResult, Permission
from actant.utils import dumps_json, join_sections, slugify


def render_claude_md(config: AgentConfig) -> str:
    sections: list[str] = []
    if config.instructions.content:
        sections.append(config.instructions.content)
    for rule in config.rules:
        heading = f"## {rule.title}" if rule.title else ""
        section = join_sections([heading, rule.content])
        if section:
            sections.append(section)
    return "\n\n".join(sections)


def partition_permissions(
    permissions: dict[str, str],
) -> tuple[list[str], list[str], list[str]]:
    """Split the canonical map into (allow, ask, deny); each tool lands once."""
    allow: list[str] = []
    ask: list[str] = []
    deny: list[str] = []
    for tool, verb in permissions.items():
        if verb == Permission.DENY.value:
            deny.append(tool)
        elif verb == Permission.ALLOW.value:
            allow.append(tool)
        elif verb == Permission.ASK.value:
            ask.append(tool)
    return allow, ask, deny


class ClaudeCodeExporter(IConfigExporter):
    agent_type = AgentType.CLAUDE_CODE

    def build(self, config: AgentConfig, result: ExportResult) -> None:
        taken: set[str] = set()
        result.files.append(
            ExportFile(path=CLAUDE_FILENAME, content=render_claude_md(config))
        )
        taken.add(CLAUDE_FILENAME)

        self._add_settings(config, result)

        mcp_json = render_mcp_json(config.mcp_servers)
        if mcp_json is not None:
            result.files.append(ExportFile(path=MCP_FILENAME, content=mcp_json))

        self._add_skills(config, result)

        if config.commands:
            for command in config.commands:
                slug = slugify(command.name, default="command")
                path = unique_path(f"{CLAUDE_COMMANDS_DIR}/{slug}.md", taken)
                content = render_frontmatter(
                    {
                        "description": command.description,
                        "argument-hint": command.argument_hint,
                        "allowed-tools": ", ".join(command.allowed_tools or []),
                    },
                    command.prompt,
                )
                result.files.append(ExportFile(path=path, content=content))
            self.documented(result, "Commands", f"{CLAUDE_COMMANDS_DIR}/")

        if config.agent_definitions:
            for agent in config.agent_definitions:
                slug = slugify(agent.name, default="agent")
                path = unique_path(f"{CLAUDE_AGENTS_DIR}/{slug}.md", taken)
                content = render_frontmatter(
                    {
                        "name": slug,
                        "description": agent.description,
                        "tools": ", ".join(agent.tools or []),
                    },
                    agent.instructions,
                )
                result.files.append(ExportFile(path=path, content=content))
            self.documented(result, "Agent definitions", f"{CLAUDE_AGENTS_DIR}/")

    def _add_settings(self, config: AgentConfig, result: ExportResult) -> None:
        allow, ask, deny = partition_permissions(config.permissions)
        if ask:
            result.warnings.append(
                f"{len(ask)} 'ask' permission(s) have no native {self.label} list "
                f"and were dropped: {', '.join(ask)}"
            )
        if not allow and not deny:
            return
        result.files.append(
            ExportFile(
                path=CLAUDE_SETTINGS_PATH,
                content=dumps_json({"permissions": {"allow": allow, "deny": deny}}),
            )
        )

    def _add_skills(self, config: AgentConfig, result: ExportResult) -> None:
        slugs: set[str] = set()
        for skill in config.skills:
            if not skill.enabled:
                continue
            if not skill.content:
                result.warnings.append(
                    f"Skill '{skill.skill_id}' has no content and was not exported"
                )
                continue
            slug = slugify(skill.skill_id, default="skill")
            base, counter = slug, 2
            while slug in slugs:
                slug = f"{base}-{counter}"
                counter += 1
            slugs.add(slug)
            result.files.append(
                ExportFile(
                    path=f"{CLAUDE_SKILLS_DIR}/{slug}/{SKILL_FILENAME}",
                    content=skill.content,
                )
            )
