from __future__ import annotations

from actant.constants import CURSOR_RULES_DIR, CURSORRULES_FILENAME, MCP_FILENAME
from actant.exporters.base import IConfigExporter, unique_path
from actant.exporters.common import (
    combined_content,
    render_agent_definitions_markdown,
    render_commands_markdown,
)
from actant.mcp import render_mcp_json
from actant.models import AgentConfig, AgentType, ExportFile, ExportResult, Rule
from actant.utils import slugify


def render_mdc(
    description: str, content: str, glob: str | None = None, always_apply: bool = False
) -> str:
    frontmatter = "\n".join(
        [
            "---",
            f"description: {description}",
            f"globs: {glob or ''}",
            f"alwaysApply: {'true' if always_apply else 'false'}",
            "---",
        ]
    )
    return f"{frontmatter}\n{content}"


def render_rule_mdc(rule: Rule) -> str:
    return render_mdc(rule.title, rule.content, rule.glob, bool(rule.always_apply))


class CursorExporter(IConfigExporter):
    """Legacy ``.cursorrules`` plus one ``.mdc`` file per rule."""

    agent_type = AgentType.CURSOR

    def build(self, config: AgentConfig, result: ExportResult) -> None:
        combined = combined_content(config)
        if combined:
            result.files.append(ExportFile(path=CURSORRULES_FILENAME, content=combined))

        taken: set[str] = set()
        for rule in config.rules:
            path = unique_path(
                f"{CURSOR_RULES_DIR}/{self.rule_slug(rule.title)}.mdc", taken
            )
            result.files.append(ExportFile(path=path, content=render_rule_mdc(rule)))

        if config.commands:
            path = unique_path(f"{CURSOR_RULES_DIR}/commands.mdc", taken)
            content = render_mdc("Commands", render_commands_markdown(config.commands))
            result.files.append(ExportFile(path=path, content=content))
            self.documented(result, "Commands", path)

        if config.agent_definitions:
            path = unique_path(f"{CURSOR_RULES_DIR}/agents.mdc", taken)
            content = render_mdc(
                "Agent Definitions",
                render_agent_definitions_markdown(config.agent_definitions),
            )
            result.files.append(ExportFile(path=path, content=content))
            self.documented(result, "Agent definitions", path)

        mcp_json = render_mcp_json(config.mcp_servers)
        if mcp_json is not None:
            result.files.append(ExportFile(path=MCP_FILENAME, content=mcp_json))

    @staticmethod
    def rule_slug(title: str) -> str:
        return slugify(title or "rule", default="rule")
