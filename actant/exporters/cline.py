from __future__ import annotations

from actant.constants import (
    CLINE_INSTRUCTIONS_SLUG,
    CLINE_MIN_NUMBER_WIDTH,
    CLINE_RULES_DIR,
)
from actant.exporters.base import IConfigExporter
from actant.exporters.common import (
    render_agent_definitions_markdown,
    render_commands_markdown,
)
from actant.models import AgentConfig, AgentType, ExportFile, ExportResult
from actant.utils import slugify

_FIRST_RULE_NUMBER = 2


def number_width(config: AgentConfig) -> int:
    """Digits used for every file prefix; widens past 99 so sorting stays numeric."""
    last = _FIRST_RULE_NUMBER - 1 + len(config.rules)
    last += int(bool(config.commands)) + int(bool(config.agent_definitions))
    return max(CLINE_MIN_NUMBER_WIDTH, len(str(last)))


class ClineExporter(IConfigExporter):
    """Numbered ``.clinerules`` files: 01 is the instructions, rules from 02."""

    agent_type = AgentType.CLINE

    def build(self, config: AgentConfig, result: ExportResult) -> None:
        width = number_width(config)

        def path_for(number: int, slug: str) -> str:
            return f"{CLINE_RULES_DIR}/{number:0{width}d}-{slug}.md"

        if config.instructions.content:
            result.files.append(
                ExportFile(
                    path=path_for(1, CLINE_INSTRUCTIONS_SLUG),
                    content=config.instructions.content,
                )
            )

        number = _FIRST_RULE_NUMBER
        for rule in config.rules:
            slug = slugify(rule.title or "rule", default="rule")
            result.files.append(
                ExportFile(path=path_for(number, slug), content=rule.content)
            )
            number += 1

        if config.commands:
            path = path_for(number, "commands")
            result.files.append(
                ExportFile(path=path, content=render_commands_markdown(config.commands))
            )
            self.documented(result, "Commands", path)
            number += 1

        if config.agent_definitions:
            path = path_for(number, "agents")
            result.files.append(
                ExportFile(
                    path=path,
                    content=render_agent_definitions_markdown(config.agent_definitions),
                )
            )
            self.documented(result, "Agent definitions", path)
