from __future__ import annotations

from actant.constants import (
    WINDSURF_CHAR_LIMIT,
    WINDSURF_RULES_DIR,
    WINDSURF_RULES_PATH,
    WINDSURFRULES_FILENAME,
)
from actant.exporters.base import IConfigExporter, unique_path
from actant.exporters.common import (
    combined_content,
    render_agent_definitions_markdown,
    render_commands_markdown,
)
from actant.models import AgentConfig, AgentType, ExportFile, ExportResult


class WindsurfExporter(IConfigExporter):
    """Windsurf truncates ``.windsurfrules``; ``rules.md`` keeps the full text."""

    agent_type = AgentType.WINDSURF

    def build(self, config: AgentConfig, result: ExportResult) -> None:
        combined = combined_content(config)
        if combined:
            result.files.append(
                ExportFile(path=WINDSURFRULES_FILENAME, content=combined)
            )
            if len(combined) > WINDSURF_CHAR_LIMIT:
                result.warnings.append(
                    f"{WINDSURFRULES_FILENAME} exceeds {WINDSURF_CHAR_LIMIT} "
                    f"characters ({len(combined)}). Windsurf may truncate it; "
                    f"the full content is kept in {WINDSURF_RULES_PATH}."
                )
            result.files.append(ExportFile(path=WINDSURF_RULES_PATH, content=combined))

        taken = {WINDSURF_RULES_PATH}
        if config.commands:
            path = unique_path(f"{WINDSURF_RULES_DIR}/commands.md", taken)
            result.files.append(
                ExportFile(path=path, content=render_commands_markdown(config.commands))
            )
            self.documented(result, "Commands", path)

        if config.agent_definitions:
            path = unique_path(f"{WINDSURF_RULES_DIR}/agents.md", taken)
            result.files.append(
                ExportFile(
                    path=path,
                    content=render_agent_definitions_markdown(config.agent_definitions),
                )
            )
            self.documented(result, "Agent definitions", path)
