from __future__ import annotations

from typing import Any

from actant.constants import OPENCODE_FILENAME
from actant.exporters.base import IConfigExporter
from actant.exporters.common import (
    instruction_parts,
    render_agent_definitions_markdown,
    render_commands_markdown,
)
from actant.mcp import enabled_servers, mcp_server_entry
from actant.models import AgentConfig, AgentType, ExportFile, ExportResult
from actant.utils import dumps_json


class OpenCodeExporter(IConfigExporter):
    """Single ``opencode.json``; rule titles are dropped, all verbs kept."""

    agent_type = AgentType.OPENCODE

    def build(self, config: AgentConfig, result: ExportResult) -> None:
        instructions = instruction_parts(config)
        location = f"{OPENCODE_FILENAME} instructions"
        if config.commands:
            instructions.append(render_commands_markdown(config.commands))
            self.documented(result, "Commands", location)
        if config.agent_definitions:
            instructions.append(
                render_agent_definitions_markdown(config.agent_definitions)
            )
            self.documented(result, "Agent definitions", location)

        mcp: dict[str, Any] = {}
        for server in enabled_servers(config.mcp_servers):
            entry = mcp_server_entry(server)
            entry["enabled"] = True
            mcp[server.name] = entry

        output: dict[str, Any] = {"instructions": instructions}
        if mcp:
            output["mcp"] = mcp
        if config.permissions:
            output["permission"] = dict(config.permissions)

        result.files.append(
            ExportFile(path=OPENCODE_FILENAME, content=dumps_json(output))
        )
