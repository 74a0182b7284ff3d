"""Engine boundary: agent-type lookup for parsing and exporting."""

from __future__ import annotations

import logging
from typing import Iterable

from actant.errors import UnsupportedAgentError
from actant.exporters import (
    ClaudeCodeExporter,
    ClineExporter,
    CursorExporter,
    IConfigExporter,
    OpenCodeExporter,
    WindsurfExporter,
)
from actant.models import AgentConfig, AgentType, ExportResult, ScannedFile
from actant.parsers import (
    ClaudeCodeParser,
    ClineParser,
    CursorParser,
    IConfigParser,
    OpenCodeParser,
    WindsurfParser,
)
from actant.scanner import scan_for_configs

logger = logging.getLogger(__name__)

PARSERS: dict[AgentType, IConfigParser] = {
    AgentType.CLAUDE_CODE: ClaudeCodeParser(),
    AgentType.CURSOR: CursorParser(),
    AgentType.WINDSURF: WindsurfParser(),
    AgentType.CLINE: ClineParser(),
    AgentType.OPENCODE: OpenCodeParser(),
}

EXPORTERS: dict[AgentType, IConfigExporter] = {
    AgentType.CLAUDE_CODE: ClaudeCodeExporter(),
    AgentType.CURSOR: CursorExporter(),
    AgentType.WINDSURF: WindsurfExporter(),
    AgentType.CLINE: ClineExporter(),
    AgentType.OPENCODE: OpenCodeExporter(),
}


def _check_coverage() -> None:
    for table_name, table in (("parsers", PARSERS), ("exporters", EXPORTERS)):
        missing = [agent.value for agent in AgentType if agent not in table]
        if missing:
            raise RuntimeError(f"No {table_name} registered for: {', '.join(missing)}")


_check_coverage()


def parse_files(
    agent: AgentType | str, files: list[ScannedFile], name: str
) -> AgentConfig:
    agent_type = AgentType.resolve(agent)
    if agent_type is None:
        raise UnsupportedAgentError(agent)
    return PARSERS[agent_type].parse(files, name)


def export_config(config: AgentConfig) -> ExportResult:
    """Export ``config`` for its target agent; failures become warnings."""
    agent_type = AgentType.resolve(config.target_agent)
    if agent_type is None:
        target = config.target_agent
        value = target.value if isinstance(target, AgentType) else target
        return ExportResult(files=[], warnings=[f"Unsupported agent type: {value}"])
    try:
        return EXPORTERS[agent_type].export(config)
    except Exception as exc:
        logger.debug("Export for %s failed", agent_type.value, exc_info=True)
        return ExportResult(files=[], warnings=[str(exc) or "Export failed"])


def export_for(config: AgentConfig, agent: AgentType | str) -> ExportResult:
    agent_type = AgentType.resolve(agent)
    if agent_type is None:
        return ExportResult(files=[], warnings=[f"Unsupported agent type: {agent}"])
    return export_config(config.retarget(agent_type))


def export_many(
    config: AgentConfig, agents: Iterable[AgentType | str]
) -> dict[str, ExportResult]:
    results: dict[str, ExportResult] = {}
    for agent in agents:
        key = agent.value if isinstance(agent, AgentType) else str(agent)
        results[key] = export_for(config, agent)
    return results


__all__ = [
    "EXPORTERS",
    "PARSERS",
    "export_config",
    "export_for",
    "export_many",
    "parse_files",
    "scan_for_configs",
]
