"""Shared exporter interface and fidelity bookkeeping."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import PurePosixPath

from actant.mcp import enabled_servers
from actant.models import AgentConfig, AgentType, ExportFile, ExportResult
from actant.registry import agent_ids_by_capability, agent_label, agent_metadata
from actant.utils import is_safe_relative_path, normalize_relative_path


class IConfigExporter(ABC):
    agent_type: AgentType

    @property
    def label(self) -> str:
        return agent_label(self.agent_type)

    def export(self, config: AgentConfig) -> ExportResult:
        result = ExportResult()
        self.build(config, result)
        self._add_docs(config, result)
        self._warn_unsupported(config, result)
        return result

    @abstractmethod
    def build(self, config: AgentConfig, result: ExportResult) -> None:
        """Append this agent's files and warnings for ``config`` to ``result``."""

    def documented(self, result: ExportResult, category: str, location: str) -> None:
        result.warnings.append(
            f"{category} written as Markdown for {self.label}; "
            f"documented for reference in {location}"
        )

    def _add_docs(self, config: AgentConfig, result: ExportResult) -> None:
        taken = set(result.paths())
        for raw_path, content in config.docs.items():
            if not content:
                continue
            if not is_safe_relative_path(raw_path):
                result.warnings.append(f"Skipped doc with unsafe path: {raw_path}")
                continue
            path = normalize_relative_path(raw_path)
            if path == ".":
                result.warnings.append(f"Skipped doc with unsafe path: {raw_path}")
                continue
            if path in taken:
                result.warnings.append(
                    f"Skipped doc {raw_path}: path is already generated "
                    f"for {self.label}"
                )
                continue
            taken.add(path)
            result.files.append(ExportFile(path=path, content=content))

    def _warn_unsupported(self, config: AgentConfig, result: ExportResult) -> None:
        metadata = agent_metadata(self.agent_type)
        servers = enabled_servers(config.mcp_servers)
        if servers and not metadata.supports_mcp:
            count = f"{len(servers)} server(s)"
            self._not_exported(result, "MCP servers", count, mcp=True)
        if config.permissions and not metadata.supports_permissions:
            count = f"{len(config.permissions)} permission(s)"
            self._not_exported(result, "Permissions", count, permissions=True)
        skills = [skill for skill in config.skills if skill.enabled and skill.content]
        if skills and not metadata.supports_skills:
            self._not_exported(result, "Skills", f"{len(skills)} skill(s)", skills=True)

    def _not_exported(
        self, result: ExportResult, section: str, count: str, **capability: bool
    ) -> None:
        targets = ", ".join(
            agent_label(agent) for agent in agent_ids_by_capability(**capability)
        )
        result.warnings.append(
            f"{section} have no native {self.label} equivalent; "
            f"{count} not exported (supported by {targets})"
        )


def unique_path(path: str, taken: set[str]) -> str:
    """Return ``path`` or its first free ``-N`` variant, recorded in ``taken``."""
    candidate = path
    original = PurePosixPath(path)
    counter = 2
    while candidate in taken:
        renamed = f"{original.stem}-{counter}{original.suffix}"
        candidate = original.with_name(renamed).as_posix()
        counter += 1
    taken.add(candidate)
    return candidate
