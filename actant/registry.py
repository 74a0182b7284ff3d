from dataclasses import dataclass

from actant.constants import (
    CLAUDE_FILENAME,
    CLAUDE_SETTINGS_PATH,
    CLAUDE_SKILLS_DIR,
    CLINE_RULES_DIR,
    CURSOR_RULES_DIR,
    CURSORRULES_FILENAME,
    MCP_FILENAME,
    OPENCODE_FILENAME,
    SKILL_FILENAME,
    WINDSURF_RULES_PATH,
    WINDSURFRULES_FILENAME,
)
from actant.models import AgentType


AGENT_FILE_PATTERNS: dict[AgentType, tuple[str, ...]] = {
    AgentType.CLAUDE_CODE: (
        CLAUDE_FILENAME,
        CLAUDE_SETTINGS_PATH,
        MCP_FILENAME,
        f"{CLAUDE_SKILLS_DIR}/*/{SKILL_FILENAME}",
    ),
    AgentType.CURSOR: (
        CURSORRULES_FILENAME,
        f"{CURSOR_RULES_DIR}/*.mdc",
        MCP_FILENAME,
    ),
    AgentType.WINDSURF: (
        WINDSURFRULES_FILENAME,
        WINDSURF_RULES_PATH,
    ),
    AgentType.CLINE: (f"{CLINE_RULES_DIR}/*.md",),
    AgentType.OPENCODE: (OPENCODE_FILENAME,),
}


@dataclass(frozen=True)
class AgentMetadata:
    agent_type: AgentType
    label: str
    supports_mcp: bool
    supports_permissions: bool
    supports_skills: bool
    supports_rule_files: bool


AGENT_CATALOG: dict[AgentType, AgentMetadata] = {
    AgentType.CLAUDE_CODE: AgentMetadata(
        agent_type=AgentType.CLAUDE_CODE,
        label="Claude Code",
        supports_mcp=True,
        supports_permissions=True,
        supports_skills=True,
        supports_rule_files=False,
    ),
    AgentType.CURSOR: AgentMetadata(
        agent_type=AgentType.CURSOR,
        label="Cursor",
        supports_mcp=True,
        supports_permissions=False,
        supports_skills=False,
        supports_rule_files=True,
    ),
    AgentType.WINDSURF: AgentMetadata(
        agent_type=AgentType.WINDSURF,
        label="Windsurf",
        supports_mcp=False,
        supports_permissions=False,
        supports_skills=False,
        supports_rule_files=False,
    ),
    AgentType.CLINE: AgentMetadata(
        agent_type=AgentType.CLINE,
        label="Cline",
        supports_mcp=False,
        supports_permissions=False,
        supports_skills=False,
        supports_rule_files=True,
    ),
    AgentType.OPENCODE: AgentMetadata(
        agent_type=AgentType.OPENCODE,
        label="OpenCode",
        supports_mcp=True,
        supports_permissions=True,
        supports_skills=False,
        supports_rule_files=False,
    ),
}


def patterns_for(agent: AgentType | str) -> list[str]:
    agent_type = AgentType.resolve(agent)
    if agent_type is None:
        return []
    return list(AGENT_FILE_PATTERNS.get(agent_type, ()))


def agent_metadata(agent: AgentType | str) -> AgentMetadata:
    agent_type = agent if isinstance(agent, AgentType) else AgentType(agent)
    return AGENT_CATALOG[agent_type]


def agent_label(agent: AgentType | str) -> str:
    return agent_metadata(agent).label


def agent_ids_by_capability(
    *,
    mcp: bool | None = None,
    permissions: bool | None = None,
    skills: bool | None = None,
    rule_files: bool | None = None,
) -> list[AgentType]:
    ids: list[AgentType] = []
    for agent_type, metadata in AGENT_CATALOG.items():
        if mcp is not None and metadata.supports_mcp != mcp:
            continue
        if permissions is not None and metadata.supports_permissions != permissions:
            continue
        if skills is not None and metadata.supports_skills != skills:
            continue
        if rule_files is not None and metadata.supports_rule_files != rule_files:
            continue
        ids.append(agent_type)
    return ids
