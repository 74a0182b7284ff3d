"""Claude Code: CLAUDE.md, .claude/settings.json, .mcp.json and skills."""

from __future__ import annotations

from typing import Any, Optional

from actant.constants import (
    CLAUDE_FILENAME,
    CLAUDE_SETTINGS_FILENAME,
    MCP_FILENAME,
    SKILL_FILENAME,
    SKILLS_SEGMENT,
)
from actant.frontmatter import split_frontmatter
from actant.mcp import parse_mcp_json
from actant.models import (
    AgentConfig,
    AgentType,
    Instructions,
    Permission,
    ScannedFile,
    SkillEntry,
)
from actant.parsers.base import IConfigParser, find_file
from actant.utils import loads_json_safe

# Higher rank wins when one tool is listed under several verbs.
_VERB_RANK = {
    Permission.ALLOW.value: 0,
    Permission.ASK.value: 1,
    Permission.DENY.value: 2,
}


def parse_claude_permissions(text: str) -> dict[str, str]:
    parsed = loads_json_safe(text)
    if not isinstance(parsed, dict):
        return {}
    section = parsed.get("permissions")
    if not isinstance(section, dict):
        return {}

    result: dict[str, str] = {}
    for key, value in section.items():
        if isinstance(value, list) and key in _VERB_RANK:
            for tool in value:
                if isinstance(tool, str):
                    _merge_permission(result, tool, key)
        elif isinstance(value, str) and value in _VERB_RANK:
            _merge_permission(result, key, value)
    return result


def _merge_permission(result: dict[str, str], tool: str, verb: str) -> None:
    current = result.get(tool)
    if current is None or _VERB_RANK[verb] > _VERB_RANK[current]:
        result[tool] = verb


def skill_id_from_path(path: str) -> Optional[str]:
    """Return the directory after ``skills`` for ``.../skills/<id>/SKILL.md``."""
    parts = path.split("/")
    if not parts or not parts[-1].endswith(SKILL_FILENAME):
        return None
    for index in range(len(parts) - 1, -1, -1):
        if parts[index] == SKILLS_SEGMENT:
            if len(parts) == index + 3 and parts[index + 1]:
                return parts[index + 1]
            return None
    return None


def parse_skill(file: ScannedFile) -> Optional[SkillEntry]:
    skill_id = skill_id_from_path(file.path)
    if skill_id is None:
        return None
    params: dict[str, Any] = {"content": file.content}
    metadata, _ = split_frontmatter(file.content)
    for key in ("name", "description"):
        value = metadata.get(key)
        if isinstance(value, str) and value:
            params[key] = value
    return SkillEntry(skill_id=skill_id, enabled=True, params=params)


class ClaudeCodeParser(IConfigParser):
    agent_type = AgentType.CLAUDE_CODE

    def parse(self, files: list[ScannedFile], name: str) -> AgentConfig:
        config = self.empty_config(name)

        claude_md = find_file(files, CLAUDE_FILENAME)
        if claude_md is not None:
            config.instructions = Instructions(content=claude_md.content)

        settings = find_file(files, CLAUDE_SETTINGS_FILENAME)
        if settings is not None:
            config.permissions = parse_claude_permissions(settings.content)

        mcp_file = find_file(files, MCP_FILENAME)
        if mcp_file is not None:
            config.mcp_servers = parse_mcp_json(mcp_file.content)

        for file in files:
            skill = parse_skill(file)
            if skill is not None:
                config.skills.append(skill)

        return config
