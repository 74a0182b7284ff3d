"""OpenCode: a single opencode.json is the source of truth."""

from __future__ import annotations

from typing import Any

from actant.constants import DEFAULT_RULE_TITLE, OPENCODE_FILENAME
from actant.mcp import parse_mcp_servers
from actant.models import (
    AgentConfig,
    AgentType,
    Instructions,
    Permission,
    Rule,
    ScannedFile,
)
from actant.parsers.base import IConfigParser, find_file
from actant.utils import join_sections, loads_json_safe


def _instructions_content(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, dict) and isinstance(raw.get("content"), str):
        return raw["content"]
    if isinstance(raw, list):
        return join_sections([item for item in raw if isinstance(item, str)])
    return ""


def _first_object(payload: dict[str, Any], *keys: str) -> dict[str, Any]:
    for key in keys:
        value = payload.get(key)
        if isinstance(value, dict):
            return value
    return {}


class OpenCodeParser(IConfigParser):
    agent_type = AgentType.OPENCODE

    def parse(self, files: list[ScannedFile], name: str) -> AgentConfig:
        config = self.empty_config(name)

        file = find_file(files, OPENCODE_FILENAME)
        if file is None:
            return config
        parsed = loads_json_safe(file.content)
        if not isinstance(parsed, dict):
            return config

        if isinstance(parsed.get("name"), str) and parsed["name"]:
            config.name = parsed["name"]
        if isinstance(parsed.get("description"), str) and parsed["description"]:
            config.description = parsed["description"]

        config.instructions = Instructions(
            content=_instructions_content(parsed.get("instructions"))
        )

        servers = _first_object(parsed, "mcpServers", "mcp")
        if servers:
            config.mcp_servers = parse_mcp_servers({"mcpServers": servers})

        allowed = Permission.values()
        for tool, verb in _first_object(parsed, "permissions", "permission").items():
            if verb in allowed:
                config.permissions[str(tool)] = verb

        rules = parsed.get("rules")
        if isinstance(rules, list):
            for item in rules:
                if not isinstance(item, dict):
                    continue
                if not isinstance(item.get("content"), str):
                    continue
                title = item.get("title")
                if not isinstance(title, str) or not title:
                    title = DEFAULT_RULE_TITLE
                config.rules.append(
                    Rule(
                        title=title,
                        content=item["content"],
                    )
                )

        return config
