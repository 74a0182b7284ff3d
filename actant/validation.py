"""JSON Schema validation and loading of canonical config documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from actant.errors import (
    InvalidConfigSchemaError,
    InvalidJsonFormatError,
    MissingConfigFileError,
)
from actant.models import AgentConfig, AgentType, McpServerType, Permission

_STRING_LIST = {"type": "array", "items": {"type": "string"}}
_STRING_MAP = {"type": "object", "additionalProperties": {"type": "string"}}

AGENT_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "AgentConfig",
    "type": "object",
    "required": [
        "name",
        "description",
        "targetAgent",
        "instructions",
        "skills",
        "mcpServers",
        "permissions",
        "rules",
    ],
    "properties": {
        "name": {"type": "string", "minLength": 1},
        "description": {"type": "string"},
        "targetAgent": {"enum": AgentType.values()},
        "instructions": {
            "type": "object",
            "required": ["content"],
            "properties": {
                "content": {"type": "string"},
                "templateId": {"type": "string"},
            },
        },
        "skills": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["skillId", "enabled", "params"],
                "properties": {
                    "skillId": {"type": "string", "minLength": 1},
                    "enabled": {"type": "boolean"},
                    "params": {"type": "object"},
                },
            },
        },
        "mcpServers": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "type", "enabled"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "type": {"enum": [item.value for item in McpServerType]},
                    "command": {"type": "string"},
                    "args": _STRING_LIST,
                    "url": {"type": "string"},
                    "env": _STRING_MAP,
                    "enabled": {"type": "boolean"},
                },
            },
        },
        "permissions": {
            "type": "object",
            "additionalProperties": {"enum": Permission.values()},
        },
        "rules": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["title", "content"],
                "properties": {
                    "title": {"type": "string", "minLength": 1},
                    "content": {"type": "string"},
                    "glob": {"type": "string"},
                    "alwaysApply": {"type": "boolean"},
                },
            },
        },
        "commands": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "description", "prompt"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "description": {"type": "string"},
                    "prompt": {"type": "string"},
                    "argumentHint": {"type": "string"},
                    "allowedTools": _STRING_LIST,
                },
            },
        },
        "agentDefinitions": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "description", "instructions"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "description": {"type": "string"},
                    "instructions": {"type": "string"},
                    "tools": _STRING_LIST,
                },
            },
        },
        "docs": _STRING_MAP,
        "techStack": _STRING_LIST,
    },
}

_VALIDATOR = Draft202012Validator(AGENT_CONFIG_SCHEMA)


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


def semantic_errors(payload: dict[str, Any]) -> list[str]:
    """Checks the schema cannot express: unique names and transport fields."""
    errors: list[str] = []
    seen: set[str] = set()
    for index, server in enumerate(payload.get("mcpServers", [])):
        name = server.get("name")
        if name in seen:
            errors.append(f"duplicate MCP server name '{name}' at mcpServers.{index}")
        seen.add(name)
        if server.get("type") == McpServerType.STDIO.value:
            if not str(server.get("command") or "").strip():
                errors.append(
                    f"command is required for stdio servers at mcpServers.{index}"
                )
            if str(server.get("url") or "").strip():
                errors.append(
                    f"url is not allowed for stdio servers at mcpServers.{index}"
                )
        elif not str(server.get("url") or "").strip():
            errors.append(
                f"url is required for sse and streamable-http servers "
                f"at mcpServers.{index}"
            )
    return errors


def validate_config_payload(payload: Any, path: Path | None = None) -> None:
    source = path or Path("<config>")
    error = next(iter(_VALIDATOR.iter_errors(payload)), None)
    if error is not None:
        raise InvalidConfigSchemaError(source, format_schema_error(error))
    problems = semantic_errors(payload)
    if problems:
        raise InvalidConfigSchemaError(source, problems[0])


def load_config(path: Path) -> AgentConfig:
    if not path.exists():
        raise MissingConfigFileError(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise InvalidJsonFormatError(path, str(exc)) from exc
    validate_config_payload(payload, path)
    return AgentConfig.from_dict(payload)
