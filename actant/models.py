"""Canonical configuration model shared by every parser and exporter."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional


class AgentType(str, Enum):
    CLAUDE_CODE = "claude-code"
    CURSOR = "cursor"
    WINDSURF = "windsurf"
    CLINE = "cline"
    OPENCODE = "opencode"

    @classmethod
    def resolve(cls, value: object) -> Optional["AgentType"]:
        """Return the member for ``value`` or None when it is not a known agent."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.lower())
        except ValueError:
            return None

    @classmethod
    def values(cls) -> list[str]:
        return [item.value for item in cls]


class Permission(str, Enum):
    ALLOW = "allow"
    ASK = "ask"
    DENY = "deny"

    @classmethod
    def values(cls) -> list[str]:
        return [item.value for item in cls]


class McpServerType(str, Enum):
    STDIO = "stdio"
    SSE = "sse"
    STREAMABLE_HTTP = "streamable-http"


@dataclass(frozen=True)
class Instructions:
    content: str = ""
    template_id: Optional[str] = None


@dataclass(frozen=True)
class SkillEntry:
    skill_id: str
    enabled: bool = True
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def content(self) -> str:
        value = self.params.get("content")
        return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class McpServer:
    name: str
    type: McpServerType = McpServerType.STDIO
    command: Optional[str] = None
    args: Optional[list[str]] = None
    url: Optional[str] = None
    env: Optional[dict[str, str]] = None
    enabled: bool = True

    @staticmethod
    def infer_type(url: Optional[str], declared: object) -> McpServerType:
        if not url:
            return McpServerType.STDIO
        if declared == McpServerType.STREAMABLE_HTTP.value:
            return McpServerType.STREAMABLE_HTTP
        return McpServerType.SSE

    @classmethod
    def from_entry(
        cls,
        name: str,
        *,
        command: Optional[str] = None,
        args: Optional[list[str]] = None,
        url: Optional[str] = None,
        env: Optional[dict[str, str]] = None,
        declared_type: object = None,
        enabled: bool = True,
    ) -> "McpServer":
        return cls(
            name=name,
            type=cls.infer_type(url, declared_type),
            command=command,
            args=args,
            url=url,
            env=env,
            enabled=enabled,
        )


@dataclass(frozen=True)
class Rule:
    title: str
    content: str = ""
    glob: Optional[str] = None
    always_apply: Optional[bool] = None


@dataclass(frozen=True)
class Command:
    name: str
    description: str = ""
    prompt: str = ""
    argument_hint: Optional[str] = None
    allowed_tools: Optional[list[str]] = None


@dataclass(frozen=True)
class AgentDefinition:
    name: str
    description: str = ""
    instructions: str = ""
    tools: Optional[list[str]] = None


@dataclass
class AgentConfig:
    name: str
    target_agent: AgentType | str = AgentType.CLAUDE_CODE
    description: str = ""
    instructions: Instructions = field(default_factory=Instructions)
    skills: list[SkillEntry] = field(default_factory=list)
    mcp_servers: list[McpServer] = field(default_factory=list)
    permissions: dict[str, str] = field(default_factory=dict)
    rules: list[Rule] = field(default_factory=list)
    commands: list[Command] = field(default_factory=list)
    agent_definitions: list[AgentDefinition] = field(default_factory=list)
    docs: dict[str, str] = field(default_factory=dict)
    tech_stack: list[str] = field(default_factory=list)

    def retarget(self, agent: AgentType) -> "AgentConfig":
        return replace(self, target_agent=agent)

    def to_dict(self) -> dict[str, Any]:
        target = self.target_agent
        instructions: dict[str, Any] = {"content": self.instructions.content}
        if self.instructions.template_id:
            instructions["templateId"] = self.instructions.template_id

        payload: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "targetAgent": target.value if isinstance(target, AgentType) else target,
            "instructions": instructions,
            "skills": [
                {
                    "skillId": skill.skill_id,
                    "enabled": skill.enabled,
                    "params": dict(skill.params),
                }
                for skill in self.skills
            ],
            "mcpServers": [_mcp_server_to_dict(server) for server in self.mcp_servers],
            "permissions": dict(self.permissions),
            "rules": [_rule_to_dict(rule) for rule in self.rules],
        }
        if self.commands:
            payload["commands"] = [_command_to_dict(item) for item in self.commands]
        if self.agent_definitions:
            payload["agentDefinitions"] = [
                _agent_definition_to_dict(item) for item in self.agent_definitions
            ]
        if self.docs:
            payload["docs"] = dict(self.docs)
        if self.tech_stack:
            payload["techStack"] = list(self.tech_stack)
        return payload

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "AgentConfig":
        target_raw = payload.get("targetAgent", AgentType.CLAUDE_CODE.value)
        target = AgentType.resolve(target_raw) or target_raw

        instructions_raw = payload.get("instructions")
        if isinstance(instructions_raw, dict):
            instructions = Instructions(
                content=str(instructions_raw.get("content", "")),
                template_id=instructions_raw.get("templateId"),
            )
        elif isinstance(instructions_raw, str):
            instructions = Instructions(content=instructions_raw)
        else:
            instructions = Instructions()

        return cls(
            name=str(payload.get("name", "")),
            target_agent=target,
            description=str(payload.get("description") or ""),
            instructions=instructions,
            skills=[
                SkillEntry(
                    skill_id=str(item.get("skillId", "")),
                    enabled=bool(item.get("enabled", True)),
                    params=dict(item.get("params") or {}),
                )
                for item in _dict_items(payload.get("skills"))
            ],
            mcp_servers=[
                McpServer.from_entry(
                    str(item.get("name", "")),
                    command=item.get("command"),
                    args=_optional_str_list(item.get("args")),
                    url=item.get("url"),
                    env=_optional_str_map(item.get("env")),
                    declared_type=item.get("type"),
                    enabled=bool(item.get("enabled", True)),
                )
                for item in _dict_items(payload.get("mcpServers"))
            ],
            permissions={
                str(tool): str(verb)
                for tool, verb in (payload.get("permissions") or {}).items()
            },
            rules=[
                Rule(
                    title=str(item.get("title", "")),
                    content=str(item.get("content", "")),
                    glob=item.get("glob"),
                    always_apply=item.get("alwaysApply"),
                )
                for item in _dict_items(payload.get("rules"))
            ],
            commands=[
                Command(
                    name=str(item.get("name", "")),
                    description=str(item.get("description", "")),
                    prompt=str(item.get("prompt", "")),
                    argument_hint=item.get("argumentHint"),
                    allowed_tools=_optional_str_list(item.get("allowedTools")),
                )
                for item in _dict_items(payload.get("commands"))
            ],
            agent_definitions=[
                AgentDefinition(
                    name=str(item.get("name", "")),
                    description=str(item.get("description", "")),
                    instructions=str(item.get("instructions", "")),
                    tools=_optional_str_list(item.get("tools")),
                )
                for item in _dict_items(payload.get("agentDefinitions"))
            ],
            docs={str(k): str(v) for k, v in (payload.get("docs") or {}).items()},
            tech_stack=[str(item) for item in payload.get("techStack") or []],
        )


@dataclass(frozen=True)
class ScannedFile:
    path: str
    content: str

    @property
    def name(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    def matches(self, name: str) -> bool:
        return self.path == name or self.path.endswith(f"/{name}")


@dataclass(frozen=True)
class ScanResult:
    agent_type: AgentType
    files: list[ScannedFile]


@dataclass(frozen=True)
class ExportFile:
    path: str
    content: str


@dataclass
class ExportResult:
    files: list[ExportFile] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def paths(self) -> list[str]:
        return [item.path for item in self.files]

    def get(self, path: str) -> Optional[ExportFile]:
        return next((item for item in self.files if item.path == path), None)


@dataclass(frozen=True)
class WriteResult:
    written: list[str]
    skipped: list[str]
    backups: list[str]


def _dict_items(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def _optional_str_list(value: Any) -> Optional[list[str]]:
    if not isinstance(value, list):
        return None
    return [str(item) for item in value]


def _optional_str_map(value: Any) -> Optional[dict[str, str]]:
    if not isinstance(value, dict):
        return None
    return {str(k): str(v) for k, v in value.items()}


def _mcp_server_to_dict(server: McpServer) -> dict[str, Any]:
    item: dict[str, Any] = {"name": server.name, "type": server.type.value}
    if server.command is not None:
        item["command"] = server.command
    if server.args is not None:
        item["args"] = list(server.args)
    if server.url is not None:
        item["url"] = server.url
    if server.env is not None:
        item["env"] = dict(server.env)
    item["enabled"] = server.enabled
    return item


def _rule_to_dict(rule: Rule) -> dict[str, Any]:
    item: dict[str, Any] = {"title": rule.title, "content": rule.content}
    if rule.glob is not None:
        item["glob"] = rule.glob
    if rule.always_apply is not None:
        item["alwaysApply"] = rule.always_apply
    return item


def _command_to_dict(command: Command) -> dict[str, Any]:
    item: dict[str, Any] = {
        "name": command.name,
        "description": command.description,
        "prompt": command.prompt,
    }
    if command.argument_hint:
        item["argumentHint"] = command.argument_hint
    if command.allowed_tools:
        item["allowedTools"] = list(command.allowed_tools)
    return item


def _agent_definition_to_dict(agent: AgentDefinition) -> dict[str, Any]:
    item: dict[str, Any] = {
        "name": agent.name,
        "description": agent.description,
        "instructions": agent.instructions,
    }
    if agent.tools:
        item["tools"] = list(agent.tools)
    return item
