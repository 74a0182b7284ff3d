from actant.models import (
    AgentConfig,
    AgentType,
    Command,
    Instructions,
    McpServer,
    McpServerType,
    Rule,
    ScannedFile,
    SkillEntry,
)


def test_agent_type_resolve() -> None:
    assert AgentType.resolve("cursor") is AgentType.CURSOR
    assert AgentType.resolve("Claude-Code") is AgentType.CLAUDE_CODE
    assert AgentType.resolve(AgentType.CLINE) is AgentType.CLINE
    assert AgentType.resolve("vim") is None
    assert AgentType.resolve(None) is None


def test_agent_type_values_order() -> None:
    assert AgentType.values() == ["claude-code", "cursor", "windsurf", "cline", "opencode"]


def test_mcp_type_inferred_from_url() -> None:
    assert McpServer.infer_type(None, None) is McpServerType.STDIO
    assert McpServer.infer_type("https://x", None) is McpServerType.SSE
    assert McpServer.infer_type("https://x", "streamable-http") is McpServerType.STREAMABLE_HTTP
    # a declared http type without a url still falls back to stdio
    assert McpServer.infer_type(None, "streamable-http") is McpServerType.STDIO


def test_skill_content_property() -> None:
    assert SkillEntry("a", params={"content": "body"}).content == "body"
    assert SkillEntry("a", params={"content": 3}).content == ""
    assert SkillEntry("a").content == ""


def test_scanned_file_matches_by_basename() -> None:
    file = ScannedFile(path=".claude/settings.json", content="{}")
    assert file.name == "settings.json"
    assert file.matches("settings.json")
    assert file.matches(".claude/settings.json")
    assert not file.matches("ettings.json")


def test_retarget_returns_copy(make_config) -> None:
    config = make_config()
    other = config.retarget(AgentType.CURSOR)

    assert other.target_agent is AgentType.CURSOR
    assert config.target_agent is AgentType.CLAUDE_CODE
    assert other.instructions == config.instructions


def test_to_dict_uses_camel_case_and_omits_empty_extensions(make_config) -> None:
    config = make_config(
        rules=[Rule(title="T", content="c", always_apply=True)],
        mcp_servers=[McpServer(name="s", command="run")],
    )

    payload = config.to_dict()

    assert payload["targetAgent"] == "claude-code"
    assert payload["instructions"] == {"content": "Follow the project conventions."}
    assert payload["rules"] == [{"title": "T", "content": "c", "alwaysApply": True}]
    assert payload["mcpServers"] == [
        {"name": "s", "type": "stdio", "command": "run", "enabled": True}
    ]
    for key in ("commands", "agentDefinitions", "docs", "techStack"):
        assert key not in payload


def test_from_dict_restores_to_dict(make_config) -> None:
    config = make_config(
        instructions=Instructions(content="x", template_id="tpl"),
        skills=[SkillEntry("review", params={"content": "# Review"})],
        mcp_servers=[
            McpServer(
                name="remote",
                type=McpServerType.SSE,
                url="https://mcp.example.com",
                env={"TOKEN": "t"},
            )
        ],
        permissions={"Read": "allow", "Bash": "ask"},
        commands=[Command(name="deploy", description="Ship it", prompt="Deploy.")],
        docs={"docs/setup.md": "# Setup"},
        tech_stack=["python"],
    )

    restored = AgentConfig.from_dict(config.to_dict())

    assert restored == config


def test_from_dict_keeps_unknown_target_verbatim() -> None:
    config = AgentConfig.from_dict({"name": "x", "targetAgent": "emacs"})
    assert config.target_agent == "emacs"
    assert config.instructions == Instructions()


def test_from_dict_derives_mcp_type_from_url() -> None:
    config = AgentConfig.from_dict(
        {
            "name": "x",
            "mcpServers": [
                {"name": "a", "type": "stdio", "command": "x", "url": "http://a"},
                {"name": "b", "type": "streamable-http", "url": "http://b"},
                {"name": "c", "type": "sse", "command": "c"},
                {"name": "d", "type": "bogus", "command": "d"},
            ],
        }
    )

    assert [server.type for server in config.mcp_servers] == [
        McpServerType.SSE,
        McpServerType.STREAMABLE_HTTP,
        McpServerType.STDIO,
        McpServerType.STDIO,
    ]
