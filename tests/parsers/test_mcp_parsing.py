import json

from actant.mcp import parse_mcp_json, parse_mcp_servers, render_mcp_json
from actant.models import McpServer, McpServerType


def test_wrapped_and_bare_forms_agree() -> None:
    entry = {"command": "npx", "args": ["-y", "tool"], "env": {"KEY": "v"}}

    wrapped = parse_mcp_servers({"mcpServers": {"tool": entry}})
    bare = parse_mcp_servers({"tool": entry})

    assert wrapped == bare
    assert wrapped[0].args == ["-y", "tool"]
    assert wrapped[0].env == {"KEY": "v"}
    assert wrapped[0].enabled is True


def test_url_servers_are_sse_unless_declared_http() -> None:
    servers = parse_mcp_json(
        json.dumps(
            {
                "mcpServers": {
                    "a": {"url": "https://a"},
                    "b": {"url": "https://b", "type": "streamable-http"},
                    "c": {"command": "c", "type": "sse"},
                }
            }
        )
    )

    assert [server.type for server in servers] == [
        McpServerType.SSE,
        McpServerType.STREAMABLE_HTTP,
        McpServerType.STDIO,
    ]


def test_non_object_entries_are_skipped() -> None:
    assert parse_mcp_servers({"mcpServers": {"x": "nope"}}) == []
    assert parse_mcp_servers([]) == []
    assert parse_mcp_json("garbage") == []


def test_render_skips_disabled_servers() -> None:
    text = render_mcp_json(
        [
            McpServer(name="on", command="run"),
            McpServer(name="off", command="run", enabled=False),
        ]
    )

    assert text is not None
    assert json.loads(text) == {"mcpServers": {"on": {"type": "stdio", "command": "run"}}}
    assert render_mcp_json([McpServer(name="off", enabled=False)]) is None
