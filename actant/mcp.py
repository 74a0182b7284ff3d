from typing import Any

from actant.models import McpServer
from actant.utils import dumps_json, loads_json_safe


def parse_mcp_servers(payload: Any) -> list[McpServer]:
    """Map an ``.mcp.json`` payload (wrapped or bare) to canonical servers."""
    if not isinstance(payload, dict):
        return []
    servers_obj = payload.get("mcpServers", payload)
    if not isinstance(servers_obj, dict):
        return []

    servers: list[McpServer] = []
    for name, raw in servers_obj.items():
        if not isinstance(raw, dict):
            continue
        command = raw.get("command")
        args = raw.get("args")
        url = raw.get("url")
        env = raw.get("env")
        servers.append(
            McpServer.from_entry(
                str(name),
                command=command if isinstance(command, str) else None,
                args=[str(item) for item in args] if isinstance(args, list) else None,
                url=url if isinstance(url, str) and url else None,
                env={str(k): str(v) for k, v in env.items()}
                if isinstance(env, dict)
                else None,
                declared_type=raw.get("type"),
            )
        )
    return servers


def parse_mcp_json(text: str) -> list[McpServer]:
    return parse_mcp_servers(loads_json_safe(text))


def mcp_server_entry(server: McpServer) -> dict[str, Any]:
    item: dict[str, Any] = {"type": server.type.value}
    if server.command:
        item["command"] = server.command
    if server.args:
        item["args"] = [str(arg) for arg in server.args]
    if server.url:
        item["url"] = server.url
    if server.env:
        item["env"] = {str(k): str(v) for k, v in server.env.items()}
    return item


def enabled_servers(servers: list[McpServer]) -> list[McpServer]:
    return [server for server in servers if server.enabled]


def render_mcp_json(servers: list[McpServer]) -> str | None:
    """Return ``.mcp.json`` text for enabled servers, or None when there are none."""
    enabled = enabled_servers(servers)
    if not enabled:
        return None
    return dumps_json(
        {"mcpServers": {server.name: mcp_server_entry(server) for server in enabled}}
    )
