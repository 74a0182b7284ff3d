"""Cursor: .cursorrules, .cursor/rules/*.mdc and .mcp.json."""

from __future__ import annotations

from actant.constants import (
    CURSORRULES_FILENAME,
    MCP_FILENAME,
    MDC_SUFFIX,
    UNTITLED_RULE_TITLE,
)
from actant.mcp import parse_mcp_json
from actant.models import AgentConfig, AgentType, Instructions, Rule, ScannedFile
from actant.parsers.base import IConfigParser, find_file, find_files_by_ext

_DELIMITER = "---"


def parse_mdc_rule(text: str) -> Rule:
    """Read a ``.mdc`` rule.

    The frontmatter is scanned line by line for ``description``, ``globs`` and
    ``alwaysApply``; values are taken verbatim, so globs such as ``*.tsx`` need
    no quoting. A file without an opening ``---`` line is all body.
    """
    lines = text.split("\n")
    title = ""
    glob: str | None = None
    always_apply: bool | None = None
    body_start = 0

    if lines and lines[0].strip() == _DELIMITER:
        for index in range(1, len(lines)):
            line = lines[index].strip()
            if line == _DELIMITER:
                body_start = index + 1
                break
            if line.startswith("description:"):
                title = line[len("description:") :].strip()
            elif line.startswith("globs:"):
                glob = line[len("globs:") :].strip()
            elif line.startswith("alwaysApply:"):
                always_apply = line[len("alwaysApply:") :].strip() == "true"

    body = "\n".join(lines[body_start:]).strip()
    return Rule(
        title=title or UNTITLED_RULE_TITLE,
        content=body,
        glob=glob,
        always_apply=always_apply,
    )


class CursorParser(IConfigParser):
    agent_type = AgentType.CURSOR

    def parse(self, files: list[ScannedFile], name: str) -> AgentConfig:
        config = self.empty_config(name)

        cursorrules = find_file(files, CURSORRULES_FILENAME)
        if cursorrules is not None:
            config.instructions = Instructions(content=cursorrules.content)

        for mdc in find_files_by_ext(files, MDC_SUFFIX):
            config.rules.append(parse_mdc_rule(mdc.content))

        mcp_file = find_file(files, MCP_FILENAME)
        if mcp_file is not None:
            config.mcp_servers = parse_mcp_json(mcp_file.content)

        return config
