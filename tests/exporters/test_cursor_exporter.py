import json

from actant.exporters import CursorExporter
from actant.exporters.cursor import render_mdc
from actant.models import Instructions, Rule
from actant.parsers.cursor import parse_mdc_rule


def test_rule_becomes_mdc_file(make_config) -> None:
    config = make_config(
        rules=[
            Rule(
                title="Style Guide",
                content="Use Tailwind.",
                glob="*.tsx",
                always_apply=True,
            )
        ]
    )

    result = CursorExporter().export(config)
    mdc = result.get(".cursor/rules/style-guide.mdc")

    assert mdc is not None
    assert mdc.content == (
        "---\n"
        "description: Style Guide\n"
        "globs: *.tsx\n"
        "alwaysApply: true\n"
        "---\n"
        "Use Tailwind."
    )


def test_cursorrules_combines_instructions_and_rule_bodies(make_config) -> None:
    config = make_config(
        instructions=Instructions(content="Intro."),
        rules=[Rule(title="A", content="Alpha."), Rule(title="B", content="")],
    )

    result = CursorExporter().export(config)

    assert result.get(".cursorrules").content == "Intro.\n\nAlpha."


def test_empty_config_writes_no_cursorrules(make_config) -> None:
    result = CursorExporter().export(make_config(instructions=Instructions()))
    assert result.files == []


def test_duplicate_rule_titles_get_unique_paths(make_config) -> None:
    config = make_config(rules=[Rule(title="Style"), Rule(title="style")])

    result = CursorExporter().export(config)

    assert ".cursor/rules/style.mdc" in result.paths()
    assert ".cursor/rules/style-2.mdc" in result.paths()


def test_mdc_round_trips_through_parser() -> None:
    rule = Rule(title="Docs", content="Keep it short.", glob="docs/**", always_apply=False)

    parsed = parse_mdc_rule(render_mdc(rule.title, rule.content, rule.glob, False))

    assert parsed == rule


def test_mcp_written_and_permissions_warned(rich_config) -> None:
    result = CursorExporter().export(rich_config)

    assert list(json.loads(result.get(".mcp.json").content)["mcpServers"]) == ["github"]
    assert result.warnings == [
        "Permissions have no native Cursor equivalent; 2 permission(s) not exported "
        "(supported by Claude Code, OpenCode)"
    ]
