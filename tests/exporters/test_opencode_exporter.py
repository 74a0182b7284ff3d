import json

from actant.exporters import OpenCodeExporter
from actant.models import Instructions, Rule, ScannedFile
from actant.parsers import OpenCodeParser


def _document(result) -> dict:
    assert result.paths() == ["opencode.json"]
    return json.loads(result.get("opencode.json").content)


def test_full_document(rich_config) -> None:
    result = OpenCodeExporter().export(rich_config)
    document = _document(result)

    assert document["instructions"] == [
        "Follow the project conventions.",
        "Use Tailwind.",
        "Write tests first.",
    ]
    assert document["mcp"] == {
        "github": {
            "type": "stdio",
            "command": "npx",
            "args": ["-y", "gh-mcp"],
            "enabled": True,
        }
    }
    assert document["permission"] == {"Bash(npm test)": "allow", "Write(*.env)": "deny"}
    assert result.warnings == []


def test_ask_verb_is_kept(make_config) -> None:
    document = _document(OpenCodeExporter().export(make_config(permissions={"Bash": "ask"})))
    assert document["permission"] == {"Bash": "ask"}


def test_empty_sections_are_omitted(make_config) -> None:
    document = _document(OpenCodeExporter().export(make_config(instructions=Instructions())))
    assert document == {"instructions": []}


def test_export_then_parse(make_config) -> None:
    config = make_config(
        instructions=Instructions(content="Intro."),
        rules=[Rule(title="Style", content="Body.")],
        permissions={"Edit": "deny"},
    )

    result = OpenCodeExporter().export(config)
    files = [ScannedFile(path=item.path, content=item.content) for item in result.files]
    parsed = OpenCodeParser().parse(files, config.name)

    assert parsed.instructions.content == "Intro.\n\nBody."
    assert parsed.permissions == {"Edit": "deny"}
