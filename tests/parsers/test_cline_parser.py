from actant.models import AgentType
from actant.parsers import ClineParser


def test_first_file_is_instructions_rest_are_rules(scanned) -> None:
    files = [
        scanned(".clinerules/01-instructions.md", "Be terse."),
        scanned(".clinerules/02-style.md", "Use black."),
        scanned(".clinerules/03-tests.md", "Use pytest."),
    ]

    config = ClineParser().parse(files, "demo")

    assert config.target_agent is AgentType.CLINE
    assert config.instructions.content == "Be terse."
    assert [rule.title for rule in config.rules] == ["02-style", "03-tests"]
    assert [rule.content for rule in config.rules] == ["Use black.", "Use pytest."]


def test_single_file_has_no_rules(scanned) -> None:
    config = ClineParser().parse([scanned(".clinerules/notes.md", "n")], "demo")

    assert config.instructions.content == "n"
    assert config.rules == []


def test_no_files() -> None:
    config = ClineParser().parse([], "demo")
    assert config.instructions.content == ""
