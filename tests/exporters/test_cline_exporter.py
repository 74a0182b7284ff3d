from actant.exporters import ClineExporter
from actant.exporters.cline import number_width
from actant.models import Command, Instructions, Rule, SkillEntry


def test_numbered_files(make_config) -> None:
    config = make_config(
        instructions=Instructions(content="Be terse."),
        rules=[Rule(title="Style Guide", content="s"), Rule(title="Testing", content="t")],
    )

    result = ClineExporter().export(config)

    assert result.paths() == [
        ".clinerules/01-instructions.md",
        ".clinerules/02-style-guide.md",
        ".clinerules/03-testing.md",
    ]
    assert result.get(".clinerules/01-instructions.md").content == "Be terse."


def test_rules_start_at_two_without_instructions(make_config) -> None:
    config = make_config(instructions=Instructions(), rules=[Rule(title="Only")])
    assert ClineExporter().export(config).paths() == [".clinerules/02-only.md"]


def test_untitled_rule_gets_default_slug(make_config) -> None:
    config = make_config(rules=[Rule(title="!!!", content="x")])
    assert ".clinerules/02-rule.md" in ClineExporter().export(config).paths()


def test_width_grows_past_ninety_nine(make_config) -> None:
    narrow = make_config(rules=[Rule(title=f"Rule {i}") for i in range(98)])
    wide = make_config(rules=[Rule(title=f"Rule {i}") for i in range(120)])

    assert number_width(narrow) == 2
    assert number_width(wide) == 3

    paths = ClineExporter().export(wide).paths()
    assert paths[0] == ".clinerules/001-instructions.md"
    assert paths[1] == ".clinerules/002-rule-0.md"
    assert paths[-1] == ".clinerules/121-rule-119.md"
    assert paths == sorted(paths)


def test_commands_follow_rules(make_config) -> None:
    config = make_config(
        rules=[Rule(title="A"), Rule(title="B")],
        commands=[Command(name="ship", description="Ship", prompt="Go.")],
    )

    result = ClineExporter().export(config)

    assert result.paths()[-1] == ".clinerules/04-commands.md"
    assert result.get(".clinerules/04-commands.md").content.startswith("# Commands")


def test_skills_warning_names_agents_that_keep_them(make_config) -> None:
    config = make_config(
        skills=[
            SkillEntry("review", params={"content": "# Review"}),
            SkillEntry("off", enabled=False, params={"content": "x"}),
        ]
    )

    result = ClineExporter().export(config)

    assert result.warnings == [
        "Skills have no native Cline equivalent; 1 skill(s) not exported "
        "(supported by Claude Code)"
    ]
