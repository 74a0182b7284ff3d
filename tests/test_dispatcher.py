import pytest

from actant import dispatcher
from actant.dispatcher import (
    EXPORTERS,
    PARSERS,
    export_config,
    export_for,
    export_many,
    parse_files,
)
from actant.errors import UnsupportedAgentError
from actant.models import AgentType, Instructions, ScannedFile


def test_every_agent_has_parser_and_exporter() -> None:
    assert set(PARSERS) == set(AgentType)
    assert set(EXPORTERS) == set(AgentType)


def test_parse_files_routes_by_agent() -> None:
    files = [ScannedFile(path=".windsurfrules", content="Be brief.")]

    config = parse_files("windsurf", files, "demo")

    assert config.target_agent is AgentType.WINDSURF
    assert config.instructions.content == "Be brief."


def test_parse_files_unknown_agent_raises() -> None:
    with pytest.raises(UnsupportedAgentError) as exc_info:
        parse_files("notepad", [], "demo")
    assert str(exc_info.value) == "Unsupported agent type: notepad"
    assert isinstance(exc_info.value, ValueError)


def test_export_config_uses_target_agent(make_config) -> None:
    result = export_config(make_config(target_agent=AgentType.CLINE))
    assert result.paths() == [".clinerules/01-instructions.md"]


def test_export_config_unknown_agent_is_a_warning(make_config) -> None:
    result = export_config(make_config(target_agent="emacs"))

    assert result.files == []
    assert result.warnings == ["Unsupported agent type: emacs"]


def test_export_config_failure_is_a_warning(make_config, monkeypatch) -> None:
    def explode(config, result) -> None:
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(EXPORTERS[AgentType.CURSOR], "build", explode)

    result = export_config(make_config(target_agent=AgentType.CURSOR))

    assert result.files == []
    assert result.warnings == ["disk on fire"]


def test_export_config_failure_without_message(make_config, monkeypatch) -> None:
    def explode(config, result) -> None:
        raise RuntimeError()

    monkeypatch.setattr(EXPORTERS[AgentType.OPENCODE], "build", explode)

    result = export_config(make_config(target_agent=AgentType.OPENCODE))

    assert result.warnings == ["Export failed"]


def test_export_for_and_many(make_config) -> None:
    config = make_config(instructions=Instructions(content="Hi."))

    single = export_for(config, "cursor")
    many = export_many(config, [AgentType.WINDSURF, "opencode", "vim"])

    assert single.paths() == [".cursorrules"]
    assert config.target_agent is AgentType.CLAUDE_CODE
    assert list(many) == ["windsurf", "opencode", "vim"]
    assert many["windsurf"].get(".windsurfrules").content == "Hi."
    assert many["vim"].warnings == ["Unsupported agent type: vim"]


def test_scan_for_configs_is_reexported() -> None:
    assert "scan_for_configs" in dispatcher.__all__
