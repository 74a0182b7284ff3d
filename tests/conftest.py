import logging
import sys
from pathlib import Path
from typing import Any

from click.testing import CliRunner
import pytest
from rich.logging import RichHandler


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from actant.models import (  # noqa: E402
    AgentConfig,
    AgentType,
    Instructions,
    McpServer,
    Rule,
    ScannedFile,
)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if isinstance(handler, RichHandler):
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def write_file():
    def _write(path: Path, text: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_config():
    def _make(**overrides: Any) -> AgentConfig:
        values: dict[str, Any] = {
            "name": "test-config",
            "target_agent": AgentType.CLAUDE_CODE,
            "description": "A test config",
            "instructions": Instructions(content="Follow the project conventions."),
        }
        values.update(overrides)
        return AgentConfig(**values)

    return _make


@pytest.fixture
def rich_config(make_config):
    return make_config(
        rules=[
            Rule(title="Style Guide", content="Use Tailwind.", glob="*.tsx"),
            Rule(title="Testing", content="Write tests first."),
        ],
        mcp_servers=[
            McpServer(name="github", command="npx", args=["-y", "gh-mcp"]),
            McpServer(name="disabled", command="noop", enabled=False),
        ],
        permissions={"Bash(npm test)": "allow", "Write(*.env)": "deny"},
    )


@pytest.fixture
def scanned():
    def _scanned(path: str, content: str) -> ScannedFile:
        return ScannedFile(path=path, content=content)

    return _scanned


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
