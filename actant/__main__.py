import json
from pathlib import Path
from typing import Callable, Optional

import click
from rich.console import Console

from actant.constants import AGENT_ENVVAR, ROOT_ENVVAR
from actant.dispatcher import export_config, parse_files, scan_for_configs
from actant.errors import ActantError
from actant.log import setup_logging
from actant.models import AgentConfig, AgentType, ExportResult, ScanResult
from actant.tui import ActantConsoleUI
from actant.validation import load_config
from actant.writer import existing_files, write_export_files


AGENT_CHOICE = click.Choice(AgentType.values(), case_sensitive=False)


def _root_argument() -> Callable:
    return click.argument(
        "root",
        required=False,
        type=click.Path(file_okay=False, path_type=Path),
        envvar=ROOT_ENVVAR,
        default=Path("."),
    )


def _write_options(func: Callable) -> Callable:
    func = click.option(
        "--backup", is_flag=True, help="Keep a timestamped copy of overwritten files."
    )(func)
    func = click.option(
        "--force", is_flag=True, help="Overwrite files that already exist."
    )(func)
    func = click.option(
        "--write", is_flag=True, help="Write the files (default is a dry run)."
    )(func)
    return func


def _scan_and_parse(
    root: Path, agent: Optional[str], name: Optional[str]
) -> tuple[Optional[AgentType], Optional[AgentConfig], Optional[ScanResult]]:
    try:
        result = scan_for_configs(root, agent)
    except ActantError as exc:
        raise click.ClickException(str(exc))
    if result is None:
        return None, None, None
    config_name = name or root.resolve().name
    config = parse_files(result.agent_type, result.files, config_name)
    return result.agent_type, config, result


def _emit(
    ui: ActantConsoleUI,
    agent: AgentType,
    result: ExportResult,
    root: Path,
    write: bool,
    force: bool,
    backup: bool,
) -> None:
    existing = existing_files(result.files, root)
    ui.render_export(
        agent.value,
        result,
        mode="write" if write else "dry-run",
        existing=existing,
        force=force,
    )
    if not write or not result.files:
        return
    try:
        written = write_export_files(result.files, root, overwrite=force, backup=backup)
    except ActantError as exc:
        raise click.ClickException(str(exc))
    ui.render_write(written)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Convert AI coding agent configuration between formats."""
    setup_logging(verbose=verbose)


@cli.command(help="List supported agents and the files each one uses.")
def agents() -> None:
    ActantConsoleUI(Console()).render_agents()


@cli.command(help="Scan a project for agent config files and parse them.")
@_root_argument()
@click.option(
    "--agent", type=AGENT_CHOICE, envvar=AGENT_ENVVAR, help="Force agent type."
)
@click.option("--name", help="Config name (defaults to the directory name).")
@click.option(
    "--json", "as_json", is_flag=True, help="Print the canonical config as JSON."
)
def scan(root: Path, agent: Optional[str], name: Optional[str], as_json: bool) -> None:
    ui = ActantConsoleUI(Console())
    _, config, result = _scan_and_parse(root, agent, name)
    if config is None:
        ui.render_no_configs(str(root))
        raise click.exceptions.Exit(1)

    if as_json:
        click.echo(json.dumps(config.to_dict(), indent=2, ensure_ascii=False))
        return
    ui.render_scan(result, config)


@cli.command(help="Export a canonical config JSON file to agent files.")
@click.argument("config_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--agent", type=AGENT_CHOICE, help="Override the config's target agent.")
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=ROOT_ENVVAR,
    default=Path("."),
    help="Project root to write into.",
)
@_write_options
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the export result as JSON instead of writing.",
)
def export(
    config_file: Path,
    agent: Optional[str],
    root: Path,
    write: bool,
    force: bool,
    backup: bool,
    as_json: bool,
) -> None:
    ui = ActantConsoleUI(Console())
    try:
        config = load_config(config_file)
    except ActantError as exc:
        raise click.ClickException(str(exc))

    if agent is not None:
        config = config.retarget(AgentType(agent.lower()))
    result = export_config(config)
    if as_json:
        payload = {
            "files": [
                {"path": item.path, "content": item.content} for item in result.files
            ],
            "warnings": result.warnings,
        }
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        if not result.files:
            raise click.exceptions.Exit(1)
        return

    target = AgentType.resolve(config.target_agent) or AgentType.CLAUDE_CODE
    _emit(ui, target, result, root, write, force, backup)
    if not result.files:
        raise click.exceptions.Exit(1)


@cli.command(help="Convert a project's agent config to another agent's format.")
@_root_argument()
@click.option(
    "--to", "to_agent", type=AGENT_CHOICE, required=True, help="Target agent."
)
@click.option(
    "--from", "from_agent", type=AGENT_CHOICE, help="Source agent (auto by default)."
)
@click.option("--name", help="Config name (defaults to the directory name).")
@_write_options
def convert(
    root: Path,
    to_agent: str,
    from_agent: Optional[str],
    name: Optional[str],
    write: bool,
    force: bool,
    backup: bool,
) -> None:
    ui = ActantConsoleUI(Console())
    _, config, _ = _scan_and_parse(root, from_agent, name)
    if config is None:
        ui.render_no_configs(str(root))
        raise click.exceptions.Exit(1)

    target = AgentType(to_agent.lower())
    result = export_config(config.retarget(target))
    _emit(ui, target, result, root, write, force, backup)
    if not result.files:
        raise click.exceptions.Exit(1)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
