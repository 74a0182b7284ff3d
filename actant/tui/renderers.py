from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel

from actant.models import AgentConfig, ExportResult, ScanResult, WriteResult
from actant.registry import AGENT_FILE_PATTERNS, agent_label
from actant.tui.enums import FileStatus, UIStyle
from actant.tui.tables import AgentsTable, ExportTable, ScanTable, WriteTable
from actant.utils import compact_home_path


def panel(
    title: str,
    body: Any,
    style: str = UIStyle.BLUE.value,
    subtitle: Optional[str] = None,
) -> Panel:
    return Panel(
        body, title=title, subtitle=subtitle, border_style=style, padding=(0, 1)
    )


def bullets(items: list[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


class ActantConsoleUI:
    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render_agents(self) -> None:
        self.console.print(panel("supported agents", AgentsTable.agents_table()))

    def render_no_configs(self, root: str) -> None:
        lines = [
            f"{agent_label(agent)}: {', '.join(patterns)}"
            for agent, patterns in AGENT_FILE_PATTERNS.items()
        ]
        self.console.print(
            panel(
                "scan",
                f"No config files found in {compact_home_path(root)}.\n\n"
                f"Supported files:\n{bullets(lines)}",
                style=UIStyle.YELLOW.value,
            )
        )

    def render_scan(self, result: ScanResult, config: AgentConfig) -> None:
        self.console.print(
            panel(
                "scan overview",
                ScanTable.summary_block(result, config),
                style=UIStyle.BLUE.value,
            )
        )
        self.console.print(
            panel(
                "files found",
                ScanTable.files_table(result),
                style=UIStyle.CYAN.value,
            )
        )
        self.console.print(
            panel(
                "parsed sections",
                ScanTable.sections_table(config),
                style=UIStyle.MAGENTA.value,
            )
        )

    def render_export(
        self,
        agent: str,
        result: ExportResult,
        mode: str,
        existing: Optional[list[str]] = None,
        force: bool = False,
    ) -> None:
        present = set(existing or [])
        statuses: dict[str, FileStatus] = {}
        for item in result.files:
            if item.path not in present:
                statuses[item.path] = FileStatus.CREATE
            else:
                statuses[item.path] = FileStatus.OVERWRITE if force else FileStatus.SKIP

        self.console.print(
            panel(
                "export overview",
                ExportTable.summary_block(agent, mode, result.files, result.warnings),
                style=UIStyle.BLUE.value,
            )
        )
        if result.files:
            self.console.print(
                panel(
                    "files",
                    ExportTable.files_table(result.files, statuses),
                    style=UIStyle.CYAN.value,
                )
            )
        else:
            self.console.print(
                panel("files", "No files generated.", style=UIStyle.DIM.value)
            )
        if result.warnings:
            self.console.print(
                panel("warnings", bullets(result.warnings), style=UIStyle.YELLOW.value)
            )
        if mode == "dry-run" and result.files:
            self.console.print(
                panel(
                    "next",
                    "Nothing was written. Re-run with --write to create the files.",
                    style=UIStyle.DIM.value,
                )
            )

    def render_write(self, result: WriteResult) -> None:
        self.console.print(WriteTable.stats_panel(result))
        if result.skipped:
            self.console.print(
                panel(
                    "skipped (already exist, use --force)",
                    bullets(result.skipped),
                    style=UIStyle.YELLOW.value,
                )
            )
        if result.backups:
            backups = [compact_home_path(item) for item in result.backups]
            self.console.print(
                panel("backups", bullets(backups), style=UIStyle.DIM.value)
            )
