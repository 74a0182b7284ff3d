from rich.panel import Panel
from rich.table import Column, Table

from actant.models import AgentConfig, ExportFile, ScanResult, WriteResult
from actant.registry import AGENT_CATALOG, AGENT_FILE_PATTERNS, agent_label
from actant.tui.enums import FILE_STATUS_STYLE, FileStatus, UIStyle
from actant.utils import human_size


def _flag(value: bool) -> str:
    if value:
        return f"[{UIStyle.GREEN.value}]yes[/{UIStyle.GREEN.value}]"
    return f"[{UIStyle.DIM.value}]no[/{UIStyle.DIM.value}]"


class AgentsTable:
    @staticmethod
    def agents_table() -> Table:
        table = Table(
            Column(header="Agent", width=12),
            Column(header="Label", width=12),
            Column(header="Files", overflow="fold"),
            Column(header="MCP", width=5),
            Column(header="Permissions", width=11),
            Column(header="Skills", width=6),
            expand=True,
            header_style="bold",
        )
        for agent_type, metadata in AGENT_CATALOG.items():
            table.add_row(
                agent_type.value,
                metadata.label,
                "\n".join(AGENT_FILE_PATTERNS[agent_type]),
                _flag(metadata.supports_mcp),
                _flag(metadata.supports_permissions),
                _flag(metadata.supports_skills),
            )
        return table


class ScanTable:
    @staticmethod
    def summary_block(result: ScanResult, config: AgentConfig):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Agent", agent_label(result.agent_type))
        table.add_row("Config", config.name)
        table.add_row("Files", str(len(result.files)))
        return table

    @staticmethod
    def files_table(result: ScanResult) -> Table:
        table = Table(
            Column(header="Path", overflow="ellipsis"),
            Column(header="Size", width=10, justify="right"),
            expand=True,
            header_style="bold",
        )
        for item in result.files:
            size = len(item.content.encode("utf-8"))
            table.add_row(item.path, human_size(size))
        return table

    @staticmethod
    def sections_table(config: AgentConfig) -> Table:
        counts = {
            "instructions": len(config.instructions.content.splitlines()),
            "rules": len(config.rules),
            "mcp servers": len(config.mcp_servers),
            "permissions": len(config.permissions),
            "skills": len(config.skills),
        }
        table = Table(show_header=False, box=None)
        for key, value in counts.items():
            if value:
                unit = " line(s)" if key == "instructions" else ""
                table.add_row(f"[bold]{key}[/bold]", f"{value}{unit}")
        return table


class ExportTable:
    @staticmethod
    def summary_block(
        agent: str, mode: str, files: list[ExportFile], warnings: list[str]
    ):
        table = Table.grid(padding=(0, 2))
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Mode", mode)
        table.add_row("Agent", agent)
        table.add_row("Files", str(len(files)))
        table.add_row("Warnings", str(len(warnings)))
        return table

    @staticmethod
    def files_table(files: list[ExportFile], statuses: dict[str, FileStatus]) -> Table:
        table = Table(
            Column(header="Status", width=10),
            Column(header="Path", overflow="ellipsis"),
            Column(header="Size", width=10, justify="right"),
            expand=True,
            header_style="bold",
        )
        for item in files:
            status = statuses.get(item.path, FileStatus.CREATE)
            style = FILE_STATUS_STYLE.get(status, UIStyle.WHITE.value)
            table.add_row(
                f"[{style}]{status.value}[/{style}]",
                item.path,
                human_size(len(item.content.encode("utf-8"))),
            )
        return table


class WriteTable:
    @staticmethod
    def stats_panel(result: WriteResult) -> Panel:
        stats = {
            "written": str(len(result.written)),
            "skipped": str(len(result.skipped)),
            "backups": str(len(result.backups)),
        }
        table = Table(show_header=False, box=None)
        for key, value in stats.items():
            table.add_row(f"[bold]{key}[/bold]", value)
        style = UIStyle.YELLOW if result.skipped else UIStyle.GREEN
        return Panel(table, title="write", border_style=style.value)
