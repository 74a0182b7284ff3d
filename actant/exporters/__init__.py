from actant.exporters.base import IConfigExporter
from actant.exporters.claude_code import ClaudeCodeExporter
from actant.exporters.cline import ClineExporter
from actant.exporters.cursor import CursorExporter
from actant.exporters.opencode import OpenCodeExporter
from actant.exporters.windsurf import WindsurfExporter

__all__ = [
    "IConfigExporter",
    "ClaudeCodeExporter",
    "ClineExporter",
    "CursorExporter",
    "OpenCodeExporter",
    "WindsurfExporter",
]
