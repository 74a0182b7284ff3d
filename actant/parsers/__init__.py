from actant.parsers.base import IConfigParser
from actant.parsers.claude_code import ClaudeCodeParser
from actant.parsers.cline import ClineParser
from actant.parsers.cursor import CursorParser
from actant.parsers.opencode import OpenCodeParser
from actant.parsers.windsurf import WindsurfParser

__all__ = [
    "IConfigParser",
    "ClaudeCodeParser",
    "ClineParser",
    "CursorParser",
    "OpenCodeParser",
    "WindsurfParser",
]
