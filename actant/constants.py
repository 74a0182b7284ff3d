from typing import Final


CLAUDE_FILENAME: Final[str] = "CLAUDE.md"
CLAUDE_SETTINGS_PATH: Final[str] = ".claude/settings.json"
CLAUDE_SETTINGS_FILENAME: Final[str] = "settings.json"
CLAUDE_SKILLS_DIR: Final[str] = ".claude/skills"
CLAUDE_COMMANDS_DIR: Final[str] = ".claude/commands"
CLAUDE_AGENTS_DIR: Final[str] = ".claude/agents"
SKILL_FILENAME: Final[str] = "SKILL.md"
SKILLS_SEGMENT: Final[str] = "skills"

MCP_FILENAME: Final[str] = ".mcp.json"

CURSORRULES_FILENAME: Final[str] = ".cursorrules"
CURSOR_RULES_DIR: Final[str] = ".cursor/rules"
MDC_SUFFIX: Final[str] = ".mdc"

WINDSURFRULES_FILENAME: Final[str] = ".windsurfrules"
WINDSURF_RULES_DIR: Final[str] = ".windsurf/rules"
WINDSURF_RULES_PATH: Final[str] = ".windsurf/rules/rules.md"
WINDSURF_RULES_FILENAME: Final[str] = "rules.md"
WINDSURF_RULE_TITLE: Final[str] = "Windsurf Rules"
WINDSURF_CHAR_LIMIT: Final[int] = 6000

CLINE_RULES_DIR: Final[str] = ".clinerules"
CLINE_INSTRUCTIONS_SLUG: Final[str] = "instructions"
CLINE_MIN_NUMBER_WIDTH: Final[int] = 2

OPENCODE_FILENAME: Final[str] = "opencode.json"

MARKDOWN_SUFFIX: Final[str] = ".md"

UNTITLED_RULE_TITLE: Final[str] = "Untitled Rule"
DEFAULT_RULE_TITLE: Final[str] = "Rule"

AGENT_ENVVAR: Final[str] = "ACTANT_AGENT"
ROOT_ENVVAR: Final[str] = "ACTANT_ROOT"
