from actant.constants import MARKDOWN_SUFFIX
from actant.models import AgentConfig, AgentType, Instructions, Rule, ScannedFile
from actant.parsers.base import IConfigParser, find_files_by_ext


class ClineParser(IConfigParser):
    """First ``.md`` file is the instructions body, every later one a rule."""

    agent_type = AgentType.CLINE

    def parse(self, files: list[ScannedFile], name: str) -> AgentConfig:
        config = self.empty_config(name)

        md_files = find_files_by_ext(files, MARKDOWN_SUFFIX)
        if not md_files:
            return config

        first, rest = md_files[0], md_files[1:]
        config.instructions = Instructions(content=first.content)
        for file in rest:
            config.rules.append(
                Rule(title=file.name[: -len(MARKDOWN_SUFFIX)], content=file.content)
            )
        return config
