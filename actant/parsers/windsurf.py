from actant.constants import (
    WINDSURF_RULE_TITLE,
    WINDSURF_RULES_FILENAME,
    WINDSURFRULES_FILENAME,
)
from actant.models import AgentConfig, AgentType, Instructions, Rule, ScannedFile
from actant.parsers.base import IConfigParser, find_file


class WindsurfParser(IConfigParser):
    agent_type = AgentType.WINDSURF

    def parse(self, files: list[ScannedFile], name: str) -> AgentConfig:
        config = self.empty_config(name)

        windsurfrules = find_file(files, WINDSURFRULES_FILENAME)
        if windsurfrules is not None:
            config.instructions = Instructions(content=windsurfrules.content)

        rules_file = find_file(files, WINDSURF_RULES_FILENAME)
        if rules_file is not None:
            config.rules.append(
                Rule(title=WINDSURF_RULE_TITLE, content=rules_file.content)
            )

        return config
