"""Shared parser interface and scanned-file lookups."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from actant.models import AgentConfig, AgentType, ScannedFile


class IConfigParser(ABC):
    agent_type: AgentType

    @abstractmethod
    def parse(self, files: list[ScannedFile], name: str) -> AgentConfig:
        """Build a canonical config from scanned files; never raises on bad input."""

    def empty_config(self, name: str) -> AgentConfig:
        return AgentConfig(name=name, target_agent=self.agent_type)


def find_file(files: list[ScannedFile], name: str) -> Optional[ScannedFile]:
    return next((item for item in files if item.matches(name)), None)


def find_files_by_ext(files: list[ScannedFile], ext: str) -> list[ScannedFile]:
    return [item for item in files if item.path.endswith(ext)]
