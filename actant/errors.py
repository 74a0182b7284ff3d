from pathlib import Path


class ActantError(Exception):
    """Base user-facing application error."""


class UnsupportedAgentError(ActantError, ValueError):
    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unsupported agent type: {value}")


class ActantFileError(ActantError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class ScanRootError(ActantFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Scan root is not a directory")


class MissingConfigFileError(ActantFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class InvalidJsonFormatError(ActantFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigSchemaError(ActantFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class UnsafeOutputPathError(ActantFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Refusing to write outside project root")


class DuplicateOutputPathError(ActantFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="More than one export file targets")
