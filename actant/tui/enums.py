from enum import Enum


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    MAGENTA = "magenta"
    DIM = "dim"
    WHITE = "white"


class FileStatus(str, Enum):
    CREATE = "create"
    OVERWRITE = "overwrite"
    SKIP = "skip"


FILE_STATUS_STYLE = {
    FileStatus.CREATE: UIStyle.GREEN.value,
    FileStatus.OVERWRITE: UIStyle.YELLOW.value,
    FileStatus.SKIP: UIStyle.DIM.value,
}
