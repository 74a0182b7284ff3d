import logging

from rich.console import Console
from rich.logging import RichHandler

from actant.__main__ import cli
from actant.log import setup_logging


def test_setup_logging_installs_single_rich_handler() -> None:
    root_logger = logging.getLogger()

    setup_logging(verbose=True, console=Console(stderr=True))
    setup_logging(verbose=False)

    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0], RichHandler)
    assert root_logger.level == logging.WARNING


def test_cli_installs_warning_handler_by_default(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["agents"])

    root_logger = logging.getLogger()
    assert result.exit_code == 0
    assert [type(handler) for handler in root_logger.handlers] == [RichHandler]
    assert root_logger.level == logging.WARNING


def test_cli_verbose_enables_debug(cli_runner) -> None:
    result = cli_runner.invoke(cli, ["-v", "agents"])

    assert result.exit_code == 0
    assert logging.getLogger().level == logging.DEBUG
