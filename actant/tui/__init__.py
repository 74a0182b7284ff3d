from actant.tui.renderers import ActantConsoleUI

__all__ = ["ActantConsoleUI"]
