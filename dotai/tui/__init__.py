from dotai.tui.renderers import DotaiConsoleUI

__all__ = ["DotaiConsoleUI"]
