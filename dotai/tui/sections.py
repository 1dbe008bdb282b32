from typing import Optional

from rich import box
from rich.console import RenderableType
from rich.markup import escape
from rich.panel import Panel

from dotai.tui.enums import UIStyle


def _panel(
    body: RenderableType, title: str, style: UIStyle, subtitle: Optional[str] = None
) -> Panel:
    return Panel(
        body,
        title=f"[bold]{escape(title)}[/bold]",
        title_align="left",
        subtitle=subtitle,
        subtitle_align="right",
        border_style=style.value,
        box=box.ROUNDED,
        padding=(0, 1),
    )


class UISection:
    """Panels around command output; tables get ``wrap``, messages get ``note``."""

    @staticmethod
    def wrap(
        title: str,
        body: RenderableType,
        style: UIStyle = UIStyle.BLUE,
        subtitle: Optional[str] = None,
    ) -> Panel:
        return _panel(body, title, style, subtitle)

    @staticmethod
    def note(title: str, body: str, style: UIStyle = UIStyle.GREEN) -> Panel:
        return _panel(body, title, style)
