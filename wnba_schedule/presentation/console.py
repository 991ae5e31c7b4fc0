"""Console stand-ins for the host menu, notification and URL facilities."""

import webbrowser
from pathlib import Path
from typing import Callable, List, Optional, Protocol, Sequence

from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from wnba_schedule.models.display import (
    DisplayEntry,
    GameItem,
    InfoItem,
    SectionHeader,
    Separator,
)

UrlOpener = Callable[[str], object]


class MenuWidget(Protocol):
    def set_menu(self, entries: Sequence[DisplayEntry]) -> None: ...

    def set_title(self, text: str) -> None: ...

    def set_tooltip(self, text: str) -> None: ...

    def set_icon(self, path: Optional[Path]) -> bool: ...

    def delete(self) -> None: ...


class Notifier(Protocol):
    def notify(self, title: str, text: str) -> None: ...


def open_in_browser(url: str) -> bool:
    logger.info(f"Opening {url}")
    return webbrowser.open(url)


class ConsoleMenu:
    """Renders the menu to a rich console and dispatches clicks on game items."""

    def __init__(
        self,
        console: Optional[Console] = None,
        open_url: UrlOpener = open_in_browser,
    ):
        self.console = console or Console()
        self.open_url = open_url
        self.entries: List[DisplayEntry] = []
        self.title = ""
        self.tooltip = ""
        self.icon: Optional[Path] = None
        self.deleted = False

    def set_menu(self, entries: Sequence[DisplayEntry]) -> None:
        self.entries = list(entries)
        self.console.print(self.render())

    def set_title(self, text: str) -> None:
        self.title = text

    def set_tooltip(self, text: str) -> None:
        self.tooltip = text

    def set_icon(self, path: Optional[Path]) -> bool:
        if path is None or not path.is_file():
            return False
        self.icon = path
        return True

    def delete(self) -> None:
        self.entries = []
        self.deleted = True

    def click(self, index: int) -> bool:
        """Runs the action of the entry at `index`; only game items have one."""
        entry = self.entries[index]
        if not isinstance(entry, GameItem):
            return False
        self.open_url(entry.url)
        return True

    def render(self) -> Panel:
        body = Text()
        for index, entry in enumerate(self.entries):
            if isinstance(entry, SectionHeader):
                body.append(f"{entry.text}\n", style="bold dim")
            elif isinstance(entry, Separator):
                body.append("─" * 24 + "\n", style="dim")
            elif isinstance(entry, GameItem):
                body.append(f"[{index}] ", style="cyan")
                body.append(f"{entry.title}\n")
            elif isinstance(entry, InfoItem):
                body.append(f"{entry.text}\n", style="italic")
        body.rstrip()
        return Panel(body, title=self.title or None, subtitle=self.tooltip or None)


class ConsoleNotifier:
    """Prints notifications as rich panels."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def notify(self, title: str, text: str) -> None:
        logger.info(f"Notification: {title}: {text}")
        self.console.print(Panel(text, title=title, border_style="yellow"))
