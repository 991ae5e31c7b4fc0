import sys
import asyncio

# --- Settings/Logging ---
from wnba_schedule.logging.setup import setup_logging
from wnba_schedule.config.settings import settings

setup_logging()

from loguru import logger

from wnba_schedule.presentation.console import ConsoleMenu, ConsoleNotifier
from wnba_schedule.scheduling.scheduler import ScheduleMenuApp

from rich import print
from rich.panel import Panel


async def read_commands(app: ScheduleMenuApp, menu: ConsoleMenu) -> None:
    """Console stand-in for menu clicks: a number opens that game, 'r' refreshes, 'q' quits."""
    while True:
        line = await asyncio.to_thread(sys.stdin.readline)
        if not line:
            # stdin closed (e.g. running as a service); keep the timer going
            await asyncio.Event().wait()
        command = line.strip().lower()
        if command == "q":
            return
        if command == "r":
            app.refresh()
        elif command.isdigit():
            index = int(command)
            if index >= len(menu.entries) or not menu.click(index):
                logger.warning(f"No game at menu entry {index}")
        elif command:
            print("[yellow]Enter a game number, 'r' to refresh or 'q' to quit.[/yellow]")


async def main() -> None:
    """Main entry point for the application."""
    logger.info("Starting WNBA Schedule menu")

    menu = ConsoleMenu()
    app = ScheduleMenuApp(menu_factory=lambda: menu, notifier=ConsoleNotifier())

    if not app.favorite_teams:
        print(
            Panel(
                f"No favorite teams configured. Set WNBA_FAVORITE_TEAMS (e.g. 'Aces,Liberty') or edit {settings.settings_path}.",
                title="WNBA Schedule",
            )
        )

    app.start()
    try:
        await read_commands(app, menu)
    finally:
        await app.close()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Execution interrupted by user (KeyboardInterrupt).")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Unhandled exception in main execution: {e}")
        sys.exit(1)
