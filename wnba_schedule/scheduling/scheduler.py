import asyncio
from typing import Any, Callable, FrozenSet, Iterable, Optional, Set

from loguru import logger

from wnba_schedule.classification.classifier import classify
from wnba_schedule.config.settings import AppSettings, settings
from wnba_schedule.fetching.schedule_fetcher import ScheduleFetcher
from wnba_schedule.parsing.parser import ScheduleParser
from wnba_schedule.presentation.console import (
    ConsoleMenu,
    ConsoleNotifier,
    MenuWidget,
    Notifier,
)
from wnba_schedule.presentation.presenter import build_menu
from wnba_schedule.storage.settings_store import SettingsStore

FAVORITES_KEY = "favoriteTeams"
MENU_TITLE = "W"
MENU_TOOLTIP = "WNBA Schedule"


class ScheduleMenuApp:
    """Keeps the schedule menu current: one cycle on start, then one per interval.

    Each cycle is stamped with a generation number when it starts. A cycle
    whose fetch completes after a newer cycle has already rendered, or after
    stop(), is discarded.
    """

    def __init__(
        self,
        fetcher: Optional[ScheduleFetcher] = None,
        menu_factory: Callable[[], MenuWidget] = ConsoleMenu,
        notifier: Optional[Notifier] = None,
        store: Optional[SettingsStore] = None,
        app_settings: Optional[AppSettings] = None,
    ):
        self.settings = app_settings or settings
        self.fetcher = fetcher or ScheduleFetcher()
        self.menu_factory = menu_factory
        self.notifier = notifier or ConsoleNotifier()
        self.store = store or SettingsStore(self.settings.settings_path)
        self.parser = ScheduleParser()

        self.menubar: Optional[MenuWidget] = None
        self.favorite_teams: FrozenSet[str] = frozenset()
        self._timer: Optional[asyncio.Task] = None
        self._cycles: Set[asyncio.Task] = set()
        self._generation = 0
        self._rendered_generation = 0
        self._stopped = True

        self.load_settings()

    # --- Settings ---

    def load_settings(self) -> None:
        teams = self.store.get(FAVORITES_KEY)
        if teams is None:
            teams = self.settings.favorite_teams
        if not isinstance(teams, list):
            logger.warning(f"Ignoring malformed '{FAVORITES_KEY}' setting: {teams!r}")
            teams = []
        self.favorite_teams = frozenset(team for team in teams if isinstance(team, str))
        logger.info(f"Favorite teams: {sorted(self.favorite_teams) or 'none'}")

    def save_settings(self) -> None:
        self.store.set(FAVORITES_KEY, sorted(self.favorite_teams))

    def set_favorite_teams(self, teams: Iterable[str]) -> None:
        """Replaces the favorites and persists them. Takes effect on the next cycle."""
        self.favorite_teams = frozenset(teams)
        self.save_settings()

    # --- Lifecycle ---

    def start(self) -> asyncio.Task:
        """Creates the menu, runs one cycle now and arms the periodic timer.

        Must be called from inside a running event loop. Returns the task of
        the immediate cycle.
        """
        if self.menubar:
            self.menubar.delete()
        self.menubar = self.menu_factory()
        if not self.menubar.set_icon(self.settings.icon_path):
            self.menubar.set_title(MENU_TITLE)
        self.menubar.set_tooltip(MENU_TOOLTIP)
        self._stopped = False

        first_cycle = self.refresh()
        if self._timer:
            self._timer.cancel()
        self._timer = asyncio.create_task(self._run_timer())
        logger.info(f"Schedule menu started, refreshing every {self.settings.refresh_interval:g}s")
        return first_cycle

    def stop(self) -> None:
        self._stopped = True
        if self._timer:
            self._timer.cancel()
            self._timer = None
        for task in list(self._cycles):
            task.cancel()
        if self.menubar:
            self.menubar.delete()
            self.menubar = None
        logger.info("Schedule menu stopped")

    async def close(self) -> None:
        self.stop()
        await self.fetcher.close()

    def refresh(self) -> asyncio.Task:
        """Schedules a cycle without waiting for it."""
        task = asyncio.create_task(self.update_menu())
        self._cycles.add(task)
        task.add_done_callback(self._cycles.discard)
        return task

    async def _run_timer(self) -> None:
        while True:
            await asyncio.sleep(self.settings.refresh_interval)
            self.refresh()

    # --- Cycle ---

    async def update_menu(self) -> None:
        """One fetch -> parse -> classify -> present cycle."""
        self._generation += 1
        generation = self._generation
        logger.debug(f"Cycle {generation} started")

        try:
            schedule_data = await self.fetcher.fetch()
            if not self._is_current(generation):
                return
            self._apply(generation, schedule_data)
        except Exception:
            logger.exception(f"Cycle {generation} failed")

    def _is_current(self, generation: int) -> bool:
        if self._stopped or self.menubar is None:
            logger.debug(f"Cycle {generation} finished after stop, discarding")
            return False
        if generation < self._rendered_generation:
            logger.debug(
                f"Cycle {generation} is older than rendered cycle {self._rendered_generation}, discarding"
            )
            return False
        return True

    def _apply(self, generation: int, schedule_data: Optional[Any]) -> None:
        if schedule_data is None:
            self.notifier.notify("WNBA Schedule Error", "Failed to fetch WNBA schedule")
            return

        games = self.parser.parse(schedule_data)
        if not games:
            self.notifier.notify("WNBA Schedule", "No WNBA games found")
            return

        buckets = classify(games, self.favorite_teams)
        entries = build_menu(buckets)
        self._rendered_generation = generation
        self.menubar.set_menu(entries)
        logger.info(f"Cycle {generation}: menu updated with {len(entries)} entries from {len(games)} games")
