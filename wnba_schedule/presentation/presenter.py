from typing import List, Optional

from wnba_schedule.formatting.formatter import format_date, format_time
from wnba_schedule.models.display import (
    DisplayEntry,
    GameItem,
    InfoItem,
    SectionHeader,
    Separator,
)
from wnba_schedule.models.game import GameBuckets, GameRecord

LIVE_HEADER = "Live Games"
UPCOMING_HEADER = "Upcoming Games"
PAST_HEADER = "Past Games"
NO_FAVORITE_GAMES = "No games found for your favorite teams"


def _score(score: Optional[str]) -> str:
    return score if score is not None else "0"


def scoreline_item(game: GameRecord) -> GameItem:
    """Live and final games: 'Aces 80 - Liberty 78 (Tue Jun 3rd)'."""
    game_date = format_date(game.date)
    title = (
        f"{game.away} {_score(game.away_score)} - "
        f"{game.home} {_score(game.home_score)} ({game_date})"
    )
    return GameItem(title=title, tooltip=game_date, url=game.url)


def matchup_item(game: GameRecord) -> GameItem:
    """Upcoming games: 'Aces vs Liberty - Tue Jun 3rd at 07:30 PM ET'."""
    when = f"{format_date(game.date)} at {format_time(game.time)}"
    return GameItem(title=f"{game.away} vs {game.home} - {when}", tooltip=when, url=game.url)


def build_menu(buckets: GameBuckets) -> List[DisplayEntry]:
    """Builds the full menu for one refresh.

    Sections appear in the order live, upcoming, past; each non-empty section
    is a disabled header followed by its games, and sections are divided by
    separators. With no favorite-team games at all the menu is a single
    informational line.
    """
    entries: List[DisplayEntry] = []

    if buckets.live:
        entries.append(SectionHeader(text=LIVE_HEADER))
        entries.extend(scoreline_item(game) for game in buckets.live)
        entries.append(Separator())

    if buckets.upcoming:
        entries.append(SectionHeader(text=UPCOMING_HEADER))
        entries.extend(matchup_item(game) for game in buckets.upcoming)
        entries.append(Separator())

    if buckets.past:
        entries.append(SectionHeader(text=PAST_HEADER))
        entries.extend(scoreline_item(game) for game in buckets.past)

    if not entries:
        entries.append(InfoItem(text=NO_FAVORITE_GAMES))
    return entries
