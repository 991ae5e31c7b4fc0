from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from wnba_schedule.models.game import GameRecord


class ParseAnomaly(Exception):
    """A single game entry in the feed is missing a required field."""

    pass


def _dig(node: Any, *path: Any) -> Any:
    """Follows dict keys and list indexes, raising ParseAnomaly on the first miss."""
    for step in path:
        try:
            node = node[step]
        except (KeyError, IndexError, TypeError):
            raise ParseAnomaly(f"missing {'.'.join(str(p) for p in path)}")
    return node


def _home_away(game: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Returns (home, away) competitor entries.

    The feed carries no explicit home/away flag; the first competitor is
    home and the second is away.
    """
    competitors = _dig(game, "competitions", 0, "competitors")
    return _dig(competitors, 0), _dig(competitors, 1)


def _score(competitor: Dict[str, Any]) -> Optional[str]:
    score = competitor.get("score")
    return None if score is None else str(score)


class ScheduleParser:
    """Turns the raw schedule document into a flat list of GameRecord."""

    def __init__(self):
        self.anomalies: List[ParseAnomaly] = []

    def parse(self, document: Any) -> List[GameRecord]:
        self.anomalies = []
        games: List[GameRecord] = []

        schedule = None
        if isinstance(document, dict) and isinstance(document.get("content"), dict):
            schedule = document["content"].get("schedule")
        if not isinstance(schedule, dict):
            logger.warning("Schedule document has no content.schedule mapping")
            return games

        for date_key, date_data in schedule.items():
            if not isinstance(date_data, dict) or not date_data.get("games"):
                continue
            day_games = date_data["games"]
            if not isinstance(day_games, list):
                logger.warning(f"Skipping {date_key}: games is {type(day_games).__name__}, not a list")
                continue
            for index, raw_game in enumerate(day_games):
                try:
                    games.append(self._parse_game(str(date_key), raw_game))
                except ParseAnomaly as e:
                    logger.warning(f"Skipping game {date_key}[{index}]: {e}")
                    self.anomalies.append(e)

        if self.anomalies:
            logger.warning(
                f"Parsed {len(games)} games, skipped {len(self.anomalies)} malformed entries"
            )
        else:
            logger.debug(f"Parsed {len(games)} games")
        return games

    def _parse_game(self, date_key: str, game: Any) -> GameRecord:
        home, away = _home_away(game)
        time = game.get("date") if isinstance(game, dict) else None
        return GameRecord(
            date=date_key,
            time=time if isinstance(time, str) else "",
            url=str(_dig(game, "links", 0, "href")),
            home=str(_dig(home, "team", "shortDisplayName")),
            away=str(_dig(away, "team", "shortDisplayName")),
            home_score=_score(home),
            away_score=_score(away),
            status=str(_dig(game, "status", "type", "state")),
        )


def parse_games(document: Any) -> List[GameRecord]:
    """Parses a schedule document, skipping malformed games."""
    return ScheduleParser().parse(document)
