from typing import AbstractSet, Iterable, List

from loguru import logger

from wnba_schedule.models.enums import STATUS_TO_BUCKET, Bucket
from wnba_schedule.models.game import GameBuckets, GameRecord


def is_favorite(game: GameRecord, favorite_teams: Iterable[str]) -> bool:
    """Exact, case-sensitive match of either side against the favorites."""
    return any(game.involves(team) for team in favorite_teams)


def sort_games(games: Iterable[GameRecord]) -> List[GameRecord]:
    """Chronological order: date key first, then the raw start time."""
    return sorted(games, key=lambda game: (game.date, game.time))


def classify(games: Iterable[GameRecord], favorite_teams: AbstractSet[str]) -> GameBuckets:
    """Sorts, keeps favorite-team games, and splits them by status."""
    buckets = GameBuckets()
    targets = {
        Bucket.LIVE: buckets.live,
        Bucket.UPCOMING: buckets.upcoming,
        Bucket.PAST: buckets.past,
    }

    for game in sort_games(games):
        if not is_favorite(game, favorite_teams):
            continue
        bucket = STATUS_TO_BUCKET.get(game.state)
        if bucket is None:
            logger.debug(
                f"Unclassified status '{game.status}' for {game.away} at {game.home} on {game.date}"
            )
            continue
        targets[bucket].append(game)

    logger.debug(
        f"Classified favorites: {len(buckets.live)} live, "
        f"{len(buckets.upcoming)} upcoming, {len(buckets.past)} past"
    )
    return buckets
