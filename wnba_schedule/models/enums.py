from enum import Enum


class GameStatus(str, Enum):
    PRE = "pre"  # Scheduled, not started
    IN = "in"  # Live
    POST = "post"  # Final


class Bucket(str, Enum):
    LIVE = "live"
    UPCOMING = "upcoming"
    PAST = "past"


STATUS_TO_BUCKET = {
    GameStatus.IN: Bucket.LIVE,
    GameStatus.PRE: Bucket.UPCOMING,
    GameStatus.POST: Bucket.PAST,
}
