from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import GameStatus


class GameRecord(BaseModel):
    """One game from the schedule feed, normalized for display."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    date: str  # Feed date key, YYYYMMDD; primary sort key
    time: str = ""  # Raw start timestamp, e.g. 2024-06-03T23:00Z
    url: str
    home: str
    away: str
    home_score: Optional[str] = None
    away_score: Optional[str] = None
    status: str  # Raw status.type.state; may be outside GameStatus

    @property
    def state(self) -> Optional[GameStatus]:
        """The known status of the game, or None if the feed sent something else."""
        try:
            return GameStatus(self.status)
        except ValueError:
            return None

    def involves(self, team: str) -> bool:
        return self.home == team or self.away == team


class GameBuckets(BaseModel):
    """Favorite-team games grouped by status, each list in chronological order."""

    live: List[GameRecord] = Field(default_factory=list)
    upcoming: List[GameRecord] = Field(default_factory=list)
    past: List[GameRecord] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.live or self.upcoming or self.past)
