"""Tests for favorite filtering, ordering and status buckets."""

from wnba_schedule.classification.classifier import classify, is_favorite, sort_games
from wnba_schedule.models.game import GameRecord


def game(home="Liberty", away="Aces", date="20240603", time="2024-06-03T23:30Z", status="pre"):
    return GameRecord(
        date=date,
        time=time,
        url=f"https://www.espn.com/wnba/game/_/id/{date}-{home}",
        home=home,
        away=away,
        status=status,
    )


class TestIsFavorite:
    """Tests for favorite-team matching."""

    def test_matches_away_team(self):
        assert is_favorite(game(home="Liberty", away="Aces"), {"Aces"})

    def test_matches_home_team(self):
        assert is_favorite(game(home="Liberty", away="Aces"), {"Liberty", "Sky"})

    def test_no_match(self):
        assert not is_favorite(game(home="Liberty", away="Aces"), {"Sun"})

    def test_exact_and_case_sensitive(self):
        assert not is_favorite(game(home="Liberty", away="Aces"), {"aces"})
        assert not is_favorite(game(home="Liberty", away="Aces"), {"Ace"})

    def test_empty_favorites(self):
        assert not is_favorite(game(), set())


class TestSortGames:
    """Tests for chronological ordering."""

    def test_date_is_primary_key(self):
        later = game(date="20240602", time="2024-06-02T23:00Z")
        earlier = game(date="20240601", time="2024-06-02T23:00Z")

        assert [g.date for g in sort_games([later, earlier])] == ["20240601", "20240602"]

    def test_time_breaks_ties(self):
        night = game(time="2024-06-03T23:30Z", home="Liberty")
        afternoon = game(time="2024-06-03T19:00Z", home="Sun")

        assert [g.home for g in sort_games([night, afternoon])] == ["Sun", "Liberty"]

    def test_date_beats_time(self):
        a = game(date="20240601", time="2024-06-02T01:00Z", home="Sun")
        b = game(date="20240602", time="2024-06-01T00:00Z", home="Sky")

        assert [g.home for g in sort_games([b, a])] == ["Sun", "Sky"]

    def test_stable_for_equal_keys(self):
        first = game(home="Liberty")
        second = game(home="Sun")

        assert [g.home for g in sort_games([first, second])] == ["Liberty", "Sun"]
        assert [g.home for g in sort_games([second, first])] == ["Sun", "Liberty"]

    def test_does_not_mutate_input(self):
        games = [game(date="20240602"), game(date="20240601")]
        sort_games(games)
        assert [g.date for g in games] == ["20240602", "20240601"]


class TestClassify:
    """Tests for bucketing favorite games by status."""

    def test_buckets_by_status(self):
        games = [
            game(status="post", date="20240601"),
            game(status="in", date="20240603"),
            game(status="pre", date="20240605"),
        ]

        buckets = classify(games, {"Aces"})

        assert [g.status for g in buckets.live] == ["in"]
        assert [g.status for g in buckets.upcoming] == ["pre"]
        assert [g.status for g in buckets.past] == ["post"]

    def test_each_bucket_is_chronological(self):
        games = [
            game(status="pre", date="20240610"),
            game(status="post", date="20240602"),
            game(status="pre", date="20240607"),
            game(status="post", date="20240601"),
        ]

        buckets = classify(games, {"Liberty"})

        assert [g.date for g in buckets.upcoming] == ["20240607", "20240610"]
        assert [g.date for g in buckets.past] == ["20240601", "20240602"]

    def test_non_favorites_are_dropped(self):
        games = [game(home="Sun", away="Sky", status="in"), game(status="in")]

        buckets = classify(games, {"Aces"})

        assert [g.home for g in buckets.live] == ["Liberty"]

    def test_unknown_status_is_unclassified(self):
        buckets = classify([game(status="postponed"), game(status="")], {"Aces"})

        assert buckets.is_empty

    def test_empty_favorites_give_empty_buckets(self):
        assert classify([game(status="in")], frozenset()).is_empty
