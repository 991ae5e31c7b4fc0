"""Tests for schedule document parsing."""

import pytest

from feed_samples import make_document, make_game
from wnba_schedule.parsing.parser import ParseAnomaly, ScheduleParser, parse_games


class TestScheduleParser:
    """Tests for walking content.schedule into GameRecords."""

    def setup_method(self):
        self.parser = ScheduleParser()

    def test_extracts_all_fields(self):
        document = make_document(
            {
                "20240603": [
                    make_game(
                        "Liberty",
                        "Aces",
                        state="in",
                        start="2024-06-03T23:30Z",
                        home_score="41",
                        away_score="38",
                        href="https://www.espn.com/wnba/game/_/gameId/401620001",
                    )
                ]
            }
        )

        games = self.parser.parse(document)

        assert len(games) == 1
        game = games[0]
        assert game.date == "20240603"
        assert game.time == "2024-06-03T23:30Z"
        assert game.url == "https://www.espn.com/wnba/game/_/gameId/401620001"
        assert game.home == "Liberty"
        assert game.away == "Aces"
        assert game.home_score == "41"
        assert game.away_score == "38"
        assert game.status == "in"

    def test_first_competitor_is_home(self):
        """Position decides home/away; the homeAway flag is not consulted."""
        raw = make_game("Sun", "Sky")
        raw["competitions"][0]["competitors"][0]["homeAway"] = "away"
        raw["competitions"][0]["competitors"][1]["homeAway"] = "home"

        game = self.parser.parse(make_document({"20240603": [raw]}))[0]

        assert (game.home, game.away) == ("Sun", "Sky")

    def test_collects_games_across_dates(self):
        document = make_document(
            {
                "20240603": [make_game("Liberty", "Aces"), make_game("Sun", "Sky")],
                "20240604": [make_game("Storm", "Mercury")],
            }
        )

        games = self.parser.parse(document)

        assert sorted((g.date, g.home) for g in games) == [
            ("20240603", "Liberty"),
            ("20240603", "Sun"),
            ("20240604", "Storm"),
        ]

    def test_date_without_games_contributes_nothing(self):
        document = make_document({"20240603": [make_game("Liberty", "Aces")]})
        document["content"]["schedule"]["20240604"] = {"calendar": []}
        document["content"]["schedule"]["20240605"] = {"games": []}

        assert len(self.parser.parse(document)) == 1

    @pytest.mark.parametrize("bad_games", [5, True, "Liberty vs Aces", {"0": {}}])
    def test_non_list_games_skips_only_that_date(self, bad_games):
        document = make_document({"20240603": [make_game("Liberty", "Aces")]})
        document["content"]["schedule"]["20240604"] = {"games": bad_games}

        games = self.parser.parse(document)

        assert [(g.date, g.home) for g in games] == [("20240603", "Liberty")]

    @pytest.mark.parametrize(
        "document",
        [None, [], "not a feed", {}, {"content": {}}, {"content": {"schedule": []}}],
    )
    def test_unexpected_document_shapes_yield_no_games(self, document):
        assert self.parser.parse(document) == []

    def test_malformed_game_is_skipped(self):
        broken = make_game("Fever", "Wings")
        del broken["competitions"][0]["competitors"][1]
        no_status = make_game("Dream", "Lynx")
        del no_status["status"]
        no_links = make_game("Valkyries", "Sparks")
        no_links["links"] = []

        document = make_document(
            {"20240603": [broken, make_game("Liberty", "Aces"), no_status, no_links, "junk"]}
        )

        games = self.parser.parse(document)

        assert [g.home for g in games] == ["Liberty"]
        assert len(self.parser.anomalies) == 4
        assert all(isinstance(a, ParseAnomaly) for a in self.parser.anomalies)

    def test_anomalies_reset_between_parses(self):
        broken = make_game("Fever", "Wings")
        del broken["competitions"]
        self.parser.parse(make_document({"20240603": [broken]}))
        assert len(self.parser.anomalies) == 1

        self.parser.parse(make_document({"20240603": [make_game("Liberty", "Aces")]}))
        assert self.parser.anomalies == []

    def test_missing_scores_and_time_are_tolerated(self):
        raw = make_game("Liberty", "Aces", home_score=None, away_score=None)
        del raw["date"]

        game = self.parser.parse(make_document({"20240603": [raw]}))[0]

        assert game.home_score is None
        assert game.away_score is None
        assert game.time == ""

    def test_numeric_scores_become_strings(self):
        raw = make_game("Liberty", "Aces", home_score=None, away_score=None)
        raw["competitions"][0]["competitors"][0]["score"] = 88
        raw["competitions"][0]["competitors"][1]["score"] = 79

        game = self.parser.parse(make_document({"20240603": [raw]}))[0]

        assert (game.home_score, game.away_score) == ("88", "79")

    def test_unknown_status_is_kept_on_record(self):
        game = self.parser.parse(
            make_document({"20240603": [make_game("Liberty", "Aces", state="postponed")]})
        )[0]

        assert game.status == "postponed"
        assert game.state is None

    def test_parse_games_helper(self):
        document = make_document({"20240603": [make_game("Liberty", "Aces")]})
        assert [g.away for g in parse_games(document)] == ["Aces"]
