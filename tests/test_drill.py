"""Tests for the drill session, practice wall, config and drill logger"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import json

import pytest

from mahjong_trainer.analysis.efficiency import Rating
from mahjong_trainer.core.tile import ALL_TILES_136, kind_from_name, parse_tiles
from mahjong_trainer.core.wall import Wall
from mahjong_trainer.engine.config import TrainerConfig
from mahjong_trainer.engine.drill import HAND_SIZE, DrillSession
from mahjong_trainer.engine.drill_logger import DrillLogger

HAND = "235m456p789s11122z"


class TestWall:
    def test_full_set(self):
        wall = Wall(seed=1)
        assert wall.remaining == 136
        assert sorted(wall.all_tiles) == ALL_TILES_136

    def test_deal(self):
        wall = Wall(seed=1)
        hand = wall.deal(14)
        assert len(hand) == 14
        assert wall.remaining == 122

    def test_deal_too_many(self):
        wall = Wall.from_tiles(parse_tiles("123m"))
        with pytest.raises(ValueError):
            wall.deal(4)

    def test_draw_until_empty(self):
        wall = Wall.from_tiles(parse_tiles("123m"))
        assert [t.name for t in (wall.draw(), wall.draw(), wall.draw())] == ["1m", "2m", "3m"]
        assert wall.is_empty
        assert wall.draw() is None

    def test_same_seed_same_order(self):
        assert Wall(seed=7).all_tiles == Wall(seed=7).all_tiles


class TestTrainerConfig:
    def test_defaults(self):
        config = TrainerConfig()
        assert config.ukeire_tolerance == 2
        assert config.language == "en"
        assert config.to_dict()["cache_size"] == 4096

    def test_negative_tolerance(self):
        with pytest.raises(ValueError):
            TrainerConfig(ukeire_tolerance=-1)


class TestDrillSession:
    def test_deal_random_hand(self):
        session = DrillSession(TrainerConfig(seed=3))
        hand = session.deal()
        assert len(hand) == HAND_SIZE
        assert hand == sorted(hand)
        assert session.count.total == 14
        assert session.problem_number == 1

    def test_seeded_sessions_repeat(self):
        a = DrillSession(TrainerConfig(seed=42))
        b = DrillSession(TrainerConfig(seed=42))
        assert a.deal() == b.deal()
        assert a.deal() == b.deal()

    def test_consecutive_problems_differ(self):
        session = DrillSession(TrainerConfig(seed=42))
        assert session.deal() != session.deal()

    def test_custom_hand_must_be_fourteen(self):
        with pytest.raises(ValueError):
            DrillSession().deal(parse_tiles("123m"))

    def test_answer_before_deal(self):
        with pytest.raises(RuntimeError):
            DrillSession().answer("1m")

    def test_answer_is_graded(self):
        session = DrillSession()
        session.deal(parse_tiles(HAND))
        feedback = session.answer("5m")
        assert feedback.rating == Rating.EXCELLENT
        assert feedback.discard.ukeire_total == 8
        assert session.answer(kind_from_name("2m")).rating == Rating.SUBOPTIMAL

    def test_visible_is_the_hand(self):
        session = DrillSession()
        session.deal(parse_tiles(HAND))
        assert session.visible(kind_from_name("1z")) == 1
        assert session.visible(kind_from_name("1m")) == 4


class TestDrillLogger:
    def test_records_answers(self, tmp_path):
        drill_logger = DrillLogger(TrainerConfig().to_dict(), str(tmp_path))
        session = DrillSession(drill_logger=drill_logger)
        session.deal(parse_tiles(HAND))
        session.answer("5m")
        session.answer("3m")

        first, second = drill_logger.problems
        assert first["hand"] == HAND
        assert first["discard"] == "5m"
        assert first["rating"] == "excellent"
        assert first["best_discards"] == ["5m"]
        assert second["rating"] == "bad"
        assert drill_logger.summary == {"answered": 2, "ratings": {"excellent": 1, "bad": 1}}

    def test_save_writes_json(self, tmp_path):
        drill_logger = DrillLogger({"seed": 1}, str(tmp_path / "logs"))
        session = DrillSession(drill_logger=drill_logger)
        session.deal(parse_tiles(HAND))
        session.answer("2m")

        path = drill_logger.save()
        assert os.path.basename(path) == f"drill_{drill_logger.session_id}.json"
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["config"] == {"seed": 1}
        assert data["summary"]["answered"] == 1
        assert data["problems"][0]["ukeire"] == 4
