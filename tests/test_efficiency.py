"""Tests for efficiency.py - discard ranking and grading"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahjong_trainer.analysis.cache import BoundedCache
from mahjong_trainer.analysis.efficiency import DiscardAdvisor, Rating
from mahjong_trainer.analysis.visibility import VisibleTiles, hand_only_availability
from mahjong_trainer.core.hand_count import InvalidHandError, to_count
from mahjong_trainer.core.tile import kind_from_name, parse_tiles
from mahjong_trainer.engine.config import TrainerConfig

# Either honor can go; both leave a tanki on the other one
TWO_TANKI = "123456m789p234s5z7z"
# 5m leaves a 1m/4m ryanmen (8 tiles), 2m a 4m kanchan (4 tiles)
RYANMEN_OR_KANCHAN = "235m456p789s11122z"


def make_count(tiles_str):
    return to_count(parse_tiles(tiles_str))


def k(name):
    return kind_from_name(name)


class TestRank:
    def test_best_discards_first(self):
        ranked = DiscardAdvisor().rank(make_count(TWO_TANKI))
        assert [o.kind for o in ranked[:2]] == [k("5z"), k("7z")]
        assert ranked[0].shanten == 0
        assert ranked[0].ukeire.tiles == {k("7z"): 3}
        assert all(o.shanten >= 1 for o in ranked[2:])

    def test_one_option_per_kind(self):
        count = make_count("111m456p789s11122z")
        ranked = DiscardAdvisor().rank(count)
        assert len(ranked) == len({o.kind for o in ranked}) == len(count) == 9

    def test_sorted_by_shanten_then_ukeire(self):
        ranked = DiscardAdvisor().rank(make_count(RYANMEN_OR_KANCHAN))
        assert ranked[0].kind == k("5m")
        assert ranked[0].ukeire.tiles == {k("1m"): 4, k("4m"): 4}
        assert ranked[1].kind == k("2m")
        assert ranked[1].ukeire_total == 4
        keys = [(o.shanten, -o.ukeire_total) for o in ranked]
        assert keys == sorted(keys)

    def test_wrong_total(self):
        with pytest.raises(InvalidHandError):
            DiscardAdvisor().rank(make_count("123456m789p234s5z"))


class TestEvaluate:
    def test_excellent(self):
        feedback = DiscardAdvisor().evaluate(make_count(TWO_TANKI), "7z")
        assert feedback.rating == Rating.EXCELLENT
        assert feedback.loss == 0
        assert feedback.is_valid
        assert {o.kind for o in feedback.best_options} == {k("5z"), k("7z")}

    def test_bad_when_shanten_goes_back(self):
        feedback = DiscardAdvisor().evaluate(make_count(TWO_TANKI), "1m")
        assert feedback.rating == Rating.BAD
        assert feedback.best_shanten == 0
        assert feedback.discard.shanten == 1
        assert not feedback.is_valid

    def test_suboptimal(self):
        feedback = DiscardAdvisor().evaluate(make_count(RYANMEN_OR_KANCHAN), "2m")
        assert feedback.rating == Rating.SUBOPTIMAL
        assert feedback.best_ukeire == 8
        assert feedback.loss == 4

    def test_tolerance_makes_it_good(self):
        advisor = DiscardAdvisor(TrainerConfig(ukeire_tolerance=4))
        feedback = advisor.evaluate(make_count(RYANMEN_OR_KANCHAN), "2m")
        assert feedback.rating == Rating.GOOD

    def test_visible_tiles_change_the_answer(self):
        count = make_count(TWO_TANKI)
        visible = VisibleTiles(parse_tiles(TWO_TANKI))
        visible.add(["7z", "7z", "7z"])  # every 7z is gone
        advisor = DiscardAdvisor()
        assert advisor.rank(count, visible)[0].kind == k("7z")
        feedback = advisor.evaluate(count, "5z", visible)
        assert feedback.rating == Rating.SUBOPTIMAL
        assert feedback.discard.ukeire.waits == [k("7z")]
        assert feedback.discard.ukeire_total == 0

    def test_discard_not_in_hand(self):
        with pytest.raises(InvalidHandError):
            DiscardAdvisor().evaluate(make_count(TWO_TANKI), "1z")


class TestAdvisorCache:
    def test_repeated_ranking_hits_cache(self):
        cache = BoundedCache(64)
        advisor = DiscardAdvisor(cache=cache)
        first = advisor.rank(make_count(TWO_TANKI))
        assert cache.misses == 14 and cache.hits == 0
        second = advisor.rank(make_count(TWO_TANKI))
        assert cache.hits == 14
        assert first == second

    def test_cache_ignores_availability(self):
        cache = BoundedCache(64)
        advisor = DiscardAdvisor(cache=cache)
        count = make_count(TWO_TANKI)
        advisor.rank(count)
        zero = advisor.rank(count, lambda kind: 0)
        assert all(o.ukeire_total == 0 for o in zero)


class TestAvailabilityDefaults:
    def test_default_is_hand_only(self):
        count = make_count(RYANMEN_OR_KANCHAN)
        advisor = DiscardAdvisor()
        assert advisor.rank(count) == advisor.rank(count, hand_only_availability(count))

    def test_karaten_discard_keeps_acceptance(self):
        # Dropping 1z leaves four 1m waiting on a fifth copy
        feedback = DiscardAdvisor().evaluate(make_count("1111m234p567p789s1z"), "1z")
        assert feedback.best_shanten == 0
        assert feedback.discard.shanten == 1
        assert feedback.discard.ukeire_total > 0
        assert feedback.rating == Rating.BAD
