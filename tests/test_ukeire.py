"""Tests for ukeire.py - waits and tile acceptance"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from concurrent.futures import ThreadPoolExecutor

import pytest

from mahjong_trainer.analysis.visibility import VisibleTiles
from mahjong_trainer.core.hand_count import InvalidHandError, to_count
from mahjong_trainer.core.tile import ALL_KINDS, YAOCHU_INDICES, kind_from_name, parse_tiles
from mahjong_trainer.rules.ukeire import (
    UkeireResult, acceptance, improving_tiles, ukeire, waits,
)


def make_count(tiles_str):
    return to_count(parse_tiles(tiles_str))


def kinds(*names):
    return [kind_from_name(n) for n in names]


class TestWaits:
    def test_tanki_on_lone_honor(self):
        assert waits(make_count("123456m789p234s5z")) == kinds("5z")

    def test_ryanmen(self):
        assert waits(make_count("23m456p789s11122z")) == kinds("1m", "4m")

    def test_kanchan(self):
        assert waits(make_count("13m456p789s11122z")) == kinds("2m")

    def test_seven_pairs_wait(self):
        assert waits(make_count("1199m1199p1199s1z")) == kinds("1z")

    def test_kokushi_thirteen_sided(self):
        assert waits(make_count("19m19p19s1234567z")) == [ALL_KINDS[i] for i in YAOCHU_INDICES]

    def test_not_tenpai(self):
        assert waits(make_count("1239m456p78s1156z")) == []

    def test_fifth_copy_is_never_a_wait(self):
        assert waits(make_count("1111m234p567p789s")) == []

    def test_red_five_in_hand(self):
        assert waits(make_count("0m6m456p789s11122z")) == kinds("4m", "7m")

    def test_wrong_total(self):
        with pytest.raises(InvalidHandError):
            waits(make_count("123456m789p234s55z"))

    def test_parallel_trials_match(self):
        count = make_count("19m19p19s1234567z")
        with ThreadPoolExecutor(max_workers=4) as executor:
            assert waits(count, executor=executor) == waits(count)


class TestUkeire:
    def test_counts_unseen_copies(self):
        count = make_count("123456m789p234s5z")
        result = ukeire(count, VisibleTiles.from_count(count))
        assert result.waits == kinds("5z")
        assert result.tiles == {kind_from_name("5z"): 3}
        assert result.total == 3

    def test_total_is_sum_of_tiles(self):
        count = make_count("23m456p789s11122z")
        visible = VisibleTiles.from_count(count)
        visible.add(parse_tiles("1m1m4m"))
        result = ukeire(count, visible)
        assert result.tiles == {kind_from_name("1m"): 2, kind_from_name("4m"): 3}
        assert result.total == sum(result.tiles.values()) == 5

    def test_dead_wait_still_listed(self):
        result = ukeire(make_count("123456m789p234s5z"), lambda kind: 0)
        assert result.waits == kinds("5z")
        assert result.total == 0

    def test_availability_out_of_range(self):
        with pytest.raises(ValueError):
            ukeire(make_count("123456m789p234s5z"), lambda kind: 5)

    def test_empty_result(self):
        result = UkeireResult()
        assert result.total == 0
        assert result.waits == []


class TestAcceptance:
    def test_improving_tiles_of_iishanten(self):
        improving = set(improving_tiles(make_count("1239m456p78s1156z")))
        assert set(kinds("6s", "9s", "1z", "9m", "5z", "6z")) <= improving
        assert kind_from_name("2p") not in improving

    def test_tenpai_acceptance_equals_ukeire(self):
        count = make_count("23m456p789s11122z")
        visible = VisibleTiles.from_count(count)
        assert acceptance(count, visible) == ukeire(count, visible)

    def test_acceptance_counts_availability(self):
        count = make_count("1239m456p78s1156z")
        result = acceptance(count, lambda kind: 4)
        assert result.total == 4 * len(improving_tiles(count))

    def test_karaten_hand_still_has_improving_tiles(self):
        # Shape is complete but the only winner would be a fifth 1m
        count = make_count("1111m234p567p789s")
        improving = improving_tiles(count)
        assert set(kinds("2m", "5m", "1z")) <= set(improving)
        assert kind_from_name("1m") not in improving
        assert acceptance(count, lambda kind: 4).total > 0
