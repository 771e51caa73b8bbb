"""Tests for the command-line entry point"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

import main as cli
from mahjong_trainer.core.tile import parse_tiles
from mahjong_trainer.engine.drill import DrillSession
from mahjong_trainer.ui.i18n import set_language


@pytest.fixture(autouse=True)
def english():
    yield
    set_language("en")


def feed(monkeypatch, *answers):
    replies = iter(answers)
    monkeypatch.setattr(cli.console, "input", lambda prompt="": next(replies))


class TestAnalyze:
    def test_thirteen_tiles(self, capsys):
        assert cli.main(["analyze", "123456m789p234s5z"]) == 0
        out = capsys.readouterr().out
        assert "Shanten: 0" in out
        assert "x3" in out

    def test_seen_tiles(self, capsys):
        assert cli.main(["analyze", "123456m789p234s5z", "--seen", "5z5z"]) == 0
        assert "x1" in capsys.readouterr().out

    def test_fourteen_tiles(self, capsys):
        assert cli.main(["analyze", "123m456p789s111z22z"]) == 0
        assert "Standard" in capsys.readouterr().out

    def test_japanese(self, capsys):
        assert cli.main(["--lang", "ja", "analyze", "123456m789p234s5z"]) == 0
        assert "向聴数" in capsys.readouterr().out

    @pytest.mark.parametrize("hand", ["123m", "12x", "11111m"])
    def test_bad_hand(self, hand):
        assert cli.main(["analyze", hand]) == 2


class TestDefend:
    def test_genbutsu(self, capsys):
        assert cli.main(["defend", "4m", "--discards", "4m9p"]) == 0
        out = capsys.readouterr().out
        assert "Opponent discards" in out
        assert "Genbutsu" in out

    def test_push_with_hand(self, capsys):
        args = ["defend", "5p", "--discards", "9s1p", "--riichi",
                "--hand", "123456m789p234s5z5p"]
        assert cli.main(args) == 0
        assert "Aggressive" in capsys.readouterr().out

    def test_kabe_from_seen_tiles(self, capsys):
        assert cli.main(["defend", "3p", "--discards", "1z", "--seen", "0p555p"]) == 0
        assert "kabe" in capsys.readouterr().out

    def test_bad_tile(self):
        assert cli.main(["defend", "0z", "--discards", "1m"]) == 2


class TestDrill:
    def test_quit_immediately(self, monkeypatch, tmp_path, capsys):
        feed(monkeypatch, "q")
        assert cli.main(["drill", "--seed", "1", "--log-dir", str(tmp_path)]) == 0
        assert "Bye!" in capsys.readouterr().out
        assert os.listdir(tmp_path) == []

    def test_answer_then_quit(self, monkeypatch, tmp_path, capsys):
        class FixedDrill(DrillSession):
            def deal(self, tiles=None):
                return super().deal(parse_tiles("235m456p789s11122z"))

        monkeypatch.setattr(cli, "DrillSession", FixedDrill)
        feed(monkeypatch, "9p9p", "1p", "5m", "q")
        assert cli.main(["drill", "--log-dir", str(tmp_path)]) == 0
        out = capsys.readouterr().out
        assert "Not a tile in your hand." in out
        assert "Correct!" in out
        assert len(os.listdir(tmp_path)) == 1
