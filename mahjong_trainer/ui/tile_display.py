"""Tile display formatting with colors for terminal output."""

from typing import Iterable

from rich.text import Text

from mahjong_trainer.core.tile import (
    HONOR_KANJI, SUIT_CHARS, Tile, TileKind, TileLike, TileSuit, as_kind,
)


SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.HONOR: "yellow",
}


def tile_label(tile: TileLike, show_red: bool = True) -> str:
    """Short label: '5m', '0p' for a red five, kanji for honors."""
    if isinstance(tile, Tile) and tile.is_red and show_red:
        return f"0{SUIT_CHARS[tile.suit]}"
    kind = as_kind(tile)
    if kind.is_honor:
        return HONOR_KANJI[kind.rank - 1]
    return kind.name


def tile_to_rich_text(tile: TileLike, highlight: bool = False,
                      show_red: bool = True) -> Text:
    """Convert a tile to a Rich Text object with suit colors."""
    name = tile_label(tile, show_red)
    if isinstance(tile, Tile) and tile.is_red and show_red:
        style = "bold red on white"
    else:
        style = f"bold {SUIT_COLORS[as_kind(tile).suit]}"
        if highlight:
            style += " on white"
    return Text(f"[{name}]", style=style)


def tiles_to_rich_text(tiles: Iterable[TileLike], separator: str = " ",
                       show_red: bool = True) -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile, show_red=show_red))
    return result


def ukeire_to_rich_text(tiles: dict) -> Text:
    """Accepted kinds with their remaining copies, e.g. [3m]x4 [6m]x2."""
    result = Text()
    for i, kind in enumerate(sorted(tiles)):
        if i > 0:
            result.append(" ")
        result.append_text(tile_to_rich_text(kind))
        result.append(f"x{tiles[kind]}", style="dim" if tiles[kind] == 0 else "")
    return result


def kind_names(kinds: Iterable[TileKind]) -> str:
    return " ".join(tile_label(k) for k in kinds)
