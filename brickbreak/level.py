"""Brick layouts: parsing level files and building the tiles of a level."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Union

from .gameobject import Color, GameObject
from .vecmath import Vec2

DEFAULT_TILE_COLOR: Color = (0.8, 0.8, 0.7)
TILE_COLORS = {
    1: (0.2, 0.6, 1.0),
    2: (0.0, 0.7, 0.0),
    3: (0.8, 0.8, 0.4),
    4: (1.0, 0.5, 0.0),
    5: (1.0, 1.0, 1.0),
}

SOLID_TEXTURE = "block_solid"
BLOCK_TEXTURE = "block"

_NUMBER = re.compile(r"\s*([+-]?\d+)")


def parse_level(text: str) -> List[List[int]]:
    """Parse level text into rows of tile codes.

    Each number is followed by one separator character; a row ends when that
    character is a newline. Numbers after the last newline form no row.
    """
    rows: List[List[int]] = []
    row: List[int] = []
    pos = 0
    while True:
        match = _NUMBER.match(text, pos)
        if match is None:
            if text[pos:].strip():
                raise ValueError(f"invalid tile data at offset {pos}")
            break
        row.append(int(match.group(1)))
        pos = match.end()
        separator = text[pos:pos + 1]
        pos += len(separator)
        if separator == "\n":
            rows.append(row)
            row = []
    return rows


class GameLevel:
    """All bricks of one level, loaded from a level file."""

    def __init__(self, path: Optional[Union[str, Path]] = None,
                 level_width: float = 0, level_height: float = 0,
                 textures: Any = None) -> None:
        self.bricks: List[GameObject] = []
        self.textures = textures
        if path is not None:
            self.load(path, level_width, level_height)

    def load(self, path: Union[str, Path], level_width: float,
             level_height: float) -> GameLevel:
        """Replace the bricks with those of the level file; an unreadable file leaves none."""
        self.bricks.clear()
        try:
            text = Path(path).read_text()
        except OSError:
            return self
        tile_data = parse_level(text)
        if tile_data:
            self.build(tile_data, level_width, level_height)
        return self

    def _texture(self, name: str) -> Any:
        if self.textures is None:
            return None
        return self.textures.get_texture(name)

    def build(self, tile_data: Sequence[Sequence[int]], level_width: float,
              level_height: float) -> None:
        """Add a brick for every tile code above zero, laid out on a grid."""
        height = len(tile_data)
        width = len(tile_data[0])
        unit_width = int(level_width) / width
        unit_height = int(level_height) // height
        size = Vec2(unit_width, unit_height)
        for y, row in enumerate(tile_data):
            if len(row) < width:
                raise ValueError(f"row {y} has {len(row)} tiles, expected {width}")
            for x, block_type in enumerate(row[:width]):
                if block_type < 1:
                    continue
                solid = block_type == 1
                brick = GameObject(
                    name="tile",
                    position=Vec2(unit_width * x, unit_height * y),
                    size=size,
                    sprite=self._texture(SOLID_TEXTURE if solid else BLOCK_TEXTURE),
                    color=TILE_COLORS.get(block_type, DEFAULT_TILE_COLOR),
                )
                brick.is_solid = solid
                self.bricks.append(brick)

    def is_completed(self) -> bool:
        """False while any solid brick remains undestroyed."""
        return not any(b.is_solid and not b.destroyed for b in self.bricks)

    def draw(self, renderer: Any) -> None:
        """Draw every brick that has not been destroyed."""
        for brick in self._visible():
            brick.draw(renderer)

    def _visible(self) -> Iterable[GameObject]:
        return (b for b in self.bricks if not b.destroyed)