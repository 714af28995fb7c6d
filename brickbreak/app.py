"""Pygame front end: window, input, rendering and the main loop."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence, Set, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .game import Action, Breakout  # noqa: E402
from .resources import ResourceManager  # noqa: E402
from .vecmath import Vec2  # noqa: E402

CLEAR_COLOR = (100, 149, 237)
FPS = 60

TEXTURES: Tuple[Tuple[str, bool, str], ...] = (
    ("block.png", False, "block"),
    ("paddle.png", False, "paddle"),
    ("block_solid.png", False, "block_solid"),
    ("awesomeface.png", True, "face"),
    ("background.jpg", False, "background"),
)
LEVELS: Tuple[str, ...] = ("one.lvl", "two.lvl", "three.lvl", "four.lvl")


def _to_rgb(color: Sequence[float]) -> Tuple[int, int, int]:
    return tuple(max(0, min(255, round(c * 255))) for c in color[:3])  # type: ignore[return-value]


class PygameRenderer:
    """Draws tinted, scaled and rotated sprites onto a pygame surface."""

    def __init__(self, surface: Any) -> None:
        self.surface = surface

    def draw_sprite(self, sprite: Any, position: Vec2, size: Vec2,
                    rotation: float, color: Sequence[float]) -> pygame.Rect:
        """Draw sprite into the box at position with size; a missing sprite is a solid box."""
        width, height = int(size.x), int(size.y)
        if width <= 0 or height <= 0:
            return pygame.Rect(int(position.x), int(position.y), 0, 0)
        rgb = _to_rgb(color)
        if sprite is None:
            image = pygame.Surface((width, height), pygame.SRCALPHA)
            image.fill(rgb + (255,))
        else:
            image = pygame.transform.scale(sprite.surface, (width, height))
            image.fill(rgb, special_flags=pygame.BLEND_RGB_MULT)
        target = pygame.Rect(int(position.x), int(position.y), width, height)
        if rotation:
            image = pygame.transform.rotate(image, -rotation)
            target = image.get_rect(center=target.center)
        self.surface.blit(image, target)
        return target


def _actions_from_keys(pressed: Any) -> Set[Action]:
    actions: Set[Action] = set()
    if pressed[pygame.K_a] or pressed[pygame.K_LEFT]:
        actions.add(Action.LEFT)
    if pressed[pygame.K_d] or pressed[pygame.K_RIGHT]:
        actions.add(Action.RIGHT)
    if pressed[pygame.K_SPACE]:
        actions.add(Action.LAUNCH)
    return actions


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="brickbreak", description="Play Breakout.")
    parser.add_argument("--width", type=int, default=720)
    parser.add_argument("--height", type=int, default=480)
    parser.add_argument("--title", default="Demo")
    parser.add_argument("--resources", default="Resources",
                        help="directory holding textures/ and levels/")
    parser.add_argument("--frames", type=int, default=0,
                        help="stop after this many frames (0 runs until closed)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Open the window and run the game loop; returns the exit status."""
    args = _parse_args(argv)
    root = Path(args.resources)
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption(args.title)
        textures = ResourceManager()
        try:
            for file, alpha, name in TEXTURES:
                textures.load_texture(root / "textures" / file, alpha, name)
        except (OSError, pygame.error) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

        game = Breakout(args.width, args.height, textures)
        game.load_levels(root / "levels" / name for name in LEVELS)
        renderer = PygameRenderer(screen)
        clock = pygame.time.Clock()

        frames = 0
        running = True
        while running and (args.frames <= 0 or frames < args.frames):
            dt = clock.tick(FPS) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                        event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                    running = False
            game.update(dt, _actions_from_keys(pygame.key.get_pressed()))
            screen.fill(CLEAR_COLOR)
            game.draw(renderer)
            pygame.display.flip()
            frames += 1
    finally:
        pygame.display.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())