"""Breakout game state: paddle, ball, levels, lives and collision handling."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Union

from .collision import Direction, check_ball_collision
from .gameobject import WHITE, BallObject, GameObject
from .level import GameLevel
from .vecmath import Vec2

PLAYER_SIZE = Vec2(100.0, 20.0)
PLAYER_VELOCITY = 500.0
INITIAL_BALL_VELOCITY = Vec2(100.0, -350.0)
BALL_RADIUS = 12.5
INITIAL_LIVES = 3
PADDLE_STRENGTH = 2.0


class GameState(Enum):
    """Overall state of the game."""

    ACTIVE = "active"
    MENU = "menu"
    WIN = "win"


class Action(Enum):
    """Player inputs understood by the game."""

    LEFT = "left"
    RIGHT = "right"
    LAUNCH = "launch"


class Breakout:
    """The game: a paddle, a ball and a list of brick levels."""

    def __init__(self, width: int, height: int, textures: Any = None) -> None:
        self.width = width
        self.height = height
        self.textures = textures
        self.state = GameState.ACTIVE
        self.levels: List[GameLevel] = []
        self.level = 0
        self.lives = INITIAL_LIVES
        self._level_paths: List[Path] = []

        player_pos = self._player_start()
        self.player = GameObject(
            name="player",
            position=player_pos,
            size=PLAYER_SIZE,
            sprite=self._texture("paddle"),
            color=WHITE,
        )
        self.ball = BallObject(
            player_pos + self._ball_offset(),
            BALL_RADIUS,
            INITIAL_BALL_VELOCITY,
            self._texture("face"),
        )

    def _texture(self, name: str) -> Any:
        if self.textures is None:
            return None
        return self.textures.get_texture(name)

    def _player_start(self) -> Vec2:
        return Vec2(self.width // 2 - PLAYER_SIZE.x / 2, self.height - PLAYER_SIZE.y)

    @staticmethod
    def _ball_offset() -> Vec2:
        return Vec2(PLAYER_SIZE.x / 2 - BALL_RADIUS, -(BALL_RADIUS * 2))

    @property
    def current_level(self) -> Optional[GameLevel]:
        """The level being played, or None when no level is loaded."""
        if 0 <= self.level < len(self.levels):
            return self.levels[self.level]
        return None

    def load_levels(self, paths: Iterable[Union[str, Path]]) -> List[GameLevel]:
        """Load a level from every path, filling the upper half of the screen."""
        for path in paths:
            path = Path(path)
            self._level_paths.append(path)
            self.levels.append(
                GameLevel(path, self.width, self.height * 0.5, self.textures)
            )
        return self.levels

    def update(self, dt: float, actions: Iterable[Action]) -> None:
        """Advance the game by dt seconds with the given inputs held."""
        actions = set(actions)
        self.ball.move(dt, self.width)
        self.do_collisions()

        # The ball fell past the bottom edge.
        if self.ball.position.y > self.height:
            self.lives -= 1
            if self.lives <= 0:
                self.reset_level()
            self.reset_player()

        if self.state is not GameState.ACTIVE:
            return
        velocity = PLAYER_VELOCITY * dt
        if Action.LEFT in actions and self.player.position.x >= 0:
            self._shift(-velocity)
        if (Action.RIGHT in actions
                and self.player.position.x <= self.width - self.player.size.x):
            self._shift(velocity)
        if Action.LAUNCH in actions:
            self.ball.stuck = False

    def _shift(self, dx: float) -> None:
        self.player.position = self.player.position + Vec2(dx, 0.0)
        if self.ball.stuck:
            self.ball.position = self.ball.position + Vec2(dx, 0.0)

    def do_collisions(self) -> None:
        """Bounce the ball off bricks and the paddle, destroying soft bricks."""
        ball = self.ball
        level = self.current_level
        bricks: Sequence[GameObject] = level.bricks if level is not None else ()
        for box in bricks:
            if box.destroyed:
                continue
            collision = check_ball_collision(ball, box)
            if not collision.hit:
                continue
            if not box.is_solid:
                box.destroyed = True
            direction = collision.direction
            diff = collision.difference
            if direction in (Direction.LEFT, Direction.RIGHT):
                ball.velocity = Vec2(-ball.velocity.x, ball.velocity.y)
                penetration = ball.radius - abs(diff.x)
                dx = penetration if direction is Direction.LEFT else -penetration
                ball.position = ball.position + Vec2(dx, 0.0)
            else:
                ball.velocity = Vec2(ball.velocity.x, -ball.velocity.y)
                penetration = ball.radius - abs(diff.y)
                dy = -penetration if direction is Direction.UP else penetration
                ball.position = ball.position + Vec2(0.0, dy)

        result = check_ball_collision(ball, self.player)
        if not ball.stuck and result.hit:
            center_board = self.player.position.x + self.player.size.x / 2
            distance = (ball.position.x + ball.radius) - center_board
            percentage = distance / (self.player.size.x / 2)
            old_velocity = ball.velocity
            steered = Vec2(INITIAL_BALL_VELOCITY.x * percentage * PADDLE_STRENGTH,
                           old_velocity.y)
            velocity = steered.normalized() * old_velocity.length()
            ball.velocity = Vec2(velocity.x, -abs(velocity.y))

    def reset_level(self) -> None:
        """Reload the current level from its file and restore the lives."""
        level = self.current_level
        if level is not None:
            level.load(self._level_paths[self.level], self.width, self.height * 0.5)
        self.lives = INITIAL_LIVES

    def reset_player(self) -> None:
        """Put the paddle back in the middle with the ball stuck on top of it."""
        self.player.size = PLAYER_SIZE
        self.player.position = self._player_start()
        self.ball.reset(self.player.position + self._ball_offset(), INITIAL_BALL_VELOCITY)

    def draw(self, renderer: Any) -> None:
        """Draw background, bricks, paddle and ball while the game is active."""
        if self.state is not GameState.ACTIVE:
            return
        renderer.draw_sprite(
            self._texture("background"),
            Vec2(0.0, 0.0),
            Vec2(self.width, self.height),
            0.0,
            WHITE,
        )
        level = self.current_level
        if level is not None:
            level.draw(renderer)
        self.player.draw(renderer)
        self.ball.draw(renderer)