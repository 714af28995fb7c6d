"""Game entities: generic sprites and the ball."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Tuple

from .vecmath import Vec2

Color = Tuple[float, float, float]

WHITE: Color = (1.0, 1.0, 1.0)
DEFAULT_BALL_RADIUS = 12.5


@dataclass(eq=False)
class GameObject:
    """State shared by every drawable entity in the game."""

    name: str
    position: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=lambda: Vec2(1.0, 1.0))
    sprite: Any = None
    color: Color = WHITE
    velocity: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    is_solid: bool = False
    destroyed: bool = False

    def draw(self, renderer: Any) -> None:
        """Draw the sprite through a renderer exposing draw_sprite."""
        renderer.draw_sprite(self.sprite, self.position, self.size, self.rotation, self.color)


class BallObject(GameObject):
    """The ball: a game object with a radius that can be stuck to the paddle."""

    def __init__(self, position: Vec2, radius: float, velocity: Vec2,
                 sprite: Any = None) -> None:
        radius = radius if radius != 0 else DEFAULT_BALL_RADIUS
        super().__init__(
            name="ball",
            position=position,
            size=Vec2(radius * 2, radius * 2),
            sprite=sprite,
            color=WHITE,
            velocity=velocity,
        )
        self.radius = radius
        self.stuck = False

    def move(self, dt: float, window_width: float) -> Vec2:
        """Advance the ball, bouncing off the left, right and top edges."""
        if not self.stuck:
            pos = self.position + self.velocity * dt
            vel = self.velocity
            if pos.x <= 0.0:
                vel = Vec2(-vel.x, vel.y)
                pos = Vec2(0.0, pos.y)
            elif pos.x + self.size.x >= window_width:
                vel = Vec2(-vel.x, vel.y)
                pos = Vec2(window_width - self.size.x, pos.y)
            if pos.y <= 0.0:
                vel = Vec2(vel.x, -vel.y)
                pos = Vec2(pos.x, 0.0)
            self.position = pos
            self.velocity = vel
        return self.position

    def reset(self, position: Vec2, velocity: Vec2) -> None:
        """Put the ball back at position, stuck to the paddle."""
        self.position = position
        self.velocity = velocity
        self.stuck = True