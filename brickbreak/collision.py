"""Collision tests between the ball, bricks and paddle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .gameobject import BallObject, GameObject
from .vecmath import Vec2, clamp_vec


class Direction(IntEnum):
    """Compass direction of a collision vector; NONE when no direction fits."""

    NONE = -1
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


_COMPASS = (
    (Direction.UP, Vec2(0.0, 1.0)),
    (Direction.RIGHT, Vec2(1.0, 0.0)),
    (Direction.DOWN, Vec2(0.0, -1.0)),
    (Direction.LEFT, Vec2(-1.0, 0.0)),
)


@dataclass(frozen=True)
class Collision:
    """Result of a ball test: whether it hit, from where, and the offset."""

    hit: bool
    direction: Direction
    difference: Vec2


def vector_direction(target: Vec2) -> Direction:
    """The compass direction a vector faces most closely."""
    unit = target.normalized()
    best, best_dot = Direction.NONE, 0.0
    for direction, axis in _COMPASS:
        d = unit.dot(axis)
        if d > best_dot:
            best, best_dot = direction, d
    return best


def check_aabb(one: GameObject, two: GameObject) -> bool:
    """Axis-aligned box overlap, touching edges included."""
    collision_x = (one.position.x + one.size.x >= two.position.x
                   and two.position.x + two.size.x >= one.position.x)
    collision_y = (one.position.y + one.size.y >= two.position.y
                   and two.position.y + two.size.y >= one.position.y)
    return collision_x and collision_y


def check_ball_collision(ball: BallObject, box: GameObject) -> Collision:
    """Circle against axis-aligned box; exact touching is not a hit."""
    center = ball.position + ball.radius
    half = box.size / 2
    box_center = box.position + half
    clamped = clamp_vec(center - box_center, -half, half)
    difference = (box_center + clamped) - center
    if difference.length() < ball.radius:
        return Collision(True, vector_direction(difference), difference)
    return Collision(False, Direction.UP, Vec2(0.0, 0.0))