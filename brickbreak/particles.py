"""Short-lived particles spawned around a moving game object."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional, Tuple

from .gameobject import GameObject
from .vecmath import Vec2

Color4 = Tuple[float, float, float, float]


@dataclass
class Particle:
    """A single particle and its state."""

    position: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    color: Color4 = (1.0, 1.0, 1.0, 1.0)
    life: float = 0.0


class ParticleGenerator:
    """A fixed pool of particles, respawned and aged every frame."""

    def __init__(self, amount: int, shader: Any = None, texture: Any = None,
                 rng: Optional[random.Random] = None) -> None:
        if amount < 0:
            raise ValueError("amount must not be negative")
        self.shader = shader
        self.texture = texture
        self.amount = amount
        self.particles: List[Particle] = [Particle() for _ in range(amount)]
        self._rng = rng if rng is not None else random.Random()
        self._last_used = 0

    def update(self, dt: float, obj: GameObject, new_particles: int,
               offset: Vec2) -> None:
        """Spawn new particles at obj, then age and move the living ones."""
        for _ in range(new_particles):
            self.respawn(self.particles[self.first_unused()], obj, offset)
        for particle in self.particles:
            particle.life -= dt
            if particle.life > 0.0:
                particle.position = particle.position - particle.velocity * dt
                r, g, b, a = particle.color
                particle.color = (r, g, b, a - dt * 2.5)

    def first_unused(self) -> int:
        """Index of a dead particle, or 0 when every particle is alive."""
        search = list(range(self._last_used, self.amount)) + list(range(self._last_used))
        for index in search:
            if self.particles[index].life <= 0.0:
                self._last_used = index
                return index
        self._last_used = 0
        return 0

    def respawn(self, particle: Particle, obj: GameObject, offset: Vec2) -> None:
        """Bring a particle back to life near obj."""
        jitter = (self._rng.randrange(100) - 50) / 10.0
        shade = 0.5 + self._rng.randrange(100) / 100.0
        particle.position = obj.position + jitter + offset
        particle.color = (shade, shade, shade, 1.0)
        particle.life = 1.0
        particle.velocity = obj.velocity * 0.1

    def alive(self) -> Iterator[Particle]:
        """The particles that should currently be drawn."""
        return (p for p in self.particles if p.life > 0.0)