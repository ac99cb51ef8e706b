"""Particle explosions."""

import math
import random
from dataclasses import dataclass

PARTICLE_COUNT = 10
EXPLOSION_FRAMES = 90
PAC_PARTICLE = "pac"
GHOST_PARTICLE = "ghost"

_ANGLE_SCALE = 180 / math.pi


@dataclass
class Particle:
    angle: int
    speed: int
    x: float
    y: float
    alpha: float


class ParticleManager:
    """A burst of particles of one kind spreading from a point."""

    def __init__(self, kind: str, x: float, y: float, rng=None) -> None:
        self.kind = kind
        self.counter = 0
        self._rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.create_particles(x, y)

    def create_particles(self, x: float, y: float) -> None:
        """Start a fresh set of particles at ``x``, ``y``."""
        self.particles = [
            Particle(angle=self._rng.randrange(361), speed=1, x=x, y=y, alpha=1.0)
            for _ in range(PARTICLE_COUNT)
        ]

    def reset(self, x: float, y: float) -> None:
        """Restart the burst at ``x``, ``y``."""
        self.create_particles(x, y)

    def move(self) -> None:
        """Advance every particle one frame and fade it."""
        self.counter += 1
        for p in self.particles:
            radian = p.angle * _ANGLE_SCALE
            p.x += p.speed * math.cos(radian)
            p.y += p.speed * math.sin(radian)
            p.alpha -= 0.009


class ExplosionManager:
    """The explosions in progress; each is dropped once it has run its course."""

    def __init__(self, rng=None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.explosions: list[ParticleManager] = []

    def add_explosion(self, kind: str, x: float, y: float) -> None:
        """Start an explosion of ``kind`` at ``x``, ``y``."""
        self.explosions.append(ParticleManager(kind, x, y, self._rng))

    def reinit(self) -> None:
        """Drop every explosion."""
        self.explosions.clear()

    def move(self) -> None:
        """Advance running explosions and drop finished ones."""
        running = []
        for pm in self.explosions:
            if pm.counter == EXPLOSION_FRAMES:
                continue
            pm.move()
            running.append(pm)
        self.explosions = running