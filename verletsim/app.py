"""Interactive window: spawn, pause and step the Verlet simulation."""

from __future__ import annotations

import argparse
import logging
import random

import pygame

from .physics import Spawner, VerletObject, VerletWorld
from .render import draw_circle, render_circle

log = logging.getLogger(__name__)

WINDOW_SIZE = (1920, 1080)
BACKGROUND = (33, 33, 33)
SPAWN_COOLDOWN_MS = 50


class App:
    """Simulation state driven by key presses and frame ticks."""

    def __init__(self, seed: int | None = None) -> None:
        self.world = VerletWorld()
        self.spawner = Spawner(random.Random(seed))
        self.paused = False
        self.step_pending = False
        self.frame_time_ms = 0
        self.last_spawn_ms = 0
        self.world.add(VerletObject(1000.0, 400.0, 20.0, color=(1.0, 1.0, 1.0)))

    def handle_key(self, key: str, now_ms: int) -> None:
        """React to a key given by its name: f, space, s or c."""
        if key == "f":
            if now_ms - self.last_spawn_ms > SPAWN_COOLDOWN_MS:
                self.spawner.spawn(self.world)
                self.last_spawn_ms = now_ms
        elif key == "space":
            self.paused = not self.paused
        elif key == "s":
            self.step_pending = True
        elif key == "c":
            log.info("%s", self.status())

    def advance(self) -> None:
        """Simulate one frame unless paused; a pending step runs once while paused."""
        dt = self.frame_time_ms / 1000.0
        if not self.paused:
            self.world.simulate(dt)
        if self.paused and self.step_pending:
            self.world.simulate(dt)
            self.step_pending = False

    def draw(self, surface: pygame.Surface) -> None:
        """Render the background, every object and the arena boundary."""
        surface.fill(BACKGROUND)
        for obj in self.world.objects:
            x, y = obj.position
            render_circle(surface, x, y, obj.radius, 24, (*obj.color, 1.0))
        draw_circle(surface, (1000.0, 500.0), 500, 255, 255, 255)

    def status(self) -> str:
        """Return the object count and last frame time."""
        return f"Object Count: {len(self.world)}\t Frame Time: {int(self.frame_time_ms)}ms"


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the simulation until it is closed."""
    parser = argparse.ArgumentParser(
        prog="verletsim", description="Verlet integration sandbox."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption("VerletIntegration")
        app = App(seed=args.seed)
        current_ticks = 0
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    app.handle_key(pygame.key.name(event.key), pygame.time.get_ticks())
            app.advance()
            app.draw(screen)
            now = pygame.time.get_ticks()
            app.frame_time_ms = now - current_ticks
            current_ticks = now
            pygame.display.flip()
            if app.frame_time_ms < 2:
                pygame.time.delay(2)
    finally:
        pygame.quit()